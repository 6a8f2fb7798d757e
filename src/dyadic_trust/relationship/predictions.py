"""Behavioral predictions derived from trust decisions.

``risk_level`` in [0, 1] plays two parts: it selects the stakes used in the
trust computation, and it raises the willingness a trustor must exceed
before acting.

    would_confide:  disclosure_willingness > 0.6 + 0.3 * risk_level
    would_help:     support_willingness    > 0.4 + 0.3 * risk_level
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from dyadic_trust.trust.risk import StakesLevel

if TYPE_CHECKING:
    from dyadic_trust.relationship.paths import Direction
    from dyadic_trust.relationship.relationship import Relationship

CONFIDE_BASE_THRESHOLD = 0.6
HELP_BASE_THRESHOLD = 0.4
RISK_THRESHOLD_SCALE = 0.3


def risk_to_stakes(risk_level: float) -> StakesLevel:
    """Bucket a continuous risk level into a :class:`StakesLevel`."""
    if risk_level >= 0.75:
        return StakesLevel.CRITICAL
    if risk_level >= 0.5:
        return StakesLevel.HIGH
    if risk_level >= 0.25:
        return StakesLevel.MEDIUM
    return StakesLevel.LOW


def would_confide(
    relationship: Relationship,
    direction: Direction,
    trustor_propensity: float,
    risk_level: float,
) -> bool:
    """Whether the trustor in ``direction`` would share sensitive information."""
    decision = relationship.compute_trust_decision(
        direction, trustor_propensity, risk_to_stakes(risk_level)
    )
    threshold = CONFIDE_BASE_THRESHOLD + risk_level * RISK_THRESHOLD_SCALE
    return decision.disclosure_willingness > threshold


def would_help(
    relationship: Relationship,
    direction: Direction,
    trustor_propensity: float,
    risk_level: float,
) -> bool:
    """Whether the trustor in ``direction`` would rely on the trustee's goodwill."""
    decision = relationship.compute_trust_decision(
        direction, trustor_propensity, risk_to_stakes(risk_level)
    )
    threshold = HELP_BASE_THRESHOLD + risk_level * RISK_THRESHOLD_SCALE
    return decision.support_willingness > threshold
