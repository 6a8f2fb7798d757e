"""Translate events into trust antecedents on relationships.

An event names a source (the actor) and a target (the party who
experiences the act). The target is the trustor: when Alice supports Bob,
Bob learns something about Alice, so the antecedent lands in Bob's view of
Alice. Each event is mapped to zero or more antecedents by a collaborator
that supplies :class:`AntecedentMapping` entries.

Magnitude per mapping::

    clamp(base_magnitude * severity) * (0.5 + 0.5 * pattern.consistency)

Predictable relationships weigh evidence fully; erratic ones at half.
"""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dyadic_trust.relationship.paths import Direction
from dyadic_trust.relationship.relationship import Relationship
from dyadic_trust.trust.antecedent import AntecedentMapping, TrustAntecedent

logger = logging.getLogger(__name__)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class TrustEvent:
    """The parts of an event that matter for trust.

    Parameters
    ----------
    source_id:
        Entity that performed the act, or None if unattributed.
    target_id:
        Entity the act was directed at, or None if undirected.
    severity:
        Intensity of the event in [0, 1].
    timestamp:
        When the event happened.
    """

    source_id: str | None
    target_id: str | None
    severity: float
    timestamp: datetime.datetime


def direction_for(relationship: Relationship, trustor_id: str, trustee_id: str) -> Direction | None:
    """Direction in which ``trustor_id`` perceives ``trustee_id``, if any."""
    if relationship.entity_a == trustor_id and relationship.entity_b == trustee_id:
        return Direction.A_TO_B
    if relationship.entity_b == trustor_id and relationship.entity_a == trustee_id:
        return Direction.B_TO_A
    return None


def process_event_to_relationships(
    event: TrustEvent,
    mappings: Sequence[AntecedentMapping],
    relationships: Iterable[Relationship],
) -> int:
    """Append antecedents for ``event`` and replay the affected directions.

    Relationships that do not connect the event's target to its source are
    left untouched. Relationships that receive an antecedent record the
    event timestamp as their last interaction.

    Parameters
    ----------
    event:
        The event to apply.
    mappings:
        Antecedent mappings for this event's type.
    relationships:
        Candidate relationships.

    Returns
    -------
    int
        Number of antecedents appended across all relationships.
    """
    if event.source_id is None or event.target_id is None:
        logger.debug("Skipping event without source or target")
        return 0
    if not mappings:
        logger.debug(
            "Skipping event from %s to %s: no antecedent mappings",
            event.source_id,
            event.target_id,
        )
        return 0

    appended = 0
    for relationship in relationships:
        direction = direction_for(relationship, event.target_id, event.source_id)
        if direction is None:
            continue

        before = appended
        consistency_weight = 0.5 + 0.5 * _clamp_unit(relationship.pattern.consistency)
        for mapping in mappings:
            magnitude = _clamp_unit(mapping.base_magnitude * event.severity) * consistency_weight
            if magnitude <= 0.0:
                continue
            relationship.append_antecedent(
                direction,
                TrustAntecedent(
                    timestamp=event.timestamp,
                    antecedent_type=mapping.antecedent_type,
                    direction=mapping.direction,
                    magnitude=magnitude,
                    context=mapping.context,
                    life_domain=mapping.life_domain,
                ),
            )
            appended += 1

        if appended > before:
            relationship.pattern.record_interaction(event.timestamp)
        relationship.recompute_trustworthiness(direction)

    return appended
