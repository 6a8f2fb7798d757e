"""RelationshipStage — how developed a relationship is.

The stage controls how much a trust decision leans on the trustor's general
propensity versus evidence about this particular trustee, and how much
extra risk the trustor perceives:

    Stage          propensity  trustworthiness  risk modifier
    STRANGER          0.6           0.4             +0.3
    ACQUAINTANCE      0.4           0.6             +0.2
    ESTABLISHED       0.2           0.8              0.0
    INTIMATE          0.1           0.9             -0.1
    ESTRANGED         0.3           0.7             +0.4

ESTRANGED is reachable from any stage and represents deterioration, not
the end of the relationship.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class StageConstants:
    """Per-stage weighting constants.

    Parameters
    ----------
    propensity_weight:
        Weight of the trustor's general propensity to trust.
    trustworthiness_weight:
        Weight of the trustee's perceived trustworthiness. Always
        ``1 - propensity_weight``.
    risk_modifier:
        Additive perceived-risk term.
    decision_certainty:
        Stage contribution to certainty in the willingness judgment.
    trustee_confidence:
        Stage contribution to confidence in the trustee's attributes.
    description:
        Human-readable summary.
    """

    propensity_weight: float
    trustworthiness_weight: float
    risk_modifier: float
    decision_certainty: float
    trustee_confidence: float
    description: str


class RelationshipStage(str, Enum):
    """Developmental stage of a relationship."""

    STRANGER = "stranger"
    ACQUAINTANCE = "acquaintance"
    ESTABLISHED = "established"
    INTIMATE = "intimate"
    ESTRANGED = "estranged"

    @property
    def constants(self) -> StageConstants:
        return STAGE_CONSTANTS[self]

    @property
    def propensity_weight(self) -> float:
        return STAGE_CONSTANTS[self].propensity_weight

    @property
    def trustworthiness_weight(self) -> float:
        return STAGE_CONSTANTS[self].trustworthiness_weight

    @property
    def risk_modifier(self) -> float:
        return STAGE_CONSTANTS[self].risk_modifier

    @property
    def description(self) -> str:
        return STAGE_CONSTANTS[self].description

    @property
    def label(self) -> str:
        """Capitalised display name, e.g. "Stranger"."""
        return self.value.capitalize()

    @property
    def is_positive(self) -> bool:
        """True for acquaintance, established and intimate stages."""
        return self in (
            RelationshipStage.ACQUAINTANCE,
            RelationshipStage.ESTABLISHED,
            RelationshipStage.INTIMATE,
        )

    @property
    def is_developed(self) -> bool:
        """True for established and intimate stages."""
        return self in (RelationshipStage.ESTABLISHED, RelationshipStage.INTIMATE)


# Estranged: the trustee is well known (high trustee confidence) but the
# willingness judgment itself is conflicted (lower decision certainty).
STAGE_CONSTANTS: dict[RelationshipStage, StageConstants] = {
    RelationshipStage.STRANGER: StageConstants(
        propensity_weight=0.6,
        trustworthiness_weight=0.4,
        risk_modifier=0.3,
        decision_certainty=0.1,
        trustee_confidence=0.1,
        description="No significant interaction history",
    ),
    RelationshipStage.ACQUAINTANCE: StageConstants(
        propensity_weight=0.4,
        trustworthiness_weight=0.6,
        risk_modifier=0.2,
        decision_certainty=0.3,
        trustee_confidence=0.4,
        description="Limited interactions, forming impressions",
    ),
    RelationshipStage.ESTABLISHED: StageConstants(
        propensity_weight=0.2,
        trustworthiness_weight=0.8,
        risk_modifier=0.0,
        decision_certainty=0.6,
        trustee_confidence=0.7,
        description="Regular relationship with consistent patterns",
    ),
    RelationshipStage.INTIMATE: StageConstants(
        propensity_weight=0.1,
        trustworthiness_weight=0.9,
        risk_modifier=-0.1,
        decision_certainty=0.9,
        trustee_confidence=0.9,
        description="Deep trust and extensive history",
    ),
    RelationshipStage.ESTRANGED: StageConstants(
        propensity_weight=0.3,
        trustworthiness_weight=0.7,
        risk_modifier=0.4,
        decision_certainty=0.5,
        trustee_confidence=0.8,
        description="Previously close but now deteriorated",
    ),
}
