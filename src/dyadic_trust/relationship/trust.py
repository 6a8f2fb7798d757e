"""Stage-weighted trust formulas.

For each trust domain:

    willingness = clamp((pw * propensity + tw * trustworthiness) * multiplier
                        - 0.5 * perceived_risk)

where ``pw``/``tw`` come from the relationship stage. Decision certainty and
trustee confidence blend the shared history with a stage constant:

    decision_certainty = clamp(history * 0.3 + stage.decision_certainty * 0.7)
    trustee_confidence = clamp(history * 0.4 + stage.trustee_confidence * 0.6)

:class:`Trust` applies the same formulas to a snapshot of numbers, for
callers that do not hold a full :class:`Relationship`.
"""
from __future__ import annotations

from dataclasses import dataclass

from dyadic_trust.relationship.stage import RelationshipStage
from dyadic_trust.trust.decision import TrustDecision
from dyadic_trust.trust.risk import StakesLevel
from dyadic_trust.trust.trustworthiness import TrustworthinessFactors

RISK_WEIGHT = 0.5
MAX_CONTEXT_MULTIPLIER = 2.0

# (history weight, stage weight)
_CERTAINTY_WEIGHTS = (0.3, 0.7)
_CONFIDENCE_WEIGHTS = (0.4, 0.6)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def clamp_context_multiplier(multiplier: float) -> float:
    return max(0.0, min(MAX_CONTEXT_MULTIPLIER, multiplier))


@dataclass(frozen=True)
class TrustWeights:
    """Weights applied when combining propensity, trustworthiness and risk."""

    propensity_weight: float
    trustworthiness_weight: float
    risk_weight: float = RISK_WEIGHT

    @classmethod
    def from_stage(cls, stage: RelationshipStage) -> TrustWeights:
        return cls(
            propensity_weight=stage.propensity_weight,
            trustworthiness_weight=stage.trustworthiness_weight,
        )


def compute_willingness(
    weights: TrustWeights,
    propensity: float,
    domain_trustworthiness: float,
    context_multiplier: float,
    perceived_risk: float,
) -> float:
    base = (
        weights.propensity_weight * propensity
        + weights.trustworthiness_weight * domain_trustworthiness
    )
    return _clamp_unit(base * context_multiplier - weights.risk_weight * perceived_risk)


def compute_decision_certainty(stage: RelationshipStage, history: float) -> float:
    """Certainty in the willingness judgment itself."""
    history_weight, stage_weight = _CERTAINTY_WEIGHTS
    return _clamp_unit(
        history * history_weight + stage.constants.decision_certainty * stage_weight
    )


def compute_trustee_confidence(stage: RelationshipStage, history: float) -> float:
    """Confidence in the trustee's underlying attributes."""
    history_weight, stage_weight = _CONFIDENCE_WEIGHTS
    return _clamp_unit(
        history * history_weight + stage.constants.trustee_confidence * stage_weight
    )


def build_decision(
    stage: RelationshipStage,
    propensity: float,
    competence: float,
    benevolence: float,
    integrity: float,
    perceived_risk: float,
    history: float,
    context_multiplier: float = 1.0,
) -> TrustDecision:
    """Assemble a :class:`TrustDecision` from already-extracted numbers."""
    weights = TrustWeights.from_stage(stage)
    propensity = _clamp_unit(propensity)
    multiplier = clamp_context_multiplier(context_multiplier)

    def willingness(domain_trustworthiness: float) -> float:
        return compute_willingness(
            weights, propensity, domain_trustworthiness, multiplier, perceived_risk
        )

    return TrustDecision(
        task_willingness=willingness(competence),
        support_willingness=willingness(benevolence),
        disclosure_willingness=willingness(integrity),
        decision_certainty=compute_decision_certainty(stage, history),
        trustee_confidence=compute_trustee_confidence(stage, history),
    )


class Trust:
    """Trust calculator over a snapshot of trustor and trustee state.

    Parameters
    ----------
    propensity:
        Trustor's general propensity to trust. Clamped into [0, 1].
    trustworthiness:
        Trustee's perceived factors; effective values are read once.
    base_risk:
        Baseline perceived risk. Clamped into [0, 1].
    stage:
        Relationship stage.
    history:
        Shared history in [0, 1].
    context_multiplier:
        Situational multiplier. Clamped into [0, 2].
    """

    def __init__(
        self,
        propensity: float,
        trustworthiness: TrustworthinessFactors,
        base_risk: float,
        stage: RelationshipStage = RelationshipStage.STRANGER,
        history: float = 0.0,
        context_multiplier: float = 1.0,
    ) -> None:
        self.propensity = _clamp_unit(propensity)
        self.perceived_competence = trustworthiness.competence_effective()
        self.perceived_benevolence = trustworthiness.benevolence_effective()
        self.perceived_integrity = trustworthiness.integrity_effective()
        self.base_risk = _clamp_unit(base_risk)
        self.stage = stage
        self.history = _clamp_unit(history)
        self.context_multiplier = clamp_context_multiplier(context_multiplier)

    @property
    def weights(self) -> TrustWeights:
        return TrustWeights.from_stage(self.stage)

    def compute_risk(self, stakes: StakesLevel) -> float:
        """Base risk plus stakes plus the stage risk modifier, clamped."""
        return _clamp_unit(self.base_risk + stakes.risk_contribution + self.stage.risk_modifier)

    def compute_decision(self, stakes: StakesLevel) -> TrustDecision:
        return build_decision(
            stage=self.stage,
            propensity=self.propensity,
            competence=self.perceived_competence,
            benevolence=self.perceived_benevolence,
            integrity=self.perceived_integrity,
            perceived_risk=self.compute_risk(stakes),
            history=self.history,
            context_multiplier=self.context_multiplier,
        )
