"""Perceived risk — how exposed a trustor feels when relying on a trustee.

Risk for a concrete action is strictly additive and then clamped to [0, 1]:

    risk = effective + stakes contribution
           + 0.3 if the trustor has been betrayed
           [+ stage modifier] [+ (sensitivity - 0.5) * 0.4]
"""
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum

from dyadic_trust.state.decaying_value import DecayingValue

logger = logging.getLogger(__name__)

PERCEIVED_RISK_HALF_LIFE = datetime.timedelta(days=7)
DEFAULT_BASE = 0.3
BETRAYAL_RISK_INCREASE = 0.3
SENSITIVITY_SCALE = 0.4


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


class StakesLevel(str, Enum):
    """How much is at stake in a trust-requiring action."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def risk_contribution(self) -> float:
        """Additive risk term for this stakes level."""
        return _STAKES_CONTRIBUTIONS[self]


_STAKES_CONTRIBUTIONS: dict[StakesLevel, float] = {
    StakesLevel.LOW: 0.0,
    StakesLevel.MEDIUM: 0.2,
    StakesLevel.HIGH: 0.4,
    StakesLevel.CRITICAL: 0.6,
}


class VulnerabilityType(str, Enum):
    """What the trustor puts on the line."""

    IDENTITY = "identity"
    RESOURCES = "resources"
    SAFETY = "safety"
    RELATIONSHIP = "relationship"
    REPUTATION = "reputation"
    EMOTIONAL = "emotional"


@dataclass(frozen=True)
class Vulnerability:
    """A kind of exposure paired with its stakes."""

    vulnerability_type: VulnerabilityType = VulnerabilityType.RESOURCES
    stakes: StakesLevel = StakesLevel.LOW

    @property
    def risk_contribution(self) -> float:
        return self.stakes.risk_contribution

    def __str__(self) -> str:
        return f"{self.vulnerability_type.value} ({self.stakes.value})"


class PerceivedRisk:
    """Decaying baseline risk plus a permanent betrayal latch.

    Parameters
    ----------
    base:
        Baseline perceived risk. Defaults to 0.3.
    """

    def __init__(self, base: float = DEFAULT_BASE) -> None:
        self._risk = DecayingValue(
            base=base,
            lower_bound=0.0,
            upper_bound=1.0,
            half_life=PERCEIVED_RISK_HALF_LIFE,
        )
        self._betrayal_history = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def value(self) -> DecayingValue:
        """The underlying decaying value."""
        return self._risk

    def effective(self) -> float:
        return self._risk.effective()

    @property
    def base(self) -> float:
        return self._risk.base

    @property
    def delta(self) -> float:
        return self._risk.delta

    @property
    def has_betrayal_history(self) -> bool:
        return self._betrayal_history

    def mark_betrayal(self) -> None:
        """Latch the betrayal flag. It is never cleared in normal operation."""
        if not self._betrayal_history:
            logger.info("Betrayal latched; +%.1f risk applies from now on", BETRAYAL_RISK_INCREASE)
        self._betrayal_history = True

    def clear_betrayal_history(self) -> None:
        """Reset the betrayal latch. Intended for tests only."""
        self._betrayal_history = False

    def add_delta(self, amount: float) -> None:
        self._risk.add_delta(amount)

    def set_delta(self, delta: float) -> None:
        self._risk.set_delta(delta)

    def set_base(self, base: float) -> None:
        self._risk.set_base(base)

    def reset_delta(self) -> None:
        self._risk.reset_delta()

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        self._risk.apply_decay(elapsed)

    # ------------------------------------------------------------------
    # Risk queries
    # ------------------------------------------------------------------

    def compute_for_stakes(self, stakes: StakesLevel) -> float:
        """Risk of an action at ``stakes``, including any betrayal penalty."""
        total = self.effective() + stakes.risk_contribution
        if self._betrayal_history:
            total += BETRAYAL_RISK_INCREASE
        return _clamp_unit(total)

    def compute_for_vulnerability(self, vulnerability: Vulnerability) -> float:
        return self.compute_for_stakes(vulnerability.stakes)

    def compute_with_stage_modifier(self, stakes: StakesLevel, stage_modifier: float) -> float:
        """Stakes risk shifted by a relationship-stage modifier."""
        return _clamp_unit(self.compute_for_stakes(stakes) + stage_modifier)

    def compute_for_trustor(self, stakes: StakesLevel, trustor_sensitivity: float) -> float:
        """Stakes risk shifted by the trustor's risk sensitivity.

        Parameters
        ----------
        stakes:
            Stakes of the action.
        trustor_sensitivity:
            Sensitivity in [0, 1]; 0.5 is neutral. Out-of-range values
            are clamped. The shift spans -0.2 to +0.2.
        """
        return _clamp_unit(
            self.compute_for_stakes(stakes) + _sensitivity_modifier(trustor_sensitivity)
        )

    def compute_subjective(
        self,
        stakes: StakesLevel,
        stage_modifier: float,
        trustor_sensitivity: float,
    ) -> float:
        """Stakes risk with both the stage modifier and trustor sensitivity."""
        with_stage = self.compute_with_stage_modifier(stakes, stage_modifier)
        return _clamp_unit(with_stage + _sensitivity_modifier(trustor_sensitivity))

    def __repr__(self) -> str:
        return (
            f"PerceivedRisk(effective={self.effective():.3f}, "
            f"betrayal={self._betrayal_history})"
        )


def _sensitivity_modifier(sensitivity: float) -> float:
    return (_clamp_unit(sensitivity) - 0.5) * SENSITIVITY_SCALE
