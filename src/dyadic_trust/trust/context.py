"""TrustContext — situational factors that scale willingness to trust.

Strong norms and institutional safeguards make trusting easier; time
pressure makes it slightly harder. The context collapses to a single
multiplier in [0.5, 1.5] applied to the willingness base.
"""
from __future__ import annotations

from dataclasses import dataclass

MIN_MULTIPLIER = 0.5
MAX_MULTIPLIER = 1.5
TIME_PRESSURE_PENALTY = 0.1


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class TrustContext:
    """Situational trust factors, each in [0, 1] (0.5 is neutral).

    Parameters
    ----------
    social_norms:
        How strongly local norms encourage trusting behaviour.
    institutional_safeguards:
        Presence of contracts, laws or other protections.
    time_pressure:
        Urgency of the decision. Higher pressure lowers the multiplier.
    institutional_support:
        Availability of recourse if trust is violated.
    cultural_expectations:
        Cultural default toward trusting others.
    """

    social_norms: float = 0.5
    institutional_safeguards: float = 0.5
    time_pressure: float = 0.5
    institutional_support: float = 0.5
    cultural_expectations: float = 0.5

    def __post_init__(self) -> None:
        for name in (
            "social_norms",
            "institutional_safeguards",
            "time_pressure",
            "institutional_support",
            "cultural_expectations",
        ):
            object.__setattr__(self, name, _clamp_unit(getattr(self, name)))

    def compute_multiplier(self) -> float:
        """Collapse the context into a willingness multiplier in [0.5, 1.5]."""
        encouragement = (
            self.social_norms
            + self.institutional_safeguards
            + self.institutional_support
            + self.cultural_expectations
        ) / 4.0
        multiplier = 0.5 + encouragement - self.time_pressure * TIME_PRESSURE_PENALTY
        return max(MIN_MULTIPLIER, min(MAX_MULTIPLIER, multiplier))

    @classmethod
    def from_multiplier(cls, multiplier: float) -> TrustContext:
        """Build a context whose multiplier approximates ``multiplier``.

        Time pressure is fixed at 0.5 and the four encouraging factors share
        one value, so the round trip is exact for multipliers in
        [0.5, 1.45].
        """
        multiplier = max(MIN_MULTIPLIER, min(MAX_MULTIPLIER, multiplier))
        encouragement = _clamp_unit(multiplier - 0.45)
        return cls(
            social_norms=encouragement,
            institutional_safeguards=encouragement,
            time_pressure=0.5,
            institutional_support=encouragement,
            cultural_expectations=encouragement,
        )
