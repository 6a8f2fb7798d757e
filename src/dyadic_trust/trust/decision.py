"""TrustDecision — domain-specific willingness to be vulnerable.

Trust is not one number. A decision carries a separate willingness for
each trust domain plus two distinct confidence measures:

- ``decision_certainty``: how sure the trustor is of *this* willingness
  judgment.
- ``trustee_confidence``: how well the trustor knows the trustee's
  underlying attributes.
"""
from __future__ import annotations

from dataclasses import dataclass

from dyadic_trust.trust.dimensions import TrustDomain


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class TrustDecision:
    """Computed willingness to trust in each domain.

    All fields are clamped into [0, 1] on construction.

    Parameters
    ----------
    task_willingness:
        Willingness to rely on the trustee's competence.
    support_willingness:
        Willingness to rely on the trustee's benevolence.
    disclosure_willingness:
        Willingness to share sensitive information (integrity).
    decision_certainty:
        Certainty in this willingness judgment.
    trustee_confidence:
        Confidence in the trustee's underlying attributes.
    """

    task_willingness: float = 0.3
    support_willingness: float = 0.3
    disclosure_willingness: float = 0.2
    decision_certainty: float = 0.3
    trustee_confidence: float = 0.3

    def __post_init__(self) -> None:
        for name in (
            "task_willingness",
            "support_willingness",
            "disclosure_willingness",
            "decision_certainty",
            "trustee_confidence",
        ):
            object.__setattr__(self, name, _clamp_unit(getattr(self, name)))

    @classmethod
    def no_trust(cls) -> TrustDecision:
        return cls(0.0, 0.0, 0.0, 0.0, 0.0)

    @classmethod
    def full_trust(cls) -> TrustDecision:
        return cls(1.0, 1.0, 1.0, 1.0, 1.0)

    def willingness(self, domain: TrustDomain) -> float:
        """Return the willingness for one trust domain."""
        if domain is TrustDomain.TASK:
            return self.task_willingness
        if domain is TrustDomain.SUPPORT:
            return self.support_willingness
        return self.disclosure_willingness

    # ------------------------------------------------------------------
    # Threshold checks (all strict)
    # ------------------------------------------------------------------

    def would_delegate_task(self, threshold: float) -> bool:
        return self.task_willingness > threshold

    def would_seek_support(self, threshold: float) -> bool:
        return self.support_willingness > threshold

    def would_disclose(self, threshold: float) -> bool:
        return self.disclosure_willingness > threshold

    def fully_willing(self, threshold: float) -> bool:
        """True when every domain exceeds ``threshold``."""
        return (
            self.task_willingness > threshold
            and self.support_willingness > threshold
            and self.disclosure_willingness > threshold
        )

    def any_willing(self, threshold: float) -> bool:
        """True when at least one domain exceeds ``threshold``."""
        return (
            self.task_willingness > threshold
            or self.support_willingness > threshold
            or self.disclosure_willingness > threshold
        )

    def to_dict(self) -> dict[str, float]:
        """Serialise to a plain dictionary."""
        return {
            "task_willingness": self.task_willingness,
            "support_willingness": self.support_willingness,
            "disclosure_willingness": self.disclosure_willingness,
            "decision_certainty": self.decision_certainty,
            "trustee_confidence": self.trustee_confidence,
        }
