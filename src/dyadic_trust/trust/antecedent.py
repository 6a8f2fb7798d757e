"""Trust antecedents — discrete observations that feed trustworthiness replay.

An antecedent is one signed piece of evidence about a trustee: "they
finished the job well" (ability, positive) or "they told my secret"
(integrity, negative). Antecedents are immutable once recorded.
"""
from __future__ import annotations

import dataclasses
import datetime
from dataclasses import dataclass, field

from dyadic_trust.trust.dimensions import (
    AntecedentDirection,
    AntecedentType,
    LifeDomain,
    TrustDomain,
)


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class TrustAntecedent:
    """A single trust-relevant observation.

    Parameters
    ----------
    timestamp:
        Simulation time at which the observation was made.
    antecedent_type:
        The trustworthiness factor the observation speaks to.
    direction:
        Whether the observation raises or lowers trust.
    magnitude:
        Strength of the observation. Clamped into [0, 1].
    context:
        Short free-text tag describing the source (e.g. "betrayed_confidence").
    life_domain:
        Life area for ability antecedents. ``None`` applies the observation
        to every competence domain.
    """

    timestamp: datetime.datetime
    antecedent_type: AntecedentType
    direction: AntecedentDirection
    magnitude: float
    context: str = ""
    life_domain: LifeDomain | None = None
    trust_domain: TrustDomain = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", _clamp_unit(self.magnitude))
        object.__setattr__(self, "trust_domain", self.antecedent_type.trust_domain)

    @property
    def is_negative(self) -> bool:
        return self.direction is AntecedentDirection.NEGATIVE

    def with_life_domain(self, life_domain: LifeDomain) -> TrustAntecedent:
        """Return a copy scoped to ``life_domain``."""
        return dataclasses.replace(self, life_domain=life_domain)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "antecedent_type": self.antecedent_type.value,
            "direction": self.direction.value,
            "magnitude": self.magnitude,
            "context": self.context,
            "trust_domain": self.trust_domain.value,
            "life_domain": self.life_domain.value if self.life_domain is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> TrustAntecedent:
        """Build an antecedent from the output of :meth:`to_dict`.

        ``trust_domain`` is ignored if present; it is always derived from
        ``antecedent_type``.

        Raises
        ------
        KeyError
            If a required key is missing.
        ValueError
            If an enum value or timestamp cannot be parsed.
        """
        life_domain = data.get("life_domain")
        return cls(
            timestamp=datetime.datetime.fromisoformat(str(data["timestamp"])),
            antecedent_type=AntecedentType(str(data["antecedent_type"])),
            direction=AntecedentDirection(str(data["direction"])),
            magnitude=float(data["magnitude"]),  # type: ignore[arg-type]
            context=str(data.get("context", "")),
            life_domain=LifeDomain(str(life_domain)) if life_domain else None,
        )


@dataclass(frozen=True)
class AntecedentMapping:
    """How one event type translates into an antecedent.

    Supplied by the event-processing collaborator. ``base_magnitude`` is
    scaled by event severity and relationship consistency before an
    antecedent is built from it.
    """

    antecedent_type: AntecedentType
    direction: AntecedentDirection
    base_magnitude: float
    context: str
    life_domain: LifeDomain | None = None

    @property
    def trust_domain(self) -> TrustDomain:
        return self.antecedent_type.trust_domain
