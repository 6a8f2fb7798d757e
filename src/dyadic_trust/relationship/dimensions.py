"""Shared and directional relationship dimensions.

Shared dimensions are symmetric: both parties experience the same affinity,
respect, tension, intimacy and history. Directional dimensions are
asymmetric: A's warmth toward B need not match B's warmth toward A.

    Shared        half-life  default     Directional  half-life  default
    affinity         14d       0.1       warmth          14d       0.2
    respect          21d       0.2       resentment      14d       0.0
    tension           7d       0.0       dependence      14d       0.0
    intimacy         30d       0.0       attraction      14d       0.0
    history        never       0.0       attachment      30d       0.0
                                         jealousy         7d       0.0
                                         fear             7d       0.0
                                         obligation      30d       0.0
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum

from dyadic_trust.state.decaying_value import DecayingValue


def _days(n: int) -> datetime.timedelta:
    return datetime.timedelta(days=n)


def _bounded(base: float, half_life_days: int) -> DecayingValue:
    return DecayingValue(
        base=base, lower_bound=0.0, upper_bound=1.0, half_life=_days(half_life_days)
    )


class SharedPath(str, Enum):
    """Addressable shared dimensions."""

    AFFINITY = "affinity"
    RESPECT = "respect"
    TENSION = "tension"
    INTIMACY = "intimacy"
    HISTORY = "history"


class DirectionalDimension(str, Enum):
    """Addressable directional dimensions (excluding trust and risk)."""

    WARMTH = "warmth"
    RESENTMENT = "resentment"
    DEPENDENCE = "dependence"
    ATTRACTION = "attraction"
    ATTACHMENT = "attachment"
    JEALOUSY = "jealousy"
    FEAR = "fear"
    OBLIGATION = "obligation"


@dataclass
class SharedDimensions:
    """Dimensions both parties share."""

    affinity: DecayingValue = field(default_factory=lambda: _bounded(0.1, 14))
    respect: DecayingValue = field(default_factory=lambda: _bounded(0.2, 21))
    tension: DecayingValue = field(default_factory=lambda: _bounded(0.0, 7))
    intimacy: DecayingValue = field(default_factory=lambda: _bounded(0.0, 30))
    history: DecayingValue = field(default_factory=lambda: DecayingValue.no_decay(0.0))

    def get(self, path: SharedPath) -> DecayingValue:
        return getattr(self, path.value)

    def history_effective(self) -> float:
        return self.history.effective()

    def add_history_delta(self, amount: float) -> None:
        """Grow shared history. Non-positive amounts are ignored."""
        if amount > 0.0:
            self.history.add_delta(amount)

    def add_delta(self, path: SharedPath, amount: float) -> None:
        if path is SharedPath.HISTORY:
            self.add_history_delta(amount)
        else:
            self.get(path).add_delta(amount)

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        # history never decays
        self.affinity.apply_decay(elapsed)
        self.respect.apply_decay(elapsed)
        self.tension.apply_decay(elapsed)
        self.intimacy.apply_decay(elapsed)

    def reset_deltas(self) -> None:
        self.affinity.reset_delta()
        self.respect.reset_delta()
        self.tension.reset_delta()
        self.intimacy.reset_delta()


@dataclass
class DirectionalDimensions:
    """One party's feelings toward the other."""

    warmth: DecayingValue = field(default_factory=lambda: _bounded(0.2, 14))
    resentment: DecayingValue = field(default_factory=lambda: _bounded(0.0, 14))
    dependence: DecayingValue = field(default_factory=lambda: _bounded(0.0, 14))
    attraction: DecayingValue = field(default_factory=lambda: _bounded(0.0, 14))
    attachment: DecayingValue = field(default_factory=lambda: _bounded(0.0, 30))
    jealousy: DecayingValue = field(default_factory=lambda: _bounded(0.0, 7))
    fear: DecayingValue = field(default_factory=lambda: _bounded(0.0, 7))
    obligation: DecayingValue = field(default_factory=lambda: _bounded(0.0, 30))

    def get(self, dimension: DirectionalDimension) -> DecayingValue:
        return getattr(self, dimension.value)

    def add_delta(self, dimension: DirectionalDimension, amount: float) -> None:
        self.get(dimension).add_delta(amount)

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        for dimension in DirectionalDimension:
            self.get(dimension).apply_decay(elapsed)

    def reset_deltas(self) -> None:
        for dimension in DirectionalDimension:
            self.get(dimension).reset_delta()


@dataclass
class InteractionPattern:
    """How often and how predictably the two parties interact.

    ``frequency`` and ``consistency`` are clamped into [0, 1].
    """

    frequency: float = 0.0
    consistency: float = 0.0
    last_interaction: datetime.datetime | None = None

    def __post_init__(self) -> None:
        self.frequency = max(0.0, min(1.0, self.frequency))
        self.consistency = max(0.0, min(1.0, self.consistency))

    def record_interaction(self, timestamp: datetime.datetime) -> None:
        self.last_interaction = timestamp
