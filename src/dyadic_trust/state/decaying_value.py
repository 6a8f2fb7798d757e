"""DecayingValue — a bounded numeric value with an exponentially decaying delta.

Every psychological quantity in a relationship is one of these. The value is
split into a stable ``base`` and a transient ``delta``; only the delta decays,
so repeated ticking pulls the effective value back toward its base:

    effective = clamp(base + delta, lower_bound, upper_bound)
    delta    <- delta * 0.5 ** (elapsed / half_life)

A ``None`` half-life marks a value that never decays (the shared "history"
dimension, for example).
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass

DEFAULT_HALF_LIFE = datetime.timedelta(days=7)


@dataclass
class DecayingValue:
    """Bounded value with a base, a decaying delta, and an optional half-life.

    Parameters
    ----------
    base:
        Stable baseline the value relaxes toward.
    delta:
        Transient offset added to ``base``; the only part that decays.
    lower_bound:
        Floor applied by :meth:`effective`.
    upper_bound:
        Ceiling applied by :meth:`effective`.
    half_life:
        Time for ``delta`` to halve. ``None`` disables decay.
    """

    base: float
    delta: float = 0.0
    lower_bound: float = 0.0
    upper_bound: float = 1.0
    half_life: datetime.timedelta | None = DEFAULT_HALF_LIFE

    @classmethod
    def no_decay(
        cls,
        base: float,
        lower_bound: float = 0.0,
        upper_bound: float = 1.0,
    ) -> DecayingValue:
        """Return a value whose delta is never decayed."""
        return cls(base=base, lower_bound=lower_bound, upper_bound=upper_bound, half_life=None)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @property
    def decays(self) -> bool:
        """True when a half-life is configured."""
        return self.half_life is not None

    def effective(self) -> float:
        """Return ``base + delta`` clamped to the configured bounds."""
        return max(self.lower_bound, min(self.upper_bound, self.base + self.delta))

    def effective_raw(self) -> float:
        """Return ``base + delta`` without clamping."""
        return self.base + self.delta

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def set_base(self, base: float) -> None:
        self.base = base

    def add_delta(self, amount: float) -> None:
        self.delta += amount

    def set_delta(self, delta: float) -> None:
        self.delta = delta

    def reset_delta(self) -> None:
        self.delta = 0.0

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        """Decay the delta by ``0.5 ** (elapsed / half_life)``.

        No-op when the value does not decay, the half-life is zero, or
        ``elapsed`` is not positive.

        Parameters
        ----------
        elapsed:
            Simulated time since the previous decay tick.
        """
        half_life = self.half_life
        if half_life is None or half_life <= datetime.timedelta(0):
            return
        if elapsed <= datetime.timedelta(0):
            return

        factor = 0.5 ** (elapsed.total_seconds() / half_life.total_seconds())
        self.delta *= factor
