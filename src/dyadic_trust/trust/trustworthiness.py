"""TrustworthinessFactors — a trustor's perception of one trustee.

Holds per-life-domain competence plus benevolence and integrity, each as a
:class:`DecayingValue` with its own half-life. The perceived values are
refreshed by replaying the full antecedent history rather than applying
antecedents one at a time, because each antecedent's temporal weight
depends on its age relative to the newest entry.

Replay algorithm
----------------
1. Sort the history by timestamp; the latest timestamp is the reference.
2. For each antecedent compute
   ``decay = exp(-age_days * ln 2 / half_life_days)`` and a weight:
   negative antecedents weigh ``negative_weight``; positive ones weigh
   ``rebuilding_positive_weight`` inside the rebuilding window after the
   last negative seen so far, else 1.0.
3. Fold ``±magnitude * weight * decay`` into an EMA per target.
4. Re-anchor each affected factor: ``delta = clamp(base + ema) - base``.
"""
from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Iterable

from dyadic_trust.state.decaying_value import DecayingValue
from dyadic_trust.trust.antecedent import TrustAntecedent
from dyadic_trust.trust.dimensions import AntecedentDirection, AntecedentType, LifeDomain
from dyadic_trust.trust.policy import DEFAULT_POLICY, TrustPolicy

logger = logging.getLogger(__name__)

COMPETENCE_HALF_LIFE = datetime.timedelta(days=30)
BENEVOLENCE_HALF_LIFE = datetime.timedelta(days=14)
INTEGRITY_HALF_LIFE = datetime.timedelta(days=60)

DEFAULT_BASE = 0.3

_SECONDS_PER_DAY = 86400.0


def _bounded(base: float, half_life: datetime.timedelta) -> DecayingValue:
    return DecayingValue(base=base, lower_bound=0.0, upper_bound=1.0, half_life=half_life)


def _reanchor(value: DecayingValue, ema: float) -> None:
    target = max(0.0, min(1.0, value.base + ema))
    value.set_delta(target - value.base)


class TrustworthinessFactors:
    """Perceived competence, benevolence and integrity of a trustee.

    Every :class:`LifeDomain` has a competence entry from construction on;
    the map is never partially populated.

    Parameters
    ----------
    competence:
        Base competence applied to every life domain.
    benevolence:
        Base benevolence.
    integrity:
        Base integrity.
    """

    def __init__(
        self,
        competence: float = DEFAULT_BASE,
        benevolence: float = DEFAULT_BASE,
        integrity: float = DEFAULT_BASE,
    ) -> None:
        self._competence: dict[LifeDomain, DecayingValue] = {
            domain: _bounded(competence, COMPETENCE_HALF_LIFE) for domain in LifeDomain
        }
        self._benevolence = _bounded(benevolence, BENEVOLENCE_HALF_LIFE)
        self._integrity = _bounded(integrity, INTEGRITY_HALF_LIFE)

    @classmethod
    def with_bases(
        cls, competence: float, benevolence: float, integrity: float
    ) -> TrustworthinessFactors:
        """Build factors with explicit bases."""
        return cls(competence=competence, benevolence=benevolence, integrity=integrity)

    # ------------------------------------------------------------------
    # Effective values
    # ------------------------------------------------------------------

    def competence_in(self, domain: LifeDomain) -> float:
        """Effective competence in one life domain."""
        value = self._competence.get(domain)
        return value.effective() if value is not None else DEFAULT_BASE

    def competence_effective(self) -> float:
        """Mean effective competence across all life domains."""
        values = [value.effective() for value in self._competence.values()]
        return sum(values) / len(values)

    def benevolence_effective(self) -> float:
        return self._benevolence.effective()

    def integrity_effective(self) -> float:
        return self._integrity.effective()

    def overall(self) -> float:
        """Mean of competence, benevolence and integrity."""
        return (
            self.competence_effective()
            + self.benevolence_effective()
            + self.integrity_effective()
        ) / 3.0

    # ------------------------------------------------------------------
    # Underlying values
    # ------------------------------------------------------------------

    def competence(self, domain: LifeDomain) -> DecayingValue | None:
        return self._competence.get(domain)

    @property
    def competence_domains(self) -> list[LifeDomain]:
        return list(self._competence)

    @property
    def benevolence(self) -> DecayingValue:
        return self._benevolence

    @property
    def integrity(self) -> DecayingValue:
        return self._integrity

    # ------------------------------------------------------------------
    # Direct mutation
    # ------------------------------------------------------------------

    def add_competence_delta_in(self, domain: LifeDomain, amount: float) -> None:
        value = self._competence.get(domain)
        if value is not None:
            value.add_delta(amount)

    def add_competence_delta(self, amount: float) -> None:
        """Add ``amount`` to competence in every life domain."""
        for value in self._competence.values():
            value.add_delta(amount)

    def add_benevolence_delta(self, amount: float) -> None:
        self._benevolence.add_delta(amount)

    def add_integrity_delta(self, amount: float) -> None:
        self._integrity.add_delta(amount)

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        for value in self._competence.values():
            value.apply_decay(elapsed)
        self._benevolence.apply_decay(elapsed)
        self._integrity.apply_decay(elapsed)

    def reset_deltas(self) -> None:
        for value in self._competence.values():
            value.reset_delta()
        self._benevolence.reset_delta()
        self._integrity.reset_delta()

    # ------------------------------------------------------------------
    # Replay
    # ------------------------------------------------------------------

    def recompute_from_antecedents(
        self,
        antecedents: Iterable[TrustAntecedent],
        policy: TrustPolicy | None = None,
    ) -> None:
        """Rebuild factor deltas from scratch by replaying ``antecedents``.

        Only deltas are rewritten; bases are never touched. An empty history
        resets every delta to zero. Competence domains that receive no
        ability antecedent keep their current delta.

        Parameters
        ----------
        antecedents:
            The full antecedent history for one direction, in any order.
        policy:
            Replay constants. Defaults to :data:`DEFAULT_POLICY`.

        Raises
        ------
        ValueError
            If the policy rebuilding weight is outside (0, 1].
        """
        policy = policy if policy is not None else DEFAULT_POLICY
        policy.validate_rebuilding()
        ordered = sorted(antecedents, key=lambda entry: entry.timestamp)
        if not ordered:
            self.reset_deltas()
            return

        reference = ordered[-1].timestamp
        alpha = policy.smoothing_alpha
        decay_rate = math.log(2) / policy.antecedent_half_life_days
        window = policy.rebuilding_window

        competence_emas: dict[LifeDomain, float] = {}
        benevolence_ema = 0.0
        integrity_ema = 0.0
        last_negative: datetime.datetime | None = None

        for antecedent in ordered:
            age_days = (reference - antecedent.timestamp).total_seconds() / _SECONDS_PER_DAY
            decay = math.exp(-age_days * decay_rate)

            if antecedent.direction is AntecedentDirection.NEGATIVE:
                last_negative = antecedent.timestamp
                weight = policy.negative_weight
            elif last_negative is not None and antecedent.timestamp - last_negative <= window:
                weight = policy.rebuilding_positive_weight
            else:
                weight = 1.0

            signed = antecedent.direction.sign * antecedent.magnitude * weight * decay

            if antecedent.antecedent_type is AntecedentType.ABILITY:
                if antecedent.life_domain is not None:
                    targets = [antecedent.life_domain]
                else:
                    targets = list(self._competence)
                for domain in targets:
                    previous = competence_emas.get(domain, 0.0)
                    competence_emas[domain] = (1.0 - alpha) * previous + alpha * signed
            elif antecedent.antecedent_type is AntecedentType.BENEVOLENCE:
                benevolence_ema = (1.0 - alpha) * benevolence_ema + alpha * signed
            else:
                integrity_ema = (1.0 - alpha) * integrity_ema + alpha * signed

        for domain, ema in competence_emas.items():
            value = self._competence.get(domain)
            if value is not None:
                _reanchor(value, ema)
        _reanchor(self._benevolence, benevolence_ema)
        _reanchor(self._integrity, integrity_ema)

        logger.debug(
            "Replayed %d antecedent(s): %d competence domain(s), "
            "benevolence ema=%.4f, integrity ema=%.4f",
            len(ordered),
            len(competence_emas),
            benevolence_ema,
            integrity_ema,
        )

    def __repr__(self) -> str:
        return (
            f"TrustworthinessFactors(competence={self.competence_effective():.3f}, "
            f"benevolence={self.benevolence_effective():.3f}, "
            f"integrity={self.integrity_effective():.3f})"
        )
