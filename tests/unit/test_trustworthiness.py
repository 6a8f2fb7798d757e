"""Unit tests for dyadic_trust.trust.trustworthiness — factors and antecedent replay."""
from __future__ import annotations

import datetime

import pytest

from dyadic_trust.trust.antecedent import TrustAntecedent
from dyadic_trust.trust.dimensions import AntecedentDirection, AntecedentType, LifeDomain
from dyadic_trust.trust.policy import TrustPolicy
from dyadic_trust.trust.trustworthiness import TrustworthinessFactors

T0 = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
POSITIVE = AntecedentDirection.POSITIVE
NEGATIVE = AntecedentDirection.NEGATIVE


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def factors() -> TrustworthinessFactors:
    return TrustworthinessFactors()


def _at(
    days: float,
    antecedent_type: AntecedentType,
    direction: AntecedentDirection,
    magnitude: float,
    life_domain: LifeDomain | None = None,
) -> TrustAntecedent:
    return TrustAntecedent(
        timestamp=T0 + datetime.timedelta(days=days),
        antecedent_type=antecedent_type,
        direction=direction,
        magnitude=magnitude,
        life_domain=life_domain,
    )


# ---------------------------------------------------------------------------
# Construction and direct mutation
# ---------------------------------------------------------------------------


class TestTrustworthinessDefaults:
    def test_every_life_domain_present(self, factors: TrustworthinessFactors) -> None:
        assert set(factors.competence_domains) == set(LifeDomain)
        for domain in LifeDomain:
            assert factors.competence(domain) is not None

    def test_default_bases_are_point_three(self, factors: TrustworthinessFactors) -> None:
        assert factors.competence_effective() == pytest.approx(0.3)
        assert factors.benevolence_effective() == pytest.approx(0.3)
        assert factors.integrity_effective() == pytest.approx(0.3)

    def test_with_bases(self) -> None:
        factors = TrustworthinessFactors.with_bases(0.6, 0.5, 0.4)
        assert factors.competence_in(LifeDomain.ATHLETIC) == pytest.approx(0.6)
        assert factors.benevolence_effective() == pytest.approx(0.5)
        assert factors.integrity_effective() == pytest.approx(0.4)
        assert factors.overall() == pytest.approx(0.5)

    @pytest.mark.parametrize(
        ("domain", "days"),
        [(None, 30), ("benevolence", 14), ("integrity", 60)],
    )
    def test_half_lives(
        self, factors: TrustworthinessFactors, domain: str | None, days: int
    ) -> None:
        if domain is None:
            value = factors.competence(LifeDomain.WORK)
        else:
            value = getattr(factors, domain)
        assert value is not None
        assert value.half_life == datetime.timedelta(days=days)


class TestTrustworthinessMutation:
    def test_competence_delta_in_one_domain(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta_in(LifeDomain.CREATIVE, 0.4)
        assert factors.competence_in(LifeDomain.CREATIVE) == pytest.approx(0.7)
        assert factors.competence_in(LifeDomain.WORK) == pytest.approx(0.3)

    def test_competence_delta_everywhere(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta(0.1)
        for domain in LifeDomain:
            assert factors.competence_in(domain) == pytest.approx(0.4)

    def test_competence_mean_across_domains(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta_in(LifeDomain.WORK, 0.8)
        assert factors.competence_effective() == pytest.approx((1.0 + 7 * 0.3) / 8)

    def test_apply_decay_uses_each_half_life(self, factors: TrustworthinessFactors) -> None:
        factors.add_benevolence_delta(0.4)
        factors.add_integrity_delta(0.4)
        factors.apply_decay(datetime.timedelta(days=14))
        assert factors.benevolence.delta == pytest.approx(0.2)
        assert factors.integrity.delta == pytest.approx(0.4 * 0.5 ** (14 / 60))

    def test_reset_deltas(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta(0.2)
        factors.add_benevolence_delta(-0.2)
        factors.reset_deltas()
        assert factors.overall() == pytest.approx(0.3)


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------


class TestRecomputeBasics:
    def test_empty_history_zeroes_all_deltas(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta(0.3)
        factors.add_benevolence_delta(0.2)
        factors.add_integrity_delta(-0.1)
        factors.recompute_from_antecedents([])
        for domain in LifeDomain:
            competence = factors.competence(domain)
            assert competence is not None
            assert competence.delta == 0.0
        assert factors.benevolence.delta == 0.0
        assert factors.integrity.delta == 0.0

    def test_single_positive_uses_alpha(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents([_at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5)])
        assert factors.integrity.delta == pytest.approx(0.2)

    def test_ema_over_two_entries(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents(
            [
                _at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5),
                _at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5),
            ]
        )
        assert factors.integrity.delta == pytest.approx(0.32)

    def test_bases_never_change(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents([_at(0, AntecedentType.BENEVOLENCE, NEGATIVE, 1.0)])
        assert factors.benevolence.base == pytest.approx(0.3)

    def test_result_is_clamped(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents([_at(0, AntecedentType.BENEVOLENCE, NEGATIVE, 1.0)])
        assert factors.benevolence.delta == pytest.approx(-0.3)
        assert factors.benevolence_effective() == pytest.approx(0.0)

    def test_input_order_does_not_matter(self) -> None:
        entries = [
            _at(0, AntecedentType.INTEGRITY, POSITIVE, 0.9),
            _at(40, AntecedentType.INTEGRITY, NEGATIVE, 0.1),
            _at(90, AntecedentType.INTEGRITY, POSITIVE, 0.3),
        ]
        forward = TrustworthinessFactors()
        backward = TrustworthinessFactors()
        forward.recompute_from_antecedents(entries)
        backward.recompute_from_antecedents(list(reversed(entries)))
        assert forward.integrity.delta == pytest.approx(backward.integrity.delta)

    def test_replay_is_idempotent(self, factors: TrustworthinessFactors) -> None:
        entries = [_at(0, AntecedentType.BENEVOLENCE, POSITIVE, 0.6)]
        factors.recompute_from_antecedents(entries)
        first = factors.benevolence.delta
        factors.recompute_from_antecedents(entries)
        assert factors.benevolence.delta == pytest.approx(first)


class TestRecomputeWeights:
    def test_negative_to_positive_ratio_is_two_and_a_half(self) -> None:
        positive = TrustworthinessFactors()
        negative = TrustworthinessFactors()
        positive.recompute_from_antecedents([_at(0, AntecedentType.INTEGRITY, POSITIVE, 0.2)])
        negative.recompute_from_antecedents([_at(0, AntecedentType.INTEGRITY, NEGATIVE, 0.2)])
        assert abs(negative.integrity.delta) / abs(positive.integrity.delta) == pytest.approx(2.5)

    def _integrity_after_negative(self, gap_days: float) -> float:
        factors = TrustworthinessFactors()
        factors.recompute_from_antecedents(
            [
                _at(0, AntecedentType.BENEVOLENCE, NEGATIVE, 0.5),
                _at(gap_days, AntecedentType.INTEGRITY, POSITIVE, 0.5),
            ]
        )
        return factors.integrity.delta

    def test_positive_inside_rebuilding_window_is_discounted(self) -> None:
        inside = self._integrity_after_negative(30)
        outside = self._integrity_after_negative(200)
        assert inside / outside == pytest.approx(0.7)

    def test_rebuilding_window_is_inclusive(self) -> None:
        assert self._integrity_after_negative(180) == pytest.approx(0.14)

    def test_positive_before_any_negative_is_full_weight(self) -> None:
        factors = TrustworthinessFactors()
        factors.recompute_from_antecedents(
            [
                _at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5),
                _at(0.0001, AntecedentType.BENEVOLENCE, NEGATIVE, 0.1),
            ]
        )
        assert factors.integrity.delta == pytest.approx(0.2, rel=1e-4)

    def test_age_halves_contribution_after_180_days(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents(
            [
                _at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5),
                _at(180, AntecedentType.BENEVOLENCE, POSITIVE, 0.5),
            ]
        )
        assert factors.integrity.delta == pytest.approx(0.1)
        assert factors.benevolence.delta == pytest.approx(0.2)

    def test_custom_policy_alpha(self, factors: TrustworthinessFactors) -> None:
        policy = TrustPolicy(smoothing_alpha=1.0)
        factors.recompute_from_antecedents(
            [_at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5)], policy
        )
        assert factors.integrity.delta == pytest.approx(0.5)

    def test_amplifying_rebuilding_policy_rejected(self, factors: TrustworthinessFactors) -> None:
        policy = TrustPolicy(rebuilding_positive_weight=5.0)
        with pytest.raises(ValueError, match="rebuilding_positive_weight"):
            factors.recompute_from_antecedents(
                [_at(0, AntecedentType.INTEGRITY, POSITIVE, 0.5)], policy
            )
        assert factors.integrity.delta == pytest.approx(0.0)


class TestRecomputeCompetenceDomains:
    def test_domain_scoped_ability(self, factors: TrustworthinessFactors) -> None:
        factors.recompute_from_antecedents(
            [_at(0, AntecedentType.ABILITY, POSITIVE, 0.5, LifeDomain.FINANCIAL)]
        )
        assert factors.competence_in(LifeDomain.FINANCIAL) == pytest.approx(0.5)
        assert factors.competence_in(LifeDomain.WORK) == pytest.approx(0.3)

    def test_domainless_ability_updates_every_domain(
        self, factors: TrustworthinessFactors
    ) -> None:
        factors.recompute_from_antecedents([_at(0, AntecedentType.ABILITY, POSITIVE, 0.5)])
        for domain in LifeDomain:
            assert factors.competence_in(domain) == pytest.approx(0.5)

    def test_untouched_domain_keeps_its_delta(self, factors: TrustworthinessFactors) -> None:
        factors.add_competence_delta_in(LifeDomain.WORK, 0.05)
        factors.recompute_from_antecedents(
            [_at(0, AntecedentType.ABILITY, POSITIVE, 0.5, LifeDomain.HEALTH)]
        )
        work = factors.competence(LifeDomain.WORK)
        assert work is not None
        assert work.delta == pytest.approx(0.05)

    def test_benevolence_and_integrity_always_reanchored(
        self, factors: TrustworthinessFactors
    ) -> None:
        factors.add_benevolence_delta(0.2)
        factors.recompute_from_antecedents([_at(0, AntecedentType.ABILITY, POSITIVE, 0.5)])
        assert factors.benevolence.delta == pytest.approx(0.0)
