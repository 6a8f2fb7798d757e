"""Unit tests for dyadic_trust.relationship.predictions — confide / help predictions."""
from __future__ import annotations

import pytest

from dyadic_trust.relationship.paths import Direction, RelPath
from dyadic_trust.relationship.predictions import risk_to_stakes, would_confide, would_help
from dyadic_trust.relationship.relationship import Relationship
from dyadic_trust.trust.risk import StakesLevel


@pytest.fixture()
def rel() -> Relationship:
    return Relationship("alice", "bob")


class TestRiskToStakes:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (0.0, StakesLevel.LOW),
            (0.24, StakesLevel.LOW),
            (0.25, StakesLevel.MEDIUM),
            (0.49, StakesLevel.MEDIUM),
            (0.5, StakesLevel.HIGH),
            (0.74, StakesLevel.HIGH),
            (0.75, StakesLevel.CRITICAL),
            (1.0, StakesLevel.CRITICAL),
        ],
    )
    def test_buckets(self, level: float, expected: StakesLevel) -> None:
        assert risk_to_stakes(level) is expected


class TestWouldConfide:
    def test_stranger_at_full_risk_does_not_confide(self, rel: Relationship) -> None:
        assert would_confide(rel, Direction.A_TO_B, 0.9, 1.0) is False

    def test_stranger_with_high_integrity_at_no_risk_confides(self, rel: Relationship) -> None:
        rel.set_base(RelPath.parse("a_to_b.trust.integrity"), 1.0)
        assert would_confide(rel, Direction.A_TO_B, 0.9, 0.0) is True

    def test_high_integrity_still_refused_at_full_risk(self, rel: Relationship) -> None:
        rel.set_base(RelPath.parse("a_to_b.trust.integrity"), 1.0)
        assert would_confide(rel, Direction.A_TO_B, 0.9, 1.0) is False

    def test_wrappers_use_their_direction(self, rel: Relationship) -> None:
        rel.set_base(RelPath.parse("b_to_a.trust.integrity"), 1.0)
        assert rel.would_b_confide_in_a(0.9, 0.0) is True
        assert rel.would_a_confide_in_b(0.9, 0.0) is False


class TestWouldHelp:
    def test_default_benevolence_is_not_enough(self, rel: Relationship) -> None:
        assert would_help(rel, Direction.A_TO_B, 0.9, 0.0) is False

    def test_high_benevolence_helps(self, rel: Relationship) -> None:
        rel.set_base(RelPath.parse("a_to_b.trust.benevolence"), 1.0)
        assert would_help(rel, Direction.A_TO_B, 0.9, 0.0) is True

    def test_wrappers_use_their_direction(self, rel: Relationship) -> None:
        rel.set_base(RelPath.parse("a_to_b.trust.benevolence"), 1.0)
        assert rel.would_a_help_b(0.9, 0.0) is True
        assert rel.would_b_help_a(0.9, 0.0) is False
