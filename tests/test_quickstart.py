"""Test that the quickstart API works for dyadic-trust."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import dyadic_trust

    assert dyadic_trust.__version__ == "0.1.0"


def test_quickstart_relationship() -> None:
    from dyadic_trust import Direction, Relationship, StakesLevel

    rel = Relationship("alice", "bob")
    decision = rel.compute_trust_decision(Direction.A_TO_B, 0.6, StakesLevel.MEDIUM)
    assert 0.0 <= decision.task_willingness <= 1.0


def test_quickstart_exports() -> None:
    import dyadic_trust

    for name in dyadic_trust.__all__:
        assert hasattr(dyadic_trust, name), name


def test_quickstart_repr() -> None:
    from dyadic_trust import Relationship

    text = repr(Relationship("alice", "bob"))
    assert "Relationship" in text
    assert "alice" in text
