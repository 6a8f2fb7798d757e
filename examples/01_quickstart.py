#!/usr/bin/env python3
"""Example: Quickstart

Demonstrates the minimal setup for dyadic-trust: create a relationship,
ask for a trust decision, and check whether one party would confide in the
other.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install dyadic-trust
"""
from __future__ import annotations

import dyadic_trust
from dyadic_trust import Direction, Relationship, RelationshipStage, RelPath, StakesLevel


def main() -> None:
    print(f"dyadic-trust version: {dyadic_trust.__version__}")

    # Step 1: Create a relationship between two entities
    rel = Relationship("alice", "bob", stage=RelationshipStage.ACQUAINTANCE)
    print(f"Relationship created: {rel.relationship_id} ({rel.stage.label})")

    # Step 2: Alice has come to see Bob as honest
    rel.set_base(RelPath.parse("a_to_b.trust.integrity"), 0.8)

    # Step 3: Compute Alice's willingness to trust Bob
    decision = rel.compute_trust_decision(Direction.A_TO_B, 0.6, StakesLevel.MEDIUM)
    for name, value in decision.to_dict().items():
        print(f"  {name:<24} {value:.3f}")

    # Step 4: Behavioral predictions
    print(f"Would Alice confide in Bob? {rel.would_a_confide_in_b(0.6, 0.2)}")
    print(f"Would Bob confide in Alice? {rel.would_b_confide_in_a(0.6, 0.2)}")

    print("\nQuickstart complete.")


if __name__ == "__main__":
    main()
