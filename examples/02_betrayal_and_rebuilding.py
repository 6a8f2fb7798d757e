#!/usr/bin/env python3
"""Example: Betrayal and Rebuilding

Feeds a sequence of events through the event processor and shows how a
betrayal outweighs earlier goodwill, and how positive evidence during the
following months only partly restores trust.

Usage:
    python examples/02_betrayal_and_rebuilding.py

Requirements:
    pip install dyadic-trust
"""
from __future__ import annotations

import datetime

from dyadic_trust import (
    AntecedentDirection,
    AntecedentMapping,
    AntecedentType,
    Direction,
    Relationship,
    TrustEvent,
    process_event_to_relationships,
)

KEPT_SECRET = AntecedentMapping(
    AntecedentType.INTEGRITY, AntecedentDirection.POSITIVE, 0.6, "kept_secret"
)
BETRAYED_CONFIDENCE = AntecedentMapping(
    AntecedentType.INTEGRITY, AntecedentDirection.NEGATIVE, 0.8, "betrayed_confidence"
)


def main() -> None:
    rel = Relationship("alice", "bob")
    rel.pattern.consistency = 0.8
    start = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)

    timeline = [
        (0, KEPT_SECRET),
        (20, KEPT_SECRET),
        (40, BETRAYED_CONFIDENCE),
        (70, KEPT_SECRET),
        (120, KEPT_SECRET),
    ]

    print(f"{'day':>4}  {'event':<22} {'bob -> alice integrity':>22}")
    for day, mapping in timeline:
        # alice acts, bob observes
        event = TrustEvent(
            source_id="alice",
            target_id="bob",
            severity=1.0,
            timestamp=start + datetime.timedelta(days=day),
        )
        process_event_to_relationships(event, [mapping], [rel])
        if mapping is BETRAYED_CONFIDENCE:
            rel.perceived_risk(Direction.B_TO_A).mark_betrayal()
        integrity = rel.trustworthiness(Direction.B_TO_A).integrity_effective()
        print(f"{day:>4}  {mapping.context:<22} {integrity:>22.3f}")

    print(f"\nWould Bob confide in Alice? {rel.would_b_confide_in_a(0.6, 0.3)}")


if __name__ == "__main__":
    main()
