"""Event-to-antecedent processing."""
from __future__ import annotations

from dyadic_trust.events.processor import (
    TrustEvent,
    direction_for,
    process_event_to_relationships,
)

__all__ = [
    "TrustEvent",
    "direction_for",
    "process_event_to_relationships",
]
