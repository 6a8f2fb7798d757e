"""Bond types and relationship schemas.

A bond describes one role the parties play toward each other (friend,
colleague, sibling). A relationship may carry several bonds but has exactly
one schema, the overall frame in which it is understood.
"""
from __future__ import annotations

from enum import Enum


class BondType(str, Enum):
    """A role one party plays toward the other."""

    PEER = "peer"
    MENTOR = "mentor"
    MENTEE = "mentee"
    FAMILY = "family"
    FRIEND = "friend"
    COLLEAGUE = "colleague"
    ROMANTIC = "romantic"
    RIVAL = "rival"
    AUTHORITY = "authority"
    SUBORDINATE = "subordinate"
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"

    @property
    def is_familial(self) -> bool:
        return self in (BondType.FAMILY, BondType.PARENT, BondType.CHILD, BondType.SIBLING)


class RelationshipSchema(str, Enum):
    """Overall frame of a relationship."""

    PEER = "peer"
    MENTOR = "mentor"
    SUBORDINATE = "subordinate"
    ROMANTIC = "romantic"
    FAMILY = "family"
    NUCLEAR = "nuclear"
    EXTENDED = "extended"
    RIVAL = "rival"

    @property
    def label(self) -> str:
        if self is RelationshipSchema.NUCLEAR:
            return "Nuclear Family"
        if self is RelationshipSchema.EXTENDED:
            return "Extended Family"
        return self.value.capitalize()

    @property
    def is_hierarchical(self) -> bool:
        return self in (RelationshipSchema.MENTOR, RelationshipSchema.SUBORDINATE)
