"""Exception types raised by dyadic-trust.

Numeric inputs are clamped rather than rejected throughout the library, so
the only failures are structural: building a relationship between an entity
and itself, and parsing a malformed textual state path.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dyadic_trust.relationship.stage import RelationshipStage


class RelationshipError(ValueError):
    """Base class for relationship construction and transition failures."""


class SelfRelationshipError(RelationshipError):
    """Raised when a relationship is requested between an entity and itself."""

    def __init__(self, entity_id: str) -> None:
        self.entity_id = entity_id
        super().__init__(
            f"Cannot create relationship between an entity and itself ({entity_id!r})."
        )


class StageTransitionError(RelationshipError):
    """Raised when a relationship stage transition is not permitted.

    Every transition is currently permitted, so this is never raised by
    :meth:`Relationship.set_stage`. It is part of the public surface so that
    callers can already handle it.
    """

    def __init__(self, from_stage: RelationshipStage, to_stage: RelationshipStage) -> None:
        self.from_stage = from_stage
        self.to_stage = to_stage
        super().__init__(
            f"Invalid stage transition from {from_stage.label} to {to_stage.label}"
        )


class InvalidPathError(ValueError):
    """Raised when a textual relationship state path cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid relationship path {path!r}: {reason}")
