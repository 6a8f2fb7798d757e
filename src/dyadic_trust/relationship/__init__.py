"""Dyadic relationships: stages, dimensions, state paths and trust decisions."""
from __future__ import annotations

from dyadic_trust.relationship.bonds import BondType, RelationshipSchema
from dyadic_trust.relationship.dimensions import (
    DirectionalDimension,
    DirectionalDimensions,
    InteractionPattern,
    SharedDimensions,
    SharedPath,
)
from dyadic_trust.relationship.paths import Direction, RelPath, RelPathKind, TrustPath
from dyadic_trust.relationship.predictions import risk_to_stakes, would_confide, would_help
from dyadic_trust.relationship.relationship import Relationship
from dyadic_trust.relationship.stage import RelationshipStage, StageConstants
from dyadic_trust.relationship.trust import Trust, TrustWeights

__all__ = [
    "BondType",
    "Direction",
    "DirectionalDimension",
    "DirectionalDimensions",
    "InteractionPattern",
    "RelPath",
    "RelPathKind",
    "Relationship",
    "RelationshipSchema",
    "RelationshipStage",
    "SharedDimensions",
    "SharedPath",
    "StageConstants",
    "Trust",
    "TrustPath",
    "TrustWeights",
    "risk_to_stakes",
    "would_confide",
    "would_help",
]
