"""dyadic-trust — Relationship-level trust modelling between pairs of entities.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import dyadic_trust
>>> dyadic_trust.__version__
'0.1.0'

Quick start
-----------
::

    from dyadic_trust import (
        Relationship, Direction, RelationshipStage, StakesLevel,
        TrustAntecedent, AntecedentType, AntecedentDirection,
    )

    rel = Relationship("alice", "bob")
    decision = rel.compute_trust_decision(Direction.A_TO_B, 0.6, StakesLevel.MEDIUM)
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------
from dyadic_trust.errors import (
    InvalidPathError,
    RelationshipError,
    SelfRelationshipError,
    StageTransitionError,
)

# ------------------------------------------------------------------
# State primitives
# ------------------------------------------------------------------
from dyadic_trust.state.decaying_value import DecayingValue

# ------------------------------------------------------------------
# Trust subsystem
# ------------------------------------------------------------------
from dyadic_trust.trust.antecedent import AntecedentMapping, TrustAntecedent
from dyadic_trust.trust.context import TrustContext
from dyadic_trust.trust.decision import TrustDecision
from dyadic_trust.trust.dimensions import (
    AntecedentDirection,
    AntecedentType,
    LifeDomain,
    TrustDomain,
)
from dyadic_trust.trust.history import AntecedentHistory
from dyadic_trust.trust.policy import DEFAULT_POLICY, TrustPolicy
from dyadic_trust.trust.risk import PerceivedRisk, StakesLevel, Vulnerability, VulnerabilityType
from dyadic_trust.trust.trustworthiness import TrustworthinessFactors

# ------------------------------------------------------------------
# Relationship subsystem
# ------------------------------------------------------------------
from dyadic_trust.relationship.bonds import BondType, RelationshipSchema
from dyadic_trust.relationship.dimensions import (
    DirectionalDimension,
    DirectionalDimensions,
    InteractionPattern,
    SharedDimensions,
    SharedPath,
)
from dyadic_trust.relationship.paths import Direction, RelPath, TrustPath
from dyadic_trust.relationship.predictions import risk_to_stakes, would_confide, would_help
from dyadic_trust.relationship.relationship import Relationship
from dyadic_trust.relationship.stage import RelationshipStage
from dyadic_trust.relationship.trust import Trust, TrustWeights

# ------------------------------------------------------------------
# Event processing
# ------------------------------------------------------------------
from dyadic_trust.events.processor import TrustEvent, process_event_to_relationships

__all__ = [
    # version
    "__version__",
    # errors
    "InvalidPathError",
    "RelationshipError",
    "SelfRelationshipError",
    "StageTransitionError",
    # state
    "DecayingValue",
    # trust
    "AntecedentDirection",
    "AntecedentHistory",
    "AntecedentMapping",
    "AntecedentType",
    "DEFAULT_POLICY",
    "LifeDomain",
    "PerceivedRisk",
    "StakesLevel",
    "TrustAntecedent",
    "TrustContext",
    "TrustDecision",
    "TrustDomain",
    "TrustPolicy",
    "TrustworthinessFactors",
    "Vulnerability",
    "VulnerabilityType",
    # relationship
    "BondType",
    "Direction",
    "DirectionalDimension",
    "DirectionalDimensions",
    "InteractionPattern",
    "RelPath",
    "Relationship",
    "RelationshipSchema",
    "RelationshipStage",
    "SharedDimensions",
    "SharedPath",
    "Trust",
    "TrustPath",
    "TrustWeights",
    "risk_to_stakes",
    "would_confide",
    "would_help",
    # events
    "TrustEvent",
    "process_event_to_relationships",
]
