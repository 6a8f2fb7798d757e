"""Trustworthiness perception, perceived risk, and trust decisions.

Per Mayer's integrative model, a trustor's willingness to be vulnerable
combines their propensity to trust, their perception of the trustee's
ability, benevolence and integrity, and the risk they perceive in the
situation.
"""
from __future__ import annotations

from dyadic_trust.trust.antecedent import AntecedentMapping, TrustAntecedent
from dyadic_trust.trust.context import TrustContext
from dyadic_trust.trust.decision import TrustDecision
from dyadic_trust.trust.dimensions import (
    AntecedentDirection,
    AntecedentType,
    LifeDomain,
    TrustDomain,
)
from dyadic_trust.trust.history import MAX_ANTECEDENT_HISTORY, AntecedentHistory
from dyadic_trust.trust.policy import DEFAULT_POLICY, TrustPolicy
from dyadic_trust.trust.risk import (
    PerceivedRisk,
    StakesLevel,
    Vulnerability,
    VulnerabilityType,
)
from dyadic_trust.trust.trustworthiness import TrustworthinessFactors

__all__ = [
    "AntecedentDirection",
    "AntecedentHistory",
    "AntecedentMapping",
    "AntecedentType",
    "DEFAULT_POLICY",
    "LifeDomain",
    "MAX_ANTECEDENT_HISTORY",
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
]
