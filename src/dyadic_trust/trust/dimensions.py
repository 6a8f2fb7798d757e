"""Trust dimension enums.

Mayer's model splits perceived trustworthiness into three factors, each of
which feeds one domain of willingness:

- Ability (competence)  -> Task:       will I rely on them to get it done?
- Benevolence           -> Support:    will I lean on them emotionally?
- Integrity             -> Disclosure: will I tell them things in confidence?

Competence is further tracked per life domain, since someone can be a
capable colleague and a hopeless athlete.
"""
from __future__ import annotations

from enum import Enum


class LifeDomain(str, Enum):
    """Life areas in which competence is tracked independently."""

    WORK = "work"
    ACADEMIC = "academic"
    SOCIAL = "social"
    ATHLETIC = "athletic"
    CREATIVE = "creative"
    FINANCIAL = "financial"
    HEALTH = "health"
    RELATIONSHIP = "relationship"


class TrustDomain(str, Enum):
    """The three domains of willingness to be vulnerable."""

    TASK = "task"
    SUPPORT = "support"
    DISCLOSURE = "disclosure"


class AntecedentType(str, Enum):
    """Which trustworthiness factor an antecedent speaks to."""

    ABILITY = "ability"
    BENEVOLENCE = "benevolence"
    INTEGRITY = "integrity"

    @property
    def trust_domain(self) -> TrustDomain:
        """The willingness domain this factor drives."""
        return _ANTECEDENT_TRUST_DOMAINS[self]


class AntecedentDirection(str, Enum):
    """Whether an antecedent raises or lowers perceived trustworthiness."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def sign(self) -> float:
        """+1.0 for positive antecedents, -1.0 for negative ones."""
        return 1.0 if self is AntecedentDirection.POSITIVE else -1.0


_ANTECEDENT_TRUST_DOMAINS: dict[AntecedentType, TrustDomain] = {
    AntecedentType.ABILITY: TrustDomain.TASK,
    AntecedentType.BENEVOLENCE: TrustDomain.SUPPORT,
    AntecedentType.INTEGRITY: TrustDomain.DISCLOSURE,
}
