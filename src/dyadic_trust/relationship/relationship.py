"""Relationship — the dyadic aggregate between two entities.

A relationship holds state both parties share (affinity, respect, history)
and state that differs by direction (A's perception of B need not match
B's perception of A). Each direction owns its own antecedent history,
trustworthiness factors, perceived risk and directional feelings.

Identity is the unordered pair of entity ids: ``Relationship("alice",
"bob")`` and ``Relationship("bob", "alice")`` describe the same dyad, with
the perspectives swapped.
"""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable

from dyadic_trust.errors import SelfRelationshipError
from dyadic_trust.relationship import predictions
from dyadic_trust.relationship.bonds import BondType, RelationshipSchema
from dyadic_trust.relationship.dimensions import (
    DirectionalDimensions,
    InteractionPattern,
    SharedDimensions,
    SharedPath,
)
from dyadic_trust.relationship.paths import Direction, RelPath, RelPathKind, TrustPath
from dyadic_trust.relationship.stage import RelationshipStage
from dyadic_trust.relationship.trust import build_decision
from dyadic_trust.state.decaying_value import DecayingValue
from dyadic_trust.trust.antecedent import TrustAntecedent
from dyadic_trust.trust.context import TrustContext
from dyadic_trust.trust.decision import TrustDecision
from dyadic_trust.trust.dimensions import LifeDomain
from dyadic_trust.trust.history import AntecedentHistory
from dyadic_trust.trust.policy import DEFAULT_POLICY, TrustPolicy
from dyadic_trust.trust.risk import PerceivedRisk, StakesLevel
from dyadic_trust.trust.trustworthiness import TrustworthinessFactors

logger = logging.getLogger(__name__)

DEFAULT_COMPETENCE_DOMAIN = LifeDomain.WORK


class _DirectionState:
    """Everything one party holds about the other."""

    def __init__(self, max_history: int) -> None:
        self.history = AntecedentHistory(max_entries=max_history)
        self.trustworthiness = TrustworthinessFactors()
        self.perceived_risk = PerceivedRisk()
        self.directional = DirectionalDimensions()


class Relationship:
    """Relationship between two distinct entities.

    Parameters
    ----------
    entity_a:
        Identifier of the first party.
    entity_b:
        Identifier of the second party. Must differ from ``entity_a``.
    bonds:
        Initial bond types. Duplicates are dropped.
    schema:
        Overall relationship frame.
    stage:
        Initial developmental stage.
    policy:
        Antecedent replay constants. Defaults to :data:`DEFAULT_POLICY`.

    Raises
    ------
    SelfRelationshipError
        If ``entity_a`` equals ``entity_b``.
    ValueError
        If ``policy`` has a rebuilding weight outside (0, 1].
    """

    def __init__(
        self,
        entity_a: str,
        entity_b: str,
        bonds: Iterable[BondType] | None = None,
        schema: RelationshipSchema = RelationshipSchema.PEER,
        stage: RelationshipStage = RelationshipStage.STRANGER,
        policy: TrustPolicy | None = None,
    ) -> None:
        if entity_a == entity_b:
            raise SelfRelationshipError(entity_a)

        self._entity_a = entity_a
        self._entity_b = entity_b
        self._policy = policy if policy is not None else DEFAULT_POLICY
        self._policy.validate_rebuilding()
        self._bonds: list[BondType] = []
        for bond in bonds or ():
            self.add_bond(bond)
        self._schema = schema
        self._stage = stage
        self._shared = SharedDimensions()
        self._pattern = InteractionPattern()
        self._directions: dict[Direction, _DirectionState] = {
            direction: _DirectionState(self._policy.max_history) for direction in Direction
        }

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def entity_a(self) -> str:
        return self._entity_a

    @property
    def entity_b(self) -> str:
        return self._entity_b

    @property
    def entities(self) -> tuple[str, str]:
        return (self._entity_a, self._entity_b)

    @property
    def relationship_id(self) -> str:
        return f"rel_{self._entity_a}_{self._entity_b}"

    @property
    def pair(self) -> frozenset[str]:
        """Unordered identity of the dyad."""
        return frozenset((self._entity_a, self._entity_b))

    def involves(self, entity_id: str) -> bool:
        return entity_id in (self._entity_a, self._entity_b)

    def direction_from(self, trustor_id: str) -> Direction | None:
        """Direction in which ``trustor_id`` is the perceiving party."""
        if trustor_id == self._entity_a:
            return Direction.A_TO_B
        if trustor_id == self._entity_b:
            return Direction.B_TO_A
        return None

    @property
    def policy(self) -> TrustPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Bonds, schema and stage
    # ------------------------------------------------------------------

    @property
    def bonds(self) -> list[BondType]:
        return list(self._bonds)

    def add_bond(self, bond: BondType) -> None:
        if bond not in self._bonds:
            self._bonds.append(bond)

    def remove_bond(self, bond: BondType) -> None:
        if bond in self._bonds:
            self._bonds.remove(bond)

    def has_bond(self, bond: BondType) -> bool:
        return bond in self._bonds

    @property
    def schema(self) -> RelationshipSchema:
        return self._schema

    def set_schema(self, schema: RelationshipSchema) -> None:
        self._schema = schema

    @property
    def stage(self) -> RelationshipStage:
        return self._stage

    def set_stage(self, stage: RelationshipStage) -> None:
        """Move the relationship to ``stage``. Every transition is permitted."""
        if stage is not self._stage:
            logger.debug(
                "Relationship %s stage %s -> %s",
                self.relationship_id,
                self._stage.value,
                stage.value,
            )
        self._stage = stage

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    @property
    def shared(self) -> SharedDimensions:
        return self._shared

    @property
    def pattern(self) -> InteractionPattern:
        return self._pattern

    def trustworthiness(self, direction: Direction) -> TrustworthinessFactors:
        """The trustor's perception of the trustee in ``direction``."""
        return self._directions[direction].trustworthiness

    def perceived_risk(self, direction: Direction) -> PerceivedRisk:
        return self._directions[direction].perceived_risk

    def directional(self, direction: Direction) -> DirectionalDimensions:
        return self._directions[direction].directional

    # ------------------------------------------------------------------
    # Antecedents
    # ------------------------------------------------------------------

    def append_antecedent(self, direction: Direction, antecedent: TrustAntecedent) -> None:
        """Record an antecedent. Trustworthiness is not refreshed until
        :meth:`recompute_trustworthiness` is called."""
        self._directions[direction].history.append(antecedent)

    def antecedent_history(self, direction: Direction) -> AntecedentHistory:
        return self._directions[direction].history

    def last_negative_antecedent(self, direction: Direction) -> datetime.datetime | None:
        return self._directions[direction].history.last_negative

    def recompute_trustworthiness(self, direction: Direction) -> None:
        """Replay the full history of ``direction`` into its trustworthiness."""
        state = self._directions[direction]
        state.trustworthiness.recompute_from_antecedents(state.history, self._policy)

    # ------------------------------------------------------------------
    # Path access
    # ------------------------------------------------------------------

    def get(self, path: RelPath) -> DecayingValue | None:
        """Return the stored value addressed by ``path``.

        Returns None for the stage and for computed trust paths, which have
        no stored value.
        """
        if path.kind is RelPathKind.STAGE:
            return None
        if path.shared is not None:
            return self._shared.get(path.shared)
        if path.direction is None:
            return None

        state = self._directions[path.direction]
        if path.kind is RelPathKind.PERCEIVED_RISK:
            return state.perceived_risk.value
        if path.dimension is not None:
            return state.directional.get(path.dimension)

        if path.trust is TrustPath.COMPETENCE:
            return state.trustworthiness.competence(path.life_domain or DEFAULT_COMPETENCE_DOMAIN)
        if path.trust is TrustPath.BENEVOLENCE:
            return state.trustworthiness.benevolence
        if path.trust is TrustPath.INTEGRITY:
            return state.trustworthiness.integrity
        return None

    def add_delta(self, path: RelPath, amount: float) -> bool:
        """Add ``amount`` to the value at ``path``.

        Shared history only grows; negative amounts are ignored for it.

        Returns
        -------
        bool
            False when ``path`` has no stored value.
        """
        if path.kind is RelPathKind.SHARED and path.shared is SharedPath.HISTORY:
            self._shared.add_history_delta(amount)
            return True
        value = self.get(path)
        if value is None:
            return False
        value.add_delta(amount)
        return True

    def set_base(self, path: RelPath, base: float) -> bool:
        """Set the base of the value at ``path``.

        Returns
        -------
        bool
            False when ``path`` has no stored value.
        """
        value = self.get(path)
        if value is None:
            return False
        value.set_base(base)
        return True

    # ------------------------------------------------------------------
    # Trust decisions
    # ------------------------------------------------------------------

    def compute_trust_decision(
        self,
        direction: Direction,
        trustor_propensity: float,
        stakes: StakesLevel,
    ) -> TrustDecision:
        """Compute the trustor's willingness to be vulnerable in ``direction``."""
        return self.compute_trust_decision_with_context(direction, trustor_propensity, stakes, 1.0)

    def compute_trust_decision_with_context(
        self,
        direction: Direction,
        trustor_propensity: float,
        stakes: StakesLevel,
        context_multiplier: float,
    ) -> TrustDecision:
        """Compute a trust decision scaled by a situational multiplier.

        Parameters
        ----------
        direction:
            Which party is the trustor.
        trustor_propensity:
            The trustor's general propensity to trust. Clamped into [0, 1].
        stakes:
            What the trustor stands to lose.
        context_multiplier:
            Scales the willingness base before risk is subtracted. Clamped
            into [0, 2].
        """
        state = self._directions[direction]
        factors = state.trustworthiness
        risk = state.perceived_risk.compute_with_stage_modifier(stakes, self._stage.risk_modifier)
        return build_decision(
            stage=self._stage,
            propensity=trustor_propensity,
            competence=factors.competence_effective(),
            benevolence=factors.benevolence_effective(),
            integrity=factors.integrity_effective(),
            perceived_risk=risk,
            history=self._shared.history_effective(),
            context_multiplier=context_multiplier,
        )

    def compute_trust_decision_in_context(
        self,
        direction: Direction,
        trustor_propensity: float,
        stakes: StakesLevel,
        context: TrustContext,
    ) -> TrustDecision:
        return self.compute_trust_decision_with_context(
            direction, trustor_propensity, stakes, context.compute_multiplier()
        )

    # ------------------------------------------------------------------
    # Behavioral predictions
    # ------------------------------------------------------------------

    def would_a_confide_in_b(self, propensity: float, risk_level: float) -> bool:
        return predictions.would_confide(self, Direction.A_TO_B, propensity, risk_level)

    def would_b_confide_in_a(self, propensity: float, risk_level: float) -> bool:
        return predictions.would_confide(self, Direction.B_TO_A, propensity, risk_level)

    def would_a_help_b(self, propensity: float, risk_level: float) -> bool:
        return predictions.would_help(self, Direction.A_TO_B, propensity, risk_level)

    def would_b_help_a(self, propensity: float, risk_level: float) -> bool:
        return predictions.would_help(self, Direction.B_TO_A, propensity, risk_level)

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def apply_decay(self, elapsed: datetime.timedelta) -> None:
        """Decay every value except shared history by ``elapsed``.

        Callers apply decay in increasing time order.
        """
        self._shared.apply_decay(elapsed)
        for state in self._directions.values():
            state.trustworthiness.apply_decay(elapsed)
            state.perceived_risk.apply_decay(elapsed)
            state.directional.apply_decay(elapsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relationship):
            return NotImplemented
        return self.pair == other.pair

    def __hash__(self) -> int:
        return hash(self.pair)

    def __repr__(self) -> str:
        return (
            f"Relationship(entity_a={self._entity_a!r}, entity_b={self._entity_b!r}, "
            f"stage={self._stage.value!r})"
        )
