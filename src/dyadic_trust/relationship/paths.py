"""Structured paths addressing individual relationship values.

A higher-level state system reads and writes relationship values by path
rather than by attribute. Paths have a dotted text form:

    shared.affinity
    a_to_b.warmth
    b_to_a.perceived_risk
    a_to_b.trust.integrity
    a_to_b.trust.competence.financial
    stage
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dyadic_trust.errors import InvalidPathError
from dyadic_trust.relationship.dimensions import DirectionalDimension, SharedPath
from dyadic_trust.trust.dimensions import LifeDomain


class Direction(str, Enum):
    """Perspective within a relationship.

    For ``Relationship(entity_a, entity_b)``, ``A_TO_B`` is A's view of B:
    A is the trustor and B the trustee.
    """

    A_TO_B = "a_to_b"
    B_TO_A = "b_to_a"

    @property
    def opposite(self) -> Direction:
        return Direction.B_TO_A if self is Direction.A_TO_B else Direction.A_TO_B


class TrustPath(str, Enum):
    """Trustworthiness factors addressable by path.

    ``SUPPORT_WILLINGNESS`` is a computed decision output, not stored state;
    reads return None and writes are ignored.
    """

    COMPETENCE = "competence"
    BENEVOLENCE = "benevolence"
    INTEGRITY = "integrity"
    SUPPORT_WILLINGNESS = "support_willingness"

    @property
    def is_computed(self) -> bool:
        return self is TrustPath.SUPPORT_WILLINGNESS


class RelPathKind(str, Enum):
    SHARED = "shared"
    DIRECTIONAL = "directional"
    TRUST = "trust"
    PERCEIVED_RISK = "perceived_risk"
    STAGE = "stage"


# Fields each kind must carry.
_REQUIRED_FIELDS: dict[RelPathKind, tuple[str, ...]] = {
    RelPathKind.SHARED: ("shared",),
    RelPathKind.DIRECTIONAL: ("direction", "dimension"),
    RelPathKind.TRUST: ("direction", "trust"),
    RelPathKind.PERCEIVED_RISK: ("direction",),
    RelPathKind.STAGE: (),
}


@dataclass(frozen=True)
class RelPath:
    """Address of one value inside a relationship.

    Build paths with the ``of_*`` constructors or :meth:`parse` rather than
    directly. Direct construction raises :class:`InvalidPathError` when a field
    that ``kind`` requires is missing.
    """

    kind: RelPathKind
    direction: Direction | None = None
    shared: SharedPath | None = None
    dimension: DirectionalDimension | None = None
    trust: TrustPath | None = None
    life_domain: LifeDomain | None = None

    def __post_init__(self) -> None:
        missing = [name for name in _REQUIRED_FIELDS[self.kind] if getattr(self, name) is None]
        if missing:
            raise InvalidPathError(self.kind.value, f"missing {', '.join(missing)}")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def of_shared(cls, path: SharedPath) -> RelPath:
        return cls(kind=RelPathKind.SHARED, shared=path)

    @classmethod
    def of_directional(cls, direction: Direction, dimension: DirectionalDimension) -> RelPath:
        return cls(kind=RelPathKind.DIRECTIONAL, direction=direction, dimension=dimension)

    @classmethod
    def of_trust(
        cls,
        direction: Direction,
        trust: TrustPath,
        life_domain: LifeDomain | None = None,
    ) -> RelPath:
        """Path to a trustworthiness factor.

        ``life_domain`` only applies to competence; when omitted, competence
        paths address the WORK domain.
        """
        return cls(
            kind=RelPathKind.TRUST,
            direction=direction,
            trust=trust,
            life_domain=life_domain if trust is TrustPath.COMPETENCE else None,
        )

    @classmethod
    def of_perceived_risk(cls, direction: Direction) -> RelPath:
        return cls(kind=RelPathKind.PERCEIVED_RISK, direction=direction)

    @classmethod
    def of_stage(cls) -> RelPath:
        return cls(kind=RelPathKind.STAGE)

    # ------------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> RelPath:
        """Parse the dotted text form of a path.

        Raises
        ------
        InvalidPathError
            If ``text`` does not name a known value.
        """
        parts = [part.strip().lower() for part in text.strip().split(".")]
        if parts == ["stage"]:
            return cls.of_stage()

        head, rest = parts[0], parts[1:]
        if head == RelPathKind.SHARED.value:
            if len(rest) != 1:
                raise InvalidPathError(text, "expected 'shared.<dimension>'")
            return cls.of_shared(_enum_member(SharedPath, rest[0], text))

        direction = _enum_member(Direction, head, text)
        if not rest:
            raise InvalidPathError(text, "missing dimension after direction")

        if rest[0] == RelPathKind.PERCEIVED_RISK.value and len(rest) == 1:
            return cls.of_perceived_risk(direction)

        if rest[0] == RelPathKind.TRUST.value:
            if len(rest) not in (2, 3):
                raise InvalidPathError(text, "expected '<direction>.trust.<factor>[.<domain>]'")
            trust = _enum_member(TrustPath, rest[1], text)
            life_domain = None
            if len(rest) == 3:
                if trust is not TrustPath.COMPETENCE:
                    raise InvalidPathError(text, "only competence takes a life domain")
                life_domain = _enum_member(LifeDomain, rest[2], text)
            return cls.of_trust(direction, trust, life_domain)

        if len(rest) != 1:
            raise InvalidPathError(text, "expected '<direction>.<dimension>'")
        return cls.of_directional(direction, _enum_member(DirectionalDimension, rest[0], text))

    def __str__(self) -> str:
        if self.kind is RelPathKind.STAGE:
            return "stage"
        parts: list[str] = []
        if self.shared is not None:
            parts += [RelPathKind.SHARED.value, self.shared.value]
        if self.direction is not None:
            parts.append(self.direction.value)
        if self.kind is RelPathKind.PERCEIVED_RISK:
            parts.append(RelPathKind.PERCEIVED_RISK.value)
        if self.dimension is not None:
            parts.append(self.dimension.value)
        if self.trust is not None:
            parts += [RelPathKind.TRUST.value, self.trust.value]
            if self.life_domain is not None:
                parts.append(self.life_domain.value)
        return ".".join(parts)


def _enum_member(enum_cls: type[Enum], value: str, text: str):  # type: ignore[no-untyped-def]
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidPathError(text, f"unknown {enum_cls.__name__} {value!r}") from None
