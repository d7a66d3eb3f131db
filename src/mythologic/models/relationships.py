"""Relationship models for the knowledge graph.

A relationship is itself a stored entity: it has an id, a name and
metadata, and points from ``source_id`` to ``target_id``. The endpoints are
bare identifiers and are not checked against any store.

Each specialized kind pairs a type enum with two rules:

- ``inverse()``: the semantically opposite type (Parent <-> Child)
- ``is_typically_bidirectional()``: the default for the ``bidirectional``
  flag when the caller does not choose one
"""

from enum import Enum
from typing import Any, ClassVar, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mythologic.config import get_settings
from mythologic.core.base import MythEntityBase
from mythologic.core.ids import MythId


def clamp_unit(value: float) -> float:
    """Clamp a score into [0, 1]."""
    return max(0.0, min(1.0, float(value)))


_TRUE_WORDS = {"true", "yes", "1", "on"}
_FALSE_WORDS = {"false", "no", "0", "off"}


def _parse_flag(key: str, text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f"Property {key!r} expects a boolean, got {text!r}")


class RelationshipType(str, Enum):
    """Broad category of a relationship."""

    FAMILY = "Family"
    ALLIANCE = "Alliance"
    CONFLICT = "Conflict"
    CREATION = "Creation"
    TRANSFORMATION = "Transformation"
    WORSHIP = "Worship"
    POSSESSION = "Possession"
    GUARDIANSHIP = "Guardianship"
    TEACHING = "Teaching"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class FamilyRelationshipType(str, Enum):
    PARENT = "Parent"
    CHILD = "Child"
    SIBLING = "Sibling"
    SPOUSE = "Spouse"
    ANCESTOR = "Ancestor"
    DESCENDANT = "Descendant"
    TWIN = "Twin"
    COUSIN = "Cousin"
    OTHER = "Other"

    def inverse(self) -> "FamilyRelationshipType":
        return _FAMILY_INVERSES.get(self, self)

    def is_typically_bidirectional(self) -> bool:
        return self in _SYMMETRIC_FAMILY


_FAMILY_INVERSES = {
    FamilyRelationshipType.PARENT: FamilyRelationshipType.CHILD,
    FamilyRelationshipType.CHILD: FamilyRelationshipType.PARENT,
    FamilyRelationshipType.ANCESTOR: FamilyRelationshipType.DESCENDANT,
    FamilyRelationshipType.DESCENDANT: FamilyRelationshipType.ANCESTOR,
}
_SYMMETRIC_FAMILY = frozenset(
    {
        FamilyRelationshipType.SIBLING,
        FamilyRelationshipType.SPOUSE,
        FamilyRelationshipType.TWIN,
        FamilyRelationshipType.COUSIN,
    }
)


class AllianceType(str, Enum):
    MILITARY = "Military"
    POLITICAL = "Political"
    MARRIAGE = "Marriage"
    OATH = "Oath"
    PACT = "Pact"
    FRIENDSHIP = "Friendship"
    MENTORSHIP = "Mentorship"
    PATRONAGE = "Patronage"
    COALITION = "Coalition"
    OTHER = "Other"

    def inverse(self) -> "AllianceType":
        return self

    def is_typically_bidirectional(self) -> bool:
        return self not in (AllianceType.MENTORSHIP, AllianceType.PATRONAGE)


class ConflictType(str, Enum):
    WAR = "War"
    BATTLE = "Battle"
    DUEL = "Duel"
    RIVALRY = "Rivalry"
    CONTEST = "Contest"
    BETRAYAL = "Betrayal"
    CURSE = "Curse"
    PUNISHMENT = "Punishment"
    OTHER = "Other"

    def inverse(self) -> "ConflictType":
        return self

    def is_typically_bidirectional(self) -> bool:
        return self not in (ConflictType.CURSE, ConflictType.PUNISHMENT)


class TransformationType(str, Enum):
    SHAPESHIFTING = "Shapeshifting"
    PETRIFICATION = "Petrification"
    APOTHEOSIS = "Apotheosis"
    CURSE = "Curse"
    BLESSING = "Blessing"
    REINCARNATION = "Reincarnation"
    METAMORPHOSIS = "Metamorphosis"
    OTHER = "Other"

    def inverse(self) -> "TransformationType":
        if self is TransformationType.CURSE:
            return TransformationType.BLESSING
        if self is TransformationType.BLESSING:
            return TransformationType.CURSE
        return self

    def is_typically_bidirectional(self) -> bool:
        return False


class Relationship(MythEntityBase):
    """A typed edge between two entity identifiers.

    ``bidirectional`` means traversing target -> source carries the same
    meaning. Endpoints are fixed after construction; strength, direction
    flags and properties stay mutable.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal["Relationship"] = "Relationship"
    source_id: MythId = Field(frozen=True)
    target_id: MythId = Field(frozen=True)
    relationship_type: RelationshipType = RelationshipType.UNKNOWN
    strength: float = 0.5
    bidirectional: bool = False
    properties: dict[str, str] = Field(default_factory=dict)

    # Specialized fields reachable through get_property/set_property
    property_fields: ClassVar[dict[str, type]] = {}

    @field_validator("strength")
    @classmethod
    def _clamp_strength(cls, value: float) -> float:
        return clamp_unit(value)

    @model_validator(mode="before")
    @classmethod
    def _default_direction(cls, data: Any) -> Any:
        # Fill the default only for a full construction, not on field assignment
        if isinstance(data, dict) and "source_id" in data and data.get("bidirectional") is None:
            data = dict(data)
            data["bidirectional"] = cls.typical_bidirectional(data)
        return data

    @classmethod
    def typical_bidirectional(cls, data: dict) -> bool:
        """Default direction flag for a relationship built from ``data``."""
        return False

    # -- uniform entity surface ------------------------------------------------

    @property
    def relationships(self) -> list[MythId]:
        """Edges have no outgoing edges of their own."""
        return []

    @property
    def culture(self) -> None:
        return None

    # -- topology --------------------------------------------------------------

    def involves(self, entity_id: MythId) -> bool:
        return entity_id in (self.source_id, self.target_id)

    def other_end(self, entity_id: MythId) -> MythId | None:
        """Return the endpoint opposite ``entity_id``, or None if not an endpoint."""
        if entity_id == self.source_id:
            return self.target_id
        if entity_id == self.target_id:
            return self.source_id
        return None

    # -- setters ---------------------------------------------------------------

    def set_strength(self, strength: float) -> None:
        """Set strength; out-of-range values are clamped, not rejected."""
        self.strength = clamp_unit(strength)
        self.touch()

    def set_bidirectional(self, bidirectional: bool) -> None:
        self.bidirectional = bidirectional
        self.touch()

    # -- property bag ----------------------------------------------------------

    def get_property(self, key: str) -> str | None:
        """Read a property by name, specialized fields first."""
        if key in self.property_fields:
            value = getattr(self, key)
            if value is None:
                return None
            if isinstance(value, bool):
                return "true" if value else "false"
            return str(value)
        return self.properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        """Write a property by name, specialized fields first.

        Raises:
            ValueError: if a boolean field receives an unrecognised value.
        """
        field_type = self.property_fields.get(key)
        if field_type is bool:
            setattr(self, key, _parse_flag(key, value))
        elif field_type is not None:
            setattr(self, key, value)
        else:
            self.properties[key] = value
        self.touch()

    def all_properties(self) -> dict[str, str]:
        """Generic properties merged with the specialized ones that are set."""
        merged = dict(self.properties)
        for key in self.property_fields:
            value = self.get_property(key)
            if value is not None:
                merged[key] = value
        return merged

    # -- inversion -------------------------------------------------------------

    def inverted_fields(self) -> dict[str, Any]:
        """Type-specific fields for the inverse edge."""
        return {}

    def reversed(self, name: str | None = None, description: str | None = None):
        """Build the inverse edge: endpoints swapped, type inverted.

        The result is a new entity with its own identifier.
        """
        data = self.model_dump(exclude={"id", "metadata", "source_id", "target_id"})
        data.update(self.inverted_fields())
        data["source_id"] = self.target_id
        data["target_id"] = self.source_id
        data["name"] = name or f"{self.name} (inverse)"
        if description is not None:
            data["description"] = description
        return type(self)(**data)

    @classmethod
    def builder(
        cls,
        name: str,
        description: str,
        source_id: MythId,
        target_id: MythId,
        relationship_type: RelationshipType = RelationshipType.UNKNOWN,
    ) -> "RelationshipBuilder[Relationship]":
        """Start building a generic relationship."""
        return RelationshipBuilder(
            cls,
            name=name,
            description=description,
            source_id=source_id,
            target_id=target_id,
            relationship_type=relationship_type,
        )


class FamilyRelationship(Relationship):
    """Kinship between two entities."""

    kind: Literal["FamilyRelationship"] = "FamilyRelationship"
    relationship_type: RelationshipType = RelationshipType.FAMILY
    family_type: FamilyRelationshipType

    @classmethod
    def typical_bidirectional(cls, data: dict) -> bool:
        family_type = data.get("family_type")
        if family_type is None:
            return False
        return FamilyRelationshipType(family_type).is_typically_bidirectional()

    def set_family_type(self, family_type: FamilyRelationshipType) -> None:
        self.family_type = family_type
        self.touch()

    def inverted_fields(self) -> dict[str, Any]:
        return {"family_type": self.family_type.inverse()}

    @classmethod
    def builder(
        cls,
        name: str,
        description: str,
        source_id: MythId,
        target_id: MythId,
        family_type: FamilyRelationshipType,
    ) -> "RelationshipBuilder[FamilyRelationship]":
        return RelationshipBuilder(
            cls,
            name=name,
            description=description,
            source_id=source_id,
            target_id=target_id,
            family_type=family_type,
        )


class AllianceRelationship(Relationship):
    """A pact, friendship, patronage or other alliance."""

    kind: Literal["AllianceRelationship"] = "AllianceRelationship"
    relationship_type: RelationshipType = RelationshipType.ALLIANCE
    alliance_type: AllianceType
    purpose: str = ""
    duration: str | None = None

    property_fields: ClassVar[dict[str, type]] = {"purpose": str, "duration": str}

    @classmethod
    def typical_bidirectional(cls, data: dict) -> bool:
        alliance_type = data.get("alliance_type")
        if alliance_type is None:
            return True
        return AllianceType(alliance_type).is_typically_bidirectional()

    def set_alliance_type(self, alliance_type: AllianceType) -> None:
        self.alliance_type = alliance_type
        self.touch()

    def set_purpose(self, purpose: str) -> None:
        self.purpose = purpose
        self.touch()

    def set_duration(self, duration: str) -> None:
        self.duration = duration
        self.touch()

    def inverted_fields(self) -> dict[str, Any]:
        return {"alliance_type": self.alliance_type.inverse()}

    @classmethod
    def builder(
        cls,
        name: str,
        description: str,
        source_id: MythId,
        target_id: MythId,
        alliance_type: AllianceType,
        purpose: str = "",
    ) -> "RelationshipBuilder[AllianceRelationship]":
        return RelationshipBuilder(
            cls,
            name=name,
            description=description,
            source_id=source_id,
            target_id=target_id,
            alliance_type=alliance_type,
            purpose=purpose,
        )


class ConflictOutcome(BaseModel):
    """How a conflict was resolved."""

    description: str
    victor_id: MythId | None = None
    consequences: list[str] = Field(default_factory=list)


class ConflictRelationship(Relationship):
    """A war, duel, rivalry, curse or other hostility."""

    kind: Literal["ConflictRelationship"] = "ConflictRelationship"
    relationship_type: RelationshipType = RelationshipType.CONFLICT
    conflict_type: ConflictType
    outcome: ConflictOutcome | None = None

    @classmethod
    def typical_bidirectional(cls, data: dict) -> bool:
        conflict_type = data.get("conflict_type")
        if conflict_type is None:
            return True
        return ConflictType(conflict_type).is_typically_bidirectional()

    def set_conflict_type(self, conflict_type: ConflictType) -> None:
        self.conflict_type = conflict_type
        self.touch()

    def set_outcome(self, outcome: ConflictOutcome) -> None:
        self.outcome = outcome
        self.touch()

    def inverted_fields(self) -> dict[str, Any]:
        return {"conflict_type": self.conflict_type.inverse()}

    @classmethod
    def builder(
        cls,
        name: str,
        description: str,
        source_id: MythId,
        target_id: MythId,
        conflict_type: ConflictType,
    ) -> "RelationshipBuilder[ConflictRelationship]":
        return RelationshipBuilder(
            cls,
            name=name,
            description=description,
            source_id=source_id,
            target_id=target_id,
            conflict_type=conflict_type,
        )


class TransformationRelationship(Relationship):
    """One entity changed into another form (or into itself, changed)."""

    kind: Literal["TransformationRelationship"] = "TransformationRelationship"
    relationship_type: RelationshipType = RelationshipType.TRANSFORMATION
    transformation_type: TransformationType
    cause: str = ""
    permanent: bool = True
    reversible: bool = False

    property_fields: ClassVar[dict[str, type]] = {
        "cause": str,
        "permanent": bool,
        "reversible": bool,
    }

    @classmethod
    def typical_bidirectional(cls, data: dict) -> bool:
        return False

    def set_transformation_type(self, transformation_type: TransformationType) -> None:
        self.transformation_type = transformation_type
        self.touch()

    def set_cause(self, cause: str) -> None:
        self.cause = cause
        self.touch()

    def set_permanent(self, permanent: bool) -> None:
        self.permanent = permanent
        self.touch()

    def set_reversible(self, reversible: bool) -> None:
        self.reversible = reversible
        self.touch()

    def inverted_fields(self) -> dict[str, Any]:
        return {"transformation_type": self.transformation_type.inverse()}

    @classmethod
    def builder(
        cls,
        name: str,
        description: str,
        source_id: MythId,
        target_id: MythId,
        transformation_type: TransformationType,
        cause: str = "",
    ) -> "RelationshipBuilder[TransformationRelationship]":
        return RelationshipBuilder(
            cls,
            name=name,
            description=description,
            source_id=source_id,
            target_id=target_id,
            transformation_type=transformation_type,
            cause=cause,
        )


R = TypeVar("R", bound=Relationship)


class RelationshipBuilder(Generic[R]):
    """Fluent configuration for one relationship.

    Strength falls back to the configured default (0.5) and the direction
    flag to the kind's typical rule unless set explicitly:

        rel = (
            FamilyRelationship.builder("Zeus and Hera", "...", zeus.id, hera.id,
                                   FamilyRelationshipType.SPOUSE)
            .strength(0.9)
            .build()
        )
    """

    def __init__(self, model: type[R], **fields: Any):
        self._model = model
        self._fields = fields
        self._strength: float | None = None
        self._bidirectional: bool | None = None
        self._properties: dict[str, str] = {}

    def strength(self, strength: float) -> "RelationshipBuilder[R]":
        self._strength = strength
        return self

    def bidirectional(self, bidirectional: bool = True) -> "RelationshipBuilder[R]":
        self._bidirectional = bidirectional
        return self

    def with_property(self, key: str, value: str) -> "RelationshipBuilder[R]":
        self._properties[key] = value
        return self

    def build(self) -> R:
        data = dict(self._fields)
        data["strength"] = (
            self._strength if self._strength is not None else get_settings().default_strength
        )
        if self._bidirectional is not None:
            data["bidirectional"] = self._bidirectional
        relationship = self._model(**data)
        for key, value in self._properties.items():
            relationship.set_property(key, value)
        return relationship
