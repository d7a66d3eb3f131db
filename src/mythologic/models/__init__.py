"""Data models for entities, relationships and cultural contexts."""

from typing import Annotated, Union

from pydantic import Field, TypeAdapter

from mythologic.models.cultural import (
    Culture,
    MythologicalEra,
    MythologicalRegion,
    Pantheon,
    TimePeriod,
)
from mythologic.models.entities import (
    Artifact,
    ArtifactType,
    Concept,
    ConceptType,
    Creature,
    CreatureType,
    Deity,
    DeityImportance,
    Gender,
    Hero,
    HeroOrigin,
    Location,
    LocationType,
)
from mythologic.models.relationships import (
    AllianceRelationship,
    AllianceType,
    ConflictOutcome,
    ConflictRelationship,
    ConflictType,
    FamilyRelationship,
    FamilyRelationshipType,
    Relationship,
    RelationshipBuilder,
    RelationshipType,
    TransformationRelationship,
    TransformationType,
)

NODE_TYPES = (Deity, Hero, Creature, Artifact, Location, Concept)
RELATIONSHIP_TYPES = (
    Relationship,
    FamilyRelationship,
    AllianceRelationship,
    ConflictRelationship,
    TransformationRelationship,
)
CONTEXT_TYPES = (Culture, Pantheon, MythologicalEra, MythologicalRegion)

# Any storable entity, discriminated on its ``kind`` field
MythEntity = Annotated[
    Union[
        Deity,
        Hero,
        Creature,
        Artifact,
        Location,
        Concept,
        Relationship,
        FamilyRelationship,
        AllianceRelationship,
        ConflictRelationship,
        TransformationRelationship,
        Culture,
        Pantheon,
        MythologicalEra,
        MythologicalRegion,
    ],
    Field(discriminator="kind"),
]

ENTITY_TYPE_NAMES: tuple[str, ...] = tuple(
    cls.model_fields["kind"].default for cls in NODE_TYPES + RELATIONSHIP_TYPES + CONTEXT_TYPES
)

entity_adapter: TypeAdapter = TypeAdapter(MythEntity)
entity_list_adapter: TypeAdapter = TypeAdapter(list[MythEntity])

__all__ = [
    "MythEntity",
    "ENTITY_TYPE_NAMES",
    "NODE_TYPES",
    "RELATIONSHIP_TYPES",
    "CONTEXT_TYPES",
    "entity_adapter",
    "entity_list_adapter",
    "Deity",
    "Hero",
    "Creature",
    "Artifact",
    "Location",
    "Concept",
    "Gender",
    "DeityImportance",
    "HeroOrigin",
    "CreatureType",
    "ArtifactType",
    "LocationType",
    "ConceptType",
    "Relationship",
    "RelationshipType",
    "RelationshipBuilder",
    "FamilyRelationship",
    "FamilyRelationshipType",
    "AllianceRelationship",
    "AllianceType",
    "ConflictRelationship",
    "ConflictType",
    "ConflictOutcome",
    "TransformationRelationship",
    "TransformationType",
    "Culture",
    "Pantheon",
    "MythologicalEra",
    "MythologicalRegion",
    "TimePeriod",
]
