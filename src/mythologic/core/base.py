"""Shared base models for every storable entity.

Concrete kinds subclass one of these and pin a ``kind`` literal, which is
both the discriminator for the :data:`mythologic.models.MythEntity` union
and the stable string reported by :attr:`MythEntityBase.entity_type`.
"""

from pydantic import BaseModel, Field

from mythologic.core.ids import MythId, new_id
from mythologic.core.metadata import Metadata


class MythEntityBase(BaseModel):
    """Fields and accessors common to all entity kinds."""

    kind: str
    id: MythId = Field(default_factory=new_id)
    name: str
    description: str = ""
    metadata: Metadata = Field(default_factory=Metadata)

    @property
    def entity_type(self) -> str:
        """Stable type name, e.g. ``"Deity"`` or ``"FamilyRelationship"``."""
        return self.kind

    def touch(self) -> None:
        """Mark the entity as modified."""
        self.metadata.update_timestamp()


class RelatableEntity(MythEntityBase):
    """An entity that keeps a list of outgoing relationship ids."""

    relationships: list[MythId] = Field(default_factory=list)

    def add_relationship(self, relationship_id: MythId) -> bool:
        """Register a relationship id. Returns False if it was already present."""
        if relationship_id in self.relationships:
            return False
        self.relationships.append(relationship_id)
        self.touch()
        return True

    def remove_relationship(self, relationship_id: MythId) -> bool:
        """Unregister a relationship id. Returns False if it was not present."""
        if relationship_id not in self.relationships:
            return False
        self.relationships.remove(relationship_id)
        self.touch()
        return True


class CulturalEntity(RelatableEntity):
    """A relatable entity that belongs to one culture (e.g. ``"Greek"``)."""

    culture: str
