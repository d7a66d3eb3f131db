"""Identifiers, metadata and the shared entity base."""

from mythologic.core.base import CulturalEntity, MythEntityBase, RelatableEntity
from mythologic.core.ids import MythId, format_id, new_id, parse_id
from mythologic.core.metadata import Metadata, Source, SourceType

__all__ = [
    "MythId",
    "new_id",
    "parse_id",
    "format_id",
    "Metadata",
    "Source",
    "SourceType",
    "MythEntityBase",
    "RelatableEntity",
    "CulturalEntity",
]
