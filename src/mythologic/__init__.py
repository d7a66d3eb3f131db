"""Mythologic - a typed knowledge graph of world mythologies."""

__version__ = "0.1.0"

from mythologic.core import Metadata, MythId, Source, SourceType, format_id, new_id, parse_id
from mythologic.errors import (
    CollisionError,
    MalformedIdentifierError,
    MythologicError,
    SerializationError,
)
from mythologic.ontology import MythOntology
from mythologic.query import QueryEngine, QueryFilter, QueryResult, QueryResultSet

__all__ = [
    "__version__",
    "MythId",
    "new_id",
    "parse_id",
    "format_id",
    "Metadata",
    "Source",
    "SourceType",
    "MythOntology",
    "QueryEngine",
    "QueryFilter",
    "QueryResult",
    "QueryResultSet",
    "MythologicError",
    "MalformedIdentifierError",
    "CollisionError",
    "SerializationError",
]
