"""Predicate-based retrieval over the ontology."""

from mythologic.query.engine import QueryEngine
from mythologic.query.filters import (
    AndFilter,
    AttributeEqualsFilter,
    CultureFilter,
    EntityTypeFilter,
    HasAttributeFilter,
    NameContainsFilter,
    NotFilter,
    OrFilter,
    QueryFilter,
)
from mythologic.query.results import QueryResult, QueryResultSet

__all__ = [
    "QueryEngine",
    "QueryFilter",
    "EntityTypeFilter",
    "NameContainsFilter",
    "CultureFilter",
    "HasAttributeFilter",
    "AttributeEqualsFilter",
    "AndFilter",
    "OrFilter",
    "NotFilter",
    "QueryResult",
    "QueryResultSet",
]
