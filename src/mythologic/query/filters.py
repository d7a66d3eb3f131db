"""Composable predicates over entities.

Filters form a small closed tree: five leaf predicates and three boolean
combinators. Build them with the ``QueryFilter`` constructors and combine
with ``and_``/``or_``/``not_`` or the ``&``, ``|`` and ``~`` operators:

    greek_gods = QueryFilter.entity_type("Deity") & QueryFilter.culture("Greek")
    not_zeus = greek_gods & ~QueryFilter.name_contains("zeus")

Predicates are pure, so evaluation order never matters.
"""

from dataclasses import dataclass

from mythologic.models import MythEntity


class QueryFilter:
    """Base class for all filters."""

    def matches(self, entity: MythEntity) -> bool:
        raise NotImplementedError

    # Leaf constructors

    @staticmethod
    def entity_type(entity_type: str) -> "EntityTypeFilter":
        return EntityTypeFilter(entity_type)

    @staticmethod
    def name_contains(substring: str) -> "NameContainsFilter":
        return NameContainsFilter(substring)

    @staticmethod
    def culture(culture: str) -> "CultureFilter":
        return CultureFilter(culture)

    @staticmethod
    def has_attribute(key: str) -> "HasAttributeFilter":
        return HasAttributeFilter(key)

    @staticmethod
    def attribute_equals(key: str, value: str) -> "AttributeEqualsFilter":
        return AttributeEqualsFilter(key, value)

    # Combinators

    def and_(self, other: "QueryFilter") -> "AndFilter":
        return AndFilter(self, other)

    def or_(self, other: "QueryFilter") -> "OrFilter":
        return OrFilter(self, other)

    def not_(self) -> "NotFilter":
        return NotFilter(self)

    def __and__(self, other: "QueryFilter") -> "AndFilter":
        return AndFilter(self, other)

    def __or__(self, other: "QueryFilter") -> "OrFilter":
        return OrFilter(self, other)

    def __invert__(self) -> "NotFilter":
        return NotFilter(self)


@dataclass(frozen=True)
class EntityTypeFilter(QueryFilter):
    """Exact match on ``entity.entity_type``."""

    type_name: str

    def matches(self, entity: MythEntity) -> bool:
        return entity.entity_type == self.type_name


@dataclass(frozen=True)
class NameContainsFilter(QueryFilter):
    """Case-insensitive substring match on the entity name."""

    substring: str

    def matches(self, entity: MythEntity) -> bool:
        return self.substring.lower() in entity.name.lower()


@dataclass(frozen=True)
class CultureFilter(QueryFilter):
    """Exact match on the entity's culture. Entities without one never match."""

    culture_name: str

    def matches(self, entity: MythEntity) -> bool:
        entity_culture = entity.culture
        return entity_culture is not None and entity_culture == self.culture_name


@dataclass(frozen=True)
class HasAttributeFilter(QueryFilter):
    key: str

    def matches(self, entity: MythEntity) -> bool:
        return self.key in entity.metadata.attributes


@dataclass(frozen=True)
class AttributeEqualsFilter(QueryFilter):
    key: str
    value: str

    def matches(self, entity: MythEntity) -> bool:
        return entity.metadata.attributes.get(self.key) == self.value


@dataclass(frozen=True)
class AndFilter(QueryFilter):
    left: QueryFilter
    right: QueryFilter

    def matches(self, entity: MythEntity) -> bool:
        return self.left.matches(entity) and self.right.matches(entity)


@dataclass(frozen=True)
class OrFilter(QueryFilter):
    left: QueryFilter
    right: QueryFilter

    def matches(self, entity: MythEntity) -> bool:
        return self.left.matches(entity) or self.right.matches(entity)


@dataclass(frozen=True)
class NotFilter(QueryFilter):
    inner: QueryFilter

    def matches(self, entity: MythEntity) -> bool:
        return not self.inner.matches(entity)
