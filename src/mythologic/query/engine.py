"""Query engine over an ontology store.

Every operation is a linear scan of the store; there are no secondary
indexes beyond the store's adjacency index, which is fine for ontologies of
a few thousand entities.
"""

from collections.abc import Iterable, Sequence

from rapidfuzz import fuzz, process

from mythologic.core.ids import MythId
from mythologic.models import MythEntity
from mythologic.ontology import MythOntology
from mythologic.query.filters import QueryFilter
from mythologic.query.results import QueryResult, QueryResultSet


def _summarize(entities: Iterable[MythEntity]) -> QueryResultSet:
    """Build a result set, keeping the first occurrence of each id."""
    seen: set[MythId] = set()
    results = []
    for entity in entities:
        if entity.id in seen:
            continue
        seen.add(entity.id)
        results.append(QueryResult(id=entity.id, name=entity.name, entity_type=entity.entity_type))
    return QueryResultSet(results)


class QueryEngine:
    """Evaluates filters and one-hop traversals against a :class:`MythOntology`."""

    def __init__(self, ontology: MythOntology):
        self.ontology = ontology

    def query(self, filters: Sequence[QueryFilter] = ()) -> QueryResultSet:
        """Entities matching every filter. An empty list matches everything."""
        return _summarize(
            entity
            for entity in self.ontology.all_entities()
            if all(f.matches(entity) for f in filters)
        )

    def find_related(self, entity_id: MythId) -> QueryResultSet:
        """Resolve the entity's ``relationships`` list.

        Ids that do not resolve to a stored entity are skipped, as is an
        unknown ``entity_id``.
        """
        entity = self.ontology.get_entity(entity_id)
        if entity is None:
            return QueryResultSet.empty()
        related = (self.ontology.get_entity(rid) for rid in entity.relationships)
        return _summarize(e for e in related if e is not None)

    def find_neighbors(self, entity_id: MythId) -> QueryResultSet:
        """Entities one hop away through stored relationships."""
        neighbors = (self.ontology.get_entity(nid) for nid in self.ontology.neighbors(entity_id))
        return _summarize(e for e in neighbors if e is not None)

    def find_by_name(self, name: str) -> QueryResultSet:
        """Case-insensitive partial name match."""
        return self.query([QueryFilter.name_contains(name)])

    def find_by_type(self, entity_type: str) -> QueryResultSet:
        return self.query([QueryFilter.entity_type(entity_type)])

    def suggest_names(self, text: str, limit: int = 5, min_score: float = 60.0) -> list[str]:
        """Fuzzy name suggestions, best first. Useful when a lookup finds nothing."""
        names = sorted({entity.name for entity in self.ontology.all_entities()})
        if not names or not text:
            return []
        matches = process.extract(
            text.lower(),
            {name: name.lower() for name in names},
            scorer=fuzz.WRatio,
            limit=limit,
        )
        return [key for _, score, key in matches if score >= min_score]
