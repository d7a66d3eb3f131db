"""The ontology store: the single owner of every entity.

Entities are kept in an insertion-ordered dict keyed by identifier. Next to
it the store maintains an adjacency index, a networkx ``MultiDiGraph`` whose
edges are keyed by relationship id. The index lets relationships register
themselves on their endpoint entities no matter which side was inserted
first.

Endpoints are not validated on insert. A relationship may point at ids that
are not (yet) stored; lookups of such ids return ``None`` and
:meth:`MythOntology.dangling_references` reports them on demand.
"""

import logging
from collections.abc import Iterator

import networkx as nx

from mythologic.config import get_settings
from mythologic.core.base import RelatableEntity
from mythologic.core.ids import MythId
from mythologic.errors import CollisionError
from mythologic.models import MythEntity, Relationship

logger = logging.getLogger(__name__)


class MythOntology:
    """Registry mapping identifiers to entities.

    Args:
        strict_ids: raise :class:`CollisionError` when an insert reuses an
            identifier. Defaults to the ``strict_ids`` setting; when off the
            existing entity is replaced and a warning is logged.
        auto_register: register relationship ids on their endpoints'
            ``relationships`` lists. Defaults to the
            ``auto_register_relationships`` setting.
    """

    def __init__(self, strict_ids: bool | None = None, auto_register: bool | None = None):
        settings = get_settings()
        self.strict_ids = settings.strict_ids if strict_ids is None else strict_ids
        self.auto_register = (
            settings.auto_register_relationships if auto_register is None else auto_register
        )
        self._entities: dict[MythId, MythEntity] = {}
        self._index = nx.MultiDiGraph()

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def add_entity(self, entity: MythEntity) -> None:
        """Insert an entity keyed by its id.

        Raises:
            CollisionError: in strict mode, if the id is already taken.
        """
        existing = self._entities.get(entity.id)
        if existing is not None and existing is not entity:
            if self.strict_ids:
                raise CollisionError(entity.id, existing.name, entity.name)
            logger.warning(
                "Replacing %s %r with %s %r under id %s",
                existing.entity_type,
                existing.name,
                entity.entity_type,
                entity.name,
                entity.id,
            )
            self._unindex(existing)

        self._entities[entity.id] = entity
        self._index_entity(entity)
        logger.debug("Added %s %r (%s)", entity.entity_type, entity.name, entity.id)

    def get_entity(self, entity_id: MythId) -> MythEntity | None:
        """Return the stored entity, or None."""
        return self._entities.get(entity_id)

    def get_entity_mut(self, entity_id: MythId) -> MythEntity | None:
        """Return the stored entity for in-place modification, or None.

        This is the same object :meth:`get_entity` returns. If a
        relationship's direction flag changes afterwards, call
        :meth:`reindex` so the adjacency index follows.
        """
        return self._entities.get(entity_id)

    def remove_entity(self, entity_id: MythId) -> MythEntity | None:
        """Remove and return the entity, or None if it was not stored."""
        entity = self._entities.pop(entity_id, None)
        if entity is None:
            return None
        self._unindex(entity)
        logger.debug("Removed %s %r (%s)", entity.entity_type, entity.name, entity_id)
        return entity

    def all_entities(self) -> list[MythEntity]:
        """All entities. Callers must not rely on the order."""
        return list(self._entities.values())

    def entity_count(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[MythEntity]:
        return iter(list(self._entities.values()))

    # ------------------------------------------------------------------
    # Graph reads
    # ------------------------------------------------------------------

    def lookup_name(self, name: str) -> MythEntity | None:
        """First entity whose name equals ``name`` exactly."""
        for entity in self._entities.values():
            if entity.name == name:
                return entity
        return None

    def relationships_of(self, entity_id: MythId) -> list[Relationship]:
        """Stored relationships leaving ``entity_id``.

        Bidirectional relationships count from both endpoints.
        """
        if entity_id not in self._index:
            return []
        found: dict[MythId, Relationship] = {}
        for _, _, key in self._index.out_edges(entity_id, keys=True):
            relationship = self._entities.get(key)
            if isinstance(relationship, Relationship):
                found.setdefault(key, relationship)
        return list(found.values())

    def neighbors(self, entity_id: MythId) -> list[MythId]:
        """Ids one hop away along outgoing (or bidirectional) edges."""
        if entity_id not in self._index:
            return []
        seen: list[MythId] = []
        for neighbor in self._index.successors(entity_id):
            if neighbor not in seen:
                seen.append(neighbor)
        return seen

    def dangling_references(self) -> list[tuple[MythId, MythId]]:
        """``(relationship_id, missing_endpoint_id)`` for every unresolved endpoint."""
        missing = []
        for entity in self._entities.values():
            if not isinstance(entity, Relationship):
                continue
            for endpoint in (entity.source_id, entity.target_id):
                if endpoint not in self._entities:
                    missing.append((entity.id, endpoint))
        return missing

    def reindex(self) -> None:
        """Rebuild the adjacency index from the stored relationships.

        With auto-registration on, endpoint ``relationships`` lists are
        brought back in line too: a relationship id stays registered only on
        the endpoints its current direction flag calls for.
        """
        self._index.clear()
        for entity in self._entities.values():
            self._index_entity(entity)
        if self.auto_register:
            self._prune_registrations()

    def to_networkx(self) -> nx.MultiDiGraph:
        """A copy of the graph restricted to stored entities.

        Nodes carry ``name`` and ``entity_type`` attributes; edges carry the
        relationship ``name``, ``entity_type`` and ``strength``.
        """
        graph = nx.MultiDiGraph()
        for entity in self._entities.values():
            if not isinstance(entity, Relationship):
                graph.add_node(entity.id, name=entity.name, entity_type=entity.entity_type)
        for source, target, key in self._index.edges(keys=True):
            relationship = self._entities.get(key)
            if relationship is None or source not in graph or target not in graph:
                continue
            graph.add_edge(
                source,
                target,
                key=key,
                name=relationship.name,
                entity_type=relationship.entity_type,
                strength=relationship.strength,
            )
        return graph

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------

    def _index_entity(self, entity: MythEntity) -> None:
        if isinstance(entity, Relationship):
            self._index.add_edge(entity.source_id, entity.target_id, key=entity.id)
            if entity.bidirectional and entity.source_id != entity.target_id:
                self._index.add_edge(entity.target_id, entity.source_id, key=entity.id)
            if self.auto_register:
                for endpoint in self._registering_endpoints(entity):
                    node = self._entities.get(endpoint)
                    if isinstance(node, RelatableEntity):
                        node.add_relationship(entity.id)
            return

        self._index.add_node(entity.id)
        if self.auto_register and isinstance(entity, RelatableEntity):
            # Relationships inserted before this node
            for _, _, key in self._index.out_edges(entity.id, keys=True):
                if key in self._entities:
                    entity.add_relationship(key)

    def _prune_registrations(self) -> None:
        for entity in self._entities.values():
            if not isinstance(entity, RelatableEntity):
                continue
            for relationship_id in list(entity.relationships):
                relationship = self._entities.get(relationship_id)
                if not isinstance(relationship, Relationship):
                    continue
                if entity.id not in self._registering_endpoints(relationship):
                    entity.remove_relationship(relationship_id)

    def _unindex(self, entity: MythEntity) -> None:
        if not isinstance(entity, Relationship):
            # Incident edges stay so a re-inserted node picks them up again
            self._discard_orphan(entity.id)
            return
        for source, target in (
            (entity.source_id, entity.target_id),
            (entity.target_id, entity.source_id),
        ):
            if self._index.has_edge(source, target, key=entity.id):
                self._index.remove_edge(source, target, key=entity.id)
        self._discard_orphan(entity.source_id)
        self._discard_orphan(entity.target_id)
        if self.auto_register:
            for endpoint in (entity.source_id, entity.target_id):
                node = self._entities.get(endpoint)
                if isinstance(node, RelatableEntity):
                    node.remove_relationship(entity.id)

    def _discard_orphan(self, node_id: MythId) -> None:
        """Drop an index node that is neither stored nor touched by any edge."""
        if (
            node_id in self._index
            and node_id not in self._entities
            and self._index.degree(node_id) == 0
        ):
            self._index.remove_node(node_id)

    @staticmethod
    def _registering_endpoints(relationship: Relationship) -> list[MythId]:
        if relationship.bidirectional and relationship.source_id != relationship.target_id:
            return [relationship.source_id, relationship.target_id]
        return [relationship.source_id]
