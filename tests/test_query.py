"""Tests for query filters, results and the query engine."""

import pytest

from mythologic.core import new_id
from mythologic.models import (
    Culture,
    Deity,
    FamilyRelationship,
    FamilyRelationshipType,
    MythologicalRegion,
)
from mythologic.ontology import MythOntology
from mythologic.query import (
    AndFilter,
    EntityTypeFilter,
    NotFilter,
    QueryEngine,
    QueryFilter,
    QueryResult,
    QueryResultSet,
)


@pytest.fixture
def engine(ontology):
    return QueryEngine(ontology)


@pytest.fixture
def sample_entities(zeus, hera, odin, heracles):
    rel = FamilyRelationship(
        name="Marriage",
        source_id=zeus.id,
        target_id=hera.id,
        family_type=FamilyRelationshipType.SPOUSE,
    )
    return [zeus, hera, odin, heracles, rel, Culture(name="Norse"), MythologicalRegion(name="Aegean")]


class TestFilters:
    """Test leaf predicates and combinators."""

    def test_entity_type(self, sample_entities):
        f = QueryFilter.entity_type("Deity")
        assert isinstance(f, EntityTypeFilter)
        for entity in sample_entities:
            assert f.matches(entity) == (entity.entity_type == "Deity")

    def test_name_contains_case_insensitive(self, zeus, hera):
        for text in ("zeus", "ZEUS", "eu", "Zeus"):
            assert QueryFilter.name_contains(text).matches(zeus)
        assert not QueryFilter.name_contains("zeus").matches(hera)

    def test_empty_substring_matches_everything(self, sample_entities):
        f = QueryFilter.name_contains("")
        assert all(f.matches(e) for e in sample_entities)

    def test_culture(self, zeus, odin, sample_entities):
        f = QueryFilter.culture("Greek")
        assert f.matches(zeus)
        assert not f.matches(odin)
        # Entities without a culture never match
        for entity in sample_entities[4:]:
            assert not f.matches(entity)
        assert not QueryFilter.culture("greek").matches(zeus)

    def test_attributes(self, zeus, hera):
        zeus.metadata.add_attribute("realm", "Sky")
        assert QueryFilter.has_attribute("realm").matches(zeus)
        assert not QueryFilter.has_attribute("realm").matches(hera)
        assert QueryFilter.attribute_equals("realm", "Sky").matches(zeus)
        assert not QueryFilter.attribute_equals("realm", "sky").matches(zeus)
        assert not QueryFilter.attribute_equals("realm", "Sky").matches(hera)

    def test_boolean_algebra(self, sample_entities):
        filters = [
            QueryFilter.entity_type("Deity"),
            QueryFilter.culture("Greek"),
            QueryFilter.name_contains("e"),
        ]
        for f in filters:
            for g in filters:
                for e in sample_entities:
                    assert f.and_(g).matches(e) == (f.matches(e) and g.matches(e))
                    assert f.or_(g).matches(e) == (f.matches(e) or g.matches(e))
                    assert f.not_().not_().matches(e) == f.matches(e)

    def test_operators(self, zeus, hera, odin):
        greek_gods = QueryFilter.entity_type("Deity") & QueryFilter.culture("Greek")
        assert isinstance(greek_gods, AndFilter)
        not_zeus = greek_gods & ~QueryFilter.name_contains("zeus")
        assert isinstance(~QueryFilter.name_contains("x"), NotFilter)

        assert not not_zeus.matches(zeus)
        assert not_zeus.matches(hera)
        assert not not_zeus.matches(odin)
        assert (QueryFilter.culture("Norse") | QueryFilter.name_contains("hera")).matches(hera)

    def test_filters_are_values(self):
        assert QueryFilter.culture("Greek") == QueryFilter.culture("Greek")
        assert hash(QueryFilter.entity_type("Deity")) == hash(QueryFilter.entity_type("Deity"))


class TestQueryResultSet:
    @pytest.fixture
    def results(self):
        return QueryResultSet(
            [
                QueryResult(new_id(), "Zeus", "Deity"),
                QueryResult(new_id(), "Heracles", "Hero"),
                QueryResult(new_id(), "Athena", "Deity"),
            ]
        )

    def test_empty(self):
        empty = QueryResultSet.empty()
        assert empty.is_empty()
        assert empty.count() == 0
        assert empty.first() is None

    def test_duplicates_dropped_at_construction(self):
        zeus = QueryResult(new_id(), "Zeus", "Deity")
        hera = QueryResult(new_id(), "Hera", "Deity")
        results = QueryResultSet([zeus, hera, zeus])
        assert results.count() == 2
        assert results.names() == ["Zeus", "Hera"]

    def test_first_and_count(self, results):
        assert results.count() == 3
        assert len(results) == 3
        assert results.first().name == "Zeus"

    def test_filter_by_type(self, results):
        deities = results.filter_by_type("Deity")
        assert deities.names() == ["Zeus", "Athena"]
        assert results.count() == 3

    def test_sort_by_name(self, results):
        results.sort_by_name()
        assert results.names() == ["Athena", "Heracles", "Zeus"]

    def test_to_dicts(self, results):
        first = results.to_dicts()[0]
        assert first["name"] == "Zeus"
        assert first["entity_type"] == "Deity"
        assert isinstance(first["id"], str)

    def test_entity_ids(self, results):
        assert results.entity_ids() == [r.id for r in results]


class TestQueryEngine:
    """Test queries against a store."""

    def test_empty_filter_list_returns_all_once(self, engine, ontology):
        results = engine.query([])
        assert results.count() == ontology.entity_count()
        assert len(set(results.entity_ids())) == results.count()

    def test_culture_query(self, engine):
        results = engine.query([QueryFilter.culture("Greek"), QueryFilter.entity_type("Deity")])
        assert sorted(results.names()) == ["Hera", "Zeus"]

    def test_single_greek_deity(self):
        store = MythOntology()
        store.add_entity(Deity(name="Zeus", culture="Greek"))
        store.add_entity(Deity(name="Odin", culture="Norse"))
        results = QueryEngine(store).query([QueryFilter.culture("Greek")])
        assert results.names() == ["Zeus"]

    def test_find_by_name(self, engine, zeus):
        lower = engine.find_by_name("zeu")
        upper = engine.find_by_name("ZEUS")
        assert lower.entity_ids() == [zeus.id]
        assert upper.entity_ids() == [zeus.id]

    def test_find_by_type(self, engine):
        assert engine.find_by_type("Hero").names() == ["Heracles"]
        assert engine.find_by_type("Creature").is_empty()

    def test_find_related(self, ontology, engine, zeus, hera, heracles):
        marriage = FamilyRelationship.builder(
            "Marriage", "", zeus.id, hera.id, FamilyRelationshipType.SPOUSE
        ).build()
        ontology.add_entity(marriage)

        related = engine.find_related(zeus.id)
        assert related.entity_ids() == [marriage.id]
        assert related.first().entity_type == "FamilyRelationship"
        assert engine.find_related(heracles.id).is_empty()

    def test_find_related_skips_unresolved(self, engine, zeus):
        zeus.add_relationship(new_id())
        assert engine.find_related(zeus.id).is_empty()

    def test_find_related_unknown_entity(self, engine):
        assert engine.find_related(new_id()).is_empty()

    def test_find_neighbors(self, ontology, engine, zeus, hera, heracles):
        ontology.add_entity(
            FamilyRelationship.builder(
                "Marriage", "", zeus.id, hera.id, FamilyRelationshipType.SPOUSE
            ).build()
        )
        ontology.add_entity(
            FamilyRelationship.builder(
                "Fathering", "", zeus.id, heracles.id, FamilyRelationshipType.PARENT
            ).build()
        )
        assert sorted(engine.find_neighbors(zeus.id).names()) == ["Hera", "Heracles"]
        assert engine.find_neighbors(hera.id).names() == ["Zeus"]

    def test_suggest_names(self, engine):
        suggestions = engine.suggest_names("Zues")
        assert suggestions[0] == "Zeus"

    def test_suggest_names_nothing_close(self, engine):
        assert engine.suggest_names("") == []
        assert engine.suggest_names("Quetzalcoatl", min_score=95) == []
