"""Tests for the bundled example datasets."""

import pytest

from mythologic.examples import (
    ALL_ONTOLOGIES,
    COLLECTION_ONTOLOGIES,
    EXAMPLE_ONTOLOGIES,
    create_celtic_ontology,
    create_egyptian_ontology,
    create_example_ontology,
    create_greek_ontology,
    create_heroes_ontology,
    create_hindu_ontology,
    create_norse_ontology,
)
from mythologic.models import Pantheon
from mythologic.query import QueryEngine, QueryFilter

RELATIONSHIP_KINDS = {
    "FamilyRelationship",
    "AllianceRelationship",
    "ConflictRelationship",
    "TransformationRelationship",
}


@pytest.fixture(params=sorted(EXAMPLE_ONTOLOGIES))
def dataset(request):
    return create_example_ontology(request.param)


class TestAllDatasets:
    """Every dataset is complete and self-consistent."""

    def test_has_every_relationship_kind(self, dataset):
        types = {e.entity_type for e in dataset.all_entities()}
        assert RELATIONSHIP_KINDS <= types

    def test_has_context(self, dataset):
        types = {e.entity_type for e in dataset.all_entities()}
        assert {"Culture", "Pantheon", "MythologicalEra", "MythologicalRegion"} <= types

    def test_has_node_kinds(self, dataset):
        types = {e.entity_type for e in dataset.all_entities()}
        assert {"Deity", "Hero", "Creature", "Artifact", "Location", "Concept"} <= types

    def test_no_dangling_references(self, dataset):
        assert dataset.dangling_references() == []

    def test_pantheon_deities_resolve(self, dataset):
        for entity in dataset.all_entities():
            if isinstance(entity, Pantheon):
                for deity_id in entity.deity_ids():
                    assert dataset.get_entity(deity_id).entity_type == "Deity"

    def test_names_unique(self, dataset):
        names = [e.name for e in dataset.all_entities()]
        assert len(names) == len(set(names))


@pytest.fixture(params=sorted(COLLECTION_ONTOLOGIES))
def collection(request):
    return create_example_ontology(request.param)


class TestCollections:
    """Collections hold one node kind gathered from several cultures."""

    def test_single_kind(self, collection):
        types = {e.entity_type for e in collection.all_entities()}
        assert len(types) == 1
        assert not types & RELATIONSHIP_KINDS

    def test_spans_cultures(self, collection):
        cultures = {e.culture for e in collection.all_entities()}
        assert len(cultures) >= 3

    def test_names_unique(self, collection):
        names = [e.name for e in collection.all_entities()]
        assert len(names) == len(set(names))

    def test_no_relationships(self, collection):
        assert all(e.relationships == [] for e in collection.all_entities())
        assert collection.dangling_references() == []

    def test_every_entry_sourced(self, collection):
        assert all(e.metadata.sources for e in collection.all_entities())


class TestRegistry:
    def test_names(self):
        assert set(EXAMPLE_ONTOLOGIES) == {"greek", "norse", "egyptian", "celtic", "hindu"}
        assert set(COLLECTION_ONTOLOGIES) == {
            "artifacts",
            "heroes",
            "creatures",
            "locations",
            "concepts",
        }
        assert set(ALL_ONTOLOGIES) == set(EXAMPLE_ONTOLOGIES) | set(COLLECTION_ONTOLOGIES)

    def test_collection_by_name(self):
        heroes = create_example_ontology("Heroes")
        assert heroes.lookup_name("Gilgamesh").culture == "Mesopotamian"

    def test_case_insensitive(self):
        assert create_example_ontology("Greek").lookup_name("Zeus") is not None

    def test_unknown(self):
        with pytest.raises(KeyError):
            create_example_ontology("atlantean")

    def test_fresh_each_time(self):
        a = create_greek_ontology()
        b = create_greek_ontology()
        assert a.lookup_name("Zeus").id != b.lookup_name("Zeus").id


class TestGreek:
    @pytest.fixture
    def greek(self):
        return create_greek_ontology()

    def test_landmarks(self, greek):
        assert greek.lookup_name("Zeus") is not None
        assert greek.lookup_name("Mount Olympus") is not None

    def test_greek_deities(self, greek):
        engine = QueryEngine(greek)
        deities = engine.query([QueryFilter.entity_type("Deity"), QueryFilter.culture("Greek")])
        assert {"Zeus", "Hera", "Athena", "Poseidon", "Apollo"} <= set(deities.names())

    def test_marriage_registered_on_hera(self, greek):
        hera = greek.lookup_name("Hera")
        related = QueryEngine(greek).find_related(hera.id)
        assert related.names() == ["Marriage of Zeus and Hera"]

    def test_zeus_neighbors(self, greek):
        zeus = greek.lookup_name("Zeus")
        neighbors = set(QueryEngine(greek).find_neighbors(zeus.id).names())
        assert {"Hera", "Athena", "Heracles", "Perseus", "Poseidon", "Cronus"} <= neighbors

    def test_zeus_has_source(self, greek):
        zeus = greek.lookup_name("Zeus")
        assert zeus.metadata.sources[0].title == "Theogony"


class TestNorse:
    def test_landmarks(self):
        norse = create_norse_ontology()
        assert norse.lookup_name("Odin") is not None
        assert norse.lookup_name("Asgard") is not None

    def test_loki_shapeshifting_properties(self):
        norse = create_norse_ontology()
        rel = norse.lookup_name("Loki's shapeshifting")
        assert rel.source_id == rel.target_id
        assert rel.permanent is False
        assert rel.reversible is True


class TestEgyptian:
    def test_landmarks(self):
        egyptian = create_egyptian_ontology()
        assert egyptian.lookup_name("Ra") is not None
        assert egyptian.lookup_name("Ancient Egyptian").entity_type == "Culture"


class TestCeltic:
    @pytest.fixture
    def celtic(self):
        return create_celtic_ontology()

    def test_landmarks(self, celtic):
        assert celtic.lookup_name("The Dagda").entity_type == "Deity"
        assert celtic.lookup_name("Tír na nÓg").entity_type == "Location"
        assert celtic.lookup_name("Tuatha Dé Danann").entity_type == "Pantheon"

    def test_lugh_slays_balor(self, celtic):
        lugh = celtic.lookup_name("Lugh")
        balor = celtic.lookup_name("Balor")
        battle = celtic.lookup_name("Lugh slays Balor")
        assert battle.bidirectional is False
        assert battle.outcome.victor_id == lugh.id
        assert battle.id in lugh.relationships
        assert battle.id not in balor.relationships

    def test_morrigan_shapeshifting(self, celtic):
        rel = celtic.lookup_name("The Morrígan's shapeshifting")
        assert rel.source_id == rel.target_id
        assert rel.reversible is True


class TestHindu:
    @pytest.fixture
    def hindu(self):
        return create_hindu_ontology()

    def test_landmarks(self, hindu):
        assert hindu.lookup_name("Vishnu").entity_type == "Deity"
        assert hindu.lookup_name("Mount Meru").entity_type == "Location"
        assert hindu.lookup_name("Hindu Tradition").entity_type == "Culture"

    def test_vishnu_avatars(self, hindu):
        vishnu = hindu.lookup_name("Vishnu")
        neighbors = set(QueryEngine(hindu).find_neighbors(vishnu.id).names())
        assert {"Rama", "Krishna"} <= neighbors

    def test_ganesha_parents(self, hindu):
        ganesha = hindu.lookup_name("Ganesha")
        parents = {
            hindu.get_entity(r.source_id).name
            for r in hindu.all_entities()
            if r.entity_type == "FamilyRelationship" and r.target_id == ganesha.id
        }
        assert parents == {"Shiva", "Devi"}

    def test_sources_not_shared(self, hindu):
        shiva = hindu.lookup_name("Shiva")
        brahma = hindu.lookup_name("Brahma")
        assert shiva.metadata.sources[0] == brahma.metadata.sources[0]
        assert shiva.metadata.sources[0] is not brahma.metadata.sources[0]


def test_heroes_collection_fresh_each_time():
    assert create_heroes_ontology().lookup_name("Heracles").id != (
        create_heroes_ontology().lookup_name("Heracles").id
    )
