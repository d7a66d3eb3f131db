"""Tests for node and cultural context entities."""

import pytest
from pydantic import ValidationError

from mythologic.core import new_id
from mythologic.models import (
    ENTITY_TYPE_NAMES,
    Artifact,
    ArtifactType,
    Concept,
    Creature,
    CreatureType,
    Culture,
    Deity,
    DeityImportance,
    FamilyRelationship,
    FamilyRelationshipType,
    Gender,
    Hero,
    HeroOrigin,
    Location,
    LocationType,
    MythologicalEra,
    MythologicalRegion,
    Pantheon,
    TimePeriod,
    entity_adapter,
)


class TestUniformSurface:
    """Every kind answers the same accessor questions."""

    def test_entity_type_names(self):
        assert len(ENTITY_TYPE_NAMES) == 15
        assert "Deity" in ENTITY_TYPE_NAMES
        assert "TransformationRelationship" in ENTITY_TYPE_NAMES
        assert "MythologicalRegion" in ENTITY_TYPE_NAMES

    @pytest.mark.parametrize(
        "entity,expected_type",
        [
            (Deity(name="Zeus", culture="Greek"), "Deity"),
            (Hero(name="Perseus", culture="Greek"), "Hero"),
            (Creature(name="Fenrir", culture="Norse"), "Creature"),
            (Artifact(name="Gungnir", culture="Norse"), "Artifact"),
            (Location(name="Duat", culture="Egyptian"), "Location"),
            (Concept(name="Ma'at", culture="Egyptian"), "Concept"),
            (Pantheon(name="Aesir", culture="Norse"), "Pantheon"),
            (MythologicalEra(name="Golden Age", culture="Greek"), "MythologicalEra"),
        ],
    )
    def test_cultural_kinds(self, entity, expected_type):
        assert entity.entity_type == expected_type
        assert entity.culture is not None
        assert entity.relationships == []

    def test_culture_has_no_culture(self):
        assert Culture(name="Ancient Greek").culture is None

    def test_region_has_no_culture(self):
        region = MythologicalRegion(name="Aegean", cultures={"Ancient Greek"})
        assert region.culture is None
        assert region.significance == "Unknown significance"

    def test_relationship_surface(self):
        rel = FamilyRelationship(
            name="Siblings",
            source_id=new_id(),
            target_id=new_id(),
            family_type=FamilyRelationshipType.SIBLING,
        )
        assert rel.relationships == []
        assert rel.culture is None
        assert rel.entity_type == "FamilyRelationship"

    def test_culture_required_for_cultural_kinds(self):
        with pytest.raises(ValidationError):
            Deity(name="Nameless")

    def test_ids_generated(self):
        a = Deity(name="Zeus", culture="Greek")
        b = Deity(name="Zeus", culture="Greek")
        assert a.id != b.id


class TestDeity:
    def test_defaults(self):
        deity = Deity(name="Zeus", description="King of the gods", culture="Greek")
        assert deity.gender == Gender.UNKNOWN
        assert deity.importance == DeityImportance.UNKNOWN
        assert deity.pantheon is None
        assert deity.domains == set()

    def test_setters(self):
        deity = Deity(name="Zeus", culture="Greek")
        deity.add_domain("Sky")
        deity.add_domain("Sky")
        deity.add_domain("Thunder")
        deity.add_alternative_name("Jupiter")
        deity.set_pantheon("Olympian")
        deity.set_gender(Gender.MALE)
        deity.set_importance(DeityImportance.SUPREME)

        assert deity.domains == {"Sky", "Thunder"}
        assert deity.alternative_names == ["Jupiter"]
        assert deity.pantheon == "Olympian"
        assert deity.gender == Gender.MALE
        assert deity.importance == DeityImportance.SUPREME

    def test_setter_touches_metadata(self):
        deity = Deity(name="Zeus", culture="Greek")
        created = deity.metadata.created_at
        deity.add_domain("Sky")
        assert deity.metadata.updated_at >= created


class TestOtherNodes:
    def test_hero(self):
        hero = Hero(name="Heracles", culture="Greek")
        hero.set_origin(HeroOrigin.DEMIGOD)
        hero.add_achievement("Twelve Labors")
        assert hero.origin == HeroOrigin.DEMIGOD
        assert hero.achievements == ["Twelve Labors"]

    def test_creature(self):
        creature = Creature(name="Cerberus", culture="Greek")
        creature.set_creature_type(CreatureType.GUARDIAN)
        creature.add_habitat("Underworld")
        creature.add_habitat("Underworld")
        creature.add_ability("Three heads")
        assert creature.creature_type == CreatureType.GUARDIAN
        assert creature.habitats == {"Underworld"}
        assert creature.abilities == ["Three heads"]

    def test_artifact(self):
        artifact = Artifact(name="Mjolnir", culture="Norse")
        artifact.set_artifact_type(ArtifactType.WEAPON)
        artifact.set_creator("Sindri")
        artifact.set_owner("Thor")
        artifact.add_power("Returns when thrown")
        assert artifact.artifact_type == ArtifactType.WEAPON
        assert (artifact.creator, artifact.owner) == ("Sindri", "Thor")
        assert artifact.powers == ["Returns when thrown"]

    def test_location(self):
        location = Location(name="Asgard", culture="Norse")
        location.set_location_type(LocationType.HEAVEN)
        location.add_characteristic("Valhalla")
        location.add_accessibility("Bifrost")
        assert location.location_type == LocationType.HEAVEN
        assert location.accessibility == ["Bifrost"]

    def test_enum_values_are_pascal_case(self):
        assert Gender("NonBinary") is Gender.NON_BINARY
        assert HeroOrigin.BLESSED_MORTAL.value == "BlessedMortal"


class TestContextEntities:
    def test_culture(self):
        culture = Culture(name="Norse")
        culture.add_region("Scandinavia")
        culture.add_language("Old Norse")
        culture.add_influence("Germanic")
        culture.add_cultural_practice("Blot")
        culture.add_time_period(TimePeriod(name="Viking Age", start_year=793, end_year=1066))
        assert culture.regions == {"Scandinavia"}
        assert culture.time_periods[0].start_year == 793

    def test_pantheon_membership(self):
        zeus_id, apollo_id, other_id = new_id(), new_id(), new_id()
        pantheon = Pantheon(name="Olympian Pantheon", culture="Greek")
        pantheon.add_primary_deity(zeus_id)
        pantheon.add_secondary_deity(apollo_id)
        assert pantheon.contains_deity(zeus_id)
        assert pantheon.contains_deity(apollo_id)
        assert not pantheon.contains_deity(other_id)
        assert set(pantheon.deity_ids()) == {zeus_id, apollo_id}

    def test_era(self):
        era = MythologicalEra(name="Age of Heroes", culture="Greek")
        era.set_sequence_order(4)
        era.set_end_event("The Trojan War")
        era.add_characteristic("Demigods")
        assert era.sequence_order == 4
        assert era.end_event == "The Trojan War"


class TestDiscriminatedUnion:
    """Dicts validate back into the right kind via ``kind``."""

    def test_node_round_trip(self):
        deity = Deity(name="Ra", culture="Egyptian", domains={"Sun"})
        restored = entity_adapter.validate_python(deity.model_dump())
        assert isinstance(restored, Deity)
        assert restored == deity

    def test_relationship_round_trip(self):
        rel = FamilyRelationship(
            name="Parent",
            source_id=new_id(),
            target_id=new_id(),
            family_type=FamilyRelationshipType.PARENT,
        )
        restored = entity_adapter.validate_python(rel.model_dump(mode="json"))
        assert isinstance(restored, FamilyRelationship)
        assert restored.id == rel.id
        assert restored.source_id == rel.source_id

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            entity_adapter.validate_python({"kind": "Demon", "name": "Nobody"})
