"""Tests for relationship models and their type rules."""

import pytest
from pydantic import ValidationError

from mythologic.core import new_id
from mythologic.models import (
    AllianceRelationship,
    AllianceType,
    ConflictOutcome,
    ConflictRelationship,
    ConflictType,
    FamilyRelationship,
    FamilyRelationshipType,
    Relationship,
    RelationshipType,
    TransformationRelationship,
    TransformationType,
)


class TestRelationshipTypes:
    """Test inverse and default-direction rules per type enum."""

    @pytest.mark.parametrize(
        "family_type",
        [
            FamilyRelationshipType.SIBLING,
            FamilyRelationshipType.SPOUSE,
            FamilyRelationshipType.TWIN,
            FamilyRelationshipType.COUSIN,
        ],
    )
    def test_symmetric_family_types(self, family_type):
        assert family_type.inverse() == family_type
        assert family_type.is_typically_bidirectional()

    def test_parent_child_inverse(self):
        assert FamilyRelationshipType.PARENT.inverse() == FamilyRelationshipType.CHILD
        assert FamilyRelationshipType.CHILD.inverse() == FamilyRelationshipType.PARENT
        assert FamilyRelationshipType.ANCESTOR.inverse() == FamilyRelationshipType.DESCENDANT
        assert not FamilyRelationshipType.PARENT.is_typically_bidirectional()

    def test_inverse_is_involution(self):
        for enum in (FamilyRelationshipType, AllianceType, ConflictType, TransformationType):
            for member in enum:
                assert member.inverse().inverse() == member

    def test_alliance_direction(self):
        assert AllianceType.FRIENDSHIP.is_typically_bidirectional()
        assert not AllianceType.MENTORSHIP.is_typically_bidirectional()
        assert not AllianceType.PATRONAGE.is_typically_bidirectional()

    def test_conflict_direction(self):
        assert ConflictType.WAR.is_typically_bidirectional()
        assert not ConflictType.CURSE.is_typically_bidirectional()
        assert not ConflictType.PUNISHMENT.is_typically_bidirectional()

    def test_transformation_curse_blessing(self):
        assert TransformationType.CURSE.inverse() == TransformationType.BLESSING
        assert TransformationType.BLESSING.inverse() == TransformationType.CURSE
        assert TransformationType.PETRIFICATION.inverse() == TransformationType.PETRIFICATION
        assert not any(t.is_typically_bidirectional() for t in TransformationType)


class TestRelationship:
    """Test the base relationship model."""

    @pytest.fixture
    def ends(self):
        return new_id(), new_id()

    def test_defaults(self, ends):
        rel = Relationship(name="Worship", source_id=ends[0], target_id=ends[1])
        assert rel.strength == 0.5
        assert rel.bidirectional is False
        assert rel.relationship_type == RelationshipType.UNKNOWN
        assert rel.properties == {}

    @pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (2.0, 1.0), (0.3, 0.3)])
    def test_strength_clamped(self, ends, value, expected):
        rel = Relationship(name="r", source_id=ends[0], target_id=ends[1], strength=value)
        assert rel.strength == expected
        rel.set_strength(value)
        assert rel.strength == expected

    @pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (2.0, 1.0)])
    def test_strength_clamped_on_assignment(self, ends, value, expected):
        rel = FamilyRelationship(
            name="r", source_id=ends[0], target_id=ends[1], family_type=FamilyRelationshipType.SPOUSE
        )
        rel.strength = value
        assert rel.strength == expected
        assert rel.bidirectional is True

    def test_endpoints_frozen(self, ends):
        rel = Relationship(name="r", source_id=ends[0], target_id=ends[1])
        with pytest.raises(ValidationError):
            rel.source_id = new_id()

    def test_other_end(self, ends):
        source, target = ends
        rel = Relationship(name="r", source_id=source, target_id=target)
        assert rel.involves(source)
        assert rel.other_end(source) == target
        assert rel.other_end(target) == source
        assert rel.other_end(new_id()) is None

    def test_generic_properties(self, ends):
        rel = Relationship(name="r", source_id=ends[0], target_id=ends[1])
        rel.set_property("location", "Crete")
        assert rel.get_property("location") == "Crete"
        assert rel.get_property("missing") is None
        assert rel.all_properties() == {"location": "Crete"}

    def test_builder_defaults(self, ends):
        rel = Relationship.builder("r", "", ends[0], ends[1], RelationshipType.WORSHIP).build()
        assert rel.strength == 0.5
        assert rel.relationship_type == RelationshipType.WORSHIP
        assert rel.bidirectional is False

    def test_builder_uses_configured_strength(self, ends, monkeypatch):
        from mythologic.config import get_settings

        monkeypatch.setenv("MYTHOLOGIC_DEFAULT_STRENGTH", "0.7")
        get_settings.cache_clear()
        rel = Relationship.builder("r", "", ends[0], ends[1]).build()
        assert rel.strength == 0.7


class TestFamilyRelationship:
    def test_spouse_bidirectional_by_default(self):
        rel = FamilyRelationship(
            name="Marriage",
            source_id=new_id(),
            target_id=new_id(),
            family_type=FamilyRelationshipType.SPOUSE,
        )
        assert rel.bidirectional is True
        assert rel.relationship_type == RelationshipType.FAMILY

    def test_explicit_direction_wins(self):
        rel = (
            FamilyRelationship.builder(
                "Marriage", "", new_id(), new_id(), FamilyRelationshipType.SPOUSE
            )
            .bidirectional(False)
            .build()
        )
        assert rel.bidirectional is False

    def test_spouse_explicitly_bidirectional(self):
        zeus_id, hera_id = new_id(), new_id()
        rel = (
            FamilyRelationship.builder(
                "Zeus and Hera", "", zeus_id, hera_id, FamilyRelationshipType.SPOUSE
            )
            .bidirectional(True)
            .build()
        )
        assert rel.bidirectional is True
        assert FamilyRelationshipType.SPOUSE.inverse() == FamilyRelationshipType.SPOUSE

    def test_reversed(self):
        zeus_id, athena_id = new_id(), new_id()
        rel = (
            FamilyRelationship.builder(
                "Zeus fathers Athena", "", zeus_id, athena_id, FamilyRelationshipType.PARENT
            )
            .strength(0.9)
            .build()
        )
        inverse = rel.reversed("Athena is daughter of Zeus")
        assert inverse.family_type == FamilyRelationshipType.CHILD
        assert (inverse.source_id, inverse.target_id) == (athena_id, zeus_id)
        assert inverse.strength == 0.9
        assert inverse.id != rel.id
        assert inverse.name == "Athena is daughter of Zeus"

    def test_setter_touches(self):
        rel = FamilyRelationship(
            name="r", source_id=new_id(), target_id=new_id(), family_type="Parent"
        )
        before = rel.metadata.updated_at
        rel.set_family_type(FamilyRelationshipType.ANCESTOR)
        assert rel.family_type == FamilyRelationshipType.ANCESTOR
        assert rel.metadata.updated_at >= before


class TestAllianceRelationship:
    def test_purpose_through_properties(self):
        rel = AllianceRelationship.builder(
            "Patronage", "", new_id(), new_id(), AllianceType.PATRONAGE, purpose="Guidance"
        ).build()
        assert rel.bidirectional is False
        assert rel.get_property("purpose") == "Guidance"

        rel.set_property("duration", "Lifelong")
        assert rel.duration == "Lifelong"
        assert "duration" not in rel.properties
        assert rel.all_properties() == {"purpose": "Guidance", "duration": "Lifelong"}

    def test_builder_property_intercepted(self):
        rel = (
            AllianceRelationship.builder("Pact", "", new_id(), new_id(), AllianceType.PACT)
            .with_property("duration", "Permanent")
            .with_property("oath", "Sworn on the Styx")
            .build()
        )
        assert rel.duration == "Permanent"
        assert rel.properties == {"oath": "Sworn on the Styx"}
        assert rel.bidirectional is True


class TestConflictRelationship:
    def test_outcome_victor(self):
        perseus_id, medusa_id = new_id(), new_id()
        rel = ConflictRelationship.builder(
            "Perseus slays Medusa", "", perseus_id, medusa_id, ConflictType.BATTLE
        ).build()
        rel.set_outcome(
            ConflictOutcome(
                description="Perseus beheaded Medusa.",
                victor_id=perseus_id,
                consequences=["Pegasus was born"],
            )
        )
        assert rel.outcome is not None
        assert rel.outcome.victor_id == perseus_id
        assert rel.outcome.consequences == ["Pegasus was born"]

    def test_no_outcome_by_default(self):
        rel = ConflictRelationship(
            name="Rivalry", source_id=new_id(), target_id=new_id(), conflict_type="Rivalry"
        )
        assert rel.outcome is None
        assert rel.bidirectional is True


class TestTransformationRelationship:
    @pytest.fixture
    def curse(self):
        return TransformationRelationship.builder(
            "Transformation of Medusa",
            "",
            new_id(),
            new_id(),
            TransformationType.CURSE,
            cause="Desecration",
        ).build()

    def test_defaults(self, curse):
        assert curse.permanent is True
        assert curse.reversible is False
        assert curse.bidirectional is False

    def test_bool_properties(self, curse):
        assert curse.get_property("permanent") == "true"
        curse.set_property("permanent", "false")
        curse.set_property("reversible", "yes")
        assert curse.permanent is False
        assert curse.reversible is True
        assert curse.get_property("reversible") == "true"

    def test_bad_bool_property(self, curse):
        with pytest.raises(ValueError):
            curse.set_property("permanent", "maybe")

    def test_reversed_becomes_blessing(self, curse):
        inverse = curse.reversed()
        assert inverse.transformation_type == TransformationType.BLESSING
        assert inverse.cause == "Desecration"
        assert inverse.name.endswith("(inverse)")
