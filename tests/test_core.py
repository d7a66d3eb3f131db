"""Tests for identifiers, metadata and configuration."""

from uuid import UUID

import pytest

from mythologic.config import Settings, get_settings
from mythologic.core import Metadata, Source, SourceType, format_id, new_id, parse_id
from mythologic.errors import MalformedIdentifierError, MythologicError


class TestIdentifiers:
    """Test identifier generation and parsing."""

    def test_new_ids_are_unique(self):
        ids = {new_id() for _ in range(100)}
        assert len(ids) == 100

    def test_format_then_parse(self):
        entity_id = new_id()
        text = format_id(entity_id)
        assert text == text.lower()
        assert len(text) == 36
        assert parse_id(text) == entity_id

    def test_parse_strips_whitespace(self):
        entity_id = new_id()
        assert parse_id(f"  {entity_id}\n") == entity_id

    def test_parse_malformed(self):
        with pytest.raises(MalformedIdentifierError) as exc_info:
            parse_id("not-an-id")
        assert exc_info.value.text == "not-an-id"

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_id("")
        assert issubclass(MalformedIdentifierError, MythologicError)

    def test_parse_non_string(self):
        with pytest.raises(MalformedIdentifierError):
            parse_id(1234)

    def test_ids_are_uuids(self):
        assert isinstance(new_id(), UUID)


class TestMetadata:
    """Test metadata bookkeeping."""

    def test_fresh_timestamps_equal(self):
        metadata = Metadata()
        assert metadata.created_at == metadata.updated_at
        assert metadata.created_at.tzinfo is not None

    def test_empty_by_default(self):
        metadata = Metadata()
        assert metadata.sources == []
        assert metadata.attributes == {}
        assert metadata.confidence is None

    def test_update_timestamp(self):
        metadata = Metadata()
        created = metadata.created_at
        metadata.update_timestamp()
        assert metadata.updated_at >= created
        assert metadata.created_at == created

    def test_attribute_overwrite(self):
        metadata = Metadata()
        metadata.add_attribute("epithet", "Cloud-gatherer")
        metadata.add_attribute("epithet", "Thunderer")
        assert metadata.attributes == {"epithet": "Thunderer"}

    def test_sources_keep_order(self):
        metadata = Metadata()
        metadata.add_source(Source(title="Theogony"))
        metadata.add_source(Source(title="Iliad"))
        assert [s.title for s in metadata.sources] == ["Theogony", "Iliad"]

    def test_shared_source_not_aliased(self):
        theogony = Source(title="Theogony", author="Hesiod")
        zeus, hera = Metadata(), Metadata()
        zeus.add_source(theogony)
        hera.add_source(theogony)

        zeus.sources[0].notes = "Lines 453-506"

        assert hera.sources[0].notes is None
        assert theogony.notes is None
        assert zeus.sources[0] is not hera.sources[0]

    def test_constructor_sources_copied(self):
        theogony = Source(title="Theogony")
        metadata = Metadata(sources=[theogony])
        metadata.sources[0].year = -700
        assert theogony.year is None

    @pytest.mark.parametrize("value,expected", [(1.5, 1.0), (-0.2, 0.0), (0.7, 0.7)])
    def test_confidence_clamped(self, value, expected):
        metadata = Metadata()
        metadata.set_confidence(value)
        assert metadata.confidence == expected


class TestSource:
    def test_defaults(self):
        source = Source(title="Poetic Edda")
        assert source.source_type == SourceType.OTHER
        assert source.author is None

    def test_citation_bce(self):
        source = Source(
            title="Theogony", author="Hesiod", year=-700, source_type=SourceType.PRIMARY_TEXT
        )
        assert source.citation() == "Theogony, Hesiod, 700 BCE"

    def test_citation_ce(self):
        assert Source(title="Prose Edda", year=1220).citation() == "Prose Edda, 1220"

    def test_source_type_values(self):
        assert SourceType("PrimaryText") is SourceType.PRIMARY_TEXT
        assert SourceType.ORAL_TRADITION.value == "OralTradition"


class TestSettings:
    """Test configuration loading."""

    def test_defaults(self):
        settings = Settings()
        assert settings.strict_ids is False
        assert settings.auto_register_relationships is True
        assert settings.default_strength == 0.5
        assert settings.exports_dir == settings.data_dir / "exports"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MYTHOLOGIC_STRICT_IDS", "true")
        monkeypatch.setenv("MYTHOLOGIC_DEFAULT_STRENGTH", "0.8")
        settings = get_settings()
        assert settings.strict_ids is True
        assert settings.default_strength == 0.8

    def test_strength_out_of_range_rejected(self, monkeypatch):
        from pydantic import ValidationError

        monkeypatch.setenv("MYTHOLOGIC_DEFAULT_STRENGTH", "1.5")
        with pytest.raises(ValidationError):
            Settings()

    def test_cached(self):
        assert get_settings() is get_settings()
