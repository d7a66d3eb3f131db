"""Provenance and bookkeeping attached to every entity."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SourceType(str, Enum):
    """Kinds of information sources."""

    BOOK = "Book"
    ARTICLE = "Article"
    WEBSITE = "Website"
    ACADEMIC_PAPER = "AcademicPaper"
    PRIMARY_TEXT = "PrimaryText"
    ORAL_TRADITION = "OralTradition"
    ARCHAEOLOGICAL = "Archaeological"
    COMPILATION_TEXT = "CompilationText"  # collection of texts compiled together
    LITERARY_TEXT = "LiteraryText"
    OTHER = "Other"


class Source(BaseModel):
    """A source of information for mythological data."""

    title: str
    author: str | None = None
    year: int | None = None  # negative for BCE
    source_type: SourceType = SourceType.OTHER
    url: str | None = None
    notes: str | None = None

    def citation(self) -> str:
        """Return a short human-readable citation."""
        parts = [self.title]
        if self.author:
            parts.append(self.author)
        if self.year is not None:
            parts.append(f"{-self.year} BCE" if self.year < 0 else str(self.year))
        return ", ".join(parts)


class Metadata(BaseModel):
    """Timestamps, sources, attributes and confidence for one entity.

    A fresh instance stamps ``created_at`` and ``updated_at`` with the same
    moment. Instances belong to exactly one entity and are mutated in place.
    """

    created_at: datetime
    updated_at: datetime
    sources: list[Source] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)
    confidence: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _stamp(cls, data):
        if isinstance(data, dict):
            data = dict(data)
            if data.get("created_at") is None:
                data["created_at"] = _utcnow()
            if data.get("updated_at") is None:
                data["updated_at"] = data["created_at"]
        return data

    @field_validator("sources")
    @classmethod
    def _own_sources(cls, sources: list[Source]) -> list[Source]:
        return [source.model_copy() for source in sources]

    def add_source(self, source: Source) -> None:
        """Append a copy of a provenance source.

        Shared ``Source`` constants can be attached to many entities without
        an edit on one entity showing up on the others.
        """
        self.sources.append(source.model_copy())

    def add_attribute(self, key: str, value: str) -> None:
        """Set or overwrite a free-form attribute."""
        self.attributes[key] = value

    def set_confidence(self, confidence: float) -> None:
        """Set the confidence score, clamped to [0, 1]."""
        self.confidence = max(0.0, min(1.0, confidence))

    def update_timestamp(self) -> None:
        """Refresh ``updated_at`` to now."""
        self.updated_at = _utcnow()
