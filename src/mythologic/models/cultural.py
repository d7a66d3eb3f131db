"""Cultural context models: cultures, pantheons, eras and regions."""

from typing import Literal

from pydantic import BaseModel, Field

from mythologic.core.base import CulturalEntity, RelatableEntity
from mythologic.core.ids import MythId


class TimePeriod(BaseModel):
    """A historical time period. Years are approximate; negative means BCE."""

    name: str
    start_year: int | None = None
    end_year: int | None = None
    description: str | None = None


class Culture(RelatableEntity):
    """A cultural tradition within which mythological entities exist.

    A culture is the axis other entities point at, so it has no culture of
    its own.
    """

    kind: Literal["Culture"] = "Culture"
    regions: set[str] = Field(default_factory=set)
    time_periods: list[TimePeriod] = Field(default_factory=list)
    influences: list[str] = Field(default_factory=list)  # names of other cultures
    languages: set[str] = Field(default_factory=set)
    cultural_practices: list[str] = Field(default_factory=list)

    @property
    def culture(self) -> None:
        return None

    def add_region(self, region: str) -> None:
        self.regions.add(region)
        self.touch()

    def add_time_period(self, time_period: TimePeriod) -> None:
        self.time_periods.append(time_period)
        self.touch()

    def add_influence(self, influence: str) -> None:
        self.influences.append(influence)
        self.touch()

    def add_language(self, language: str) -> None:
        self.languages.add(language)
        self.touch()

    def add_cultural_practice(self, practice: str) -> None:
        self.cultural_practices.append(practice)
        self.touch()


class Pantheon(CulturalEntity):
    """A group of deities, referenced by identifier."""

    kind: Literal["Pantheon"] = "Pantheon"
    primary_deities: set[MythId] = Field(default_factory=set)
    secondary_deities: set[MythId] = Field(default_factory=set)
    cosmology: str | None = None
    founding_myth: str | None = None

    def add_primary_deity(self, deity_id: MythId) -> None:
        self.primary_deities.add(deity_id)
        self.touch()

    def add_secondary_deity(self, deity_id: MythId) -> None:
        self.secondary_deities.add(deity_id)
        self.touch()

    def contains_deity(self, deity_id: MythId) -> bool:
        return deity_id in self.primary_deities or deity_id in self.secondary_deities

    def deity_ids(self) -> list[MythId]:
        """Primary deities first, then secondary ones."""
        return list(self.primary_deities) + [
            d for d in self.secondary_deities if d not in self.primary_deities
        ]

    def set_cosmology(self, cosmology: str) -> None:
        self.cosmology = cosmology
        self.touch()

    def set_founding_myth(self, myth: str) -> None:
        self.founding_myth = myth
        self.touch()


class MythologicalEra(CulturalEntity):
    """An age within a culture's mythic chronology."""

    kind: Literal["MythologicalEra"] = "MythologicalEra"
    sequence_order: int | None = None
    characteristics: list[str] = Field(default_factory=list)
    end_event: str | None = None  # how the era ended

    def add_characteristic(self, characteristic: str) -> None:
        self.characteristics.append(characteristic)
        self.touch()

    def set_sequence_order(self, order: int) -> None:
        self.sequence_order = order
        self.touch()

    def set_end_event(self, event: str) -> None:
        self.end_event = event
        self.touch()


class MythologicalRegion(RelatableEntity):
    """A geographic region of mythological significance.

    Regions can be shared by several cultures, so they carry a set of
    culture names rather than a single owning culture.
    """

    kind: Literal["MythologicalRegion"] = "MythologicalRegion"
    cultures: set[str] = Field(default_factory=set)
    features: list[str] = Field(default_factory=list)
    modern_locations: set[str] = Field(default_factory=set)
    significance: str = "Unknown significance"

    @property
    def culture(self) -> None:
        return None

    def add_culture(self, culture: str) -> None:
        self.cultures.add(culture)
        self.touch()

    def add_feature(self, feature: str) -> None:
        self.features.append(feature)
        self.touch()

    def add_modern_location(self, location: str) -> None:
        self.modern_locations.add(location)
        self.touch()
