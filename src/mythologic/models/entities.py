"""Node entity models: deities, heroes, creatures, artifacts, locations, concepts."""

from enum import Enum
from typing import Literal

from pydantic import Field

from mythologic.core.base import CulturalEntity


class Gender(str, Enum):
    """Gender representation of a deity."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "NonBinary"
    FLUID = "Fluid"
    ANDROGYNOUS = "Androgynous"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class DeityImportance(str, Enum):
    """Rank of a deity within its pantheon."""

    SUPREME = "Supreme"  # chief deity
    MAJOR = "Major"
    MINOR = "Minor"
    DEMIGOD = "Demigod"
    LOCAL = "Local"  # worshipped in a specific region
    HOUSEHOLD = "Household"
    UNKNOWN = "Unknown"


class HeroOrigin(str, Enum):
    """Whether a hero is divine, semi-divine or mortal."""

    DIVINE = "Divine"
    DEMIGOD = "Demigod"  # child of a deity and a mortal
    BLESSED_MORTAL = "BlessedMortal"
    MORTAL = "Mortal"
    TRANSFORMED = "Transformed"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class CreatureType(str, Enum):
    DRAGON = "Dragon"
    GIANT = "Giant"
    SPIRIT = "Spirit"
    UNDEAD = "Undead"
    SHAPESHIFTER = "Shapeshifter"
    HYBRID = "Hybrid"
    GUARDIAN = "Guardian"
    MONSTER = "Monster"
    ELEMENTAL = "Elemental"
    FAE = "Fae"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class ArtifactType(str, Enum):
    WEAPON = "Weapon"
    ARMOR = "Armor"
    JEWELRY = "Jewelry"
    VESSEL = "Vessel"
    TOOL = "Tool"
    INSTRUMENT = "Instrument"
    CLOTHING = "Clothing"
    BOOK = "Book"
    SYMBOL = "Symbol"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class LocationType(str, Enum):
    AFTERLIFE = "Afterlife"
    HEAVEN = "Heaven"
    UNDERWORLD = "Underworld"
    MOUNTAIN = "Mountain"
    FOREST = "Forest"
    SEA = "Sea"
    ISLAND = "Island"
    CITY = "City"
    TEMPLE = "Temple"
    COSMIC = "Cosmic"
    LIMINAL = "Liminal"  # thresholds between worlds
    UNKNOWN = "Unknown"
    OTHER = "Other"


class ConceptType(str, Enum):
    COSMOLOGY = "Cosmology"
    CREATION = "Creation"
    AFTERLIFE = "Afterlife"
    VIRTUE = "Virtue"
    VICE = "Vice"
    FATE = "Fate"
    TIME = "Time"
    JUSTICE = "Justice"
    LOVE = "Love"
    WAR = "War"
    UNKNOWN = "Unknown"
    OTHER = "Other"


class Deity(CulturalEntity):
    """A god or goddess.

    Domains are spheres of influence ("Thunder", "Wisdom"); alternative
    names hold epithets and cross-cultural equivalents ("Jupiter").
    """

    kind: Literal["Deity"] = "Deity"
    alternative_names: list[str] = Field(default_factory=list)
    domains: set[str] = Field(default_factory=set)
    pantheon: str | None = None
    gender: Gender = Gender.UNKNOWN
    importance: DeityImportance = DeityImportance.UNKNOWN

    def add_domain(self, domain: str) -> None:
        self.domains.add(domain)
        self.touch()

    def add_alternative_name(self, name: str) -> None:
        self.alternative_names.append(name)
        self.touch()

    def set_pantheon(self, pantheon: str) -> None:
        self.pantheon = pantheon
        self.touch()

    def set_gender(self, gender: Gender) -> None:
        self.gender = gender
        self.touch()

    def set_importance(self, importance: DeityImportance) -> None:
        self.importance = importance
        self.touch()


class Hero(CulturalEntity):
    """A heroic figure or protagonist."""

    kind: Literal["Hero"] = "Hero"
    origin: HeroOrigin = HeroOrigin.UNKNOWN
    achievements: list[str] = Field(default_factory=list)

    def add_achievement(self, achievement: str) -> None:
        self.achievements.append(achievement)
        self.touch()

    def set_origin(self, origin: HeroOrigin) -> None:
        self.origin = origin
        self.touch()


class Creature(CulturalEntity):
    """A mythological creature or monster."""

    kind: Literal["Creature"] = "Creature"
    creature_type: CreatureType = CreatureType.UNKNOWN
    habitats: set[str] = Field(default_factory=set)
    abilities: list[str] = Field(default_factory=list)

    def add_habitat(self, habitat: str) -> None:
        self.habitats.add(habitat)
        self.touch()

    def add_ability(self, ability: str) -> None:
        self.abilities.append(ability)
        self.touch()

    def set_creature_type(self, creature_type: CreatureType) -> None:
        self.creature_type = creature_type
        self.touch()


class Artifact(CulturalEntity):
    """An artifact or object of power."""

    kind: Literal["Artifact"] = "Artifact"
    artifact_type: ArtifactType = ArtifactType.UNKNOWN
    powers: list[str] = Field(default_factory=list)
    creator: str | None = None
    owner: str | None = None  # current or last known

    def add_power(self, power: str) -> None:
        self.powers.append(power)
        self.touch()

    def set_artifact_type(self, artifact_type: ArtifactType) -> None:
        self.artifact_type = artifact_type
        self.touch()

    def set_creator(self, creator: str) -> None:
        self.creator = creator
        self.touch()

    def set_owner(self, owner: str) -> None:
        self.owner = owner
        self.touch()


class Location(CulturalEntity):
    """A mythologically significant place, physical or otherworldly."""

    kind: Literal["Location"] = "Location"
    location_type: LocationType = LocationType.UNKNOWN
    characteristics: list[str] = Field(default_factory=list)
    accessibility: list[str] = Field(default_factory=list)  # how it can be reached

    def add_characteristic(self, characteristic: str) -> None:
        self.characteristics.append(characteristic)
        self.touch()

    def add_accessibility(self, access: str) -> None:
        self.accessibility.append(access)
        self.touch()

    def set_location_type(self, location_type: LocationType) -> None:
        self.location_type = location_type
        self.touch()


class Concept(CulturalEntity):
    """An abstract idea or principle such as fate or justice."""

    kind: Literal["Concept"] = "Concept"
    concept_type: ConceptType = ConceptType.UNKNOWN
    manifestations: list[str] = Field(default_factory=list)

    def add_manifestation(self, manifestation: str) -> None:
        self.manifestations.append(manifestation)
        self.touch()

    def set_concept_type(self, concept_type: ConceptType) -> None:
        self.concept_type = concept_type
        self.touch()
