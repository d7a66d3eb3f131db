"""Egyptian mythology: the Ennead of Heliopolis and the Osiris cycle."""

from mythologic.core.metadata import Source, SourceType
from mythologic.models import (
    AllianceRelationship,
    AllianceType,
    Artifact,
    ArtifactType,
    Concept,
    ConceptType,
    ConflictOutcome,
    ConflictRelationship,
    ConflictType,
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
    TransformationRelationship,
    TransformationType,
)
from mythologic.ontology import MythOntology

CULTURE = "Egyptian"

PYRAMID_TEXTS = Source(
    title="Pyramid Texts",
    year=-2400,
    source_type=SourceType.PRIMARY_TEXT,
    notes="Funerary spells carved in the pyramids of Saqqara",
)
BOOK_OF_THE_DEAD = Source(
    title="Book of the Dead",
    year=-1550,
    source_type=SourceType.COMPILATION_TEXT,
)
PLUTARCH = Source(
    title="On Isis and Osiris",
    author="Plutarch",
    year=100,
    source_type=SourceType.LITERARY_TEXT,
    notes="The most complete surviving narrative of the Osiris myth",
)


def _add_nodes(ontology: MythOntology) -> dict:
    deities = [
        Deity(
            name="Ra",
            description="Sun god and creator, sailing the sky by day and the Duat by night.",
            culture=CULTURE,
            domains={"Sun", "Creation", "Kingship"},
            gender=Gender.MALE,
            importance=DeityImportance.SUPREME,
            pantheon="Heliopolitan",
            alternative_names=["Amun-Ra", "Ra-Horakhty"],
        ),
        Deity(
            name="Osiris",
            description="God of the afterlife, death and resurrection, ruler of the Duat.",
            culture=CULTURE,
            domains={"Afterlife", "Resurrection", "Agriculture"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Heliopolitan",
        ),
        Deity(
            name="Isis",
            description="Goddess of magic, healing and protection, wife of Osiris and mother of Horus.",
            culture=CULTURE,
            domains={"Magic", "Healing", "Motherhood"},
            gender=Gender.FEMALE,
            importance=DeityImportance.MAJOR,
            pantheon="Heliopolitan",
        ),
        Deity(
            name="Horus",
            description="Falcon-headed god of kingship and the sky.",
            culture=CULTURE,
            domains={"Sky", "Kingship", "Protection"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
        ),
        Deity(
            name="Set",
            description="God of chaos, desert and storms, murderer of Osiris.",
            culture=CULTURE,
            domains={"Chaos", "Desert", "Storms"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Heliopolitan",
            alternative_names=["Seth"],
        ),
    ]
    for deity in deities:
        deity.metadata.add_source(PYRAMID_TEXTS)

    heroes = [
        Hero(
            name="Imhotep",
            description="Architect of the Step Pyramid, deified as a god of medicine.",
            culture=CULTURE,
            origin=HeroOrigin.TRANSFORMED,
            achievements=["Designing the Step Pyramid of Djoser"],
        ),
    ]

    creatures = [
        Creature(
            name="Apep",
            description="Serpent of chaos who attacks the sun barque every night.",
            culture=CULTURE,
            creature_type=CreatureType.MONSTER,
            habitats={"Duat"},
            abilities=["Swallowing the sun"],
        ),
        Creature(
            name="Ammit",
            description="Devourer of the dead, part lion, hippopotamus and crocodile.",
            culture=CULTURE,
            creature_type=CreatureType.HYBRID,
            habitats={"Hall of Two Truths"},
            abilities=["Devouring unworthy hearts"],
        ),
    ]

    artifacts = [
        Artifact(
            name="Eye of Horus",
            description="The wedjat, torn out by Set and restored by Thoth.",
            culture=CULTURE,
            artifact_type=ArtifactType.SYMBOL,
            powers=["Protection", "Healing"],
            owner="Horus",
        ),
        Artifact(
            name="Ankh",
            description="The symbol of life carried by the gods.",
            culture=CULTURE,
            artifact_type=ArtifactType.SYMBOL,
            powers=["Breath of life"],
        ),
    ]

    locations = [
        Location(
            name="Duat",
            description="The underworld through which souls travel after death.",
            culture=CULTURE,
            location_type=LocationType.UNDERWORLD,
            characteristics=["Twelve hours of night", "Hall of Two Truths"],
            accessibility=["Death", "Sun barque of Ra"],
        ),
        Location(
            name="Aaru",
            description="The Field of Reeds, paradise of the justified dead.",
            culture=CULTURE,
            location_type=LocationType.AFTERLIFE,
            characteristics=["Eternal harvest"],
            accessibility=["Passing the weighing of the heart"],
        ),
    ]
    for location in locations:
        location.metadata.add_source(BOOK_OF_THE_DEAD)

    concepts = [
        Concept(
            name="Ma'at",
            description="Truth, balance and cosmic order.",
            culture=CULTURE,
            concept_type=ConceptType.JUSTICE,
            manifestations=["Feather of Ma'at", "Weighing of the heart"],
        ),
        Concept(
            name="Ka",
            description="The life force that distinguishes the living from the dead.",
            culture=CULTURE,
            concept_type=ConceptType.AFTERLIFE,
            manifestations=["Ka statues", "Funerary offerings"],
        ),
    ]

    named = {}
    for entity in [*deities, *heroes, *creatures, *artifacts, *locations, *concepts]:
        ontology.add_entity(entity)
        named[entity.name] = entity
    return named


def _add_relationships(ontology: MythOntology, named: dict) -> None:
    ra, osiris, isis, horus, set_ = (named[n] for n in ("Ra", "Osiris", "Isis", "Horus", "Set"))

    relationships = [
        FamilyRelationship.builder(
            "Marriage of Osiris and Isis",
            "The divine marriage at the heart of the Osiris myth.",
            osiris.id,
            isis.id,
            FamilyRelationshipType.SPOUSE,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Osiris fathers Horus",
            "Horus was conceived after the death of Osiris.",
            osiris.id,
            horus.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Isis mothers Horus",
            "Isis raised Horus in hiding in the marshes of the Delta.",
            isis.id,
            horus.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Set and Osiris brotherhood",
            "Set and Osiris are brothers, sons of Geb and Nut.",
            set_.id,
            osiris.id,
            FamilyRelationshipType.SIBLING,
        )
        .strength(0.7)
        .build(),
    ]

    contendings = (
        ConflictRelationship.builder(
            "Contendings of Horus and Set",
            "Eighty years of contests for the throne of Osiris.",
            horus.id,
            set_.id,
            ConflictType.CONTEST,
        )
        .strength(0.9)
        .build()
    )
    contendings.set_outcome(
        ConflictOutcome(
            description="The Ennead awarded the throne to Horus.",
            victor_id=horus.id,
            consequences=["Horus became king of Egypt", "Set was given the desert"],
        )
    )
    murder = (
        ConflictRelationship.builder(
            "Murder of Osiris",
            "Set trapped Osiris in a coffin and later scattered his body.",
            set_.id,
            osiris.id,
            ConflictType.BETRAYAL,
        )
        .strength(1.0)
        .build()
    )

    protection = (
        AllianceRelationship.builder(
            "Isis protects Horus",
            "Isis shields the infant Horus from Set.",
            isis.id,
            horus.id,
            AllianceType.PATRONAGE,
            purpose="Protection of the rightful heir",
        )
        .strength(0.9)
        .build()
    )
    sun_barque = (
        AllianceRelationship.builder(
            "Defenders of the sun barque",
            "Set spears Apep each night to protect Ra's voyage.",
            ra.id,
            set_.id,
            AllianceType.MILITARY,
            purpose="Defeat Apep",
        )
        .strength(0.6)
        .build()
    )

    resurrection = (
        TransformationRelationship.builder(
            "Resurrection of Osiris",
            "Isis reassembled Osiris, who rose as lord of the dead.",
            osiris.id,
            osiris.id,
            TransformationType.APOTHEOSIS,
            cause="The magic of Isis",
        )
        .strength(1.0)
        .build()
    )

    for relationship in [*relationships, contendings, murder, protection, sun_barque, resurrection]:
        relationship.metadata.add_source(PLUTARCH)
        ontology.add_entity(relationship)


def _add_context(ontology: MythOntology, named: dict) -> None:
    culture = Culture(
        name="Ancient Egyptian",
        description="The civilization of the Nile valley, from about 3100 BCE to 332 BCE.",
        regions={"Upper Egypt", "Lower Egypt"},
        languages={"Egyptian"},
        time_periods=[
            TimePeriod(name="Old Kingdom", start_year=-2686, end_year=-2181),
            TimePeriod(name="Middle Kingdom", start_year=-2055, end_year=-1650),
            TimePeriod(name="New Kingdom", start_year=-1550, end_year=-1069),
        ],
        cultural_practices=["Mummification", "Temple festivals", "Pyramid building"],
    )

    pantheon = Pantheon(
        name="Heliopolitan Pantheon",
        description="The Ennead of Heliopolis, centered on the creator Ra-Atum.",
        culture=CULTURE,
        cosmology="Order (ma'at) is maintained against the encroaching chaos of Apep.",
        founding_myth="Atum rose from the waters of Nun and created the first gods.",
    )
    for name in ("Ra", "Osiris", "Isis", "Set"):
        pantheon.add_primary_deity(named[name].id)
    pantheon.add_secondary_deity(named["Horus"].id)

    era = MythologicalEra(
        name="Reign of the Gods",
        description="The age when the gods ruled Egypt directly, before the pharaohs.",
        culture=CULTURE,
        sequence_order=1,
        characteristics=["Ra rules on earth", "Osiris teaches agriculture"],
        end_event="Horus passes the throne to the first pharaoh",
    )

    regions = [
        MythologicalRegion(
            name="Upper Egypt",
            description="The southern Nile valley.",
            cultures={"Ancient Egyptian"},
            features=["Thebes", "Abydos"],
            modern_locations={"Luxor", "Aswan"},
            significance="Cult center of Osiris at Abydos",
        ),
        MythologicalRegion(
            name="Lower Egypt",
            description="The Nile Delta.",
            cultures={"Ancient Egyptian"},
            features=["Heliopolis", "Memphis"],
            modern_locations={"Cairo"},
        ),
    ]

    for entity in [culture, pantheon, era, *regions]:
        ontology.add_entity(entity)


def create_egyptian_ontology() -> MythOntology:
    """Build the Egyptian example dataset."""
    ontology = MythOntology()
    named = _add_nodes(ontology)
    _add_relationships(ontology, named)
    _add_context(ontology, named)
    return ontology
