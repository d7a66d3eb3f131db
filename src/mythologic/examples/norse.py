"""Norse mythology: the Aesir and Vanir, the Nine Worlds and Ragnarok."""

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

CULTURE = "Norse"

POETIC_EDDA = Source(
    title="Poetic Edda",
    year=1270,
    source_type=SourceType.COMPILATION_TEXT,
    notes="Codex Regius collection of Old Norse poems",
)
PROSE_EDDA = Source(
    title="Prose Edda",
    author="Snorri Sturluson",
    year=1220,
    source_type=SourceType.PRIMARY_TEXT,
)


def _add_nodes(ontology: MythOntology) -> dict:
    deities = [
        Deity(
            name="Odin",
            description="Chief of the Aesir, god of wisdom, poetry, death and magic.",
            culture=CULTURE,
            domains={"Wisdom", "War", "Death", "Poetry", "Magic"},
            gender=Gender.MALE,
            importance=DeityImportance.SUPREME,
            pantheon="Aesir",
            alternative_names=["Allfather", "Woden"],
        ),
        Deity(
            name="Thor",
            description="God of thunder and storms, protector of Midgard.",
            culture=CULTURE,
            domains={"Thunder", "Storms", "Strength", "Protection"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Aesir",
            alternative_names=["Donar"],
        ),
        Deity(
            name="Freyja",
            description="Goddess of love, beauty, war and seidr magic.",
            culture=CULTURE,
            domains={"Love", "Beauty", "Fertility", "War", "Magic"},
            gender=Gender.FEMALE,
            importance=DeityImportance.MAJOR,
            pantheon="Vanir",
        ),
        Deity(
            name="Loki",
            description="Trickster and shapeshifter, sometimes helpful but often the gods' undoing.",
            culture=CULTURE,
            domains={"Mischief", "Trickery", "Fire"},
            gender=Gender.FLUID,
            importance=DeityImportance.MAJOR,
            pantheon="Aesir",
        ),
        Deity(
            name="Heimdall",
            description="Watchman of the gods and guardian of Bifrost.",
            culture=CULTURE,
            domains={"Vigilance", "Light"},
            gender=Gender.MALE,
            importance=DeityImportance.MINOR,
            pantheon="Aesir",
        ),
    ]
    for deity in deities:
        deity.metadata.add_source(PROSE_EDDA)

    heroes = [
        Hero(
            name="Sigurd",
            description="Dragon-slayer who killed Fafnir and won his treasure.",
            culture=CULTURE,
            origin=HeroOrigin.BLESSED_MORTAL,
            achievements=["Slaying Fafnir", "Awakening Brynhildr"],
        ),
        Hero(
            name="Beowulf",
            description="Geatish hero who slew Grendel and Grendel's mother.",
            culture=CULTURE,
            origin=HeroOrigin.MORTAL,
            achievements=["Slaying Grendel", "Slaying Grendel's mother", "Fighting the dragon"],
        ),
    ]
    heroes[0].metadata.add_source(POETIC_EDDA)

    creatures = [
        Creature(
            name="Jormungandr",
            description="The Midgard Serpent, encircling the world and biting its own tail.",
            culture=CULTURE,
            creature_type=CreatureType.DRAGON,
            habitats={"World Ocean"},
            abilities=["Venom", "Immense size"],
        ),
        Creature(
            name="Fenrir",
            description="Monstrous wolf destined to kill Odin at Ragnarok.",
            culture=CULTURE,
            creature_type=CreatureType.MONSTER,
            habitats={"Lyngvi"},
            abilities=["Unstoppable growth", "Devouring jaws"],
        ),
        Creature(
            name="Draugr",
            description="Undead warrior guarding its burial mound.",
            culture=CULTURE,
            creature_type=CreatureType.UNDEAD,
            habitats={"Burial mounds"},
            abilities=["Superhuman strength", "Shapeshifting"],
        ),
    ]

    artifacts = [
        Artifact(
            name="Mjolnir",
            description="Thor's hammer, which returns to his hand when thrown.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Summons lightning", "Returns when thrown"],
            creator="Sindri and Brokkr",
            owner="Thor",
            metadata={"attributes": {"native_name": "Mjölnir"}},
        ),
        Artifact(
            name="Gungnir",
            description="Odin's spear that never misses its target.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Never misses"],
            creator="Sons of Ivaldi",
            owner="Odin",
        ),
        Artifact(
            name="Brisingamen",
            description="Freyja's necklace, made by four dwarves.",
            culture=CULTURE,
            artifact_type=ArtifactType.JEWELRY,
            owner="Freyja",
        ),
    ]

    locations = [
        Location(
            name="Asgard",
            description="Home of the Aesir, one of the Nine Worlds connected by Yggdrasil.",
            culture=CULTURE,
            location_type=LocationType.HEAVEN,
            characteristics=["Valhalla", "Walls built by a giant"],
            accessibility=["Bifrost"],
        ),
        Location(
            name="Midgard",
            description="The world of humans, encircled by Jormungandr.",
            culture=CULTURE,
            location_type=LocationType.COSMIC,
            accessibility=["Bifrost", "Yggdrasil"],
        ),
        Location(
            name="Valhalla",
            description="Odin's hall of the slain in Asgard.",
            culture=CULTURE,
            location_type=LocationType.AFTERLIFE,
            characteristics=["Einherjar feast nightly"],
            accessibility=["Death in battle", "Chosen by Valkyries"],
        ),
    ]

    concepts = [
        Concept(
            name="Ragnarok",
            description="The prophesied doom of the gods and rebirth of the world.",
            culture=CULTURE,
            concept_type=ConceptType.COSMOLOGY,
            manifestations=["Fimbulwinter", "Death of Odin"],
            metadata={"attributes": {"native_name": "Ragnarök"}},
        ),
        Concept(
            name="Wyrd",
            description="Fate or personal destiny that cannot be escaped.",
            culture=CULTURE,
            concept_type=ConceptType.FATE,
            manifestations=["The Norns"],
        ),
    ]

    named = {}
    for entity in [*deities, *heroes, *creatures, *artifacts, *locations, *concepts]:
        ontology.add_entity(entity)
        named[entity.name] = entity
    return named


def _add_relationships(ontology: MythOntology, named: dict) -> None:
    odin, thor, loki, freyja = (named[n] for n in ("Odin", "Thor", "Loki", "Freyja"))
    fenrir, jormungandr = named["Fenrir"], named["Jormungandr"]

    relationships = [
        FamilyRelationship.builder(
            "Odin fathers Thor",
            "Odin is the father of Thor.",
            odin.id,
            thor.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Loki fathers Fenrir",
            "Loki is the father of the wolf Fenrir.",
            loki.id,
            fenrir.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Loki fathers Jormungandr",
            "Loki is the father of the World Serpent.",
            loki.id,
            jormungandr.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
    ]

    thor_serpent = (
        ConflictRelationship.builder(
            "Thor battles Jormungandr at Ragnarok",
            "Thor kills the serpent but dies from its venom.",
            thor.id,
            jormungandr.id,
            ConflictType.BATTLE,
        )
        .strength(1.0)
        .build()
    )
    thor_serpent.set_outcome(
        ConflictOutcome(
            description="Mutual destruction.",
            consequences=["Thor walks nine steps before dying"],
        )
    )
    odin_wolf = (
        ConflictRelationship.builder(
            "Odin battles Fenrir at Ragnarok",
            "Odin is devoured by the wolf.",
            odin.id,
            fenrir.id,
            ConflictType.BATTLE,
        )
        .strength(1.0)
        .build()
    )
    odin_wolf.set_outcome(
        ConflictOutcome(
            description="Fenrir devours Odin and is slain by Vidar.",
            victor_id=fenrir.id,
        )
    )

    council = (
        AllianceRelationship.builder(
            "Aesir divine council",
            "Alliance of the Aesir under Odin's leadership.",
            odin.id,
            thor.id,
            AllianceType.COALITION,
            purpose="Defence of Asgard",
        )
        .strength(0.8)
        .build()
    )
    truce = (
        AllianceRelationship.builder(
            "Aesir-Vanir truce",
            "Hostage exchange ending the war between the Aesir and the Vanir.",
            odin.id,
            freyja.id,
            AllianceType.PACT,
            purpose="End of the Aesir-Vanir war",
        )
        .with_property("duration", "Permanent")
        .build()
    )

    shapeshifting = (
        TransformationRelationship.builder(
            "Loki's shapeshifting",
            "Loki changes his form at will.",
            loki.id,
            loki.id,
            TransformationType.SHAPESHIFTING,
            cause="Innate ability",
        )
        .with_property("permanent", "false")
        .with_property("reversible", "true")
        .build()
    )

    for relationship in [*relationships, thor_serpent, odin_wolf, council, truce, shapeshifting]:
        relationship.metadata.add_source(POETIC_EDDA)
        ontology.add_entity(relationship)


def _add_context(ontology: MythOntology, named: dict) -> None:
    culture = Culture(
        name="Norse",
        description="The culture of the Norse people during the Viking Age.",
        regions={"Scandinavia", "Iceland", "Greenland"},
        languages={"Old Norse"},
        time_periods=[
            TimePeriod(name="Viking Age", start_year=793, end_year=1066),
        ],
        influences=["Germanic"],
        cultural_practices=["Blot sacrifices", "Skaldic poetry", "Thing assemblies"],
    )

    aesir = Pantheon(
        name="Aesir Pantheon",
        description="The principal Norse gods, associated with war, power and governance.",
        culture=CULTURE,
        cosmology="Nine Worlds bound together by the world tree Yggdrasil.",
    )
    for name in ("Odin", "Thor"):
        aesir.add_primary_deity(named[name].id)
    for name in ("Loki", "Heimdall"):
        aesir.add_secondary_deity(named[name].id)

    vanir = Pantheon(
        name="Vanir Pantheon",
        description="Gods of fertility, prosperity and natural forces.",
        culture=CULTURE,
        founding_myth="The Aesir-Vanir war ended with an exchange of hostages.",
    )
    vanir.add_primary_deity(named["Freyja"].id)

    era = MythologicalEra(
        name="Twilight of the Gods",
        description="The final age, ending in the destruction and renewal of the world.",
        culture=CULTURE,
        sequence_order=3,
        characteristics=["Fimbulwinter", "Battle on Vigrid"],
        end_event="The world sinks into the sea and rises anew",
    )

    regions = [
        MythologicalRegion(
            name="Scandinavia",
            description="Norway, Sweden and Denmark.",
            cultures={"Norse"},
            modern_locations={"Norway", "Sweden", "Denmark"},
            significance="Homeland of the Norse",
        ),
        MythologicalRegion(
            name="Iceland",
            description="Island in the North Atlantic settled in the 9th century.",
            cultures={"Norse"},
            features=["Thingvellir"],
            modern_locations={"Iceland"},
            significance="Where the Eddas were written down",
        ),
    ]

    for entity in [culture, aesir, vanir, era, *regions]:
        ontology.add_entity(entity)


def create_norse_ontology() -> MythOntology:
    """Build the Norse example dataset."""
    ontology = MythOntology()
    named = _add_nodes(ontology)
    _add_relationships(ontology, named)
    _add_context(ontology, named)
    return ontology
