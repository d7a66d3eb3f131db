"""Greek mythology: the Olympians, their heroes and their monsters."""

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

CULTURE = "Greek"

HESIOD = Source(
    title="Theogony",
    author="Hesiod",
    year=-700,
    source_type=SourceType.PRIMARY_TEXT,
    notes="Ancient Greek poem describing the origins of the gods",
)
HOMER = Source(
    title="Iliad & Odyssey",
    author="Homer",
    year=-750,
    source_type=SourceType.PRIMARY_TEXT,
    notes="Epic poems depicting the Trojan War and its aftermath",
)
OVID = Source(
    title="Metamorphoses",
    author="Ovid",
    year=8,
    source_type=SourceType.LITERARY_TEXT,
)


def _deity(name, description, domains, gender, importance, roman=None):
    deity = Deity(
        name=name,
        description=description,
        culture=CULTURE,
        domains=set(domains),
        gender=gender,
        importance=importance,
        pantheon="Olympian",
    )
    if roman:
        deity.add_alternative_name(roman)
    deity.metadata.add_source(HESIOD)
    return deity


def _add_deities(ontology: MythOntology) -> dict[str, Deity]:
    deities = [
        _deity(
            "Zeus",
            "King of the gods and ruler of Mount Olympus, god of the sky, thunder and justice.",
            ["Sky", "Thunder", "Lightning", "Law", "Justice"],
            Gender.MALE,
            DeityImportance.SUPREME,
            roman="Jupiter",
        ),
        _deity(
            "Hera",
            "Queen of the gods and goddess of women, marriage, family and childbirth.",
            ["Marriage", "Women", "Family", "Childbirth"],
            Gender.FEMALE,
            DeityImportance.MAJOR,
            roman="Juno",
        ),
        _deity(
            "Athena",
            "Goddess of wisdom, crafts and strategic warfare, born fully armed from the head of Zeus.",
            ["Wisdom", "Warfare", "Crafts", "Strategy"],
            Gender.FEMALE,
            DeityImportance.MAJOR,
            roman="Minerva",
        ),
        _deity(
            "Poseidon",
            "God of the sea, storms, earthquakes and horses.",
            ["Sea", "Storms", "Earthquakes", "Horses"],
            Gender.MALE,
            DeityImportance.MAJOR,
            roman="Neptune",
        ),
        _deity(
            "Apollo",
            "God of music, prophecy, healing and archery.",
            ["Music", "Prophecy", "Healing", "Archery", "Sun"],
            Gender.MALE,
            DeityImportance.MAJOR,
        ),
    ]
    cronus = Deity(
        name="Cronus",
        description="Leader of the Titans, overthrown by his son Zeus.",
        culture=CULTURE,
        domains={"Time", "Harvest"},
        gender=Gender.MALE,
        importance=DeityImportance.MAJOR,
        pantheon="Titan",
    )
    cronus.metadata.add_source(HESIOD)
    deities.append(cronus)

    for deity in deities:
        ontology.add_entity(deity)
    return {d.name: d for d in deities}


def _add_heroes(ontology: MythOntology) -> dict[str, Hero]:
    heroes = [
        Hero(
            name="Heracles",
            description="Greatest of the Greek heroes, known for his strength and the twelve labors.",
            culture=CULTURE,
            origin=HeroOrigin.DEMIGOD,
            achievements=[
                "Twelve Labors of Heracles",
                "Slaying the Nemean Lion",
                "Cleaning the Augean Stables",
                "Capturing Cerberus",
            ],
        ),
        Hero(
            name="Perseus",
            description="Legendary founder of Mycenae and slayer of the Gorgon Medusa.",
            culture=CULTURE,
            origin=HeroOrigin.DEMIGOD,
            achievements=["Beheading Medusa", "Rescuing Andromeda from the sea monster"],
        ),
        Hero(
            name="Odysseus",
            description="King of Ithaca, famed for his cunning and his ten-year voyage home from Troy.",
            culture=CULTURE,
            origin=HeroOrigin.BLESSED_MORTAL,
            achievements=[
                "Devising the Trojan Horse",
                "Blinding the Cyclops Polyphemus",
                "Resisting the Sirens' song",
            ],
        ),
    ]
    for hero in heroes:
        hero.metadata.add_source(HOMER)
        ontology.add_entity(hero)
    return {h.name: h for h in heroes}


def _add_creatures(ontology: MythOntology) -> dict[str, Creature]:
    creatures = [
        Creature(
            name="Minotaur",
            description="Bull-headed man kept in the Labyrinth of Crete.",
            culture=CULTURE,
            creature_type=CreatureType.HYBRID,
            habitats={"Labyrinth", "Crete"},
            abilities=["Superhuman strength"],
        ),
        Creature(
            name="Cerberus",
            description="Three-headed dog that guards the entrance to the Underworld.",
            culture=CULTURE,
            creature_type=CreatureType.GUARDIAN,
            habitats={"Underworld"},
            abilities=["Multiple heads", "Preventing souls from escaping the Underworld"],
        ),
        Creature(
            name="Medusa",
            description="A Gorgon with snakes for hair, whose gaze turns onlookers to stone.",
            culture=CULTURE,
            creature_type=CreatureType.MONSTER,
            habitats={"Island of the Gorgons"},
            abilities=["Petrifying gaze", "Snake hair"],
        ),
    ]
    for creature in creatures:
        ontology.add_entity(creature)
    return {c.name: c for c in creatures}


def _add_artifacts(ontology: MythOntology) -> None:
    thunderbolt = Artifact(
        name="Thunderbolt",
        description="Zeus's weapon, forged by the Cyclopes.",
        culture=CULTURE,
        artifact_type=ArtifactType.WEAPON,
        powers=["Creates lightning", "Produces thunder"],
        creator="Cyclopes",
        owner="Zeus",
    )
    aegis = Artifact(
        name="Aegis",
        description="The shield of Zeus and Athena, bearing the head of Medusa.",
        culture=CULTURE,
        artifact_type=ArtifactType.ARMOR,
        powers=["Divine protection", "Inspires terror"],
        creator="Hephaestus",
        owner="Athena",
    )
    golden_fleece = Artifact(
        name="Golden Fleece",
        description="The fleece of the winged golden ram, sought by Jason and the Argonauts.",
        culture=CULTURE,
        artifact_type=ArtifactType.SYMBOL,
        powers=["Symbol of kingship"],
    )
    for artifact in (thunderbolt, aegis, golden_fleece):
        ontology.add_entity(artifact)


def _add_locations(ontology: MythOntology) -> dict[str, Location]:
    locations = [
        Location(
            name="Mount Olympus",
            description="Home of the Olympian gods, the tallest mountain in Greece.",
            culture=CULTURE,
            location_type=LocationType.MOUNTAIN,
            characteristics=["Home of the gods", "Above the clouds"],
            accessibility=["Divine invitation"],
        ),
        Location(
            name="Underworld",
            description="Realm of the dead ruled by Hades.",
            culture=CULTURE,
            location_type=LocationType.UNDERWORLD,
            characteristics=["River Styx", "Elysian Fields", "Tartarus"],
            accessibility=["Death", "Ferry of Charon"],
        ),
        Location(
            name="Delphi",
            description="Sacred site of the Temple of Apollo and the Oracle.",
            culture=CULTURE,
            location_type=LocationType.TEMPLE,
            characteristics=["Oracle of Delphi", "Omphalos stone"],
            accessibility=["Pilgrimage"],
        ),
    ]
    for location in locations:
        ontology.add_entity(location)
    return {loc.name: loc for loc in locations}


def _add_concepts(ontology: MythOntology) -> None:
    concepts = [
        Concept(
            name="Fate",
            description="Destiny, personified by the three Moirai.",
            culture=CULTURE,
            concept_type=ConceptType.FATE,
            manifestations=["Clotho", "Lachesis", "Atropos"],
        ),
        Concept(
            name="Hubris",
            description="Excessive pride or defiance of the gods that leads to downfall.",
            culture=CULTURE,
            concept_type=ConceptType.VICE,
            manifestations=["Arachne's challenge", "Icarus's flight"],
        ),
        Concept(
            name="Xenia",
            description="The sacred law of hospitality, protected by Zeus.",
            culture=CULTURE,
            concept_type=ConceptType.VIRTUE,
            manifestations=["Guest gifts", "Protection of strangers"],
        ),
    ]
    for concept in concepts:
        ontology.add_entity(concept)


def _add_relationships(ontology, deities, heroes, creatures) -> None:
    zeus, hera, athena, poseidon, cronus = (
        deities[n] for n in ("Zeus", "Hera", "Athena", "Poseidon", "Cronus")
    )
    heracles, perseus = heroes["Heracles"], heroes["Perseus"]
    medusa = creatures["Medusa"]

    family = [
        FamilyRelationship.builder(
            "Marriage of Zeus and Hera",
            "The divine marriage of the king and queen of the Olympians.",
            zeus.id,
            hera.id,
            FamilyRelationshipType.SPOUSE,
        )
        .strength(0.9)
        .build(),
        FamilyRelationship.builder(
            "Zeus fathers Athena",
            "Athena sprang fully formed from the head of Zeus.",
            zeus.id,
            athena.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Zeus fathers Heracles",
            "Heracles is the son of Zeus and the mortal Alcmene.",
            zeus.id,
            heracles.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Zeus fathers Perseus",
            "Perseus is the son of Zeus and the mortal Danae.",
            zeus.id,
            perseus.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Zeus and Poseidon brotherhood",
            "Zeus and Poseidon are brothers, sons of Cronus and Rhea.",
            zeus.id,
            poseidon.id,
            FamilyRelationshipType.SIBLING,
        )
        .strength(0.8)
        .build(),
        FamilyRelationship.builder(
            "Cronus fathers Zeus",
            "Zeus is the youngest son of Cronus, hidden from him at birth.",
            cronus.id,
            zeus.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
    ]

    titanomachy = (
        ConflictRelationship.builder(
            "Titanomachy",
            "The ten-year war between the Olympians led by Zeus and the Titans led by Cronus.",
            zeus.id,
            cronus.id,
            ConflictType.WAR,
        )
        .strength(1.0)
        .build()
    )
    titanomachy.set_outcome(
        ConflictOutcome(
            description="The Olympians defeated the Titans.",
            victor_id=zeus.id,
            consequences=[
                "The Titans were imprisoned in Tartarus",
                "Zeus became the ruler of the gods",
            ],
        )
    )
    slaying = (
        ConflictRelationship.builder(
            "Perseus slays Medusa",
            "Perseus's quest to slay the Gorgon Medusa.",
            perseus.id,
            medusa.id,
            ConflictType.BATTLE,
        )
        .strength(0.9)
        .bidirectional(False)
        .build()
    )
    slaying.set_outcome(
        ConflictOutcome(
            description="Perseus beheaded Medusa.",
            victor_id=perseus.id,
            consequences=["Pegasus and Chrysaor sprang from Medusa's blood"],
        )
    )

    alliances = [
        AllianceRelationship.builder(
            "Athena's patronage of Perseus",
            "Athena's divine guidance to Perseus during his quest.",
            athena.id,
            perseus.id,
            AllianceType.PATRONAGE,
            purpose="Divine guidance and protection",
        )
        .strength(0.8)
        .build(),
        AllianceRelationship.builder(
            "Olympian divine council",
            "Alliance of the major Olympians under Zeus's leadership.",
            zeus.id,
            poseidon.id,
            AllianceType.COALITION,
            purpose="Governance of cosmos and mortal affairs",
        )
        .strength(0.7)
        .build(),
    ]

    medusa_curse = (
        TransformationRelationship.builder(
            "Transformation of Medusa",
            "Athena turned the maiden Medusa into a Gorgon.",
            athena.id,
            medusa.id,
            TransformationType.CURSE,
            cause="Punishment for the desecration of Athena's temple",
        )
        .strength(1.0)
        .build()
    )
    medusa_curse.metadata.add_source(OVID)

    for relationship in [*family, titanomachy, slaying, *alliances, medusa_curse]:
        ontology.add_entity(relationship)


def _add_context(ontology, deities, locations) -> None:
    culture = Culture(
        name="Ancient Greek",
        description="The culture of ancient Greece, from the Mycenaean age to the end of antiquity.",
        regions={"Greece", "Aegean", "Ionia", "Magna Graecia"},
        languages={"Ancient Greek", "Koine Greek"},
        time_periods=[
            TimePeriod(name="Mycenaean Period", start_year=-1600, end_year=-1100),
            TimePeriod(name="Archaic Period", start_year=-800, end_year=-480),
            TimePeriod(name="Classical Period", start_year=-480, end_year=-323),
            TimePeriod(name="Hellenistic Period", start_year=-323, end_year=-31),
        ],
        cultural_practices=["Olympic Games", "Theater festivals", "Symposia"],
    )

    pantheon = Pantheon(
        name="Olympian Pantheon",
        description="The principal deities of Greek religion, residing atop Mount Olympus.",
        culture=CULTURE,
    )
    for name in ("Zeus", "Hera", "Athena", "Poseidon", "Apollo"):
        pantheon.add_primary_deity(deities[name].id)
    pantheon.set_cosmology(
        "The cosmos is divided into the sky (Zeus), the sea (Poseidon) and the "
        "underworld (Hades), with Mount Olympus as the home of the gods."
    )
    pantheon.set_founding_myth(
        "After the Titanomachy the three brothers divided the world between them."
    )
    pantheon.metadata.add_attribute("seat", locations["Mount Olympus"].name)

    era = MythologicalEra(
        name="Age of Heroes",
        description="The age when demigods walked the earth, ending with the Trojan War.",
        culture=CULTURE,
        sequence_order=4,
        characteristics=["Demigod heroes", "Great quests"],
        end_event="The Trojan War",
    )

    regions = [
        MythologicalRegion(
            name="Greece",
            description="Mainland Greece and the Peloponnese.",
            cultures={"Ancient Greek"},
            features=["Mount Olympus", "Delphi"],
            modern_locations={"Greece"},
            significance="Heartland of Greek civilization",
        ),
        MythologicalRegion(
            name="Aegean",
            description="The Aegean Sea and its islands, including Crete.",
            cultures={"Ancient Greek"},
            features=["Crete", "Cyclades"],
            modern_locations={"Greece", "Turkey"},
        ),
    ]

    for entity in [culture, pantheon, era, *regions]:
        ontology.add_entity(entity)


def create_greek_ontology() -> MythOntology:
    """Build the Greek example dataset."""
    ontology = MythOntology()
    deities = _add_deities(ontology)
    heroes = _add_heroes(ontology)
    creatures = _add_creatures(ontology)
    _add_artifacts(ontology)
    locations = _add_locations(ontology)
    _add_concepts(ontology)
    _add_relationships(ontology, deities, heroes, creatures)
    _add_context(ontology, deities, locations)
    return ontology
