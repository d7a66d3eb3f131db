"""Hindu mythology: the Trimurti, the avatars of Vishnu and the great epics."""

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

CULTURE = "Hindu"

VEDAS = Source(
    title="Vedas",
    year=-1500,
    source_type=SourceType.PRIMARY_TEXT,
    notes="Ancient Sanskrit texts of Hinduism",
)
PURANAS = Source(
    title="Puranas",
    year=300,
    source_type=SourceType.COMPILATION_TEXT,
    notes="Ancient and medieval texts of Hinduism focusing on deity narratives",
)
EPICS = Source(
    title="Mahabharata and Ramayana",
    year=-400,
    source_type=SourceType.LITERARY_TEXT,
    notes="Ancient Sanskrit epics of India",
)


def _add_nodes(ontology: MythOntology) -> dict:
    trimurti = [
        Deity(
            name="Brahma",
            description="The creator god of the Trimurti, responsible for the creation of the universe.",
            culture=CULTURE,
            domains={"Creation", "Knowledge", "Vedas"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Trimurti",
        ),
        Deity(
            name="Vishnu",
            description="The preserver god of the Trimurti, who descends as avatars to restore dharma.",
            culture=CULTURE,
            domains={"Preservation", "Protection", "Dharma"},
            gender=Gender.MALE,
            importance=DeityImportance.SUPREME,
            pantheon="Trimurti",
        ),
        Deity(
            name="Shiva",
            description="The destroyer god of the Trimurti, lord of meditation, yoga and the cosmic dance.",
            culture=CULTURE,
            domains={"Destruction", "Transformation", "Meditation", "Dance"},
            gender=Gender.MALE,
            importance=DeityImportance.SUPREME,
            pantheon="Trimurti",
        ),
    ]
    for deity in trimurti:
        deity.metadata.add_source(VEDAS)
        deity.metadata.add_source(PURANAS)

    others = [
        Deity(
            name="Devi",
            description="The supreme goddess, manifesting as Parvati, Durga and Kali among other forms.",
            culture=CULTURE,
            domains={"Power", "Energy", "Creation", "Protection"},
            gender=Gender.FEMALE,
            importance=DeityImportance.SUPREME,
            pantheon="Shaktism",
            alternative_names=["Shakti", "Parvati"],
        ),
        Deity(
            name="Ganesha",
            description="Elephant-headed god of beginnings and wisdom, the remover of obstacles.",
            culture=CULTURE,
            domains={"Beginnings", "Wisdom", "Obstacles", "Arts"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            alternative_names=["Ganapati"],
        ),
        Deity(
            name="Krishna",
            description="Avatar of Vishnu, divine hero and teacher who delivered the Bhagavad Gita.",
            culture=CULTURE,
            domains={"Protection", "Dharma", "Divine Love", "Wisdom"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Vaishnavism",
        ),
    ]
    for deity in others:
        deity.metadata.add_source(PURANAS)

    heroes = [
        Hero(
            name="Arjuna",
            description="Third of the Pandava brothers, the peerless archer of the Mahabharata.",
            culture=CULTURE,
            origin=HeroOrigin.DEMIGOD,
            achievements=[
                "Winning the archery contest for Draupadi's hand",
                "Receiving the Bhagavad Gita from Krishna",
                "Defeating many warriors in the Kurukshetra War",
            ],
        ),
        Hero(
            name="Rama",
            description="Seventh avatar of Vishnu, who rescued his wife Sita from the demon king Ravana.",
            culture=CULTURE,
            origin=HeroOrigin.DIVINE,
            achievements=[
                "Breaking Shiva's bow",
                "Building a bridge to Lanka",
                "Defeating the demon king Ravana",
            ],
        ),
        Hero(
            name="Hanuman",
            description="The divine monkey who aided Rama in rescuing Sita.",
            culture=CULTURE,
            origin=HeroOrigin.DIVINE,
            achievements=[
                "Leaping across the ocean to Lanka",
                "Burning Lanka with his flaming tail",
                "Carrying a mountain of healing herbs",
            ],
        ),
    ]
    for hero in heroes:
        hero.metadata.add_source(EPICS)

    creatures = [
        Creature(
            name="Ravana",
            description="Ten-headed rakshasa king of Lanka who abducted Sita.",
            culture=CULTURE,
            creature_type=CreatureType.MONSTER,
            habitats={"Lanka"},
            abilities=["Ten heads", "Near invulnerability granted by Brahma"],
        ),
        Creature(
            name="Garuda",
            description="King of birds and the mount of Vishnu.",
            culture=CULTURE,
            creature_type=CreatureType.HYBRID,
            habitats={"Sky"},
            abilities=["Flight", "Slaying serpents"],
        ),
        Creature(
            name="Shesha",
            description="The thousand-headed serpent on whose coils Vishnu rests.",
            culture=CULTURE,
            creature_type=CreatureType.OTHER,
            habitats={"Cosmic ocean"},
            abilities=["Bearing the worlds on his hoods"],
            metadata={"attributes": {"creature_class": "Naga"}},
        ),
    ]

    artifacts = [
        Artifact(
            name="Sudarshana Chakra",
            description="The spinning discus of Vishnu.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Returns to its wielder", "Cuts through any foe"],
            owner="Vishnu",
        ),
        Artifact(
            name="Trishula",
            description="The trident of Shiva.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Destroys the three worlds of illusion"],
            owner="Shiva",
        ),
        Artifact(
            name="Gandiva",
            description="The divine bow wielded by Arjuna.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Inexhaustible quivers"],
            creator="Brahma",
            owner="Arjuna",
        ),
    ]

    locations = [
        Location(
            name="Mount Meru",
            description="The sacred five-peaked mountain at the center of the cosmos.",
            culture=CULTURE,
            location_type=LocationType.MOUNTAIN,
            characteristics=[
                "Central axis of the universe",
                "Five peaks made of precious substances",
                "Home of Brahma and other deities",
            ],
            accessibility=["Divine or spiritual means"],
        ),
        Location(
            name="Svarga",
            description="The celestial paradise where the righteous dwell before rebirth.",
            culture=CULTURE,
            location_type=LocationType.HEAVEN,
            characteristics=["Ruled by Indra", "Temporary paradise"],
            accessibility=["Through righteous deeds and karma"],
        ),
        Location(
            name="Naraka",
            description="The underworld where souls are punished for their sins before rebirth.",
            culture=CULTURE,
            location_type=LocationType.UNDERWORLD,
            characteristics=["Multiple levels of punishment", "Temporary, not eternal"],
            accessibility=["Through sinful deeds and karma"],
        ),
    ]

    concepts = [
        Concept(
            name="Karma",
            description="The principle of cause and effect by which actions shape future lives.",
            culture=CULTURE,
            concept_type=ConceptType.COSMOLOGY,
            manifestations=["Actions determining future rebirth", "Accumulated merits and demerits"],
        ),
        Concept(
            name="Dharma",
            description="The cosmic order, law, duty and virtue that maintain balance in existence.",
            culture=CULTURE,
            concept_type=ConceptType.VIRTUE,
            manifestations=["Cosmic law and order", "Religious and moral law"],
        ),
        Concept(
            name="Samsara",
            description="The cycle of death and rebirth that souls undergo until achieving moksha.",
            culture=CULTURE,
            concept_type=ConceptType.AFTERLIFE,
            manifestations=["Continuous cycle of reincarnation", "Escape through moksha"],
        ),
    ]

    named = {}
    for entity in [*trimurti, *others, *heroes, *creatures, *artifacts, *locations, *concepts]:
        ontology.add_entity(entity)
        named[entity.name] = entity
    return named


def _add_relationships(ontology: MythOntology, named: dict) -> None:
    vishnu, shiva, devi, ganesha, krishna = (
        named[n] for n in ("Vishnu", "Shiva", "Devi", "Ganesha", "Krishna")
    )
    arjuna, rama, hanuman = (named[n] for n in ("Arjuna", "Rama", "Hanuman"))
    ravana, garuda = named["Ravana"], named["Garuda"]

    family = [
        FamilyRelationship.builder(
            "Marriage of Shiva and Devi",
            "Shiva and Parvati, the divine couple of Mount Kailash.",
            shiva.id,
            devi.id,
            FamilyRelationshipType.SPOUSE,
        )
        .strength(1.0)
        .build(),
        FamilyRelationship.builder(
            "Shiva fathers Ganesha",
            "Shiva restored Ganesha's life with an elephant's head.",
            shiva.id,
            ganesha.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(0.9)
        .build(),
        FamilyRelationship.builder(
            "Devi mothers Ganesha",
            "Parvati shaped Ganesha from the clay of her body.",
            devi.id,
            ganesha.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(1.0)
        .build(),
    ]

    lanka_war = (
        ConflictRelationship.builder(
            "War for Lanka",
            "Rama's army of monkeys and bears besieged Lanka to free Sita.",
            rama.id,
            ravana.id,
            ConflictType.WAR,
        )
        .strength(1.0)
        .build()
    )
    lanka_war.set_outcome(
        ConflictOutcome(
            description="Rama slew Ravana with the Brahmastra.",
            victor_id=rama.id,
            consequences=["Sita was freed", "Vibhishana was crowned king of Lanka"],
        )
    )

    alliances = [
        AllianceRelationship.builder(
            "Hanuman's devotion to Rama",
            "Hanuman served Rama throughout the search for Sita.",
            hanuman.id,
            rama.id,
            AllianceType.FRIENDSHIP,
            purpose="Rescue of Sita",
        )
        .strength(1.0)
        .build(),
        AllianceRelationship.builder(
            "Krishna guides Arjuna",
            "Krishna served as Arjuna's charioteer and counsel at Kurukshetra.",
            krishna.id,
            arjuna.id,
            AllianceType.MENTORSHIP,
            purpose="Teaching the Bhagavad Gita",
        )
        .strength(0.9)
        .build(),
        AllianceRelationship.builder(
            "Garuda bears Vishnu",
            "Garuda agreed to serve as Vishnu's mount in exchange for immortality.",
            garuda.id,
            vishnu.id,
            AllianceType.OATH,
        )
        .strength(0.8)
        .build(),
    ]

    avatars = [
        TransformationRelationship.builder(
            "Vishnu descends as Rama",
            "The seventh avatar of Vishnu.",
            vishnu.id,
            rama.id,
            TransformationType.REINCARNATION,
            cause="Restoring dharma in the Treta Yuga",
        )
        .strength(1.0)
        .build(),
        TransformationRelationship.builder(
            "Vishnu descends as Krishna",
            "The eighth avatar of Vishnu.",
            vishnu.id,
            krishna.id,
            TransformationType.REINCARNATION,
            cause="Restoring dharma in the Dvapara Yuga",
        )
        .strength(1.0)
        .build(),
    ]

    for relationship in [*family, lanka_war, *alliances, *avatars]:
        relationship.metadata.add_source(EPICS)
        ontology.add_entity(relationship)


def _add_context(ontology: MythOntology, named: dict) -> None:
    culture = Culture(
        name="Hindu Tradition",
        description="The religious and cultural traditions of the Indian subcontinent.",
        regions={"India", "Nepal", "Southeast Asia"},
        languages={"Sanskrit", "Tamil", "Hindi"},
        time_periods=[
            TimePeriod(
                name="Vedic Period",
                start_year=-1500,
                end_year=-500,
                description="Composition of the Vedas and early Hindu traditions",
            ),
            TimePeriod(
                name="Epic Period",
                start_year=-500,
                end_year=500,
                description="Composition of the Mahabharata, Ramayana and early Puranas",
            ),
            TimePeriod(
                name="Puranic Period",
                start_year=500,
                end_year=1500,
                description="Compilation of the Puranas and growth of devotional traditions",
            ),
        ],
        cultural_practices=["Puja", "Yoga and meditation", "Pilgrimage", "Festival celebrations"],
    )

    trimurti = Pantheon(
        name="Trimurti",
        description="The trinity of Brahma the creator, Vishnu the preserver and Shiva the destroyer.",
        culture=CULTURE,
        cosmology=(
            "The universe is created and destroyed in vast cycles of yugas, with Mount Meru "
            "at its center, heavens above and hells below."
        ),
        founding_myth=(
            "Brahma emerges from a lotus growing from the navel of Vishnu, who sleeps on the "
            "coils of Shesha in the cosmic waters, and begins creation."
        ),
    )
    for name in ("Brahma", "Vishnu", "Shiva"):
        trimurti.add_primary_deity(named[name].id)
    trimurti.add_secondary_deity(named["Krishna"].id)

    shaktism = Pantheon(
        name="Shaktism",
        description="The tradition worshipping Shakti, or Devi, as the supreme deity.",
        culture=CULTURE,
        cosmology="All existence is the manifestation of Shakti, the divine feminine energy.",
    )
    shaktism.add_primary_deity(named["Devi"].id)

    eras = [
        MythologicalEra(
            name="Treta Yuga",
            description="The second age, in which Rama lived.",
            culture=CULTURE,
            sequence_order=2,
            characteristics=["Dharma stands on three legs", "Reign of Rama"],
            end_event="Rama departs the world",
        ),
        MythologicalEra(
            name="Dvapara Yuga",
            description="The third age, in which Krishna lived and the Kurukshetra War was fought.",
            culture=CULTURE,
            sequence_order=3,
            characteristics=["Dharma stands on two legs", "Kurukshetra War"],
            end_event="Death of Krishna",
        ),
    ]

    regions = [
        MythologicalRegion(
            name="Kosala",
            description="The kingdom of Rama, with its capital at Ayodhya.",
            cultures={"Hindu Tradition"},
            features=["Ayodhya", "Sarayu river"],
            modern_locations={"Uttar Pradesh"},
            significance="Birthplace of Rama",
        ),
        MythologicalRegion(
            name="Kurukshetra",
            description="The plain on which the Mahabharata war was fought.",
            cultures={"Hindu Tradition"},
            features=["Brahma Sarovar"],
            modern_locations={"Haryana"},
            significance="Where Krishna delivered the Bhagavad Gita",
        ),
    ]

    for entity in [culture, trimurti, shaktism, *eras, *regions]:
        ontology.add_entity(entity)


def create_hindu_ontology() -> MythOntology:
    """Build the Hindu example dataset."""
    ontology = MythOntology()
    named = _add_nodes(ontology)
    _add_relationships(ontology, named)
    _add_context(ontology, named)
    return ontology
