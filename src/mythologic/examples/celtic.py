"""Celtic mythology: the Tuatha Dé Danann and the Ulster and Fenian cycles."""

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

CULTURE = "Celtic"

LEBOR_GABALA = Source(
    title="Lebor Gabála Érenn",
    year=1100,
    source_type=SourceType.COMPILATION_TEXT,
    notes="Book of the Taking of Ireland, a collection of poems and prose narratives",
)
HEROIC_CYCLES = Source(
    title="Celtic Heroic Cycles",
    year=800,
    source_type=SourceType.COMPILATION_TEXT,
    notes="Collection of Irish and Welsh mythological tales",
)
CATH_MAIGE_TUIRED = Source(
    title="Cath Maige Tuired",
    year=1100,
    source_type=SourceType.PRIMARY_TEXT,
    notes="The Second Battle of Mag Tuired",
)


def _add_nodes(ontology: MythOntology) -> dict:
    deities = [
        Deity(
            name="The Dagda",
            description=(
                "Father figure and chief of the Tuatha Dé Danann, associated with fertility, "
                "agriculture, magic and wisdom."
            ),
            culture=CULTURE,
            domains={"Fertility", "Agriculture", "Magic", "Wisdom"},
            gender=Gender.MALE,
            importance=DeityImportance.SUPREME,
            pantheon="Tuatha Dé Danann",
            alternative_names=["Eochaid Ollathair"],
        ),
        Deity(
            name="Lugh",
            description="God of skill, crafts and light, master of all arts, honored at Lughnasadh.",
            culture=CULTURE,
            domains={"Light", "Skill", "Arts", "Crafts"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Tuatha Dé Danann",
            alternative_names=["Lugh Lámhfhada"],
        ),
        Deity(
            name="The Morrígan",
            description="Goddess of war, fate and death, often appearing as a trio or in animal form.",
            culture=CULTURE,
            domains={"War", "Fate", "Death", "Sovereignty"},
            gender=Gender.FEMALE,
            importance=DeityImportance.MAJOR,
            pantheon="Tuatha Dé Danann",
            alternative_names=["Phantom Queen"],
        ),
        Deity(
            name="Brigid",
            description="Goddess of poetry, healing and smithcraft, associated with fire and springtime.",
            culture=CULTURE,
            domains={"Poetry", "Healing", "Fire", "Smithcraft"},
            gender=Gender.FEMALE,
            importance=DeityImportance.MAJOR,
            pantheon="Tuatha Dé Danann",
            alternative_names=["Brighid"],
        ),
        Deity(
            name="Cernunnos",
            description="Horned god of animals, fertility and the underworld.",
            culture=CULTURE,
            domains={"Animals", "Fertility", "Underworld", "Wilderness"},
            gender=Gender.MALE,
            importance=DeityImportance.MAJOR,
            pantheon="Gaulish",
        ),
    ]
    for deity in deities:
        deity.metadata.add_source(LEBOR_GABALA)

    heroes = [
        Hero(
            name="Cú Chulainn",
            description=(
                "Ulster hero seized by the battle frenzy (ríastrad), famous for defending "
                "Ulster single-handed."
            ),
            culture=CULTURE,
            origin=HeroOrigin.DEMIGOD,
            achievements=[
                "Single-handedly defending Ulster in the Táin Bó Cúailnge",
                "Killing the hound of Culann",
                "Defeating the warrior Ferdiad",
            ],
        ),
        Hero(
            name="Fionn mac Cumhaill",
            description="Hunter-warrior of Irish mythology, leader of the Fianna.",
            culture=CULTURE,
            origin=HeroOrigin.BLESSED_MORTAL,
            achievements=[
                "Leading the Fianna warriors",
                "Gaining wisdom from the Salmon of Knowledge",
                "Creating the Giant's Causeway in battle with a Scottish giant",
            ],
        ),
    ]
    for hero in heroes:
        hero.metadata.add_source(HEROIC_CYCLES)

    creatures = [
        Creature(
            name="Balor",
            description="One-eyed king of the Fomorians whose gaze destroyed whatever it fell on.",
            culture=CULTURE,
            creature_type=CreatureType.GIANT,
            habitats={"Tory Island"},
            abilities=["Destructive eye"],
        ),
        Creature(
            name="Selkie",
            description="Seal that takes human form by shedding its skin.",
            culture=CULTURE,
            creature_type=CreatureType.SHAPESHIFTER,
            habitats={"Northern seas", "Coastal waters"},
            abilities=["Shapeshifting between seal and human form", "Swimming"],
        ),
        Creature(
            name="Banshee",
            description="Female spirit whose wailing warns of an impending death in a family.",
            culture=CULTURE,
            creature_type=CreatureType.FAE,
            habitats={"Ancestral homes"},
            abilities=["Foretelling death"],
        ),
    ]

    artifacts = [
        Artifact(
            name="Cauldron of Dagda",
            description="Magical cauldron owned by the Dagda that provided unlimited food.",
            culture=CULTURE,
            artifact_type=ArtifactType.VESSEL,
            powers=["Provides unlimited food", "Satisfies everyone according to their merit"],
            owner="The Dagda",
        ),
        Artifact(
            name="Claíomh Solais",
            description="The Sword of Light, an unstoppable weapon in Irish mythology.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=["Emits light", "Unstoppable in battle"],
        ),
        Artifact(
            name="Gáe Bulg",
            description="The spear of Cú Chulainn, made from the bone of a sea monster.",
            culture=CULTURE,
            artifact_type=ArtifactType.WEAPON,
            powers=[
                "Creates thirty barbs when entering the body",
                "Cannot be removed once it enters the body",
            ],
            owner="Cú Chulainn",
        ),
    ]

    locations = [
        Location(
            name="Tír na nÓg",
            description="The Land of Youth, a realm of everlasting youth, beauty, health and joy.",
            culture=CULTURE,
            location_type=LocationType.AFTERLIFE,
            characteristics=["Eternal youth and beauty", "Abundant food and drink", "No illness or death"],
            accessibility=[
                "Through invitation from one of its inhabitants",
                "Via magical transport across the western sea",
            ],
        ),
        Location(
            name="Annwn",
            description="The Otherworld in Welsh mythology, ruled by Arawn or Gwyn ap Nudd.",
            culture=CULTURE,
            location_type=LocationType.UNDERWORLD,
            characteristics=["Realm of delights and eternal youth", "Home to supernatural beings"],
            accessibility=["Through magical means", "Via specific places in the landscape"],
        ),
        Location(
            name="Emain Macha",
            description="Capital of Ulster and home of the Red Branch Knights.",
            culture=CULTURE,
            location_type=LocationType.CITY,
            characteristics=["Seat of King Conchobar mac Nessa", "Home of the Red Branch Knights"],
            accessibility=["Physical location in Ireland"],
        ),
    ]

    concepts = [
        Concept(
            name="Geis",
            description="A binding taboo or obligation whose breach brings ruin.",
            culture=CULTURE,
            concept_type=ConceptType.FATE,
            manifestations=["Cú Chulainn's geis against eating dog meat"],
        ),
        Concept(
            name="Samhain",
            description="The festival marking summer's end, when the Otherworld lies open.",
            culture=CULTURE,
            concept_type=ConceptType.TIME,
            manifestations=["Bonfires", "Visits from the Otherworld"],
        ),
    ]

    named = {}
    for entity in [*deities, *heroes, *creatures, *artifacts, *locations, *concepts]:
        ontology.add_entity(entity)
        named[entity.name] = entity
    return named


def _add_relationships(ontology: MythOntology, named: dict) -> None:
    dagda, lugh, morrigan, brigid = (
        named[n] for n in ("The Dagda", "Lugh", "The Morrígan", "Brigid")
    )
    cu_chulainn, balor = named["Cú Chulainn"], named["Balor"]

    family = [
        FamilyRelationship.builder(
            "The Dagda fathers Brigid",
            "Brigid is counted among the daughters of the Dagda.",
            dagda.id,
            brigid.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(0.9)
        .build(),
        FamilyRelationship.builder(
            "Lugh fathers Cú Chulainn",
            "Lugh begot Cú Chulainn on Deichtine, sister of King Conchobar.",
            lugh.id,
            cu_chulainn.id,
            FamilyRelationshipType.PARENT,
        )
        .strength(0.8)
        .build(),
        FamilyRelationship.builder(
            "Balor grandfathers Lugh",
            "Lugh is the son of Balor's daughter Ethniu.",
            balor.id,
            lugh.id,
            FamilyRelationshipType.ANCESTOR,
        )
        .strength(0.6)
        .build(),
    ]

    mag_tuired = (
        ConflictRelationship.builder(
            "Lugh slays Balor",
            "At the Second Battle of Mag Tuired Lugh put out Balor's eye with a sling stone.",
            lugh.id,
            balor.id,
            ConflictType.BATTLE,
        )
        .strength(1.0)
        .bidirectional(False)
        .build()
    )
    mag_tuired.set_outcome(
        ConflictOutcome(
            description="Balor's eye was driven through his head and the Fomorians were routed.",
            victor_id=lugh.id,
            consequences=["The Fomorians were driven from Ireland"],
        )
    )
    enmity = (
        ConflictRelationship.builder(
            "The Morrígan's enmity toward Cú Chulainn",
            "Spurned by the hero, the Morrígan harried him at the ford.",
            morrigan.id,
            cu_chulainn.id,
            ConflictType.RIVALRY,
        )
        .strength(0.7)
        .build()
    )

    samhain_pact = (
        AllianceRelationship.builder(
            "Pact of the Dagda and the Morrígan",
            "At Samhain the Morrígan promised the Dagda her aid against the Fomorians.",
            dagda.id,
            morrigan.id,
            AllianceType.PACT,
            purpose="Victory over the Fomorians",
        )
        .strength(0.8)
        .build()
    )

    shapeshifting = (
        TransformationRelationship.builder(
            "The Morrígan's shapeshifting",
            "The Morrígan appears as a crow, an eel, a wolf and an old woman.",
            morrigan.id,
            morrigan.id,
            TransformationType.SHAPESHIFTING,
            cause="Her own power",
        )
        .strength(0.9)
        .with_property("permanent", "false")
        .with_property("reversible", "true")
        .build()
    )

    for relationship in [*family, mag_tuired, enmity, samhain_pact, shapeshifting]:
        relationship.metadata.add_source(CATH_MAIGE_TUIRED)
        ontology.add_entity(relationship)


def _add_context(ontology: MythOntology, named: dict) -> None:
    culture = Culture(
        name="Celtic",
        description="The culture of the Celtic peoples of Europe, from the Iron Age through medieval times.",
        regions={"Ireland", "Scotland", "Wales", "Brittany", "Gaul"},
        languages={"Old Irish", "Middle Welsh", "Gaulish", "Brythonic"},
        time_periods=[
            TimePeriod(
                name="La Tène Period",
                start_year=-450,
                end_year=-50,
                description="Major Celtic cultural period characterized by distinctive art styles",
            ),
            TimePeriod(
                name="Early Medieval Celtic Period",
                start_year=400,
                end_year=900,
                description="Period of Celtic Christianity and written preservation of oral traditions",
            ),
        ],
        cultural_practices=["Druidic rituals", "Bardic tradition", "Seasonal festivals", "Warrior culture"],
    )

    pantheon = Pantheon(
        name="Tuatha Dé Danann",
        description="The main tribe of gods in Irish mythology, descendants of the goddess Danu.",
        culture=CULTURE,
        cosmology=(
            "The mortal world and the Otherworld intersect at sacred places, at fairy mounds "
            "and during festivals such as Samhain."
        ),
        founding_myth=(
            "The Tuatha Dé Danann arrived in Ireland on dark clouds bearing four treasures, "
            "defeated the Fir Bolg and then the Fomorians at Mag Tuired, and finally withdrew "
            "into the Otherworld before the Milesians."
        ),
    )
    for name in ("The Dagda", "Lugh", "The Morrígan", "Brigid"):
        pantheon.add_primary_deity(named[name].id)

    era = MythologicalEra(
        name="Mythological Cycle",
        description="The age of the successive invasions of Ireland by divine and semi-divine races.",
        culture=CULTURE,
        sequence_order=1,
        characteristics=["Battles of Mag Tuired", "Reign of the Tuatha Dé Danann"],
        end_event="The Milesians defeat the Tuatha Dé Danann",
    )

    regions = [
        MythologicalRegion(
            name="Ulster",
            description="The northern province of Ireland, setting of the Ulster Cycle.",
            cultures={"Celtic"},
            features=["Emain Macha", "Cooley peninsula"],
            modern_locations={"Northern Ireland", "County Donegal"},
            significance="Home of Cú Chulainn and the Red Branch Knights",
        ),
        MythologicalRegion(
            name="Wales",
            description="Land of the Mabinogion tales.",
            cultures={"Celtic"},
            features=["Dyfed", "Gwynedd"],
            modern_locations={"Wales"},
        ),
    ]

    for entity in [culture, pantheon, era, *regions]:
        ontology.add_entity(entity)


def create_celtic_ontology() -> MythOntology:
    """Build the Celtic example dataset."""
    ontology = MythOntology()
    named = _add_nodes(ontology)
    _add_relationships(ontology, named)
    _add_context(ontology, named)
    return ontology
