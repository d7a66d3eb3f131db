"""Cross-cultural collections, one entity kind each.

Unlike the cultural datasets these hold only node entities, gathered from many
traditions so that the same kind can be compared across cultures.
"""

from mythologic.core.metadata import Source, SourceType
from mythologic.models import (
    Artifact,
    ArtifactType,
    Concept,
    ConceptType,
    Creature,
    CreatureType,
    Hero,
    HeroOrigin,
    Location,
    LocationType,
)
from mythologic.ontology import MythOntology


def _source(title: str, notes: str | None = None) -> Source:
    return Source(title=title, source_type=SourceType.COMPILATION_TEXT, notes=notes)


def _with_source(entity, source: Source):
    entity.metadata.add_source(source)
    return entity


def _ontology(entities) -> MythOntology:
    ontology = MythOntology()
    for entity in entities:
        ontology.add_entity(entity)
    return ontology


# (name, description, culture, artifact type, powers, owner)
ARTIFACTS = [
    ("Zeus's Thunderbolt", "The primary weapon of Zeus, source of lightning and thunder.", "Greek",
     ArtifactType.WEAPON, ["Creates lightning", "Produces thunder", "Symbol of Zeus's authority"], "Zeus"),
    ("Aegis", "A shield or breastplate of Zeus and Athena bearing the head of Medusa.", "Greek",
     ArtifactType.ARMOR, ["Divine protection", "Creates fear in enemies"], "Zeus/Athena"),
    ("Winged Sandals", "Sandals that let the wearer fly as swiftly as any bird.", "Greek",
     ArtifactType.CLOTHING, ["Flight", "Super speed"], "Hermes"),
    ("Mjölnir", "Thor's hammer, which returns to his hand when thrown.", "Norse",
     ArtifactType.WEAPON, ["Creates lightning and thunder", "Returns to wielder when thrown"], "Thor"),
    ("Gungnir", "Odin's spear that never misses its target.", "Norse",
     ArtifactType.WEAPON, ["Never misses its target", "Inscribed with runes"], "Odin"),
    ("Gleipnir", "The binding that restrains the wolf Fenrir.", "Norse",
     ArtifactType.OTHER, ["Unbreakable strength", "Made from impossible materials"], None),
    ("Cauldron of Dagda", "Magical cauldron that provided unlimited food.", "Celtic",
     ArtifactType.VESSEL, ["Provides unlimited food"], "The Dagda"),
    ("Claíomh Solais", "The Sword of Light, an unstoppable weapon in Irish mythology.", "Celtic",
     ArtifactType.WEAPON, ["Emits light", "Unstoppable in battle"], None),
    ("Excalibur", "The sword of King Arthur, given to him by the Lady of the Lake.", "Arthurian",
     ArtifactType.WEAPON, ["Unbreakable blade", "Scabbard prevents bearer from bleeding"], "King Arthur"),
    ("Holy Grail", "The cup of the Last Supper, sought by the knights of the Round Table.", "Arthurian",
     ArtifactType.VESSEL, ["Healing", "Eternal youth", "Spiritual enlightenment"], None),
    ("Lamp of Aladdin", "Oil lamp holding a djinn who grants wishes.", "Arabian",
     ArtifactType.VESSEL, ["Contains a wish-granting djinn"], None),
    ("Ring of Solomon", "Ring that let King Solomon command demons and speak with animals.", "Middle Eastern",
     ArtifactType.JEWELRY, ["Command over demons", "Ability to speak with animals"], "King Solomon"),
    ("Ruyi Jingu Bang", "The size-changing iron staff of Sun Wukong.", "Chinese",
     ArtifactType.WEAPON, ["Changes size according to wielder's will", "Indestructible"], "Sun Wukong"),
    ("Kusanagi-no-Tsurugi", "Legendary sword and one of the Imperial Regalia of Japan.", "Japanese",
     ArtifactType.WEAPON, ["Control over wind", "Symbol of imperial authority"], "Japanese Emperor"),
]

# (name, description, culture, origin, achievements)
HEROES = [
    ("Heracles", "Greatest of the Greek heroes, who completed the twelve labors.", "Greek",
     HeroOrigin.DEMIGOD, ["Twelve Labors of Heracles", "Killing the Nemean Lion"]),
    ("Achilles", "Hero of the Trojan War, invulnerable except for his heel.", "Greek",
     HeroOrigin.DEMIGOD, ["Killing Hector, prince of Troy", "Leading the Myrmidons"]),
    ("Odysseus", "King of Ithaca, known for his cunning and his ten-year voyage home.", "Greek",
     HeroOrigin.BLESSED_MORTAL, ["Devising the Trojan Horse", "Blinding the Cyclops Polyphemus"]),
    ("Theseus", "Athenian hero who slew the Minotaur in the Labyrinth of Crete.", "Greek",
     HeroOrigin.DEMIGOD, ["Slaying the Minotaur", "Unifying Attica"]),
    ("Sigurd", "Dragon-slayer who killed Fafnir and took its treasure.", "Norse",
     HeroOrigin.MORTAL, ["Slaying the dragon Fafnir", "Awakening the Valkyrie Brynhildr"]),
    ("Beowulf", "Geatish hero who slew Grendel and its mother.", "Norse",
     HeroOrigin.MORTAL, ["Defeating the monster Grendel", "Fighting a dragon in old age"]),
    ("Ragnar Lothbrok", "Legendary king known for his raids on England and France.", "Norse",
     HeroOrigin.MORTAL, ["Slaying a giant serpent", "Leading raids throughout Europe"]),
    ("Cú Chulainn", "Ulster hero who defended the province single-handed.", "Celtic",
     HeroOrigin.DEMIGOD, ["Defending Ulster in the Táin Bó Cúailnge", "Defeating the warrior Ferdiad"]),
    ("Fionn mac Cumhaill", "Hunter-warrior and leader of the Fianna.", "Celtic",
     HeroOrigin.BLESSED_MORTAL, ["Gaining wisdom from the Salmon of Knowledge"]),
    ("Gilgamesh", "King of Uruk who sought eternal life after the death of Enkidu.", "Mesopotamian",
     HeroOrigin.DEMIGOD, ["Defeating the monster Humbaba", "Slaying the Bull of Heaven"]),
    ("Enkidu", "Wild man created by the gods, who became Gilgamesh's closest friend.", "Mesopotamian",
     HeroOrigin.OTHER, ["Wrestling Gilgamesh to a standstill", "Helping defeat Humbaba"]),
    ("Sun Wukong", "The Monkey King, trickster companion of the monk Xuanzang.", "Chinese",
     HeroOrigin.TRANSFORMED, ["Mastering the 72 transformations", "Rebelling against Heaven"]),
    ("Yamato Takeru", "Japanese prince and warrior celebrated for his courage.", "Japanese",
     HeroOrigin.BLESSED_MORTAL, ["Slaying the Kumaso brothers", "Escaping a grass fire with Kusanagi"]),
    ("Arjuna", "The peerless archer of the Mahabharata.", "Hindu",
     HeroOrigin.DEMIGOD, ["Receiving the Bhagavad Gita from Krishna"]),
    ("Rama", "Avatar of Vishnu who defeated the demon king Ravana.", "Hindu",
     HeroOrigin.DIVINE, ["Breaking Shiva's bow", "Defeating the demon king Ravana"]),
    ("Hanuman", "The divine monkey who aided Rama.", "Hindu",
     HeroOrigin.DIVINE, ["Leaping across the ocean to Lanka"]),
]

# (name, description, culture, creature type, habitats, abilities)
CREATURES = [
    ("Minotaur", "Bull-headed man kept in the Labyrinth of Crete.", "Greek",
     CreatureType.HYBRID, {"Labyrinth", "Crete"}, ["Superhuman strength"]),
    ("Cerberus", "Three-headed dog guarding the entrance to the Underworld.", "Greek",
     CreatureType.GUARDIAN, {"Underworld"}, ["Preventing souls from escaping the Underworld"]),
    ("Medusa", "Gorgon with snakes for hair, whose gaze turns people to stone.", "Greek",
     CreatureType.MONSTER, {"Island of the Gorgons"}, ["Petrifying gaze"]),
    ("Chimera", "Fire-breathing monster with a lion's head, goat's body and serpent's tail.", "Greek",
     CreatureType.HYBRID, {"Lycia"}, ["Fire breathing"]),
    ("Jormungandr", "The Midgard Serpent encircling the world.", "Norse",
     CreatureType.MONSTER, {"Ocean", "Midgard"}, ["Enormous size", "Venomous"]),
    ("Fenrir", "Monstrous wolf destined to kill Odin at Ragnarök.", "Norse",
     CreatureType.MONSTER, {"Asgard"}, ["Able to break any chain except Gleipnir"]),
    ("Draugr", "Undead being of the burial mounds.", "Norse",
     CreatureType.UNDEAD, {"Burial mounds", "Graves"}, ["Superhuman strength", "Shape-shifting"]),
    ("Selkie", "Seal that takes human form by shedding its skin.", "Celtic",
     CreatureType.SHAPESHIFTER, {"Coastal regions", "Ocean"}, ["Transformation between seal and human form"]),
    ("Each Uisge", "Water horse that drowns those who ride it.", "Celtic",
     CreatureType.SHAPESHIFTER, {"Lochs", "Sea"}, ["Shapeshifting", "Drowning victims"]),
    ("Banshee", "Female spirit whose wailing warns of a death in the family.", "Celtic",
     CreatureType.SPIRIT, {"Near family homes"}, ["Foretelling death"]),
    ("Sphinx", "Lion with a human head, known for posing riddles.", "Egyptian",
     CreatureType.HYBRID, {"Desert"}, ["Posing riddles", "Guardian of sacred sites"]),
    ("Ammit", "Devourer of the hearts of the unworthy dead.", "Egyptian",
     CreatureType.HYBRID, {"Duat"}, ["Devouring hearts of the unworthy dead"]),
    ("Long", "Chinese dragon ruling over water and weather.", "Chinese",
     CreatureType.DRAGON, {"Water", "Sky"}, ["Weather control", "Flight"]),
    ("Kitsune", "Fox spirit that gains tails and power with age.", "Japanese",
     CreatureType.SHAPESHIFTER, {"Forests", "Mountains"}, ["Shapeshifting", "Illusion creation"]),
    ("Jiangshi", "Hopping corpse that drains the life force of the living.", "Chinese",
     CreatureType.UNDEAD, {"Graveyards"}, ["Absorbing qi"]),
    ("Baba Yaga", "Witch of the forest who flies in a mortar.", "Slavic",
     CreatureType.OTHER, {"Forests"}, ["Flying in a mortar", "Magic"]),
    ("Vodyanoy", "Water spirit that drowns the unwary.", "Slavic",
     CreatureType.SPIRIT, {"Lakes", "Rivers"}, ["Control over water"]),
    ("Firebird", "Bird with glowing feathers that brings fortune and misfortune alike.", "Slavic",
     CreatureType.OTHER, {"Distant lands"}, ["Glowing feathers", "Flight"]),
]

# (name, description, culture, location type, characteristics)
LOCATIONS = [
    ("Mount Olympus", "Home of the Olympian gods.", "Greek",
     LocationType.MOUNTAIN, ["Peak reaches into the heavens", "Divine palaces of the gods"]),
    ("Underworld", "Realm of the dead ruled by Hades.", "Greek",
     LocationType.UNDERWORLD, ["River Styx", "Fields of Asphodel"]),
    ("Elysian Fields", "Paradise within the Underworld for heroes and the blessed.", "Greek",
     LocationType.AFTERLIFE, ["Eternal spring", "No pain or suffering"]),
    ("Tartarus", "The abyss used as a prison for the Titans.", "Greek",
     LocationType.UNDERWORLD, ["Deepest part of the cosmos", "Surrounded by bronze walls"]),
    ("Asgard", "Home of the Aesir gods.", "Norse",
     LocationType.HEAVEN, ["Fortified with high walls", "Contains Valhalla"]),
    ("Midgard", "The world of humans.", "Norse",
     LocationType.OTHER, ["Encircled by Jormungandr", "Created from the body of Ymir"]),
    ("Valhalla", "The hall of the slain, ruled by Odin.", "Norse",
     LocationType.AFTERLIFE, ["Roof made of shields", "Home to the Einherjar"]),
    ("Yggdrasil", "The ash tree that connects the Nine Worlds.", "Norse",
     LocationType.COSMIC, ["Contains the Nine Worlds", "Central axis of the cosmos"]),
    ("Tír na nÓg", "The Land of Youth.", "Celtic",
     LocationType.AFTERLIFE, ["Eternal youth and beauty", "No illness or death"]),
    ("Annwn", "The Otherworld of Welsh mythology.", "Celtic",
     LocationType.UNDERWORLD, ["Source of wisdom and inspiration"]),
    ("Garden of Eden", "The biblical paradise of the first humans.", "Middle Eastern",
     LocationType.OTHER, ["Four rivers flowing from it", "Tree of Life"]),
    ("Dilmun", "Sumerian paradise where the immortals dwelled.", "Mesopotamian",
     LocationType.OTHER, ["No illness or death", "Sacred to Enki and Ninhursag"]),
    ("Mount Kunlun", "Mountain dwelling of the immortals.", "Chinese",
     LocationType.MOUNTAIN, ["Jade palaces", "Garden of immortality"]),
    ("Diyu", "The Chinese underworld of judgment and punishment.", "Chinese",
     LocationType.UNDERWORLD, ["Multiple levels of punishment", "Ruled by Yanluo Wang"]),
    ("Mount Meru", "The five-peaked mountain at the center of the cosmos.", "Hindu",
     LocationType.MOUNTAIN, ["Central axis of the universe"]),
    ("Svarga", "The celestial paradise of Indra.", "Hindu",
     LocationType.HEAVEN, ["Temporary paradise"]),
    ("Naraka", "The underworld where sins are punished before rebirth.", "Hindu",
     LocationType.UNDERWORLD, ["Temporary, not eternal"]),
]

# (name, description, culture, concept type, manifestations)
CONCEPTS = [
    ("Fate", "Destiny, personified by the three Moirai.", "Greek",
     ConceptType.FATE, ["Clotho", "Lachesis", "Atropos"]),
    ("Hubris", "Excessive pride or defiance of the gods that leads to downfall.", "Greek",
     ConceptType.VICE, ["Arachne's challenge to Athena"]),
    ("Xenia", "The sacred rule of hospitality, protected by Zeus.", "Greek",
     ConceptType.VIRTUE, ["Gifts to departing guests"]),
    ("Ragnarök", "The prophesied doom of the gods and rebirth of the world.", "Norse",
     ConceptType.COSMOLOGY, ["Fimbulwinter", "Final battle on Vigrid"]),
    ("Wyrd", "Personal fate that cannot be escaped.", "Norse",
     ConceptType.FATE, ["The Norns weaving fate"]),
    ("Honor", "Personal integrity and reputation.", "Norse",
     ConceptType.VIRTUE, ["Keeping oaths", "Courage in battle"]),
    ("Karma", "Cause and effect carried across lives.", "Hindu",
     ConceptType.COSMOLOGY, ["Actions determining future rebirth"]),
    ("Yin-Yang", "Complementary opposites whose interplay creates balance.", "Chinese",
     ConceptType.COSMOLOGY, ["Light and dark", "Active and passive"]),
    ("Dharma", "Cosmic order, law and duty.", "Hindu",
     ConceptType.VIRTUE, ["Cosmic law and order"]),
    ("Creation Ex Nihilo", "Creation of the universe from nothing by a supreme deity.", "Multiple",
     ConceptType.CREATION, ["Genesis", "Ptah speaking the world into being"]),
    ("World Egg", "The universe hatching from a cosmic egg.", "Multiple",
     ConceptType.CREATION, ["Hiranyagarbha", "Pangu's egg"]),
    ("Primordial Waters", "Creation from a formless watery chaos.", "Multiple",
     ConceptType.CREATION, ["Nun", "Tiamat and Apsu"]),
    ("Paradise", "A blissful afterlife realm for the worthy.", "Multiple",
     ConceptType.AFTERLIFE, ["Elysium", "Aaru", "Tír na nÓg"]),
    ("Reincarnation", "Rebirth of the soul in a new body.", "Multiple",
     ConceptType.AFTERLIFE, ["Samsara", "Transmigration in Orphism"]),
    ("Judgment of the Dead", "Weighing of a soul's deeds after death.", "Multiple",
     ConceptType.AFTERLIFE, ["Weighing of the heart", "Judges of Diyu"]),
    ("Sacrifice", "Giving up something of value to the gods.", "Multiple",
     ConceptType.VIRTUE, ["Odin's eye", "Burnt offerings"]),
    ("Justice", "Divine retribution and the balancing of wrongs.", "Multiple",
     ConceptType.JUSTICE, ["Nemesis", "Ma'at"]),
    ("Balance", "The order that keeps chaos at bay.", "Multiple",
     ConceptType.COSMOLOGY, ["Ma'at", "Yin-Yang"]),
]


def create_artifacts_ontology() -> MythOntology:
    source = _source("Mythological Artifacts Compendium")
    return _ontology(
        _with_source(
            Artifact(
                name=name,
                description=description,
                culture=culture,
                artifact_type=artifact_type,
                powers=powers,
                owner=owner,
            ),
            source,
        )
        for name, description, culture, artifact_type, powers, owner in ARTIFACTS
    )


def create_heroes_ontology() -> MythOntology:
    source = _source("Heroic Epics of the World")
    return _ontology(
        _with_source(
            Hero(
                name=name,
                description=description,
                culture=culture,
                origin=origin,
                achievements=achievements,
            ),
            source,
        )
        for name, description, culture, origin, achievements in HEROES
    )


def create_creatures_ontology() -> MythOntology:
    source = _source("Mythological Bestiary")
    return _ontology(
        _with_source(
            Creature(
                name=name,
                description=description,
                culture=culture,
                creature_type=creature_type,
                habitats=habitats,
                abilities=abilities,
            ),
            source,
        )
        for name, description, culture, creature_type, habitats, abilities in CREATURES
    )


def create_locations_ontology() -> MythOntology:
    source = _source("Mythological Geography")
    return _ontology(
        _with_source(
            Location(
                name=name,
                description=description,
                culture=culture,
                location_type=location_type,
                characteristics=characteristics,
            ),
            source,
        )
        for name, description, culture, location_type, characteristics in LOCATIONS
    )


def create_concepts_ontology() -> MythOntology:
    source = _source("Comparative Mythology", notes="Concepts shared across traditions")
    return _ontology(
        _with_source(
            Concept(
                name=name,
                description=description,
                culture=culture,
                concept_type=concept_type,
                manifestations=manifestations,
            ),
            source,
        )
        for name, description, culture, concept_type, manifestations in CONCEPTS
    )
