"""Example datasets for the major mythological traditions.

``EXAMPLE_ONTOLOGIES`` holds the cultural datasets, each a complete little
graph with relationships and cultural context. ``COLLECTION_ONTOLOGIES``
holds the cross-cultural collections of a single entity kind.
"""

from collections.abc import Callable

from mythologic.examples.celtic import create_celtic_ontology
from mythologic.examples.egyptian import create_egyptian_ontology
from mythologic.examples.greek import create_greek_ontology
from mythologic.examples.hindu import create_hindu_ontology
from mythologic.examples.norse import create_norse_ontology
from mythologic.examples.thematic import (
    create_artifacts_ontology,
    create_concepts_ontology,
    create_creatures_ontology,
    create_heroes_ontology,
    create_locations_ontology,
)
from mythologic.ontology import MythOntology

EXAMPLE_ONTOLOGIES: dict[str, Callable[[], MythOntology]] = {
    "greek": create_greek_ontology,
    "norse": create_norse_ontology,
    "egyptian": create_egyptian_ontology,
    "celtic": create_celtic_ontology,
    "hindu": create_hindu_ontology,
}

COLLECTION_ONTOLOGIES: dict[str, Callable[[], MythOntology]] = {
    "artifacts": create_artifacts_ontology,
    "heroes": create_heroes_ontology,
    "creatures": create_creatures_ontology,
    "locations": create_locations_ontology,
    "concepts": create_concepts_ontology,
}

ALL_ONTOLOGIES: dict[str, Callable[[], MythOntology]] = {
    **EXAMPLE_ONTOLOGIES,
    **COLLECTION_ONTOLOGIES,
}


def create_example_ontology(name: str) -> MythOntology:
    """Build the dataset or collection registered under ``name`` (case-insensitive).

    Raises:
        KeyError: if nothing is registered under that name.
    """
    try:
        factory = ALL_ONTOLOGIES[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown example dataset {name!r}; choose from {', '.join(ALL_ONTOLOGIES)}"
        ) from None
    return factory()


__all__ = [
    "ALL_ONTOLOGIES",
    "COLLECTION_ONTOLOGIES",
    "EXAMPLE_ONTOLOGIES",
    "create_example_ontology",
    "create_greek_ontology",
    "create_norse_ontology",
    "create_egyptian_ontology",
    "create_celtic_ontology",
    "create_hindu_ontology",
    "create_artifacts_ontology",
    "create_heroes_ontology",
    "create_creatures_ontology",
    "create_locations_ontology",
    "create_concepts_ontology",
]
