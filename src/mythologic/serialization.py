"""JSON load/save for ontologies.

Documents look like ``{"version": 1, "entities": [...]}``, each entity
tagged with its ``kind``. Relationship registrations on nodes are stored as
they are; loading re-inserts entities in document order.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from mythologic.errors import SerializationError
from mythologic.models import MythEntity, entity_list_adapter
from mythologic.ontology import MythOntology

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def dump_entities(entities: list[MythEntity]) -> list[dict]:
    """Entities as JSON-compatible dicts."""
    return entity_list_adapter.dump_python(entities, mode="json")


def load_entities(data: list[dict]) -> list[MythEntity]:
    """Validate dicts back into entity models.

    Raises:
        SerializationError: if any entry is not a valid entity.
    """
    try:
        return entity_list_adapter.validate_python(data)
    except ValidationError as e:
        raise SerializationError(f"Invalid entity data: {e}") from e


def ontology_to_dict(ontology: MythOntology) -> dict:
    return {"version": FORMAT_VERSION, "entities": dump_entities(ontology.all_entities())}


def ontology_from_dict(data: dict, **ontology_options) -> MythOntology:
    """Build a new ontology from a document dict.

    Extra keyword arguments go to :class:`MythOntology`.
    """
    if not isinstance(data, dict) or "entities" not in data:
        raise SerializationError("Ontology document must be an object with an 'entities' list")
    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise SerializationError(f"Unsupported ontology format version: {version}")

    ontology = MythOntology(**ontology_options)
    for entity in load_entities(data["entities"]):
        ontology.add_entity(entity)
    return ontology


def save_ontology(ontology: MythOntology, path: Path) -> Path:
    """Write the ontology as pretty-printed JSON. Parent dirs are created."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(ontology_to_dict(ontology), f, indent=2, ensure_ascii=False)
    logger.info("Saved %d entities to %s", ontology.entity_count(), path)
    return path


def load_ontology(path: Path, **ontology_options) -> MythOntology:
    """Read an ontology written by :func:`save_ontology`.

    Raises:
        SerializationError: if the file is missing, not JSON, or malformed.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SerializationError(f"No such ontology file: {path}") from e
    except json.JSONDecodeError as e:
        raise SerializationError(f"{path} is not valid JSON: {e}") from e

    ontology = ontology_from_dict(data, **ontology_options)
    logger.info("Loaded %d entities from %s", ontology.entity_count(), path)
    return ontology
