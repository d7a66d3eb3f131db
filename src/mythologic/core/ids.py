"""Entity identifiers.

Every stored thing (node entity, relationship or cultural context) is keyed
by a random UUID. Identifiers share one flat namespace across all kinds.
"""

from uuid import UUID, uuid4

from mythologic.errors import MalformedIdentifierError

MythId = UUID


def new_id() -> MythId:
    """Generate a fresh random identifier."""
    return uuid4()


def parse_id(text: str) -> MythId:
    """Parse an identifier from its canonical hyphenated hex form.

    Raises:
        MalformedIdentifierError: if ``text`` is not a valid UUID string.
    """
    if not isinstance(text, str):
        raise MalformedIdentifierError(repr(text))
    try:
        return UUID(text.strip())
    except ValueError as e:
        raise MalformedIdentifierError(text) from e


def format_id(entity_id: MythId) -> str:
    """Render an identifier as a lowercase hyphenated string."""
    return str(entity_id)
