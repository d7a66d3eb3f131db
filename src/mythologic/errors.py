"""Exceptions raised by the mythologic package.

Lookups that miss return ``None`` rather than raising; these exceptions
cover malformed input and explicit policy violations only.
"""


class MythologicError(Exception):
    """Base class for all mythologic errors."""


class MalformedIdentifierError(MythologicError, ValueError):
    """A string could not be parsed as an entity identifier."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed identifier: {text!r}")


class CollisionError(MythologicError):
    """An entity was inserted under an identifier that is already taken."""

    def __init__(self, entity_id, existing_name: str, new_name: str):
        self.entity_id = entity_id
        self.existing_name = existing_name
        self.new_name = new_name
        super().__init__(
            f"Identifier {entity_id} already belongs to {existing_name!r}; "
            f"refusing to replace it with {new_name!r}"
        )


class SerializationError(MythologicError):
    """An ontology document could not be read or written."""
