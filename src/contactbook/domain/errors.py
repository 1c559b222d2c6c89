"""Error taxonomy shared by every layer."""


class ContactbookError(Exception):
    """Base class for all contactbook errors."""


class NullArgumentError(ContactbookError, ValueError):
    """A required argument was None."""


class InvalidArgumentError(ContactbookError, ValueError):
    """An argument was present but broke a business rule (unknown id, past date, empty set)."""


class IllegalStateError(ContactbookError, RuntimeError):
    """The target entity is in the wrong lifecycle state for the operation."""


class DocumentError(ContactbookError):
    """The persisted document could not be decoded."""
