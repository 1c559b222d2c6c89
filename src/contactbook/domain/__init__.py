"""Domain layer: entities and errors. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, FutureMeeting, Meeting, PastMeeting
from contactbook.domain.errors import (
    ContactbookError,
    DocumentError,
    IllegalStateError,
    InvalidArgumentError,
    NullArgumentError,
)

__all__ = [
    "Contact",
    "ContactbookError",
    "DocumentError",
    "FutureMeeting",
    "IllegalStateError",
    "InvalidArgumentError",
    "Meeting",
    "NullArgumentError",
    "PastMeeting",
]
