"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact, FutureMeeting, PastMeeting) and errors. No outer dependencies.
- application: ContactManager facade, ContactRegistry, MeetingLedger, IdentifierGenerator, ports.
- infrastructure: adapters (SystemClock, FixedClock, JsonDocumentStore, InMemoryDocumentStore).
"""

from contactbook.application import (
    Clock,
    ContactManager,
    ContactRegistry,
    DocumentStore,
    IdentifierGenerator,
    MeetingLedger,
    Snapshot,
)
from contactbook.domain import (
    Contact,
    ContactbookError,
    DocumentError,
    FutureMeeting,
    IllegalStateError,
    InvalidArgumentError,
    Meeting,
    NullArgumentError,
    PastMeeting,
)
from contactbook.infrastructure import (
    FixedClock,
    InMemoryDocumentStore,
    JsonDocumentStore,
    SystemClock,
)

__all__ = [
    "Clock",
    "Contact",
    "ContactManager",
    "ContactRegistry",
    "ContactbookError",
    "DocumentError",
    "DocumentStore",
    "FixedClock",
    "FutureMeeting",
    "IdentifierGenerator",
    "IllegalStateError",
    "InMemoryDocumentStore",
    "InvalidArgumentError",
    "JsonDocumentStore",
    "Meeting",
    "MeetingLedger",
    "NullArgumentError",
    "PastMeeting",
    "Snapshot",
    "SystemClock",
]
