"""Application layer: contact manager, registry, ledger, ports. Depends only on domain."""

from contactbook.application.contact_manager import ContactManager
from contactbook.application.dto import Snapshot
from contactbook.application.identifiers import IdentifierGenerator
from contactbook.application.ledger import MeetingLedger
from contactbook.application.ports import Clock, DocumentStore
from contactbook.application.registry import ContactRegistry

__all__ = [
    "Clock",
    "ContactManager",
    "ContactRegistry",
    "DocumentStore",
    "IdentifierGenerator",
    "MeetingLedger",
    "Snapshot",
]
