"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.clock import FixedClock, SystemClock
from contactbook.infrastructure.memory_store import InMemoryDocumentStore
from contactbook.infrastructure.persistence.json_store import (
    DATE_FORMAT,
    JsonDocumentStore,
)

__all__ = [
    "DATE_FORMAT",
    "FixedClock",
    "InMemoryDocumentStore",
    "JsonDocumentStore",
    "SystemClock",
]
