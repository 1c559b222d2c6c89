"""Application ports (interfaces). Implemented by infrastructure adapters."""

from datetime import datetime
from typing import Protocol

from contactbook.application.dto import Snapshot


class Clock(Protocol):
    """Supplies the current instant. Decides whether a meeting is past or future."""

    def now(self) -> datetime:
        """Return the current instant."""
        ...


class DocumentStore(Protocol):
    """Reads and writes the whole manager state as one document."""

    def load(self) -> Snapshot | None:
        """Return the stored snapshot, or None when no document exists yet."""
        ...

    def save(self, snapshot: Snapshot) -> None:
        """Replace the stored document with this snapshot (full overwrite)."""
        ...
