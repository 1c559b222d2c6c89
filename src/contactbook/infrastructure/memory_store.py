"""In-memory implementation of DocumentStore (no file)."""

from contactbook.application.dto import Snapshot


class InMemoryDocumentStore:
    """Keeps the last saved snapshot in memory. A new manager built on the same
    store sees what the previous one flushed, like reopening a file.
    """

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self._snapshot = snapshot
        self.saves = 0

    def load(self) -> Snapshot | None:
        return self._snapshot

    def save(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self.saves += 1
