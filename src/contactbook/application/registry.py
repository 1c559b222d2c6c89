"""Contact registry: the in-memory collection of known contacts."""

import logging
from collections.abc import Iterable

from contactbook.application.identifiers import IdentifierGenerator
from contactbook.domain import Contact, InvalidArgumentError, NullArgumentError

logger = logging.getLogger(__name__)


class ContactRegistry:
    """Stores contacts keyed by id. Order preserved by insertion."""

    def __init__(self, ids: IdentifierGenerator) -> None:
        self._ids = ids
        self._by_id: dict[int, Contact] = {}

    def load(self, contacts: Iterable[Contact]) -> None:
        for contact in contacts:
            self._by_id[contact.id] = contact

    def add(self, name: str, notes: str) -> int:
        """Create a contact and return its id. Name and notes are required."""
        if name is None or notes is None:
            raise NullArgumentError("Contact name and notes are required.")
        if not name.strip():
            raise InvalidArgumentError("Contact name must be non-empty.")
        contact = Contact(id=self._ids.next(), name=name, notes=notes)
        self._by_id[contact.id] = contact
        logger.info("Contact %d added (%s)", contact.id, contact.name)
        return contact.id

    def exists(self, contact_id: int) -> bool:
        return contact_id in self._by_id

    def contains_all(self, contact_ids: Iterable[int]) -> bool:
        return all(self.exists(cid) for cid in contact_ids)

    def get(self, contact_id: int) -> Contact | None:
        return self._by_id.get(contact_id)

    def by_ids(self, contact_ids: Iterable[int]) -> set[Contact]:
        """Return the contacts with these ids. Any unknown id fails the whole lookup."""
        wanted = list(contact_ids)
        unknown = [cid for cid in wanted if not self.exists(cid)]
        if unknown:
            raise InvalidArgumentError(f"Unknown contact id(s): {unknown}.")
        return {self._by_id[cid] for cid in wanted}

    def by_name(self, name: str) -> set[Contact]:
        """Return contacts whose name equals `name` exactly."""
        if name is None:
            raise NullArgumentError("Name is required.")
        return {c for c in self._by_id.values() if c.name == name}

    def add_notes(self, contact_id: int, text: str) -> None:
        """Append text to a contact's notes. The stored value is replaced, not mutated."""
        if text is None:
            raise NullArgumentError("Notes text is required.")
        contact = self._by_id.get(contact_id)
        if contact is None:
            raise InvalidArgumentError(f"Unknown contact id: {contact_id}.")
        self._by_id[contact_id] = contact.with_appended_notes(text)

    def contacts(self) -> list[Contact]:
        return list(self._by_id.values())
