"""Domain entities: Contact and the two meeting variants."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from contactbook.domain.errors import InvalidArgumentError

FUTURE = "future"
PAST = "past"


def _check_id(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidArgumentError(f"{what} id must be a positive integer, got {value!r}.")


@dataclass(frozen=True, eq=False)
class Contact:
    """
    A named party the user knows.
    Identity is the id: two Contact values with the same id are the same contact.
    """

    id: int
    name: str
    notes: str = ""

    def __post_init__(self):
        _check_id(self.id, "Contact")
        if not self.name or not self.name.strip():
            raise InvalidArgumentError("Contact name must be non-empty.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contact):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("contact", self.id))

    def with_appended_notes(self, text: str) -> "Contact":
        """Return a copy whose notes have `text` appended on a new line."""
        notes = f"{self.notes}\n{text}" if self.notes else text
        return Contact(id=self.id, name=self.name, notes=notes)


@dataclass(frozen=True)
class _MeetingFields:
    id: int
    date: datetime
    contact_ids: frozenset[int]

    def __post_init__(self):
        _check_id(self.id, "Meeting")
        object.__setattr__(self, "contact_ids", frozenset(self.contact_ids))
        if not self.contact_ids:
            raise InvalidArgumentError("A meeting needs at least one contact.")

    def involves(self, contact_id: int) -> bool:
        return contact_id in self.contact_ids


@dataclass(frozen=True)
class FutureMeeting(_MeetingFields):
    """A scheduled meeting whose date has not been observed to pass."""

    @property
    def kind(self) -> Literal["future"]:
        return FUTURE

    def elapse(self) -> "PastMeeting":
        """The same meeting once its date has gone by. Notes start empty."""
        return PastMeeting(id=self.id, date=self.date, contact_ids=self.contact_ids)


@dataclass(frozen=True)
class PastMeeting(_MeetingFields):
    """A meeting that took place. Notes are replaced, never edited in place."""

    notes: str = ""

    @property
    def kind(self) -> Literal["past"]:
        return PAST

    def with_notes(self, notes: str) -> "PastMeeting":
        return PastMeeting(
            id=self.id,
            date=self.date,
            contact_ids=self.contact_ids,
            notes=notes,
        )


Meeting = FutureMeeting | PastMeeting
