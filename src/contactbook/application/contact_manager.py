"""ContactManager: the public contact and meeting API over registry, ledger and ids."""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time

from contactbook.application.dto import Snapshot
from contactbook.application.identifiers import IdentifierGenerator
from contactbook.application.ledger import MeetingLedger
from contactbook.application.ports import Clock, DocumentStore
from contactbook.application.registry import ContactRegistry
from contactbook.domain import (
    Contact,
    FutureMeeting,
    Meeting,
    NullArgumentError,
    PastMeeting,
)

logger = logging.getLogger(__name__)

ContactRef = Contact | int


def _contact_id(contact: ContactRef) -> int:
    if contact is None:
        raise NullArgumentError("Contact is required.")
    return contact.id if isinstance(contact, Contact) else contact


def _contact_ids(contacts: Iterable[ContactRef] | None) -> frozenset[int] | None:
    if contacts is None:
        return None
    return frozenset(_contact_id(c) for c in contacts)


def _instant(when: date | datetime | None) -> datetime | None:
    """Widen a calendar date to midnight. Aware datetimes become naive local time."""
    if when is None:
        return None
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            return when.astimezone().replace(tzinfo=None)
        return when
    return datetime.combine(when, time.min)


class ContactManager:
    """Tracks contacts and meetings for one user.

    State is loaded from the store when the manager is built and written back
    only by flush(). Meetings that were stored as future stay future until the
    first query after their date has passed.
    """

    def __init__(self, store: DocumentStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

        snapshot = store.load()
        if snapshot is None:
            snapshot = Snapshot()
            logger.info("No stored document; starting empty")
        issued = [c.id for c in snapshot.contacts] + [m.id for m in snapshot.meetings]
        self._ids = IdentifierGenerator.restore(snapshot.seed, issued)
        self._contacts = ContactRegistry(self._ids)
        self._contacts.load(snapshot.contacts)
        self._meetings = MeetingLedger(self._clock, self._contacts, self._ids)
        self._meetings.load(snapshot.meetings)
        if snapshot.contacts or snapshot.meetings:
            logger.info(
                "Loaded %d contact(s) and %d meeting(s); next id %d",
                len(snapshot.contacts),
                len(snapshot.meetings),
                self._ids.seed,
            )

    # --- meetings ---

    def add_future_meeting(
        self, contacts: Iterable[ContactRef], date: date | datetime
    ) -> int:
        """Schedule a meeting and return its id. The date must be strictly after now."""
        return self._meetings.add_future(_contact_ids(contacts), _instant(date))

    def get_past_meeting(self, meeting_id: int) -> PastMeeting | None:
        return self._meetings.get_past(meeting_id)

    def get_future_meeting(self, meeting_id: int) -> FutureMeeting | None:
        return self._meetings.get_future(meeting_id)

    def get_meeting(self, meeting_id: int) -> Meeting | None:
        return self._meetings.get(meeting_id)

    def get_future_meeting_list(
        self, contact_or_date: ContactRef | date | datetime
    ) -> list[FutureMeeting]:
        """Future meetings for a contact, or at an exact instant, earliest first.

        A plain date means midnight of that day.
        """
        if contact_or_date is None:
            raise NullArgumentError("A contact or a date is required.")
        if isinstance(contact_or_date, date):
            return self._meetings.future_on(_instant(contact_or_date))
        return self._meetings.future_for_contact(_contact_id(contact_or_date))

    def get_past_meeting_list(self, contact: ContactRef) -> list[PastMeeting]:
        return self._meetings.past_for_contact(_contact_id(contact))

    def add_new_past_meeting(
        self,
        contacts: Iterable[ContactRef],
        date: date | datetime,
        text: str,
    ) -> None:
        """Record a meeting that already took place, with its notes."""
        self._meetings.add_past(_contact_ids(contacts), _instant(date), text)

    def add_meeting_notes(self, meeting_id: int, text: str) -> None:
        self._meetings.add_notes(meeting_id, text)

    # --- contacts ---

    def add_new_contact(self, name: str, notes: str) -> None:
        """Create a contact. Look it up with get_contacts(name) to learn its id."""
        self._contacts.add(name, notes)

    def get_contacts(self, *keys: int | str) -> set[Contact]:
        """get_contacts(1, 2, ...) by id (all must exist) or get_contacts("Name") by exact name."""
        if len(keys) == 1 and (keys[0] is None or isinstance(keys[0], str)):
            return self._contacts.by_name(keys[0])
        return self._contacts.by_ids(keys)

    def add_contact_notes(self, contact_id: ContactRef, text: str) -> None:
        """Append text to a contact's notes."""
        self._contacts.add_notes(_contact_id(contact_id), text)

    # --- persistence ---

    def flush(self) -> None:
        """Write contacts, meetings and the id seed to the store, replacing what was there."""
        snapshot = Snapshot(
            seed=self._ids.seed,
            contacts=tuple(self._contacts.contacts()),
            meetings=tuple(self._meetings.meetings()),
        )
        self._store.save(snapshot)
        logger.info(
            "Flushed %d contact(s) and %d meeting(s)",
            len(snapshot.contacts),
            len(snapshot.meetings),
        )
