"""Meeting ledger: every meeting, past or future, with lazy reclassification.

Meetings are stored in a dict keyed by id. Updating a meeting (reclassifying
it or recording notes) replaces the value for that id, which keeps the
meeting's position in store order. Lists are stable-sorted by date over that
order, so meetings on the same instant come back in the order they were added.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from contactbook.application.identifiers import IdentifierGenerator
from contactbook.application.ports import Clock
from contactbook.application.registry import ContactRegistry
from contactbook.domain import (
    FutureMeeting,
    IllegalStateError,
    InvalidArgumentError,
    Meeting,
    NullArgumentError,
    PastMeeting,
)

logger = logging.getLogger(__name__)


def _by_date(meetings: list[Meeting]) -> list[Meeting]:
    return sorted(meetings, key=lambda m: m.date)


class MeetingLedger:
    """Stores meetings and answers queries over them.

    Every read first calls reclassify(), so a future meeting whose date has
    passed is reported as past from the first query that observes it.
    """

    def __init__(
        self,
        clock: Clock,
        contacts: ContactRegistry,
        ids: IdentifierGenerator,
    ) -> None:
        self._clock = clock
        self._contacts = contacts
        self._ids = ids
        self._by_id: dict[int, Meeting] = {}

    def load(self, meetings: Iterable[Meeting]) -> None:
        """Insert stored meetings as-is. Their kind is not re-derived from the date."""
        for meeting in meetings:
            self._by_id[meeting.id] = meeting

    def _check_contacts(self, contact_ids: frozenset[int]) -> None:
        if not contact_ids:
            raise InvalidArgumentError("A meeting needs at least one contact.")
        if not self._contacts.contains_all(contact_ids):
            unknown = sorted(cid for cid in contact_ids if not self._contacts.exists(cid))
            raise InvalidArgumentError(f"Unknown contact id(s): {unknown}.")

    def _check_contact(self, contact_id: int) -> None:
        if contact_id is None:
            raise NullArgumentError("Contact is required.")
        if not self._contacts.exists(contact_id):
            raise InvalidArgumentError(f"Unknown contact id: {contact_id}.")

    def add_future(self, contact_ids: Iterable[int], date: datetime) -> int:
        """Schedule a meeting strictly after now and return its id."""
        if contact_ids is None or date is None:
            raise NullArgumentError("Contacts and date are required.")
        contact_ids = frozenset(contact_ids)
        if date <= self._clock.now():
            raise InvalidArgumentError(f"Meeting date {date} is not in the future.")
        self._check_contacts(contact_ids)
        meeting = FutureMeeting(id=self._ids.next(), date=date, contact_ids=contact_ids)
        self._by_id[meeting.id] = meeting
        logger.info("Future meeting %d scheduled for %s", meeting.id, date)
        return meeting.id

    def add_past(self, contact_ids: Iterable[int], date: datetime, notes: str) -> int:
        """Record a meeting that already happened. Any date is accepted."""
        if contact_ids is None or date is None or notes is None:
            raise NullArgumentError("Contacts, date and notes are required.")
        contact_ids = frozenset(contact_ids)
        self._check_contacts(contact_ids)
        meeting = PastMeeting(
            id=self._ids.next(), date=date, contact_ids=contact_ids, notes=notes
        )
        self._by_id[meeting.id] = meeting
        logger.info("Past meeting %d recorded for %s", meeting.id, date)
        return meeting.id

    def reclassify(self) -> int:
        """Turn every future meeting whose date is now or earlier into a past one.

        Returns how many meetings changed. Calling it again right away changes nothing.
        """
        now = self._clock.now()
        changed = 0
        for meeting_id, meeting in list(self._by_id.items()):
            match meeting:
                case FutureMeeting(date=date) if date <= now:
                    self._by_id[meeting_id] = meeting.elapse()
                    changed += 1
                case _:
                    pass
        if changed:
            logger.debug("Reclassified %d meeting(s) as past", changed)
        return changed

    def get(self, meeting_id: int) -> Meeting | None:
        self.reclassify()
        return self._by_id.get(meeting_id)

    def get_future(self, meeting_id: int) -> FutureMeeting | None:
        """Return the future meeting with this id, or None. A past meeting's id is an error."""
        meeting = self.get(meeting_id)
        if isinstance(meeting, PastMeeting):
            raise InvalidArgumentError(f"Meeting {meeting_id} is in the past.")
        return meeting

    def get_past(self, meeting_id: int) -> PastMeeting | None:
        """Return the past meeting with this id, or None. A future meeting's id is an error."""
        meeting = self.get(meeting_id)
        if isinstance(meeting, FutureMeeting):
            raise InvalidArgumentError(f"Meeting {meeting_id} is in the future.")
        return meeting

    def future_for_contact(self, contact_id: int) -> list[FutureMeeting]:
        self._check_contact(contact_id)
        self.reclassify()
        return _by_date(
            [
                m
                for m in self._by_id.values()
                if isinstance(m, FutureMeeting) and m.involves(contact_id)
            ]
        )

    def past_for_contact(self, contact_id: int) -> list[PastMeeting]:
        self._check_contact(contact_id)
        self.reclassify()
        return _by_date(
            [
                m
                for m in self._by_id.values()
                if isinstance(m, PastMeeting) and m.involves(contact_id)
            ]
        )

    def future_on(self, date: datetime) -> list[FutureMeeting]:
        """Future meetings at exactly this instant (not the whole calendar day)."""
        if date is None:
            raise NullArgumentError("Date is required.")
        self.reclassify()
        return _by_date(
            [
                m
                for m in self._by_id.values()
                if isinstance(m, FutureMeeting) and m.date == date
            ]
        )

    def add_notes(self, meeting_id: int, text: str) -> None:
        """Replace the notes of a past meeting (or one that has just become past)."""
        if text is None:
            raise NullArgumentError("Notes text is required.")
        meeting = self.get(meeting_id)
        match meeting:
            case None:
                raise InvalidArgumentError(f"Unknown meeting id: {meeting_id}.")
            case FutureMeeting():
                raise IllegalStateError(
                    f"Meeting {meeting_id} has not happened yet; notes cannot be added."
                )
            case PastMeeting():
                self._by_id[meeting_id] = meeting.with_notes(text)
                logger.info("Notes recorded for meeting %d", meeting_id)

    def meetings(self) -> list[Meeting]:
        """Snapshot in store order. Does not reclassify."""
        return list(self._by_id.values())
