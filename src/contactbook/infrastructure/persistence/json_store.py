"""JSON implementation of DocumentStore.

Document shape:
{"seed": <next id>, "contacts": [{id, name, notes}],
 "meetings": [{id, kind: "past"|"future", date: "dd-mm-yyyy", contact_ids, notes}]}

Dates are stored at day precision; time of day is dropped on save and a
loaded meeting sits at midnight. A meeting's kind is taken from the document,
never re-derived from its date.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from contactbook.application.dto import Snapshot
from contactbook.domain import Contact, DocumentError, FutureMeeting, Meeting, PastMeeting

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%m-%Y"


class ContactRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PositiveInt
    name: str
    notes: str = ""

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("contact name must be non-empty")
        return value


class MeetingRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PositiveInt
    kind: Literal["past", "future"]
    date: dt.date
    contact_ids: list[PositiveInt] = Field(min_length=1)
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _parse_day(cls, value: object) -> object:
        if isinstance(value, str):
            return dt.datetime.strptime(value, DATE_FORMAT).date()
        return value

    @field_serializer("date")
    def _format_day(self, value: dt.date) -> str:
        return value.strftime(DATE_FORMAT)


class ContactbookDocument(BaseModel):
    """The whole persisted state. Ids are unique and meetings only name known contacts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: PositiveInt = 1
    contacts: list[ContactRecord] = Field(default_factory=list)
    meetings: list[MeetingRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> "ContactbookDocument":
        ids = [c.id for c in self.contacts] + [m.id for m in self.meetings]
        if len(ids) != len(set(ids)):
            raise ValueError("ids must be unique across contacts and meetings")
        known = {c.id for c in self.contacts}
        for meeting in self.meetings:
            missing = sorted(set(meeting.contact_ids) - known)
            if missing:
                raise ValueError(f"meeting {meeting.id} names unknown contact(s) {missing}")
        return self

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "ContactbookDocument":
        return cls(
            seed=snapshot.seed,
            contacts=[
                ContactRecord(id=c.id, name=c.name, notes=c.notes) for c in snapshot.contacts
            ],
            meetings=[_meeting_record(m) for m in snapshot.meetings],
        )

    def to_snapshot(self) -> Snapshot:
        return Snapshot(
            seed=self.seed,
            contacts=tuple(
                Contact(id=c.id, name=c.name, notes=c.notes) for c in self.contacts
            ),
            meetings=tuple(_meeting_from_record(m) for m in self.meetings),
        )


def _meeting_record(meeting: Meeting) -> MeetingRecord:
    return MeetingRecord(
        id=meeting.id,
        kind=meeting.kind,
        date=meeting.date.date(),
        contact_ids=sorted(meeting.contact_ids),
        notes=meeting.notes if isinstance(meeting, PastMeeting) else "",
    )


def _meeting_from_record(record: MeetingRecord) -> Meeting:
    when = dt.datetime.combine(record.date, dt.time.min)
    if record.kind == "past":
        return PastMeeting(
            id=record.id, date=when, contact_ids=record.contact_ids, notes=record.notes
        )
    return FutureMeeting(id=record.id, date=when, contact_ids=record.contact_ids)


class JsonDocumentStore:
    """Stores the manager state as one JSON file. save() rewrites the whole file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Snapshot | None:
        if not self._path.exists():
            logger.info("Document %s does not exist yet", self._path)
            return None
        try:
            raw = self._path.read_text(encoding="utf-8")
            document = ContactbookDocument.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            logger.warning("Document %s could not be decoded: %s", self._path, e)
            raise DocumentError(f"Invalid contactbook document {self._path}: {e}") from e
        return document.to_snapshot()

    def save(self, snapshot: Snapshot) -> None:
        document = ContactbookDocument.from_snapshot(snapshot)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Wrote %s", self._path)
