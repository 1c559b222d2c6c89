"""Tests for JsonDocumentStore (day-precision dates, authoritative kind, schema checks)."""

import json
from datetime import datetime

import pytest

from contactbook.application import Snapshot
from contactbook.domain import Contact, DocumentError, FutureMeeting, PastMeeting
from contactbook.infrastructure import JsonDocumentStore


def _snapshot() -> Snapshot:
    return Snapshot(
        seed=5,
        contacts=(
            Contact(id=1, name="Alice", notes="Designer"),
            Contact(id=2, name="Bob"),
        ),
        meetings=(
            FutureMeeting(id=3, date=datetime(2026, 10, 20, 14, 30), contact_ids={2, 1}),
            PastMeeting(id=4, date=datetime(2026, 9, 1, 9, 0), contact_ids={2}, notes="Coffee"),
        ),
    )


def test_missing_file_loads_none(tmp_path) -> None:
    assert JsonDocumentStore(tmp_path / "absent.json").load() is None


def test_save_writes_expected_document(tmp_path) -> None:
    path = tmp_path / "nested" / "contacts.json"
    JsonDocumentStore(path).save(_snapshot())

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["seed"] == 5
    assert raw["contacts"][0] == {"id": 1, "name": "Alice", "notes": "Designer"}
    assert raw["meetings"][0] == {
        "id": 3,
        "kind": "future",
        "date": "20-10-2026",
        "contact_ids": [1, 2],
        "notes": "",
    }
    assert raw["meetings"][1]["kind"] == "past"
    assert raw["meetings"][1]["notes"] == "Coffee"


def test_load_round_trip_at_day_precision(tmp_path) -> None:
    store = JsonDocumentStore(tmp_path / "contacts.json")
    store.save(_snapshot())
    loaded = store.load()

    assert loaded.seed == 5
    assert [(c.id, c.name, c.notes) for c in loaded.contacts] == [
        (1, "Alice", "Designer"),
        (2, "Bob", ""),
    ]
    future, past = loaded.meetings
    assert future == FutureMeeting(id=3, date=datetime(2026, 10, 20), contact_ids={1, 2})
    assert past == PastMeeting(id=4, date=datetime(2026, 9, 1), contact_ids={2}, notes="Coffee")


def test_save_overwrites_whole_document(tmp_path) -> None:
    store = JsonDocumentStore(tmp_path / "contacts.json")
    store.save(_snapshot())
    store.save(Snapshot(seed=2, contacts=(Contact(id=1, name="Solo"),)))
    loaded = store.load()
    assert loaded.meetings == ()
    assert [c.name for c in loaded.contacts] == ["Solo"]


def test_kind_is_read_from_document_not_date(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    path.write_text(
        json.dumps(
            {
                "seed": 3,
                "contacts": [{"id": 1, "name": "Alice"}],
                "meetings": [
                    {"id": 2, "kind": "past", "date": "01-01-2099", "contact_ids": [1]}
                ],
            }
        ),
        encoding="utf-8",
    )
    (meeting,) = JsonDocumentStore(path).load().meetings
    assert isinstance(meeting, PastMeeting)
    assert meeting.notes == ""


@pytest.mark.parametrize(
    "document, message",
    [
        ("{not json", "Invalid"),
        (b'{"seed": 1, "contacts": [{"id": 1, "name": "\xff"}]}', "Invalid"),
        (
            {"contacts": [{"id": 1, "name": "A"}], "meetings": [
                {"id": 2, "kind": "future", "date": "2026-10-20", "contact_ids": [1]}
            ]},
            "date",
        ),
        (
            {"contacts": [{"id": 1, "name": "A"}], "meetings": [
                {"id": 2, "kind": "future", "date": "20-10-2026", "contact_ids": [9]}
            ]},
            "unknown contact",
        ),
        (
            {"contacts": [{"id": 1, "name": "A"}, {"id": 1, "name": "B"}]},
            "unique",
        ),
        (
            {"contacts": [{"id": 1, "name": "A"}], "meetings": [
                {"id": 2, "kind": "someday", "date": "20-10-2026", "contact_ids": [1]}
            ]},
            "kind",
        ),
        ({"contacts": [{"id": 1, "name": "  "}]}, "name"),
    ],
)
def test_malformed_document_raises_document_error(tmp_path, document, message) -> None:
    path = tmp_path / "contacts.json"
    if isinstance(document, bytes):
        path.write_bytes(document)
    else:
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
    with pytest.raises(DocumentError, match=message):
        JsonDocumentStore(path).load()
