"""
Console entry point: contactbook commands over a JSON document.
Run: python -m contactbook <command> (with .env or env vars set).
"""

import argparse
import logging
import os
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from contactbook.application import ContactManager
from contactbook.domain import ContactbookError, Meeting, PastMeeting
from contactbook.infrastructure import DATE_FORMAT, JsonDocumentStore, SystemClock

logger = logging.getLogger(__name__)

DEFAULT_FILE = "contacts.json"


def _load_env() -> None:
    # Repo root: from src/contactbook/cli.py go up three levels
    repo_root = Path(__file__).resolve().parent.parent.parent
    for path in (repo_root / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _configure_logging() -> None:
    level = os.environ.get("CONTACTBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def _document_path(args: argparse.Namespace) -> Path:
    if args.file:
        return Path(args.file)
    return Path(os.environ.get("CONTACTBOOK_FILE", DEFAULT_FILE).strip() or DEFAULT_FILE)


def _manager(args: argparse.Namespace) -> ContactManager:
    return ContactManager(JsonDocumentStore(_document_path(args)), SystemClock())


def parse_when(text: str) -> datetime:
    """Accept dd-mm-yyyy (the document format) or an ISO date/datetime."""
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date {text!r}; use dd-mm-yyyy or ISO format."
        ) from None


def _format_meeting(meeting: Meeting) -> str:
    contacts = ",".join(str(cid) for cid in sorted(meeting.contact_ids))
    line = f"{meeting.id}\t{meeting.kind}\t{meeting.date:%d-%m-%Y %H:%M}\t[{contacts}]"
    if isinstance(meeting, PastMeeting) and meeting.notes:
        line += f"\t{meeting.notes}"
    return line


def cmd_add_contact(args: argparse.Namespace) -> int:
    manager = _manager(args)
    manager.add_new_contact(args.name, args.notes)
    manager.flush()
    ids = sorted(c.id for c in manager.get_contacts(args.name))
    print(f"Added contact {args.name} (id {ids[-1]})")
    return 0


def cmd_contacts(args: argparse.Namespace) -> int:
    manager = _manager(args)
    if args.name is not None:
        found = manager.get_contacts(args.name)
    else:
        found = manager.get_contacts(*args.ids)
    for contact in sorted(found, key=lambda c: c.id):
        print(f"{contact.id}\t{contact.name}\t{contact.notes}")
    return 0


def cmd_schedule(args: argparse.Namespace) -> int:
    manager = _manager(args)
    meeting_id = manager.add_future_meeting(args.contacts, args.date)
    manager.flush()
    print(f"Scheduled meeting {meeting_id}")
    return 0


def cmd_record(args: argparse.Namespace) -> int:
    manager = _manager(args)
    manager.add_new_past_meeting(args.contacts, args.date, args.notes)
    manager.flush()
    print("Recorded meeting")
    return 0


def cmd_notes(args: argparse.Namespace) -> int:
    manager = _manager(args)
    manager.add_meeting_notes(args.meeting_id, args.text)
    manager.flush()
    print(f"Notes saved for meeting {args.meeting_id}")
    return 0


def cmd_meetings(args: argparse.Namespace) -> int:
    manager = _manager(args)
    if args.date is not None:
        meetings = manager.get_future_meeting_list(args.date)
    elif args.past:
        meetings = manager.get_past_meeting_list(args.contact)
    else:
        meetings = manager.get_future_meeting_list(args.contact)
    for meeting in meetings:
        print(_format_meeting(meeting))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    manager = _manager(args)
    meeting = manager.get_meeting(args.meeting_id)
    if meeting is None:
        print(f"No meeting with id {args.meeting_id}")
        return 1
    print(_format_meeting(meeting))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contactbook",
        description="Track contacts and the meetings you have with them",
    )
    parser.add_argument(
        "--file",
        "-f",
        help=f"Path to the JSON document (default: $CONTACTBOOK_FILE or {DEFAULT_FILE})",
        default=None,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_parser = subparsers.add_parser("add-contact", help="Add a contact")
    add_parser.add_argument("name")
    add_parser.add_argument("--notes", default="", help="Free-text notes")
    add_parser.set_defaults(func=cmd_add_contact)

    contacts_parser = subparsers.add_parser("contacts", help="Look up contacts")
    contacts_parser.add_argument("ids", nargs="*", type=int, help="Contact ids")
    contacts_parser.add_argument("--name", default=None, help="Exact contact name")
    contacts_parser.set_defaults(func=cmd_contacts)

    schedule_parser = subparsers.add_parser("schedule", help="Schedule a future meeting")
    schedule_parser.add_argument("date", type=parse_when)
    schedule_parser.add_argument("contacts", nargs="+", type=int, help="Contact ids")
    schedule_parser.set_defaults(func=cmd_schedule)

    record_parser = subparsers.add_parser("record", help="Record a meeting that took place")
    record_parser.add_argument("date", type=parse_when)
    record_parser.add_argument("contacts", nargs="+", type=int, help="Contact ids")
    record_parser.add_argument("--notes", required=True, help="What was discussed")
    record_parser.set_defaults(func=cmd_record)

    notes_parser = subparsers.add_parser("notes", help="Set notes on a past meeting")
    notes_parser.add_argument("meeting_id", type=int)
    notes_parser.add_argument("text")
    notes_parser.set_defaults(func=cmd_notes)

    meetings_parser = subparsers.add_parser("meetings", help="List meetings")
    which = meetings_parser.add_mutually_exclusive_group(required=True)
    which.add_argument("--contact", type=int, help="Contact id")
    which.add_argument("--date", type=parse_when, help="Exact meeting date")
    meetings_parser.add_argument(
        "--past", action="store_true", help="Past meetings instead of future ones"
    )
    meetings_parser.set_defaults(func=cmd_meetings)

    show_parser = subparsers.add_parser("show", help="Show one meeting")
    show_parser.add_argument("meeting_id", type=int)
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    _load_env()
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "meetings" and args.past and args.date is not None:
        parser.error("--past lists meetings by contact; it cannot be combined with --date")
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    try:
        return args.func(args)
    except ContactbookError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1
