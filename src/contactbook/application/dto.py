"""Data carried between the manager and its document store."""

from dataclasses import dataclass, field

from contactbook.domain import Contact, Meeting


@dataclass(frozen=True)
class Snapshot:
    """Everything flush() writes: the id seed, contacts and meetings in store order.

    seed is the next identifier to be issued.
    """

    seed: int = 1
    contacts: tuple[Contact, ...] = field(default_factory=tuple)
    meetings: tuple[Meeting, ...] = field(default_factory=tuple)
