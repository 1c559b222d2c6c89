"""Unit tests for ContactRegistry."""

import pytest

from contactbook.application import ContactRegistry, IdentifierGenerator
from contactbook.domain import Contact, InvalidArgumentError, NullArgumentError


def _registry() -> ContactRegistry:
    return ContactRegistry(IdentifierGenerator())


def test_add_assigns_sequential_ids() -> None:
    registry = _registry()
    assert registry.add("Alice", "Engineer") == 1
    assert registry.add("Bob", "") == 2
    assert [c.name for c in registry.contacts()] == ["Alice", "Bob"]


def test_add_requires_name_and_notes() -> None:
    registry = _registry()
    with pytest.raises(NullArgumentError):
        registry.add(None, "notes")
    with pytest.raises(NullArgumentError):
        registry.add("Alice", None)
    with pytest.raises(InvalidArgumentError):
        registry.add("  ", "notes")
    assert registry.contacts() == []


def test_by_ids_returns_requested_contacts() -> None:
    registry = _registry()
    registry.add("Alice", "")
    registry.add("Bob", "")
    registry.add("Carol", "")
    found = registry.by_ids([1, 3])
    assert {c.name for c in found} == {"Alice", "Carol"}


def test_by_ids_is_all_or_nothing() -> None:
    registry = _registry()
    registry.add("Alice", "")
    with pytest.raises(InvalidArgumentError, match="99"):
        registry.by_ids([1, 99])


def test_by_name_is_exact_match() -> None:
    registry = _registry()
    registry.add("Alice", "first")
    registry.add("Alice", "second")
    registry.add("Alicia", "")
    assert {c.notes for c in registry.by_name("Alice")} == {"first", "second"}
    assert registry.by_name("Ali") == set()
    with pytest.raises(NullArgumentError):
        registry.by_name(None)


def test_exists_and_contains_all() -> None:
    registry = _registry()
    registry.add("Alice", "")
    registry.add("Bob", "")
    assert registry.exists(2)
    assert not registry.exists(3)
    assert registry.contains_all([1, 2])
    assert not registry.contains_all([1, 2, 3])
    assert registry.contains_all([])


def test_add_notes_appends_and_replaces_entry() -> None:
    registry = _registry()
    registry.add("Alice", "Engineer")
    registry.add_notes(1, "Moved to Berlin")
    assert registry.get(1).notes == "Engineer\nMoved to Berlin"


def test_add_notes_errors() -> None:
    registry = _registry()
    registry.add("Alice", "")
    with pytest.raises(NullArgumentError):
        registry.add_notes(1, None)
    with pytest.raises(InvalidArgumentError):
        registry.add_notes(42, "text")


def test_load_keeps_given_ids() -> None:
    ids = IdentifierGenerator.restore(6, [5])
    registry = ContactRegistry(ids)
    registry.load([Contact(id=5, name="Dora")])
    assert registry.exists(5)
    assert registry.add("Eve", "") == 6
