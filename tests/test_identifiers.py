"""Unit tests for IdentifierGenerator."""

import pytest

from contactbook.application import IdentifierGenerator
from contactbook.domain import InvalidArgumentError


def test_fresh_generator_starts_at_one_and_increases() -> None:
    ids = IdentifierGenerator()
    assert [ids.next() for _ in range(4)] == [1, 2, 3, 4]
    assert ids.seed == 5


def test_restore_uses_stored_seed() -> None:
    ids = IdentifierGenerator.restore(10, [1, 2, 3])
    assert ids.next() == 10


def test_restore_never_reissues_ids_found_in_document() -> None:
    ids = IdentifierGenerator.restore(2, [1, 7, 4])
    assert ids.seed == 8
    assert ids.next() == 8


def test_restore_with_nothing_issued() -> None:
    assert IdentifierGenerator.restore(1).next() == 1


def test_seed_below_one_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        IdentifierGenerator(0)


def test_generators_are_independent() -> None:
    a = IdentifierGenerator()
    b = IdentifierGenerator()
    a.next()
    a.next()
    assert b.next() == 1
