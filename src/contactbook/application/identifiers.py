"""Identifier generation shared by contacts and meetings."""

from collections.abc import Iterable

from contactbook.domain import InvalidArgumentError


class IdentifierGenerator:
    """Hands out strictly increasing integer ids, starting at 1 on a fresh store.

    One counter serves both contacts and meetings, so an id is unique across
    the whole manager. Each manager owns its own generator.
    """

    def __init__(self, seed: int = 1) -> None:
        if seed < 1:
            raise InvalidArgumentError(f"Identifier seed must be at least 1, got {seed}.")
        self._seed = seed

    @classmethod
    def restore(cls, seed: int, issued_ids: Iterable[int] = ()) -> "IdentifierGenerator":
        """Rebuild the generator from a persisted seed.

        Ids already present in the document win over a stale seed.
        """
        high_water = max(issued_ids, default=0)
        return cls(max(seed, high_water + 1))

    @property
    def seed(self) -> int:
        """The next id next() will return."""
        return self._seed

    def next(self) -> int:
        issued = self._seed
        self._seed += 1
        return issued
