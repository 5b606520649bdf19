"""Fixed-size open-addressing hash table with linear probing, with or without replacement."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when a value is inserted into a table with no free slot."""


class LinearProbingTable:
    """Integer hash table using ``value % size`` and linear probing.

    Deleting a value simply empties its slot, so values placed further along the
    same probe run may no longer be found afterwards.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[int | None] = [None] * size
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _home(self, value: int) -> int:
        return value % self.size

    def _ensure_room(self) -> None:
        if self._count == self.size:
            raise TableFullError("hash table is full")

    def insert(self, value: int) -> int:
        """Insert by probing from the home slot; return the number of occupied slots passed."""
        self._ensure_room()
        index = self._home(value)
        comparisons = 0
        while self._slots[index] is not None:
            comparisons += 1
            index = (index + 1) % self.size
        self._slots[index] = value
        self._count += 1
        return comparisons

    def insert_with_replacement(self, value: int) -> int:
        """Insert, evicting a home slot's occupant that does not belong there.

        The displaced value (or the new one, if the occupant is at home) is
        placed in the next free slot. Returns the number of occupied slots
        passed beyond the home slot.
        """
        self._ensure_room()
        home = self._home(value)
        occupant = self._slots[home]
        if occupant is None:
            self._slots[home] = value
            self._count += 1
            return 0
        if self._home(occupant) == home:
            pending = value
        else:
            self._slots[home] = value
            pending = occupant
        comparisons = 0
        index = (home + 1) % self.size
        while self._slots[index] is not None:
            comparisons += 1
            index = (index + 1) % self.size
        self._slots[index] = pending
        self._count += 1
        return comparisons

    def bulk_insert(self, values: Iterable[int], with_replacement: bool) -> list[int]:
        """Insert several values; return the comparison count for each.

        Raises ValueError if more values are given than the table holds, and
        TableFullError if the table fills up part way through.
        """
        items = list(values)
        if len(items) > self.size:
            raise ValueError(f"hash table size is {self.size}")
        add = self.insert_with_replacement if with_replacement else self.insert
        return [add(value) for value in items]

    def _probe(self, value: int) -> int | None:
        index = self._home(value)
        for _ in range(self.size):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == value:
                return index
            index = (index + 1) % self.size
        return None

    def search(self, value: int) -> int | None:
        """Return the slot index holding ``value``, or None if it is not found."""
        return self._probe(value)

    def delete(self, value: int) -> bool:
        """Empty the slot holding ``value``; return whether it was found."""
        index = self._probe(value)
        if index is None:
            return False
        self._slots[index] = None
        self._count -= 1
        return True

    def slots(self) -> list[int | None]:
        """A copy of the table's slots, None marking an empty one."""
        return list(self._slots)