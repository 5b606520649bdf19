"""Integer hash table that resolves collisions by chaining values in buckets."""

from __future__ import annotations

DEFAULT_SIZE = 10


class ChainedHashTable:
    """Hash table using ``value % size``; each bucket keeps values in insertion order."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def _index(self, value: int) -> int:
        return value % self.size

    def insert(self, value: int) -> None:
        """Append ``value`` to the end of its bucket's chain."""
        self._buckets[self._index(value)].append(value)

    def find(self, value: int) -> int | None:
        """Return the bucket index holding ``value``, or None if it is absent."""
        index = self._index(value)
        return index if value in self._buckets[index] else None

    def delete(self, value: int) -> bool:
        """Remove the first occurrence of ``value``; return whether it was found."""
        bucket = self._buckets[self._index(value)]
        try:
            bucket.remove(value)
        except ValueError:
            return False
        return True

    def buckets(self) -> list[tuple[int, ...]]:
        """Every bucket's chain, in order, as tuples."""
        return [tuple(bucket) for bucket in self._buckets]