"""Direct access file of employee records located through a hashed index of offsets."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path

from dslab.linear_probing import TableFullError

DEFAULT_CAPACITY = 10


@dataclass
class Employee:
    """One employee record and the byte offset it is stored at."""

    name: str
    address: str
    emp_id: int
    location: int = 0

    def __str__(self) -> str:
        return f"{self.name} {self.address} {self.emp_id} {self.location}"


class EmployeeIndex:
    """Open-addressing table from employee id to file offset, probed linearly."""

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        if size <= 0:
            raise ValueError("index size must be positive")
        self.size = size
        self._slots: list[tuple[int, int] | None] = [None] * size

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def _probe_order(self, emp_id: int) -> range:
        home = emp_id % self.size
        return range(home, home + self.size)

    def _find_slot(self, emp_id: int) -> int | None:
        for position in self._probe_order(emp_id):
            index = position % self.size
            slot = self._slots[index]
            if slot is not None and slot[0] == emp_id:
                return index
        return None

    def insert(self, emp_id: int, location: int) -> int:
        """Store the entry in the first free slot from its home; return the slot index."""
        for position in self._probe_order(emp_id):
            index = position % self.size
            if self._slots[index] is None:
                self._slots[index] = (emp_id, location)
                return index
        raise TableFullError("employee index is full")

    def search(self, emp_id: int) -> int | None:
        """File offset recorded for ``emp_id``, or None if it is not indexed."""
        index = self._find_slot(emp_id)
        return None if index is None else self._slots[index][1]

    def update(self, emp_id: int, location: int) -> None:
        """Change the recorded offset; raises KeyError if ``emp_id`` is not indexed."""
        index = self._find_slot(emp_id)
        if index is None:
            raise KeyError(emp_id)
        self._slots[index] = (emp_id, location)

    def delete(self, emp_id: int) -> None:
        """Free the slot of ``emp_id``; raises KeyError if it is not indexed."""
        index = self._find_slot(emp_id)
        if index is None:
            raise KeyError(emp_id)
        self._slots[index] = None

    def clear(self) -> None:
        """Empty every slot."""
        self._slots = [None] * self.size

    def slots(self) -> list[tuple[int, int] | None]:
        """A copy of the slots as ``(emp_id, location)`` pairs, None where empty."""
        return list(self._slots)


def _encode(employee: Employee) -> bytes:
    return json.dumps(asdict(employee)).encode("utf-8") + b"\n"


def _decode(line: bytes) -> Employee:
    return Employee(**json.loads(line))


class EmployeeFile:
    """Employee records appended to a file and read back directly by offset."""

    def __init__(
        self, path: str | os.PathLike[str], capacity: int = DEFAULT_CAPACITY
    ) -> None:
        self.path = Path(path)
        self.index = EmployeeIndex(capacity)
        self.path.write_bytes(b"")

    def add(self, name: str, emp_id: int, address: str) -> int:
        """Append a record, index it, and return the offset it was written at."""
        with self.path.open("ab") as file:
            location = file.seek(0, os.SEEK_END)
            employee = Employee(name, address, emp_id, location)
            self.index.insert(emp_id, location)
            file.write(_encode(employee))
        return location

    def read(self, emp_id: int) -> Employee:
        """Fetch the record of ``emp_id`` by seeking to its offset; KeyError if absent."""
        location = self.index.search(emp_id)
        if location is None:
            raise KeyError(emp_id)
        with self.path.open("rb") as file:
            file.seek(location)
            return _decode(file.readline())

    def _all(self) -> list[Employee]:
        with self.path.open("rb") as file:
            return [_decode(line) for line in file if line.strip()]

    def delete(self, emp_id: int) -> Employee:
        """Remove the record of ``emp_id``, rewriting the file and reindexing the rest.

        Returns the removed record; raises KeyError if there is none.
        """
        if self.index.search(emp_id) is None:
            raise KeyError(emp_id)
        removed: Employee | None = None
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".employees-")
        try:
            with os.fdopen(fd, "wb") as temp:
                for employee in self._all():
                    if employee.emp_id == emp_id:
                        if removed is None:
                            removed = employee
                        continue
                    employee.location = temp.tell()
                    self.index.update(employee.emp_id, employee.location)
                    temp.write(_encode(employee))
            os.replace(temp_name, self.path)
        except BaseException:
            if os.path.exists(temp_name):
                os.remove(temp_name)
            raise
        while self.index.search(emp_id) is not None:
            self.index.delete(emp_id)
        if removed is None:
            raise KeyError(emp_id)
        return removed