"""Sequential file of student records: append, list and delete by roll number."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class Student:
    """One student record."""

    name: str
    roll: int
    division: int
    address: str

    def __str__(self) -> str:
        return f"{self.name} {self.roll} {self.division} {self.address}"


def _encode(student: Student) -> bytes:
    return json.dumps(asdict(student)).encode("utf-8") + b"\n"


def _decode(line: bytes) -> Student:
    return Student(**json.loads(line))


class StudentFile:
    """Student records stored one per line in a file that is emptied on opening."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.path.write_bytes(b"")

    def add(self, student: Student) -> None:
        """Append ``student`` to the end of the file."""
        with self.path.open("ab") as file:
            file.write(_encode(student))

    def records(self) -> list[Student]:
        """Every record in the order it was added."""
        with self.path.open("rb") as file:
            return [_decode(line) for line in file if line.strip()]

    def delete(self, roll: int) -> list[Student]:
        """Remove every record with ``roll`` and return them.

        Raises KeyError, leaving the file untouched, if no record has that roll.
        """
        kept: list[Student] = []
        removed: list[Student] = []
        for student in self.records():
            (removed if student.roll == roll else kept).append(student)
        if not removed:
            raise KeyError(roll)
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".students-")
        try:
            with os.fdopen(fd, "wb") as temp:
                for student in kept:
                    temp.write(_encode(student))
            os.replace(temp_name, self.path)
        except BaseException:
            if os.path.exists(temp_name):
                os.remove(temp_name)
            raise
        return removed