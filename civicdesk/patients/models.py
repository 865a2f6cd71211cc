"""Records of the clinic: dates, doctors and patients."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from civicdesk.text import tokenize, trim

UNDIAGNOSED = "undiagnosed"


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar day, ordered chronologically."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"


def _parse_date(text: str) -> Date:
    parts = tokenize(trim(text), "-")
    if len(parts) != 3:
        raise ValueError(f"malformed date: {text!r}")
    day, month, year = (int(trim(part)) for part in parts)
    return Date(day, month, year)


@dataclass(frozen=True)
class Doctor:
    """A doctor and their specialization."""

    name: str
    specialization: str

    @classmethod
    def parse(cls, line: str) -> Doctor:
        """Read ``name ; specialization``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 2:
            raise ValueError(f"malformed doctor: {line!r}")
        return cls(trim(fields[0]), trim(fields[1]))


@dataclass
class Patient:
    """A patient admitted on a date; identity is every field."""

    name: str
    diagnosis: str = UNDIAGNOSED
    specialization: str = ""
    doctor: str = ""
    date: Date = Date(1, 1, 1970)

    @classmethod
    def parse(cls, line: str) -> Patient:
        """Read ``name;diagnosis;specialization;doctor;d-m-y``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 5:
            raise ValueError(f"malformed patient: {line!r}")
        name, diagnosis, specialization, doctor = (trim(part) for part in fields[:4])
        return cls(name, diagnosis, specialization, doctor, _parse_date(fields[4]))

    def format(self) -> str:
        """The line written to the patients file and shown in lists."""
        return (
            f"{self.name};{self.diagnosis};{self.specialization};"
            f"{self.doctor};{self.date}"
        )