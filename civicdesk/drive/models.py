"""Records of the drivers' network: drivers and road reports."""

from __future__ import annotations

from dataclasses import dataclass, field

from civicdesk.text import tokenize, trim


def _int_pair(text: str, what: str) -> tuple[int, int]:
    parts = tokenize(trim(text), ",")
    if len(parts) != 2:
        raise ValueError(f"malformed {what}: {text!r}")
    return int(trim(parts[0])), int(trim(parts[1]))


@dataclass(frozen=True)
class Driver:
    """A driver at a map location with a score."""

    name: str
    location: tuple[int, int]
    score: int

    @classmethod
    def parse(cls, line: str) -> Driver:
        """Read ``name ; latitude, longitude ; score``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 3:
            raise ValueError(f"malformed driver: {line!r}")
        location = _int_pair(fields[1], "location")
        return cls(trim(fields[0]), location, int(trim(fields[2])))


@dataclass
class Report:
    """A road report; identity is description, reporter and location."""

    description: str
    reporter: str
    location: tuple[int, int]
    validated: bool = field(default=False, compare=False)

    @classmethod
    def parse(cls, line: str) -> Report:
        """Read ``description;reporter;latitude,longitude;status``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 4:
            raise ValueError(f"malformed report: {line!r}")
        location = _int_pair(fields[2], "location")
        validated = int(trim(fields[3])) != 0
        return cls(trim(fields[0]), trim(fields[1]), location, validated)

    def format(self) -> str:
        """The line written to the reports file and shown in lists."""
        latitude, longitude = self.location
        return (
            f"{self.description};{self.reporter};{latitude},{longitude};"
            f"{int(self.validated)}"
        )