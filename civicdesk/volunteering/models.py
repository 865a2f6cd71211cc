"""Records of the volunteering organisation: departments and volunteers."""

from __future__ import annotations

from dataclasses import dataclass, field

from civicdesk.text import tokenize, trim

NO_DEPARTMENT = "No department"


@dataclass(frozen=True)
class Department:
    """A department and a description of its work."""

    name: str
    description: str

    @classmethod
    def parse(cls, line: str) -> Department:
        """Read ``name ; description``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 2:
            raise ValueError(f"malformed department: {line!r}")
        return cls(trim(fields[0]), trim(fields[1]))


@dataclass
class Volunteer:
    """A volunteer; identity is name and e-mail address."""

    name: str
    email: str
    interests: list[str] = field(default_factory=list, compare=False)
    department: str = field(default=NO_DEPARTMENT, compare=False)

    @classmethod
    def parse(cls, line: str) -> Volunteer:
        """Read ``name;email;interest,interest,...;department``."""
        fields = tokenize(trim(line), ";")
        if len(fields) != 4:
            raise ValueError(f"malformed volunteer: {line!r}")
        interests = [trim(interest) for interest in tokenize(trim(fields[2]), ",")]
        return cls(trim(fields[0]), trim(fields[1]), interests, trim(fields[3]))

    def format(self) -> str:
        """The line written to the volunteers file and shown in lists."""
        return f"{self.name};{self.email};{','.join(self.interests)};{self.department}"