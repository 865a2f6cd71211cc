"""File-backed storage of departments and volunteers."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from civicdesk.volunteering.models import Department, Volunteer


class RepositoryError(Exception):
    """Raised when the repository cannot carry out a request."""


def _read_lines(path: Path, what: str) -> Iterator[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise RepositoryError(f"Could not open the {what} file for reading!") from error
    for line in text.splitlines():
        if line.strip():
            yield line


class Repository:
    """Departments and volunteers loaded from text files; volunteers are saved on change."""

    def __init__(self, departments_file, volunteers_file) -> None:
        self.departments_file = Path(departments_file)
        self.volunteers_file = Path(volunteers_file)
        self.departments: list[Department] = [
            Department.parse(line)
            for line in _read_lines(self.departments_file, "departments")
        ]
        self.volunteers: list[Volunteer] = [
            Volunteer.parse(line)
            for line in _read_lines(self.volunteers_file, "volunteers")
        ]

    def add_volunteer(self, volunteer: Volunteer) -> None:
        if volunteer in self.volunteers:
            raise RepositoryError("The volunteer already exists!")
        self.volunteers.append(volunteer)
        self._save_volunteers()

    def assign_volunteer(self, volunteer: Volunteer) -> None:
        """Replace the stored volunteer with the same identity by ``volunteer``."""
        for position, stored in enumerate(self.volunteers):
            if stored == volunteer:
                self.volunteers[position] = volunteer
                self._save_volunteers()
                return
        raise RepositoryError("The selected volunteer was not found!")

    def _save_volunteers(self) -> None:
        try:
            with self.volunteers_file.open("w", encoding="utf-8") as handle:
                for volunteer in self.volunteers:
                    handle.write(volunteer.format() + "\n")
        except OSError as error:
            raise RepositoryError(
                "Could not open the volunteers file for writing!"
            ) from error