"""Volunteering operations on top of the repository, with change notification."""

from __future__ import annotations

from civicdesk.observer import Subject
from civicdesk.text import tokenize, trim
from civicdesk.volunteering.models import NO_DEPARTMENT, Department, Volunteer
from civicdesk.volunteering.repository import Repository


class VolunteeringService(Subject):
    """Lists, adds and assigns volunteers, notifying observers on change."""

    def __init__(self, repository: Repository) -> None:
        super().__init__()
        self.repository = repository

    @property
    def departments(self) -> list[Department]:
        return self.repository.departments

    @property
    def volunteers(self) -> list[Volunteer]:
        return self.repository.volunteers

    def volunteers_by_department(self, department: str) -> list[Volunteer]:
        return [
            volunteer
            for volunteer in self.repository.volunteers
            if volunteer.department == department
        ]

    def unassigned_volunteers(self) -> list[Volunteer]:
        return self.volunteers_by_department(NO_DEPARTMENT)

    def add_volunteer(
        self, name: str, email: str, interests: str, department: str
    ) -> None:
        """Add a volunteer whose interests are given comma separated."""
        volunteer = Volunteer(
            trim(name), trim(email), tokenize(trim(interests), ","), trim(department)
        )
        self.repository.add_volunteer(volunteer)
        self.notify()

    def assign_volunteer(self, volunteer_text: str, department: str) -> None:
        """Assign the unassigned volunteer shown as ``volunteer_text`` to ``department``."""
        fields = tokenize(trim(volunteer_text), ";")
        if trim(fields[3]) != NO_DEPARTMENT:
            raise ValueError("The selected volunteer has a department assigned!")
        volunteer = Volunteer(
            trim(fields[0]),
            trim(fields[1]),
            tokenize(trim(fields[2]), ","),
            department,
        )
        self.repository.assign_volunteer(volunteer)
        self.notify()