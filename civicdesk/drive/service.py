"""Driver operations on top of the repository, with change notification."""

from __future__ import annotations

import math

from civicdesk.drive.models import Report
from civicdesk.drive.repository import Repository
from civicdesk.observer import Subject
from civicdesk.text import tokenize, trim

MAX_REPORT_DISTANCE = 20


def _coordinates(text: str) -> tuple[int, int]:
    parts = tokenize(trim(text), ",")
    return int(trim(parts[0])), int(trim(parts[1]))


class DriveService(Subject):
    """Adds and validates reports and keeps the shared chat."""

    def __init__(self, repository: Repository) -> None:
        super().__init__()
        self.repository = repository
        self._messages: list[str] = []

    @property
    def reports(self) -> list[Report]:
        return self.repository.reports

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def add_report(
        self, description: str, driver: str, location: str, driver_location: str
    ) -> None:
        """Add an unvalidated report near the driver's ``lat,lon`` position."""
        parts = tokenize(trim(location), ",")
        if len(parts) != 2:
            raise ValueError("Invalid location!")
        report_lat, report_lon = int(trim(parts[0])), int(trim(parts[1]))
        driver_lat, driver_lon = _coordinates(driver_location)
        distance = math.hypot(driver_lat - report_lat, driver_lon - report_lon)
        if distance > MAX_REPORT_DISTANCE:
            raise ValueError(
                "The location of the report is too far from the driver current location!"
            )
        self.repository.add_report(
            Report(description, driver, (report_lat, report_lon), False)
        )
        self.notify()

    def add_message(self, message: str) -> None:
        self._messages.append(message)
        self.notify()

    def validate_report(self, report_text: str, driver_name: str) -> None:
        """Validate the report shown as ``report_text`` on behalf of ``driver_name``."""
        fields = tokenize(trim(report_text), ";")
        if int(trim(fields[3])) != 0:
            raise ValueError("The report is already validated!")
        reporter = trim(fields[1])
        if reporter == driver_name:
            raise ValueError("You can not validate your own report!")
        report = Report(trim(fields[0]), reporter, _coordinates(fields[2]), False)
        self.repository.validate_report(report)
        self.notify()