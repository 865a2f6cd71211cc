"""File-backed storage of drivers and road reports."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from civicdesk.drive.models import Driver, Report


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
    """Drivers and reports loaded from text files; reports are saved on change."""

    def __init__(self, drivers_file, reports_file) -> None:
        self.drivers_file = Path(drivers_file)
        self.reports_file = Path(reports_file)
        self.drivers: list[Driver] = [
            Driver.parse(line) for line in _read_lines(self.drivers_file, "drivers")
        ]
        self.reports: list[Report] = [
            Report.parse(line) for line in _read_lines(self.reports_file, "reports")
        ]

    def add_report(self, report: Report) -> None:
        if report in self.reports:
            raise RepositoryError("The report already exists!")
        self.reports.append(report)
        self._save_reports()

    def validate_report(self, report: Report) -> None:
        """Mark the stored report matching ``report`` as validated."""
        for stored in self.reports:
            if stored == report:
                stored.validated = True
                self._save_reports()
                return
        raise RepositoryError("The report does not exist!")

    def _save_reports(self) -> None:
        try:
            with self.reports_file.open("w", encoding="utf-8") as handle:
                for report in self.reports:
                    handle.write(report.format() + "\n")
        except OSError as error:
            raise RepositoryError("Could not open the reports file for writing!") from error