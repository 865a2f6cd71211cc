"""File-backed storage of doctors and patients."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from civicdesk.patients.models import Doctor, Patient


class RepositoryError(Exception):
    """Raised when the repository cannot carry out a request."""


def _read_lines(path: Path, message: str) -> Iterator[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise RepositoryError(message) from error
    for line in text.splitlines():
        if line.strip():
            yield line


class Repository:
    """Doctors and patients loaded from text files; patients are saved on change."""

    def __init__(self, doctors_file, patients_file) -> None:
        self.doctors_file = Path(doctors_file)
        self.patients_file = Path(patients_file)
        self.doctors: list[Doctor] = [
            Doctor.parse(line)
            for line in _read_lines(
                self.doctors_file, "Could not open the doctors file for reading!"
            )
        ]
        self.patients: list[Patient] = [
            Patient.parse(line)
            for line in _read_lines(
                self.patients_file, "Could not open patients file for reading!"
            )
        ]

    def add_patient(self, patient: Patient) -> None:
        if patient in self.patients:
            raise RepositoryError("The patient already exists!")
        self.patients.append(patient)
        self._save_patients()

    def update_patient(
        self,
        patient: Patient,
        new_diagnosis: str,
        new_specialization: str,
        new_doctor: str,
    ) -> None:
        """Change the diagnosis, specialization and doctor of the stored patient."""
        for stored in self.patients:
            if stored == patient:
                stored.diagnosis = new_diagnosis
                stored.specialization = new_specialization
                stored.doctor = new_doctor
                self._save_patients()
                return
        raise RepositoryError("The patient does not exist!")

    def _save_patients(self) -> None:
        try:
            with self.patients_file.open("w", encoding="utf-8") as handle:
                for patient in self.patients:
                    handle.write(patient.format() + "\n")
        except OSError as error:
            raise RepositoryError("Could not open the patients file for writing!") from error