"""Clinic operations on top of the repository, with change notification."""

from __future__ import annotations

from civicdesk.observer import Subject
from civicdesk.patients.models import UNDIAGNOSED, Date, Doctor, Patient
from civicdesk.patients.repository import Repository
from civicdesk.text import tokenize, trim


def _date_from_text(text: str) -> Date:
    parts = tokenize(trim(text), "-")
    try:
        day, month, year = (int(trim(part)) for part in parts[:3])
    except ValueError as error:
        raise ValueError(f"Invalid date: {text!r}") from error
    return Date(day, month, year)


class PatientService(Subject):
    """Lists, adds and updates patients, notifying observers on change."""

    def __init__(self, repository: Repository) -> None:
        super().__init__()
        self.repository = repository

    @property
    def doctors(self) -> list[Doctor]:
        return self.repository.doctors

    @property
    def patients(self) -> list[Patient]:
        return self.repository.patients

    def patients_by_specialization(self, specialization: str) -> list[Patient]:
        """Patients of the specialization, plus undiagnosed ones with none."""
        return [
            patient
            for patient in self.repository.patients
            if patient.specialization == specialization
            or (patient.diagnosis == UNDIAGNOSED and patient.specialization == "")
        ]

    def patients_by_doctor(self, name: str) -> list[Patient]:
        return [patient for patient in self.repository.patients if patient.doctor == name]

    def add_patient(
        self, name: str, diagnosis: str, specialization: str, doctor: str, date: str
    ) -> None:
        """Add a patient admitted on ``date`` given as ``d-m-y``."""
        if name == "":
            raise ValueError("Invalid name!")
        admitted = _date_from_text(date)
        self.repository.add_patient(
            Patient(name, diagnosis, specialization, doctor, admitted)
        )
        self.notify()

    def update_patient(
        self,
        name: str,
        diagnosis: str,
        specialization: str,
        doctor: str,
        date: str,
        new_diagnosis: str,
        new_specialization: str,
        new_doctor: str,
    ) -> None:
        """Change the diagnosis, specialization and doctor of the described patient."""
        patient = Patient(name, diagnosis, specialization, doctor, _date_from_text(date))
        self.repository.update_patient(
            patient, new_diagnosis, new_specialization, new_doctor
        )
        self.notify()