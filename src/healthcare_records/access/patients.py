from __future__ import annotations

from healthcare_records.access.accessor import Accessor
from healthcare_records.access.row_source import RowSource
from healthcare_records.access.tables import PATIENT_TABLE
from healthcare_records.models import Ailment, Patient, Symptom
from healthcare_records.util.multisets import flat_union, intersection


class PatientAccessor(Accessor[Patient]):

    def __init__(self, row_source: RowSource, raise_errors: bool | None = None):
        super().__init__(row_source, PATIENT_TABLE, raise_errors)

    def find_all(self, ailment: Ailment) -> set[Patient]:
        """Patients with the ailment on record."""
        return self.filter(lambda patient: patient.has_ailment(ailment))

    def union(self) -> set[Ailment]:
        """Every ailment recorded against any patient."""
        return flat_union(self.all(), lambda patient: patient.ailments)

    @staticmethod
    def intersection(first: Patient, second: Patient) -> set[Symptom]:
        return intersection(first.symptoms, second.symptoms)
