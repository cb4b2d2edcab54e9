from __future__ import annotations

from healthcare_records.access.accessor import Accessor
from healthcare_records.access.row_source import RowSource
from healthcare_records.access.tables import SYMPTOM_TABLE
from healthcare_records.models import Ailment, Symptom


class SymptomAccessor(Accessor[Symptom]):

    def __init__(self, row_source: RowSource, raise_errors: bool | None = None):
        super().__init__(row_source, SYMPTOM_TABLE, raise_errors)

    def collect(self, ailment: Ailment) -> set[Symptom]:
        """Stored symptoms that the ailment lists."""
        listed = ailment.symptoms
        return self.filter(lambda symptom: symptom in listed)
