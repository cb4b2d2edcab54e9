from __future__ import annotations

from healthcare_records.access.accessor import Accessor
from healthcare_records.access.row_source import RowSource
from healthcare_records.access.tables import AILMENT_TABLE
from healthcare_records.models import Ailment, Symptom


class AilmentAccessor(Accessor[Ailment]):

    def __init__(self, row_source: RowSource, raise_errors: bool | None = None):
        super().__init__(row_source, AILMENT_TABLE, raise_errors)

    def having(self, symptom: Symptom) -> set[Ailment]:
        return self.filter(lambda ailment: symptom in ailment.symptoms)
