from healthcare_records.access.accessor import Accessor, MappedTable
from healthcare_records.access.row_source import ResultCursor, RowCursor, RowSource
from healthcare_records.access.tables import AILMENT_TABLE, PATIENT_TABLE, SYMPTOM_TABLE
from healthcare_records.access.symptoms import SymptomAccessor
from healthcare_records.access.ailments import AilmentAccessor
from healthcare_records.access.patients import PatientAccessor
from healthcare_records.access.database import Database

__all__ = [
    "Accessor",
    "MappedTable",
    "ResultCursor",
    "RowCursor",
    "RowSource",
    "AILMENT_TABLE",
    "PATIENT_TABLE",
    "SYMPTOM_TABLE",
    "SymptomAccessor",
    "AilmentAccessor",
    "PatientAccessor",
    "Database",
]
