from healthcare_records.models.enums import AgeGroup, Gender
from healthcare_records.models.record import Record
from healthcare_records.models.symptom import Symptom
from healthcare_records.models.ailment import Ailment
from healthcare_records.models.patient import Patient

__all__ = ["AgeGroup", "Gender", "Record", "Symptom", "Ailment", "Patient"]
