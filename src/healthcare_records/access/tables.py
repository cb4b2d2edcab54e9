from healthcare_records.access.accessor import MappedTable
from healthcare_records.models import Ailment, Patient, Symptom

PATIENT_TABLE = MappedTable("Patient", Patient)
AILMENT_TABLE = MappedTable("Ailment", Ailment)
SYMPTOM_TABLE = MappedTable("Symptom", Symptom)
