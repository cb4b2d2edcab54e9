"""
Load symptoms, ailments and patients from CSV into the database.
- Id lists (symptom_ids, ailment_ids) are ';'-separated; unknown ids are logged and skipped.
- Each load replaces the tables' contents in a single session.
"""

from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from healthcare_records.core.logging_setup import setup_logging
from healthcare_records.core.db import get_engine
from healthcare_records.core.config import SYMPTOMS_FILE, AILMENTS_FILE, PATIENTS_FILE
from healthcare_records.mapping.columns import encode_ailments, encode_symptoms
from healthcare_records.models import Ailment, Gender, Patient, Symptom
from healthcare_records.models.tables import AilmentRow, PatientRow, SymptomRow

log = logging.getLogger(__name__)

def _read(path: Path, what: str) -> pd.DataFrame:
    df = pd.read_csv(path)
    df.columns = df.columns.str.strip()
    log.info("%s: reading %d rows from %s", what, len(df), path)
    return df

def _ids(val) -> list[int]:
    if pd.isna(val):
        return []
    return [int(float(x)) for x in str(val).split(";") if x.strip()]

def _lookup(index: dict, ids: list[int], what: str, owner: str) -> list:
    found = []
    for i in ids:
        if i in index:
            found.append(index[i])
        else:
            log.warning("%s: unknown %s id %d skipped", owner, what, i)
    return found

def read_symptoms(path: Path = SYMPTOMS_FILE) -> dict[int, Symptom]:
    df = _read(path, "Symptoms")
    return {
        int(rec["id"]): Symptom(int(rec["id"]), str(rec["name"]).strip())
        for rec in df.to_dict("records")
    }

def read_ailments(symptoms: dict[int, Symptom], path: Path = AILMENTS_FILE) -> dict[int, Ailment]:
    df = _read(path, "Ailments")
    out = {}
    for rec in df.to_dict("records"):
        ailment = Ailment(int(rec["id"]), str(rec["name"]).strip())
        owner = f"Ailment {ailment.id}"
        ailment.set_symptoms(_lookup(symptoms, _ids(rec.get("symptom_ids")), "symptom", owner))
        out[ailment.id] = ailment
    return out

def read_patients(
    ailments: dict[int, Ailment],
    symptoms: dict[int, Symptom],
    path: Path = PATIENTS_FILE,
) -> list[Patient]:
    df = _read(path, "Patients")
    df["birth_date"] = pd.to_datetime(df["birth_date"], errors="coerce").dt.date

    out = []
    for rec in df.to_dict("records"):
        if pd.isna(rec["birth_date"]):
            log.warning("Patient %s: unparseable birth_date, row dropped", rec["id"])
            continue
        patient = Patient(
            int(rec["id"]),
            str(rec["name"]).strip(),
            rec["birth_date"],
            Gender.from_code(rec["gender"]),
        )
        owner = f"Patient {patient.id}"
        patient.set_ailments(_lookup(ailments, _ids(rec.get("ailment_ids")), "ailment", owner))
        patient.set_symptoms(_lookup(symptoms, _ids(rec.get("symptom_ids")), "symptom", owner))
        out.append(patient)
    return out

# record -> row
def symptom_row(symptom: Symptom) -> SymptomRow:
    return SymptomRow(id=symptom.id, name=symptom.name)

def ailment_row(ailment: Ailment) -> AilmentRow:
    return AilmentRow(id=ailment.id, name=ailment.name, symptoms=encode_symptoms(ailment.symptoms))

def patient_row(patient: Patient) -> PatientRow:
    return PatientRow(
        id=patient.id,
        name=patient.name,
        age_group=str(patient.age_group),
        gender=str(patient.gender),
        birth_date=patient.birth_date,
        ailments=encode_ailments(patient.ailments),
        symptoms=encode_symptoms(patient.symptoms),
    )

def save_records(session: Session, symptoms, ailments, patients) -> dict:
    for table in (PatientRow, AilmentRow, SymptomRow):
        session.execute(delete(table))

    session.bulk_save_objects([symptom_row(s) for s in symptoms])
    session.bulk_save_objects([ailment_row(a) for a in ailments])
    session.bulk_save_objects([patient_row(p) for p in patients])
    return {"symptoms": len(symptoms), "ailments": len(ailments), "patients": len(patients)}

def load_all(
    engine: Engine | None = None,
    symptoms_file: Path = SYMPTOMS_FILE,
    ailments_file: Path = AILMENTS_FILE,
    patients_file: Path = PATIENTS_FILE,
) -> dict:
    setup_logging()
    log.info("Starting DB load")
    engine = engine or get_engine()

    symptoms = read_symptoms(symptoms_file)
    ailments = read_ailments(symptoms, ailments_file)
    patients = read_patients(ailments, symptoms, patients_file)

    with Session(engine) as session:
        try:
            stats = save_records(session, list(symptoms.values()), list(ailments.values()), patients)
            session.commit()
            log.info("Load committed successfully")
        except Exception as e:
            session.rollback()
            log.error("Load failed; rolled back: %s", e, exc_info=True)
            raise

    log.info("Load summary: %s", stats)
    return stats

if __name__ == "__main__":
    load_all()
