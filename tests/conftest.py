"""
Shared fixtures: a file-backed SQLite database per test and a recording row source.
"""
from contextlib import contextmanager
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from healthcare_records.access import Database, RowCursor
from healthcare_records.core.db import create_tables
from healthcare_records.core.errors import RowSourceError
from healthcare_records.load.load_to_db import save_records
from healthcare_records.models import Ailment, Gender, Patient, Symptom


class RecordingRowSource:
    """Stands in for RowSource: records statements and serves canned rows."""

    def __init__(self, rows=None, fail=False):
        self.rows = rows or []
        self.fail = fail
        self.statements = []
        self.released = 0

    @contextmanager
    def execute(self, statement):
        self.statements.append(statement)
        if self.fail:
            raise RowSourceError(f"Statement failed [{statement}]: disk I/O error")
        try:
            yield [RowCursor(row) for row in self.rows]
        finally:
            self.released += 1


@pytest.fixture
def recording_source():
    return RecordingRowSource


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'records.db'}")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Database:
    return Database(engine=engine, raise_errors=False)


@pytest.fixture
def symptoms():
    return {
        "cough": Symptom(1, "cough"),
        "fever": Symptom(2, "fever"),
        "fatigue": Symptom(4, "fatigue"),
    }


@pytest.fixture
def ailments(symptoms):
    return {
        "flu": Ailment(1, "flu", [symptoms["cough"], symptoms["fever"]]),
        "cold": Ailment(2, "cold", [symptoms["cough"]]),
        "anaemia": Ailment(3, "anaemia", [symptoms["fatigue"]]),
    }


@pytest.fixture
def patients(ailments, symptoms):
    ada = Patient(1, "Ada", date(1945, 12, 10), Gender.FEMALE)
    ada.set_ailments([ailments["flu"]])
    ada.set_symptoms([symptoms["cough"], symptoms["fever"]])

    alan = Patient(2, "Alan", date(1962, 6, 23), Gender.MALE)
    alan.set_ailments([ailments["cold"], ailments["anaemia"]])
    alan.set_symptoms([symptoms["cough"], symptoms["fatigue"]])

    grace = Patient(3, "Grace", date(2001, 12, 9), Gender.FEMALE)
    return {"ada": ada, "alan": alan, "grace": grace}


@pytest.fixture
def seeded_db(engine, db, symptoms, ailments, patients) -> Database:
    with Session(engine) as session:
        save_records(
            session,
            list(symptoms.values()) + [Symptom(3, "cough")],
            list(ailments.values()),
            list(patients.values()),
        )
        session.commit()
    return db
