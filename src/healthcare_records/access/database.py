"""
Database: an engine, its row source and one accessor per mapped table.
"""
from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from healthcare_records.access.ailments import AilmentAccessor
from healthcare_records.access.patients import PatientAccessor
from healthcare_records.access.row_source import RowSource
from healthcare_records.access.symptoms import SymptomAccessor
from healthcare_records.core.db import create_tables, get_engine

log = logging.getLogger(__name__)


class Database:

    def __init__(self, url: str | None = None, engine: Engine | None = None, raise_errors: bool | None = None):
        self.engine = engine or get_engine(url)
        self.row_source = RowSource(self.engine)

        self.patients = PatientAccessor(self.row_source, raise_errors)
        self.ailments = AilmentAccessor(self.row_source, raise_errors)
        self.symptoms = SymptomAccessor(self.row_source, raise_errors)
        log.debug("Database ready at %r", self.row_source)

    def create_tables(self) -> None:
        create_tables(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
