"""
Row source: executes raw statement text and hands back row cursors.

Statements are sent as-is through `Connection.exec_driver_sql`; there is no parameter
binding. Each `execute` holds its own connection for the duration of the `with` block and
releases it (and the result) on every exit path.

A RowSource shares one engine and does no locking. Issuing statements from several threads
through the same instance is the caller's responsibility.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import date, datetime

from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from healthcare_records.core.errors import RowSourceError
from healthcare_records.mapping.columns import decode_ailments, decode_symptoms
from healthcare_records.models import AgeGroup, Ailment, Gender, Symptom

log = logging.getLogger(__name__)


class RowCursor:
    """
    Named-column access to a single row.

    The typed getters convert what the driver returns into the values records hold (dates
    stored as text, enum codes, JSON-encoded sets). NULL comes back as None.

    The binder only binds a column through a getter named after it, never through `get`.
    A new mapped field on a record type (say `_severity`) needs a matching `get_severity`
    here, otherwise binding fails with MissingBindingError.
    """

    def __init__(self, row: Mapping):
        self._row = row

    @property
    def columns(self) -> list[str]:
        return list(self._row.keys())

    def get(self, column: str):
        try:
            return self._row[column]
        except KeyError as e:
            raise RowSourceError(f"Column '{column}' not present in row {self.columns}") from e

    def get_id(self, column: str):
        return self.get(column)

    def get_name(self, column: str):
        return self.get(column)

    def get_birth_date(self, column: str) -> date | None:
        value = self.get(column)
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            return date.fromisoformat(value.strip()[:10])
        return value

    def get_gender(self, column: str) -> Gender | None:
        value = self.get(column)
        return None if value is None else Gender.from_code(value)

    def get_age_group(self, column: str) -> AgeGroup | None:
        value = self.get(column)
        return None if value is None else AgeGroup[str(value).strip().upper()]

    def get_symptoms(self, column: str) -> set[Symptom]:
        return decode_symptoms(self.get(column))

    def get_ailments(self, column: str) -> set[Ailment]:
        return decode_ailments(self.get(column))

    def __repr__(self):
        return f"RowCursor({dict(self._row)!r})"


class ResultCursor:
    """Iterates the rows of one statement result; empty for statements returning no rows."""

    def __init__(self, result: CursorResult):
        self._result = result

    def __iter__(self) -> Iterator[RowCursor]:
        if not self._result.returns_rows:
            return
        for row in self._result.mappings():
            yield RowCursor(row)

    def close(self) -> None:
        self._result.close()


class RowSource:
    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def execute(self, statement: str) -> Iterator[ResultCursor]:
        log.debug("Executing: %s", statement)
        try:
            with self.engine.connect() as connection:
                cursor = ResultCursor(connection.exec_driver_sql(statement))
                try:
                    yield cursor
                finally:
                    cursor.close()
                connection.commit()
        except SQLAlchemyError as e:
            raise RowSourceError(f"Statement failed [{statement}]: {e}") from e

    def __repr__(self):
        return f"RowSource({self.engine.url.render_as_string(hide_password=True)})"
