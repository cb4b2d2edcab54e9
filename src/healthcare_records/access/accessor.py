"""
Generic per-table accessor.

Everything is derived from `all()`, a fresh full-table scan bound row by row into records.
The query helpers are side-effect-free folds over that scan. `insert`, `update` and
`delete` render statement text through the synthesizer and hand it to the row source.

Row-source failures are logged. Reads then yield nothing and mutations return False; with
`raise_errors=True` the RowSourceError is re-raised instead. Binding errors always
propagate.

Calls run synchronously in the caller's thread. One accessor shares one row source with no
locking; do not use an instance from several threads without external synchronization.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterator
from contextlib import closing
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Generic, TypeVar

from healthcare_records.access.row_source import RowCursor, RowSource
from healthcare_records.core.config import RAISE_ROW_SOURCE_ERRORS
from healthcare_records.core.errors import RowSourceError
from healthcare_records.mapping.binder import bind
from healthcare_records.mapping.synthesizer import (
    delete_statement,
    insert_statement,
    select_all,
    update_statement,
)
from healthcare_records.models.record import Record

log = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)
K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class MappedTable(Generic[T]):
    """A table name and the record type its rows bind to."""
    name: str
    target_class: type[T]

    def __str__(self) -> str:
        return self.name


def _natural_order(a: Record, b: Record) -> int:
    return a.compare_to(b)


class Accessor(Generic[T]):

    def __init__(self, row_source: RowSource, table: MappedTable[T], raise_errors: bool | None = None):
        self.row_source = row_source
        self.table = table
        self.raise_errors = RAISE_ROW_SOURCE_ERRORS if raise_errors is None else raise_errors

    @property
    def table_name(self) -> str:
        return self.table.name

    @property
    def target_class(self) -> type[T]:
        return self.table.target_class

    def create_from_row(self, row: RowCursor) -> T:
        return bind(self.target_class, row)

    def _failed(self, operation: str, error: RowSourceError) -> None:
        log.error("%s on table %s failed: %s", operation, self.table_name, error)
        if self.raise_errors:
            raise error

    # reads
    def all(self) -> Iterator[T]:
        """Fresh scan of the table; call again to scan again."""
        try:
            with self.row_source.execute(select_all(self.table_name)) as cursor:
                for row in cursor:
                    yield self.create_from_row(row)
        except RowSourceError as e:
            self._failed("SELECT", e)

    def find(self, id: int) -> T | None:
        with closing(self.all()) as records:
            return next((record for record in records if record.id == id), None)

    def filter(self, predicate: Callable[[T], bool]) -> set[T]:
        return {record for record in self.all() if predicate(record)}

    def group_by(self, classifier: Callable[[T], K]) -> dict[K, list[T]]:
        groups = defaultdict(list)
        for record in self.all():
            groups[classifier(record)].append(record)
        return dict(groups)

    def min_by(self, comparator: Callable[[T, T], int]) -> T | None:
        return min(self.all(), key=cmp_to_key(comparator), default=None)

    def max_by(self, comparator: Callable[[T, T], int]) -> T | None:
        return max(self.all(), key=cmp_to_key(comparator), default=None)

    def counting(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for record in self.all() if predicate(record))

    def minimal(self) -> T | None:
        """Least record by natural order; the first one scanned wins ties."""
        return self.min_by(_natural_order)

    def maximal(self) -> T | None:
        return self.max_by(_natural_order)

    # writes
    def _execute(self, operation: str, statement: str) -> bool:
        try:
            with self.row_source.execute(statement):
                pass
        except RowSourceError as e:
            self._failed(operation, e)
            return False
        log.info("%s on table %s succeeded", operation, self.table_name)
        return True

    def insert(self, record: T) -> bool:
        return self._execute("INSERT", insert_statement(self.table_name, record))

    def delete(self, record: T) -> bool:
        return self._execute("DELETE", delete_statement(self.table_name, record))

    def update(self, record: T) -> bool:
        return self._execute("UPDATE", update_statement(self.table_name, record))

    def __repr__(self):
        return (
            f"Accessor for table [{self.table_name}] containing objects of type "
            f"[{self.target_class.__name__}] connected at [{self.row_source!r}]"
        )
