"""
Reflective field-to-column binder.

A record type declares its mapped fields through class-level annotations, walked along the
MRO from the base class down, in declaration order. The column for a field is the
attribute name without leading underscores (`_birth_date` -> `birth_date`).

Binding a row builds a blank record, then for every field looks up a getter on the row
cursor's *type* named `get_<column>` or `get_<COLUMN>` (case-sensitive), calls it with the
column name, checks the result against the field's annotation, and writes it straight onto
the instance. Setters are bypassed, so binding does not re-stamp `last_updated`.
"""
from __future__ import annotations

import inspect
import logging
import typing
from dataclasses import dataclass
from functools import cache
from typing import Any, ClassVar, TypeVar

from healthcare_records.core.errors import (
    AmbiguousBindingError,
    MissingBindingError,
    TypeMismatchError,
)

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Field:
    attribute: str
    column: str
    annotation: Any

    @property
    def expected_type(self):
        """Runtime class to check values against; `set[Symptom]` checks as `set`."""
        return typing.get_origin(self.annotation) or self.annotation


def _is_classvar(annotation) -> bool:
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


@cache
def declared_fields(record_type: type) -> tuple[Field, ...]:
    """Mapped fields of `record_type`, base-class fields first."""
    fields: dict[str, Field] = {}
    for klass in reversed(record_type.__mro__):
        if klass is object:
            continue
        for attribute, annotation in inspect.get_annotations(klass, eval_str=True).items():
            if _is_classvar(annotation):
                continue
            # a redeclared field keeps its original position
            fields[attribute] = Field(attribute, attribute.lstrip("_"), annotation)
    return tuple(fields.values())


def getter_names(column: str) -> tuple[str, ...]:
    names = [f"get_{column}", f"get_{column.upper()}"]
    return tuple(dict.fromkeys(names))


@cache
def resolve_getter(cursor_type: type, field: Field) -> str:
    """Name of the single getter on `cursor_type` that serves `field`."""
    names = getter_names(field.column)
    candidates = [
        name for name, member in inspect.getmembers(cursor_type)
        if name in names and callable(member)
    ]
    if not candidates:
        raise MissingBindingError(
            f"{cursor_type.__name__} has no getter for field '{field.attribute}' "
            f"(looked for {', '.join(names)})"
        )
    if len(candidates) > 1:
        raise AmbiguousBindingError(
            f"{cursor_type.__name__} has several getters for field '{field.attribute}': "
            f"{', '.join(sorted(candidates))}"
        )
    log.debug("Resolved %s.%s for field %s", cursor_type.__name__, candidates[0], field.attribute)
    return candidates[0]


def _invoke(getter, column: str):
    # getters that take a parameter expect the column name
    if inspect.signature(getter).parameters:
        return getter(column)
    return getter()


def _check_type(record_type: type, field: Field, value) -> None:
    expected = field.expected_type
    if value is None or not isinstance(expected, type):
        return
    if not isinstance(value, expected):
        raise TypeMismatchError(
            f"{record_type.__name__}.{field.attribute} expects {expected.__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )


def bind(target_type: type[T], row_cursor) -> T:
    """Build a `target_type` record from the row the cursor is positioned on."""
    record = target_type()
    cursor_type = type(row_cursor)
    for field in declared_fields(target_type):
        getter = getattr(row_cursor, resolve_getter(cursor_type, field))
        value = _invoke(getter, field.column)
        _check_type(target_type, field, value)
        setattr(record, field.attribute, value)
    return record
