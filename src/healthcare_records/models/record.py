"""
Identity-bearing record base shared by symptoms, ailments and patients.

Class-level annotations on a record type declare its mapped fields. Storage attributes are
private (`_id` maps to the `id` column); `_last_updated` is bookkeeping and is not
annotated, so it is never bound or rendered into statements.

Records are plain mutable objects with no locking. Sharing one instance between threads
needs external synchronization.
"""
from __future__ import annotations

from datetime import date

from healthcare_records.core.errors import InvalidArgument
from healthcare_records.util.compare import compare_ints


def require(value, what: str):
    if value is None:
        raise InvalidArgument(f"{what} must not be None")
    return value


class Record:
    _id: int
    _name: str

    def __init__(self, id: int = 0, name: str = ""):
        self.touch()
        self.set_id(id)
        self.set_name(name)

    def touch(self) -> None:
        """Stamp the audit date. Every setter calls this."""
        self._last_updated = date.today()

    @property
    def id(self) -> int:
        return self._id

    def set_id(self, id: int) -> None:
        require(id, "id")
        self.touch()
        self._id = id

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        require(name, "name")
        self.touch()
        self._name = name

    @property
    def last_updated(self) -> date:
        return self._last_updated

    def compare_to(self, other: Record) -> int:
        return compare_ints(self.id, other.id)

    def __lt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"{type(self).__name__}(id={self._id!r}, name={self._name!r})"
