from __future__ import annotations

from healthcare_records.models.record import Record
from healthcare_records.util.compare import compare_strings


class Symptom(Record):
    """A named symptom; ordered by name."""

    def compare_to(self, other: Symptom) -> int:
        return compare_strings(self.name, other.name)
