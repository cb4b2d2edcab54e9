from __future__ import annotations

from collections.abc import Iterable

from healthcare_records.models.record import Record, require
from healthcare_records.models.symptom import Symptom
from healthcare_records.util.multisets import multiset_compare


class Ailment(Record):
    """
    An ailment and the set of symptoms it presents with.

    Natural order is the multiset overlap measure of the two symptom sets. It is not
    consistent with equality: ailments with disjoint symptom sets of the same size compare
    the same, and the result is never negative.
    """
    _symptoms: set[Symptom]

    def __init__(self, id: int = 0, name: str = "", symptoms: Iterable[Symptom] | None = None):
        super().__init__(id, name)
        self._symptoms = set(symptoms) if symptoms is not None else set()

    @property
    def symptoms(self) -> set[Symptom]:
        return set(self._symptoms)

    def set_symptoms(self, symptoms: Iterable[Symptom]) -> None:
        require(symptoms, "symptoms")
        self.touch()
        self._symptoms = set(symptoms)

    def add_symptom(self, symptom: Symptom) -> bool:
        """Returns False when the symptom was already present."""
        require(symptom, "symptom")
        self.touch()
        if symptom in self._symptoms:
            return False
        self._symptoms.add(symptom)
        return True

    def compare_to(self, other: Ailment) -> int:
        return multiset_compare(self.symptoms, other.symptoms)
