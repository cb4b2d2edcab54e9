from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from healthcare_records.models.ailment import Ailment
from healthcare_records.models.enums import AgeGroup, Gender
from healthcare_records.models.record import Record, require
from healthcare_records.models.symptom import Symptom
from healthcare_records.util.compare import compare_dates, compare_members, compare_strings


class Patient(Record):
    """
    A patient with demographics and the ailments and symptoms on record.

    The age group is derived from the birth date when the patient is constructed. A blank
    patient (no arguments) is born today, which places it in UNDERAGE.

    Natural order adds four partial comparisons (name, age group, birth date, gender).
    Partial results can cancel each other, so this is not a total order.
    """
    _age_group: AgeGroup
    _gender: Gender
    _birth_date: date
    _ailments: set[Ailment]
    _symptoms: set[Symptom]

    def __init__(
        self,
        id: int = 0,
        name: str = "",
        birth_date: date | None = None,
        gender: Gender = Gender.FEMALE,
    ):
        super().__init__(id, name)
        self.set_gender(gender)
        self.set_birth_date(birth_date if birth_date is not None else date.today())
        self.set_age_group(AgeGroup.of(self._birth_date) or AgeGroup.ADULT)
        self._ailments = set()
        self._symptoms = set()

    @classmethod
    def copy_of(cls, other: Patient) -> Patient:
        patient = cls(other.id, other.name, other.birth_date, other.gender)
        patient._ailments.update(other._ailments)
        return patient

    @property
    def age_group(self) -> AgeGroup:
        return self._age_group

    def set_age_group(self, age_group: AgeGroup) -> None:
        require(age_group, "age_group")
        self.touch()
        self._age_group = age_group

    @property
    def birth_date(self) -> date:
        return self._birth_date

    def set_birth_date(self, birth_date: date) -> None:
        require(birth_date, "birth_date")
        self.touch()
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()
        self._birth_date = birth_date

    @property
    def gender(self) -> Gender:
        return self._gender

    def set_gender(self, gender: Gender) -> None:
        require(gender, "gender")
        self.touch()
        self._gender = gender

    @property
    def ailments(self) -> set[Ailment]:
        return set(self._ailments)

    def set_ailments(self, ailments: Iterable[Ailment]) -> None:
        require(ailments, "ailments")
        self.touch()
        self._ailments = set(ailments)

    def add_ailment(self, ailment: Ailment) -> bool:
        require(ailment, "ailment")
        self.touch()
        if ailment in self._ailments:
            return False
        self._ailments.add(ailment)
        return True

    def has_ailment(self, ailment: Ailment) -> bool:
        return ailment in self._ailments

    @property
    def symptoms(self) -> set[Symptom]:
        return set(self._symptoms)

    def set_symptoms(self, symptoms: Iterable[Symptom]) -> None:
        require(symptoms, "symptoms")
        self.touch()
        self._symptoms = set(symptoms)

    def add_symptom(self, symptom: Symptom) -> bool:
        require(symptom, "symptom")
        self.touch()
        if symptom in self._symptoms:
            return False
        self._symptoms.add(symptom)
        return True

    def compare_to(self, other: Patient) -> int:
        return (
            _partial(compare_strings, self.name, other.name)
            + _partial(compare_members, self.age_group, other.age_group)
            + _partial(compare_dates, self.birth_date, other.birth_date)
            + _partial(compare_members, self.gender, other.gender)
        )


def _partial(compare, a, b) -> int:
    # parts bound from NULL columns do not take part in the order
    if a is None or b is None:
        return 0
    return compare(a, b)
