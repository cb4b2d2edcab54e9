"""
Accessor behaviour against a recording row source (no database).
"""
import logging
from datetime import date

import pytest
from healthcare_records.access import (
    Accessor,
    AilmentAccessor,
    MappedTable,
    PatientAccessor,
    SYMPTOM_TABLE,
    SymptomAccessor,
)
from healthcare_records.core.errors import RowSourceError, TypeMismatchError
from healthcare_records.models import Ailment, Gender, Patient, Symptom

SYMPTOM_ROWS = [
    {"id": 1, "name": "cough"},
    {"id": 2, "name": "fever"},
    {"id": 3, "name": "cough"},
]


@pytest.fixture
def symptom_accessor(recording_source):
    return SymptomAccessor(recording_source(SYMPTOM_ROWS), raise_errors=False)


def test_all_scans_table_each_call(symptom_accessor):
    assert [s.id for s in symptom_accessor.all()] == [1, 2, 3]
    assert [s.id for s in symptom_accessor.all()] == [1, 2, 3]
    assert symptom_accessor.row_source.statements == ["SELECT * FROM Symptom"] * 2


def test_all_is_lazy(symptom_accessor):
    records = symptom_accessor.all()
    assert symptom_accessor.row_source.statements == []
    next(records)
    assert symptom_accessor.row_source.statements == ["SELECT * FROM Symptom"]
    records.close()


def test_find(symptom_accessor):
    assert symptom_accessor.find(2).name == "fever"
    assert symptom_accessor.find(99) is None


def test_find_releases_the_scan_early(symptom_accessor):
    symptom_accessor.find(1)
    assert symptom_accessor.row_source.released == 1


def test_empty_table(recording_source):
    accessor = SymptomAccessor(recording_source([]))
    assert list(accessor.all()) == []
    assert accessor.find(1) is None
    assert accessor.minimal() is None
    assert accessor.maximal() is None
    assert accessor.min_by(lambda a, b: a.id - b.id) is None
    assert accessor.filter(lambda s: True) == set()
    assert accessor.group_by(lambda s: s.name) == {}
    assert accessor.counting(lambda s: True) == 0


def test_filter_returns_a_set(symptom_accessor):
    coughs = symptom_accessor.filter(lambda s: s.name == "cough")
    assert coughs == {Symptom(1, "cough"), Symptom(3, "cough")}


def test_group_by(symptom_accessor):
    groups = symptom_accessor.group_by(lambda s: s.name)
    assert {k: [s.id for s in v] for k, v in groups.items()} == {"cough": [1, 3], "fever": [2]}


def test_counting(symptom_accessor):
    assert symptom_accessor.counting(lambda s: s.name == "cough") == 2
    assert symptom_accessor.counting(lambda s: s.id > 5) == 0


def test_min_by_and_max_by(symptom_accessor):
    by_id = lambda a, b: a.id - b.id
    assert symptom_accessor.min_by(by_id).id == 1
    assert symptom_accessor.max_by(by_id).id == 3


def test_minimal_uses_natural_order(symptom_accessor):
    least = symptom_accessor.minimal()
    assert least.name == "cough"
    assert least.id in {1, 3}
    assert symptom_accessor.maximal().name == "fever"


def test_ailment_minimal_keeps_first_on_ties(recording_source):
    rows = [
        {"id": 1, "name": "a", "symptoms": '[{"id": 1, "name": "cough"}]'},
        {"id": 2, "name": "b", "symptoms": '[{"id": 2, "name": "fever"}]'},
    ]
    accessor = AilmentAccessor(recording_source(rows))
    # overlap measure is never negative, so no ailment is ever "less" than the first
    assert accessor.minimal().id == 1
    assert accessor.having(Symptom(2, "fever")) == {Ailment(2, "b")}


def test_mutations_send_statement_text(symptom_accessor):
    flu = Symptom(7, "flu")

    assert symptom_accessor.insert(flu) is True
    assert symptom_accessor.update(flu) is True
    assert symptom_accessor.delete(flu) is True
    assert symptom_accessor.row_source.statements == [
        "INSERT INTOSymptom  VALUES (id=7, name=flu)",
        "UPDATE Symptom  SET 7, flu  WHERE id=7",
        "DELETE FROMSymptom  WHERE id=7",
    ]


def test_row_source_failures_are_logged_and_reported(recording_source, caplog):
    accessor = SymptomAccessor(recording_source(SYMPTOM_ROWS, fail=True), raise_errors=False)

    with caplog.at_level(logging.ERROR):
        assert accessor.insert(Symptom(7, "flu")) is False
        assert accessor.update(Symptom(7, "flu")) is False
        assert accessor.delete(Symptom(7, "flu")) is False
        assert list(accessor.all()) == []
        assert accessor.find(1) is None

    assert "INSERT on table Symptom failed" in caplog.text
    assert "SELECT on table Symptom failed" in caplog.text


def test_row_source_failures_can_propagate(recording_source):
    accessor = SymptomAccessor(recording_source(SYMPTOM_ROWS, fail=True), raise_errors=True)

    with pytest.raises(RowSourceError):
        accessor.insert(Symptom(7, "flu"))
    with pytest.raises(RowSourceError):
        list(accessor.all())


def test_binding_errors_always_propagate(recording_source):
    accessor = SymptomAccessor(recording_source([{"id": "x", "name": "cough"}]), raise_errors=False)
    with pytest.raises(TypeMismatchError):
        list(accessor.all())
    assert accessor.row_source.released == 1


def test_generic_accessor_over_custom_table(recording_source):
    accessor = Accessor(recording_source(SYMPTOM_ROWS), MappedTable("Signs", Symptom))
    assert accessor.table_name == "Signs"
    assert accessor.target_class is Symptom
    assert len(list(accessor.all())) == 3
    assert accessor.row_source.statements == ["SELECT * FROM Signs"]


def test_repr_names_table_and_type(symptom_accessor):
    text = repr(symptom_accessor)
    assert "[Symptom]" in text
    assert SYMPTOM_TABLE.target_class.__name__ in text


def test_patient_queries(recording_source):
    flu = Ailment(1, "flu")
    cough, fever = Symptom(1, "cough"), Symptom(2, "fever")
    rows = [
        {
            "id": 1, "name": "Ada", "age_group": "ELDERLY", "gender": "F",
            "birth_date": "1945-12-10",
            "ailments": '[{"id": 1, "name": "flu", "symptoms": []}]',
            "symptoms": '[{"id": 1, "name": "cough"}]',
        },
        {
            "id": 2, "name": "Alan", "age_group": "ADULT", "gender": "M",
            "birth_date": "1962-06-23",
            "ailments": '[{"id": 2, "name": "cold", "symptoms": []}]',
            "symptoms": None,
        },
    ]
    accessor = PatientAccessor(recording_source(rows))

    assert {p.id for p in accessor.find_all(flu)} == {1}
    assert accessor.union() == {flu, Ailment(2, "cold")}

    first = Patient(1, "A", date(1990, 1, 1), Gender.MALE)
    first.set_symptoms([cough, fever])
    second = Patient(2, "B", date(1990, 1, 1), Gender.MALE)
    second.set_symptoms([fever])
    assert PatientAccessor.intersection(first, second) == {fever}


def test_patient_natural_order_skips_null_columns(recording_source):
    row = {
        "age_group": "ADULT", "birth_date": "1962-06-23",
        "ailments": None, "symptoms": None,
    }
    rows = [
        {**row, "id": 1, "name": "Ada", "gender": "F"},
        {**row, "id": 2, "name": "Bob", "gender": None},
    ]
    accessor = PatientAccessor(recording_source(rows))

    assert accessor.minimal().id == 1
    assert accessor.maximal().id == 2
