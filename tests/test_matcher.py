from healthcare_records.compute import closest_match, mean_squared_error
from healthcare_records.models import Ailment, Symptom


def test_mean_squared_error_halves_the_square():
    assert mean_squared_error(Symptom(1, "b"), Symptom(2, "a")) == 0
    assert mean_squared_error(Symptom(1, "d"), Symptom(2, "a")) == 4
    assert mean_squared_error(Symptom(1, "a"), Symptom(2, "d")) == 4


def test_closest_match_by_name():
    data = [Symptom(1, "cold"), Symptom(2, "cough"), Symptom(3, "fever")]
    assert closest_match(data, Symptom(9, "coug")).id == 2


def test_closest_match_first_wins_ties():
    data = [Symptom(1, "b"), Symptom(2, "d")]
    assert closest_match(data, Symptom(9, "c")).id == 1


def test_closest_match_empty():
    assert closest_match([], Symptom(1, "x")) is None


def test_closest_match_over_ailments():
    cough, fever = Symptom(1, "cough"), Symptom(2, "fever")
    flu = Ailment(1, "flu", [cough, fever])
    cold = Ailment(2, "cold", [cough])
    bare = Ailment(3, "bare")

    # the overlap measure of an empty symptom set is 0, the smallest possible error
    assert closest_match([flu, cold, bare], flu) == bare
