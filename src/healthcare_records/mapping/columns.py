"""
JSON text encoding for set-valued columns.

Symptom sets are stored as `[{"id": .., "name": ..}, ...]`; ailment sets nest their own
symptom lists under "symptoms". Entries are written in id order so the text is stable.
"""
from __future__ import annotations

import json
from collections.abc import Iterable

from healthcare_records.models import Ailment, Symptom


def _symptom_entry(symptom: Symptom) -> dict:
    return {"id": symptom.id, "name": symptom.name}


def _ailment_entry(ailment: Ailment) -> dict:
    return {
        "id": ailment.id,
        "name": ailment.name,
        "symptoms": [_symptom_entry(s) for s in sorted(ailment.symptoms, key=lambda s: s.id)],
    }


def _load(text: str | None) -> list[dict]:
    if text is None or not str(text).strip():
        return []
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list, got {type(data).__name__}")
    return data


def encode_symptoms(symptoms: Iterable[Symptom]) -> str:
    return json.dumps([_symptom_entry(s) for s in sorted(symptoms, key=lambda s: s.id)])


def decode_symptoms(text: str | None) -> set[Symptom]:
    return {Symptom(entry["id"], entry["name"]) for entry in _load(text)}


def encode_ailments(ailments: Iterable[Ailment]) -> str:
    return json.dumps([_ailment_entry(a) for a in sorted(ailments, key=lambda a: a.id)])


def decode_ailments(text: str | None) -> set[Ailment]:
    out = set()
    for entry in _load(text):
        symptoms = {Symptom(s["id"], s["name"]) for s in entry.get("symptoms", [])}
        out.add(Ailment(entry["id"], entry["name"], symptoms))
    return out
