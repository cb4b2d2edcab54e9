"""
Enumerations carried by patient records.
"""
from __future__ import annotations

from datetime import date
from enum import Enum


class Gender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"

    def __str__(self) -> str:
        return self.name[0]

    @classmethod
    def from_code(cls, code: str) -> Gender:
        """Accepts either the member name or its one-letter code, any case."""
        s = str(code).strip().upper()
        for member in cls:
            if s in (member.name, member.name[0]):
                return member
        raise ValueError(f"Unknown gender code: {code!r}")


class AgeGroup(Enum):
    # (first birth date included, last birth date included)
    UNDERAGE = (date(1998, 1, 1), date.max)
    ADULT    = (date(1952, 1, 1), date(1997, 12, 31))
    ELDERLY  = (date.min, date(1951, 12, 31))

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end

    def __str__(self) -> str:
        return self.name

    def includes(self, birth_date: date) -> bool:
        return self.start <= birth_date <= self.end

    @classmethod
    def of(cls, birth_date: date) -> AgeGroup | None:
        """First group, in declaration order, whose range includes the date."""
        return next((group for group in cls if group.includes(birth_date)), None)
