"""
Storage schema for the mapped record types.

Column names match the records' mapped field names. Set-valued fields are kept as JSON
text (see healthcare_records.mapping.columns).

Table names are lowercase so the accessors' unquoted statement text (`SELECT * FROM
Patient`) reaches them on backends that fold unquoted identifiers, like PostgreSQL.
"""

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import Column, String, Date, Integer, Text

class Base(DeclarativeBase):
    pass

class SymptomRow(Base):
    __tablename__ = "symptom"

    id   = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)

class AilmentRow(Base):
    __tablename__ = "ailment"

    id       = Column(Integer, primary_key=True, autoincrement=False)
    name     = Column(String(100), nullable=False)
    symptoms = Column(Text)

class PatientRow(Base):
    __tablename__ = "patient"

    id         = Column(Integer, primary_key=True, autoincrement=False)
    name       = Column(String(100), nullable=False)
    age_group  = Column(String(10), nullable=False)
    gender     = Column(String(6), nullable=False)
    birth_date = Column(Date, nullable=False)
    ailments   = Column(Text)
    symptoms   = Column(Text)
