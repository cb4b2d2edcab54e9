"""
Persistence and typed queries for patients, ailments and symptoms.
"""
__version__ = "1.0.0"
