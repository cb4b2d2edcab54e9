"""
CLI wrapper for loading the record tables from data/raw.
Run with:
    python -m healthcare_records.scripts.run_load
"""
import logging
from healthcare_records.core.db import create_tables
from healthcare_records.core.logging_setup import setup_logging
from healthcare_records.load.load_to_db import load_all

def main():
    setup_logging()
    log = logging.getLogger(__name__)

    log.info("Starting record load")
    engine = create_tables()
    stats = load_all(engine)

    log.info(f"Load complete: {stats}")
    return stats

if __name__ == "__main__":
    main()
