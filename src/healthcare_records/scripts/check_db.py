"""
Check the database connection and count the rows each accessor can bind.
Run with: python -m healthcare_records.scripts.check_db
"""
from sqlalchemy import inspect
from healthcare_records.access import Database

def main():
    try:
        db = Database(raise_errors=True)
        tables = inspect(db.engine).get_table_names()

        print("Database Connection: SUCCESS\n")
        print("Mapped tables:")

        for accessor in (db.symptoms, db.ailments, db.patients):
            if accessor.table_name.lower() not in tables:
                print(f"  - {accessor.table_name}: missing")
                continue
            count = accessor.counting(lambda record: True)
            print(f"  - {accessor.table_name}: {count} rows")

    except Exception as e:
        print("Database Connection: FAILED")
        print(f"Error: {e}")

if __name__ == "__main__":
    main()
