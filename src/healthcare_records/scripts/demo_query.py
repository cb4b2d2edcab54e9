"""
Demo queries - examples of querying the record tables through the accessors
Run: python -m healthcare_records.scripts.demo_query
"""
from healthcare_records.access import Database
from healthcare_records.compute import closest_match

def main():
    db = Database()
    print("Healthcare Records - Sample Queries\n")

    print("\n1. Patient Count by Gender:")
    for gender, patients in db.patients.group_by(lambda p: p.gender).items():
        print(f"   {gender}: {len(patients)}")

    print("\n2. Patient Count by Age Group:")
    for group, patients in db.patients.group_by(lambda p: p.age_group).items():
        print(f"   {group}: {len(patients)}")

    print("\n3. First Symptom by Name:")
    first = db.symptoms.minimal()
    print(f"   {first.name if first else '-'}")

    print("\n4. Ailments by Number of Patients:")
    for ailment in sorted(db.patients.union(), key=lambda a: a.id):
        count = db.patients.counting(lambda p: p.has_ailment(ailment))
        print(f"   {ailment.name}: {count} patients")

    print("\n5. Closest Ailment to Each Ailment:")
    ailments = list(db.ailments.all())
    for ailment in ailments:
        others = [a for a in ailments if a != ailment]
        match = closest_match(others, ailment)
        print(f"   {ailment.name} -> {match.name if match else '-'}")

if __name__ == "__main__":
    main()
