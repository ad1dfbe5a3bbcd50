#!/usr/bin/env python3
"""
Aggregator Test Script

Tests:
1. Counting by status and by the in-progress category
2. Flattening applications across students
3. Placements by department
4. Status breakdown
5. Recent applications
6. Invalid statuses and dangling student references

Run: python scripts/test_aggregator.py
"""
import sys
sys.path.insert(0, '.')

from datetime import date

from placement_tracker.core.exceptions import DanglingReferenceError, InvalidStatusError
from placement_tracker.schemas.schemas import (
    Application, ApplicationStatus, Company, StatusCategory, Student
)
from placement_tracker.services.aggregator import (
    ALL_STATUSES,
    applications_per_company,
    check_statuses,
    count_by_status,
    department_share,
    flatten_applications,
    is_placed,
    placement_rate,
    placements_by_department,
    recent_applications,
    status_breakdown,
)


def make_application(app_id, status, student_id="s1", company="Acme"):
    return Application(
        id=app_id,
        student_id=student_id,
        company=company,
        position="Engineer",
        application_date=date(2024, 1, 10),
        status=status,
    )


def make_student(student_id, department, statuses, name=None):
    return Student(
        id=student_id,
        name=name or f"Student {student_id}",
        email=f"{student_id}@example.com",
        roll_number=f"R{student_id}",
        department=department,
        cgpa=8.0,
        applications=[
            make_application(f"{student_id}-{i}", status, student_id=student_id)
            for i, status in enumerate(statuses)
        ],
    )


SIX_APPS = [
    make_application("1", "applied"),
    make_application("2", "shortlisted"),
    make_application("3", "interview-scheduled"),
    make_application("4", "selected"),
    make_application("5", "rejected"),
    make_application("6", "shortlisted"),
]


def test_count_by_status():
    """Single statuses, the in-progress category, and the sum property."""
    print("\n[1] Testing count_by_status...")

    assert count_by_status(SIX_APPS, ApplicationStatus.shortlisted) == 2
    assert count_by_status(SIX_APPS, "selected") == 1
    assert count_by_status([], "applied") == 0

    # shortlisted + interview-scheduled
    in_progress = count_by_status(SIX_APPS, StatusCategory.in_progress)
    print(f"    In progress: {in_progress} (expected: 3)")
    assert in_progress == 3
    assert count_by_status(SIX_APPS, "in-progress") == 3

    total = sum(count_by_status(SIX_APPS, status) for status in ALL_STATUSES)
    assert total == len(SIX_APPS), "Every valid application falls in exactly one status"

    print("    ✅ count_by_status tests passed!")


def test_status_breakdown():
    """Parallel counts in request order, zeros included."""
    print("\n[2] Testing status_breakdown...")

    statuses = ["applied", "shortlisted", "interview-scheduled", "selected", "rejected"]
    counts = status_breakdown(SIX_APPS, statuses)
    print(f"    Breakdown: {counts} (expected: [1, 2, 1, 1, 1])")
    assert counts == [1, 2, 1, 1, 1]

    only_applied = [make_application("1", "applied")]
    assert status_breakdown(only_applied, ["rejected", "applied", "selected"]) == [0, 1, 0]
    assert status_breakdown([], statuses) == [0, 0, 0, 0, 0]
    assert status_breakdown(SIX_APPS, []) == []

    # Generators are consumed once but every status still gets counted
    counts = status_breakdown((app for app in SIX_APPS), statuses)
    assert counts == [1, 2, 1, 1, 1]

    print("    ✅ status_breakdown tests passed!")


def test_flatten_applications():
    """Join with student name/roll, preserving student then application order."""
    print("\n[3] Testing flatten_applications...")

    students = [
        make_student("a", "CS", ["applied", "selected"], name="Ann"),
        make_student("b", "ME", [], name="Ben"),
        make_student("c", "EE", ["rejected"], name="Cal"),
    ]
    records = flatten_applications(students)

    assert len(records) == sum(len(s.applications) for s in students)
    assert [r.id for r in records] == ["a-0", "a-1", "c-0"]
    assert records[0].student_name == "Ann"
    assert records[0].student_roll == "Ra"
    assert records[2].student_name == "Cal"
    assert records[1].status == ApplicationStatus.selected
    assert flatten_applications([]) == []

    # Inputs untouched
    assert not hasattr(students[0].applications[0], "student_name")

    print("    ✅ flatten_applications tests passed!")


def test_placements_by_department():
    """Only departments with placed students; insertion order of first placement."""
    print("\n[4] Testing placements_by_department...")

    students = [
        make_student("1", "CS", ["selected"]),
        make_student("2", "CS", ["applied"]),
        make_student("3", "ME", ["selected"]),
    ]
    placements = placements_by_department(students)
    print(f"    Placements: {placements} (expected: {{'CS': 1, 'ME': 1}})")
    assert placements == {"CS": 1, "ME": 1}

    students = [
        make_student("1", "EE", ["rejected"]),
        make_student("2", "ME", ["applied", "selected"]),
        make_student("3", "CS", ["selected", "selected"]),
        make_student("4", "ME", ["selected"]),
    ]
    placements = placements_by_department(students)
    assert list(placements) == ["ME", "CS"]
    assert placements == {"ME": 2, "CS": 1}
    assert 0 not in placements.values()
    assert placements_by_department([]) == {}

    print("    ✅ placements_by_department tests passed!")


def test_placement_helpers():
    """is_placed, placement_rate, department_share, applications_per_company."""
    print("\n[5] Testing placement helpers...")

    placed = make_student("1", "CS", ["rejected", "selected"])
    unplaced = make_student("2", "CS", ["shortlisted"])
    assert is_placed(placed)
    assert not is_placed(unplaced)
    assert not is_placed(make_student("3", "CS", []))

    assert placement_rate([placed, unplaced]) == 0.5
    assert placement_rate([]) == 0.0

    assert department_share({"CS": 1}, 3) == {"CS": 33.33}
    assert department_share({}, 0) == {}

    companies = [
        Company(id="1", name="Acme", description="", package="10 LPA", deadline=date(2024, 2, 1)),
        Company(id="2", name="Globex", description="", package="12 LPA", deadline=date(2024, 2, 1)),
    ]
    apps = [make_application("1", "applied"), make_application("2", "applied", company="Initech")]
    assert applications_per_company(apps, companies) == {"Acme": 1, "Globex": 0}

    print("    ✅ Placement helper tests passed!")


def test_recent_applications():
    """Positional prefix, not a date sort."""
    print("\n[6] Testing recent_applications...")

    assert recent_applications(SIX_APPS, 3) == SIX_APPS[:3]
    assert recent_applications(SIX_APPS, 10) == SIX_APPS
    assert recent_applications(SIX_APPS, 0) == []
    assert recent_applications([], 5) == []

    older_first = [
        make_application("old", "applied").model_copy(update={"application_date": date(2023, 1, 1)}),
        make_application("new", "applied").model_copy(update={"application_date": date(2024, 6, 1)}),
    ]
    assert [a.id for a in recent_applications(older_first, 1)] == ["old"]

    print("    ✅ recent_applications tests passed!")


def test_invalid_status():
    """Unknown statuses fail fast, both as argument and as record field."""
    print("\n[7] Testing invalid statuses...")

    try:
        count_by_status(SIX_APPS, "offered")
    except InvalidStatusError as e:
        assert e.status == "offered"
    else:
        raise AssertionError("Unknown status argument should raise")

    # model_construct skips validation, like data loaded from an unchecked source
    bad = Application.model_construct(
        id="x", student_id="s1", company="Acme", position="Engineer",
        application_date=date(2024, 1, 1), status="offered",
    )
    for call in (
        lambda: count_by_status([bad], "applied"),
        lambda: check_statuses(SIX_APPS + [bad]),
        lambda: status_breakdown([bad], ["applied"]),
    ):
        try:
            call()
        except InvalidStatusError as e:
            assert e.application_id == "x"
        else:
            raise AssertionError("Invalid record status should raise")

    check_statuses(SIX_APPS)

    print("    ✅ Invalid status tests passed!")


def test_dangling_reference():
    """Strict mode raises, lenient mode skips the application."""
    print("\n[8] Testing dangling student references...")

    student = Student(
        id="s1", name="Ann", email="ann@example.com", roll_number="R1",
        department="CS", cgpa=7.5,
        applications=[
            make_application("ok", "applied", student_id="s1"),
            make_application("ghost", "applied", student_id="s404"),
        ],
    )

    try:
        flatten_applications([student])
    except DanglingReferenceError as e:
        assert e.application_id == "ghost"
        assert e.student_id == "s404"
    else:
        raise AssertionError("Dangling reference should raise in strict mode")

    records = flatten_applications([student], strict=False)
    assert [r.id for r in records] == ["ok"]

    # A selected application with a dangling reference does not place its owner
    orphan_pick = Student(
        id="s2", name="Bo", email="bo@example.com", roll_number="R2",
        department="EE", cgpa=8.0,
        applications=[make_application("picked", "selected", student_id="s404")],
    )
    assert placements_by_department([orphan_pick], strict=False) == {}
    assert placement_rate([orphan_pick], strict=False) == 0.0
    assert not is_placed(orphan_pick, {"s2"}, strict=False)
    assert is_placed(orphan_pick), "Without known ids every owned application counts"

    for call in (
        lambda: placements_by_department([orphan_pick]),
        lambda: placement_rate([orphan_pick]),
    ):
        try:
            call()
        except DanglingReferenceError as e:
            assert e.application_id == "picked"
        else:
            raise AssertionError("Strict placement helpers should raise on a dangling reference")

    print("    ✅ Dangling reference tests passed!")


def main():
    print("=" * 60)
    print("AGGREGATOR TEST")
    print("=" * 60)

    try:
        test_count_by_status()
        test_status_breakdown()
        test_flatten_applications()
        test_placements_by_department()
        test_placement_helpers()
        test_recent_applications()
        test_invalid_status()
        test_dangling_reference()

        print("\n" + "=" * 60)
        print("✅ ALL AGGREGATOR TESTS PASSED!")
        print("=" * 60)

    except Exception as e:
        print(f"\n❌ Test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
