"""
Search Service

Backs the search boxes on both dashboards. Case-insensitive substring
match; a blank term matches everything. Input order is preserved.
"""

from typing import Iterable, List, Optional

from placement_tracker.schemas.schemas import ApplicationRecord, Company, Student
from placement_tracker.services.aggregator import StatusLike, resolve_status, status_of


def _normalize(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def _matches(term: str, *fields: str) -> bool:
    return any(term in (field or "").lower() for field in fields)


def search_students(students: Iterable[Student], term: Optional[str]) -> List[Student]:
    """Match on name, email, roll number, department or any skill."""
    term = _normalize(term)
    if not term:
        return list(students)
    return [
        student for student in students
        if _matches(term, student.name, student.email, student.roll_number, student.department, *student.skills)
    ]


def search_applications(
    records: Iterable[ApplicationRecord],
    term: Optional[str],
    status: Optional[StatusLike] = None,
) -> List[ApplicationRecord]:
    """
    Match on company, position, student name or roll number.

    `status` narrows the result to one status or derived category.
    """
    term = _normalize(term)
    wanted = resolve_status(status) if status is not None else None

    results = []
    for record in records:
        if wanted is not None and status_of(record) not in wanted:
            continue
        if term and not _matches(term, record.company, record.position, record.student_name, record.student_roll):
            continue
        results.append(record)
    return results


def search_companies(companies: Iterable[Company], term: Optional[str]) -> List[Company]:
    """Match on name, description or any open position."""
    term = _normalize(term)
    if not term:
        return list(companies)
    return [
        company for company in companies
        if _matches(term, company.name, company.description, *company.positions)
    ]
