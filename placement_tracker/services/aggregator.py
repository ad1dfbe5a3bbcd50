"""
Placement Statistics Aggregator

PURPOSE:
Turn student and application records into the numbers the dashboards show:
counts by status, placements by department, status breakdowns and
recent-activity lists.

RULES:
- Pure functions. Inputs are never mutated and nothing is cached between calls.
- Raw values only (ints, floats, enums, records). Labels and percentages
  for display are built by the dashboard service.
- A student is "placed" iff at least one application is `selected`.
- "Recent" means the first N in the order given, not the newest by date.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from placement_tracker.core.exceptions import DanglingReferenceError, InvalidStatusError
from placement_tracker.schemas.schemas import (
    Application,
    ApplicationRecord,
    ApplicationStatus,
    Company,
    StatusCategory,
    Student,
)

logger = logging.getLogger(__name__)

StatusLike = Union[ApplicationStatus, StatusCategory, str]

# Canonical display order of statuses on the TPO dashboard
ALL_STATUSES: List[ApplicationStatus] = [
    ApplicationStatus.applied,
    ApplicationStatus.shortlisted,
    ApplicationStatus.interview_scheduled,
    ApplicationStatus.selected,
    ApplicationStatus.rejected,
]

STATUS_CATEGORIES: Dict[StatusCategory, frozenset] = {
    StatusCategory.in_progress: frozenset({
        ApplicationStatus.shortlisted,
        ApplicationStatus.interview_scheduled,
    }),
}


# ============================================================
# STATUS HELPERS
# ============================================================

def resolve_status(status: StatusLike) -> Set[ApplicationStatus]:
    """
    Expand a status or derived category into the set of concrete statuses it covers.

    Raises InvalidStatusError for anything that is neither.
    """
    try:
        return {ApplicationStatus(status)}
    except ValueError:
        pass
    try:
        return set(STATUS_CATEGORIES[StatusCategory(status)])
    except ValueError:
        raise InvalidStatusError(status) from None


def status_of(application: Application) -> ApplicationStatus:
    """Return the application's status, failing fast if it is not a known value."""
    try:
        return ApplicationStatus(application.status)
    except ValueError:
        raise InvalidStatusError(application.status, application.id) from None


def check_statuses(applications: Iterable[Application]) -> None:
    """Raise InvalidStatusError on the first application with an unknown status."""
    for application in applications:
        status_of(application)


# ============================================================
# COUNTS
# ============================================================

def count_by_status(applications: Iterable[Application], status: StatusLike) -> int:
    """
    Count applications whose status equals `status`.

    `status` may be a derived category such as StatusCategory.in_progress,
    in which case every member status is counted.
    """
    wanted = resolve_status(status)
    return sum(1 for application in applications if status_of(application) in wanted)


def status_breakdown(applications: Iterable[Application], statuses: Sequence[StatusLike]) -> List[int]:
    """
    One count per requested status, in the requested order.

    Statuses with no matching application still get a 0 entry.
    """
    applications = list(applications)
    return [count_by_status(applications, status) for status in statuses]


def referenced_applications(
    student: Student,
    known_ids: Optional[Set[str]],
    strict: bool = True,
) -> List[Application]:
    """
    The student's applications whose student_id is one of `known_ids`.

    `known_ids=None` disables the check. A dangling reference raises
    DanglingReferenceError when `strict`, otherwise it is skipped with a warning.
    """
    applications = []
    for application in student.applications:
        status_of(application)
        if known_ids is not None and application.student_id not in known_ids:
            if strict:
                raise DanglingReferenceError(application.id, application.student_id)
            logger.warning(
                "Skipping application %s: unknown student %s",
                application.id,
                application.student_id,
            )
            continue
        applications.append(application)
    return applications


def is_placed(student: Student, known_ids: Optional[Set[str]] = None, strict: bool = True) -> bool:
    return any(
        application.status == ApplicationStatus.selected
        for application in referenced_applications(student, known_ids, strict)
    )


def placements_by_department(students: Sequence[Student], strict: bool = True) -> Dict[str, int]:
    """
    Map department -> number of placed students.

    Departments without a placed student are left out. Keys appear in the
    order their first placed student is encountered. Dangling references are
    handled as in flatten_applications, so both agree on what counts.
    """
    known_ids = {student.id for student in students}
    placements: Dict[str, int] = {}
    for student in students:
        if is_placed(student, known_ids, strict):
            placements[student.department] = placements.get(student.department, 0) + 1
    return placements


def placement_rate(students: Sequence[Student], strict: bool = True) -> float:
    """Fraction of students that are placed. 0.0 for no students."""
    if not students:
        return 0.0
    known_ids = {student.id for student in students}
    placed = sum(1 for student in students if is_placed(student, known_ids, strict))
    return placed / len(students)


def department_share(placements: Dict[str, int], total_students: int) -> Dict[str, float]:
    """Placed count per department as a percentage of all students."""
    if total_students <= 0:
        return {department: 0.0 for department in placements}
    return {
        department: round(count / total_students * 100, 2)
        for department, count in placements.items()
    }


def applications_per_company(applications: Iterable[Application], companies: Iterable[Company]) -> Dict[str, int]:
    """Applications per company name, one entry per company (0 allowed), in company order."""
    counts = Counter(application.company for application in applications)
    return {company.name: counts.get(company.name, 0) for company in companies}


# ============================================================
# JOINS AND SLICES
# ============================================================

def flatten_applications(students: Sequence[Student], strict: bool = True) -> List[ApplicationRecord]:
    """
    Join every application with its owning student's name and roll number.

    Order is student order, then each student's application order.

    An application whose student_id matches none of `students` raises
    DanglingReferenceError when `strict`, otherwise it is skipped with a warning.
    """
    known_ids = {student.id for student in students}
    records: List[ApplicationRecord] = []

    for student in students:
        for application in referenced_applications(student, known_ids, strict):
            records.append(
                ApplicationRecord(
                    **application.model_dump(),
                    student_name=student.name,
                    student_roll=student.roll_number,
                )
            )

    logger.debug("Flattened %d applications from %d students", len(records), len(students))
    return records


def recent_applications(applications: Iterable[Application], n: int) -> List[Application]:
    """First `n` applications in the given order. No date sorting."""
    if n <= 0:
        return []
    return list(applications)[:n]
