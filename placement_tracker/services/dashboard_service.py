"""
Dashboard Service

Composes aggregator output into the two role dashboards:
- Student: own stat tiles, recent applications, upcoming interviews
- TPO: institution-wide tiles, placements by department, status breakdown,
  recent applications across all students

Display labels live here. The aggregator only returns raw values.
"""

import logging
from typing import Dict, List, Sequence

from placement_tracker.schemas.schemas import (
    ApplicationRecord,
    ApplicationStatus,
    Company,
    CompanyCard,
    DepartmentPlacement,
    StatTile,
    StatusCategory,
    StatusCount,
    Student,
    StudentDashboardResponse,
    StudentRow,
    StudentSummary,
    TPODashboardResponse,
)
from placement_tracker.services.aggregator import (
    ALL_STATUSES,
    applications_per_company,
    count_by_status,
    department_share,
    flatten_applications,
    placement_rate,
    placements_by_department,
    recent_applications,
    referenced_applications,
    status_breakdown,
)

logger = logging.getLogger(__name__)

STATUS_LABELS: Dict[ApplicationStatus, str] = {
    ApplicationStatus.applied: "Applied",
    ApplicationStatus.shortlisted: "Shortlisted",
    ApplicationStatus.interview_scheduled: "Interview Scheduled",
    ApplicationStatus.selected: "Selected",
    ApplicationStatus.rejected: "Rejected",
}


def build_student_dashboard(student: Student, recent_limit: int = 3) -> StudentDashboardResponse:
    applications = student.applications

    stats = [
        StatTile(label="Applications", value=len(applications)),
        # Shortlisted and interview-scheduled share one tile
        StatTile(label="Shortlisted", value=count_by_status(applications, StatusCategory.in_progress)),
        StatTile(label="Interviews", value=len(student.interviews)),
        StatTile(label="Selected", value=count_by_status(applications, ApplicationStatus.selected)),
    ]

    return StudentDashboardResponse(
        student=StudentSummary(
            id=student.id,
            name=student.name,
            email=student.email,
            roll_number=student.roll_number,
            department=student.department,
            cgpa=student.cgpa,
        ),
        stats=stats,
        recent_applications=recent_applications(applications, recent_limit),
        upcoming_interviews=list(student.interviews),
    )


def build_tpo_dashboard(
    students: Sequence[Student],
    companies: Sequence[Company],
    recent_limit: int = 5,
    strict: bool = True,
) -> TPODashboardResponse:
    records = flatten_applications(students, strict=strict)

    stats = [
        StatTile(label="Total Students", value=len(students)),
        StatTile(label="Companies", value=len(companies)),
        StatTile(label="Applications", value=len(records)),
        StatTile(label="Placements", value=count_by_status(records, ApplicationStatus.selected)),
    ]

    placements = placements_by_department(students, strict=strict)
    shares = department_share(placements, len(students))
    by_department = [
        DepartmentPlacement(department=department, placed=count, share_pct=shares[department])
        for department, count in placements.items()
    ]

    breakdown = [
        StatusCount(status=status, label=STATUS_LABELS[status], count=count)
        for status, count in zip(ALL_STATUSES, status_breakdown(records, ALL_STATUSES))
    ]

    logger.debug(
        "TPO dashboard: %d students, %d applications, %d departments with placements",
        len(students),
        len(records),
        len(by_department),
    )

    return TPODashboardResponse(
        stats=stats,
        placements_by_department=by_department,
        status_breakdown=breakdown,
        recent_applications=recent_applications(records, recent_limit),
        placement_rate=placement_rate(students, strict=strict),
    )


def build_student_rows(students: Sequence[Student], strict: bool = True) -> List[StudentRow]:
    """One row per student for the TPO students table."""
    known_ids = {student.id for student in students}
    rows = []
    for student in students:
        applications = referenced_applications(student, known_ids, strict)
        rows.append(
            StudentRow(
                id=student.id,
                name=student.name,
                roll_number=student.roll_number,
                department=student.department,
                cgpa=student.cgpa,
                applications=len(applications),
                is_placed=any(a.status == ApplicationStatus.selected for a in applications),
            )
        )
    return rows


def build_company_cards(companies: Sequence[Company], records: Sequence[ApplicationRecord]) -> List[CompanyCard]:
    """One card per company with the number of applications it received."""
    counts = applications_per_company(records, companies)
    return [CompanyCard(company=company, applications=counts[company.name]) for company in companies]
