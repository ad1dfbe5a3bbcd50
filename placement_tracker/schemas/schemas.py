"""
Pydantic Schemas - Records and Response Validation

All records and API response schemas in one file for simplicity.
Records are frozen: the aggregation layer never mutates what it is given.
Fields are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    tpo = "tpo"


class ApplicationStatus(str, Enum):
    applied = "applied"
    shortlisted = "shortlisted"
    interview_scheduled = "interview-scheduled"
    selected = "selected"
    rejected = "rejected"


class StatusCategory(str, Enum):
    """Named unions of statuses, counted like a single status."""
    in_progress = "in-progress"


class InterviewType(str, Enum):
    technical = "technical"
    hr = "hr"
    group_discussion = "group-discussion"
    test = "test"


# ============================================================
# BASE
# ============================================================

class Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ============================================================
# DOMAIN RECORDS
# ============================================================

class Application(Record):
    id: str
    student_id: str
    company: str
    position: str
    application_date: date
    status: ApplicationStatus
    next_step: Optional[str] = None
    next_step_date: Optional[date] = None
    notes: Optional[str] = None


class ApplicationRecord(Application):
    """Application joined with the owning student's name and roll number."""
    student_name: str
    student_roll: str


class Interview(Record):
    id: str
    student_id: str
    company: str
    position: str
    type: InterviewType
    scheduled_date: datetime
    location: str
    instructions: Optional[str] = None


class Student(Record):
    id: str
    name: str
    email: str
    roll_number: str
    department: str
    cgpa: float = Field(..., ge=0, le=10)
    skills: List[str] = []
    resume: str = ""
    applications: List[Application] = []
    interviews: List[Interview] = []


class Company(Record):
    id: str
    name: str
    description: str
    positions: List[str] = []
    requirements: List[str] = []
    package: str
    deadline: date


class User(Record):
    id: str
    name: str
    email: str
    role: UserRole
    department: Optional[str] = None
    roll_number: Optional[str] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(Record):
    email: str = ""
    password: str = ""
    role: UserRole = UserRole.student


# ============================================================
# DASHBOARD SCHEMAS
# ============================================================

class StatTile(Record):
    label: str
    value: int


class DepartmentPlacement(Record):
    department: str
    placed: int
    share_pct: float


class StatusCount(Record):
    status: ApplicationStatus
    label: str
    count: int


class StudentSummary(Record):
    id: str
    name: str
    email: str
    roll_number: str
    department: str
    cgpa: float


class StudentDashboardResponse(Record):
    student: StudentSummary
    stats: List[StatTile]
    recent_applications: List[Application]
    upcoming_interviews: List[Interview]


class TPODashboardResponse(Record):
    stats: List[StatTile]
    placements_by_department: List[DepartmentPlacement]
    status_breakdown: List[StatusCount]
    recent_applications: List[ApplicationRecord]
    placement_rate: float


class StudentRow(Record):
    id: str
    name: str
    roll_number: str
    department: str
    cgpa: float
    applications: int
    is_placed: bool


class CompanyCard(Record):
    company: Company
    applications: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(Record):
    detail: str
