"""
TPO (Training & Placement Office) Routes

GET /tpo/dashboard - Institution-wide tiles, department placements, status breakdown
GET /tpo/students - Students table with search
GET /tpo/applications - All applications across students with search/status filter
GET /tpo/companies - Company cards with application counts
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from placement_tracker.api.dependencies import status_filter
from placement_tracker.core.config import Settings, get_settings
from placement_tracker.db.memory import InMemoryRecordStore, get_record_store
from placement_tracker.schemas.schemas import (
    ApplicationRecord, CompanyCard, ErrorResponse, StudentRow, TPODashboardResponse
)
from placement_tracker.services.aggregator import flatten_applications
from placement_tracker.services.dashboard_service import (
    build_company_cards, build_student_rows, build_tpo_dashboard
)
from placement_tracker.services.search_service import (
    search_applications, search_companies, search_students
)

router = APIRouter(prefix="/tpo", tags=["TPO"], responses={500: {"model": ErrorResponse}})


@router.get("/dashboard", response_model=TPODashboardResponse)
async def get_dashboard(
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Overview tab of the TPO dashboard."""
    return build_tpo_dashboard(
        store.list_students(),
        store.list_companies(),
        recent_limit=settings.tpo_recent_limit,
        strict=settings.strict_references,
    )


@router.get("/students", response_model=List[StudentRow])
async def get_students(
    search: Optional[str] = Query(None, description="Name, email, roll number, department or skill"),
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Students table with application count and placed flag."""
    students = store.list_students()
    # References are checked against every student, not just the search hits
    rows = build_student_rows(students, strict=settings.strict_references)
    matched = {student.id for student in search_students(students, search)}
    return [row for row in rows if row.id in matched]


@router.get("/applications", response_model=List[ApplicationRecord])
async def get_applications(
    search: Optional[str] = Query(None, description="Company, position, student name or roll number"),
    status: Optional[str] = Depends(status_filter),
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Every application joined with its student."""
    records = flatten_applications(store.list_students(), strict=settings.strict_references)
    return search_applications(records, search, status=status)


@router.get("/companies", response_model=List[CompanyCard])
async def get_companies(
    search: Optional[str] = Query(None, description="Name, description or position"),
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Company cards. Application counts cover all students, not just search hits."""
    records = flatten_applications(store.list_students(), strict=settings.strict_references)
    return build_company_cards(search_companies(store.list_companies(), search), records)
