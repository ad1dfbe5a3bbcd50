"""
Student Routes

GET /students/{student_id}/dashboard - Stat tiles, recent applications, upcoming interviews
GET /students/{student_id}/applications - Own applications with search/status filter
GET /students/{student_id}/interviews - Own interviews
GET /students/{student_id}/companies - Companies to apply to, with search
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from placement_tracker.api.dependencies import status_filter
from placement_tracker.core.config import Settings, get_settings
from placement_tracker.core.exceptions import RecordNotFoundError
from placement_tracker.db.memory import InMemoryRecordStore, get_record_store
from placement_tracker.schemas.schemas import (
    ApplicationRecord, Company, ErrorResponse, Interview, Student, StudentDashboardResponse
)
from placement_tracker.services.aggregator import flatten_applications
from placement_tracker.services.dashboard_service import build_student_dashboard
from placement_tracker.services.search_service import search_applications, search_companies

router = APIRouter(
    prefix="/students",
    tags=["Students"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


def _get_student_or_404(store: InMemoryRecordStore, student_id: str) -> Student:
    try:
        return store.get_student(student_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Student not found")


@router.get("/{student_id}/dashboard", response_model=StudentDashboardResponse)
async def get_dashboard(
    student_id: str,
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Overview tab of the student dashboard."""
    student = _get_student_or_404(store, student_id)
    return build_student_dashboard(student, recent_limit=settings.student_recent_limit)


@router.get("/{student_id}/applications", response_model=List[ApplicationRecord])
async def get_applications(
    student_id: str,
    search: Optional[str] = Query(None, description="Company, position, name or roll number"),
    status: Optional[str] = Depends(status_filter),
    store: InMemoryRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """All applications of one student, optionally filtered."""
    student = _get_student_or_404(store, student_id)
    records = flatten_applications([student], strict=settings.strict_references)
    return search_applications(records, search, status=status)


@router.get("/{student_id}/interviews", response_model=List[Interview])
async def get_interviews(student_id: str, store: InMemoryRecordStore = Depends(get_record_store)):
    """Upcoming interviews in the order they were scheduled on record."""
    student = _get_student_or_404(store, student_id)
    return list(student.interviews)


@router.get("/{student_id}/companies", response_model=List[Company])
async def get_companies(
    student_id: str,
    search: Optional[str] = Query(None, description="Name, description or position"),
    store: InMemoryRecordStore = Depends(get_record_store),
):
    """Companies the student can apply to."""
    _get_student_or_404(store, student_id)
    return search_companies(store.list_companies(), search)
