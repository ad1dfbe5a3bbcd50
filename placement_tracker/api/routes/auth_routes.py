"""
Authentication Routes

POST /auth/login - Accept any credentials and return a user for the chosen role

There is no password check and no token. The returned user only tells the
client which dashboard to open.
"""

import logging
import re
import uuid

from fastapi import APIRouter, Depends

from placement_tracker.db.memory import InMemoryRecordStore, get_record_store
from placement_tracker.schemas.schemas import LoginRequest, User, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def display_name_from_email(email: str) -> str:
    """'john.doe@example.com' -> 'John Doe'. Blank emails give 'User'."""
    local_part = email.split("@", 1)[0]
    words = [word for word in re.split(r"[._\-+]+", local_part) if word]
    return " ".join(word.capitalize() for word in words) or "User"


@router.post("/login", response_model=User)
async def login(request: LoginRequest, store: InMemoryRecordStore = Depends(get_record_store)):
    """
    Fabricate a user for the requested role.

    Students whose email is on record get their stored id, department and
    roll number so the dashboard links resolve.
    """
    if request.role == UserRole.student:
        for student in store.list_students():
            if student.email.lower() == request.email.strip().lower():
                logger.info("Login as existing student %s", student.id)
                return User(
                    id=student.id,
                    name=student.name,
                    email=student.email,
                    role=UserRole.student,
                    department=student.department,
                    roll_number=student.roll_number,
                )

    logger.info("Login as new %s user", request.role.value)
    return User(
        id=uuid.uuid4().hex,
        name=display_name_from_email(request.email),
        email=request.email,
        role=request.role,
    )
