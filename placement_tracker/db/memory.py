"""
In-memory record store.

Read-only: records are frozen and held in tuples, so one store instance can
be shared by every request without locking.
"""

import logging
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from placement_tracker.core.exceptions import RecordNotFoundError
from placement_tracker.db.fixtures import build_companies, build_students
from placement_tracker.schemas.schemas import Application, Company, Interview, Student

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """
    Supplies Student and Company collections to the aggregation layer.

    Usage:
        store = get_record_store()
        students = store.list_students()
    """

    def __init__(self, students: Iterable[Student], companies: Iterable[Company]):
        self._students: Tuple[Student, ...] = tuple(students)
        self._companies: Tuple[Company, ...] = tuple(companies)

    def list_students(self) -> List[Student]:
        return list(self._students)

    def get_student(self, student_id: str) -> Student:
        for student in self._students:
            if student.id == student_id:
                return student
        raise RecordNotFoundError("Student", student_id)

    def list_companies(self) -> List[Company]:
        return list(self._companies)

    def list_applications(self) -> List[Application]:
        """All applications, student order then application order."""
        return [
            application
            for student in self._students
            for application in student.applications
        ]

    def list_interviews(self, student_id: Optional[str] = None) -> List[Interview]:
        """Interviews across all students, or for one student if `student_id` is given."""
        if student_id is not None:
            return list(self.get_student(student_id).interviews)
        return [
            interview
            for student in self._students
            for interview in student.interviews
        ]


@lru_cache()
def get_record_store() -> InMemoryRecordStore:
    """Singleton store seeded with the fixture data."""
    store = InMemoryRecordStore(build_students(), build_companies())
    logger.info(
        "Record store loaded: %d students, %d companies",
        len(store.list_students()),
        len(store.list_companies()),
    )
    return store
