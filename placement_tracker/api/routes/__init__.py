"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placement_tracker.api.routes.auth_routes import router as auth_router
from placement_tracker.api.routes.student_routes import router as student_router
from placement_tracker.api.routes.tpo_routes import router as tpo_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(student_router)
api_router.include_router(tpo_router)
