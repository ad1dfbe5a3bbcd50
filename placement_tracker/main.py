"""
Placement Tracker - Main Application

FastAPI backend with:
- Read-only in-memory record store (students, applications, interviews, companies)
- Student dashboard: own applications, interviews, available companies
- TPO dashboard: placement statistics across all students

Run: uvicorn placement_tracker.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from placement_tracker.api.routes import api_router
from placement_tracker.core.config import get_settings
from placement_tracker.core.exceptions import PlacementDataError
from placement_tracker.core.logging_config import setup_logging
from placement_tracker.db.memory import get_record_store
from placement_tracker.schemas.schemas import ErrorResponse

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    Placement tracking for students and the Training & Placement Office.

    ## Features
    - **Login**: Pick a role; any credentials are accepted
    - **Students**: Application stats, recent applications, upcoming interviews, companies
    - **TPO**: Placements by department, status breakdown, students/applications/companies tables
    - **Search**: Case-insensitive search and status filters on every list
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(PlacementDataError)
async def placement_data_error_handler(request: Request, exc: PlacementDataError):
    """Malformed records in the store are a server-side fault."""
    logger.error("Bad placement data on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content=ErrorResponse(detail=str(exc)).model_dump())


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the record store."""
    get_record_store()
    logger.info("%s started", settings.app_name)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with record counts."""
    store = get_record_store()
    return {
        "status": "healthy",
        "app": settings.app_name,
        "students": len(store.list_students()),
        "companies": len(store.list_companies()),
    }
