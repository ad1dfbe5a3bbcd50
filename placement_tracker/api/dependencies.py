"""
Shared FastAPI dependencies for query parameters.
"""

from typing import Optional

from fastapi import HTTPException, Query

from placement_tracker.core.exceptions import InvalidStatusError
from placement_tracker.services.aggregator import resolve_status


def status_filter(
    status: Optional[str] = Query(None, description="Application status or 'in-progress'")
) -> Optional[str]:
    """
    FastAPI dependency - validate the optional ?status= filter.

    Usage:
        @router.get("/applications")
        async def list_applications(status: Optional[str] = Depends(status_filter)):
            ...
    """
    if status is None:
        return None
    try:
        resolve_status(status)
    except InvalidStatusError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return status
