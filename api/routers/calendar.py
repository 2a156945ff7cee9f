"""
Calendar router for event display states and deload windows.

This router provides endpoints for:
- Sessions in a range with their derived state and colors
- Marking a range of sessions as a deload, and clearing it
"""
import logging
from datetime import date
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_calendar_event_service,
    get_current_user,
    get_date_range,
    get_deload_service,
)
from api.schemas import CalendarEventResponse, DeloadRequest, DeloadResponse
from backend.core.calendar_events import CalendarEventService, DeloadService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/calendar",
    tags=["Calendar"],
)


def _validate_range(start_date: date, end_date: date) -> None:
    if start_date > end_date:
        raise HTTPException(
            status_code=400,
            detail="start_date must be on or before end_date",
        )


@router.get("/events", response_model=List[CalendarEventResponse])
def list_calendar_events(
    date_range: Tuple[date, date] = Depends(get_date_range),
    owner: str = Depends(get_current_user),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> List[CalendarEventResponse]:
    """
    Get sessions in the range, oldest first, with display state and colors.

    State is derived at request time: a deload session keeps its deload
    state even after its date has passed.
    """
    start_date, end_date = date_range
    events = service.list_events(owner, start_date, end_date)
    return [
        CalendarEventResponse(
            session_id=event.session.session_id,
            workout_id=event.session.workout_id,
            workout_name=event.session.workout_name,
            start_time=event.session.start_time,
            end_time=event.session.end_time,
            completed=event.session.completed,
            rpe=event.session.rpe,
            deload=event.session.deload,
            deload_percentage=event.session.deload_percentage,
            state=event.state,
            color=event.color,
        )
        for event in events
    ]


@router.post("/deload", response_model=DeloadResponse)
def apply_deload(
    request: DeloadRequest,
    owner: str = Depends(get_current_user),
    service: DeloadService = Depends(get_deload_service),
) -> DeloadResponse:
    """
    Mark every session from start_date through end_date as a deload.

    The percentage must be between 1 and 100 (422 otherwise).
    """
    _validate_range(request.start_date, request.end_date)

    result = service.apply_deload(owner, request.start_date, request.end_date, request.percentage)
    if not result.success:
        raise HTTPException(status_code=502, detail=f"Failed to apply deload: {result.error}")

    logger.info(
        f"Deload {request.percentage}% applied for {owner} "
        f"{request.start_date}..{request.end_date}"
    )
    return DeloadResponse(success=True)


@router.delete("/deload", response_model=DeloadResponse)
def clear_deload(
    start_date: date = Query(..., description="First day of the window"),
    end_date: date = Query(..., description="Last day of the window (inclusive)"),
    owner: str = Depends(get_current_user),
    service: DeloadService = Depends(get_deload_service),
) -> DeloadResponse:
    """Remove the deload flag and percentage from every session in the range."""
    _validate_range(start_date, end_date)

    result = service.clear_deload(owner, start_date, end_date)
    if not result.success:
        raise HTTPException(status_code=502, detail=f"Failed to clear deload: {result.error}")

    logger.info(f"Deload cleared for {owner} {start_date}..{end_date}")
    return DeloadResponse(success=True)
