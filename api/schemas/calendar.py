"""
Calendar request and response schemas.

Schemas for:
- CalendarEventResponse: a session with its derived display state
- DeloadRequest / DeloadResponse: bulk deload updates over a date range
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from domain.models import EventColor, EventState


class CalendarEventResponse(BaseModel):
    """A scheduled session as shown on the calendar."""
    session_id: int
    workout_id: Optional[int] = None
    workout_name: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    completed: bool
    rpe: Optional[int] = None
    deload: bool
    deload_percentage: Optional[int] = None
    state: EventState
    color: EventColor


class DeloadRequest(BaseModel):
    """Request body for POST /calendar/deload."""
    start_date: date = Field(..., description="First day of the deload window")
    end_date: date = Field(..., description="Last day of the deload window (inclusive)")
    percentage: int = Field(
        ...,
        ge=1,
        le=100,
        description="Training load reduction in percent",
    )


class DeloadResponse(BaseModel):
    success: bool
    error: Optional[str] = None
