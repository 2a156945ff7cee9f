"""
Calendar session model and derived event states.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EventState(str, Enum):
    """Display state of a scheduled session."""

    COMPLETED_DELOAD = "completed-deload"
    PENDING_DELOAD = "pending-deload"
    COMPLETED = "completed"
    TODAY_PENDING = "today-pending"
    MISSED = "missed"
    FUTURE_PENDING = "future-pending"


class EventColor(BaseModel):
    """Background/text color pair for a calendar event."""

    bg: str
    text: str


class CalendarSession(BaseModel):
    """A workout scheduled on an athlete's calendar."""

    session_id: int
    owner: str
    workout_id: Optional[int] = None
    workout_name: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    completed: bool = False
    rpe: Optional[int] = Field(default=None, ge=1, le=10)
    deload: bool = False
    deload_percentage: Optional[int] = None
