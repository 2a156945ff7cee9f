"""
Exercise log, wellness and athlete models.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class HandSide(str, Enum):
    """Which hand an exercise set was performed with."""

    RIGHT = "Right"
    LEFT = "Left"
    BOTH = "Both"


class ExerciseLogEntry(BaseModel):
    """A completed exercise set joined with its exercise metadata."""

    exercise_id: int
    exercise_name: str
    category: str = "Other"
    is_single_hand: bool = False
    is_duration: bool = False
    hand_side: Optional[HandSide] = None
    weight_kg: Optional[float] = None
    reps_done: Optional[int] = None
    duration_sec: Optional[float] = None
    rpe: Optional[int] = None
    created_at: Optional[datetime] = None


class WellnessEntry(BaseModel):
    """One day of self-reported wellness."""

    owner: str
    entry_date: date
    sleep_hours: Optional[float] = Field(default=None, ge=0)
    vitality_level: Optional[float] = None
    pain_level: Optional[float] = None


class UserRole(str, Enum):
    """Account role from the Users table."""

    ADMIN = "admin"
    COACH = "coach"
    USER = "user"


class AthleteRef(BaseModel):
    """Athlete identity as stored in the Users table."""

    owner: str
    name: str
    role: UserRole = UserRole.USER
