"""
Athlete profile and urgency schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from backend.core import rating_bands
from backend.core.rating_bands import Band
from backend.core.wellness_urgency import FlagCategory, FlagType, UrgencyLevel


class ProfileMetricsResponse(BaseModel):
    """Workout completion and sleep summary for one athlete."""
    model_config = ConfigDict(from_attributes=True)

    user_name: str
    total_workouts: int
    completed_workouts: int
    workout_completion: float
    sleep_average: float
    sleep_days_reported: int

    @computed_field
    @property
    def completion_band(self) -> Band:
        return rating_bands.rate_band(self.workout_completion)

    @computed_field
    @property
    def sleep_band(self) -> Optional[Band]:
        if self.sleep_days_reported == 0:
            return None
        return rating_bands.sleep_band(self.sleep_average)


class UrgencyFlagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: FlagType
    category: FlagCategory
    message: str
    average: Optional[float] = None
    days_reported: Optional[int] = None


class AthleteUrgencyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    owner: str
    name: str
    flags: List[UrgencyFlagResponse] = Field(default_factory=list)
    urgency_score: int
    urgency_level: UrgencyLevel
    last_workout: Optional[datetime] = None


class UrgencyListResponse(BaseModel):
    athletes: List[AthleteUrgencyResponse]
    total: int
