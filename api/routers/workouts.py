"""
Workouts router for scheduled-workout completion statistics.
"""
from datetime import date
from typing import Tuple

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_date_range, get_workout_performance_service
from api.schemas import WorkoutPerformanceResponse
from backend.core.workout_performance import WorkoutPerformanceService

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("/performance", response_model=WorkoutPerformanceResponse)
def get_workout_performance(
    date_range: Tuple[date, date] = Depends(get_date_range),
    owner: str = Depends(get_current_user),
    service: WorkoutPerformanceService = Depends(get_workout_performance_service),
) -> WorkoutPerformanceResponse:
    """
    Get completion rate and average RPE per workout.

    Workouts are ordered by number of scheduled sessions, most first.
    """
    start_date, end_date = date_range
    result = service.get_performance(owner, start_date, end_date)
    return WorkoutPerformanceResponse.model_validate(result)
