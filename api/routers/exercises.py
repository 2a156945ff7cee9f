"""
Exercises router for per-exercise progress and hand imbalance.
"""
from datetime import date
from typing import Tuple

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_date_range, get_exercise_performance_service
from api.schemas import ExercisePerformanceResponse
from backend.core.exercise_performance import ExercisePerformanceService

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("/performance", response_model=ExercisePerformanceResponse)
def get_exercise_performance(
    date_range: Tuple[date, date] = Depends(get_date_range),
    owner: str = Depends(get_current_user),
    service: ExercisePerformanceService = Depends(get_exercise_performance_service),
) -> ExercisePerformanceResponse:
    """
    Get progress per exercise and hand side over the range.

    Single-hand exercises logged with both hands include a left/right
    imbalance assessment.
    """
    start_date, end_date = date_range
    result = service.get_performance(owner, start_date, end_date)
    return ExercisePerformanceResponse.model_validate(result)
