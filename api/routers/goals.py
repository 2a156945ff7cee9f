"""
Goals router for quarterly grade goal progress.

Boulder, Board and Lead goals are tracked separately; a send only counts
toward the goal table of its own climb type.
"""
from typing import List

from fastapi import APIRouter, Depends, Path

from api.deps import get_current_user, get_goals_progress_service
from api.schemas import GoalProgressResponse, QuarterProgressResponse
from backend.core.goals_progress import GoalsProgressService
from domain.models import ClimbType

router = APIRouter(
    prefix="/goals",
    tags=["Goals"],
)


@router.get("/{year}/{quarter}", response_model=QuarterProgressResponse)
def get_quarter_progress(
    year: int = Path(..., ge=2000, le=2100, description="Calendar year"),
    quarter: int = Path(..., ge=1, le=4, description="Quarter (1-4)"),
    owner: str = Depends(get_current_user),
    service: GoalsProgressService = Depends(get_goals_progress_service),
) -> QuarterProgressResponse:
    """Get progress of all three goal tables for a quarter."""
    result = service.get_quarter_summary(owner, year, quarter)
    return QuarterProgressResponse.model_validate(result)


@router.get("/{year}/{quarter}/{climb_type}", response_model=List[GoalProgressResponse])
def get_climb_type_progress(
    year: int = Path(..., ge=2000, le=2100, description="Calendar year"),
    quarter: int = Path(..., ge=1, le=4, description="Quarter (1-4)"),
    climb_type: ClimbType = Path(..., description="Boulder, Board or Lead"),
    owner: str = Depends(get_current_user),
    service: GoalsProgressService = Depends(get_goals_progress_service),
) -> List[GoalProgressResponse]:
    """
    Get progress toward one climb type's goals, hardest grade first.

    Grades with a zero target are omitted. Returns an empty list when no
    goals are set for the quarter.
    """
    progress = service.get_progress(owner, year, quarter, climb_type)
    return [GoalProgressResponse.model_validate(p) for p in progress]
