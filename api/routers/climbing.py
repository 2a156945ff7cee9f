"""
Climbing router for grade histograms and per-grade performance.

This router provides endpoints for:
- Sends per grade (Boulder and Board side by side, Lead separately)
- Success rate and attempt statistics per grade and climb type
"""
from datetime import date
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_climbing_performance_service,
    get_current_user,
    get_date_range,
    get_histogram_service,
)
from api.schemas import ClimbingHistogramsResponse, ClimbingPerformanceResponse
from backend.core.climbing_performance import ClimbingPerformanceService
from backend.core.grade_histogram import HistogramFilters, HistogramService
from domain.models import ClimbType

router = APIRouter(
    prefix="/climbing",
    tags=["Climbing"],
)


@router.get("/histogram", response_model=ClimbingHistogramsResponse)
def get_grade_histogram(
    start_date: Optional[date] = Query(None, description="First day (inclusive)"),
    end_date: Optional[date] = Query(None, description="Last day (inclusive)"),
    climb_type: Optional[ClimbType] = Query(None, description="Only this climb type"),
    min_grade_id: Optional[int] = Query(None, ge=0, description="Lowest grade id"),
    max_grade_id: Optional[int] = Query(None, ge=0, description="Highest grade id"),
    owner: str = Depends(get_current_user),
    service: HistogramService = Depends(get_histogram_service),
) -> ClimbingHistogramsResponse:
    """
    Get send counts per grade.

    Boulder and Board share the boulder grade scale and are returned as one
    split histogram; Lead has its own. Grades with no logs are omitted.
    """
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must be on or before end_date")
    if min_grade_id is not None and max_grade_id is not None and min_grade_id > max_grade_id:
        raise HTTPException(status_code=400, detail="min_grade_id must not exceed max_grade_id")

    result = service.get_histograms(owner, HistogramFilters(
        start_date=start_date,
        end_date=end_date,
        climb_type=climb_type,
        min_grade_id=min_grade_id,
        max_grade_id=max_grade_id,
    ))
    return ClimbingHistogramsResponse.model_validate(result)


@router.get("/performance", response_model=ClimbingPerformanceResponse)
def get_climbing_performance(
    date_range: Tuple[date, date] = Depends(get_date_range),
    owner: str = Depends(get_current_user),
    service: ClimbingPerformanceService = Depends(get_climbing_performance_service),
) -> ClimbingPerformanceResponse:
    """
    Get success rate and attempt statistics per grade for each climb type.

    A climb type with no logs in the range is returned as null.
    """
    start_date, end_date = date_range
    result = service.get_performance(owner, start_date, end_date)
    return ClimbingPerformanceResponse.model_validate(result)
