"""
Athletes router for profile metrics and coach urgency triage.
"""
import logging
from datetime import date
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_athlete_profile_service,
    get_current_user,
    get_date_range,
    get_urgency_service,
)
from api.schemas import AthleteUrgencyResponse, ProfileMetricsResponse, UrgencyListResponse
from application.exceptions import PermissionDeniedError, RepositoryError
from backend.core.athlete_profile import AthleteProfileService
from backend.core.wellness_urgency import UrgencyService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/athletes",
    tags=["Athletes"],
)

MAX_URGENCY_ATHLETES = 200


@router.get("/me/profile", response_model=ProfileMetricsResponse)
def get_my_profile_metrics(
    date_range: Tuple[date, date] = Depends(get_date_range),
    owner: str = Depends(get_current_user),
    service: AthleteProfileService = Depends(get_athlete_profile_service),
) -> ProfileMetricsResponse:
    """Get workout completion and sleep average for the current athlete."""
    start_date, end_date = date_range

    try:
        metrics = service.get_metrics(owner, start_date, end_date)
    except RepositoryError as e:
        logger.exception(f"Failed to load profile metrics for {owner}")
        raise HTTPException(status_code=502, detail=f"Failed to load profile: {e}")

    if metrics is None:
        raise HTTPException(status_code=404, detail="Athlete not found")

    return ProfileMetricsResponse.model_validate(metrics)


@router.get("/urgency", response_model=UrgencyListResponse)
def get_athletes_by_urgency(
    owner: Optional[List[str]] = Query(None, description="Narrow to these athlete emails (repeatable)"),
    current_user: str = Depends(get_current_user),
    service: UrgencyService = Depends(get_urgency_service),
) -> UrgencyListResponse:
    """
    Rank the current coach's athletes so those needing attention come first.

    Admins triage every athlete and coaches their active trainees. Plain
    athletes get 403. Requested emails outside the roster are ignored.
    Athletes are flagged on the last 7 days of training and wellness.
    """
    requested = list(dict.fromkeys(o.strip() for o in owner or [] if o.strip()))
    if len(requested) > MAX_URGENCY_ATHLETES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {MAX_URGENCY_ATHLETES} athletes per request",
        )

    try:
        roster = service.roster_for(current_user)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except RepositoryError as e:
        logger.exception(f"Failed to load urgency roster for {current_user}")
        raise HTTPException(status_code=502, detail=f"Failed to load roster: {e}")

    if requested:
        allowed = set(roster)
        owners = [o for o in requested if o in allowed]
    else:
        owners = roster

    ranked = service.rank_athletes(owners)
    logger.debug(f"Urgency triage for {current_user}: {len(ranked)} athletes")
    return UrgencyListResponse(
        athletes=[AthleteUrgencyResponse.model_validate(a) for a in ranked],
        total=len(ranked),
    )
