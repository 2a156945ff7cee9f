"""
FastAPI Dependency Providers for the training tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Service providers compose repositories into the analytics services

Usage in routers:
    from api.deps import get_current_user, get_climbing_performance_service

    @router.get("/performance")
    def performance(
        owner: str = Depends(get_current_user),
        service: ClimbingPerformanceService = Depends(get_climbing_performance_service),
    ):
        return service.get_performance(owner, start, end)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_climbing_repo] = lambda: FakeClimbingLogRepository()
"""

from datetime import date, timedelta
from functools import lru_cache
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, Query
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ClimbingLogRepository,
    CalendarRepository,
    GoalsRepository,
    ExerciseLogRepository,
    WellnessRepository,
    ProfileRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseClimbingLogRepository,
    SupabaseCalendarRepository,
    SupabaseGoalsRepository,
    SupabaseExerciseLogRepository,
    SupabaseWellnessRepository,
    SupabaseProfileRepository,
)

# Services
from backend.core.athlete_profile import AthleteProfileService
from backend.core.calendar_events import CalendarEventService, DeloadService
from backend.core.climbing_performance import ClimbingPerformanceService
from backend.core.exercise_performance import ExercisePerformanceService
from backend.core.goals_progress import GoalsProgressService
from backend.core.grade_histogram import HistogramService
from backend.core.wellness_urgency import UrgencyService
from backend.core.workout_performance import WorkoutPerformanceService

from backend.settings import Settings, get_settings as _get_settings

# Auth lives in backend.auth; re-exported so routers import from one place
from backend.auth import get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Query Parameter Providers
# =============================================================================

DEFAULT_RANGE_DAYS = 30


def get_date_range(
    start_date: Optional[date] = Query(None, description="First day (default: 30 days before end_date)"),
    end_date: Optional[date] = Query(None, description="Last day, inclusive (default: today)"),
) -> Tuple[date, date]:
    """
    Resolve an inclusive [start_date, end_date] range from query parameters.

    Raises:
        HTTPException: 400 if start_date is after end_date
    """
    end = end_date or date.today()
    start = start_date or end - timedelta(days=DEFAULT_RANGE_DAYS)
    if start > end:
        raise HTTPException(
            status_code=400,
            detail="start_date must be on or before end_date",
        )
    return start, end


# =============================================================================
# Repository Providers
# =============================================================================


def get_climbing_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ClimbingLogRepository:
    """
    Get ClimbingLogRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseClimbingLogRepository(client)


def get_calendar_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CalendarRepository:
    """Get CalendarRepository implementation."""
    return SupabaseCalendarRepository(client)


def get_goals_repo(
    client: Client = Depends(get_supabase_client_required),
) -> GoalsRepository:
    """Get GoalsRepository implementation."""
    return SupabaseGoalsRepository(client)


def get_exercise_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseLogRepository:
    """Get ExerciseLogRepository implementation."""
    return SupabaseExerciseLogRepository(client)


def get_wellness_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WellnessRepository:
    """Get WellnessRepository implementation."""
    return SupabaseWellnessRepository(client)


def get_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProfileRepository:
    """Get ProfileRepository implementation."""
    return SupabaseProfileRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_histogram_service(
    climbing_repo: ClimbingLogRepository = Depends(get_climbing_repo),
) -> HistogramService:
    return HistogramService(climbing_repo)


def get_climbing_performance_service(
    climbing_repo: ClimbingLogRepository = Depends(get_climbing_repo),
) -> ClimbingPerformanceService:
    return ClimbingPerformanceService(climbing_repo)


def get_workout_performance_service(
    calendar_repo: CalendarRepository = Depends(get_calendar_repo),
) -> WorkoutPerformanceService:
    return WorkoutPerformanceService(calendar_repo)


def get_exercise_performance_service(
    exercise_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> ExercisePerformanceService:
    return ExercisePerformanceService(exercise_repo)


def get_goals_progress_service(
    goals_repo: GoalsRepository = Depends(get_goals_repo),
    climbing_repo: ClimbingLogRepository = Depends(get_climbing_repo),
) -> GoalsProgressService:
    return GoalsProgressService(goals_repo, climbing_repo)


def get_calendar_event_service(
    calendar_repo: CalendarRepository = Depends(get_calendar_repo),
    settings: Settings = Depends(get_settings),
) -> CalendarEventService:
    return CalendarEventService(calendar_repo, settings.tzinfo)


def get_deload_service(
    calendar_repo: CalendarRepository = Depends(get_calendar_repo),
    settings: Settings = Depends(get_settings),
) -> DeloadService:
    """Deload service using the configured calendar timezone for day bounds."""
    return DeloadService(calendar_repo, settings.tzinfo)


def get_athlete_profile_service(
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    calendar_repo: CalendarRepository = Depends(get_calendar_repo),
    wellness_repo: WellnessRepository = Depends(get_wellness_repo),
) -> AthleteProfileService:
    return AthleteProfileService(profile_repo, calendar_repo, wellness_repo)


def get_urgency_service(
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    calendar_repo: CalendarRepository = Depends(get_calendar_repo),
    wellness_repo: WellnessRepository = Depends(get_wellness_repo),
) -> UrgencyService:
    return UrgencyService(profile_repo, calendar_repo, wellness_repo)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Query parameters
    "get_date_range",
    # Repositories
    "get_climbing_repo",
    "get_calendar_repo",
    "get_goals_repo",
    "get_exercise_log_repo",
    "get_wellness_repo",
    "get_profile_repo",
    # Services
    "get_histogram_service",
    "get_climbing_performance_service",
    "get_workout_performance_service",
    "get_exercise_performance_service",
    "get_goals_progress_service",
    "get_calendar_event_service",
    "get_deload_service",
    "get_athlete_profile_service",
    "get_urgency_service",
    # Authentication
    "get_current_user",
]
