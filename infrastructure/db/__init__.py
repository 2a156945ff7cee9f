"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are injected
into services and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseClimbingLogRepository,
        SupabaseCalendarRepository,
        SupabaseGoalsRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    climbing_repo = SupabaseClimbingLogRepository(client)
    calendar_repo = SupabaseCalendarRepository(client)
    goals_repo = SupabaseGoalsRepository(client)
"""

from infrastructure.db.climbing_repository import SupabaseClimbingLogRepository
from infrastructure.db.calendar_repository import SupabaseCalendarRepository
from infrastructure.db.goals_repository import SupabaseGoalsRepository
from infrastructure.db.training_repository import (
    SupabaseExerciseLogRepository,
    SupabaseWellnessRepository,
    SupabaseProfileRepository,
)

__all__ = [
    # Climbing logs and grades
    "SupabaseClimbingLogRepository",

    # Calendar sessions and deload updates
    "SupabaseCalendarRepository",

    # Quarterly goals
    "SupabaseGoalsRepository",

    # Exercise logs, wellness and profiles
    "SupabaseExerciseLogRepository",
    "SupabaseWellnessRepository",
    "SupabaseProfileRepository",
]
