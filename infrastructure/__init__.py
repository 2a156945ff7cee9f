"""
Infrastructure Layer for the training tracker.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseClimbingLogRepository,
    SupabaseCalendarRepository,
    SupabaseGoalsRepository,
    SupabaseExerciseLogRepository,
    SupabaseWellnessRepository,
    SupabaseProfileRepository,
)

__all__ = [
    "SupabaseClimbingLogRepository",
    "SupabaseCalendarRepository",
    "SupabaseGoalsRepository",
    "SupabaseExerciseLogRepository",
    "SupabaseWellnessRepository",
    "SupabaseProfileRepository",
]
