"""
API package for the training tracker.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_climbing_repo,
    get_calendar_repo,
    get_goals_repo,
    get_exercise_log_repo,
    get_wellness_repo,
    get_profile_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_climbing_repo",
    "get_calendar_repo",
    "get_goals_repo",
    "get_exercise_log_repo",
    "get_wellness_repo",
    "get_profile_repo",
    # Authentication
    "get_current_user",
]
