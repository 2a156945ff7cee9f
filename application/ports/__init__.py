"""
Repository Interfaces (Ports) for the training tracker.

This package defines abstract interfaces that decouple the analytics from
infrastructure (database). Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the analytics need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ClimbingLogRepository

    class ClimbingPerformanceService:
        def __init__(self, climbing_repo: ClimbingLogRepository):
            self._climbing_repo = climbing_repo
"""

# Climbing logs and grade tables
from application.ports.climbing_repository import ClimbingLogRepository

# Calendar sessions and deload updates
from application.ports.calendar_repository import CalendarRepository

# Quarterly goals
from application.ports.goals_repository import GoalsRepository

# Exercise logs, wellness and profiles
from application.ports.training_repository import (
    ExerciseLogRepository,
    WellnessRepository,
    ProfileRepository,
)

__all__ = [
    # Climbing
    "ClimbingLogRepository",
    # Calendar
    "CalendarRepository",
    # Goals
    "GoalsRepository",
    # Training / wellness / profiles
    "ExerciseLogRepository",
    "WellnessRepository",
    "ProfileRepository",
]
