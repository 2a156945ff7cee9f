"""
Domain layer for the training tracker.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    AthleteRef,
    CalendarSession,
    ClimbingLogEntry,
    ClimbType,
    ExerciseLogEntry,
    GradeDefinition,
    GradeFamily,
    QuarterlyGoal,
    WellnessEntry,
)

__all__ = [
    "AthleteRef",
    "CalendarSession",
    "ClimbingLogEntry",
    "ClimbType",
    "ExerciseLogEntry",
    "GradeDefinition",
    "GradeFamily",
    "QuarterlyGoal",
    "WellnessEntry",
]
