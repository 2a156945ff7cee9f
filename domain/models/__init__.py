"""
Domain models for the training tracker.

These models are the parsed, validated shape of rows read from the
database. The aggregation layer only ever sees these types.

Usage:
    >>> from domain.models import ClimbingLogEntry, ClimbType

    >>> entry = ClimbingLogEntry(
    ...     owner="athlete@example.com",
    ...     climb_type=ClimbType.BOULDER,
    ...     grade_id=4,
    ...     attempts=3,
    ...     successful=True,
    ... )
"""

from domain.models.calendar import CalendarSession, EventColor, EventState
from domain.models.climbing import (
    ClimbingLogEntry,
    ClimbType,
    GradeDefinition,
    GradeFamily,
    family_for,
)
from domain.models.goals import (
    BOULDER_GOAL_COLUMNS,
    LEAD_GOAL_COLUMNS,
    LEAD_GOAL_MIN_GRADE_ID,
    QuarterlyGoal,
    goal_columns_for,
)
from domain.models.training import (
    AthleteRef,
    ExerciseLogEntry,
    HandSide,
    UserRole,
    WellnessEntry,
)

__all__ = [
    # Climbing
    "ClimbingLogEntry",
    "ClimbType",
    "GradeDefinition",
    "GradeFamily",
    "family_for",
    # Calendar
    "CalendarSession",
    "EventColor",
    "EventState",
    # Goals
    "BOULDER_GOAL_COLUMNS",
    "LEAD_GOAL_COLUMNS",
    "LEAD_GOAL_MIN_GRADE_ID",
    "QuarterlyGoal",
    "goal_columns_for",
    # Training / wellness
    "AthleteRef",
    "ExerciseLogEntry",
    "HandSide",
    "UserRole",
    "WellnessEntry",
]
