"""
Converters from Supabase rows to domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import row_to_climbing_log
    >>> entry = row_to_climbing_log({
    ...     "Email": "athlete@example.com",
    ...     "ClimbType": "Lead",
    ...     "GradeID": 12,
    ...     "Attempts": 2,
    ...     "Successful": True,
    ... })
"""

from domain.converters.db_converters import (
    row_to_athlete,
    row_to_calendar_session,
    row_to_climbing_log,
    row_to_exercise_log,
    row_to_grade,
    row_to_quarterly_goal,
    row_to_wellness,
)

__all__ = [
    "row_to_athlete",
    "row_to_calendar_session",
    "row_to_climbing_log",
    "row_to_exercise_log",
    "row_to_grade",
    "row_to_quarterly_goal",
    "row_to_wellness",
]
