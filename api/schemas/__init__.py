"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- analytics: Climbing, workout, exercise and goal analytics
- calendar: Calendar events and deload windows
- athletes: Athlete profile metrics and urgency triage
"""

from api.schemas.analytics import (
    ClimbingHistogramsResponse,
    ClimbingPerformanceResponse,
    ClimbTypeStatsResponse,
    ExercisePerformanceResponse,
    ExerciseStatsResponse,
    GoalProgressResponse,
    GradeStatsResponse,
    HandStatsResponse,
    HistogramBarResponse,
    ImbalanceResponse,
    QuarterProgressResponse,
    SplitHistogramBarResponse,
    WorkoutPerformanceResponse,
    WorkoutStatsResponse,
)
from api.schemas.athletes import (
    AthleteUrgencyResponse,
    ProfileMetricsResponse,
    UrgencyFlagResponse,
    UrgencyListResponse,
)
from api.schemas.calendar import (
    CalendarEventResponse,
    DeloadRequest,
    DeloadResponse,
)

__all__ = [
    # Analytics
    "ClimbingHistogramsResponse",
    "ClimbingPerformanceResponse",
    "ClimbTypeStatsResponse",
    "ExercisePerformanceResponse",
    "ExerciseStatsResponse",
    "GoalProgressResponse",
    "GradeStatsResponse",
    "HandStatsResponse",
    "HistogramBarResponse",
    "ImbalanceResponse",
    "QuarterProgressResponse",
    "SplitHistogramBarResponse",
    "WorkoutPerformanceResponse",
    "WorkoutStatsResponse",
    # Athletes
    "AthleteUrgencyResponse",
    "ProfileMetricsResponse",
    "UrgencyFlagResponse",
    "UrgencyListResponse",
    # Calendar
    "CalendarEventResponse",
    "DeloadRequest",
    "DeloadResponse",
]
