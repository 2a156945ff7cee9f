"""
Response schemas for the climbing, workout, exercise and goal analytics.

The services return dataclasses; these models read them with
from_attributes and add the rating bands clients color by.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from backend.core.exercise_performance import ImbalanceStatus, MetricUnit
from backend.core import rating_bands
from backend.core.rating_bands import Band, RpeBand
from domain.models import ClimbType


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Climbing histograms
# =============================================================================


class SplitHistogramBarResponse(_FromAttributes):
    """Boulder and Board sends at one boulder grade."""
    grade_label: str
    boulder_count: int
    board_count: int


class HistogramBarResponse(_FromAttributes):
    grade_label: str
    count: int


class ClimbingHistogramsResponse(_FromAttributes):
    boulder_board: List[SplitHistogramBarResponse] = Field(default_factory=list)
    lead: List[HistogramBarResponse] = Field(default_factory=list)
    total_logs: int = 0


# =============================================================================
# Climbing performance
# =============================================================================


class GradeStatsResponse(_FromAttributes):
    grade_id: int
    grade_name: str
    climb_type: ClimbType
    successful_routes: int
    failed_routes: int
    attempts_with_success: int
    attempts_without_success: int
    total_attempts: int
    success_rate: float
    avg_attempts_to_success: float

    @computed_field
    @property
    def success_band(self) -> Band:
        return rating_bands.rate_band(self.success_rate)


class ClimbTypeStatsResponse(_FromAttributes):
    type: ClimbType
    grades: List[GradeStatsResponse]
    total_routes: int
    total_successes: int
    total_failures: int
    total_attempts: int
    overall_success_rate: float

    @computed_field
    @property
    def success_band(self) -> Band:
        return rating_bands.rate_band(self.overall_success_rate)


class ClimbingPerformanceResponse(_FromAttributes):
    """Per-type climbing performance; a type with no logs is null."""
    boulder: Optional[ClimbTypeStatsResponse] = None
    lead: Optional[ClimbTypeStatsResponse] = None
    board: Optional[ClimbTypeStatsResponse] = None
    total_routes: int
    total_successes: int
    date_range: Dict[str, str]


# =============================================================================
# Workout performance
# =============================================================================


class WorkoutStatsResponse(_FromAttributes):
    workout_id: int
    workout_name: str
    total_sessions: int
    completed_sessions: int
    completion_rate: float
    average_rpe: Optional[float] = None
    last_completed: Optional[str] = None
    total_with_rpe: int

    @computed_field
    @property
    def completion_band(self) -> Band:
        return rating_bands.rate_band(self.completion_rate)

    @computed_field
    @property
    def rpe_band(self) -> Optional[RpeBand]:
        if self.average_rpe is None:
            return None
        return rating_bands.rpe_band(self.average_rpe)


class WorkoutPerformanceResponse(_FromAttributes):
    workouts: List[WorkoutStatsResponse]
    total_sessions: int
    completed_sessions: int
    overall_completion_rate: float
    date_range: Dict[str, str]


# =============================================================================
# Exercise performance
# =============================================================================


class HandStatsResponse(_FromAttributes):
    current: float
    max: float
    avg: float
    std_dev: float
    trend: float
    last5: List[float]
    total_sessions: int
    unit: MetricUnit
    is_body_weight: bool = False


class ImbalanceResponse(_FromAttributes):
    current_gap: float
    avg_gap: float
    max_gap: float
    status: ImbalanceStatus
    message: str


class ExerciseStatsResponse(_FromAttributes):
    exercise_id: int
    exercise_name: str
    category: str
    is_single_hand: bool
    right_hand: Optional[HandStatsResponse] = None
    left_hand: Optional[HandStatsResponse] = None
    both_hands: Optional[HandStatsResponse] = None
    imbalance: Optional[ImbalanceResponse] = None


class ExercisePerformanceResponse(_FromAttributes):
    exercises: List[ExerciseStatsResponse]
    body_weight_kg: float
    date_range: Dict[str, str]


# =============================================================================
# Goals
# =============================================================================


class GoalProgressResponse(_FromAttributes):
    """Progress toward one grade target in a quarter."""
    grade: str
    grade_id: int
    target: int
    actual: int
    remaining: int
    percentage: int


class QuarterProgressResponse(_FromAttributes):
    year: int
    quarter: int
    boulder: List[GoalProgressResponse] = Field(default_factory=list)
    board: List[GoalProgressResponse] = Field(default_factory=list)
    lead: List[GoalProgressResponse] = Field(default_factory=list)
