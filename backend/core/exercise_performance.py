"""
Exercise Performance Metrics.

Per-exercise progress for each hand side and left/right imbalance for
single-hand exercises:
- Hand stats: one metric per side (KG, seconds or reps), with current,
  max, mean, population std dev and a last-5 vs previous-5 trend
- Imbalance: gaps relative to the right hand, classified by the mean gap
"""
from typing import Optional, List, Dict, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
import logging
import math

from application.exceptions import RepositoryError
from application.ports import ExerciseLogRepository
from backend.core.date_windows import day_window
from domain.models import ExerciseLogEntry, HandSide

logger = logging.getLogger(__name__)

DEFAULT_BODY_WEIGHT_KG = 70.0
TREND_WINDOW = 5


class MetricUnit(str, Enum):
    KG = "KG"
    REPS = "reps"
    SECONDS = "seconds"


class ImbalanceStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


IMBALANCE_MESSAGES = {
    ImbalanceStatus.GOOD: "Balanced",
    ImbalanceStatus.WARNING: "Slight imbalance, keep an eye on it",
    ImbalanceStatus.CRITICAL: "Significant imbalance, address it",
}


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class HandStats:
    """Progress of one hand side on one metric."""
    current: float
    max: float
    avg: float
    std_dev: float
    trend: float
    last5: List[float]
    total_sessions: int
    unit: MetricUnit
    is_body_weight: bool = False


@dataclass
class ImbalanceStats:
    """Left/right gap as a percentage of the right hand."""
    current_gap: float
    avg_gap: float
    max_gap: float
    status: ImbalanceStatus
    message: str


@dataclass
class ExerciseStats:
    exercise_id: int
    exercise_name: str
    category: str
    is_single_hand: bool
    right_hand: Optional[HandStats] = None
    left_hand: Optional[HandStats] = None
    both_hands: Optional[HandStats] = None
    imbalance: Optional[ImbalanceStats] = None


@dataclass
class ExercisePerformance:
    exercises: List[ExerciseStats]
    body_weight_kg: float
    date_range: Dict[str, str] = field(default_factory=dict)


# =============================================================================
# Aggregation
# =============================================================================


def _positive(values) -> List[float]:
    return [v for v in values if v is not None and v > 0]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def compute_hand_stats(
    logs: Sequence[ExerciseLogEntry],
    is_duration: bool = False,
) -> Optional[HandStats]:
    """
    Compute the stats of one hand side, oldest log first.

    The metric is picked in priority order: weight if any set carries one,
    duration for duration exercises, then reps, then duration as a
    body-weight metric. Only positive values count.

    Returns:
        HandStats, or None when no set has a positive value
    """
    is_body_weight = False
    if any(log.weight_kg and log.weight_kg > 0 for log in logs):
        unit = MetricUnit.KG
        values = _positive(log.weight_kg for log in logs)
    elif is_duration:
        unit = MetricUnit.SECONDS
        values = _positive(log.duration_sec for log in logs)
    elif any(log.reps_done and log.reps_done > 0 for log in logs):
        unit = MetricUnit.REPS
        is_body_weight = True
        values = _positive(log.reps_done for log in logs)
    elif any(log.duration_sec and log.duration_sec > 0 for log in logs):
        unit = MetricUnit.SECONDS
        is_body_weight = True
        values = _positive(log.duration_sec for log in logs)
    else:
        return None

    if not values:
        return None

    avg = _mean(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    last5 = values[-TREND_WINDOW:]

    trend = 0.0
    if len(values) >= 2 * TREND_WINDOW:
        previous5 = values[-2 * TREND_WINDOW:-TREND_WINDOW]
        avg_prev = _mean(previous5)
        if avg_prev > 0:
            trend = ((_mean(last5) - avg_prev) / avg_prev) * 100

    return HandStats(
        current=values[-1],
        max=max(values),
        avg=avg,
        std_dev=math.sqrt(variance),
        trend=trend,
        last5=last5,
        total_sessions=len(values),
        unit=unit,
        is_body_weight=is_body_weight,
    )


def _relative_gap(right: float, left: float) -> float:
    return ((right - left) / right) * 100 if right > 0 else 0.0


def compute_imbalance(right: HandStats, left: HandStats) -> ImbalanceStats:
    """
    Compare the right and left hand of a single-hand exercise.

    Positive gaps mean the right hand is stronger. The max gap pairs the
    last-5 values of both hands by position; extra values on the longer
    side are ignored.
    """
    current_gap = _relative_gap(right.current, left.current)
    avg_gap = _relative_gap(right.avg, left.avg)

    gaps = [abs(_relative_gap(r, l)) for r, l in zip(right.last5, left.last5)]
    max_gap = max(gaps) if gaps else 0.0

    if abs(avg_gap) < 10:
        status = ImbalanceStatus.GOOD
    elif abs(avg_gap) < 20:
        status = ImbalanceStatus.WARNING
    else:
        status = ImbalanceStatus.CRITICAL

    return ImbalanceStats(
        current_gap=current_gap,
        avg_gap=avg_gap,
        max_gap=max_gap,
        status=status,
        message=IMBALANCE_MESSAGES[status],
    )


def aggregate_exercise_performance(
    logs: Sequence[ExerciseLogEntry],
    body_weight_kg: float,
    start_date: date,
    end_date: date,
) -> ExercisePerformance:
    """
    Group logs by exercise and hand side and compute stats for each.

    Exercises with no usable value on any side are dropped. Results are
    ordered by category, then exercise name.
    """
    grouped: Dict[int, Dict[HandSide, List[ExerciseLogEntry]]] = {}
    first_seen: Dict[int, ExerciseLogEntry] = {}
    for log in logs:
        if log.hand_side is None:
            continue
        first_seen.setdefault(log.exercise_id, log)
        sides = grouped.setdefault(log.exercise_id, {})
        sides.setdefault(log.hand_side, []).append(log)

    exercises: List[ExerciseStats] = []
    for exercise_id, sides in grouped.items():
        meta = first_seen[exercise_id]

        def side_stats(side: HandSide) -> Optional[HandStats]:
            side_logs = sides.get(side)
            if not side_logs:
                return None
            return compute_hand_stats(side_logs, meta.is_duration)

        stats = ExerciseStats(
            exercise_id=exercise_id,
            exercise_name=meta.exercise_name,
            category=meta.category,
            is_single_hand=meta.is_single_hand,
            right_hand=side_stats(HandSide.RIGHT),
            left_hand=side_stats(HandSide.LEFT),
            both_hands=side_stats(HandSide.BOTH),
        )
        if not (stats.right_hand or stats.left_hand or stats.both_hands):
            continue

        if stats.is_single_hand and stats.right_hand and stats.left_hand:
            stats.imbalance = compute_imbalance(stats.right_hand, stats.left_hand)

        exercises.append(stats)

    exercises.sort(key=lambda e: (e.category.casefold(), e.exercise_name.casefold()))

    return ExercisePerformance(
        exercises=exercises,
        body_weight_kg=body_weight_kg,
        date_range={"start": start_date.isoformat(), "end": end_date.isoformat()},
    )


class ExercisePerformanceService:
    """Loads completed exercise sets and body weight, then aggregates them."""

    def __init__(self, exercise_repo: ExerciseLogRepository):
        self._exercise_repo = exercise_repo

    def get_performance(
        self,
        owner: str,
        start_date: date,
        end_date: date,
    ) -> ExercisePerformance:
        """
        Get exercise performance for an owner over [start_date, end_date].

        A missing profile falls back to the default body weight. A failed
        log fetch is reported as an empty exercise list.
        """
        since, until = day_window(start_date, end_date)

        body_weight = None
        try:
            body_weight = self._exercise_repo.get_body_weight(owner)
        except RepositoryError as e:
            logger.warning(f"Could not load body weight for {owner}: {e}")

        try:
            logs = self._exercise_repo.list_completed_logs(owner, since=since, until=until)
        except RepositoryError as e:
            logger.error(f"Error fetching exercise performance for {owner}: {e}")
            logs = []

        return aggregate_exercise_performance(
            logs,
            body_weight or DEFAULT_BODY_WEIGHT_KG,
            start_date,
            end_date,
        )
