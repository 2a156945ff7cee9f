"""
Workout Statistics Metrics.

How often each scheduled workout was actually done over a date range,
with the average RPE of the completed sessions.
"""
from typing import Optional, List, Dict, Sequence
from dataclasses import dataclass, field
from datetime import date
import logging

from application.exceptions import RepositoryError
from application.ports import CalendarRepository
from backend.core.date_windows import day_window
from domain.models import CalendarSession

logger = logging.getLogger(__name__)


@dataclass
class WorkoutStats:
    """Completion statistics of one workout."""
    workout_id: int
    workout_name: str
    total_sessions: int
    completed_sessions: int
    completion_rate: float
    average_rpe: Optional[float]
    last_completed: Optional[str]
    total_with_rpe: int


@dataclass
class WorkoutPerformance:
    """Per-workout stats plus the overall rollup for a date range."""
    workouts: List[WorkoutStats]
    total_sessions: int
    completed_sessions: int
    overall_completion_rate: float
    date_range: Dict[str, str] = field(default_factory=dict)


def compute_workout_stats(
    workout_id: int,
    workout_name: str,
    sessions: Sequence[CalendarSession],
) -> WorkoutStats:
    """Compute completion rate, average RPE and last completion of one workout."""
    completed = [s for s in sessions if s.completed]
    total_sessions = len(sessions)
    completion_rate = (len(completed) / total_sessions) * 100 if total_sessions > 0 else 0

    rpes = [s.rpe for s in completed if s.rpe is not None]
    average_rpe = sum(rpes) / len(rpes) if rpes else None

    # Plain string comparison of ISO timestamps, newest first
    completed_times = sorted((s.start_time.isoformat() for s in completed), reverse=True)
    last_completed = completed_times[0] if completed_times else None

    return WorkoutStats(
        workout_id=workout_id,
        workout_name=workout_name,
        total_sessions=total_sessions,
        completed_sessions=len(completed),
        completion_rate=completion_rate,
        average_rpe=average_rpe,
        last_completed=last_completed,
        total_with_rpe=len(rpes),
    )


def aggregate_workout_performance(
    sessions: Sequence[CalendarSession],
    start_date: date,
    end_date: date,
) -> WorkoutPerformance:
    """
    Group sessions by workout and compute per-workout and overall stats.

    Sessions without a workout id are skipped for the per-workout table but
    the overall rollup always uses the flat session list.
    """
    grouped: Dict[int, List[CalendarSession]] = {}
    names: Dict[int, str] = {}
    for session in sessions:
        if not session.workout_id:
            continue
        grouped.setdefault(session.workout_id, []).append(session)
        names.setdefault(
            session.workout_id,
            session.workout_name or f"Workout {session.workout_id}",
        )

    workouts = [
        compute_workout_stats(workout_id, names[workout_id], workout_sessions)
        for workout_id, workout_sessions in grouped.items()
    ]
    # Most frequently scheduled first; ties keep first-seen order
    workouts.sort(key=lambda w: w.total_sessions, reverse=True)

    total_sessions = len(sessions)
    completed_sessions = sum(1 for s in sessions if s.completed)
    overall_completion_rate = (
        (completed_sessions / total_sessions) * 100 if total_sessions > 0 else 0
    )

    return WorkoutPerformance(
        workouts=workouts,
        total_sessions=total_sessions,
        completed_sessions=completed_sessions,
        overall_completion_rate=overall_completion_rate,
        date_range={"start": start_date.isoformat(), "end": end_date.isoformat()},
    )


class WorkoutPerformanceService:
    """Loads an owner's scheduled workouts and aggregates their completion."""

    def __init__(self, calendar_repo: CalendarRepository):
        self._calendar_repo = calendar_repo

    def get_performance(
        self,
        owner: str,
        start_date: date,
        end_date: date,
    ) -> WorkoutPerformance:
        """
        Get workout performance for an owner over [start_date, end_date].

        A failed fetch is logged and reported as an empty performance.
        """
        since, until = day_window(start_date, end_date)

        try:
            sessions = self._calendar_repo.list_sessions(
                owner,
                since=since,
                until=until,
                workouts_only=True,
            )
        except RepositoryError as e:
            logger.error(f"Error fetching workout stats for {owner}: {e}")
            sessions = []

        return aggregate_workout_performance(sessions, start_date, end_date)
