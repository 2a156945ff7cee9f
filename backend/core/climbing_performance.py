"""
Climbing Performance Metrics.

Success rate and attempt statistics per grade and per climb type over a
date range:
- Per grade: successful routes, attempts spent on sends and on failures,
  success rate, average attempts to send
- Per climb type: rollups computed from the type's full log list
- Overall: route and send counts across all types
"""
from typing import Optional, List, Dict, Sequence
from dataclasses import dataclass, field
from datetime import date
import logging

from application.exceptions import RepositoryError
from application.ports import ClimbingLogRepository
from backend.core.date_windows import day_window
from domain.models import ClimbingLogEntry, ClimbType, GradeFamily

logger = logging.getLogger(__name__)


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class GradeStats:
    """Performance at a single grade within one climb type."""
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


@dataclass
class ClimbTypeStats:
    """Performance for one climb type, hardest grade first."""
    type: ClimbType
    grades: List[GradeStats]
    total_routes: int
    total_successes: int
    total_failures: int
    total_attempts: int
    overall_success_rate: float


@dataclass
class ClimbingPerformance:
    """Performance across Boulder, Lead and Board for a date range."""
    boulder: Optional[ClimbTypeStats]
    lead: Optional[ClimbTypeStats]
    board: Optional[ClimbTypeStats]
    total_routes: int
    total_successes: int
    date_range: Dict[str, str] = field(default_factory=dict)


# =============================================================================
# Aggregation
# =============================================================================


def compute_grade_stats(
    grade_id: int,
    grade_name: str,
    climb_type: ClimbType,
    successful: Sequence[ClimbingLogEntry],
    failed: Sequence[ClimbingLogEntry],
) -> GradeStats:
    """
    Compute the stats of one grade from its sends and failures.

    Example: one send in 3 attempts plus one failure with 2 attempts gives
    success_rate 50.0 and avg_attempts_to_success 3.0.
    """
    successful_routes = len(successful)
    failed_routes = len(failed)
    attempts_with_success = sum(log.attempts or 1 for log in successful)
    attempts_without_success = sum(log.attempts or 1 for log in failed)

    routes = successful_routes + failed_routes
    success_rate = (successful_routes / routes) * 100 if routes > 0 else 0
    avg_attempts_to_success = (
        attempts_with_success / successful_routes if successful_routes > 0 else 0
    )

    return GradeStats(
        grade_id=grade_id,
        grade_name=grade_name,
        climb_type=climb_type,
        successful_routes=successful_routes,
        failed_routes=failed_routes,
        attempts_with_success=attempts_with_success,
        attempts_without_success=attempts_without_success,
        total_attempts=attempts_with_success + attempts_without_success,
        success_rate=success_rate,
        avg_attempts_to_success=avg_attempts_to_success,
    )


def process_climb_type(
    logs: Sequence[ClimbingLogEntry],
    climb_type: ClimbType,
    grade_names: Dict[int, str],
) -> Optional[ClimbTypeStats]:
    """
    Build the stats of one climb type, or None when it has no logs.

    Logs without a grade count toward the type rollups but not toward any
    grade row.
    """
    type_logs = [log for log in logs if log.climb_type == climb_type]
    if not type_logs:
        return None

    by_grade: Dict[int, Dict[str, List[ClimbingLogEntry]]] = {}
    for log in type_logs:
        if log.grade_id is None:
            continue
        bucket = by_grade.setdefault(log.grade_id, {"successful": [], "failed": []})
        bucket["successful" if log.successful else "failed"].append(log)

    grades = [
        compute_grade_stats(
            grade_id,
            grade_names.get(grade_id) or _fallback_grade_name(grade_id, climb_type),
            climb_type,
            bucket["successful"],
            bucket["failed"],
        )
        for grade_id, bucket in by_grade.items()
    ]
    grades.sort(key=lambda g: g.grade_id, reverse=True)

    total_routes = len(type_logs)
    total_successes = sum(1 for log in type_logs if log.successful)
    total_attempts = sum(log.attempts or 1 for log in type_logs)
    overall_success_rate = (total_successes / total_routes) * 100 if total_routes > 0 else 0

    return ClimbTypeStats(
        type=climb_type,
        grades=grades,
        total_routes=total_routes,
        total_successes=total_successes,
        total_failures=total_routes - total_successes,
        total_attempts=total_attempts,
        overall_success_rate=overall_success_rate,
    )


def _fallback_grade_name(grade_id: int, climb_type: ClimbType) -> str:
    if climb_type == ClimbType.LEAD:
        return f"Grade {grade_id}"
    return f"V{grade_id}"


def aggregate_climbing_performance(
    logs: Sequence[ClimbingLogEntry],
    boulder_names: Dict[int, str],
    lead_names: Dict[int, str],
    start_date: date,
    end_date: date,
) -> ClimbingPerformance:
    """Aggregate already-fetched logs into per-type performance."""
    return ClimbingPerformance(
        boulder=process_climb_type(logs, ClimbType.BOULDER, boulder_names),
        lead=process_climb_type(logs, ClimbType.LEAD, lead_names),
        board=process_climb_type(logs, ClimbType.BOARD, boulder_names),
        total_routes=len(logs),
        total_successes=sum(1 for log in logs if log.successful),
        date_range={"start": start_date.isoformat(), "end": end_date.isoformat()},
    )


# =============================================================================
# Climbing Performance Service
# =============================================================================


class ClimbingPerformanceService:
    """Loads an owner's climbing logs and grade names, then aggregates them."""

    def __init__(self, climbing_repo: ClimbingLogRepository):
        """
        Initialize the climbing performance service.

        Args:
            climbing_repo: Repository for climbing logs and grade tables
        """
        self._climbing_repo = climbing_repo

    def get_performance(
        self,
        owner: str,
        start_date: date,
        end_date: date,
    ) -> ClimbingPerformance:
        """
        Get climbing performance for an owner over [start_date, end_date].

        Args:
            owner: Owner identity (email)
            start_date: First day of the range (inclusive)
            end_date: Last day of the range (inclusive, through 23:59:59.999)

        Returns:
            ClimbingPerformance; all types None when nothing could be loaded
        """
        since, until = day_window(start_date, end_date)

        try:
            logs = self._climbing_repo.list_logs(owner, since=since, until=until)
            boulder_grades = self._climbing_repo.list_grades(GradeFamily.BOULDER)
            lead_grades = self._climbing_repo.list_grades(GradeFamily.LEAD)
        except RepositoryError as e:
            logger.error(f"Error fetching climbing performance for {owner}: {e}")
            logs, boulder_grades, lead_grades = [], [], []

        return aggregate_climbing_performance(
            logs,
            {g.grade_id: g.label for g in boulder_grades},
            {g.grade_id: g.label for g in lead_grades},
            start_date,
            end_date,
        )
