"""
Grade histograms for the climbing log chart.

Boulder and Board share the V-scale, so they are counted side by side per
grade (stacked bars). Lead is a single series on the French scale.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Union
import logging
import re

from application.exceptions import RepositoryError
from application.ports import ClimbingLogRepository
from backend.core.date_windows import day_window
from domain.models import ClimbingLogEntry, ClimbType, GradeDefinition, GradeFamily

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(label: str) -> List[Union[str, int]]:
    """
    Key for numeric-aware label ordering ("V2" < "V10", "6a" < "6a+" < "6b").

    re.split with a capture group alternates text and digit runs, so keys
    always compare str with str and int with int.
    """
    parts = _DIGITS.split(label)
    return [int(p) if i % 2 else p.lower() for i, p in enumerate(parts)]


@dataclass
class SplitHistogramBar:
    """Boulder and Board counts at one V-grade."""
    grade_label: str
    boulder_count: int = 0
    board_count: int = 0


@dataclass
class HistogramBar:
    """Lead count at one French grade."""
    grade_label: str
    count: int = 0


def build_boulder_board_histogram(
    logs: Sequence[ClimbingLogEntry],
    boulder_grades: Sequence[GradeDefinition],
) -> List[SplitHistogramBar]:
    """
    Count Boulder and Board logs per grade id.

    Logs without a grade are ignored. A grade id missing from
    `boulder_grades` gets an empty label.
    """
    labels = {g.grade_id: g.label for g in boulder_grades}
    bars: Dict[int, SplitHistogramBar] = {}

    for log in logs:
        if log.climb_type not in (ClimbType.BOULDER, ClimbType.BOARD):
            continue
        if log.grade_id is None:
            continue

        bar = bars.get(log.grade_id)
        if bar is None:
            bar = SplitHistogramBar(grade_label=labels.get(log.grade_id, ""))
            bars[log.grade_id] = bar

        if log.climb_type == ClimbType.BOULDER:
            bar.boulder_count += 1
        else:
            bar.board_count += 1

    return sorted(bars.values(), key=lambda b: natural_sort_key(b.grade_label))


def build_lead_histogram(
    logs: Sequence[ClimbingLogEntry],
    lead_grades: Sequence[GradeDefinition],
) -> List[HistogramBar]:
    """Count Lead logs per grade id, labelled with the French grade."""
    counts: Dict[int, int] = {}
    for log in logs:
        if log.climb_type != ClimbType.LEAD or log.grade_id is None:
            continue
        counts[log.grade_id] = counts.get(log.grade_id, 0) + 1

    labels = {g.grade_id: g.label for g in lead_grades}
    bars = [
        HistogramBar(grade_label=labels.get(grade_id, ""), count=count)
        for grade_id, count in counts.items()
    ]
    return sorted(bars, key=lambda b: natural_sort_key(b.grade_label))


# =============================================================================
# Service
# =============================================================================


@dataclass
class HistogramFilters:
    """Optional filters for the climbing log chart."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    climb_type: Optional[ClimbType] = None
    min_grade_id: Optional[int] = None
    max_grade_id: Optional[int] = None


@dataclass
class ClimbingHistograms:
    """Both histograms for one filtered set of logs."""
    boulder_board: List[SplitHistogramBar] = field(default_factory=list)
    lead: List[HistogramBar] = field(default_factory=list)
    total_logs: int = 0


class HistogramService:
    """Fetches climbing logs and grade tables and builds both histograms."""

    def __init__(self, climbing_repo: ClimbingLogRepository):
        self._climbing_repo = climbing_repo

    def get_histograms(
        self,
        owner: str,
        filters: Optional[HistogramFilters] = None,
    ) -> ClimbingHistograms:
        filters = filters or HistogramFilters()

        since = until = None
        if filters.start_date and filters.end_date:
            since, until = day_window(filters.start_date, filters.end_date)
        elif filters.start_date:
            since = filters.start_date.isoformat()
        elif filters.end_date:
            until = day_window(filters.end_date, filters.end_date)[1]

        try:
            logs = self._climbing_repo.list_logs(
                owner,
                since=since,
                until=until,
                climb_types=[filters.climb_type] if filters.climb_type else None,
                min_grade_id=filters.min_grade_id,
                max_grade_id=filters.max_grade_id,
            )
            boulder_grades = self._climbing_repo.list_grades(GradeFamily.BOULDER)
            lead_grades = self._climbing_repo.list_grades(GradeFamily.LEAD)
        except RepositoryError as e:
            logger.error(f"Error building climbing histograms for {owner}: {e}")
            return ClimbingHistograms()

        return ClimbingHistograms(
            boulder_board=build_boulder_board_histogram(logs, boulder_grades),
            lead=build_lead_histogram(logs, lead_grades),
            total_logs=len(logs),
        )
