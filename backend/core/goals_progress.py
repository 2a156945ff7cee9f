"""
Goals Progress Tracker - compare quarterly grade goals with actual sends.

Boulder, Board and Lead are scored independently: each reads its own goal
table and only counts successful climbs logged under that exact climb type.
A Board send never counts toward a Boulder goal even though both use the
same grade ids.
"""
from typing import Optional, List, Dict, Sequence, Tuple
from dataclasses import dataclass, field
import logging
import math

from application.exceptions import RepositoryError
from application.ports import ClimbingLogRepository, GoalsRepository
from backend.core.date_windows import END_OF_DAY_SUFFIX
from domain.models import (
    ClimbingLogEntry,
    ClimbType,
    GradeDefinition,
    LEAD_GOAL_MIN_GRADE_ID,
    QuarterlyGoal,
    family_for,
)

logger = logging.getLogger(__name__)

# Literal month-day bounds; no calendar arithmetic
QUARTER_BOUNDS: Dict[int, Tuple[str, str]] = {
    1: ("01-01", "03-31"),
    2: ("04-01", "06-30"),
    3: ("07-01", "09-30"),
    4: ("10-01", "12-31"),
}


@dataclass
class GoalProgress:
    """Progress toward the target count at one grade."""
    grade: str
    grade_id: int
    target: int
    actual: int
    remaining: int
    percentage: int


@dataclass
class QuarterProgress:
    """Progress of all three goal tables for one quarter."""
    year: int
    quarter: int
    boulder: List[GoalProgress] = field(default_factory=list)
    board: List[GoalProgress] = field(default_factory=list)
    lead: List[GoalProgress] = field(default_factory=list)


def quarter_date_range(year: int, quarter: int) -> Optional[Tuple[str, str]]:
    """
    Return the ("YYYY-MM-DD", "YYYY-MM-DD") bounds of a quarter.

    Returns None for a quarter outside 1-4.
    """
    bounds = QUARTER_BOUNDS.get(quarter)
    if bounds is None:
        return None
    start, end = bounds
    return f"{year}-{start}", f"{year}-{end}"


def round_half_up(value: float) -> int:
    """Round like JavaScript's Math.round (halves go up)."""
    return int(math.floor(value + 0.5))


def compute_goal_progress(
    goal: QuarterlyGoal,
    grades: Sequence[GradeDefinition],
    climbs: Sequence[ClimbingLogEntry],
    *,
    min_grade_id: Optional[int] = None,
) -> List[GoalProgress]:
    """
    Build one GoalProgress per grade with a nonzero target.

    `climbs` must already be the successful climbs of the goal's climb type
    in the quarter; they are counted per grade id as-is.

    Returns:
        Progress records sorted hardest grade first
    """
    actual_counts: Dict[int, int] = {}
    for climb in climbs:
        if climb.grade_id is None:
            continue
        actual_counts[climb.grade_id] = actual_counts.get(climb.grade_id, 0) + 1

    progress: List[GoalProgress] = []
    for grade in grades:
        if min_grade_id is not None and grade.grade_id < min_grade_id:
            continue

        target = goal.target_for(grade)
        if target == 0:
            continue

        actual = actual_counts.get(grade.grade_id, 0)
        progress.append(GoalProgress(
            grade=grade.label,
            grade_id=grade.grade_id,
            target=target,
            actual=actual,
            remaining=max(0, target - actual),
            percentage=round_half_up((actual / target) * 100),
        ))

    progress.sort(key=lambda p: p.grade_id, reverse=True)
    return progress


class GoalsProgressService:
    """
    Service for quarterly goal progress.

    Every public method returns an empty list instead of raising when
    goals are missing or the database cannot be reached.
    """

    def __init__(
        self,
        goals_repo: GoalsRepository,
        climbing_repo: ClimbingLogRepository,
    ):
        """
        Initialize the goals progress service.

        Args:
            goals_repo: Repository for quarterly goal rows
            climbing_repo: Repository for climbing logs and grade tables
        """
        self._goals_repo = goals_repo
        self._climbing_repo = climbing_repo

    def get_boulder_progress(self, owner: str, year: int, quarter: int) -> List[GoalProgress]:
        """Boulder goals vs successful Boulder climbs (Board climbs excluded)."""
        return self.get_progress(owner, year, quarter, ClimbType.BOULDER)

    def get_board_progress(self, owner: str, year: int, quarter: int) -> List[GoalProgress]:
        """Board goals vs successful Board climbs (Boulder climbs excluded)."""
        return self.get_progress(owner, year, quarter, ClimbType.BOARD)

    def get_lead_progress(self, owner: str, year: int, quarter: int) -> List[GoalProgress]:
        """Lead goals vs successful Lead climbs, grades from 5c upward."""
        return self.get_progress(owner, year, quarter, ClimbType.LEAD)

    def get_quarter_summary(self, owner: str, year: int, quarter: int) -> QuarterProgress:
        """Progress of all three goal tables for one quarter."""
        return QuarterProgress(
            year=year,
            quarter=quarter,
            boulder=self.get_boulder_progress(owner, year, quarter),
            board=self.get_board_progress(owner, year, quarter),
            lead=self.get_lead_progress(owner, year, quarter),
        )

    def get_progress(
        self,
        owner: str,
        year: int,
        quarter: int,
        climb_type: ClimbType,
    ) -> List[GoalProgress]:
        """
        Compare one goal table with the quarter's successful climbs.

        Args:
            owner: Owner identity (email)
            year: Calendar year
            quarter: Quarter number (1-4)
            climb_type: Which goal table and which logs to use

        Returns:
            Progress records hardest grade first, or [] if no goals / on error
        """
        date_range = quarter_date_range(year, quarter)
        if date_range is None:
            logger.warning(f"Invalid quarter {quarter} requested for {owner}")
            return []

        min_grade_id = LEAD_GOAL_MIN_GRADE_ID if climb_type == ClimbType.LEAD else None

        try:
            goal = self._goals_repo.get_quarterly_goal(owner, year, quarter, climb_type)
            if goal is None:
                return []

            start, end = date_range
            climbs = self._climbing_repo.list_logs(
                owner,
                since=start,
                until=f"{end}{END_OF_DAY_SUFFIX}",
                climb_types=[climb_type],
                successful=True,
            )
            grades = self._climbing_repo.list_grades(
                family_for(climb_type),
                min_grade_id=min_grade_id,
            )
        except RepositoryError as e:
            logger.error(
                f"Error fetching {climb_type.value.lower()} progress for "
                f"{owner} {year}-Q{quarter}: {e}"
            )
            return []

        return compute_goal_progress(goal, grades, climbs, min_grade_id=min_grade_id)
