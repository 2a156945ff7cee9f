"""
Fake Goals Repository for Testing.

In-memory implementation of GoalsRepository for fast, isolated testing.
"""
from typing import Optional, Dict, Tuple

from domain.models import ClimbType, QuarterlyGoal


class FakeGoalsRepository:
    """In-memory fake implementation of GoalsRepository."""

    def __init__(self):
        """Initialize with empty storage."""
        self._goals: Dict[Tuple[str, int, int, ClimbType], QuarterlyGoal] = {}
        self._error: Optional[Exception] = None

    def reset(self) -> None:
        """Clear all stored data."""
        self._goals.clear()
        self._error = None

    def seed(self, goal: QuarterlyGoal) -> None:
        """Store a goal under its owner, year, quarter and climb type."""
        self._goals[(goal.owner, goal.year, goal.quarter, goal.climb_type)] = goal

    def fail_with(self, error: Optional[Exception]) -> None:
        """Make every subsequent call raise `error` (None to stop failing)."""
        self._error = error

    def get_quarterly_goal(
        self,
        owner: str,
        year: int,
        quarter: int,
        climb_type: ClimbType,
    ) -> Optional[QuarterlyGoal]:
        """Get the goal row of one climb type for a quarter."""
        if self._error is not None:
            raise self._error
        return self._goals.get((owner, year, quarter, climb_type))
