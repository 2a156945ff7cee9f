"""
Goals Repository Interface (Port).

This module defines the abstract interface for reading quarterly grade goals.
Boulder, Board and Lead goals live in separate tables and are never merged.
"""
from typing import Protocol, Optional

from domain.models import ClimbType, QuarterlyGoal


class GoalsRepository(Protocol):
    """Abstract interface for quarterly goal data access."""

    def get_quarterly_goal(
        self,
        owner: str,
        year: int,
        quarter: int,
        climb_type: ClimbType,
    ) -> Optional[QuarterlyGoal]:
        """
        Get the goal row of one climb type for a quarter.

        Args:
            owner: Owner identity (email)
            year: Calendar year
            quarter: Quarter number (1-4)
            climb_type: Which goal table to read (Boulder, Board or Lead)

        Returns:
            QuarterlyGoal, or None if no goals were set for that quarter

        Raises:
            RepositoryError: If the backend call fails
        """
        ...
