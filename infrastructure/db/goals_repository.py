"""
Supabase Goals Repository Implementation.

This module implements the GoalsRepository protocol using Supabase.
Each climb type has its own goal table; they are never merged.
"""
from typing import Optional
import logging

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import row_to_quarterly_goal
from domain.models import ClimbType, QuarterlyGoal

logger = logging.getLogger(__name__)

GOAL_TABLES = {
    ClimbType.BOULDER: "BoulderGoals",
    ClimbType.BOARD: "BoardGoals",
    ClimbType.LEAD: "LeadGoals",
}


class SupabaseGoalsRepository:
    """Supabase implementation of GoalsRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_quarterly_goal(
        self,
        owner: str,
        year: int,
        quarter: int,
        climb_type: ClimbType,
    ) -> Optional[QuarterlyGoal]:
        """Get the goal row of one climb type for a quarter."""
        table = GOAL_TABLES[climb_type]

        try:
            result = self._client.table(table) \
                .select("*") \
                .eq("Email", owner) \
                .eq("Year", year) \
                .eq("Quarter", quarter) \
                .maybe_single() \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch {table}: {e}") from e

        # maybe_single() returns None (or empty data) when no row matches
        if result is None or not result.data:
            return None

        try:
            return row_to_quarterly_goal(result.data, climb_type)
        except ValueError as e:
            raise RepositoryError(f"Malformed {table} row for {owner}: {e}") from e
