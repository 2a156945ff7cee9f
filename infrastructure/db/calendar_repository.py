"""
Supabase Calendar Repository Implementation.

This module implements the CalendarRepository protocol using Supabase.
Reads and bulk-updates the Calendar table.
"""
from typing import Optional, List, Sequence
import logging

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import row_to_calendar_session
from domain.models import CalendarSession
from infrastructure.db.rows import parse_rows

logger = logging.getLogger(__name__)

SESSION_COLUMNS = (
    "CalendarID, Email, WorkoutID, StartTime, EndTime, Completed, RPE, "
    "Deloading, DeloadingPercentage"
)


class SupabaseCalendarRepository:
    """Supabase implementation of CalendarRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def list_sessions(
        self,
        owner: str,
        *,
        since: str,
        until: str,
        workouts_only: bool = False,
    ) -> List[CalendarSession]:
        """Get sessions whose StartTime falls in [since, until], newest first."""
        columns = f"{SESSION_COLUMNS}, Workouts(WorkoutID, Name)"
        if workouts_only:
            # Inner join drops sessions whose workout was deleted
            columns = f"{SESSION_COLUMNS}, Workouts!inner(WorkoutID, Name)"

        try:
            query = self._client.table("Calendar") \
                .select(columns) \
                .eq("Email", owner) \
                .gte("StartTime", since) \
                .lte("StartTime", until)

            if workouts_only:
                query = query.not_.is_("WorkoutID", "null")

            result = query.order("StartTime", desc=True).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch calendar sessions: {e}") from e

        return parse_rows(result.data, row_to_calendar_session, "Calendar")

    def list_completed_since(
        self,
        owners: Sequence[str],
        since: str,
    ) -> List[CalendarSession]:
        """Get completed sessions of several owners starting at or after `since`."""
        if not owners:
            return []

        try:
            result = self._client.table("Calendar") \
                .select(SESSION_COLUMNS) \
                .in_("Email", list(owners)) \
                .eq("Completed", True) \
                .gte("StartTime", since) \
                .order("StartTime", desc=True) \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch completed sessions: {e}") from e

        return parse_rows(result.data, row_to_calendar_session, "Calendar")

    def set_deload(
        self,
        owner: str,
        *,
        since: str,
        until: str,
        deload: bool,
        percentage: Optional[int],
    ) -> None:
        """Set Deloading/DeloadingPercentage on every session of the owner in range."""
        try:
            self._client.table("Calendar") \
                .update({
                    "Deloading": deload,
                    "DeloadingPercentage": percentage,
                }) \
                .eq("Email", owner) \
                .gte("StartTime", since) \
                .lte("StartTime", until) \
                .execute()
        except Exception as e:
            raise RepositoryError(str(e)) from e

        logger.info(
            f"Deload {'applied' if deload else 'cleared'} for {owner} "
            f"between {since} and {until}"
        )
