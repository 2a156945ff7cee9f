"""
Calendar Repository Interface (Port).

This module defines the abstract interface for reading scheduled sessions
and bulk-updating their deload flags.
"""
from typing import Protocol, Optional, List, Sequence

from domain.models import CalendarSession


class CalendarRepository(Protocol):
    """
    Abstract interface for calendar session persistence.

    Implementations raise RepositoryError when the backend call fails.
    """

    def list_sessions(
        self,
        owner: str,
        *,
        since: str,
        until: str,
        workouts_only: bool = False,
    ) -> List[CalendarSession]:
        """
        Get sessions whose StartTime falls in [since, until], newest first.

        Args:
            owner: Owner identity (email)
            since: Inclusive lower bound (ISO string)
            until: Inclusive upper bound (ISO string)
            workouts_only: Only sessions linked to a workout, with the
                workout name joined in

        Returns:
            List of CalendarSession ordered by start_time descending
        """
        ...

    def list_completed_since(
        self,
        owners: Sequence[str],
        since: str,
    ) -> List[CalendarSession]:
        """
        Get completed sessions of several owners starting at or after `since`.

        Used by urgency triage to batch the activity check for a roster.

        Returns:
            List of CalendarSession ordered by start_time descending
        """
        ...

    def set_deload(
        self,
        owner: str,
        *,
        since: str,
        until: str,
        deload: bool,
        percentage: Optional[int],
    ) -> None:
        """
        Set Deloading/DeloadingPercentage on every session of the owner in range.

        This is a single filtered update with no read-modify-write step.
        No row count is returned.

        Args:
            owner: Owner identity (email)
            since: Inclusive lower bound on StartTime (ISO string)
            until: Inclusive upper bound on StartTime (ISO string)
            deload: New Deloading flag
            percentage: New DeloadingPercentage (None to clear)
        """
        ...
