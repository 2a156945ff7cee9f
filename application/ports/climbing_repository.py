"""
Climbing Log Repository Interface (Port).

This module defines the abstract interface for reading climbing logs and
grade tables. Used by the histogram, performance and goals services.
"""
from typing import Protocol, Optional, List, Sequence

from domain.models import ClimbingLogEntry, ClimbType, GradeDefinition, GradeFamily


class ClimbingLogRepository(Protocol):
    """
    Abstract interface for climbing log data access.

    Implementations raise RepositoryError when the backend call fails.
    """

    def list_logs(
        self,
        owner: str,
        *,
        since: Optional[str] = None,
        until: Optional[str] = None,
        climb_types: Optional[Sequence[ClimbType]] = None,
        successful: Optional[bool] = None,
        min_grade_id: Optional[int] = None,
        max_grade_id: Optional[int] = None,
    ) -> List[ClimbingLogEntry]:
        """
        Get climbing logs for an owner, newest first.

        Args:
            owner: Owner identity (email)
            since: Inclusive lower bound on LogDateTime (ISO string)
            until: Inclusive upper bound on LogDateTime (ISO string)
            climb_types: Restrict to these climb types, or None for all
            successful: Restrict to successful/unsuccessful logs, or None for both
            min_grade_id: Inclusive lower bound on GradeID
            max_grade_id: Inclusive upper bound on GradeID

        Returns:
            List of ClimbingLogEntry ordered by logged_at descending
        """
        ...

    def list_grades(
        self,
        family: GradeFamily,
        *,
        min_grade_id: Optional[int] = None,
    ) -> List[GradeDefinition]:
        """
        Get the grade definitions of a family ordered by grade id.

        Args:
            family: Grade family (boulder or lead)
            min_grade_id: Inclusive lower bound on grade id

        Returns:
            List of GradeDefinition ordered by grade_id ascending
        """
        ...
