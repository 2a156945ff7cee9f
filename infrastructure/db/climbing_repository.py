"""
Supabase Climbing Log Repository Implementation.

This module implements the ClimbingLogRepository protocol using Supabase.
Reads the ClimbingLog, BoulderGrades and LeadGrades tables.
"""
from typing import Optional, List, Sequence
import logging

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import row_to_climbing_log, row_to_grade
from domain.models import ClimbingLogEntry, ClimbType, GradeDefinition, GradeFamily
from infrastructure.db.rows import parse_rows

logger = logging.getLogger(__name__)

CLIMBING_LOG_COLUMNS = (
    "ClimbingLogID, Email, ClimbType, GradeID, Attempts, Successful, "
    "LogDateTime, RouteName, Notes"
)


class SupabaseClimbingLogRepository:
    """
    Supabase implementation of ClimbingLogRepository.

    Filters are pushed down to PostgREST; rows are parsed into domain
    models before being returned.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

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
        """Get climbing logs for an owner, newest first."""
        try:
            query = self._client.table("ClimbingLog") \
                .select(CLIMBING_LOG_COLUMNS) \
                .eq("Email", owner)

            if since:
                query = query.gte("LogDateTime", since)
            if until:
                query = query.lte("LogDateTime", until)
            if climb_types:
                if len(climb_types) == 1:
                    query = query.eq("ClimbType", climb_types[0].value)
                else:
                    query = query.in_("ClimbType", [t.value for t in climb_types])
            if successful is not None:
                query = query.eq("Successful", successful)
            if min_grade_id is not None:
                query = query.gte("GradeID", min_grade_id)
            if max_grade_id is not None:
                query = query.lte("GradeID", max_grade_id)

            result = query.order("LogDateTime", desc=True).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch climbing logs: {e}") from e

        return parse_rows(result.data, row_to_climbing_log, "ClimbingLog")

    def list_grades(
        self,
        family: GradeFamily,
        *,
        min_grade_id: Optional[int] = None,
    ) -> List[GradeDefinition]:
        """Get the grade definitions of a family ordered by grade id."""
        if family == GradeFamily.LEAD:
            table, id_column = "LeadGrades", "LeadGradeID"
            columns = "LeadGradeID, FrenchGrade, YosemiteGrade"
        else:
            table, id_column = "BoulderGrades", "BoulderGradeID"
            columns = "BoulderGradeID, VGrade, FontGrade"

        try:
            query = self._client.table(table).select(columns)
            if min_grade_id is not None:
                query = query.gte(id_column, min_grade_id)
            result = query.order(id_column).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch {table}: {e}") from e

        return parse_rows(result.data, lambda row: row_to_grade(row, family), table)
