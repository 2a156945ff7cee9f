"""
Supabase Exercise, Wellness and Profile Repository Implementations.

Reads the ExerciseLogs, Profiles, WellnessLog, Users and CoachTrainees tables.
"""
from typing import Optional, List, Sequence
import logging

from supabase import Client

from application.exceptions import RepositoryError
from domain.converters import row_to_athlete, row_to_exercise_log, row_to_wellness
from domain.models import AthleteRef, ExerciseLogEntry, UserRole, WellnessEntry
from infrastructure.db.rows import parse_rows

logger = logging.getLogger(__name__)

EXERCISE_LOG_COLUMNS = (
    "ExerciseLogID, ExerciseID, HandSide, WeightKG, RepsDone, DurationSec, RPE, CreatedAt, "
    "Exercises!exerciselogs_ExerciseID_fkey(ExerciseID, Name, Category, IsSingleHand, isDuration)"
)


class SupabaseExerciseLogRepository:
    """Supabase implementation of ExerciseLogRepository."""

    def __init__(self, client: Client):
        self._client = client

    def list_completed_logs(
        self,
        owner: str,
        *,
        since: str,
        until: str,
    ) -> List[ExerciseLogEntry]:
        """Get completed exercise sets in [since, until], oldest first."""
        try:
            result = self._client.table("ExerciseLogs") \
                .select(EXERCISE_LOG_COLUMNS) \
                .eq("Email", owner) \
                .gte("CreatedAt", since) \
                .lte("CreatedAt", until) \
                .eq("Completed", True) \
                .order("CreatedAt") \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch exercise logs: {e}") from e

        return parse_rows(result.data, row_to_exercise_log, "ExerciseLogs")

    def get_body_weight(self, owner: str) -> Optional[float]:
        """Get the owner's body weight in KG from their profile."""
        try:
            result = self._client.table("Profiles") \
                .select("BodyWeightKG") \
                .eq("Email", owner) \
                .maybe_single() \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch profile: {e}") from e

        if result is None or not result.data:
            return None
        return result.data.get("BodyWeightKG")


class SupabaseWellnessRepository:
    """Supabase implementation of WellnessRepository."""

    def __init__(self, client: Client):
        self._client = client

    def list_entries(
        self,
        owners: Sequence[str],
        *,
        since: str,
        until: Optional[str] = None,
    ) -> List[WellnessEntry]:
        """Get wellness entries of one or more owners, oldest first."""
        if not owners:
            return []

        try:
            query = self._client.table("WellnessLog") \
                .select("Email, Date, SleepHours, VitalityLevel, PainLevel") \
                .in_("Email", list(owners)) \
                .gte("Date", since)
            if until:
                query = query.lte("Date", until)
            result = query.order("Date").execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch wellness log: {e}") from e

        return parse_rows(result.data, row_to_wellness, "WellnessLog")


class SupabaseProfileRepository:
    """Supabase implementation of ProfileRepository."""

    def __init__(self, client: Client):
        self._client = client

    def get_athlete(self, owner: str) -> Optional[AthleteRef]:
        """Get a single athlete by email."""
        try:
            result = self._client.table("Users") \
                .select("Email, Name, Role") \
                .eq("Email", owner) \
                .maybe_single() \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch user: {e}") from e

        if result is None or not result.data:
            return None
        return row_to_athlete(result.data)

    def list_athletes(self, owners: Sequence[str]) -> List[AthleteRef]:
        """Get athletes by email, ordered by name."""
        if not owners:
            return []

        try:
            result = self._client.table("Users") \
                .select("Email, Name, Role") \
                .in_("Email", list(owners)) \
                .order("Name") \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch users: {e}") from e

        return parse_rows(result.data, row_to_athlete, "Users")

    def list_user_owners(self) -> List[str]:
        """Get the emails of every account with the plain user role."""
        try:
            result = self._client.table("Users") \
                .select("Email") \
                .eq("Role", UserRole.USER.value) \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch users: {e}") from e

        return [row["Email"] for row in result.data or [] if row.get("Email")]

    def list_trainee_owners(self, coach: str) -> List[str]:
        """Get the emails of a coach's active trainees."""
        try:
            result = self._client.table("CoachTrainees") \
                .select("TraineeEmail") \
                .eq("CoachEmail", coach) \
                .eq("Active", True) \
                .eq("Status", "active") \
                .execute()
        except Exception as e:
            raise RepositoryError(f"Failed to fetch trainees of {coach}: {e}") from e

        return [row["TraineeEmail"] for row in result.data or [] if row.get("TraineeEmail")]
