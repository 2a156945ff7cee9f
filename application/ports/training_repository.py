"""
Exercise, Wellness and Profile Repository Interfaces (Ports).

Data sources for exercise analytics, athlete profile metrics and
urgency triage.
"""
from typing import Protocol, Optional, List, Sequence

from domain.models import AthleteRef, ExerciseLogEntry, WellnessEntry


class ExerciseLogRepository(Protocol):
    """Abstract interface for exercise log data access."""

    def list_completed_logs(
        self,
        owner: str,
        *,
        since: str,
        until: str,
    ) -> List[ExerciseLogEntry]:
        """
        Get completed exercise sets in [since, until], oldest first.

        Rows whose exercise no longer exists are skipped.

        Raises:
            RepositoryError: If the backend call fails
        """
        ...

    def get_body_weight(self, owner: str) -> Optional[float]:
        """
        Get the owner's body weight in KG from their profile.

        Returns:
            Body weight, or None if the profile has none

        Raises:
            RepositoryError: If the backend call fails
        """
        ...


class WellnessRepository(Protocol):
    """Abstract interface for wellness log data access."""

    def list_entries(
        self,
        owners: Sequence[str],
        *,
        since: str,
        until: Optional[str] = None,
    ) -> List[WellnessEntry]:
        """
        Get wellness entries of one or more owners, oldest first.

        Args:
            owners: Owner identities (emails)
            since: Inclusive lower bound on Date (ISO string)
            until: Inclusive upper bound on Date, or None for open-ended

        Raises:
            RepositoryError: If the backend call fails
        """
        ...


class ProfileRepository(Protocol):
    """Abstract interface for athlete identity lookups."""

    def get_athlete(self, owner: str) -> Optional[AthleteRef]:
        """
        Get a single athlete by email.

        Returns:
            AthleteRef or None if the user does not exist

        Raises:
            RepositoryError: If the backend call fails
        """
        ...

    def list_athletes(self, owners: Sequence[str]) -> List[AthleteRef]:
        """
        Get athletes by email, ordered by name. Unknown emails are omitted.

        Raises:
            RepositoryError: If the backend call fails
        """
        ...

    def list_user_owners(self) -> List[str]:
        """
        Get the emails of every account with the plain user role.

        Raises:
            RepositoryError: If the backend call fails
        """
        ...

    def list_trainee_owners(self, coach: str) -> List[str]:
        """
        Get the emails of a coach's active trainees.

        Args:
            coach: The coach's email

        Raises:
            RepositoryError: If the backend call fails
        """
        ...
