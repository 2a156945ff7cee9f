"""
Athlete profile metrics: workout completion and sleep average over a range.
"""
from typing import Optional
from dataclasses import dataclass
from datetime import date
import logging

from application.exceptions import RepositoryError
from application.ports import CalendarRepository, ProfileRepository, WellnessRepository
from backend.core.date_windows import day_window

logger = logging.getLogger(__name__)


@dataclass
class ProfileMetrics:
    user_name: str
    total_workouts: int
    completed_workouts: int
    workout_completion: float
    sleep_average: float
    sleep_days_reported: int


class AthleteProfileService:
    """Summarizes one athlete's training consistency and sleep."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        calendar_repo: CalendarRepository,
        wellness_repo: WellnessRepository,
    ):
        self._profile_repo = profile_repo
        self._calendar_repo = calendar_repo
        self._wellness_repo = wellness_repo

    def get_metrics(
        self,
        owner: str,
        start_date: date,
        end_date: date,
    ) -> Optional[ProfileMetrics]:
        """
        Get profile metrics for [start_date, end_date].

        Returns None for an unknown athlete. Calendar and wellness failures
        are logged and counted as zero.

        Raises:
            RepositoryError: If the athlete lookup itself fails
        """
        athlete = self._profile_repo.get_athlete(owner)
        if athlete is None:
            return None

        since, until = day_window(start_date, end_date)

        try:
            sessions = self._calendar_repo.list_sessions(owner, since=since, until=until)
        except RepositoryError as e:
            logger.warning(f"Error fetching workouts for {owner}: {e}")
            sessions = []

        try:
            wellness = self._wellness_repo.list_entries([owner], since=since, until=until)
        except RepositoryError as e:
            logger.warning(f"Error fetching wellness data for {owner}: {e}")
            wellness = []

        total = len(sessions)
        completed = sum(1 for s in sessions if s.completed)
        sleep = [e.sleep_hours for e in wellness if e.sleep_hours is not None and e.sleep_hours > 0]

        return ProfileMetrics(
            user_name=athlete.name,
            total_workouts=total,
            completed_workouts=completed,
            workout_completion=(completed / total) * 100 if total > 0 else 0,
            sleep_average=sum(sleep) / len(sleep) if sleep else 0,
            sleep_days_reported=len(sleep),
        )
