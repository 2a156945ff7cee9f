"""
Athlete urgency triage.

Flags each athlete on recent activity and on a seven day average of sleep,
vitality and pain, then ranks a roster so the athletes needing attention
come first.

Flag thresholds:
- sleep:    < 6 red, < 8 yellow, otherwise green
- vitality: < 5 red, < 7 yellow, otherwise green
- pain:     > 4 critical, > 3 red, > 2 yellow, otherwise green
- activity: no completed session in 7 days red, none in 4 days yellow
"""
from typing import Optional, List, Dict, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
import logging

from application.exceptions import PermissionDeniedError, RepositoryError
from application.ports import CalendarRepository, ProfileRepository, WellnessRepository
from domain.models import CalendarSession, UserRole, WellnessEntry

logger = logging.getLogger(__name__)

LOOKBACK_DAYS = 7
RECENT_ACTIVITY_DAYS = 4


class FlagType(str, Enum):
    CRITICAL = "critical"
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"


class FlagCategory(str, Enum):
    SLEEP = "sleep"
    VITALITY = "vitality"
    PAIN = "pain"
    ACTIVITY = "activity"


class UrgencyLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


FLAG_SCORES = {
    FlagType.CRITICAL: 100,
    FlagType.RED: 50,
    FlagType.YELLOW: 25,
    FlagType.GREEN: 0,
}

LEVEL_ORDER = {
    UrgencyLevel.CRITICAL: 0,
    UrgencyLevel.HIGH: 1,
    UrgencyLevel.MEDIUM: 2,
    UrgencyLevel.LOW: 3,
}


@dataclass
class AverageResult:
    average: float
    days_reported: int


@dataclass
class UrgencyFlag:
    type: FlagType
    category: FlagCategory
    message: str
    average: Optional[float] = None
    days_reported: Optional[int] = None


@dataclass
class AthleteUrgency:
    """Triage result of one athlete."""
    owner: str
    name: str
    flags: List[UrgencyFlag] = field(default_factory=list)
    urgency_score: int = 0
    urgency_level: UrgencyLevel = UrgencyLevel.LOW
    last_workout: Optional[datetime] = None


# =============================================================================
# Averages
# =============================================================================


def _average(values: List[float]) -> Optional[AverageResult]:
    if not values:
        return None
    return AverageResult(average=sum(values) / len(values), days_reported=len(values))


def sleep_average(entries: Sequence[WellnessEntry]) -> Optional[AverageResult]:
    """Mean sleep over days that reported it. Zero means not reported."""
    return _average([e.sleep_hours for e in entries if e.sleep_hours])


def vitality_average(entries: Sequence[WellnessEntry]) -> Optional[AverageResult]:
    """Mean vitality over days that reported it. Zero means not reported."""
    return _average([e.vitality_level for e in entries if e.vitality_level])


def pain_average(entries: Sequence[WellnessEntry]) -> Optional[AverageResult]:
    """Mean pain over days that reported it. Zero is a real "no pain" value."""
    return _average([e.pain_level for e in entries if e.pain_level is not None])


# =============================================================================
# Flags
# =============================================================================


def sleep_flag(avg: AverageResult) -> UrgencyFlag:
    if avg.average < 6:
        flag_type = FlagType.RED
    elif avg.average < 8:
        flag_type = FlagType.YELLOW
    else:
        flag_type = FlagType.GREEN
    return UrgencyFlag(
        type=flag_type,
        category=FlagCategory.SLEEP,
        message=f"Sleep: {avg.average:.1f}h ({avg.days_reported} days)",
        average=avg.average,
        days_reported=avg.days_reported,
    )


def vitality_flag(avg: AverageResult) -> UrgencyFlag:
    if avg.average < 5:
        flag_type = FlagType.RED
    elif avg.average < 7:
        flag_type = FlagType.YELLOW
    else:
        flag_type = FlagType.GREEN
    return UrgencyFlag(
        type=flag_type,
        category=FlagCategory.VITALITY,
        message=f"Vitality: {avg.average:.1f} ({avg.days_reported} days)",
        average=avg.average,
        days_reported=avg.days_reported,
    )


def pain_flag(avg: AverageResult) -> UrgencyFlag:
    if avg.average > 4:
        flag_type = FlagType.CRITICAL
    elif avg.average > 3:
        flag_type = FlagType.RED
    elif avg.average > 2:
        flag_type = FlagType.YELLOW
    else:
        flag_type = FlagType.GREEN
    return UrgencyFlag(
        type=flag_type,
        category=FlagCategory.PAIN,
        message=f"Pain: {avg.average:.1f} ({avg.days_reported} days)",
        average=avg.average,
        days_reported=avg.days_reported,
    )


def _aligned(value: datetime, reference: datetime) -> datetime:
    """Make `value` comparable with `reference` (both aware or both naive)."""
    if value.tzinfo is not None and reference.tzinfo is None:
        return value.replace(tzinfo=None)
    if value.tzinfo is None and reference.tzinfo is not None:
        return value.replace(tzinfo=reference.tzinfo)
    return value


def activity_flag(
    completed: Sequence[CalendarSession],
    now: datetime,
) -> Optional[UrgencyFlag]:
    """
    Flag missing training.

    `completed` may start at midnight of the day 7 days back; only sessions
    at or after the exact `now - 7 days` instant count as training.

    Returns None when the athlete trained within the last 4 days.
    """
    week_cutoff = now - timedelta(days=LOOKBACK_DAYS)
    completed = [s for s in completed if _aligned(s.start_time, now) >= week_cutoff]
    if not completed:
        return UrgencyFlag(
            type=FlagType.RED,
            category=FlagCategory.ACTIVITY,
            message=f"No training in {LOOKBACK_DAYS} days",
        )

    recent_cutoff = now - timedelta(days=RECENT_ACTIVITY_DAYS)
    if not any(_aligned(s.start_time, now) >= recent_cutoff for s in completed):
        return UrgencyFlag(
            type=FlagType.YELLOW,
            category=FlagCategory.ACTIVITY,
            message=f"No training in {RECENT_ACTIVITY_DAYS} days",
        )
    return None


def urgency_level(flags: Sequence[UrgencyFlag]) -> UrgencyLevel:
    types = {f.type for f in flags}
    if FlagType.CRITICAL in types:
        return UrgencyLevel.CRITICAL
    if FlagType.RED in types:
        return UrgencyLevel.HIGH
    if FlagType.YELLOW in types:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


def urgency_score(flags: Sequence[UrgencyFlag]) -> int:
    return sum(FLAG_SCORES[f.type] for f in flags)


def evaluate_athlete(
    owner: str,
    name: str,
    completed: Sequence[CalendarSession],
    wellness: Sequence[WellnessEntry],
    now: datetime,
) -> AthleteUrgency:
    """Build the flags, score and level of one athlete."""
    flags: List[UrgencyFlag] = []

    activity = activity_flag(completed, now)
    if activity:
        flags.append(activity)

    sleep = sleep_average(wellness)
    if sleep:
        flags.append(sleep_flag(sleep))
    vitality = vitality_average(wellness)
    if vitality:
        flags.append(vitality_flag(vitality))
    pain = pain_average(wellness)
    if pain:
        flags.append(pain_flag(pain))

    last_workout = max((s.start_time for s in completed), default=None)

    return AthleteUrgency(
        owner=owner,
        name=name,
        flags=flags,
        urgency_score=urgency_score(flags),
        urgency_level=urgency_level(flags),
        last_workout=last_workout,
    )


def _sort_key(athlete: AthleteUrgency):
    red = sum(1 for f in athlete.flags if f.type in (FlagType.CRITICAL, FlagType.RED))
    yellow = sum(1 for f in athlete.flags if f.type == FlagType.YELLOW)
    return (-red, -yellow, LEVEL_ORDER[athlete.urgency_level])


def rank_athletes(athletes: Sequence[AthleteUrgency]) -> List[AthleteUrgency]:
    """Most red/critical flags first, then most yellow flags, then level."""
    return sorted(athletes, key=_sort_key)


class UrgencyService:
    """Evaluates a roster of athletes with three batched queries."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        calendar_repo: CalendarRepository,
        wellness_repo: WellnessRepository,
    ):
        self._profile_repo = profile_repo
        self._calendar_repo = calendar_repo
        self._wellness_repo = wellness_repo

    def roster_for(self, viewer: str) -> List[str]:
        """
        Get the athletes `viewer` may triage.

        Admins see every plain user; coaches see their active trainees.

        Raises:
            PermissionDeniedError: If the viewer is not an admin or a coach
            RepositoryError: If the roster cannot be loaded
        """
        account = self._profile_repo.get_athlete(viewer)
        if account is None or account.role == UserRole.USER:
            raise PermissionDeniedError("Only coaches and admins can view athlete urgency")

        if account.role == UserRole.ADMIN:
            return self._profile_repo.list_user_owners()
        return self._profile_repo.list_trainee_owners(viewer)

    def rank_athletes(
        self,
        owners: Sequence[str],
        now: Optional[datetime] = None,
    ) -> List[AthleteUrgency]:
        """
        Rank the given athletes by urgency.

        Args:
            owners: Athlete emails; unknown emails are skipped
            now: Evaluation time (defaults to the current UTC time)

        Returns:
            Ranked athletes, or [] on error
        """
        if not owners:
            return []

        now = now or datetime.now(timezone.utc)
        since = (now - timedelta(days=LOOKBACK_DAYS)).date().isoformat()

        try:
            athletes = self._profile_repo.list_athletes(owners)
            if not athletes:
                return []
            emails = [a.owner for a in athletes]
            sessions = self._calendar_repo.list_completed_since(emails, since)
            wellness = self._wellness_repo.list_entries(emails, since=since)
        except RepositoryError as e:
            logger.error(f"Error loading urgency data for {len(owners)} athletes: {e}")
            return []

        sessions_by_owner: Dict[str, List[CalendarSession]] = {}
        for session in sessions:
            sessions_by_owner.setdefault(session.owner, []).append(session)
        wellness_by_owner: Dict[str, List[WellnessEntry]] = {}
        for entry in wellness:
            wellness_by_owner.setdefault(entry.owner, []).append(entry)

        evaluated = [
            evaluate_athlete(
                athlete.owner,
                athlete.name,
                sessions_by_owner.get(athlete.owner, []),
                wellness_by_owner.get(athlete.owner, []),
                now,
            )
            for athlete in athletes
        ]
        return rank_athletes(evaluated)
