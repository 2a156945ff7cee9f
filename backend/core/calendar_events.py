"""
Calendar event states and deload windows.

Event state is derived on every read from the session's attributes; it is
never stored. Precedence is fixed:

1. deload     -> completed-deload / pending-deload (dates ignored)
2. completed  -> completed
3. today      -> today-pending
4. past       -> missed
5. otherwise  -> future-pending

Deload windows are applied and cleared with a single bulk update over
every session of the owner that starts inside the normalized day range.
"""
from typing import Optional, List, Dict
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
import logging

from application.exceptions import RepositoryError
from application.ports import CalendarRepository
from backend.core.date_windows import normalize_day_range
from domain.models import CalendarSession, EventColor, EventState

logger = logging.getLogger(__name__)


EVENT_PALETTE: Dict[EventState, EventColor] = {
    EventState.COMPLETED_DELOAD: EventColor(bg="#b7f7b3", text="#1a1a1a"),
    EventState.PENDING_DELOAD: EventColor(bg="#cce9ff", text="#1a1a1a"),
    EventState.COMPLETED: EventColor(bg="rgb(34 197 94)", text="white"),
    EventState.TODAY_PENDING: EventColor(bg="rgb(251 191 36)", text="#1a1a1a"),
    EventState.MISSED: EventColor(bg="rgb(239 68 68)", text="white"),
    EventState.FUTURE_PENDING: EventColor(bg="rgb(37 99 235)", text="white"),
}


def derive_event_state(session: CalendarSession, now: datetime) -> EventState:
    """
    Derive the display state of a session at evaluation time `now`.

    When both `now` and the session start are timezone-aware, "today" is
    judged in `now`'s timezone.
    """
    if session.deload:
        if session.completed:
            return EventState.COMPLETED_DELOAD
        return EventState.PENDING_DELOAD

    if session.completed:
        return EventState.COMPLETED

    start = session.start_time
    if start.tzinfo is not None and now.tzinfo is not None:
        start = start.astimezone(now.tzinfo)
    elif start.tzinfo is not None:
        start = start.replace(tzinfo=None)
    elif now.tzinfo is not None:
        now = now.replace(tzinfo=None)

    if start.date() == now.date():
        return EventState.TODAY_PENDING
    if start < now:
        return EventState.MISSED
    return EventState.FUTURE_PENDING


def event_color(state: EventState) -> EventColor:
    """Fixed background/text colors for a state."""
    return EVENT_PALETTE[state]


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class DeloadResult:
    """Outcome of a deload bulk update. Failures carry the error message."""
    success: bool
    error: Optional[str] = None


@dataclass
class CalendarEvent:
    """A session with its derived state and colors."""
    session: CalendarSession
    state: EventState
    color: EventColor


# =============================================================================
# Services
# =============================================================================


class DeloadService:
    """
    Applies and clears deload windows.

    The percentage is stored as given; callers validate it to 1-100.
    Concurrent updates of overlapping ranges are last-write-wins.
    """

    def __init__(self, calendar_repo: CalendarRepository, tz: tzinfo):
        """
        Initialize the deload service.

        Args:
            calendar_repo: Repository for calendar sessions
            tz: Timezone used to find the start and end of each day
        """
        self._calendar_repo = calendar_repo
        self._tz = tz

    def apply_deload(
        self,
        owner: str,
        start_date: date,
        end_date: date,
        percentage: int,
    ) -> DeloadResult:
        """Mark every session in [start_date, end_date] as a deload at `percentage`."""
        return self._update(owner, start_date, end_date, deload=True, percentage=percentage)

    def clear_deload(self, owner: str, start_date: date, end_date: date) -> DeloadResult:
        """Remove the deload flag and percentage from every session in range."""
        return self._update(owner, start_date, end_date, deload=False, percentage=None)

    def _update(
        self,
        owner: str,
        start_date: date,
        end_date: date,
        *,
        deload: bool,
        percentage: Optional[int],
    ) -> DeloadResult:
        start, end = normalize_day_range(start_date, end_date, self._tz)

        try:
            self._calendar_repo.set_deload(
                owner,
                since=start.isoformat(timespec="milliseconds"),
                until=end.isoformat(timespec="milliseconds"),
                deload=deload,
                percentage=percentage,
            )
        except RepositoryError as e:
            action = "applying" if deload else "clearing"
            logger.error(f"Error {action} deload for {owner}: {e}")
            return DeloadResult(success=False, error=str(e))

        return DeloadResult(success=True)


class CalendarEventService:
    """Lists an owner's sessions with their derived display state."""

    def __init__(self, calendar_repo: CalendarRepository, tz: tzinfo):
        self._calendar_repo = calendar_repo
        self._tz = tz

    def list_events(
        self,
        owner: str,
        start_date: date,
        end_date: date,
        now: Optional[datetime] = None,
    ) -> List[CalendarEvent]:
        """Sessions in [start_date, end_date], oldest first, with state and color."""
        now = now or datetime.now(self._tz)
        start, end = normalize_day_range(start_date, end_date, self._tz)

        try:
            sessions = self._calendar_repo.list_sessions(
                owner,
                since=start.isoformat(timespec="milliseconds"),
                until=end.isoformat(timespec="milliseconds"),
            )
        except RepositoryError as e:
            logger.error(f"Error fetching calendar events for {owner}: {e}")
            return []

        events = []
        for session in sorted(sessions, key=lambda s: s.start_time):
            state = derive_event_state(session, now)
            events.append(CalendarEvent(session=session, state=state, color=event_color(state)))
        return events
