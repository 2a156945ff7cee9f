"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_with() to simulate transport failures
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeClimbingLogRepository, create_climbing_repo

    # Direct instantiation
    repo = FakeClimbingLogRepository()
    repo.seed([ClimbingLogEntry(owner="a@example.com", climb_type=ClimbType.LEAD)])

    # Factory function with grade tables pre-populated
    repo = create_climbing_repo()
"""
from datetime import datetime
from typing import Optional, List

from domain.models import (
    CalendarSession,
    ClimbingLogEntry,
    ClimbType,
)

# Import all fake implementations
from tests.fakes.climbing_repository import (
    FakeClimbingLogRepository,
    boulder_grades,
    lead_grades,
)
from tests.fakes.calendar_repository import FakeCalendarRepository
from tests.fakes.goals_repository import FakeGoalsRepository
from tests.fakes.training_repository import (
    FakeExerciseLogRepository,
    FakeWellnessRepository,
    FakeProfileRepository,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_climbing_repo(
    logs: Optional[List[ClimbingLogEntry]] = None,
) -> FakeClimbingLogRepository:
    """
    Create a FakeClimbingLogRepository with both grade tables seeded.

    Args:
        logs: Optional climbing logs to seed

    Returns:
        Pre-populated FakeClimbingLogRepository
    """
    repo = FakeClimbingLogRepository()
    repo.seed_grades(boulder_grades())
    repo.seed_grades(lead_grades())
    if logs:
        repo.seed(logs)
    return repo


def make_climb(
    owner: str,
    climb_type: ClimbType,
    grade_id: Optional[int],
    *,
    successful: bool = True,
    attempts: int = 1,
    logged_at: datetime = datetime(2024, 1, 15, 18, 0),
) -> ClimbingLogEntry:
    """Build a climbing log entry with sensible defaults."""
    return ClimbingLogEntry(
        owner=owner,
        climb_type=climb_type,
        grade_id=grade_id,
        successful=successful,
        attempts=attempts,
        logged_at=logged_at,
    )


_next_session_id = 0


def make_session(
    owner: str,
    start_time: datetime,
    *,
    workout_id: Optional[int] = 1,
    workout_name: Optional[str] = "Strength",
    completed: bool = False,
    rpe: Optional[int] = None,
    deload: bool = False,
    deload_percentage: Optional[int] = None,
    session_id: Optional[int] = None,
) -> CalendarSession:
    """Build a calendar session; ids are assigned sequentially when omitted."""
    global _next_session_id
    if session_id is None:
        _next_session_id += 1
        session_id = _next_session_id
    return CalendarSession(
        session_id=session_id,
        owner=owner,
        workout_id=workout_id,
        workout_name=workout_name,
        start_time=start_time,
        completed=completed,
        rpe=rpe,
        deload=deload,
        deload_percentage=deload_percentage,
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake repositories
    "FakeClimbingLogRepository",
    "FakeCalendarRepository",
    "FakeGoalsRepository",
    "FakeExerciseLogRepository",
    "FakeWellnessRepository",
    "FakeProfileRepository",
    # Grade tables
    "boulder_grades",
    "lead_grades",
    # Factory functions
    "create_climbing_repo",
    "make_climb",
    "make_session",
]
