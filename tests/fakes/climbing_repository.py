"""
Fake Climbing Log Repository for Testing.

In-memory implementation of ClimbingLogRepository for fast, isolated testing.
"""
from typing import Optional, List, Dict, Any, Sequence

from domain.models import ClimbingLogEntry, ClimbType, GradeDefinition, GradeFamily


def _in_window(entry: ClimbingLogEntry, since: Optional[str], until: Optional[str]) -> bool:
    # ISO strings compare like the PostgREST timestamp filters they stand in for
    if since is None and until is None:
        return True
    if entry.logged_at is None:
        return False
    stamp = entry.logged_at.isoformat()
    if since is not None and stamp < since:
        return False
    if until is not None and stamp > until:
        return False
    return True


class FakeClimbingLogRepository:
    """
    In-memory fake implementation of ClimbingLogRepository.

    Every list_logs call is recorded in `calls` so tests can assert the
    filters a service pushed down.
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._logs: List[ClimbingLogEntry] = []
        self._grades: Dict[GradeFamily, List[GradeDefinition]] = {}
        self._error: Optional[Exception] = None
        self.calls: List[Dict[str, Any]] = []

    def reset(self) -> None:
        """Clear all stored data."""
        self._logs.clear()
        self._grades.clear()
        self._error = None
        self.calls.clear()

    def seed(self, logs: List[ClimbingLogEntry]) -> None:
        """Seed the repository with climbing logs."""
        self._logs.extend(logs)

    def seed_grades(self, grades: List[GradeDefinition]) -> None:
        """Seed grade definitions; each is filed under its own family."""
        for grade in grades:
            self._grades.setdefault(grade.family, []).append(grade)

    def fail_with(self, error: Optional[Exception]) -> None:
        """Make every subsequent call raise `error` (None to stop failing)."""
        self._error = error

    def _check(self) -> None:
        if self._error is not None:
            raise self._error

    # =========================================================================
    # Protocol Methods
    # =========================================================================

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
        self.calls.append({
            "owner": owner,
            "since": since,
            "until": until,
            "climb_types": list(climb_types) if climb_types else None,
            "successful": successful,
            "min_grade_id": min_grade_id,
            "max_grade_id": max_grade_id,
        })
        self._check()

        results = []
        for entry in self._logs:
            if entry.owner != owner:
                continue
            if not _in_window(entry, since, until):
                continue
            if climb_types and entry.climb_type not in climb_types:
                continue
            if successful is not None and entry.successful != successful:
                continue
            if min_grade_id is not None and (entry.grade_id is None or entry.grade_id < min_grade_id):
                continue
            if max_grade_id is not None and (entry.grade_id is None or entry.grade_id > max_grade_id):
                continue
            results.append(entry)

        results.sort(key=lambda e: e.logged_at.isoformat() if e.logged_at else "", reverse=True)
        return results

    def list_grades(
        self,
        family: GradeFamily,
        *,
        min_grade_id: Optional[int] = None,
    ) -> List[GradeDefinition]:
        """Get the grade definitions of a family ordered by grade id."""
        self._check()
        grades = [
            g for g in self._grades.get(family, [])
            if min_grade_id is None or g.grade_id >= min_grade_id
        ]
        return sorted(grades, key=lambda g: g.grade_id)


def boulder_grades(count: int = 18) -> List[GradeDefinition]:
    """V0..V{count-1} boulder grade definitions."""
    return [
        GradeDefinition(family=GradeFamily.BOULDER, grade_id=i, label=f"V{i}")
        for i in range(count)
    ]


def lead_grades() -> List[GradeDefinition]:
    """Lead grades with ids 1..7 below 5c and the goal columns from id 8."""
    labels = ["4a", "4b", "4c", "5a", "5b", "5b+", "5c-", "5c", "6a", "6a+", "6b", "6b+", "6c"]
    return [
        GradeDefinition(family=GradeFamily.LEAD, grade_id=i + 1, label=label)
        for i, label in enumerate(labels)
    ]
