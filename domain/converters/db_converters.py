"""
Converters: Supabase rows -> domain models.

Rows arrive with the original PascalCase column names. Everything the
aggregation layer consumes is parsed here, so malformed values are either
normalized (attempts default, unknown RPE) or rejected with a ValueError
before reaching the core.

Tables read:
- ClimbingLog: ClimbingLogID, Email, ClimbType, GradeID, Attempts,
  Successful, LogDateTime, RouteName, Notes
- BoulderGrades: BoulderGradeID, VGrade, FontGrade
- LeadGrades: LeadGradeID, FrenchGrade, YosemiteGrade
- Calendar: CalendarID, Email, WorkoutID, StartTime, EndTime, Completed,
  RPE, Deloading, DeloadingPercentage, Workouts(Name)
- BoulderGoals / BoardGoals / LeadGoals: Email, Year, Quarter, <grade columns>
- ExerciseLogs: ExerciseID, HandSide, WeightKG, RepsDone, DurationSec, RPE,
  CreatedAt, Exercises(Name, Category, IsSingleHand, isDuration)
- WellnessLog: Email, Date, SleepHours, VitalityLevel, PainLevel
- Users: Email, Name, Role
"""

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, Optional

from domain.models import (
    AthleteRef,
    CalendarSession,
    ClimbingLogEntry,
    ClimbType,
    ExerciseLogEntry,
    GradeDefinition,
    GradeFamily,
    HandSide,
    QuarterlyGoal,
    UserRole,
    WellnessEntry,
    goal_columns_for,
)

logger = logging.getLogger(__name__)

# PostgREST trims trailing zeros from fractional seconds
_FRACTION = re.compile(r"\.(\d+)")


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _parse_date(value: Any) -> Optional[date]:
    """Parse a date column that may also be stored as a timestamp."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _embedded(row: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return an embedded resource, which PostgREST may return as object or list."""
    value = row.get(key)
    if isinstance(value, list):
        return value[0] if value else {}
    return value or {}


def _parse_rpe(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        rpe = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric RPE value: {value!r}")
        return None
    if not 1 <= rpe <= 10:
        logger.warning(f"Ignoring RPE outside 1-10: {rpe}")
        return None
    return rpe


def row_to_climbing_log(row: Dict[str, Any]) -> ClimbingLogEntry:
    """
    Convert a ClimbingLog row to a ClimbingLogEntry.

    A missing or zero Attempts value counts as a single attempt.

    Raises:
        ValueError: If ClimbType is not Boulder, Board or Lead.
    """
    return ClimbingLogEntry(
        log_id=row.get("ClimbingLogID"),
        owner=row.get("Email") or "",
        climb_type=ClimbType(row.get("ClimbType")),
        grade_id=row.get("GradeID"),
        attempts=row.get("Attempts") or 1,
        successful=bool(row.get("Successful")),
        logged_at=_parse_datetime(row.get("LogDateTime")),
        route_name=row.get("RouteName"),
        notes=row.get("Notes"),
    )


def row_to_grade(row: Dict[str, Any], family: GradeFamily) -> GradeDefinition:
    """Convert a BoulderGrades or LeadGrades row to a GradeDefinition."""
    if family == GradeFamily.LEAD:
        return GradeDefinition(
            family=family,
            grade_id=row["LeadGradeID"],
            label=row.get("FrenchGrade") or "",
            alt_label=row.get("YosemiteGrade"),
        )
    return GradeDefinition(
        family=family,
        grade_id=row["BoulderGradeID"],
        label=row.get("VGrade") or "",
        alt_label=row.get("FontGrade"),
    )


def row_to_calendar_session(row: Dict[str, Any]) -> CalendarSession:
    """
    Convert a Calendar row (optionally joined with Workouts) to a CalendarSession.

    Raises:
        ValueError: If StartTime is missing or unparseable.
    """
    start_time = _parse_datetime(row.get("StartTime"))
    if start_time is None:
        raise ValueError(f"Calendar row {row.get('CalendarID')} has no valid StartTime")

    workout = _embedded(row, "Workouts")
    deload = bool(row.get("Deloading"))

    return CalendarSession(
        session_id=row["CalendarID"],
        owner=row.get("Email") or "",
        workout_id=row.get("WorkoutID"),
        workout_name=workout.get("Name"),
        start_time=start_time,
        end_time=_parse_datetime(row.get("EndTime")),
        completed=bool(row.get("Completed")),
        rpe=_parse_rpe(row.get("RPE")),
        deload=deload,
        deload_percentage=row.get("DeloadingPercentage"),
    )


def row_to_quarterly_goal(row: Dict[str, Any], climb_type: ClimbType) -> QuarterlyGoal:
    """
    Convert a goals row to a QuarterlyGoal.

    Only the grade columns of the row's climb type are kept; bookkeeping
    columns (ids, Email, timestamps) are dropped. Null columns mean no goal.

    Raises:
        ValueError: If a grade column holds a non-integer or negative value.
    """
    targets: Dict[str, int] = {}
    for column in goal_columns_for(climb_type):
        value = row.get(column)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or int(value) != value:
            raise ValueError(f"Goal column {column} must be an integer, got {value!r}")
        targets[column] = int(value)

    return QuarterlyGoal(
        owner=row.get("Email") or "",
        year=row["Year"],
        quarter=row["Quarter"],
        climb_type=climb_type,
        targets=targets,
    )


def row_to_exercise_log(row: Dict[str, Any]) -> Optional[ExerciseLogEntry]:
    """
    Convert an ExerciseLogs row joined with Exercises to an ExerciseLogEntry.

    Returns None when the joined exercise is missing (deleted exercise).
    """
    exercise = _embedded(row, "Exercises")
    if not exercise:
        return None

    exercise_id = row["ExerciseID"]
    hand_side = row.get("HandSide")

    return ExerciseLogEntry(
        exercise_id=exercise_id,
        exercise_name=exercise.get("Name") or f"Exercise {exercise_id}",
        category=exercise.get("Category") or "Other",
        is_single_hand=bool(exercise.get("IsSingleHand")),
        is_duration=bool(exercise.get("isDuration")),
        hand_side=HandSide(hand_side) if hand_side in {h.value for h in HandSide} else None,
        weight_kg=row.get("WeightKG"),
        reps_done=row.get("RepsDone"),
        duration_sec=row.get("DurationSec"),
        rpe=_parse_rpe(row.get("RPE")),
        created_at=_parse_datetime(row.get("CreatedAt")),
    )


def row_to_wellness(row: Dict[str, Any]) -> WellnessEntry:
    """
    Convert a WellnessLog row to a WellnessEntry.

    Raises:
        ValueError: If Date is missing or unparseable.
    """
    entry_date = _parse_date(row.get("Date"))
    if entry_date is None:
        raise ValueError(f"Wellness row has no valid Date: {row.get('Date')!r}")

    return WellnessEntry(
        owner=row.get("Email") or "",
        entry_date=entry_date,
        sleep_hours=row.get("SleepHours"),
        vitality_level=row.get("VitalityLevel"),
        pain_level=row.get("PainLevel"),
    )


def row_to_athlete(row: Dict[str, Any]) -> AthleteRef:
    """Convert a Users row to an AthleteRef. Unknown roles read as plain users."""
    email = row["Email"]
    try:
        role = UserRole(row.get("Role") or UserRole.USER.value)
    except ValueError:
        logger.warning(f"Unknown role {row.get('Role')!r} for {email}, treating as user")
        role = UserRole.USER
    return AthleteRef(owner=email, name=row.get("Name") or email, role=role)
