"""
Tests for the Supabase repository implementations.

The Supabase client is replaced with a MagicMock whose query builder
methods return the builder itself, so each test can assert the filters a
repository pushes down and feed back canned rows.
"""
import pytest
from unittest.mock import MagicMock

from application.exceptions import RepositoryError
from domain.models import ClimbType, GradeFamily, UserRole

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def make_client(data=None, error=None):
    """Build a mock client whose table() query chain returns `data`."""
    query = MagicMock()
    for method in ("select", "eq", "gte", "lte", "in_", "is_", "order", "update", "maybe_single"):
        getattr(query, method).return_value = query
    query.not_ = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=data)

    client = MagicMock()
    client.table.return_value = query
    return client, query


# ============================================================================
# Imports & construction
# ============================================================================


class TestRepositoryImports:
    """Test that all repository classes can be imported."""

    def test_import_from_infrastructure_package(self):
        from infrastructure import (
            SupabaseCalendarRepository,
            SupabaseClimbingLogRepository,
            SupabaseExerciseLogRepository,
            SupabaseGoalsRepository,
            SupabaseProfileRepository,
            SupabaseWellnessRepository,
        )
        assert all([
            SupabaseCalendarRepository,
            SupabaseClimbingLogRepository,
            SupabaseExerciseLogRepository,
            SupabaseGoalsRepository,
            SupabaseProfileRepository,
            SupabaseWellnessRepository,
        ])

    def test_client_injected(self):
        from infrastructure import SupabaseClimbingLogRepository

        client = MagicMock()
        assert SupabaseClimbingLogRepository(client)._client is client


# ============================================================================
# Climbing
# ============================================================================


class TestSupabaseClimbingLogRepository:

    def test_list_logs_pushes_filters(self):
        from infrastructure import SupabaseClimbingLogRepository

        client, query = make_client([
            {"ClimbingLogID": 1, "Email": "a@example.com", "ClimbType": "Lead", "GradeID": 9,
             "Attempts": 2, "Successful": True, "LogDateTime": "2024-01-15T18:00:00"},
        ])
        repo = SupabaseClimbingLogRepository(client)

        logs = repo.list_logs(
            "a@example.com",
            since="2024-01-01",
            until="2024-03-31T23:59:59.999",
            climb_types=[ClimbType.LEAD],
            successful=True,
        )

        client.table.assert_called_with("ClimbingLog")
        query.eq.assert_any_call("Email", "a@example.com")
        query.eq.assert_any_call("ClimbType", "Lead")
        query.eq.assert_any_call("Successful", True)
        query.gte.assert_any_call("LogDateTime", "2024-01-01")
        query.lte.assert_any_call("LogDateTime", "2024-03-31T23:59:59.999")
        query.order.assert_called_with("LogDateTime", desc=True)
        assert len(logs) == 1
        assert logs[0].grade_id == 9

    def test_several_climb_types_use_in(self):
        from infrastructure import SupabaseClimbingLogRepository

        client, query = make_client([])
        SupabaseClimbingLogRepository(client).list_logs(
            "a@example.com", climb_types=[ClimbType.BOULDER, ClimbType.BOARD]
        )

        query.in_.assert_called_once_with("ClimbType", ["Boulder", "Board"])

    def test_malformed_rows_skipped(self):
        from infrastructure import SupabaseClimbingLogRepository

        client, _ = make_client([
            {"Email": "a@example.com", "ClimbType": "Sport"},
            {"Email": "a@example.com", "ClimbType": "Boulder", "GradeID": 3},
        ])

        logs = SupabaseClimbingLogRepository(client).list_logs("a@example.com")

        assert [log.grade_id for log in logs] == [3]

    def test_transport_error_wrapped(self):
        from infrastructure import SupabaseClimbingLogRepository

        client, _ = make_client(error=ConnectionError("reset"))

        with pytest.raises(RepositoryError):
            SupabaseClimbingLogRepository(client).list_logs("a@example.com")

    def test_lead_grades_floor(self):
        from infrastructure import SupabaseClimbingLogRepository

        client, query = make_client([{"LeadGradeID": 8, "FrenchGrade": "5c"}])

        grades = SupabaseClimbingLogRepository(client).list_grades(GradeFamily.LEAD, min_grade_id=8)

        client.table.assert_called_with("LeadGrades")
        query.gte.assert_called_once_with("LeadGradeID", 8)
        assert grades[0].label == "5c"


# ============================================================================
# Calendar
# ============================================================================


class TestSupabaseCalendarRepository:

    def test_set_deload_bulk_update(self):
        from infrastructure import SupabaseCalendarRepository

        client, query = make_client([])

        SupabaseCalendarRepository(client).set_deload(
            "a@example.com",
            since="2024-03-04T00:00:00.000+00:00",
            until="2024-03-10T23:59:59.999+00:00",
            deload=True,
            percentage=60,
        )

        query.update.assert_called_once_with({"Deloading": True, "DeloadingPercentage": 60})
        query.gte.assert_called_once_with("StartTime", "2024-03-04T00:00:00.000+00:00")
        query.lte.assert_called_once_with("StartTime", "2024-03-10T23:59:59.999+00:00")

    def test_set_deload_failure(self):
        from infrastructure import SupabaseCalendarRepository

        client, _ = make_client(error=RuntimeError("permission denied"))

        with pytest.raises(RepositoryError, match="permission denied"):
            SupabaseCalendarRepository(client).set_deload(
                "a@example.com", since="x", until="y", deload=False, percentage=None
            )

    def test_list_sessions_parses_joined_workout(self):
        from infrastructure import SupabaseCalendarRepository

        client, query = make_client([
            {"CalendarID": 1, "Email": "a@example.com", "WorkoutID": 2,
             "StartTime": "2024-03-04T09:00:00", "Workouts": {"Name": "Legs"}},
        ])

        sessions = SupabaseCalendarRepository(client).list_sessions(
            "a@example.com", since="2024-03-01", until="2024-03-31T23:59:59.999", workouts_only=True
        )

        query.is_.assert_called_once_with("WorkoutID", "null")
        assert sessions[0].workout_name == "Legs"

    def test_list_completed_since_without_owners(self):
        from infrastructure import SupabaseCalendarRepository

        client, _ = make_client([])

        assert SupabaseCalendarRepository(client).list_completed_since([], "2024-03-08") == []
        client.table.assert_not_called()


# ============================================================================
# Goals
# ============================================================================


class TestSupabaseGoalsRepository:

    @pytest.mark.parametrize("climb_type,table", [
        (ClimbType.BOULDER, "BoulderGoals"),
        (ClimbType.BOARD, "BoardGoals"),
        (ClimbType.LEAD, "LeadGoals"),
    ])
    def test_table_per_climb_type(self, climb_type, table):
        from infrastructure import SupabaseGoalsRepository

        client, _ = make_client(None)

        assert SupabaseGoalsRepository(client).get_quarterly_goal("a@example.com", 2024, 1, climb_type) is None
        client.table.assert_called_with(table)

    def test_goal_row_parsed(self):
        from infrastructure import SupabaseGoalsRepository

        client, _ = make_client({"Email": "a@example.com", "Year": 2024, "Quarter": 1, "V5": 10})

        goal = SupabaseGoalsRepository(client).get_quarterly_goal("a@example.com", 2024, 1, ClimbType.BOULDER)

        assert goal.targets == {"V5": 10}

    def test_malformed_goal_row(self):
        from infrastructure import SupabaseGoalsRepository

        client, _ = make_client({"Email": "a@example.com", "Year": 2024, "Quarter": 1, "V5": "ten"})

        with pytest.raises(RepositoryError):
            SupabaseGoalsRepository(client).get_quarterly_goal("a@example.com", 2024, 1, ClimbType.BOULDER)


# ============================================================================
# Exercise, wellness & profile
# ============================================================================


class TestTrainingRepositories:

    def test_exercise_logs_only_completed(self):
        from infrastructure import SupabaseExerciseLogRepository

        client, query = make_client([
            {"ExerciseID": 1, "HandSide": "Right", "WeightKG": 20, "Exercises": {"Name": "Hang"}},
            {"ExerciseID": 2, "HandSide": "Right", "WeightKG": 20, "Exercises": None},
        ])

        logs = SupabaseExerciseLogRepository(client).list_completed_logs(
            "a@example.com", since="2024-02-01", until="2024-02-29T23:59:59.999"
        )

        query.eq.assert_any_call("Completed", True)
        query.order.assert_called_once_with("CreatedAt")
        assert [log.exercise_id for log in logs] == [1]

    def test_body_weight_missing_profile(self):
        from infrastructure import SupabaseExerciseLogRepository

        client, _ = make_client(None)

        assert SupabaseExerciseLogRepository(client).get_body_weight("a@example.com") is None

    def test_wellness_batched_by_owner(self):
        from infrastructure import SupabaseWellnessRepository

        client, query = make_client([{"Email": "a@example.com", "Date": "2024-03-14", "SleepHours": 7}])

        entries = SupabaseWellnessRepository(client).list_entries(
            ("a@example.com", "b@example.com"), since="2024-03-08"
        )

        query.in_.assert_called_once_with("Email", ["a@example.com", "b@example.com"])
        query.lte.assert_not_called()
        assert entries[0].sleep_hours == 7

    def test_profile_lookup(self):
        from infrastructure import SupabaseProfileRepository

        client, _ = make_client({"Email": "a@example.com", "Name": "Anna"})

        athlete = SupabaseProfileRepository(client).get_athlete("a@example.com")

        assert athlete.name == "Anna"

    def test_profile_failure_wrapped(self):
        from infrastructure import SupabaseProfileRepository

        client, _ = make_client(error=TimeoutError("slow"))

        with pytest.raises(RepositoryError):
            SupabaseProfileRepository(client).list_athletes(["a@example.com"])

    def test_profile_reads_role(self):
        from infrastructure import SupabaseProfileRepository

        client, query = make_client({"Email": "c@example.com", "Name": "Cleo", "Role": "coach"})

        athlete = SupabaseProfileRepository(client).get_athlete("c@example.com")

        query.select.assert_called_once_with("Email, Name, Role")
        assert athlete.role == UserRole.COACH

    def test_user_owners_filtered_by_role(self):
        from infrastructure import SupabaseProfileRepository

        client, query = make_client([{"Email": "a@example.com"}, {"Email": "b@example.com"}])

        owners = SupabaseProfileRepository(client).list_user_owners()

        client.table.assert_called_with("Users")
        query.eq.assert_called_once_with("Role", "user")
        assert owners == ["a@example.com", "b@example.com"]

    def test_trainees_only_active(self):
        from infrastructure import SupabaseProfileRepository

        client, query = make_client([{"TraineeEmail": "a@example.com"}, {"TraineeEmail": None}])

        owners = SupabaseProfileRepository(client).list_trainee_owners("coach@example.com")

        client.table.assert_called_with("CoachTrainees")
        query.eq.assert_any_call("CoachEmail", "coach@example.com")
        query.eq.assert_any_call("Active", True)
        query.eq.assert_any_call("Status", "active")
        assert owners == ["a@example.com"]

    def test_trainee_failure_wrapped(self):
        from infrastructure import SupabaseProfileRepository

        client, _ = make_client(error=ConnectionError("reset"))

        with pytest.raises(RepositoryError, match="coach@example.com"):
            SupabaseProfileRepository(client).list_trainee_owners("coach@example.com")
