"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocols define the expected methods
2. Supabase implementations and test fakes provide every protocol method
   with the same parameter names
"""
import inspect

import pytest

from application.ports import (
    CalendarRepository,
    ClimbingLogRepository,
    ExerciseLogRepository,
    GoalsRepository,
    ProfileRepository,
    WellnessRepository,
)
from infrastructure import (
    SupabaseCalendarRepository,
    SupabaseClimbingLogRepository,
    SupabaseExerciseLogRepository,
    SupabaseGoalsRepository,
    SupabaseProfileRepository,
    SupabaseWellnessRepository,
)
from tests.fakes import (
    FakeCalendarRepository,
    FakeClimbingLogRepository,
    FakeExerciseLogRepository,
    FakeGoalsRepository,
    FakeProfileRepository,
    FakeWellnessRepository,
)

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit

PROTOCOL_METHODS = {
    ClimbingLogRepository: ["list_logs", "list_grades"],
    CalendarRepository: ["list_sessions", "list_completed_since", "set_deload"],
    GoalsRepository: ["get_quarterly_goal"],
    ExerciseLogRepository: ["list_completed_logs", "get_body_weight"],
    WellnessRepository: ["list_entries"],
    ProfileRepository: ["get_athlete", "list_athletes", "list_user_owners", "list_trainee_owners"],
}

IMPLEMENTATIONS = [
    (ClimbingLogRepository, SupabaseClimbingLogRepository),
    (ClimbingLogRepository, FakeClimbingLogRepository),
    (CalendarRepository, SupabaseCalendarRepository),
    (CalendarRepository, FakeCalendarRepository),
    (GoalsRepository, SupabaseGoalsRepository),
    (GoalsRepository, FakeGoalsRepository),
    (ExerciseLogRepository, SupabaseExerciseLogRepository),
    (ExerciseLogRepository, FakeExerciseLogRepository),
    (WellnessRepository, SupabaseWellnessRepository),
    (WellnessRepository, FakeWellnessRepository),
    (ProfileRepository, SupabaseProfileRepository),
    (ProfileRepository, FakeProfileRepository),
]


def _params(func):
    return list(inspect.signature(func).parameters)


class TestProtocolDefinitions:

    @pytest.mark.parametrize("protocol,methods", list(PROTOCOL_METHODS.items()))
    def test_has_required_methods(self, protocol, methods):
        for method_name in methods:
            assert hasattr(protocol, method_name), \
                f"{protocol.__name__} should have method '{method_name}'"


class TestImplementationsMatchProtocols:

    @pytest.mark.parametrize(
        "protocol,implementation",
        IMPLEMENTATIONS,
        ids=[impl.__name__ for _, impl in IMPLEMENTATIONS],
    )
    def test_same_methods_and_parameters(self, protocol, implementation):
        for method_name in PROTOCOL_METHODS[protocol]:
            expected = _params(getattr(protocol, method_name))
            actual = _params(getattr(implementation, method_name))
            assert actual == expected, \
                f"{implementation.__name__}.{method_name} parameters {actual} != {expected}"
