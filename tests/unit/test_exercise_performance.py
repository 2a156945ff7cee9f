"""
Unit tests for exercise performance and hand imbalance.

Tests cover:
- Metric selection (weight, duration, reps, body weight)
- Statistics: current, max, mean, population std dev, trend
- Left/right imbalance classification
- ExercisePerformanceService fallbacks
"""
import pytest
from datetime import date

from application.exceptions import RepositoryError
from backend.core.exercise_performance import (
    DEFAULT_BODY_WEIGHT_KG,
    ExercisePerformanceService,
    ImbalanceStatus,
    MetricUnit,
    aggregate_exercise_performance,
    compute_hand_stats,
    compute_imbalance,
)
from domain.models import ExerciseLogEntry, HandSide
from tests.fakes import FakeExerciseLogRepository

pytestmark = pytest.mark.unit

OWNER = "athlete@example.com"
START = date(2024, 2, 1)
END = date(2024, 2, 29)


def log(exercise_id=1, name="One-arm hang", side=HandSide.RIGHT, **kwargs):
    kwargs.setdefault("category", "Fingers")
    kwargs.setdefault("is_single_hand", True)
    return ExerciseLogEntry(exercise_id=exercise_id, exercise_name=name, hand_side=side, **kwargs)


def weights(side, values, **kwargs):
    return [log(side=side, weight_kg=v, **kwargs) for v in values]


class TestComputeHandStats:
    """Tests for compute_hand_stats."""

    def test_weight_statistics(self):
        stats = compute_hand_stats(weights(HandSide.RIGHT, [20, 22, 24]))

        assert stats.unit == MetricUnit.KG
        assert stats.current == 24
        assert stats.max == 24
        assert stats.avg == pytest.approx(22)
        assert stats.std_dev == pytest.approx((8 / 3) ** 0.5)
        assert stats.last5 == [20, 22, 24]
        assert stats.total_sessions == 3
        assert stats.is_body_weight is False

    def test_trend_needs_ten_values(self):
        nine = compute_hand_stats(weights(HandSide.RIGHT, range(1, 10)))
        ten = compute_hand_stats(weights(HandSide.RIGHT, range(1, 11)))

        assert nine.trend == 0
        # last five mean 8 against previous five mean 3
        assert ten.trend == pytest.approx(500 / 3)
        assert ten.last5 == [6, 7, 8, 9, 10]

    def test_duration_exercise_uses_seconds(self):
        logs = [log(duration_sec=10, reps_done=3), log(duration_sec=12, reps_done=3)]

        stats = compute_hand_stats(logs, is_duration=True)

        assert stats.unit == MetricUnit.SECONDS
        assert stats.current == 12
        assert stats.is_body_weight is False

    def test_reps_without_weight_is_body_weight(self):
        stats = compute_hand_stats([log(reps_done=8), log(reps_done=10)])

        assert stats.unit == MetricUnit.REPS
        assert stats.is_body_weight is True
        assert stats.max == 10

    def test_duration_without_weight_or_reps_is_body_weight(self):
        stats = compute_hand_stats([log(duration_sec=30)])

        assert stats.unit == MetricUnit.SECONDS
        assert stats.is_body_weight is True

    def test_weight_takes_priority_and_zero_values_skipped(self):
        logs = [log(weight_kg=0, reps_done=5), log(weight_kg=15, reps_done=5)]

        stats = compute_hand_stats(logs)

        assert stats.unit == MetricUnit.KG
        assert stats.total_sessions == 1

    def test_no_usable_values(self):
        assert compute_hand_stats([log(weight_kg=0, reps_done=0)]) is None


class TestComputeImbalance:
    """Tests for compute_imbalance."""

    def test_warning_band(self):
        right = compute_hand_stats(weights(HandSide.RIGHT, [20, 22, 24]))
        left = compute_hand_stats(weights(HandSide.LEFT, [18, 20, 20]))

        imbalance = compute_imbalance(right, left)

        assert imbalance.current_gap == pytest.approx(100 / 6)
        assert imbalance.avg_gap == pytest.approx((22 - 58 / 3) / 22 * 100)
        assert imbalance.max_gap == pytest.approx(100 / 6)
        assert imbalance.status == ImbalanceStatus.WARNING

    def test_balanced(self):
        right = compute_hand_stats(weights(HandSide.RIGHT, [20, 20]))
        left = compute_hand_stats(weights(HandSide.LEFT, [19, 19]))

        assert compute_imbalance(right, left).status == ImbalanceStatus.GOOD

    def test_left_much_stronger_is_critical(self):
        right = compute_hand_stats(weights(HandSide.RIGHT, [10]))
        left = compute_hand_stats(weights(HandSide.LEFT, [15]))

        imbalance = compute_imbalance(right, left)

        assert imbalance.avg_gap == pytest.approx(-50)
        assert imbalance.status == ImbalanceStatus.CRITICAL

    def test_max_gap_pairs_shorter_history(self):
        right = compute_hand_stats(weights(HandSide.RIGHT, [10, 10, 10]))
        left = compute_hand_stats(weights(HandSide.LEFT, [9]))

        assert compute_imbalance(right, left).max_gap == pytest.approx(10)


class TestAggregateExercisePerformance:
    """Tests for aggregate_exercise_performance."""

    def test_imbalance_only_for_single_hand_with_both_sides(self):
        logs = (
            weights(HandSide.RIGHT, [20])
            + weights(HandSide.LEFT, [18])
            + [log(exercise_id=2, name="Pull-up", side=HandSide.BOTH, is_single_hand=False, reps_done=10)]
            + [log(exercise_id=3, name="One-arm row", side=HandSide.RIGHT, weight_kg=12)]
        )

        result = aggregate_exercise_performance(logs, 72.0, START, END)
        by_id = {e.exercise_id: e for e in result.exercises}

        assert by_id[1].imbalance is not None
        assert by_id[2].both_hands.unit == MetricUnit.REPS
        assert by_id[2].imbalance is None
        assert by_id[3].left_hand is None
        assert by_id[3].imbalance is None
        assert result.body_weight_kg == 72.0

    def test_logs_without_hand_side_and_empty_exercises_dropped(self):
        logs = [
            log(exercise_id=1, side=None, weight_kg=20),
            log(exercise_id=2, name="Plank", weight_kg=0),
        ]

        result = aggregate_exercise_performance(logs, 70.0, START, END)

        assert result.exercises == []

    def test_sorted_by_category_then_name(self):
        logs = [
            log(exercise_id=1, name="squat", category="Legs", weight_kg=60),
            log(exercise_id=2, name="Hang", category="fingers", weight_kg=10),
            log(exercise_id=3, name="Deadlift", category="Legs", weight_kg=80),
        ]

        result = aggregate_exercise_performance(logs, 70.0, START, END)

        assert [e.exercise_name for e in result.exercises] == ["Hang", "Deadlift", "squat"]


class TestExercisePerformanceService:
    """Tests for ExercisePerformanceService."""

    def test_uses_profile_body_weight(self):
        repo = FakeExerciseLogRepository()
        repo.seed(OWNER, weights(HandSide.RIGHT, [20]))
        repo.seed_body_weight(OWNER, 64.5)

        result = ExercisePerformanceService(repo).get_performance(OWNER, START, END)

        assert result.body_weight_kg == 64.5
        assert len(result.exercises) == 1
        assert repo.calls == [(OWNER, "2024-02-01", "2024-02-29T23:59:59.999")]

    def test_body_weight_falls_back_to_default(self):
        repo = FakeExerciseLogRepository()
        repo.fail_body_weight_with(RepositoryError("no profile"))

        result = ExercisePerformanceService(repo).get_performance(OWNER, START, END)

        assert result.body_weight_kg == DEFAULT_BODY_WEIGHT_KG

    def test_log_failure_returns_empty(self):
        repo = FakeExerciseLogRepository()
        repo.seed_body_weight(OWNER, 80)
        repo.fail_with(RepositoryError("boom"))

        result = ExercisePerformanceService(repo).get_performance(OWNER, START, END)

        assert result.exercises == []
        assert result.body_weight_kg == 80
