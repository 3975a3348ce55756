"""
Unit tests for the pre-workout safety gate.

The gate is a pure function: strict thresholds, fixed priority, STOP only.
"""

from types import SimpleNamespace

import pytest

from app.coach.safety_gate import (
    STOP_MODIFICATION,
    SafetyThresholds,
    evaluate_safety_gate,
)
from app.schemas.readiness import ReadinessInput, VerdictStatus


# ======================================================================
# Helpers
# ======================================================================


def _make_input(
    sleep: float = 8.0,
    stress: float = 3.0,
    pain: float = 0.0,
    location: str | None = None,
    cycle_day: int | None = None,
) -> ReadinessInput:
    return ReadinessInput(
        sleep_hours=sleep,
        stress_level=stress,
        cycle_day=cycle_day,
        pain_level=pain,
        pain_location=location,
    )


# ======================================================================
# Sleep rule
# ======================================================================


class TestSleepRule:
    """sleep_hours < 5 forces STOP regardless of everything else."""

    @pytest.mark.parametrize("sleep", [0.0, 2.0, 4.0, 4.99])
    def test_short_sleep_stops(self, sleep):
        verdict = evaluate_safety_gate(_make_input(sleep=sleep))
        assert verdict is not None
        assert verdict.status is VerdictStatus.STOP
        assert "critical sleep deprivation" in verdict.rationale.lower()

    def test_short_sleep_ignores_other_fields(self):
        verdict = evaluate_safety_gate(
            _make_input(sleep=3.0, stress=0.0, pain=0.0, cycle_day=14),
        )
        assert verdict.status is VerdictStatus.STOP

    def test_modification_is_reschedule(self):
        verdict = evaluate_safety_gate(_make_input(sleep=3.0))
        assert verdict.modification == STOP_MODIFICATION
        assert "8 hours" in verdict.modification

    def test_sleep_rule_wins_over_pain_rule(self):
        verdict = evaluate_safety_gate(_make_input(sleep=3.0, pain=9.0, location="knee"))
        assert "sleep" in verdict.rationale.lower()
        assert "knee" not in verdict.rationale


# ======================================================================
# Pain rule
# ======================================================================


class TestPainRule:
    """pain_level > 6 forces STOP and names the location."""

    @pytest.mark.parametrize("pain", [6.5, 7.0, 10.0])
    def test_high_pain_stops(self, pain):
        verdict = evaluate_safety_gate(_make_input(pain=pain, location="lower back"))
        assert verdict is not None
        assert verdict.status is VerdictStatus.STOP

    def test_rationale_contains_location(self):
        verdict = evaluate_safety_gate(_make_input(pain=8.0, location="right shoulder"))
        assert "right shoulder" in verdict.rationale
        assert verdict.rationale.startswith("Acute pain detected at")

    def test_missing_location_still_stops(self):
        verdict = evaluate_safety_gate(_make_input(pain=8.0, location=None))
        assert verdict.status is VerdictStatus.STOP
        assert verdict.rationale

    def test_same_modification_as_sleep_rule(self):
        verdict = evaluate_safety_gate(_make_input(pain=8.0, location="knee"))
        assert verdict.modification == STOP_MODIFICATION


# ======================================================================
# Boundaries and pass-through
# ======================================================================


class TestBoundaries:
    """Thresholds are exclusive: 5 hours and pain 6 fall through."""

    def test_exact_boundaries_fall_through(self):
        assert evaluate_safety_gate(_make_input(sleep=5.0, pain=6.0, location="neck")) is None

    def test_healthy_input_falls_through(self):
        assert evaluate_safety_gate(_make_input(sleep=7.0, stress=4.0, pain=1.0)) is None

    def test_custom_thresholds(self):
        strict = SafetyThresholds(min_sleep_hours=7.0, max_pain_level=3.0)
        assert evaluate_safety_gate(_make_input(sleep=6.0), strict).status is VerdictStatus.STOP
        assert evaluate_safety_gate(_make_input(sleep=7.0, pain=3.0), strict) is None

    def test_thresholds_from_settings(self):
        configured = SimpleNamespace(SAFETY_MIN_SLEEP_HOURS=6.5, SAFETY_MAX_PAIN_LEVEL=4.0)
        thresholds = SafetyThresholds.from_settings(configured)
        assert thresholds == SafetyThresholds(min_sleep_hours=6.5, max_pain_level=4.0)
        assert evaluate_safety_gate(_make_input(sleep=6.0), thresholds).status is VerdictStatus.STOP
        assert evaluate_safety_gate(_make_input(pain=5.0, location="back"), thresholds) is not None


class TestVerdictShape:
    """Gate verdicts are always red STOPs with a modification."""

    @pytest.mark.parametrize("data", [
        _make_input(sleep=2.0),
        _make_input(pain=9.0, location="wrist"),
    ])
    def test_color_derived_from_status(self, data):
        verdict = evaluate_safety_gate(data)
        assert verdict.ui_color == "red"
        assert verdict.color_matches_status
        assert verdict.modification is not None
        assert verdict.short_message

    def test_idempotent_and_input_untouched(self):
        data = _make_input(sleep=3.0)
        before = data.model_dump()
        first = evaluate_safety_gate(data)
        second = evaluate_safety_gate(data)
        assert first == second
        assert data.model_dump() == before
