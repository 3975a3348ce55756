"""
Safety gate: hard, deterministic stop rules.

Evaluated before any external call so that an unsafe training condition
never depends on network availability or model behaviour.

Rules (first match wins):
    1. sleep_hours < min_sleep_hours   → STOP (critical sleep deprivation)
    2. pain_level  > max_pain_level    → STOP (acute pain at location)

Both comparisons are strict: sleeping exactly 5 hours, or reporting pain
exactly 6, does NOT trigger the gate.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.readiness import ReadinessInput, ReadinessVerdict, VerdictStatus

_DEFAULT_MIN_SLEEP_HOURS = 5.0
_DEFAULT_MAX_PAIN_LEVEL = 6.0

STOP_SHORT_MESSAGE = "MANDATORY REST ORDER."
STOP_MODIFICATION = "Do not train. Reschedule for tomorrow after at least 8 hours of sleep."


class SafetyThresholds(BaseModel):
    """Threshold configuration for the safety gate."""

    min_sleep_hours: float = Field(default=_DEFAULT_MIN_SLEEP_HOURS, ge=0.0)
    max_pain_level: float = Field(default=_DEFAULT_MAX_PAIN_LEVEL, ge=0.0)

    @classmethod
    def from_settings(cls, settings) -> SafetyThresholds:
        """Build thresholds from an object exposing the SAFETY_* settings."""
        return cls(
            min_sleep_hours=settings.SAFETY_MIN_SLEEP_HOURS,
            max_pain_level=settings.SAFETY_MAX_PAIN_LEVEL,
        )


DEFAULT_SAFETY_THRESHOLDS = SafetyThresholds()


def _stop(rationale: str) -> ReadinessVerdict:
    return ReadinessVerdict.build(
        status=VerdictStatus.STOP,
        short_message=STOP_SHORT_MESSAGE,
        rationale=rationale,
        modification=STOP_MODIFICATION,
    )


def evaluate_safety_gate(
    data: ReadinessInput,
    thresholds: Optional[SafetyThresholds] = None,
) -> Optional[ReadinessVerdict]:
    """Return a STOP verdict if a hard threshold is breached, else ``None``.

    Pure function: no side effects, safe to call repeatedly.
    """
    cfg = thresholds or DEFAULT_SAFETY_THRESHOLDS

    if data.sleep_hours < cfg.min_sleep_hours:
        return _stop("Critical sleep deprivation: the central nervous system has not recovered.")

    if data.pain_level > cfg.max_pain_level:
        location = data.pain_location or "an unspecified location"
        return _stop(f"Acute pain detected at {location}.")

    return None
