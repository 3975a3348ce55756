"""
Pre-workout readiness schemas.

The readiness pipeline answers a single question before a session:
should the athlete train today?  The answer is a :class:`ReadinessVerdict`
with one of three statuses, ordered by severity:

    GO       (green)   train as planned
    CAUTION  (yellow)  train with a modification
    STOP     (red)     do not train today

``ui_color`` is a presentation hint that mirrors ``status``.  Verdicts
built locally (safety gate, fallback) always derive it from ``status``;
verdicts produced by the generator pass it through unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VerdictStatus(str, Enum):
    """Readiness status, ordered GO < CAUTION < STOP."""

    GO = "GO"
    CAUTION = "CAUTION"
    STOP = "STOP"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def ui_color(self) -> str:
        return UI_COLOR_BY_STATUS[self]


_SEVERITY: dict[VerdictStatus, int] = {
    VerdictStatus.GO: 0,
    VerdictStatus.CAUTION: 1,
    VerdictStatus.STOP: 2,
}

UI_COLOR_BY_STATUS: dict[VerdictStatus, str] = {
    VerdictStatus.GO: "green",
    VerdictStatus.CAUTION: "yellow",
    VerdictStatus.STOP: "red",
}


class ReadinessRequest(BaseModel):
    """Inbound request body, as sent by the client."""

    sleep: float = Field(..., ge=0.0, description="Hours slept last night")
    stress: float = Field(..., ge=0.0, le=10.0, description="Self-reported stress 0-10")
    cycle_day: Optional[float] = Field(None, ge=0.0, description="Menstrual cycle day, if tracked (0 = not tracked)")
    pain_level: float = Field(..., ge=0.0, le=10.0, description="Self-reported pain 0-10")
    pain_location: Optional[str] = Field(None, max_length=200, description="Where it hurts (free text)")

    def to_input(self) -> ReadinessInput:
        return ReadinessInput(
            sleep_hours=self.sleep,
            stress_level=self.stress,
            cycle_day=self.cycle_day,
            pain_level=self.pain_level,
            pain_location=self.pain_location,
        )


class ReadinessInput(BaseModel):
    """Immutable input to the readiness pipeline."""

    model_config = ConfigDict(frozen=True)

    sleep_hours: float = Field(..., ge=0.0)
    stress_level: float = Field(..., ge=0.0)
    cycle_day: Optional[float] = None
    pain_level: float = Field(..., ge=0.0)
    pain_location: Optional[str] = None


class ReadinessVerdict(BaseModel):
    """Structured readiness recommendation."""

    status: VerdictStatus
    ui_color: str = Field(..., min_length=1, description="green, yellow or red")
    short_message: str = Field(..., min_length=1)
    rationale: str = Field(..., min_length=1)
    modification: Optional[str] = Field(
        None,
        description="Suggested plan change; null only allowed for GO",
    )

    @model_validator(mode="after")
    def check_modification(self) -> ReadinessVerdict:
        if self.modification is None and self.status is not VerdictStatus.GO:
            raise ValueError(f"modification is required when status is {self.status.value}")
        return self

    @classmethod
    def build(
        cls,
        status: VerdictStatus,
        short_message: str,
        rationale: str,
        modification: Optional[str] = None,
    ) -> ReadinessVerdict:
        """Build a verdict whose ``ui_color`` is derived from ``status``."""
        return cls(
            status=status,
            ui_color=status.ui_color,
            short_message=short_message,
            rationale=rationale,
            modification=modification,
        )

    @property
    def color_matches_status(self) -> bool:
        return self.ui_color == self.status.ui_color

