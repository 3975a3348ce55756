"""
Post-workout progressive overload schemas.

Compares the current top set of an exercise against the previous one and
asks the generator for a judge-style feedback card.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProgressionTier(str, Enum):
    """Deterministic overload classification."""

    GOLD = "GOLD"              # weight up, reps up
    SILVER = "SILVER"          # same weight, reps up
    STAGNANT = "STAGNANT"
    REGRESSION = "REGRESSION"  # weight down


class OverloadOutcome(str, Enum):
    PROGRESS = "PROGRESS"
    STAGNATION = "STAGNATION"
    REGRESSION = "REGRESSION"


class OverloadRequest(BaseModel):
    """Inbound request body for the post-workout audit."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str = Field(..., min_length=1, max_length=200)
    prev_weight: float = Field(..., ge=0.0, description="Previous top set weight (kg)")
    prev_reps: int = Field(..., ge=0)
    curr_weight: float = Field(..., ge=0.0, description="Current top set weight (kg)")
    curr_reps: int = Field(..., ge=0)


class FeedbackCard(BaseModel):
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    action_item: str = Field(..., min_length=1)


class OverloadVerdict(BaseModel):
    """Judge output for one exercise."""

    verdict: OverloadOutcome
    intensity_score: int = Field(..., ge=1, le=10)
    feedback_card: FeedbackCard
    coach_alert: bool
