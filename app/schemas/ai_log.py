"""
Interaction log schemas.

Every generator-backed request produces one :class:`InteractionRecord`,
whether the generator succeeded, failed, or was never called.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class InteractionRecord(BaseModel):
    """One append-only interaction log entry."""

    action: str
    user_id: Optional[str] = None
    coach_tone: Optional[str] = None
    model: Optional[str] = None
    input_data: dict[str, Any]
    output_data: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    tokens_used: int = 0
    latency_ms: int = 0
    prompt_version: str = "fallback"
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
    )


class AILogResponse(InteractionRecord):
    id: int
