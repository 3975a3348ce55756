"""
AI interaction log database model.

Append-only: rows are inserted by the interaction writer and never updated.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class AILog(SQLModel, table=True):
    """One generator-backed request (or safety-gate short circuit)."""
    __tablename__ = "ai_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[str] = Field(default=None, max_length=64, index=True)
    action: str = Field(max_length=64, nullable=False, index=True)
    coach_tone: Optional[str] = Field(default=None, max_length=32)
    model: Optional[str] = Field(default=None, max_length=64)

    input_data: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    output_data: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True), )
    error: Optional[str] = Field(default=None)

    tokens_used: int = Field(default=0, nullable=False)
    latency_ms: int = Field(default=0, nullable=False)
    prompt_version: str = Field(default="fallback", max_length=32, nullable=False)

    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        index=True,
    )
