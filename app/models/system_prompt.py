"""
System prompt database model.

Defines the system_prompts table: the versioned prompt template store.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SystemPrompt(SQLModel, table=True):
    """
    One version of the prompt text for a role and coach tone.

    Several versions may exist per (role, coach_tone); at most one is active
    at a time (enforced at service layer when creating or activating a
    version).  ``coach_tone`` NULL means the prompt serves every tone.
    """
    __tablename__ = "system_prompts"

    id: Optional[int] = Field(default=None, primary_key=True)
    role: str = Field(max_length=64, nullable=False, index=True)
    coach_tone: Optional[str] = Field(default=None, max_length=32, index=True)
    prompt_text: str = Field(nullable=False)
    version: str = Field(default="v1.0", max_length=32, nullable=False)
    is_active: bool = Field(default=True, nullable=False, index=True)

    # Timestamps (UTC, timezone-aware)
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
