"""
Prompt template store schemas.

Prompts are keyed by role and, optionally, by coach tone.  A row without a
tone applies to every tone that has no row of its own.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CoachTone(str, Enum):
    STRICT = "strict"
    MOTIVATIONAL = "motivational"
    ANALYTICAL = "analytical"
    FRIENDLY = "friendly"
    BUSINESS_ANALYTICAL = "business_analytical"


DEFAULT_TONE = CoachTone.STRICT


class PromptTemplate(BaseModel):
    """Active prompt text for one role and tone, as read from the template store."""

    role: str
    tone: Optional[CoachTone] = None
    audit_instructions: Optional[str] = None
    global_context: Optional[str] = None
    knowledge_context: Optional[str] = None
    version: str = "fallback"


class SystemPromptCreate(BaseModel):
    role: str = Field(..., min_length=1, max_length=64)
    coach_tone: Optional[CoachTone] = Field(None, description="Omit to apply to every tone")
    prompt_text: str = Field(..., min_length=1)
    version: str = Field("v1.0", min_length=1, max_length=32)


class SystemPromptUpdate(BaseModel):
    prompt_text: str = Field(..., min_length=1)


class SystemPromptResponse(BaseModel):
    id: int
    role: str
    coach_tone: Optional[CoachTone]
    prompt_text: str
    version: str
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime
