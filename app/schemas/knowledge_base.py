"""Knowledge base schemas (the shared reference text injected into prompts)."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class KnowledgeBaseUpdate(BaseModel):
    content: str = Field(..., description="Full reference text; empty clears it")


class KnowledgeBaseResponse(BaseModel):
    content: str
    updated_at: Optional[datetime.datetime] = None
    char_count: int
    token_estimate: int = Field(..., description="Rough size in tokens (4 chars per token)")
