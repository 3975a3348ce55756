"""
Collaborator interfaces for the coach pipelines.

The pipelines never reach for global state: the template store, the text
generator and the interaction sink are handed to them at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from app.schemas.ai_log import InteractionRecord
from app.schemas.prompt import CoachTone, PromptTemplate


@dataclass(frozen=True)
class Generation:
    """Raw output of one generator call."""

    text: str
    tokens_used: int = 0
    model: Optional[str] = None


class TextGenerator(Protocol):
    model_name: str

    async def generate(self, prompt: str, temperature: float, response_format: str = "json") -> Generation:
        ...


class TemplateSource(Protocol):
    def get_active_template(self, role: str, tone: Optional[CoachTone] = None) -> Optional[PromptTemplate]:
        ...


class InteractionSink(Protocol):
    def submit(self, record: InteractionRecord) -> None:
        """Hand off a record for asynchronous persistence. Must not block."""
        ...
