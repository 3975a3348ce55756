"""
Prompt template service.

Business logic for the versioned system prompt store.  Also the template
source of the coach pipelines: :meth:`PromptService.get_active_template`
merges a role's active instructions with the shared global context and
the knowledge base.

Tone resolution: a prompt stored for the requested tone wins over the
role's tone-agnostic prompt.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.errors import ValidationError
from app.db.repositories.knowledge_base import KnowledgeBaseRepository
from app.db.repositories.system_prompt import SystemPromptRepository
from app.models.system_prompt import SystemPrompt
from app.schemas.prompt import (
    CoachTone,
    PromptTemplate,
    SystemPromptCreate,
    SystemPromptResponse,
    SystemPromptUpdate,
)

GLOBAL_CONTEXT_ROLE = "global_context"


class PromptService:
    """Service for system prompt business logic."""

    def __init__(self, session: Session):
        self.repository = SystemPromptRepository(session)
        self.knowledge = KnowledgeBaseRepository(session)

    # ------------------------------------------------------------------
    # Template source
    # ------------------------------------------------------------------

    def get_active_template(self, role: str, tone: Optional[CoachTone] = None) -> Optional[PromptTemplate]:
        """Active template for ``role`` in ``tone``, or None if the store has nothing."""
        instructions = self._resolve(role, tone)
        context = self._resolve(GLOBAL_CONTEXT_ROLE, tone)
        entry = self.knowledge.get_current()
        knowledge = entry.content.strip() if entry and entry.content.strip() else None

        if instructions is None and context is None and knowledge is None:
            return None
        return PromptTemplate(
            role=role,
            tone=tone,
            audit_instructions=instructions.prompt_text if instructions else None,
            global_context=context.prompt_text if context else None,
            knowledge_context=knowledge,
            version=instructions.version if instructions else "fallback",
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_active(self) -> list[SystemPromptResponse]:
        return [self._to_response(p) for p in self.repository.list_active()]

    def list_by_role(self, role: str) -> list[SystemPromptResponse]:
        return [self._to_response(p) for p in self.repository.list_by_role(role)]

    def create(self, data: SystemPromptCreate) -> SystemPromptResponse:
        """Create a new version; it becomes the only active one for its role and tone."""
        text = self._clean_text(data.prompt_text)
        coach_tone = data.coach_tone.value if data.coach_tone else None
        self.repository.deactivate(data.role, coach_tone)
        prompt = SystemPrompt(
            role=data.role,
            coach_tone=coach_tone,
            prompt_text=text,
            version=data.version,
            is_active=True,
        )
        prompt = self.repository.create(prompt)
        return self._to_response(prompt)

    def update_text(self, prompt_id: int, data: SystemPromptUpdate) -> SystemPromptResponse:
        prompt = self._get_prompt(prompt_id)
        prompt.prompt_text = self._clean_text(data.prompt_text)
        prompt.updated_at = datetime.datetime.now(datetime.timezone.utc)
        prompt = self.repository.update(prompt)
        return self._to_response(prompt)

    def activate(self, prompt_id: int) -> SystemPromptResponse:
        """Make this version the single active prompt for its role and tone."""
        prompt = self._get_prompt(prompt_id)
        self.repository.deactivate(prompt.role, prompt.coach_tone, keep_id=prompt.id)
        prompt.is_active = True
        prompt.updated_at = datetime.datetime.now(datetime.timezone.utc)
        prompt = self.repository.update(prompt)
        return self._to_response(prompt)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, role: str, tone: Optional[CoachTone]) -> Optional[SystemPrompt]:
        if tone is not None:
            prompt = self.repository.get_active(role, tone.value)
            if prompt is not None:
                return prompt
        return self.repository.get_active(role, None)

    def _get_prompt(self, prompt_id: int) -> SystemPrompt:
        prompt = self.repository.get_by_id(prompt_id)
        if not prompt:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Prompt not found",
            )
        return prompt

    @staticmethod
    def _clean_text(text: str) -> str:
        text = text.strip()
        if not text:
            raise ValidationError("prompt_text must not be blank")
        return text

    @staticmethod
    def _to_response(prompt: SystemPrompt) -> SystemPromptResponse:
        return SystemPromptResponse(
            id=prompt.id,
            role=prompt.role,
            coach_tone=prompt.coach_tone,
            prompt_text=prompt.prompt_text,
            version=prompt.version,
            is_active=prompt.is_active,
            created_at=prompt.created_at,
            updated_at=prompt.updated_at,
        )
