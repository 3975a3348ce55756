"""
System prompt repository.

Handles database operations for SystemPrompt model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.system_prompt import SystemPrompt


def _tone_is(coach_tone: Optional[str]):
    if coach_tone is None:
        return SystemPrompt.coach_tone == None  # noqa: E711
    return SystemPrompt.coach_tone == coach_tone


class SystemPromptRepository:
    """Repository for SystemPrompt database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, prompt: SystemPrompt) -> SystemPrompt:
        self.session.add(prompt)
        self.session.commit()
        self.session.refresh(prompt)
        return prompt

    def get_by_id(self, prompt_id: int) -> Optional[SystemPrompt]:
        return self.session.get(SystemPrompt, prompt_id)

    def get_active(self, role: str, coach_tone: Optional[str] = None) -> Optional[SystemPrompt]:
        """Most recent active prompt for exactly this role and tone (None = tone-agnostic)."""
        statement = (
            select(SystemPrompt)
            .where(
                SystemPrompt.role == role,
                _tone_is(coach_tone),
                SystemPrompt.is_active == True,  # noqa: E712
            )
            .order_by(SystemPrompt.created_at.desc(), SystemPrompt.id.desc())
        )
        return self.session.exec(statement).first()

    def list_by_role(self, role: str) -> list[SystemPrompt]:
        """Every version of a role, all tones, newest first."""
        statement = (
            select(SystemPrompt)
            .where(SystemPrompt.role == role)
            .order_by(SystemPrompt.created_at.desc(), SystemPrompt.id.desc())
        )
        return list(self.session.exec(statement).all())

    def list_active(self) -> list[SystemPrompt]:
        """All active prompts, newest first."""
        statement = (
            select(SystemPrompt)
            .where(SystemPrompt.is_active == True)  # noqa: E712
            .order_by(SystemPrompt.created_at.desc(), SystemPrompt.id.desc())
        )
        return list(self.session.exec(statement).all())

    def deactivate(self, role: str, coach_tone: Optional[str], keep_id: Optional[int] = None) -> None:
        """Mark every active prompt of (role, coach_tone) inactive, except ``keep_id``.

        Changes are flushed but not committed; the caller commits.
        """
        statement = select(SystemPrompt).where(
            SystemPrompt.role == role,
            _tone_is(coach_tone),
            SystemPrompt.is_active == True,  # noqa: E712
        )
        for prompt in self.session.exec(statement).all():
            if prompt.id != keep_id:
                prompt.is_active = False
                self.session.add(prompt)
        self.session.flush()

    def update(self, prompt: SystemPrompt) -> SystemPrompt:
        self.session.add(prompt)
        self.session.commit()
        self.session.refresh(prompt)
        return prompt
