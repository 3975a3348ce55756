"""SQLModel database models."""

from app.models.ai_log import AILog
from app.models.knowledge_base import KnowledgeBase
from app.models.system_prompt import SystemPrompt

__all__ = [
    "AILog",
    "KnowledgeBase",
    "SystemPrompt",
]
