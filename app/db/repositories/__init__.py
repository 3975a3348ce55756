"""Database repositories."""

from app.db.repositories.ai_log import AILogRepository
from app.db.repositories.knowledge_base import KnowledgeBaseRepository
from app.db.repositories.system_prompt import SystemPromptRepository

__all__ = [
    "AILogRepository",
    "KnowledgeBaseRepository",
    "SystemPromptRepository",
]
