"""Business logic services."""

from app.services.interaction_log_service import AILogService, BackgroundTaskSink, InteractionLogWriter
from app.services.knowledge_base_service import KnowledgeBaseService
from app.services.prompt_service import PromptService

__all__ = [
    "AILogService",
    "BackgroundTaskSink",
    "InteractionLogWriter",
    "KnowledgeBaseService",
    "PromptService",
]
