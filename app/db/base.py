"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.ai_log import AILog  # noqa: F401
from app.models.knowledge_base import KnowledgeBase  # noqa: F401
from app.models.system_prompt import SystemPrompt  # noqa: F401
