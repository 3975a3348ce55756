"""Pydantic schemas for request/response validation."""

from app.schemas.ai_log import AILogResponse, InteractionRecord
from app.schemas.dashboard import (
    BriefCard,
    BriefCardType,
    DashboardBrief,
    DashboardBriefRequest,
    DashboardStats,
)
from app.schemas.knowledge_base import KnowledgeBaseResponse, KnowledgeBaseUpdate
from app.schemas.overload import (
    FeedbackCard,
    OverloadOutcome,
    OverloadRequest,
    OverloadVerdict,
    ProgressionTier,
)
from app.schemas.prompt import (
    DEFAULT_TONE,
    CoachTone,
    PromptTemplate,
    SystemPromptCreate,
    SystemPromptResponse,
    SystemPromptUpdate,
)
from app.schemas.readiness import (
    ReadinessInput,
    ReadinessRequest,
    ReadinessVerdict,
    VerdictStatus,
)

__all__ = [
    "AILogResponse",
    "InteractionRecord",
    "BriefCard",
    "BriefCardType",
    "DashboardBrief",
    "DashboardBriefRequest",
    "DashboardStats",
    "KnowledgeBaseResponse",
    "KnowledgeBaseUpdate",
    "FeedbackCard",
    "OverloadOutcome",
    "OverloadRequest",
    "OverloadVerdict",
    "ProgressionTier",
    "DEFAULT_TONE",
    "CoachTone",
    "PromptTemplate",
    "SystemPromptCreate",
    "SystemPromptResponse",
    "SystemPromptUpdate",
    "ReadinessInput",
    "ReadinessRequest",
    "ReadinessVerdict",
    "VerdictStatus",
]
