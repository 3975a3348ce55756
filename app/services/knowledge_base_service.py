"""
Knowledge base service.

One shared reference document, edited as a whole.  Saving overwrites the
current row (or creates the first one).
"""

import datetime
import math

from sqlmodel import Session

from app.db.repositories.knowledge_base import KnowledgeBaseRepository
from app.models.knowledge_base import KnowledgeBase
from app.schemas.knowledge_base import KnowledgeBaseResponse, KnowledgeBaseUpdate

CHARS_PER_TOKEN = 4


class KnowledgeBaseService:
    """Service for knowledge base business logic."""

    def __init__(self, session: Session):
        self.repository = KnowledgeBaseRepository(session)

    def get(self) -> KnowledgeBaseResponse:
        entry = self.repository.get_current()
        if entry is None:
            return self._to_response("", None)
        return self._to_response(entry.content, entry.updated_at)

    def update(self, data: KnowledgeBaseUpdate) -> KnowledgeBaseResponse:
        entry = self.repository.get_current() or KnowledgeBase()
        entry.content = data.content
        entry.updated_at = datetime.datetime.now(datetime.timezone.utc)
        entry = self.repository.save(entry)
        return self._to_response(entry.content, entry.updated_at)

    @staticmethod
    def _to_response(content: str, updated_at) -> KnowledgeBaseResponse:
        return KnowledgeBaseResponse(
            content=content,
            updated_at=updated_at,
            char_count=len(content),
            token_estimate=math.ceil(len(content) / CHARS_PER_TOKEN),
        )
