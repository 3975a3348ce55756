"""
Unit tests for the knowledge base service (in-memory SQLite).
"""

from app.schemas.knowledge_base import KnowledgeBaseUpdate
from app.services.knowledge_base_service import KnowledgeBaseService


class TestKnowledgeBaseService:

    def test_empty_store(self, session):
        current = KnowledgeBaseService(session).get()
        assert current.content == ""
        assert current.updated_at is None
        assert current.char_count == 0
        assert current.token_estimate == 0

    def test_update_overwrites_single_document(self, session):
        service = KnowledgeBaseService(session)
        service.update(KnowledgeBaseUpdate(content="First draft."))
        saved = service.update(KnowledgeBaseUpdate(content="Second draft!"))

        assert saved.content == "Second draft!"
        assert saved.char_count == 13
        assert saved.token_estimate == 4
        assert service.get().content == "Second draft!"
        assert service.repository.get_current().id == 1
