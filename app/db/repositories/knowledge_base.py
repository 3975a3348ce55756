"""
Knowledge base repository.

Handles database operations for KnowledgeBase model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.knowledge_base import KnowledgeBase


class KnowledgeBaseRepository:
    """Repository for KnowledgeBase database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_current(self) -> Optional[KnowledgeBase]:
        statement = select(KnowledgeBase).order_by(KnowledgeBase.id.desc())
        return self.session.exec(statement).first()

    def save(self, entry: KnowledgeBase) -> KnowledgeBase:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
