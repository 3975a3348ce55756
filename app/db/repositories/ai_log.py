"""
AI log repository.

Append-only: no update or delete operations.
"""

from sqlmodel import Session, select

from app.models.ai_log import AILog


class AILogRepository:
    """Repository for AILog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: AILog) -> AILog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def list_recent(self, limit: int = 50) -> list[AILog]:
        """Most recent log entries, newest first."""
        statement = (
            select(AILog)
            .order_by(AILog.created_at.desc(), AILog.id.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
