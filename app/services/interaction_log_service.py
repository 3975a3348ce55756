"""
Interaction log service.

Writing is fire-and-forget: pipelines hand records to an
:class:`~app.coach.ports.InteractionSink`, the sink schedules
:meth:`InteractionLogWriter.write` to run after the response is sent,
and a failing write is logged, never raised.
"""

from typing import Callable

from fastapi import BackgroundTasks
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.ai_log import AILogRepository
from app.models.ai_log import AILog
from app.schemas.ai_log import AILogResponse, InteractionRecord


class InteractionLogWriter:
    """Persists interaction records in their own database session."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def write(self, record: InteractionRecord) -> None:
        try:
            with self.session_factory() as session:
                AILogRepository(session).create(AILog(**record.model_dump()))
        except SQLAlchemyError as e:
            logger.error(f"[{record.action}] failed to log interaction: {e}")


class BackgroundTaskSink:
    """Interaction sink backed by FastAPI background tasks."""

    def __init__(self, background_tasks: BackgroundTasks, writer: InteractionLogWriter):
        self.background_tasks = background_tasks
        self.writer = writer

    def submit(self, record: InteractionRecord) -> None:
        self.background_tasks.add_task(self.writer.write, record)


class AILogService:
    """Read side of the interaction log."""

    def __init__(self, session: Session):
        self.repository = AILogRepository(session)

    def list_recent(self, limit: int = 50) -> list[AILogResponse]:
        return [
            AILogResponse.model_validate(entry, from_attributes=True)
            for entry in self.repository.list_recent(limit)
        ]
