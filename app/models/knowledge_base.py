"""
Knowledge base database model.

A single reference document (training methodology, book excerpts) shared
by every generator-backed audit.  Only the newest row is ever read.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class KnowledgeBase(SQLModel, table=True):
    __tablename__ = "knowledge_base"

    id: Optional[int] = Field(default=None, primary_key=True)
    content: str = Field(default="", nullable=False)
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
