"""
Coach dashboard brief schemas.

A morning briefing for the coach: a greeting, an estimate of how long the
pending work will take, and a few action cards built from a snapshot of
the client roster.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """Roster snapshot for the day."""

    active: int = Field(..., ge=0, description="Active clients")
    late: int = Field(..., ge=0, description="Clients with overdue payments")
    pending_review: int = Field(..., ge=0, description="Check-ins waiting for review")
    birthdays: int = Field(0, ge=0, description="Client birthdays today")


class DashboardBriefRequest(BaseModel):
    stats: DashboardStats
    coach_name: str = Field(..., min_length=1, max_length=100)


class BriefCardType(str, Enum):
    FINANCIAL = "FINANCIAL"
    RETENTION = "RETENTION"
    GROWTH = "GROWTH"


class BriefCard(BaseModel):
    type: BriefCardType
    title: str = Field(..., min_length=1)
    body_markdown: str = Field(..., min_length=1)
    action_label: str = Field(..., min_length=1)
    action_link: str = Field(..., min_length=1)


class DashboardBrief(BaseModel):
    greeting_title: str = Field(..., min_length=1)
    estimated_time_to_clear: str = Field(..., min_length=1)
    cards: list[BriefCard] = Field(default_factory=list, max_length=3)
