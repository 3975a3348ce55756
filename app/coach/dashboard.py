"""
Coach dashboard brief.

Turns the day's roster snapshot into a short briefing.  When the generator
is unavailable the brief is built from the counts alone: one card per
non-empty bucket, money first.
"""

from __future__ import annotations

from typing import Optional

from app.coach.advisor import ContextualAdvisor
from app.coach.prompt_builder import build_dashboard_prompt
from app.schemas.dashboard import (
    BriefCard,
    BriefCardType,
    DashboardBrief,
    DashboardBriefRequest,
)
from app.schemas.prompt import CoachTone, PromptTemplate

ACTION = "dashboard_brief"
BRIEF_ROLE = "dashboard_brief"
TEMPERATURE = 0.4
DEFAULT_BRIEF_TONE = CoachTone.BUSINESS_ANALYTICAL

# Minutes of coach work per pending item.
MINUTES_PER_LATE_PAYMENT = 5
MINUTES_PER_REVIEW = 10
MINUTES_PER_BIRTHDAY = 2


def estimate_minutes(data: DashboardBriefRequest) -> int:
    stats = data.stats
    return (
        stats.late * MINUTES_PER_LATE_PAYMENT
        + stats.pending_review * MINUTES_PER_REVIEW
        + stats.birthdays * MINUTES_PER_BIRTHDAY
    )


def fallback_brief(data: DashboardBriefRequest) -> DashboardBrief:
    """Deterministic brief from the roster counts."""
    stats = data.stats
    cards = []
    if stats.late:
        cards.append(BriefCard(
            type=BriefCardType.FINANCIAL,
            title=f"{stats.late} overdue payment(s)",
            body_markdown=f"**{stats.late}** client(s) are behind on payment.",
            action_label="Review payments",
            action_link="/coach/business",
        ))
    if stats.pending_review:
        cards.append(BriefCard(
            type=BriefCardType.RETENTION,
            title=f"{stats.pending_review} check-in(s) to review",
            body_markdown=f"**{stats.pending_review}** weekly check-in(s) are waiting for feedback.",
            action_label="Open check-ins",
            action_link="/coach/clients",
        ))
    if stats.birthdays:
        cards.append(BriefCard(
            type=BriefCardType.GROWTH,
            title=f"{stats.birthdays} birthday(s) today",
            body_markdown="A short message goes a long way.",
            action_label="Send wishes",
            action_link="/coach/clients",
        ))

    minutes = estimate_minutes(data)
    return DashboardBrief(
        greeting_title=f"Good morning, {data.coach_name}",
        estimated_time_to_clear=f"{minutes} min" if minutes else "All clear",
        cards=cards,
    )


class DashboardBriefPipeline:
    """Roster snapshot → contextual advisor → daily brief."""

    def __init__(self, advisor: ContextualAdvisor):
        self.advisor = advisor

    async def brief(
        self,
        data: DashboardBriefRequest,
        user_id: Optional[str] = None,
        tone: CoachTone = DEFAULT_BRIEF_TONE,
    ) -> DashboardBrief:
        def render(template: Optional[PromptTemplate]) -> str:
            return build_dashboard_prompt(
                template.global_context if template else None,
                template.audit_instructions if template else None,
                data,
                template.knowledge_context if template else None,
            )

        result = await self.advisor.consult(
            action=ACTION,
            role=BRIEF_ROLE,
            schema=DashboardBrief,
            render_prompt=render,
            temperature=TEMPERATURE,
            input_data=data.model_dump(mode="json"),
            user_id=user_id,
            tone=tone,
        )
        if result is None:
            return fallback_brief(data)
        return result
