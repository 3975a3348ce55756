"""
Prompt assembly for the generator-backed audits.

Pure string composition: no storage or network access.  Template text is
read upstream and passed in; absent template text falls back to the
built-in instructions below.  A knowledge base, when present, is placed
after the instructions and before the user data.
"""

from __future__ import annotations

from typing import Optional

from app.schemas.dashboard import DashboardBriefRequest
from app.schemas.overload import OverloadRequest, ProgressionTier
from app.schemas.readiness import ReadinessInput

DEFAULT_AUDIT_INSTRUCTIONS = "Determine readiness based on metrics."

DEFAULT_JUDGE_INSTRUCTIONS = """You are the Heavy Duty Judge. Audit Progressive Overload.

Rules:
1. Weight UP + Reps UP = GOLD standard.
2. Weight SAME + Reps UP = SILVER standard.
3. Weight DOWN = REGRESSION (Flag for cause)."""

DEFAULT_BRIEF_INSTRUCTIONS = (
    "You are the business assistant of a strength coach. Turn the day's roster "
    "snapshot into at most three prioritised action cards: money first, then "
    "client retention, then growth."
)

READINESS_RESPONSE_SHAPE = """Respond ONLY in the following JSON schema:
{
  "status": "GO" | "CAUTION" | "STOP",
  "ui_color": "green" | "yellow" | "red",
  "short_message": "string",
  "rationale": "string",
  "modification": "string | null"
}"""

OVERLOAD_RESPONSE_SHAPE = """Respond ONLY in JSON:
{
  "verdict": "PROGRESS" | "STAGNATION" | "REGRESSION",
  "intensity_score": 1-10,
  "feedback_card": {
    "title": "string",
    "body": "string",
    "action_item": "string"
  },
  "coach_alert": boolean
}"""

BRIEF_RESPONSE_SHAPE = """Respond ONLY in JSON:
{
  "greeting_title": "string",
  "estimated_time_to_clear": "string",
  "cards": [
    {
      "type": "FINANCIAL" | "RETENTION" | "GROWTH",
      "title": "string",
      "body_markdown": "string",
      "action_label": "string",
      "action_link": "string"
    }
  ]
}"""


def _num(value: float) -> str:
    """Render 7.0 as ``7`` and 7.5 as ``7.5``."""
    return f"{value:g}"


def _knowledge_section(knowledge_context: Optional[str]) -> list[str]:
    if not knowledge_context:
        return []
    return [f"KNOWLEDGE BASE (SOURCE OF TRUTH):\n{knowledge_context}"]


def build_readiness_prompt(
    global_context: Optional[str],
    audit_instructions: Optional[str],
    data: ReadinessInput,
    knowledge_context: Optional[str] = None,
) -> str:
    """Assemble the pre-workout audit prompt.

    Section order is fixed: context, audit instructions, knowledge base
    (only when present), input data, response shape.
    """
    cycle_day = _num(data.cycle_day) if data.cycle_day else "N/A"
    pain_location = data.pain_location or "none"

    sections = [
        f"CONTEXT: {global_context or ''}",
        f"AUDIT_INSTRUCTIONS: {audit_instructions or DEFAULT_AUDIT_INSTRUCTIONS}",
        *_knowledge_section(knowledge_context),
        "\n".join([
            "INPUT DATA:",
            f"- Sleep: {_num(data.sleep_hours)} hours",
            f"- Stress: {_num(data.stress_level)}/10",
            f"- Cycle Day: {cycle_day}",
            f"- Pain: {pain_location} level {_num(data.pain_level)}",
        ]),
        READINESS_RESPONSE_SHAPE,
    ]
    return "\n\n".join(sections)


def build_overload_prompt(
    global_context: Optional[str],
    judge_instructions: Optional[str],
    data: OverloadRequest,
    tier: ProgressionTier,
    knowledge_context: Optional[str] = None,
) -> str:
    """Assemble the post-workout progressive overload prompt."""
    sections = [
        f"CONTEXT: {global_context or ''}",
        judge_instructions or DEFAULT_JUDGE_INSTRUCTIONS,
        *_knowledge_section(knowledge_context),
        "\n".join([
            "SESSION:",
            f"- Exercise: {data.exercise_name}",
            f"- Previous: {_num(data.prev_weight)}kg x {data.prev_reps} reps",
            f"- Current: {_num(data.curr_weight)}kg x {data.curr_reps} reps",
            f"- Rule tier: {tier.value}",
        ]),
        OVERLOAD_RESPONSE_SHAPE,
    ]
    return "\n\n".join(sections)


def build_dashboard_prompt(
    global_context: Optional[str],
    brief_instructions: Optional[str],
    data: DashboardBriefRequest,
    knowledge_context: Optional[str] = None,
) -> str:
    """Assemble the coach's daily briefing prompt."""
    stats = data.stats
    sections = [
        f"CONTEXT: {global_context or ''}",
        brief_instructions or DEFAULT_BRIEF_INSTRUCTIONS,
        *_knowledge_section(knowledge_context),
        "\n".join([
            "DAY SNAPSHOT:",
            f"- Active clients: {stats.active}",
            f"- Late payments: {stats.late}",
            f"- Check-ins pending review: {stats.pending_review}",
            f"- Birthdays today: {stats.birthdays}",
        ]),
        f"COACH: {data.coach_name}",
        BRIEF_RESPONSE_SHAPE,
    ]
    return "\n\n".join(sections)
