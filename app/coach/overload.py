"""
Post-workout progressive overload audit.

The rule tier is computed locally from the two top sets and handed to the
generator as context.  When the generator fails, the tier alone decides
the verdict, so the athlete always gets feedback.
"""

from __future__ import annotations

from typing import Optional

from app.coach.advisor import ContextualAdvisor
from app.coach.prompt_builder import build_overload_prompt
from app.schemas.overload import (
    FeedbackCard,
    OverloadOutcome,
    OverloadRequest,
    OverloadVerdict,
    ProgressionTier,
)
from app.schemas.prompt import DEFAULT_TONE, CoachTone, PromptTemplate

ACTION = "post_workout"
JUDGE_ROLE = "post_workout_judge"
TEMPERATURE = 0.1


def classify_progression(data: OverloadRequest) -> ProgressionTier:
    """Apply the overload rules to a previous/current top set pair."""
    if data.curr_weight < data.prev_weight:
        return ProgressionTier.REGRESSION
    if data.curr_reps > data.prev_reps:
        if data.curr_weight > data.prev_weight:
            return ProgressionTier.GOLD
        return ProgressionTier.SILVER
    return ProgressionTier.STAGNANT


_FALLBACKS: dict[ProgressionTier, OverloadVerdict] = {
    ProgressionTier.GOLD: OverloadVerdict(
        verdict=OverloadOutcome.PROGRESS,
        intensity_score=8,
        feedback_card=FeedbackCard(
            title="Gold standard",
            body="More weight and more reps than last time.",
            action_item="Keep the same load next session and chase one more rep.",
        ),
        coach_alert=False,
    ),
    ProgressionTier.SILVER: OverloadVerdict(
        verdict=OverloadOutcome.PROGRESS,
        intensity_score=7,
        feedback_card=FeedbackCard(
            title="Silver standard",
            body="Same weight, more reps.",
            action_item="Add a small increment of weight next session.",
        ),
        coach_alert=False,
    ),
    ProgressionTier.STAGNANT: OverloadVerdict(
        verdict=OverloadOutcome.STAGNATION,
        intensity_score=5,
        feedback_card=FeedbackCard(
            title="Session completed",
            body="No measurable progress on this exercise.",
            action_item="Try to add weight or one rep next time.",
        ),
        coach_alert=False,
    ),
    ProgressionTier.REGRESSION: OverloadVerdict(
        verdict=OverloadOutcome.REGRESSION,
        intensity_score=3,
        feedback_card=FeedbackCard(
            title="Regression",
            body="The working weight went down since last session.",
            action_item="Review sleep, nutrition and recovery before the next session.",
        ),
        coach_alert=True,
    ),
}


def fallback_verdict(tier: ProgressionTier) -> OverloadVerdict:
    return _FALLBACKS[tier].model_copy(deep=True)


class OverloadPipeline:
    """Rule tier → contextual advisor → judge verdict."""

    def __init__(self, advisor: ContextualAdvisor):
        self.advisor = advisor

    async def judge(
        self,
        data: OverloadRequest,
        user_id: Optional[str] = None,
        tone: CoachTone = DEFAULT_TONE,
    ) -> OverloadVerdict:
        tier = classify_progression(data)

        def render(template: Optional[PromptTemplate]) -> str:
            return build_overload_prompt(
                template.global_context if template else None,
                template.audit_instructions if template else None,
                data,
                tier,
                template.knowledge_context if template else None,
            )

        verdict = await self.advisor.consult(
            action=ACTION,
            role=JUDGE_ROLE,
            schema=OverloadVerdict,
            render_prompt=render,
            temperature=TEMPERATURE,
            input_data={**data.model_dump(mode="json"), "tier": tier.value},
            user_id=user_id,
            tone=tone,
        )
        if verdict is None:
            return fallback_verdict(tier)
        return verdict
