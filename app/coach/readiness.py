"""
Pre-workout readiness pipeline.

Two stages, short-circuiting:
    1. **Safety gate** (deterministic): can force STOP on its own
    2. **Contextual advisor** (generator): only when the gate is silent

The gate is always evaluated before the generator is touched, so a model
outage can never mask an unsafe training condition.  Generator and parse
failures end in :data:`FALLBACK_VERDICT`, a conservative CAUTION.
"""

from __future__ import annotations

from typing import Any, Optional

import pydantic
from loguru import logger

from app.coach.advisor import ContextualAdvisor
from app.coach.prompt_builder import build_readiness_prompt
from app.coach.safety_gate import SafetyThresholds, evaluate_safety_gate
from app.core.errors import ValidationError
from app.schemas.ai_log import InteractionRecord
from app.schemas.prompt import DEFAULT_TONE, CoachTone, PromptTemplate
from app.schemas.readiness import (
    ReadinessInput,
    ReadinessRequest,
    ReadinessVerdict,
    VerdictStatus,
)

ACTION = "pre_workout"
AUDITOR_ROLE = "pre_workout_auditor"
TEMPERATURE = 0.2
SAFETY_GATE_VERSION = "safety_gate"

FALLBACK_VERDICT = ReadinessVerdict.build(
    status=VerdictStatus.CAUTION,
    short_message="Train light today.",
    rationale="The coach could not be reached. For safety, keep today's session light.",
    modification="Reduce load and volume, prioritise technique and stop at the first sign of pain.",
)


def parse_readiness_request(payload: Any) -> ReadinessInput:
    """Validate a raw request body (wire field names) into a ReadinessInput.

    Raises:
        ValidationError: required fields missing or out of range.
    """
    try:
        return ReadinessRequest.model_validate(payload).to_input()
    except pydantic.ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<body>" for err in exc.errors())
        raise ValidationError(f"Invalid readiness request: {fields}") from exc


class ReadinessPipeline:
    """Safety gate → contextual advisor → verdict."""

    def __init__(
        self,
        advisor: ContextualAdvisor,
        thresholds: Optional[SafetyThresholds] = None,
    ):
        self.advisor = advisor
        self.thresholds = thresholds

    async def assess(
        self,
        data: ReadinessInput,
        user_id: Optional[str] = None,
        tone: CoachTone = DEFAULT_TONE,
    ) -> ReadinessVerdict:
        """Decide whether the athlete should train today."""
        input_data = data.model_dump(mode="json")

        # Layer 1: safety gate.
        gate_verdict = evaluate_safety_gate(data, self.thresholds)
        if gate_verdict is not None:
            logger.info(f"[{ACTION}] safety gate fired: {gate_verdict.rationale}")
            self.advisor.record(InteractionRecord(
                action=ACTION,
                user_id=user_id,
                coach_tone=tone.value,
                input_data=input_data,
                output_data=gate_verdict.model_dump(mode="json"),
                prompt_version=SAFETY_GATE_VERSION,
            ))
            return gate_verdict

        # Layer 2: contextual advisor.
        def render(template: Optional[PromptTemplate]) -> str:
            return build_readiness_prompt(
                template.global_context if template else None,
                template.audit_instructions if template else None,
                data,
                template.knowledge_context if template else None,
            )

        verdict = await self.advisor.consult(
            action=ACTION,
            role=AUDITOR_ROLE,
            schema=ReadinessVerdict,
            render_prompt=render,
            temperature=TEMPERATURE,
            input_data=input_data,
            user_id=user_id,
            tone=tone,
        )

        if verdict is None:
            return FALLBACK_VERDICT.model_copy()

        if not verdict.color_matches_status:
            logger.warning(
                f"[{ACTION}] generator verdict color mismatch: "
                f"status={verdict.status.value} ui_color={verdict.ui_color}"
            )
        return verdict
