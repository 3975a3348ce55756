"""
Contextual advisor: template read, generator call, parse, record.

Shared by every generator-backed audit.  The advisor answers with a
validated schema instance or ``None``; it never invents a verdict.
Choosing a fallback is the calling pipeline's job.

Contract:
    - the active template for the role is read once (absence tolerated)
    - the generator is called exactly once, no retries
    - upstream and parse failures are logged and reported as ``None``
    - ``ConfigurationError`` propagates to the caller
    - exactly one interaction record is handed to the sink per call,
      success or failure; a failing sink never affects the result
    - a failing template store is logged and treated as "no template"
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel

from app.coach.ports import Generation, InteractionSink, TemplateSource, TextGenerator
from app.coach.response_parser import parse_structured_output
from app.core.errors import ConfigurationError, ParseError, UpstreamError
from app.schemas.ai_log import InteractionRecord
from app.schemas.prompt import DEFAULT_TONE, CoachTone, PromptTemplate

T = TypeVar("T", bound=BaseModel)

FALLBACK_PROMPT_VERSION = "fallback"


class ContextualAdvisor:
    """Runs one generator-backed audit end to end."""

    def __init__(
        self,
        templates: TemplateSource,
        generator: TextGenerator,
        sink: InteractionSink,
    ):
        self.templates = templates
        self.generator = generator
        self.sink = sink

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def consult(
        self,
        *,
        action: str,
        role: str,
        schema: type[T],
        render_prompt: Callable[[Optional[PromptTemplate]], str],
        temperature: float,
        input_data: dict[str, Any],
        user_id: Optional[str] = None,
        tone: CoachTone = DEFAULT_TONE,
    ) -> Optional[T]:
        """Ask the generator and parse its answer into ``schema``.

        Returns:
            The parsed instance, or ``None`` on any upstream/parse failure.

        Raises:
            ConfigurationError: generator credentials are missing.
        """
        template = await self._load_template(role, tone)
        prompt = render_prompt(template)
        prompt_version = template.version if template else FALLBACK_PROMPT_VERSION

        started = time.perf_counter()
        generation: Optional[Generation] = None
        result: Optional[T] = None
        error: Optional[str] = None

        try:
            generation = await self.generator.generate(prompt, temperature=temperature)
            result = parse_structured_output(generation.text, schema)
        except ConfigurationError as exc:
            self.record(InteractionRecord(
                action=action,
                user_id=user_id,
                coach_tone=tone.value,
                model=self.generator.model_name,
                input_data=input_data,
                error=str(exc),
                latency_ms=_elapsed_ms(started),
                prompt_version=prompt_version,
            ))
            raise
        except (UpstreamError, ParseError) as exc:
            logger.warning(f"[{action}] generator failure, using fallback: {exc}")
            error = str(exc)
        except Exception as exc:
            logger.exception(f"[{action}] unexpected generator failure, using fallback")
            error = f"{type(exc).__name__}: {exc}"

        self.record(InteractionRecord(
            action=action,
            user_id=user_id,
            coach_tone=tone.value,
            model=(generation.model if generation and generation.model else self.generator.model_name),
            input_data=input_data,
            output_data=result.model_dump(mode="json") if result is not None else None,
            error=error,
            tokens_used=generation.tokens_used if generation else 0,
            latency_ms=_elapsed_ms(started),
            prompt_version=prompt_version,
        ))
        return result

    def record(self, record: InteractionRecord) -> None:
        """Hand a record to the sink; failures are logged, never raised."""
        try:
            self.sink.submit(record)
        except Exception:
            logger.exception(f"[{record.action}] failed to schedule interaction log")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _load_template(self, role: str, tone: CoachTone) -> Optional[PromptTemplate]:
        try:
            template = await asyncio.to_thread(self.templates.get_active_template, role, tone)
        except Exception:
            logger.exception(f"Template store read failed for role={role} tone={tone.value}")
            return None
        if template is None:
            logger.info(f"No active template for role={role} tone={tone.value}, using built-in instructions")
        return template


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
