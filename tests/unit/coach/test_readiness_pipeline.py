"""
Unit tests for the readiness pipeline orchestration.

Collaborators (template store, generator, interaction sink) are mocks;
async calls are driven with ``asyncio.run``.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pydantic
import pytest
from sqlalchemy.exc import OperationalError

from app.coach.advisor import ContextualAdvisor
from app.coach.ports import Generation
from app.coach.readiness import (
    AUDITOR_ROLE,
    FALLBACK_VERDICT,
    TEMPERATURE,
    ReadinessPipeline,
    parse_readiness_request,
)
from app.core.errors import ConfigurationError, UpstreamError, ValidationError
from app.schemas.prompt import CoachTone, PromptTemplate
from app.schemas.readiness import (
    ReadinessInput,
    ReadinessVerdict,
    VerdictStatus,
)

GO_PAYLOAD = {
    "status": "GO",
    "ui_color": "green",
    "short_message": "Ready to train.",
    "rationale": "Good sleep and low stress.",
    "modification": None,
}


# ======================================================================
# Helpers
# ======================================================================


def _make_generator(text: str | None = None, side_effect=None) -> MagicMock:
    generator = MagicMock()
    generator.model_name = "gemini-test"
    generator.generate = AsyncMock(
        return_value=Generation(text=text or "", tokens_used=42, model="gemini-test"),
        side_effect=side_effect,
    )
    return generator


def _make_templates(template: PromptTemplate | None = None) -> MagicMock:
    templates = MagicMock()
    templates.get_active_template.return_value = template
    return templates


def _make_pipeline(generator, templates=None, sink=None):
    sink = sink or MagicMock()
    advisor = ContextualAdvisor(
        templates=templates or _make_templates(),
        generator=generator,
        sink=sink,
    )
    return ReadinessPipeline(advisor), sink


def _input(sleep=7.0, stress=4.0, pain=1.0, location=None, cycle_day=None) -> ReadinessInput:
    return ReadinessInput(
        sleep_hours=sleep, stress_level=stress, pain_level=pain,
        pain_location=location, cycle_day=cycle_day,
    )


def _run(pipeline, data, **kwargs) -> ReadinessVerdict:
    return asyncio.run(pipeline.assess(data, **kwargs))


# ======================================================================
# Safety gate short circuit
# ======================================================================


class TestGateShortCircuit:

    def test_short_sleep_never_calls_generator(self):
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        templates = _make_templates()
        pipeline, sink = _make_pipeline(generator, templates)

        verdict = _run(pipeline, parse_readiness_request({"sleep": 3, "stress": 5, "pain_level": 2}))

        assert verdict.status is VerdictStatus.STOP
        assert verdict.modification is not None
        assert generator.generate.await_count == 0
        templates.get_active_template.assert_not_called()

    def test_gate_verdict_is_logged(self):
        pipeline, sink = _make_pipeline(_make_generator())
        _run(pipeline, _input(pain=9.0, location="knee"), user_id="u-1")

        sink.submit.assert_called_once()
        record = sink.submit.call_args.args[0]
        assert record.prompt_version == "safety_gate"
        assert record.user_id == "u-1"
        assert record.output_data["status"] == "STOP"
        assert record.model is None

    def test_gate_runs_even_without_credentials(self):
        generator = _make_generator(side_effect=ConfigurationError("GEMINI_API_KEY is missing"))
        pipeline, _ = _make_pipeline(generator)
        verdict = _run(pipeline, _input(sleep=2.0))
        assert verdict.status is VerdictStatus.STOP


# ======================================================================
# Generator path
# ======================================================================


class TestGeneratorPath:

    def test_well_formed_verdict_returned_unmodified(self):
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, sink = _make_pipeline(generator)

        verdict = _run(pipeline, parse_readiness_request({"sleep": 7, "stress": 4, "pain_level": 1}))

        assert verdict == ReadinessVerdict.model_validate(GO_PAYLOAD)
        assert generator.generate.await_count == 1
        sink.submit.assert_called_once()
        record = sink.submit.call_args.args[0]
        assert record.action == "pre_workout"
        assert record.output_data == GO_PAYLOAD
        assert record.error is None
        assert record.tokens_used == 42
        assert record.input_data["sleep_hours"] == 7

    def test_boundary_values_reach_generator(self):
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, _ = _make_pipeline(generator)
        _run(pipeline, _input(sleep=5.0, pain=6.0, location="neck"))
        assert generator.generate.await_count == 1

    def test_prompt_uses_active_template(self):
        template = PromptTemplate(
            role=AUDITOR_ROLE,
            audit_instructions="Audit like a drill sergeant.",
            global_context="Heavy Duty principles.",
            version="v3.1",
        )
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        templates = _make_templates(template)
        pipeline, sink = _make_pipeline(generator, templates)

        _run(pipeline, _input())

        templates.get_active_template.assert_called_once_with(AUDITOR_ROLE, CoachTone.STRICT)
        prompt = generator.generate.call_args.args[0]
        assert "Audit like a drill sergeant." in prompt
        assert "Heavy Duty principles." in prompt
        assert generator.generate.call_args.kwargs["temperature"] == TEMPERATURE
        assert sink.submit.call_args.args[0].prompt_version == "v3.1"

    def test_missing_template_uses_builtin_text(self):
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, sink = _make_pipeline(generator, _make_templates(None))
        _run(pipeline, _input())
        prompt = generator.generate.call_args.args[0]
        assert "Determine readiness based on metrics." in prompt
        assert sink.submit.call_args.args[0].prompt_version == "fallback"

    def test_template_store_failure_tolerated(self):
        templates = MagicMock()
        templates.get_active_template.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, _ = _make_pipeline(generator, templates)
        verdict = _run(pipeline, _input())
        assert verdict.status is VerdictStatus.GO

    def test_any_template_store_error_uses_builtin_text(self):
        templates = MagicMock()
        templates.get_active_template.side_effect = RuntimeError("boom")
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, sink = _make_pipeline(generator, templates)

        verdict = _run(pipeline, _input())

        assert verdict.status is VerdictStatus.GO
        assert generator.generate.await_count == 1
        assert "Determine readiness based on metrics." in generator.generate.call_args.args[0]
        assert sink.submit.call_args.args[0].prompt_version == "fallback"

    def test_template_store_error_with_generator_down_falls_back(self):
        templates = MagicMock()
        templates.get_active_template.side_effect = RuntimeError("boom")
        generator = _make_generator(side_effect=UpstreamError("down"))
        pipeline, _ = _make_pipeline(generator, templates)
        assert _run(pipeline, _input()) == FALLBACK_VERDICT

    def test_tone_selects_template_and_is_logged(self):
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        templates = _make_templates()
        pipeline, sink = _make_pipeline(generator, templates)

        _run(pipeline, _input(), tone=CoachTone.MOTIVATIONAL)

        templates.get_active_template.assert_called_once_with(AUDITOR_ROLE, CoachTone.MOTIVATIONAL)
        assert sink.submit.call_args.args[0].coach_tone == "motivational"

    def test_gate_record_carries_tone(self):
        pipeline, sink = _make_pipeline(_make_generator())
        _run(pipeline, _input(sleep=2.0), tone=CoachTone.FRIENDLY)
        assert sink.submit.call_args.args[0].coach_tone == "friendly"

    def test_knowledge_context_reaches_prompt(self):
        template = PromptTemplate(
            role=AUDITOR_ROLE,
            audit_instructions="Audit.",
            knowledge_context="Train to failure, then rest.",
            version="v2",
        )
        generator = _make_generator(json.dumps(GO_PAYLOAD))
        pipeline, _ = _make_pipeline(generator, _make_templates(template))

        _run(pipeline, _input())

        prompt = generator.generate.call_args.args[0]
        assert "KNOWLEDGE BASE (SOURCE OF TRUTH):\nTrain to failure, then rest." in prompt
        assert prompt.index("Audit.") < prompt.index("KNOWLEDGE BASE") < prompt.index("INPUT DATA:")

    def test_color_mismatch_passed_through(self):
        payload = {**GO_PAYLOAD, "ui_color": "red"}
        pipeline, _ = _make_pipeline(_make_generator(json.dumps(payload)))
        verdict = _run(pipeline, _input())
        assert verdict.status is VerdictStatus.GO
        assert verdict.ui_color == "red"


# ======================================================================
# Failure and fallback
# ======================================================================


class TestFallback:

    def test_network_error_returns_fallback(self):
        generator = _make_generator(side_effect=httpx.ConnectError("connection refused"))
        pipeline, sink = _make_pipeline(generator)

        verdict = _run(pipeline, _input())

        assert verdict == FALLBACK_VERDICT
        assert verdict.status is VerdictStatus.CAUTION
        assert verdict.ui_color == "yellow"
        sink.submit.assert_called_once()
        record = sink.submit.call_args.args[0]
        assert record.output_data is None
        assert "ConnectError" in record.error

    def test_upstream_error_returns_fallback(self):
        generator = _make_generator(side_effect=UpstreamError("Gemini API error: 503"))
        pipeline, sink = _make_pipeline(generator)
        verdict = _run(pipeline, _input())
        assert verdict == FALLBACK_VERDICT
        assert sink.submit.call_args.args[0].error == "Gemini API error: 503"

    def test_garbage_text_returns_fallback(self):
        pipeline, sink = _make_pipeline(_make_generator("I think you should train!"))
        verdict = _run(pipeline, _input())
        assert verdict == FALLBACK_VERDICT
        assert "not valid structured output" in sink.submit.call_args.args[0].error

    def test_sink_failure_does_not_affect_verdict(self):
        sink = MagicMock()
        sink.submit.side_effect = RuntimeError("queue full")
        pipeline, _ = _make_pipeline(_make_generator(json.dumps(GO_PAYLOAD)), sink=sink)
        verdict = _run(pipeline, _input())
        assert verdict.status is VerdictStatus.GO

    def test_configuration_error_propagates(self):
        generator = _make_generator(side_effect=ConfigurationError("GEMINI_API_KEY is missing"))
        pipeline, sink = _make_pipeline(generator)
        with pytest.raises(ConfigurationError):
            _run(pipeline, _input())
        assert "GEMINI_API_KEY" in sink.submit.call_args.args[0].error

    def test_fallback_is_not_shared(self):
        generator = _make_generator(side_effect=UpstreamError("down"))
        pipeline, _ = _make_pipeline(generator)
        first = _run(pipeline, _input())
        assert first is not FALLBACK_VERDICT


# ======================================================================
# Request parsing
# ======================================================================


class TestParseReadinessRequest:

    def test_wire_names_mapped(self):
        data = parse_readiness_request({
            "sleep": 6.5, "stress": 3, "cycle_day": 14,
            "pain_level": 2, "pain_location": "hip",
        })
        assert data.sleep_hours == 6.5
        assert data.stress_level == 3
        assert data.cycle_day == 14
        assert data.pain_location == "hip"

    def test_missing_field_raises(self):
        with pytest.raises(ValidationError, match="pain_level"):
            parse_readiness_request({"sleep": 7, "stress": 3})

    def test_input_is_frozen(self):
        data = parse_readiness_request({"sleep": 7, "stress": 3, "pain_level": 0})
        with pytest.raises(pydantic.ValidationError):
            data.sleep_hours = 2.0
