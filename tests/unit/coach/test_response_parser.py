"""
Unit tests for generator output parsing.

Covers the direct parse, the markdown fence fallback, schema validation
and the no-coercion policy for ``ui_color``.
"""

import json

import pytest

from app.coach.response_parser import (
    parse_structured_output,
    strip_code_fence,
)
from app.core.errors import ParseError
from app.schemas.overload import OverloadVerdict
from app.schemas.readiness import ReadinessVerdict, VerdictStatus

GO_PAYLOAD = {
    "status": "GO",
    "ui_color": "green",
    "short_message": "Ready to train.",
    "rationale": "Good sleep and low stress.",
    "modification": None,
}


class TestStripCodeFence:

    def test_json_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence_untouched(self):
        assert strip_code_fence('{"a": 1}') == '{"a": 1}'


class TestParseReadinessVerdict:

    def test_plain_json(self):
        verdict = parse_structured_output(json.dumps(GO_PAYLOAD), ReadinessVerdict)
        assert verdict == ReadinessVerdict.model_validate(GO_PAYLOAD)

    def test_fenced_json(self):
        raw = f"```json\n{json.dumps(GO_PAYLOAD, indent=2)}\n```"
        verdict = parse_structured_output(raw, ReadinessVerdict)
        assert verdict == ReadinessVerdict.model_validate(GO_PAYLOAD)

    def test_color_mismatch_passed_through(self):
        payload = {**GO_PAYLOAD, "ui_color": "red"}
        verdict = parse_structured_output(json.dumps(payload), ReadinessVerdict)
        assert verdict.status is VerdictStatus.GO
        assert verdict.ui_color == "red"
        assert not verdict.color_matches_status

    @pytest.mark.parametrize("raw", [
        "not json at all",
        "```json\nstill not json\n```",
        "",
        "   ",
        None,
        "[1, 2, 3]",
    ])
    def test_garbage_raises(self, raw):
        with pytest.raises(ParseError):
            parse_structured_output(raw, ReadinessVerdict)

    def test_missing_status_raises(self):
        payload = {k: v for k, v in GO_PAYLOAD.items() if k != "status"}
        with pytest.raises(ParseError, match="status"):
            parse_structured_output(json.dumps(payload), ReadinessVerdict)

    def test_unknown_status_raises(self):
        with pytest.raises(ParseError):
            parse_structured_output(json.dumps({**GO_PAYLOAD, "status": "MAYBE"}), ReadinessVerdict)

    def test_caution_without_modification_raises(self):
        payload = {**GO_PAYLOAD, "status": "CAUTION", "ui_color": "yellow"}
        with pytest.raises(ParseError):
            parse_structured_output(json.dumps(payload), ReadinessVerdict)


class TestParseOverloadVerdict:

    def test_nested_card(self):
        payload = {
            "verdict": "PROGRESS",
            "intensity_score": 8,
            "feedback_card": {"title": "Gold", "body": "More of everything.", "action_item": "Repeat."},
            "coach_alert": False,
        }
        verdict = parse_structured_output(f"```\n{json.dumps(payload)}\n```", OverloadVerdict)
        assert verdict.feedback_card.title == "Gold"

    def test_out_of_range_score_raises(self):
        payload = {
            "verdict": "PROGRESS",
            "intensity_score": 11,
            "feedback_card": {"title": "t", "body": "b", "action_item": "a"},
            "coach_alert": False,
        }
        with pytest.raises(ParseError):
            parse_structured_output(json.dumps(payload), OverloadVerdict)
