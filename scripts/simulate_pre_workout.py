"""What would the coach tell you before training?

Runs the readiness pipeline once against the real Gemini API, without a
database: built-in prompt text, interactions printed instead of stored.

Usage:
    python scripts/simulate_pre_workout.py '{"sleep": 7, "stress": 4, "pain_level": 1}'
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.coach.advisor import ContextualAdvisor
from app.coach.readiness import ReadinessPipeline, parse_readiness_request
from app.coach.safety_gate import SafetyThresholds
from app.core.config import settings
from app.core.errors import CoachError
from app.integrations.gemini import GeminiClient
from app.schemas.ai_log import InteractionRecord


class NoTemplates:
    def get_active_template(self, role, tone=None):
        return None


class PrintSink:
    def submit(self, record: InteractionRecord) -> None:
        print("--- interaction ---")
        print(record.model_dump_json(indent=2))


async def main(raw: str) -> int:
    try:
        data = parse_readiness_request(json.loads(raw))
    except (ValueError, CoachError) as e:
        print(f"✗ {e}")
        return 2

    advisor = ContextualAdvisor(
        templates=NoTemplates(),
        generator=GeminiClient(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.GEMINI_TIMEOUT_SECONDS,
        ),
        sink=PrintSink(),
    )
    pipeline = ReadinessPipeline(advisor, SafetyThresholds.from_settings(settings))

    try:
        verdict = await pipeline.assess(data)
    except CoachError as e:
        print(f"✗ {e}")
        return 1

    print("--- verdict ---")
    print(verdict.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    payload = sys.argv[1] if len(sys.argv) > 1 else '{"sleep": 7, "stress": 4, "pain_level": 1}'
    sys.exit(asyncio.run(main(payload)))
