"""Coach pipelines: safety gate, contextual advisor, response parsing."""

from app.coach.advisor import ContextualAdvisor
from app.coach.dashboard import DashboardBriefPipeline
from app.coach.overload import OverloadPipeline, classify_progression
from app.coach.readiness import FALLBACK_VERDICT, ReadinessPipeline
from app.coach.safety_gate import SafetyThresholds, evaluate_safety_gate

__all__ = [
    "ContextualAdvisor",
    "DashboardBriefPipeline",
    "FALLBACK_VERDICT",
    "OverloadPipeline",
    "ReadinessPipeline",
    "SafetyThresholds",
    "classify_progression",
    "evaluate_safety_gate",
]
