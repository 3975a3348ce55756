"""
Shared API dependencies.

Wires the coach pipelines from explicit collaborators: the prompt store
(database), the Gemini client (settings) and the background interaction
sink (per request).
"""

from fastapi import BackgroundTasks, Depends
from sqlmodel import Session

from app.coach.advisor import ContextualAdvisor
from app.coach.dashboard import DashboardBriefPipeline
from app.coach.overload import OverloadPipeline
from app.coach.ports import InteractionSink, TemplateSource, TextGenerator
from app.coach.readiness import ReadinessPipeline
from app.coach.safety_gate import SafetyThresholds
from app.core.config import settings
from app.db.session import engine, get_db
from app.integrations.gemini import GeminiClient
from app.services.interaction_log_service import BackgroundTaskSink, InteractionLogWriter
from app.services.prompt_service import PromptService


def get_generator() -> TextGenerator:
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.GEMINI_TIMEOUT_SECONDS,
    )


def get_template_source(db: Session = Depends(get_db)) -> TemplateSource:
    return PromptService(db)


def get_interaction_sink(background_tasks: BackgroundTasks) -> InteractionSink:
    # The request session is closed before background tasks run.
    writer = InteractionLogWriter(lambda: Session(engine))
    return BackgroundTaskSink(background_tasks, writer)


def get_safety_thresholds() -> SafetyThresholds:
    return SafetyThresholds.from_settings(settings)


def get_advisor(
    templates: TemplateSource = Depends(get_template_source),
    generator: TextGenerator = Depends(get_generator),
    sink: InteractionSink = Depends(get_interaction_sink),
) -> ContextualAdvisor:
    return ContextualAdvisor(templates=templates, generator=generator, sink=sink)


def get_readiness_pipeline(
    advisor: ContextualAdvisor = Depends(get_advisor),
    thresholds: SafetyThresholds = Depends(get_safety_thresholds),
) -> ReadinessPipeline:
    return ReadinessPipeline(advisor, thresholds)


def get_overload_pipeline(advisor: ContextualAdvisor = Depends(get_advisor)) -> OverloadPipeline:
    return OverloadPipeline(advisor)


def get_dashboard_pipeline(advisor: ContextualAdvisor = Depends(get_advisor)) -> DashboardBriefPipeline:
    return DashboardBriefPipeline(advisor)
