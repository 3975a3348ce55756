"""
Coach endpoints: pre-workout readiness, post-workout overload audit and the
coach's daily dashboard brief.

Each returns its result with 200 whether it came from the safety gate, the
generator or the local fallback.  ``X-Coach-Tone`` selects which stored
prompt variant is used.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header

from app.api.dependencies import get_dashboard_pipeline, get_overload_pipeline, get_readiness_pipeline
from app.coach.dashboard import DEFAULT_BRIEF_TONE, DashboardBriefPipeline
from app.coach.overload import OverloadPipeline
from app.coach.readiness import ReadinessPipeline
from app.schemas.dashboard import DashboardBrief, DashboardBriefRequest
from app.schemas.overload import OverloadRequest, OverloadVerdict
from app.schemas.prompt import DEFAULT_TONE, CoachTone
from app.schemas.readiness import ReadinessRequest, ReadinessVerdict

router = APIRouter()


@router.post(
    "/pre-workout",
    summary="Pre-workout readiness audit (safety gate + AI coach).",
    response_model=ReadinessVerdict,
)
async def pre_workout(
    body: ReadinessRequest,
    pipeline: ReadinessPipeline = Depends(get_readiness_pipeline),
    user_id: Optional[str] = Header(None, alias="X-User-Id"),
    tone: CoachTone = Header(DEFAULT_TONE, alias="X-Coach-Tone"),
):
    return await pipeline.assess(body.to_input(), user_id=user_id, tone=tone)


@router.post(
    "/post-workout",
    summary="Post-workout progressive overload audit.",
    response_model=OverloadVerdict,
)
async def post_workout(
    body: OverloadRequest,
    pipeline: OverloadPipeline = Depends(get_overload_pipeline),
    user_id: Optional[str] = Header(None, alias="X-User-Id"),
    tone: CoachTone = Header(DEFAULT_TONE, alias="X-Coach-Tone"),
):
    return await pipeline.judge(body, user_id=user_id, tone=tone)


@router.post(
    "/dashboard-brief",
    summary="Daily business briefing for the coach.",
    response_model=DashboardBrief,
)
async def dashboard_brief(
    body: DashboardBriefRequest,
    pipeline: DashboardBriefPipeline = Depends(get_dashboard_pipeline),
    user_id: Optional[str] = Header(None, alias="X-User-Id"),
    tone: CoachTone = Header(DEFAULT_BRIEF_TONE, alias="X-Coach-Tone"),
):
    return await pipeline.brief(body, user_id=user_id, tone=tone)
