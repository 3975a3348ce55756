"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import ai_logs, coach, knowledge_base, prompts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    coach.router, prefix="/coach", tags=["AI coach"]
)
api_router.include_router(
    prompts.router, prefix="/prompts", tags=["Prompt store"]
)
api_router.include_router(
    ai_logs.router, prefix="/ai-logs", tags=["AI logs"]
)
api_router.include_router(
    knowledge_base.router, prefix="/knowledge-base", tags=["Knowledge base"]
)
