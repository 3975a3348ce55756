"""
AI interaction log endpoints (read only).
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.ai_log import AILogResponse
from app.services.interaction_log_service import AILogService

router = APIRouter()


@router.get("", summary="Most recent AI interactions.", response_model=list[AILogResponse], )
def list_ai_logs(limit: int = Query(50, ge=1, le=500, description="Max records to return"),
                 db: Session = Depends(get_db), ):
    return AILogService(db).list_recent(limit)
