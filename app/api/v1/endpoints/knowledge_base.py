"""
Knowledge base endpoints.

The shared reference text injected into every audit prompt.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.knowledge_base import KnowledgeBaseResponse, KnowledgeBaseUpdate
from app.services.knowledge_base_service import KnowledgeBaseService

router = APIRouter()


@router.get("", summary="Current knowledge base text.", response_model=KnowledgeBaseResponse, )
def get_knowledge_base(db: Session = Depends(get_db)):
    return KnowledgeBaseService(db).get()


@router.put("", summary="Replace the knowledge base text.", response_model=KnowledgeBaseResponse, )
def update_knowledge_base(data: KnowledgeBaseUpdate, db: Session = Depends(get_db)):
    return KnowledgeBaseService(db).update(data)
