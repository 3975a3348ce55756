"""
Prompt store endpoints.

Versioned system prompts; one active version per role.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.prompt import SystemPromptCreate, SystemPromptResponse, SystemPromptUpdate
from app.services.prompt_service import PromptService

router = APIRouter()


@router.get("", summary="List active prompts (newest first).", response_model=list[SystemPromptResponse], )
def list_prompts(db: Session = Depends(get_db)):
    return PromptService(db).list_active()


@router.get("/roles/{role}", summary="List every version of a role's prompt.",
            response_model=list[SystemPromptResponse], )
def list_role_versions(role: str, db: Session = Depends(get_db)):
    return PromptService(db).list_by_role(role)


@router.post("", summary="Create a prompt version (becomes active).", response_model=SystemPromptResponse,
             status_code=status.HTTP_201_CREATED, )
def create_prompt(data: SystemPromptCreate, db: Session = Depends(get_db)):
    return PromptService(db).create(data)


@router.patch("/{prompt_id}", summary="Edit a prompt's text.", response_model=SystemPromptResponse, )
def update_prompt(prompt_id: int, data: SystemPromptUpdate, db: Session = Depends(get_db)):
    return PromptService(db).update_text(prompt_id, data)


@router.post("/{prompt_id}/activate", summary="Make this version the active one for its role.",
             response_model=SystemPromptResponse, )
def activate_prompt(prompt_id: int, db: Session = Depends(get_db)):
    return PromptService(db).activate(prompt_id)
