"""
Prompts and preferences router.

GET   /prompts/random  — one random writing prompt, or null
GET   /settings        — journal preferences (defaults when never saved)
PATCH /settings        — create or update preferences
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.common import ERROR_RESPONSES
from app.schemas.prompt import PromptResponse, SettingsResponse, SettingsUpdateRequest
from app.services import prompts as prompt_service

router = APIRouter(tags=["prompts"], responses=ERROR_RESPONSES)


@router.get("/prompts/random", response_model=Optional[PromptResponse], summary="Random prompt")
def random_prompt(db: Session = Depends(get_db)):
    prompt = prompt_service.get_random_prompt(db)
    return PromptResponse.model_validate(prompt) if prompt else None


@router.get("/settings", response_model=SettingsResponse, summary="Journal preferences")
def get_settings(db: Session = Depends(get_db)):
    row = prompt_service.get_settings(db)
    return SettingsResponse.model_validate(row) if row else SettingsResponse()


@router.patch("/settings", response_model=SettingsResponse, summary="Update preferences")
def update_settings(payload: SettingsUpdateRequest, db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    # Only reminder_time may be cleared.
    changes = {k: v for k, v in changes.items() if v is not None or k == "reminder_time"}
    return SettingsResponse.model_validate(prompt_service.update_settings(db, changes))
