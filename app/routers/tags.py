"""
Computed views over entry tokens.

GET /tags    — every tag with its entry count
GET /people  — every mentioned person with their entry count
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.common import ERROR_RESPONSES
from app.schemas.entry import NameCountResponse
from app.services import entries as entry_service

router = APIRouter(tags=["tags"], responses=ERROR_RESPONSES)


@router.get("/tags", response_model=list[NameCountResponse], summary="Tag counts")
def list_tags(db: Session = Depends(get_db)):
    """Most used first; equal counts are ordered by name."""
    return [NameCountResponse.model_validate(c) for c in entry_service.get_tag_counts(db)]


@router.get("/people", response_model=list[NameCountResponse], summary="Mention counts")
def list_people(db: Session = Depends(get_db)):
    """Most mentioned first; equal counts are ordered by name."""
    return [NameCountResponse.model_validate(c) for c in entry_service.get_people_counts(db)]
