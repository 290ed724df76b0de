"""
Tag settings router.

GET  /tag-settings             — every stored setting
GET  /tag-settings/{tag_name}  — one setting, goal "none" when never set
POST /tag-settings             — create or update by tag name
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.models.tag_setting import TagGoal
from app.schemas.common import ERROR_RESPONSES
from app.schemas.tag_setting import TagSettingRequest, TagSettingResponse, normalize_tag_name
from app.services import tag_settings as tag_setting_service

router = APIRouter(prefix="/tag-settings", tags=["tag-settings"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[TagSettingResponse], summary="List tag settings")
def list_tag_settings(db: Session = Depends(get_db)):
    return [
        TagSettingResponse.model_validate(s)
        for s in tag_setting_service.list_tag_settings(db)
    ]


@router.get("/{tag_name}", response_model=TagSettingResponse, summary="Get a tag setting")
def get_tag_setting(tag_name: str, db: Session = Depends(get_db)):
    name = normalize_tag_name(tag_name)
    setting = tag_setting_service.get_tag_setting(db, name)
    if setting is None:
        return TagSettingResponse(tag_name=name, goal=TagGoal.none)
    return TagSettingResponse.model_validate(setting)


@router.post("", response_model=TagSettingResponse, summary="Create or update a tag setting")
def upsert_tag_setting(payload: TagSettingRequest, db: Session = Depends(get_db)):
    setting = tag_setting_service.upsert_tag_setting(db, payload.tag_name, payload.goal)
    return TagSettingResponse.model_validate(setting)
