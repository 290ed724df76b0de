"""
Tag settings: per-tag goals ("more", "less", "none"), upserted by name.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.tag_setting import TagGoal, TagSetting

logger = logging.getLogger(__name__)


def get_tag_setting(db: Session, tag_name: str) -> Optional[TagSetting]:
    return db.query(TagSetting).filter(TagSetting.tag_name == tag_name).first()


def list_tag_settings(db: Session) -> list[TagSetting]:
    return db.query(TagSetting).order_by(TagSetting.tag_name.asc()).all()


def upsert_tag_setting(db: Session, tag_name: str, goal: TagGoal) -> TagSetting:
    """Create the setting for `tag_name`, or overwrite its goal if it exists."""
    setting = get_tag_setting(db, tag_name)
    if setting is not None:
        setting.goal = goal
    else:
        setting = TagSetting(tag_name=tag_name, goal=goal)
        db.add(setting)
    db.commit()
    db.refresh(setting)
    logger.info("Tag setting %s -> %s", tag_name, goal.value)
    return setting
