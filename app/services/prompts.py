"""
Writing prompts and journal preferences.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.prompt import DailyPrompt
from app.models.user_settings import UserSettings

logger = logging.getLogger(__name__)

SETTINGS_ROW_ID = 1


def get_random_prompt(db: Session) -> Optional[DailyPrompt]:
    return db.query(DailyPrompt).order_by(func.random()).first()


def get_settings(db: Session) -> Optional[UserSettings]:
    return db.get(UserSettings, SETTINGS_ROW_ID)


def update_settings(db: Session, changes: dict[str, Any]) -> UserSettings:
    """Create the single settings row on first write, then patch it."""
    row = get_settings(db)
    if row is None:
        row = UserSettings(id=SETTINGS_ROW_ID)
        db.add(row)
    for key, value in changes.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    logger.info("Updated settings fields=%s", sorted(changes))
    return row
