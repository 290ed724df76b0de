"""
Wisdom service: quotes, thoughts and lessons worth resurfacing.

Public API
----------
create_wisdom(db, content, category, source, author) -> WisdomEntry
list_wisdom(db, category)                            -> list[WisdomEntry]
pick_random_wisdom(db, limit, rng)                   -> list[WisdomEntry]
delete_wisdom(db, wisdom_id)                         -> None   (no-op when absent)
"""
from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.models.wisdom import WisdomCategory, WisdomEntry

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def create_wisdom(
    db: Session,
    content: str,
    category: WisdomCategory,
    source: Optional[str] = None,
    author: Optional[str] = None,
) -> WisdomEntry:
    item = WisdomEntry(
        content=content,
        category=category,
        source=source,
        author=author,
        show_count=0,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Created wisdom %s (%s)", item.id, item.category.value)
    return item


def list_wisdom(db: Session, category: Optional[WisdomCategory] = None) -> list[WisdomEntry]:
    query = db.query(WisdomEntry)
    if category is not None:
        query = query.filter(WisdomEntry.category == category)
    return query.order_by(WisdomEntry.created_at.desc(), WisdomEntry.id.desc()).all()


def _selection_key(item: WisdomEntry, rng: random.Random) -> float:
    # Weighted sampling without replacement: key = u ** (1 / w) with
    # w = 1 / (show_count + 1); the largest keys win.
    return rng.random() ** ((item.show_count or 0) + 1)


def pick_random_wisdom(
    db: Session,
    limit: int = 3,
    rng: Optional[random.Random] = None,
) -> list[WisdomEntry]:
    """
    Draw up to `limit` entries, favouring those shown less often, and record
    the display on every entry returned.
    """
    rng = rng or random.Random()
    candidates = db.query(WisdomEntry).all()
    ranked = sorted(candidates, key=lambda item: _selection_key(item, rng), reverse=True)
    chosen = ranked[:limit]

    shown_at = _now()
    for item in chosen:
        item.show_count = (item.show_count or 0) + 1
        item.last_shown_at = shown_at
    db.commit()
    for item in chosen:
        db.refresh(item)
    return chosen


def delete_wisdom(db: Session, wisdom_id: int) -> None:
    deleted = db.query(WisdomEntry).filter(WisdomEntry.id == wisdom_id).delete()
    db.commit()
    logger.info("Delete wisdom %s (rows=%s)", wisdom_id, deleted)
