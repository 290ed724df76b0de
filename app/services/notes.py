"""
Notes service: free-form titled notes with labels.

update_note refreshes updated_at on every call, including no-op patches.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.orm import Session

from app.core.errors import NoteNotFoundError
from app.models.note import Note

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def create_note(db: Session, title: str, content: str, labels: Optional[list[str]] = None) -> Note:
    note = Note(title=title, content=content, labels=list(labels or []))
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info("Created note %s", note.id)
    return note


def list_notes(db: Session) -> list[Note]:
    return db.query(Note).order_by(Note.updated_at.desc(), Note.id.desc()).all()


def get_note(db: Session, note_id: int) -> Note:
    note = db.get(Note, note_id)
    if note is None:
        raise NoteNotFoundError(note_id=note_id)
    return note


def update_note(db: Session, note_id: int, changes: dict[str, Any]) -> Note:
    note = get_note(db, note_id)
    for key, value in changes.items():
        setattr(note, key, list(value) if key == "labels" else value)
    note.updated_at = _now()
    db.commit()
    db.refresh(note)
    logger.info("Updated note %s fields=%s", note_id, sorted(changes))
    return note


def delete_note(db: Session, note_id: int) -> None:
    deleted = db.query(Note).filter(Note.id == note_id).delete()
    db.commit()
    logger.info("Delete note %s (rows=%s)", note_id, deleted)
