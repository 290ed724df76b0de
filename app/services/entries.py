"""
Entry service: the journal entry store plus the statistics views built on it.

Public API
----------
create_entry(db, data)                       -> Entry
update_entry(db, entry_id, changes)          -> Entry
delete_entry(db, entry_id)                   -> None   (no-op when absent)
get_entries_by_date(db, day)                 -> list[Entry]
get_recent_entries(db, limit)                -> list[Entry]
get_all_entries(db)                          -> list[Entry]
get_highlight_entries(db) / get_dream_entries(db)
get_entries_by_tag(db, tag) / get_entries_by_person(db, person)
get_entry_stats(db, today)                   -> EntryStats
get_calendar(db, year, month)                -> dict[date, int]   (sparse)
get_heatmap(db, start, end, kind)            -> dict[date, int]   (dense)
get_tag_counts(db) / get_people_counts(db)   -> list[NameCount]
get_insights(db, today)                      -> JournalInsights
get_word_counts(db, limit)                   -> dict[date, int]

Only create_entry runs the token extractor. Editing content later leaves
tags and mentions as they were.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import EntryNotFoundError, InputValidationError
from app.models.entry import Entry
from app.services import stats
from app.services.tokens import resolve_tokens

logger = logging.getLogger(__name__)

MAX_HEATMAP_SPAN_DAYS = 3660

# Columns a partial update may clear by sending null.
_NULLABLE_FIELDS = {"mood", "prompt"}


class HeatmapKind(str, enum.Enum):
    all = "all"
    highlights = "highlights"
    dreams = "dreams"
    tags = "tags"
    people = "people"


@dataclass
class NewEntry:
    """Lightweight DTO so the service layer stays schema-agnostic."""
    content: str
    date: Optional[date] = None
    mood: Optional[int] = None
    prompt: Optional[str] = None
    is_highlight: bool = False
    is_dream: bool = False
    tags: list[str] = field(default_factory=list)
    mentions: list[str] = field(default_factory=list)


@dataclass
class EntryStats:
    streak: int
    total_entries: int
    weekly_entries: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def _newest_first(query):
    return query.order_by(Entry.date.desc(), Entry.created_at.desc(), Entry.id.desc())


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def create_entry(db: Session, data: NewEntry) -> Entry:
    tokens = resolve_tokens(data.content, data.tags, data.mentions)
    entry = Entry(
        content=data.content,
        date=data.date or _today(),
        mood=data.mood,
        prompt=data.prompt,
        is_highlight=data.is_highlight,
        is_dream=data.is_dream,
        tags=tokens.sorted_tags(),
        mentions=tokens.sorted_mentions(),
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info(
        "Created entry %s for %s (tags=%s mentions=%s)",
        entry.id, entry.date, entry.tags, entry.mentions,
    )
    return entry


def update_entry(db: Session, entry_id: int, changes: dict[str, Any]) -> Entry:
    """Apply a partial update. Tags and mentions are not re-derived."""
    entry = db.get(Entry, entry_id)
    if entry is None:
        raise EntryNotFoundError(entry_id=entry_id)
    applied = {
        k: v for k, v in changes.items() if v is not None or k in _NULLABLE_FIELDS
    }
    for key, value in applied.items():
        setattr(entry, key, value)
    db.commit()
    db.refresh(entry)
    logger.info("Updated entry %s fields=%s", entry_id, sorted(applied))
    return entry


def delete_entry(db: Session, entry_id: int) -> None:
    deleted = db.query(Entry).filter(Entry.id == entry_id).delete()
    db.commit()
    logger.info("Delete entry %s (rows=%s)", entry_id, deleted)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def get_entries_by_date(db: Session, day: date) -> list[Entry]:
    return (
        db.query(Entry)
        .filter(Entry.date == day)
        .order_by(Entry.created_at.asc(), Entry.id.asc())
        .all()
    )


def get_recent_entries(db: Session, limit: int = 50) -> list[Entry]:
    return _newest_first(db.query(Entry)).limit(limit).all()


def get_all_entries(db: Session) -> list[Entry]:
    return _newest_first(db.query(Entry)).all()


def get_highlight_entries(db: Session) -> list[Entry]:
    return _newest_first(db.query(Entry).filter(Entry.is_highlight.is_(True))).all()


def get_dream_entries(db: Session) -> list[Entry]:
    return _newest_first(db.query(Entry).filter(Entry.is_dream.is_(True))).all()


def get_entries_by_tag(db: Session, tag: str) -> list[Entry]:
    # JSON list columns are filtered in Python to stay portable across backends.
    tag = tag.lower()
    return [e for e in get_all_entries(db) if tag in (e.tags or [])]


def get_entries_by_person(db: Session, person: str) -> list[Entry]:
    person = person.lower()
    return [e for e in get_all_entries(db) if person in (e.mentions or [])]


def count_entries(db: Session) -> int:
    return db.query(func.count(Entry.id)).scalar() or 0


def get_distinct_dates(db: Session) -> list[date]:
    rows = db.execute(select(Entry.date).distinct().order_by(Entry.date.desc())).all()
    return [r[0] for r in rows]


def get_date_counts(db: Session, start: date, end: date) -> dict[date, int]:
    """Group-count entries by date for days in [start, end] that have any."""
    rows = (
        db.query(Entry.date, func.count(Entry.id).label("total"))
        .filter(Entry.date >= start, Entry.date <= end)
        .group_by(Entry.date)
        .order_by(Entry.date.asc())
        .all()
    )
    return {r.date: r.total for r in rows}


# ---------------------------------------------------------------------------
# Statistics views
# ---------------------------------------------------------------------------

def get_entry_stats(db: Session, today: Optional[date] = None) -> EntryStats:
    today = today or _today()
    week_start = today - timedelta(days=6)
    week_dates = [
        row[0]
        for row in db.query(Entry.date).filter(Entry.date >= week_start, Entry.date <= today)
    ]
    return EntryStats(
        streak=stats.compute_streak(get_distinct_dates(db), today),
        total_entries=count_entries(db),
        weekly_entries=stats.count_recent(week_dates, today, days=7),
    )


def get_calendar(db: Session, year: int, month: int) -> dict[date, int]:
    """Entry counts for the month; days without entries have no key."""
    start, end = stats.month_bounds(year, month)
    return get_date_counts(db, start, end)


def get_heatmap(
    db: Session,
    start: Optional[date] = None,
    end: Optional[date] = None,
    kind: HeatmapKind = HeatmapKind.all,
    default_days: int = 364,
) -> dict[date, int]:
    """
    Dense per-day counts over [start, end]. `end` defaults to today and
    `start` to `default_days` before `end`.
    """
    end = end or _today()
    if start is None:
        try:
            start = end - timedelta(days=default_days)
        except OverflowError:
            raise InputValidationError(
                message=f"end {end} leaves no room for a {default_days}-day window.",
                field="end",
            )
    if start > end:
        raise InputValidationError(message=f"start {start} is after end {end}.", field="start")
    if (end - start).days > MAX_HEATMAP_SPAN_DAYS:
        raise InputValidationError(
            message=f"Range exceeds {MAX_HEATMAP_SPAN_DAYS} days.",
            field="start",
        )

    query = db.query(Entry).filter(Entry.date >= start, Entry.date <= end)
    if kind == HeatmapKind.highlights:
        query = query.filter(Entry.is_highlight.is_(True))
    elif kind == HeatmapKind.dreams:
        query = query.filter(Entry.is_dream.is_(True))

    entries = query.all()
    if kind == HeatmapKind.tags:
        entries = [e for e in entries if e.tags]
    elif kind == HeatmapKind.people:
        entries = [e for e in entries if e.mentions]

    return stats.day_buckets((e.date for e in entries), start, end)


def get_tag_counts(db: Session) -> list[stats.NameCount]:
    return stats.count_values(row[0] for row in db.query(Entry.tags).all())


def get_people_counts(db: Session) -> list[stats.NameCount]:
    return stats.count_values(row[0] for row in db.query(Entry.mentions).all())


def get_insights(db: Session, today: Optional[date] = None) -> stats.JournalInsights:
    return stats.journal_insights(db.query(Entry).all(), today or _today())


def get_word_counts(db: Session, limit: int = 30) -> dict[date, int]:
    """Words written per date for the `limit` most recent dates with entries."""
    totals = stats.words_by_date(db.query(Entry).all())
    return dict(list(totals.items())[-limit:]) if limit else {}
