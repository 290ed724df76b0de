"""
Journal entries router.

POST   /entries                    — create an entry (tags/mentions extracted)
GET    /entries?date=YYYY-MM-DD    — entries of one day, oldest first
GET    /entries/recent             — newest entries
GET    /entries/all                — every entry, newest first
GET    /entries/highlights         — entries flagged as highlights
GET    /entries/dreams             — entries flagged as dreams
GET    /entries/by-tag/{tag}       — entries carrying a tag
GET    /entries/by-person/{person} — entries mentioning a person
GET    /entries/stats              — streak, total and weekly counts
GET    /entries/calendar           — per-day counts for a month (sparse)
GET    /entries/heatmap            — per-day counts for a range (dense)
GET    /entries/insights           — journal age, words, distinct tags/people
GET    /entries/word-counts        — words written per day
PATCH  /entries/{id}               — partial update
DELETE /entries/{id}               — delete (succeeds when absent)
"""
from __future__ import annotations

import re
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import InputValidationError
from app.db.base import get_db
from app.schemas.common import ERROR_RESPONSES, SuccessResponse
from app.schemas.entry import (
    DayCount,
    DayWords,
    EntryCreateRequest,
    EntryResponse,
    EntryStatsResponse,
    EntryUpdateRequest,
    InsightsResponse,
)
from app.services import entries as entry_service
from app.services.entries import HeatmapKind, NewEntry

router = APIRouter(prefix="/entries", tags=["entries"], responses=ERROR_RESPONSES)

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _parse_month(month: str) -> tuple[int, int]:
    m = _MONTH_RE.match(month)
    if not m or int(m.group(1)) < 1 or not 1 <= int(m.group(2)) <= 12:
        raise InputValidationError(
            message=f"month must be formatted as YYYY-MM, got {month!r}.",
            field="month",
        )
    return int(m.group(1)), int(m.group(2))


# ---------------------------------------------------------------------------
# Create / list
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a journal entry",
)
def create_entry(payload: EntryCreateRequest, db: Session = Depends(get_db)):
    """
    Persist a new entry. `#tags` and `@mentions` are extracted from the
    content and lowercased; the `tags` / `mentions` fields of the body are
    only used when the content yields none of that kind.
    """
    entry = entry_service.create_entry(db, NewEntry(**payload.model_dump()))
    return EntryResponse.model_validate(entry)


@router.get("", response_model=list[EntryResponse], summary="Entries for one day")
def list_entries_for_day(
    date: date = Query(description="ISO date (YYYY-MM-DD).", examples=["2026-02-20"]),
    db: Session = Depends(get_db),
):
    """Return the entries logged for `date`, oldest first."""
    return [EntryResponse.model_validate(e) for e in entry_service.get_entries_by_date(db, date)]


@router.get("/recent", response_model=list[EntryResponse], summary="Most recent entries")
def recent_entries(
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Page size."),
    db: Session = Depends(get_db),
):
    entries = entry_service.get_recent_entries(db, limit or settings.RECENT_ENTRIES_LIMIT)
    return [EntryResponse.model_validate(e) for e in entries]


@router.get("/all", response_model=list[EntryResponse], summary="Every entry, newest first")
def all_entries(db: Session = Depends(get_db)):
    return [EntryResponse.model_validate(e) for e in entry_service.get_all_entries(db)]


@router.get("/highlights", response_model=list[EntryResponse], summary="Highlighted entries")
def highlight_entries(db: Session = Depends(get_db)):
    return [EntryResponse.model_validate(e) for e in entry_service.get_highlight_entries(db)]


@router.get("/dreams", response_model=list[EntryResponse], summary="Dream entries")
def dream_entries(db: Session = Depends(get_db)):
    return [EntryResponse.model_validate(e) for e in entry_service.get_dream_entries(db)]


@router.get("/by-tag/{tag}", response_model=list[EntryResponse], summary="Entries with a tag")
def entries_by_tag(tag: str, db: Session = Depends(get_db)):
    return [EntryResponse.model_validate(e) for e in entry_service.get_entries_by_tag(db, tag)]


@router.get(
    "/by-person/{person}",
    response_model=list[EntryResponse],
    summary="Entries mentioning a person",
)
def entries_by_person(person: str, db: Session = Depends(get_db)):
    return [
        EntryResponse.model_validate(e)
        for e in entry_service.get_entries_by_person(db, person)
    ]


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

@router.get("/stats", response_model=EntryStatsResponse, summary="Streak and entry counts")
def entry_stats(db: Session = Depends(get_db)):
    """
    - **streak**: consecutive days with entries, anchored at today or
      yesterday; 0 when neither has an entry.
    - **total_entries**: all entries ever logged.
    - **weekly_entries**: entries dated in `[today - 6, today]`.
    """
    return EntryStatsResponse.model_validate(entry_service.get_entry_stats(db))


@router.get(
    "/calendar",
    response_model=dict[str, int],
    summary="Entry counts per day for a month",
)
def calendar_month(
    month: str = Query(description="Month as YYYY-MM.", examples=["2026-02"]),
    db: Session = Depends(get_db),
):
    """Map of ISO date to entry count. Days without entries are omitted."""
    year, month_number = _parse_month(month)
    counts = entry_service.get_calendar(db, year, month_number)
    return {d.isoformat(): n for d, n in counts.items()}


@router.get("/heatmap", response_model=list[DayCount], summary="Entry counts per day for a range")
def heatmap(
    start: Optional[date] = Query(default=None, description="First day (inclusive)."),
    end: Optional[date] = Query(default=None, description="Last day (inclusive). Defaults to today."),
    kind: HeatmapKind = Query(default=HeatmapKind.all, description="Which entries to count."),
    db: Session = Depends(get_db),
):
    """
    One bucket per day in `[start, end]`, zero days included. Without
    `start`, the window covers `HEATMAP_DAYS` days before `end`.
    """
    buckets = entry_service.get_heatmap(
        db, start=start, end=end, kind=kind, default_days=settings.HEATMAP_DAYS
    )
    return [DayCount(date=d, count=n) for d, n in buckets.items()]


@router.get("/insights", response_model=InsightsResponse, summary="Journal-wide insights")
def insights(db: Session = Depends(get_db)):
    return InsightsResponse.model_validate(entry_service.get_insights(db))


@router.get("/word-counts", response_model=list[DayWords], summary="Words written per day")
def word_counts(
    limit: int = Query(default=30, ge=1, le=366, description="Number of most recent days."),
    db: Session = Depends(get_db),
):
    totals = entry_service.get_word_counts(db, limit)
    return [DayWords(date=d, words=w) for d, w in totals.items()]


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------

@router.patch(
    "/{entry_id}",
    response_model=EntryResponse,
    summary="Update an entry",
    responses={404: {"description": "Entry not found."}},
)
def update_entry(entry_id: int, payload: EntryUpdateRequest, db: Session = Depends(get_db)):
    """Change the given fields. Tags and mentions keep their creation-time values."""
    changes = payload.model_dump(exclude_unset=True)
    entry = entry_service.update_entry(db, entry_id, changes)
    return EntryResponse.model_validate(entry)


@router.delete("/{entry_id}", response_model=SuccessResponse, summary="Delete an entry")
def delete_entry(entry_id: int, db: Session = Depends(get_db)):
    entry_service.delete_entry(db, entry_id)
    return SuccessResponse()
