"""
Journal entry request / response schemas.

POST  /entries          -> EntryCreateRequest -> EntryResponse
PATCH /entries/{id}     -> EntryUpdateRequest -> EntryResponse
GET   /entries/stats    -> EntryStatsResponse
GET   /entries/heatmap  -> list[DayCount]
GET   /entries/insights -> InsightsResponse
"""
from __future__ import annotations

import datetime as dt
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONTENT_MAX_LENGTH = 10_000

Mood = Annotated[int, Field(ge=1, le=5, description="Self-reported mood, 1 (low) to 5 (high).")]


def _strip_non_empty(v):
    stripped = v.strip() if isinstance(v, str) else v
    if not stripped:
        raise ValueError("content must not be empty after stripping whitespace")
    return stripped


class EntryCreateRequest(BaseModel):
    """A new journal line. Tags and mentions are read from `content`."""

    content: Annotated[str, Field(
        min_length=1,
        max_length=CONTENT_MAX_LENGTH,
        description="Entry text. Inline #tags and @mentions are extracted server-side.",
        examples=["Coffee with @sarah about the #productivity framework"],
    )]
    date: Optional[dt.date] = Field(
        default=None,
        description="Calendar day the entry belongs to. Defaults to today (UTC).",
        examples=["2026-02-20"],
    )
    mood: Optional[Mood] = None
    prompt: Optional[str] = Field(default=None, description="Prompt the entry answers.")
    is_highlight: bool = False
    is_dream: bool = False
    tags: list[str] = Field(
        default_factory=list,
        description="Used only when the content contains no #tags.",
    )
    mentions: list[str] = Field(
        default_factory=list,
        description="Used only when the content contains no @mentions.",
    )

    @field_validator("content", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v: str) -> str:
        return _strip_non_empty(v)


class EntryUpdateRequest(BaseModel):
    """Partial update. Editing content does not re-derive tags or mentions."""

    content: Optional[Annotated[str, Field(min_length=1, max_length=CONTENT_MAX_LENGTH)]] = None
    date: Optional[dt.date] = None
    mood: Optional[Mood] = None
    prompt: Optional[str] = None
    is_highlight: Optional[bool] = None
    is_dream: Optional[bool] = None

    @field_validator("content", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v):
        return None if v is None else _strip_non_empty(v)


class EntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    date: dt.date
    created_at: dt.datetime
    mood: Optional[int] = None
    prompt: Optional[str] = None
    is_highlight: bool
    is_dream: bool
    tags: list[str]
    mentions: list[str]


class EntryStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    streak: int = Field(description="Consecutive days with entries, ending today or yesterday.")
    total_entries: int
    weekly_entries: int = Field(description="Entries dated within the last 7 days, today included.")


class DayCount(BaseModel):
    date: dt.date
    count: int


class DayWords(BaseModel):
    date: dt.date
    words: int


class InsightsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    journal_age: int = Field(description="Days since the earliest entry (minimum 1).")
    total_words: int
    words_per_day: int
    highlight_count: int
    tag_count: int = Field(description="Distinct tags in use.")
    mention_count: int = Field(description="Distinct people mentioned.")


class NameCountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    count: int


