"""
Statistics engine: pure reductions over a snapshot of journal entries.

Nothing in here touches the database. Callers load entries (or just their
dates) from the store and pass them in together with `today`, which keeps
every function deterministic under test.

Public API
----------
compute_streak(dates, today)                 -> int
count_recent(dates, today, days=7)           -> int
count_values(value_lists)                    -> list[NameCount]
day_buckets(dates, start, end)               -> dict[date, int]   (dense)
month_bounds(year, month)                    -> tuple[date, date]
word_count(content)                          -> int
words_per_day(total_words, earliest, today)  -> int
words_by_date(entries)                       -> dict[date, int]
journal_insights(entries, today)             -> JournalInsights
"""
from __future__ import annotations

import calendar
from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Protocol


class EntryLike(Protocol):
    content: str
    date: date
    is_highlight: bool
    tags: Optional[list[str]]
    mentions: Optional[list[str]]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NameCount:
    name: str
    count: int


@dataclass
class JournalInsights:
    journal_age: int         # days since the earliest entry date, at least 1
    total_words: int
    words_per_day: int
    highlight_count: int
    tag_count: int           # distinct tags
    mention_count: int       # distinct people


# ---------------------------------------------------------------------------
# Streak / recency
# ---------------------------------------------------------------------------

def compute_streak(dates: Iterable[date], today: date) -> int:
    """
    Consecutive days with at least one entry, ending today or yesterday.

    Missing both today and yesterday resets the streak to 0 regardless of
    any earlier run.
    """
    present = set(dates)
    if not present:
        return 0

    yesterday = today - timedelta(days=1)
    if today in present:
        cursor = today
    elif yesterday in present:
        cursor = yesterday
    else:
        return 0

    streak = 0
    while cursor in present:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def count_recent(dates: Iterable[date], today: date, days: int = 7) -> int:
    """Count dates inside the inclusive window [today - (days - 1), today]."""
    start = today - timedelta(days=days - 1)
    return sum(1 for d in dates if start <= d <= today)


# ---------------------------------------------------------------------------
# Tag / person counts
# ---------------------------------------------------------------------------

def count_values(value_lists: Iterable[Optional[Iterable[str]]]) -> list[NameCount]:
    """Flatten and count; highest count first, ties by name ascending."""
    counts: Counter[str] = Counter()
    for values in value_lists:
        if values:
            counts.update(values)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [NameCount(name=name, count=count) for name, count in ranked]


# ---------------------------------------------------------------------------
# Calendar / heatmap
# ---------------------------------------------------------------------------

def day_buckets(dates: Iterable[date], start: date, end: date) -> dict[date, int]:
    """One count per day in [start, end], zero-filled and in date order."""
    if start > end:
        raise ValueError(f"start {start} is after end {end}")
    counts = Counter(d for d in dates if start <= d <= end)
    span = (end - start).days
    return {
        start + timedelta(days=i): counts.get(start + timedelta(days=i), 0)
        for i in range(span + 1)
    }


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------

def word_count(content: str) -> int:
    return len((content or "").split())


def words_per_day(total_words: int, earliest: Optional[date], today: date) -> int:
    if earliest is None:
        return 0
    age = max(1, (today - earliest).days)
    per_day = Decimal(total_words) / Decimal(age)
    return int(per_day.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def words_by_date(entries: Iterable[EntryLike]) -> dict[date, int]:
    """Total words written per entry date, oldest first."""
    totals: Counter[date] = Counter()
    for e in entries:
        totals[e.date] += word_count(e.content)
    return dict(sorted(totals.items()))


def journal_insights(entries: Iterable[EntryLike], today: date) -> JournalInsights:
    entries = list(entries)
    if not entries:
        return JournalInsights(0, 0, 0, 0, 0, 0)

    earliest = min(e.date for e in entries)
    total_words = sum(word_count(e.content) for e in entries)
    tags = {t for e in entries for t in (e.tags or [])}
    people = {m for e in entries for m in (e.mentions or [])}

    return JournalInsights(
        journal_age=max(1, (today - earliest).days),
        total_words=total_words,
        words_per_day=words_per_day(total_words, earliest, today),
        highlight_count=sum(1 for e in entries if e.is_highlight),
        tag_count=len(tags),
        mention_count=len(people),
    )
