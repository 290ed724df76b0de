"""
Unit tests for the statistics engine (pure functions, fixed `today`).
"""
import pytest
from datetime import date, timedelta
from types import SimpleNamespace as NS

from app.services.stats import (
    JournalInsights,
    NameCount,
    compute_streak,
    count_recent,
    count_values,
    day_buckets,
    journal_insights,
    month_bounds,
    word_count,
    words_by_date,
    words_per_day,
)

TODAY = date(2026, 3, 15)


def _days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def _entry(content="", on=TODAY, highlight=False, tags=None, mentions=None):
    return NS(content=content, date=on, is_highlight=highlight, tags=tags, mentions=mentions)


class TestStreak:
    def test_empty(self):
        assert compute_streak([], TODAY) == 0

    def test_today_and_yesterday(self):
        assert compute_streak([TODAY, _days_ago(1)], TODAY) == 2

    def test_anchored_at_yesterday(self):
        assert compute_streak([_days_ago(1), _days_ago(2)], TODAY) == 2

    def test_gap_including_today_and_yesterday_resets(self):
        assert compute_streak([_days_ago(3)], TODAY) == 0

    def test_long_prior_run_does_not_count_after_two_day_gap(self):
        dates = [_days_ago(n) for n in range(2, 30)]
        assert compute_streak(dates, TODAY) == 0

    def test_stops_at_first_missing_day(self):
        dates = [TODAY, _days_ago(1), _days_ago(2), _days_ago(4), _days_ago(5)]
        assert compute_streak(dates, TODAY) == 3

    def test_duplicate_dates_count_once(self):
        assert compute_streak([TODAY, TODAY, _days_ago(1)], TODAY) == 2

    def test_future_dates_are_ignored_by_the_walk(self):
        assert compute_streak([TODAY + timedelta(days=1), TODAY], TODAY) == 1

    def test_crosses_month_boundary(self):
        today = date(2026, 3, 1)
        dates = [today, date(2026, 2, 28), date(2026, 2, 27)]
        assert compute_streak(dates, today) == 3


class TestCountRecent:
    def test_window_is_inclusive_of_six_days_ago(self):
        assert count_recent([_days_ago(6), _days_ago(7)], TODAY) == 1

    def test_counts_every_entry_not_every_day(self):
        assert count_recent([TODAY, TODAY, _days_ago(3)], TODAY) == 3

    def test_future_dates_excluded(self):
        assert count_recent([TODAY + timedelta(days=1)], TODAY) == 0


class TestCountValues:
    def test_sorted_by_count_desc(self):
        result = count_values([["a"], ["a"], ["b"]])
        assert result == [NameCount("a", 2), NameCount("b", 1)]

    def test_ties_broken_by_name(self):
        result = count_values([["zeta", "alpha"], ["mid"]])
        assert [r.name for r in result] == ["alpha", "mid", "zeta"]

    def test_none_and_empty_lists_skipped(self):
        assert count_values([None, [], ["x"]]) == [NameCount("x", 1)]

    def test_empty(self):
        assert count_values([]) == []


class TestDayBuckets:
    def test_dense_and_zero_filled(self):
        start, end = date(2026, 1, 1), date(2026, 1, 5)
        buckets = day_buckets([date(2026, 1, 2), date(2026, 1, 2), date(2026, 1, 5)], start, end)
        assert list(buckets) == [start + timedelta(days=i) for i in range(5)]
        assert list(buckets.values()) == [0, 2, 0, 0, 1]

    def test_dates_outside_range_ignored(self):
        buckets = day_buckets([date(2025, 12, 31), date(2026, 1, 2)], date(2026, 1, 1), date(2026, 1, 1))
        assert buckets == {date(2026, 1, 1): 0}

    def test_single_day_range(self):
        assert day_buckets([TODAY], TODAY, TODAY) == {TODAY: 1}

    def test_rolling_window_length(self):
        buckets = day_buckets([], _days_ago(89), TODAY)
        assert len(buckets) == 90

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            day_buckets([], TODAY, _days_ago(1))


class TestMonthBounds:
    @pytest.mark.parametrize("year,month,last", [
        (2026, 1, 31),
        (2026, 2, 28),
        (2028, 2, 29),
        (2026, 4, 30),
        (2026, 12, 31),
    ])
    def test_last_day(self, year, month, last):
        assert month_bounds(year, month) == (date(year, month, 1), date(year, month, last))


class TestWords:
    def test_word_count_splits_on_whitespace_runs(self):
        assert word_count("  one\ttwo \n\n three  ") == 3

    def test_word_count_empty(self):
        assert word_count("") == 0
        assert word_count("   ") == 0

    def test_words_per_day_uses_age_in_days(self):
        assert words_per_day(100, _days_ago(10), TODAY) == 10

    def test_words_per_day_rounds_half_up(self):
        assert words_per_day(5, _days_ago(2), TODAY) == 3

    def test_words_per_day_age_at_least_one(self):
        assert words_per_day(42, TODAY, TODAY) == 42

    def test_words_per_day_no_entries(self):
        assert words_per_day(0, None, TODAY) == 0

    def test_words_by_date_sums_and_sorts(self):
        entries = [
            _entry("a b c", on=_days_ago(1)),
            _entry("d", on=_days_ago(3)),
            _entry("e f", on=_days_ago(1)),
        ]
        assert words_by_date(entries) == {_days_ago(3): 1, _days_ago(1): 5}


class TestJournalInsights:
    def test_empty_journal(self):
        assert journal_insights([], TODAY) == JournalInsights(0, 0, 0, 0, 0, 0)

    def test_summary(self):
        entries = [
            _entry("walk with @emma #nature", on=_days_ago(4), highlight=True,
                   tags=["nature"], mentions=["emma"]),
            _entry("more #nature and #work", on=_days_ago(1), tags=["nature", "work"]),
            _entry("quiet day", on=TODAY),
        ]
        result = journal_insights(entries, TODAY)
        assert result.journal_age == 4
        assert result.total_words == 10
        assert result.words_per_day == 3
        assert result.highlight_count == 1
        assert result.tag_count == 2
        assert result.mention_count == 1
