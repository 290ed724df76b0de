"""
Integration tests for the entries endpoints and the entry service.

Exact-count assertions use far-future date windows that no other test
writes to.
"""
import pytest
from datetime import date, timedelta

from app.models.entry import Entry
from app.services.entries import (
    HeatmapKind,
    NewEntry,
    create_entry,
    get_calendar,
    get_entry_stats,
    get_heatmap,
)


def _post(client, content, **fields):
    r = client.post("/entries", json={"content": content, **fields})
    assert r.status_code == 201, r.text
    return r.json()


class TestCreateEntry:
    def test_extracts_tags_and_mentions(self, client):
        body = _post(client, "Coffee with @Sarah about #Productivity #productivity", date="2030-01-10")
        assert body["tags"] == ["productivity"]
        assert body["mentions"] == ["sarah"]
        assert body["date"] == "2030-01-10"
        assert body["id"] > 0
        assert body["is_highlight"] is False
        assert body["is_dream"] is False

    def test_explicit_tags_kept_when_content_has_none(self, client):
        body = _post(client, "no symbols in here", tags=["manual"], date="2030-01-10")
        assert body["tags"] == ["manual"]
        assert body["mentions"] == []

    def test_extracted_tags_replace_explicit_ones(self, client):
        body = _post(client, "#found", tags=["manual"], date="2030-01-10")
        assert body["tags"] == ["found"]

    def test_defaults_to_today(self, client):
        body = _post(client, "logged without a date")
        assert date.fromisoformat(body["date"]) >= date.today() - timedelta(days=1)

    def test_flags_mood_and_prompt(self, client):
        body = _post(
            client, "flying over mountains",
            is_dream=True, is_highlight=True, mood=4,
            prompt="What did you dream?", date="2030-01-11",
        )
        assert body["is_dream"] is True
        assert body["is_highlight"] is True
        assert body["mood"] == 4
        assert body["prompt"] == "What did you dream?"

    def test_content_is_stripped(self, client):
        body = _post(client, "   padded  ", date="2030-01-11")
        assert body["content"] == "padded"

    @pytest.mark.parametrize("payload", [
        {},
        {"content": ""},
        {"content": "   "},
        {"content": "ok", "mood": 9},
        {"content": "ok", "date": "not-a-date"},
        {"content": "x" * 10_001},
    ])
    def test_invalid_payload_returns_400(self, client, payload):
        r = client.post("/entries", json=payload)
        assert r.status_code == 400
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["message"]


class TestListEntries:
    _DAY = "2031-06-01"

    def test_by_date_oldest_first(self, client):
        first = _post(client, "first of the day", date=self._DAY)
        second = _post(client, "second of the day", date=self._DAY)
        r = client.get("/entries", params={"date": self._DAY})
        assert r.status_code == 200
        ids = [e["id"] for e in r.json()]
        assert ids == [first["id"], second["id"]]

    def test_date_is_required(self, client):
        r = client.get("/entries")
        assert r.status_code == 400
        assert r.json()["code"] == "VALIDATION_ERROR"

    def test_all_is_newest_first(self, client):
        _post(client, "older one", date="2031-06-02")
        _post(client, "newer one", date="2031-06-03")
        dates = [e["date"] for e in client.get("/entries/all").json()]
        assert dates == sorted(dates, reverse=True)

    def test_recent_respects_limit(self, client):
        _post(client, "recent a", date="2031-06-04")
        _post(client, "recent b", date="2031-06-04")
        r = client.get("/entries/recent", params={"limit": 1})
        assert r.status_code == 200
        assert len(r.json()) == 1

    def test_highlights_and_dreams(self, client):
        h = _post(client, "a highlight", is_highlight=True, date="2031-06-05")
        d = _post(client, "a dream", is_dream=True, date="2031-06-05")
        highlight_ids = {e["id"] for e in client.get("/entries/highlights").json()}
        dream_ids = {e["id"] for e in client.get("/entries/dreams").json()}
        assert h["id"] in highlight_ids and h["id"] not in dream_ids
        assert d["id"] in dream_ids and d["id"] not in highlight_ids

    def test_by_tag_and_person(self, client):
        e = _post(client, "#qx_bytag with @qx_byperson", date="2031-06-06")
        tagged = client.get("/entries/by-tag/QX_BYTAG").json()
        mentioned = client.get("/entries/by-person/qx_byperson").json()
        assert [x["id"] for x in tagged] == [e["id"]]
        assert [x["id"] for x in mentioned] == [e["id"]]


class TestUpdateAndDelete:
    def test_update_does_not_recompute_tokens(self, client):
        e = _post(client, "#before @alice", date="2031-07-01")
        r = client.patch(f"/entries/{e['id']}", json={"content": "#after @bob"})
        assert r.status_code == 200
        body = r.json()
        assert body["content"] == "#after @bob"
        assert body["tags"] == ["before"]
        assert body["mentions"] == ["alice"]

    def test_update_can_clear_mood_but_not_flags(self, client):
        e = _post(client, "moody", mood=2, is_highlight=True, date="2031-07-01")
        r = client.patch(f"/entries/{e['id']}", json={"mood": None, "is_highlight": None})
        body = r.json()
        assert body["mood"] is None
        assert body["is_highlight"] is True

    def test_update_missing_entry_is_404(self, client):
        r = client.patch("/entries/987654", json={"content": "nope"})
        assert r.status_code == 404
        assert r.json()["code"] == "ENTRY_NOT_FOUND"

    def test_delete_then_delete_again(self, client):
        e = _post(client, "to be removed", date="2031-07-02")
        r1 = client.delete(f"/entries/{e['id']}")
        r2 = client.delete(f"/entries/{e['id']}")
        assert r1.status_code == 200 and r1.json() == {"success": True}
        assert r2.status_code == 200 and r2.json() == {"success": True}
        remaining = client.get("/entries", params={"date": "2031-07-02"}).json()
        assert remaining == []


class TestStats:
    _TODAY = date(2091, 5, 10)

    def test_stats_endpoint_structure(self, client):
        r = client.get("/entries/stats")
        assert r.status_code == 200
        body = r.json()
        assert set(body) == {"streak", "total_entries", "weekly_entries"}

    def test_streak_and_weekly_window(self, db):
        t = self._TODAY
        for day in (t, t - timedelta(days=1), t - timedelta(days=6), t - timedelta(days=7)):
            create_entry(db, NewEntry(content="stats seed", date=day))
        stats = get_entry_stats(db, today=t)
        assert stats.streak == 2
        assert stats.weekly_entries == 3
        assert stats.total_entries >= 4

    def test_streak_anchored_at_yesterday(self, db):
        t = date(2092, 5, 10)
        create_entry(db, NewEntry(content="a", date=t - timedelta(days=1)))
        create_entry(db, NewEntry(content="b", date=t - timedelta(days=2)))
        assert get_entry_stats(db, today=t).streak == 2

    def test_no_streak_after_gap(self, db):
        t = date(2093, 5, 10)
        create_entry(db, NewEntry(content="old", date=t - timedelta(days=3)))
        assert get_entry_stats(db, today=t).streak == 0


class TestCalendar:
    def test_sparse_month_map(self, client):
        _post(client, "first", date="2032-02-01")
        _post(client, "fifteenth", date="2032-02-15")
        _post(client, "fifteenth again", date="2032-02-15")
        _post(client, "next month", date="2032-03-01")
        r = client.get("/entries/calendar", params={"month": "2032-02"})
        assert r.status_code == 200
        assert r.json() == {"2032-02-01": 1, "2032-02-15": 2}

    def test_last_day_of_month_included(self, db):
        create_entry(db, NewEntry(content="leap", date=date(2032, 4, 30)))
        assert get_calendar(db, 2032, 4) == {date(2032, 4, 30): 1}

    @pytest.mark.parametrize("month", ["2032-13", "2032", "march", "2032-1", "0000-01"])
    def test_bad_month_is_400(self, client, month):
        r = client.get("/entries/calendar", params={"month": month})
        assert r.status_code == 400
        assert r.json()["code"] == "VALIDATION_ERROR"


class TestHeatmap:
    def test_dense_range(self, client):
        _post(client, "heat", date="2033-01-02")
        r = client.get("/entries/heatmap", params={"start": "2033-01-01", "end": "2033-01-03"})
        assert r.status_code == 200
        assert r.json() == [
            {"date": "2033-01-01", "count": 0},
            {"date": "2033-01-02", "count": 1},
            {"date": "2033-01-03", "count": 0},
        ]

    def test_default_window_length(self, client):
        r = client.get("/entries/heatmap")
        assert r.status_code == 200
        assert len(r.json()) == 365

    def test_kind_filters(self, db):
        day = date(2033, 2, 1)
        create_entry(db, NewEntry(content="plain", date=day))
        create_entry(db, NewEntry(content="dream", date=day, is_dream=True))
        create_entry(db, NewEntry(content="with @someone", date=day))
        assert get_heatmap(db, day, day, HeatmapKind.all) == {day: 3}
        assert get_heatmap(db, day, day, HeatmapKind.dreams) == {day: 1}
        assert get_heatmap(db, day, day, HeatmapKind.people) == {day: 1}
        assert get_heatmap(db, day, day, HeatmapKind.highlights) == {day: 0}

    def test_inverted_range_is_400(self, client):
        r = client.get("/entries/heatmap", params={"start": "2033-01-05", "end": "2033-01-01"})
        assert r.status_code == 400

    def test_unknown_kind_is_400(self, client):
        r = client.get("/entries/heatmap", params={"kind": "moods"})
        assert r.status_code == 400

    def test_default_window_before_first_year_is_400(self, client):
        r = client.get("/entries/heatmap", params={"end": "0001-01-05"})
        assert r.status_code == 400
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["field"] == "end"

    def test_explicit_range_near_first_year(self, client):
        r = client.get("/entries/heatmap", params={"start": "0001-01-01", "end": "0001-01-03"})
        assert r.status_code == 200
        assert [b["count"] for b in r.json()] == [0, 0, 0]


class TestInsightsAndWords:
    def test_insights_structure(self, client):
        _post(client, "some words for insights #insight", date="2030-02-01")
        r = client.get("/entries/insights")
        assert r.status_code == 200
        body = r.json()
        assert body["journal_age"] >= 1
        assert body["total_words"] >= 5
        assert body["tag_count"] >= 1

    def test_word_counts_limit(self, client):
        r = client.get("/entries/word-counts", params={"limit": 2})
        assert r.status_code == 200
        rows = r.json()
        assert len(rows) <= 2
        assert [row["date"] for row in rows] == sorted(row["date"] for row in rows)


class TestStoredTokens:
    def test_tokens_persisted_on_row(self, db):
        entry = create_entry(db, NewEntry(content="#Gym with @Leo", date=date(2030, 3, 1)))
        row = db.get(Entry, entry.id)
        assert row.tags == ["gym"]
        assert row.mentions == ["leo"]
