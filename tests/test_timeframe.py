"""Unit tests for trailing-window selection."""

from datetime import datetime, timedelta, timezone, date

from neurosphere.services.analytics.timeframe import select_timeframe, timeframe_days, as_utc


# ─────────────────────────────────────────────────────────────────
# select_timeframe
# ─────────────────────────────────────────────────────────────────


class TestSelectTimeframe:
    def test_week_excludes_older_records(self, make_mood, now):
        records = [make_mood(3, days_ago=1), make_mood(4, days_ago=8)]

        result = select_timeframe(records, "week", now=now)

        assert result == [records[0]]

    def test_boundary_exactly_seven_days_is_included(self, make_mood, now):
        on_boundary = make_mood(3, days_ago=7)
        just_outside = make_mood(3)
        just_outside["timestamp"] = now - timedelta(days=7, seconds=1)

        result = select_timeframe([on_boundary, just_outside], "week", now=now)

        assert result == [on_boundary]

    def test_window_lengths(self, make_mood, now):
        records = [make_mood(3, days_ago=d) for d in (5, 20, 60, 200, 400)]

        assert len(select_timeframe(records, "week", now=now)) == 1
        assert len(select_timeframe(records, "month", now=now)) == 2
        assert len(select_timeframe(records, "3months", now=now)) == 3
        assert len(select_timeframe(records, "year", now=now)) == 4

    def test_unknown_keyword_falls_back_to_week(self, make_mood, now):
        records = [make_mood(3, days_ago=3), make_mood(3, days_ago=10)]

        assert select_timeframe(records, "fortnight", now=now) == [records[0]]
        assert select_timeframe(records, None, now=now) == [records[0]]

    def test_empty_result_is_empty_list(self, make_mood, now):
        assert select_timeframe([make_mood(3, days_ago=30)], "week", now=now) == []
        assert select_timeframe([], "year", now=now) == []

    def test_sleep_records_use_sleep_date(self, make_sleep, now):
        recent = make_sleep(480, days_ago=2)
        old = make_sleep(480, days_ago=9)

        assert select_timeframe([recent, old], "week", now=now) == [recent]

    def test_naive_datetimes_read_as_utc(self, make_mood, now):
        record = make_mood(3)
        record["timestamp"] = (now - timedelta(days=6)).replace(tzinfo=None)

        assert select_timeframe([record], "week", now=now) == [record]

    def test_preserves_input_order(self, make_mood, now):
        records = [make_mood(3, days_ago=1), make_mood(4, days_ago=5), make_mood(5, days_ago=2)]

        assert select_timeframe(records, "week", now=now) == records


class TestHelpers:
    def test_timeframe_days(self):
        assert timeframe_days("week") == 7
        assert timeframe_days("month") == 30
        assert timeframe_days("3months") == 90
        assert timeframe_days("year") == 365
        assert timeframe_days("decade") == 7

    def test_as_utc_accepts_dates_and_strings(self):
        assert as_utc(date(2026, 3, 1)) == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert as_utc("2026-03-01T10:00:00Z") == datetime(2026, 3, 1, 10, tzinfo=timezone.utc)
        assert as_utc("not a date") is None
        assert as_utc(None) is None
