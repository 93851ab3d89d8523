"""Tests for device liveness and relative time formatting."""
from datetime import datetime, timedelta, timezone

import pytest

from weatherdash.services.liveness import format_time_ago, liveness_status

NOW = datetime(2025, 6, 1, 12, 0, 0)


class TestLivenessStatus:

    def test_never_seen(self):
        status = liveness_status(None, NOW)
        assert status.is_online is False
        assert status.formatted == "never"

    @pytest.mark.parametrize(
        "ago, online, text",
        [
            (timedelta(seconds=30), True, "just now"),
            (timedelta(minutes=5), True, "5 minutes ago"),
            (timedelta(minutes=15), False, "15 minutes ago"),
            (timedelta(hours=25), False, "1 day ago"),
        ],
    )
    def test_examples(self, ago, online, text):
        status = liveness_status(NOW - ago, NOW)
        assert status.is_online is online
        assert status.formatted == text

    def test_online_window_is_exclusive(self):
        assert liveness_status(NOW - timedelta(minutes=9, seconds=59), NOW).is_online is True
        assert liveness_status(NOW - timedelta(minutes=10), NOW).is_online is False

    def test_aware_timestamps_are_compared_in_utc(self):
        last_seen = datetime(2025, 6, 1, 13, 58, tzinfo=timezone(timedelta(hours=2)))
        status = liveness_status(last_seen, NOW)
        assert status.is_online is True
        assert status.formatted == "2 minutes ago"

    def test_defaults_to_current_time(self):
        recent = datetime.now(timezone.utc) - timedelta(seconds=5)
        assert liveness_status(recent).formatted == "just now"


class TestFormatTimeAgo:

    @pytest.mark.parametrize(
        "elapsed, text",
        [
            (timedelta(0), "just now"),
            (timedelta(seconds=59), "just now"),
            (timedelta(minutes=1), "1 minute ago"),
            (timedelta(minutes=1, seconds=59), "1 minute ago"),
            (timedelta(minutes=59, seconds=59), "59 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=2, minutes=30), "2 hours ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(hours=24), "1 day ago"),
            (timedelta(hours=47), "1 day ago"),
            (timedelta(days=3, hours=5), "3 days ago"),
        ],
    )
    def test_buckets(self, elapsed, text):
        assert format_time_ago(elapsed) == text

    def test_clock_skew_reads_as_just_now(self):
        assert format_time_ago(timedelta(minutes=-3)) == "just now"
