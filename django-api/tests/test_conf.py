"""Tests for loading the booking policy from settings."""

from datetime import timedelta

from gigs.conf import load_policy


class TestLoadPolicy:
    def test_defaults(self, settings):
        """Without overrides the documented defaults apply."""
        settings.GIG_BOOKING = {}
        policy = load_policy()
        assert policy.auto_confirm_single_candidate is False
        assert policy.cancellation.late_cutoff == timedelta(hours=24)
        assert policy.cancellation.suspension_length == timedelta(days=7)
        assert policy.cancellation.frequent_threshold == 3
        assert policy.cancellation.frequent_window == timedelta(days=30)
        assert policy.default_search_radius_km == 50.0

    def test_overrides(self, settings):
        """Settings values override the defaults, including string values from env."""
        settings.GIG_BOOKING = {
            "AUTO_CONFIRM_SINGLE_CANDIDATE": "true",
            "LATE_CANCELLATION_HOURS": "48",
            "FREQUENT_CANCELLATION_THRESHOLD": "5",
            "READ_CACHE_SECONDS": 5,
        }
        policy = load_policy()
        assert policy.auto_confirm_single_candidate is True
        assert policy.cancellation.late_cutoff == timedelta(hours=48)
        assert policy.cancellation.frequent_threshold == 5
        assert policy.read_cache_seconds == 5

    def test_empty_threshold_disables_rule(self, settings):
        """An empty threshold turns the frequency rule off."""
        settings.GIG_BOOKING = {"FREQUENT_CANCELLATION_THRESHOLD": ""}
        assert load_policy().cancellation.frequent_threshold is None
