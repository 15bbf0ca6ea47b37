"""Unit tests for date utilities."""
from datetime import datetime

from src.utils.date_utils import allowed_year_range, current_year, is_iso_timestamp, timestamp_now


class TestCurrentYear:
    """Test year helpers."""

    def test_current_year_from_reference(self):
        assert current_year(datetime(2024, 6, 1)) == 2024

    def test_current_year_defaults_to_now(self):
        assert current_year() == datetime.now().year

    def test_allowed_year_range(self):
        assert allowed_year_range(1800, 5, datetime(2024, 1, 1)) == (1800, 2029)


class TestTimestamps:
    """Test ISO 8601 timestamp helpers."""

    def test_timestamp_now_is_iso_8601(self):
        timestamp = timestamp_now()
        assert "T" in timestamp
        datetime.fromisoformat(timestamp)

    def test_timestamp_now_has_offset(self):
        assert datetime.fromisoformat(timestamp_now()).tzinfo is not None

    def test_is_iso_timestamp_accepts_z_suffix(self):
        assert is_iso_timestamp("2025-10-28T06:32:10Z") is True

    def test_is_iso_timestamp_without_timezone(self):
        assert is_iso_timestamp("2025-10-28T14:32:10") is True

    def test_is_iso_timestamp_rejects_other_formats(self):
        assert is_iso_timestamp("28/10/2025 14:32:10") is False

    def test_is_iso_timestamp_rejects_non_string(self):
        assert is_iso_timestamp(20251028) is False
