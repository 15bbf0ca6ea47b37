"""Unit tests for runtime settings."""
import pytest

from src.utils import settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test from an empty directory with no cached .env."""
    monkeypatch.chdir(tmp_path)
    # register the key so values written by the .env loader are undone
    monkeypatch.setenv("ATTENDEE_MAX_CAPACITY", "")
    monkeypatch.delenv("ATTENDEE_MAX_CAPACITY")
    settings._reset_env_cache()
    yield
    settings._reset_env_cache()


class TestGetMaxCapacity:
    """Test attendee capacity configuration."""

    def test_default_capacity(self):
        assert settings.get_max_capacity() == 100

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ATTENDEE_MAX_CAPACITY", "25")
        assert settings.get_max_capacity() == 25

    def test_env_file_override(self, tmp_path):
        (tmp_path / ".env").write_text(
            "# local settings\nATTENDEE_MAX_CAPACITY='40'\nUNRELATED=1\n",
            encoding="utf-8",
        )
        assert settings.get_max_capacity() == 40

    def test_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("ATTENDEE_MAX_CAPACITY=40\n", encoding="utf-8")
        monkeypatch.setenv("ATTENDEE_MAX_CAPACITY", "10")
        assert settings.get_max_capacity() == 10

    @pytest.mark.parametrize("raw", ["many", "0", "-5", "  "])
    def test_invalid_values_fall_back_to_default(self, raw, monkeypatch):
        monkeypatch.setenv("ATTENDEE_MAX_CAPACITY", raw)
        assert settings.get_max_capacity() == 100
