"""
Tests for startup configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from message_board.core.config import Settings
from tests.fakes import make_settings


def test_defaults():
    """Unset options fall back to the documented defaults."""
    settings = make_settings()
    assert settings.ALLOWED_ORIGIN == "*"
    assert settings.PORT == 8787
    assert settings.RATE_LIMIT_WINDOW_SECONDS == 900
    assert settings.RATE_LIMIT_MAX == 100
    assert settings.MAX_BODY_BYTES == 10240
    assert settings.MESSAGE_MAX_LENGTH == 5000
    assert settings.SUPABASE_TABLE == "messages"


def test_reads_environment(monkeypatch):
    """Options are read from process environment variables."""
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE", "env-key")
    monkeypatch.setenv("ALLOWED_ORIGIN", "https://portfolio.example")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("RATE_LIMIT_MAX", "5")

    settings = Settings(_env_file=None)

    assert settings.SUPABASE_URL == "https://env.supabase.co"
    assert settings.ALLOWED_ORIGIN == "https://portfolio.example"
    assert settings.PORT == 9000
    assert settings.RATE_LIMIT_MAX == 5


@pytest.mark.parametrize("missing", ["SUPABASE_URL", "SUPABASE_SERVICE_ROLE"])
def test_missing_store_settings_fail(monkeypatch, missing):
    """Settings cannot be built without the store URL and credential."""
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE", "env-key")
    monkeypatch.delenv(missing)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("blank", ["SUPABASE_URL", "SUPABASE_SERVICE_ROLE"])
def test_blank_store_settings_fail(monkeypatch, blank):
    """A store variable that is set but empty counts as missing."""
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE", "env-key")
    monkeypatch.setenv(blank, "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_are_immutable():
    """Resolved settings cannot be changed afterwards."""
    settings = make_settings()
    with pytest.raises(ValidationError):
        settings.PORT = 1


def test_entry_point_exits_without_store_settings(monkeypatch):
    """The command-line entry point exits with status 1 when the store is not configured."""
    from message_board import __main__ as entry

    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE", raising=False)
    monkeypatch.setattr(entry, "get_settings", lambda: Settings(_env_file=None))

    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1


def test_entry_point_exits_on_blank_store_url(monkeypatch):
    """An empty SUPABASE_URL takes the same exit path instead of failing inside the app."""
    from message_board import __main__ as entry

    monkeypatch.setenv("SUPABASE_URL", "")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE", "env-key")
    monkeypatch.setattr(entry, "get_settings", lambda: Settings(_env_file=None))

    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
