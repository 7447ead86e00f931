from __future__ import annotations

import pytest
from pydantic import ValidationError

from playlist_duration.infra.exceptions import (
    EmptyListError,
    InvalidRangeError,
    PlaylistDurationError,
    ValidationError as InputValidationError,
)
from playlist_duration.infra.settings import Settings


def test_defaults() -> None:
    config = Settings()
    assert config.poll_interval_seconds == 1.0
    assert config.max_poll_attempts == 60
    assert config.scroll_hint_threshold == 100


def test_environment_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLL_INTERVAL_SECONDS", "0.5")
    monkeypatch.setenv("MAX_POLL_ATTEMPTS", "12")
    monkeypatch.setenv("LOG_FORMAT", "Console")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = Settings()
    assert config.poll_interval_seconds == 0.5
    assert config.max_poll_attempts == 12
    assert config.log_format == "console"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"poll_interval_seconds": 0},
        {"max_poll_attempts": 0},
        {"scroll_hint_threshold": 0},
        {"log_format": "xml"},
    ],
)
def test_rejects_invalid_values(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_exception_hierarchy() -> None:
    error = InvalidRangeError("5", "2", "start must not exceed end")
    assert isinstance(error, InputValidationError)
    assert isinstance(error, PlaylistDurationError)
    assert (error.start, error.end) == ("5", "2")
    assert "start must not exceed end" in str(error)
    assert issubclass(EmptyListError, PlaylistDurationError)
