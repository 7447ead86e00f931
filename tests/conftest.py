"""
Global test configuration for playlist-duration.

This module provides global pytest configuration and fixtures.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from playlist_duration.infra.logging import configure_logging  # noqa: E402
from playlist_duration.infra.settings import Settings  # noqa: E402
from playlist_duration.presentation.presenters import RecordingPresenter  # noqa: E402
from playlist_duration.runtime.scheduler import SteppedScheduler  # noqa: E402
from tests.util.fake_host import FakePlaylistHost  # noqa: E402

configure_logging(Settings(log_level="WARNING", log_format="console"))


@pytest.fixture
def test_settings() -> Settings:
    return Settings(poll_interval_seconds=1.0, max_poll_attempts=60, scroll_hint_threshold=100, env="test")


@pytest.fixture
def scheduler() -> SteppedScheduler:
    return SteppedScheduler()


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def host() -> FakePlaylistHost:
    return FakePlaylistHost()
