from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from playlist_duration.cli.main import app
from tests.util.pages import playlist_page

runner = CliRunner()

VIDEOS = [
    ("Intro", "1:00"),
    ("Deep dive", "1:02:03"),
    ("[Private video]", None),
    ("Outro", "0:30"),
    ("[Deleted video]", None),
]


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "playlist.html"
    path.write_text(playlist_page(VIDEOS, stats="6 videos"), encoding="utf-8")
    return path


def _invoke(*args: str):
    return runner.invoke(app, ["--log-level", "ERROR", *args])


def test_summarize_prints_summary(page: Path) -> None:
    result = _invoke("summarize", str(page), "--interval", "0.01")
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "Calculating..."
    assert "Total duration: 01:03:33" in lines
    assert "Videos counted: 3" in lines
    assert "Videos not counted: 3" in lines


def test_summarize_json(page: Path) -> None:
    result = _invoke("summarize", str(page), "--interval", "0.01", "--json")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["status"] == "ok"
    assert payload["attempts"] == 1
    assert payload["total_seconds"] == 3813
    assert payload["total_duration"] == "01:03:33"
    assert payload["counted_items"] == 3
    assert payload["total_videos_in_list"] == 6
    assert payload["summary"]["scroll_hint"] is None


def test_summarize_times_out_on_loading_page(tmp_path: Path) -> None:
    path = tmp_path / "loading.html"
    path.write_text(playlist_page([("Intro", "1:00"), ("Still loading", None)]), encoding="utf-8")

    result = _invoke("summarize", str(path), "--interval", "0.01", "--max-attempts", "3", "--json")

    assert result.exit_code == 1
    assert json.loads(result.stdout) == {"status": "timed_out", "attempts": 3}


def test_summarize_missing_file(tmp_path: Path) -> None:
    result = _invoke("summarize", str(tmp_path / "nope.html"))
    assert result.exit_code != 0


def test_range(page: Path) -> None:
    result = _invoke("range", str(page), "2", "4")
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Custom duration: 01:02:33"


def test_range_json(page: Path) -> None:
    result = _invoke("range", str(page), "1", "1", "--json")
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"ok": True, "label": "Custom duration:", "value": "00:01:00", "seconds": 60}


@pytest.mark.parametrize(("start", "end"), [("4", "2"), ("0", "3"), ("x", "3"), ("1.5", "2"), ("9" * 5000, "3")])
def test_range_rejects_bad_bounds(page: Path, start: str, end: str) -> None:
    result = _invoke("range", str(page), start, end)
    assert result.exit_code == 1
    assert result.stdout.strip() == "Error: Please enter proper numbers!"


def test_parse_and_format() -> None:
    assert _invoke("parse", "1:02:03").stdout.strip() == "3723"
    assert _invoke("format", "3723").stdout.strip() == "01:02:03"


def test_parse_without_digits_fails() -> None:
    assert _invoke("parse", "ab:cd").exit_code == 1


def test_bad_log_format_rejected() -> None:
    result = runner.invoke(app, ["--log-format", "xml", "format", "1"])
    assert result.exit_code != 0
