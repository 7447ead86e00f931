"""
Main CLI application using Typer.

Summarizes saved playlist pages: the full-list summary goes through the same
readiness poller a live view uses, driven by an asyncio loop; range queries and
the duration helpers answer directly. ``--json`` switches any command to JSON
output.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from playlist_duration.adapters.html_host import HtmlSnapshotHost
from playlist_duration.domain.duration import format_duration, parse_duration
from playlist_duration.domain.types import PollState, PollStatus
from playlist_duration.infra.logging import configure_logging
from playlist_duration.infra.settings import settings
from playlist_duration.presentation.presenters import EchoPresenter
from playlist_duration.presentation.summary import SummaryView
from playlist_duration.runtime.scheduler import AsyncioScheduler
from playlist_duration.runtime.session import PlaylistSession

app = typer.Typer(help="Playlist duration summaries for saved playlist pages")


def _format_json_output(result: dict) -> str:
    return json.dumps(result, indent=2)


async def _poll_until_settled(session: PlaylistSession) -> PollStatus:
    config = session.context.settings
    session.start()
    step = config.poll_interval_seconds / 4
    while not session.status.settled:
        await asyncio.sleep(step)
    return session.status


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
    log_format: str = typer.Option(settings.log_format, "--log-format", help="json or console"),
):
    """Configure logging before any command runs."""
    log_format = log_format.strip().lower()
    if log_format not in ("json", "console"):
        raise typer.BadParameter("must be 'json' or 'console'", param_hint="--log-format")
    config = settings.model_copy(update={"log_level": log_level.strip().upper(), "log_format": log_format})
    configure_logging(config)


@app.command("summarize")
def summarize(
    page: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Saved playlist page"),
    interval: float = typer.Option(
        settings.poll_interval_seconds, "--interval", min=0.001, help="Seconds between readiness checks"
    ),
    max_attempts: int = typer.Option(
        settings.max_poll_attempts, "--max-attempts", min=1, help="Readiness checks before giving up"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Poll the page until it is ready, then print the playlist summary."""
    config = settings.model_copy(update={"poll_interval_seconds": interval, "max_poll_attempts": max_attempts})
    host = HtmlSnapshotHost.from_file(page)
    presenter = EchoPresenter(echo=typer.echo, scroll_hint_threshold=config.scroll_hint_threshold, quiet=json_output)
    session = PlaylistSession.create(host, presenter, AsyncioScheduler(), settings=config)

    status = asyncio.run(_poll_until_settled(session))
    result = presenter.last_result

    if status.state is not PollState.STABLE or result is None:
        reason = "empty" if status.state is PollState.STABLE else status.state.value
        if json_output:
            typer.echo(_format_json_output({"status": reason, "attempts": status.attempt}))
        else:
            typer.echo(f"Error: playlist not ready ({reason}) after {status.attempt} checks", err=True)
        raise typer.Exit(1)

    if json_output:
        view = SummaryView.from_result(result, config.scroll_hint_threshold)
        payload = {
            "status": "ok",
            "attempts": status.attempt,
            "total_seconds": result.total_seconds,
            "total_duration": result.formatted_duration,
            "counted_items": result.counted_items,
            "total_videos_in_list": result.total_videos_in_list,
            "summary": view.as_dict(),
        }
        typer.echo(_format_json_output(payload))


@app.command("range")
def range_(
    page: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Saved playlist page"),
    start: str = typer.Argument(..., help="First item, 1-based"),
    end: str = typer.Argument(..., help="Last item, inclusive"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Print the total duration of items START..END."""
    host = HtmlSnapshotHost.from_file(page)
    session = PlaylistSession.create(host, EchoPresenter(echo=typer.echo, quiet=True), AsyncioScheduler())
    outcome = session.range_summary(start, end)

    if json_output:
        typer.echo(_format_json_output(outcome.as_dict()))
    else:
        typer.echo(f"{outcome.row.label} {outcome.row.value}")
    if not outcome.ok:
        raise typer.Exit(1)


@app.command("parse")
def parse(
    text: str = typer.Argument(..., help="Clock-notation duration, e.g. 1:02:03"),
):
    """Print a clock-notation duration as whole seconds."""
    seconds = parse_duration(text)
    if seconds is None:
        typer.echo(f"Error: no duration in {text!r}", err=True)
        raise typer.Exit(1)
    typer.echo(str(seconds))


@app.command("format")
def format_(
    seconds: int = typer.Argument(..., min=0, help="Whole seconds"),
):
    """Print whole seconds as HH:MM:SS."""
    typer.echo(format_duration(seconds))


def cli() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    cli()
