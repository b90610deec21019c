"""Main Typer application.

Entry point: ``pilotwatch`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from pilotwatch.cli.commands.watch_cmd import watch_cmd

_EPILOG = (
    "Notes: press Ctrl+C to exit. Zero API token consumption (pure file "
    "watching). The display updates on file changes and every 10 seconds. "
    "Set NO_COLOR to disable styling."
)

app = typer.Typer(
    name="pilotwatch",
    help="Live progress display for autopilot execution.",
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(
    name="watch",
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)(watch_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
