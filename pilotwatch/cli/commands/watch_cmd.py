"""``pilotwatch [PROJECT_ROOT]`` — live progress display for an autopilot run.

Watches ``.planning/STATE.md`` and ``.planning/ralph.log`` under the project
root and redraws the dashboard on every change, plus every few seconds even
without file activity.  Reads local files only; no API calls are made.
"""

from __future__ import annotations

import logging
import signal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pilotwatch.cli.logging_setup import configure_logging
from pilotwatch.config import config
from pilotwatch.monitor.controller import RefreshController
from pilotwatch.monitor.projection import DashboardProjection
from pilotwatch.monitor.renderer import DashboardRenderer

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def build_console(no_color: bool) -> Console:
    """Console for the dashboard; ``no_color`` disables every style."""
    return Console(color_system=None if no_color else "auto", highlight=False)


def watch_cmd(
    project_root: Optional[Path] = typer.Argument(
        None,
        help="Path to the project root (default: current directory).",
        show_default=False,
    ),
    once: bool = typer.Option(
        False,
        "--once",
        help="Render a single pass and exit instead of watching.",
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.1,
        help="Seconds between refreshes without file changes (default: 10).",
    ),
    recent: Optional[int] = typer.Option(
        None,
        "--recent",
        "-n",
        min=1,
        help="Number of recent iterations to show (default: 5).",
    ),
) -> None:
    """Live progress display for autopilot execution.

    Watches .planning/STATE.md and .planning/ralph.log for real-time updates.
    """
    configure_logging(config.log_level)

    root = project_root if project_root is not None else Path.cwd()
    if not root.exists():
        err_console.print(
            f"Error: Project root not found: {root}", style="bold red", markup=False
        )
        raise typer.Exit(code=1)

    projection = DashboardProjection(
        root / config.state_file,
        root / config.log_file,
        recent_limit=recent if recent is not None else config.recent_iterations,
    )
    no_color = config.color_disabled
    renderer = DashboardRenderer(build_console(no_color), clear_screen=not no_color)

    if once:
        renderer.console.print(renderer.render_snapshot(projection.snapshot()))
        return

    controller = RefreshController(
        projection,
        renderer.show,
        interval=interval if interval is not None else config.refresh_interval,
    )

    def _request_shutdown(signum: int, frame: object) -> None:
        controller.request_shutdown()

    previous = {
        sig: signal.signal(sig, _request_shutdown)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        controller.run()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    logger.info("Shutdown requested after %d passes", controller.pass_count)
    renderer.print_shutdown_notice()
