"""Rich terminal renderer for the autopilot progress dashboard.

Turns a ``DashboardSnapshot`` into a Rich renderable.  Output depends only on
the snapshot (including its capture time), so the same snapshot always
renders identically.

Artifact text is wrapped in ``Text`` objects, never passed through markup,
so square brackets in task names or summaries are shown verbatim.

Color scheme
------------
- green  ✓ : SUCCESS
- red    ✗ : FAILURE
- yellow ⟳ : RETRY
- plain    : any other status literal
"""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from pilotwatch.models.dashboard import (
    ArtifactStatus,
    DashboardSnapshot,
    LogReading,
    StateReading,
)
from pilotwatch.models.progress import IterationStatus, LogEntry

TITLE = "Autopilot Progress Watcher"
FOOTER = "Watching for changes... (Ctrl+C to exit)"
SHUTDOWN_NOTICE = "Stopping progress watcher..."

# ---------------------------------------------------------------------------
# Status -> (icon, Rich style)
# ---------------------------------------------------------------------------

_STATUS_STYLES: dict[IterationStatus, tuple[str, str]] = {
    IterationStatus.SUCCESS: ("✓", "green"),
    IterationStatus.FAILURE: ("✗", "red"),
    IterationStatus.RETRY: ("⟳", "yellow"),
}


def format_status(entry: LogEntry) -> Text:
    """Decorate a recognized status; pass anything else through unformatted."""
    if not entry.status:
        return Text("")
    kind = entry.status_kind
    if kind is None:
        return Text(entry.status)
    icon, style = _STATUS_STYLES[kind]
    return Text(f"{icon} {entry.status}", style=style)


class DashboardRenderer:
    """Renders ``DashboardSnapshot`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    clear_screen:
        Clear the terminal before each ``show()``.  Disabled under NO_COLOR.
    """

    def __init__(
        self, console: Console | None = None, *, clear_screen: bool = True
    ) -> None:
        self.console = console or Console()
        self.clear_screen = clear_screen

    # ------------------------------------------------------------------
    # Single snapshot render
    # ------------------------------------------------------------------

    def render_snapshot(self, snapshot: DashboardSnapshot) -> Panel:
        """Render a snapshot as a Panel holding the state and log sections."""
        body: list[RenderableType] = []
        body.extend(self._state_section(snapshot.state))
        body.extend(self._log_section(snapshot.log, snapshot.recent_entries))
        body.append(Rule(style="dim"))
        body.append(Text(FOOTER, style="dim"))

        return Panel(
            Group(*body),
            title=f"[bold]{TITLE}[/bold]",
            subtitle=snapshot.captured_at.strftime("%H:%M:%S"),
            border_style="cyan",
            padding=(1, 2),
        )

    def _state_section(self, reading: StateReading) -> list[RenderableType]:
        name = reading.path.name
        if reading.status is ArtifactStatus.MISSING:
            return [Text(f"Waiting for {name}...", style="dim"), Text("")]
        if reading.status is ArtifactStatus.UNREADABLE or reading.snapshot is None:
            return [Text(f"Error reading {name}: {reading.error}", style="red"), Text("")]

        state = reading.snapshot
        lines: list[RenderableType] = [
            Text("Current Position:", style="bold"),
            Text(f"  Phase:  {state.phase}"),
            Text(f"  Plan:   {state.plan}"),
            Text(f"  Status: {state.status}"),
        ]
        if state.last_activity:
            lines.append(Text.assemble("  Last:   ", (state.last_activity, "dim")))
        lines.append(Text(""))

        if state.progress:
            lines.append(Text("Progress:", style="bold"))
            lines.append(Text(f"  {state.progress}"))
            lines.append(Text(""))
        return lines

    def _log_section(
        self, reading: LogReading, recent: list[LogEntry]
    ) -> list[RenderableType]:
        name = reading.path.name
        if reading.status is ArtifactStatus.MISSING:
            return [Text(f"Waiting for {name}...", style="dim"), Text("")]
        if reading.status is ArtifactStatus.UNREADABLE:
            return [Text(f"Error reading {name}: {reading.error}", style="red"), Text("")]
        if not recent:
            return []

        lines: list[RenderableType] = [Text("Recent Iterations:", style="bold")]
        for entry in recent:
            lines.append(
                Text.assemble(
                    "  ", (f"#{entry.iteration}", "cyan"), " ", format_status(entry)
                )
            )
            lines.append(Text.assemble("      Task: ", (entry.task, "dim")))
            if entry.summary:
                lines.append(Text(f"      {entry.summary}"))
            if entry.duration:
                lines.append(Text(f"      Duration: {entry.duration}", style="dim"))
            lines.append(Text(""))
        return lines

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show(self, snapshot: DashboardSnapshot) -> None:
        """Redraw the dashboard for one pass."""
        if self.clear_screen:
            self.console.clear()
        self.console.print(self.render_snapshot(snapshot))

    def render_text(self, snapshot: DashboardSnapshot) -> str:
        """Render a snapshot to a string using this renderer's console."""
        with self.console.capture() as capture:
            self.console.print(self.render_snapshot(snapshot))
        return capture.get()

    def print_shutdown_notice(self) -> None:
        self.console.print()
        self.console.print(Text(SHUTDOWN_NOTICE, style="yellow"))
