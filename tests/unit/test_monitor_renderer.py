"""Unit tests for the DashboardRenderer.

Tests Rich panel output, status decoration, the waiting and error
placeholders, and determinism of the rendered text.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from pilotwatch.models.dashboard import (
    ArtifactStatus,
    DashboardSnapshot,
    LogReading,
    StateReading,
)
from pilotwatch.models.progress import IterationStatus, LogEntry, StateSnapshot
from pilotwatch.monitor.renderer import (
    FOOTER,
    SHUTDOWN_NOTICE,
    DashboardRenderer,
    _STATUS_STYLES,
    format_status,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_STATE = Path(".planning/STATE.md")
_LOG = Path(".planning/ralph.log")


def _state(**fields: str) -> StateReading:
    return StateReading(
        path=_STATE, status=ArtifactStatus.PRESENT, snapshot=StateSnapshot(**fields)
    )


def _log(entries: list[LogEntry]) -> LogReading:
    return LogReading(path=_LOG, status=ArtifactStatus.PRESENT, entries=entries)


def _make_snapshot(
    state: StateReading | None = None,
    log: LogReading | None = None,
) -> DashboardSnapshot:
    return DashboardSnapshot(
        state=state or _state(phase="2 of 4", plan="02-01", status="Executing"),
        log=log or _log([]),
        captured_at=datetime(2026, 2, 27, 12, 0, 0),
    )


def _renderer() -> DashboardRenderer:
    console = Console(width=100, color_system=None)
    return DashboardRenderer(console=console, clear_screen=False)


# ---------------------------------------------------------------------------
# Test: Status decoration
# ---------------------------------------------------------------------------


class TestStatusFormatting:
    def test_all_statuses_have_styles(self):
        for status in IterationStatus:
            assert status in _STATUS_STYLES, f"Missing style for {status}"

    def test_success_icon(self):
        text = format_status(LogEntry(iteration="1", status="SUCCESS"))
        assert text.plain == "✓ SUCCESS"
        assert text.style == "green"

    def test_failure_icon_case_insensitive(self):
        text = format_status(LogEntry(iteration="1", status="failure"))
        assert text.plain == "✗ failure"

    def test_retry_icon(self):
        assert format_status(LogEntry(iteration="1", status="RETRY")).plain == "⟳ RETRY"

    def test_unrecognized_passes_through(self):
        text = format_status(LogEntry(iteration="1", status="SKIPPED"))
        assert text.plain == "SKIPPED"
        assert not text.style


# ---------------------------------------------------------------------------
# Test: Render snapshot
# ---------------------------------------------------------------------------


class TestRenderSnapshot:
    def test_render_returns_panel(self):
        assert isinstance(_renderer().render_snapshot(_make_snapshot()), Panel)

    def test_current_position(self):
        output = _renderer().render_text(
            _make_snapshot(state=_state(phase="Build", status="SUCCESS", last_activity="today"))
        )
        assert "Current Position:" in output
        assert "Phase:  Build" in output
        assert "Status: SUCCESS" in output
        assert "Last:   today" in output
        assert FOOTER in output
        assert "12:00:00" in output

    def test_progress_section_only_when_present(self):
        renderer = _renderer()
        without = renderer.render_text(_make_snapshot(state=_state(phase="x")))
        with_progress = renderer.render_text(
            _make_snapshot(state=_state(phase="x", progress="40%"))
        )
        assert "Progress:" not in without
        assert "Progress:" in with_progress
        assert "40%" in with_progress

    def test_waiting_placeholder_for_missing_state(self):
        entries = [LogEntry(iteration="9", task="t9", status="SUCCESS")]
        snapshot = _make_snapshot(
            state=StateReading(path=_STATE, status=ArtifactStatus.MISSING),
            log=_log(entries),
        )
        output = _renderer().render_text(snapshot)
        assert "Waiting for STATE.md..." in output
        assert "Current Position:" not in output
        assert "#9" in output
        assert "Recent Iterations:" in output

    def test_error_line_for_unreadable_log(self):
        snapshot = _make_snapshot(
            log=LogReading(
                path=_LOG, status=ArtifactStatus.UNREADABLE, error="Permission denied"
            )
        )
        output = _renderer().render_text(snapshot)
        assert "Error reading ralph.log: Permission denied" in output
        assert "Phase:  2 of 4" in output

    def test_waiting_placeholder_for_missing_log(self):
        snapshot = _make_snapshot(
            log=LogReading(path=_LOG, status=ArtifactStatus.MISSING)
        )
        assert "Waiting for ralph.log..." in _renderer().render_text(snapshot)

    def test_entry_details(self):
        entry = LogEntry(
            iteration="4",
            task="04-01-PLAN.md",
            status="FAILURE",
            duration="12s",
            summary="lint failed",
        )
        output = _renderer().render_text(_make_snapshot(log=_log([entry])))
        assert "#4 ✗ FAILURE" in output
        assert "Task: 04-01-PLAN.md" in output
        assert "lint failed" in output
        assert "Duration: 12s" in output

    def test_only_last_five_shown(self):
        entries = [LogEntry(iteration=str(i), task=f"t{i}") for i in range(1, 8)]
        output = _renderer().render_text(_make_snapshot(log=_log(entries)))
        assert "#1 " not in output
        assert "#2 " not in output
        positions = [output.index(f"#{i} ") for i in range(3, 8)]
        assert positions == sorted(positions)

    def test_markup_in_content_rendered_verbatim(self):
        entry = LogEntry(iteration="1", task="[bold]not markup[/bold]")
        output = _renderer().render_text(_make_snapshot(log=_log([entry])))
        assert "[bold]not markup[/bold]" in output

    def test_deterministic(self):
        renderer = _renderer()
        entries = [LogEntry(iteration="1", status="RETRY", summary="again")]
        snapshot = _make_snapshot(log=_log(entries))
        assert renderer.render_text(snapshot) == renderer.render_text(snapshot)


# ---------------------------------------------------------------------------
# Test: Output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_show_prints_panel(self):
        renderer = _renderer()
        with renderer.console.capture() as capture:
            renderer.show(_make_snapshot())
        assert "Current Position:" in capture.get()

    def test_shutdown_notice(self):
        renderer = _renderer()
        with renderer.console.capture() as capture:
            renderer.print_shutdown_notice()
        assert SHUTDOWN_NOTICE in capture.get()
