"""pilotwatch CLI — Typer-based command-line interface.

Provides the ``pilotwatch`` command, which shows a live dashboard of an
autopilot run from its STATE.md and ralph.log.

All output uses Rich for formatted terminal display.
"""
