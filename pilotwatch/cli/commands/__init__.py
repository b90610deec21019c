"""CLI command implementations registered by ``pilotwatch.cli.app``."""
