"""Allow ``python -m pilotwatch``."""

from pilotwatch.cli.app import main

main()
