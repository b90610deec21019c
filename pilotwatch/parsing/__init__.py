"""Parsers for the two autopilot artifacts.

Modules
-------
fields
    ``extract_fields`` — label table driven, last-write-wins extraction.
state_parser
    ``StateParser`` for STATE.md.
log_parser
    ``LogParser`` for ralph.log.
"""

from pilotwatch.parsing.log_parser import LogParser, parse_log
from pilotwatch.parsing.state_parser import StateParser, parse_state

__all__ = ["LogParser", "StateParser", "parse_log", "parse_state"]
