"""Command execution lifecycle - dispatch, markers, tracking.

PUBLIC API:
  - execute_command: Submit a command to a pane
  - ExecutionTracker: Registry with status polling
  - parse_markers: Marker protocol parser
  - MarkerResult: Parsed marker outcome
"""

from .markers import START_MARKER, END_MARKER_PREFIX, HOOK_COMMAND, MarkerResult, parse_markers
from .tracker import ExecutionTracker, RAW_MODE_ADVISORY, UNCAPTURED_ADVISORY
from .dispatcher import execute_command, check_pane_eligible

__all__ = [
    "START_MARKER",
    "END_MARKER_PREFIX",
    "HOOK_COMMAND",
    "MarkerResult",
    "parse_markers",
    "ExecutionTracker",
    "RAW_MODE_ADVISORY",
    "UNCAPTURED_ADVISORY",
    "execute_command",
    "check_pane_eligible",
]
