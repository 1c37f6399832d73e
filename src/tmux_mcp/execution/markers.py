"""Marker protocol - find command boundaries in captured pane text.

The shell-side hook prints START_MARKER once it is armed and
END_MARKER_PREFIX followed by the exit status once the command returns.
Everything the command printed sits between the two lines, preceded by
the echoed command line itself.

Grammar, applied to the whole capture:
  - take the LAST start marker and the LAST end prefix (older runs stay in scroll-back)
  - the end prefix must come after the start marker
  - the end prefix must be immediately followed by one or more digits

PUBLIC API:
  - START_MARKER: Line printed when the hook is armed
  - END_MARKER_PREFIX: Prefix of the line printed when the command finishes
  - HOOK_COMMAND: Shell routine that arms the hook
  - MarkerResult: Parsed exit code and output
  - parse_markers: Parse captured pane text
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..types import CommandStatus

START_MARKER = "TMUX_MCP_START"
END_MARKER_PREFIX = "TMUX_MCP_DONE_"
HOOK_COMMAND = "__mcp_start"

_EXIT_CODE_RE = re.compile(re.escape(END_MARKER_PREFIX) + r"(\d+)")


@dataclass(frozen=True)
class MarkerResult:
    """Outcome of a successful marker parse."""

    exit_code: int
    output: str

    @property
    def status(self) -> CommandStatus:
        return "completed" if self.exit_code == 0 else "error"


def _strip_echo_line(span: str) -> str:
    """Drop the first line (the echoed submission) and trim the rest."""
    _, _, rest = span.strip().partition("\n")
    return rest.strip()


def parse_markers(content: str) -> Optional[MarkerResult]:
    """Parse command output and exit code out of captured pane text.

    Args:
        content: Captured pane text.

    Returns:
        MarkerResult, or None if the markers are missing, out of order, or
        the end marker carries no exit code yet.
    """
    start_index = content.rfind(START_MARKER)
    end_index = content.rfind(END_MARKER_PREFIX)

    if start_index == -1 or end_index == -1 or end_index <= start_index:
        return None

    end_line = content[end_index:].split("\n", 1)[0]
    match = _EXIT_CODE_RE.match(end_line)
    if not match:
        return None

    span = content[start_index + len(START_MARKER) : end_index]
    return MarkerResult(exit_code=int(match.group(1)), output=_strip_echo_line(span))
