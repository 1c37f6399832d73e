"""Window operations.

PUBLIC API:
  - list_windows: List windows in a session
  - create_window: Create a named window in a session
  - kill_window: Kill a window
"""

import logging
from typing import List, Optional

from .core import run_tmux, parse_format_line, split_lines
from ..types import TmuxWindow

logger = logging.getLogger(__name__)

WINDOW_FORMAT = "#{window_id}:#{?window_active,1,0}:#{window_name}"


def list_windows(session_id: str) -> List[TmuxWindow]:
    """List windows in a session.

    Args:
        session_id: Session ID ("$3") or name.
    """
    output = run_tmux(["list-windows", "-t", session_id, "-F", WINDOW_FORMAT])

    windows = []
    for line in split_lines(output):
        parts = parse_format_line(line, maxsplit=2)
        windows.append(
            TmuxWindow(
                id=parts["0"],
                name=parts.get("2", ""),
                active=parts.get("1") == "1",
                session_id=session_id,
            )
        )
    return windows


def create_window(session_id: str, name: str) -> Optional[TmuxWindow]:
    """Create a new window and return it, matched by name."""
    run_tmux(["new-window", "-t", session_id, "-n", name])
    logger.info(f"Created window {name} in {session_id}")

    for window in list_windows(session_id):
        if window.name == name:
            return window
    return None


def kill_window(window_id: str) -> None:
    """Kill a tmux window by ID."""
    run_tmux(["kill-window", "-t", window_id])
    logger.info(f"Killed window {window_id}")
