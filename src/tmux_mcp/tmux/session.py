"""Session management for tmux.

PUBLIC API:
  - list_sessions: Get all tmux sessions
  - find_session_by_name: Look up a session, None if missing or tmux is down
  - create_session: Create a detached session
  - kill_session: Kill a tmux session
"""

import logging
from typing import List, Optional

from .core import run_tmux, parse_format_line, split_lines
from .exceptions import TmuxError
from ..types import TmuxSession

logger = logging.getLogger(__name__)

# Name last so the split cannot be confused by the name's contents
SESSION_FORMAT = "#{session_id}:#{?session_attached,1,0}:#{session_windows}:#{session_name}"


def _parse_session(line: str) -> TmuxSession:
    parts = parse_format_line(line, maxsplit=3)
    return TmuxSession(
        id=parts["0"],
        name=parts.get("3", ""),
        attached=parts.get("1") == "1",
        windows=int(parts.get("2") or 0),
    )


def list_sessions() -> List[TmuxSession]:
    """Get all tmux sessions.

    Raises:
        TmuxCommandError: If tmux fails (e.g. no server running).
    """
    output = run_tmux(["list-sessions", "-F", SESSION_FORMAT])
    return [_parse_session(line) for line in split_lines(output)]


def find_session_by_name(name: str) -> Optional[TmuxSession]:
    """Find a session by exact name.

    Any tmux failure is treated as "no such session".
    """
    try:
        sessions = list_sessions()
    except TmuxError as e:
        logger.debug(f"Session lookup for {name!r} failed: {e}")
        return None

    for session in sessions:
        if session.name == name:
            return session
    return None


def create_session(name: str) -> Optional[TmuxSession]:
    """Create a new detached session.

    Args:
        name: Session name.

    Returns:
        The new session, or None if it cannot be found right after creation.
    """
    run_tmux(["new-session", "-d", "-s", name])
    logger.info(f"Created session {name}")
    return find_session_by_name(name)


def kill_session(session_id: str) -> None:
    """Kill a tmux session by ID or name."""
    run_tmux(["kill-session", "-t", session_id])
    logger.info(f"Killed session {session_id}")
