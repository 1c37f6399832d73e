"""Pane operations - listing, capture, input and layout.

PUBLIC API:
  - list_panes: List panes in a window
  - list_active_panes: List panes in the active window of the attached session
  - capture_pane_content: Capture trailing lines of a pane
  - get_pane_current_command: Name of the pane's foreground process
  - send_keys: Send keystrokes to a pane
  - split_pane: Split a pane and return the new one
  - kill_pane: Kill a pane
"""

import logging
from typing import List, Optional

from .core import run_tmux, parse_format_line, split_lines, display_message
from .session import list_sessions
from .window import list_windows
from ..types import TmuxPane, SplitDirection

logger = logging.getLogger(__name__)

# Tab-delimited with the title last; titles and paths may contain ":" or "|"
PANE_FORMAT = "\t".join(
    [
        "#{pane_id}",
        "#{?pane_active,1,0}",
        "#{pane_current_command}",
        "#{pane_current_path}",
        "#{pane_title}",
    ]
)


def list_panes(window_id: str) -> List[TmuxPane]:
    """List panes in a window.

    Args:
        window_id: Window ID ("@7") or any tmux window target.
    """
    output = run_tmux(["list-panes", "-t", window_id, "-F", PANE_FORMAT])

    panes = []
    for line in split_lines(output):
        parts = parse_format_line(line, delimiter="\t", maxsplit=4)
        panes.append(
            TmuxPane(
                id=parts["0"],
                window_id=window_id,
                active=parts.get("1") == "1",
                current_command=parts.get("2", ""),
                cwd=parts.get("3", ""),
                title=parts.get("4", ""),
            )
        )
    return panes


def list_active_panes() -> List[TmuxPane]:
    """List panes of the active window in the attached session.

    Returns an empty list when no session is attached.
    """
    active_session = next((s for s in list_sessions() if s.attached), None)
    if active_session is None:
        return []

    active_window = next((w for w in list_windows(active_session.id) if w.active), None)
    if active_window is None:
        return []

    return list_panes(active_window.id)


def capture_pane_content(
    pane_id: str, lines: int = 200, include_colors: bool = False, join_wrapped: bool = False
) -> str:
    """Capture the last N lines of a pane, scroll-back included.

    Args:
        pane_id: Target pane.
        lines: How many lines of history to start from.
        include_colors: Keep ANSI escape sequences (-e).
        join_wrapped: Rejoin lines the pane width wrapped (-J).
    """
    args = ["capture-pane", "-p"]
    if include_colors:
        args.append("-e")
    if join_wrapped:
        args.append("-J")
    args.extend(["-t", pane_id, "-S", f"-{lines}", "-E", "-"])
    return run_tmux(args)


def get_pane_current_command(pane_id: str) -> str:
    """Get the name of the pane's foreground process (e.g. "bash", "vim")."""
    return display_message(pane_id, "#{pane_current_command}")


def escape_keys(text: str) -> str:
    """Protect a trailing semicolon from being read as a tmux command separator."""
    if text.endswith(";"):
        return text[:-1] + "\\;"
    return text


def send_keys(pane_id: str, *keys: str, literal: bool = False) -> None:
    """Send keystrokes to a pane in a single send-keys call.

    Args:
        pane_id: Target pane ID.
        *keys: Key names (Enter, Up, C-c) or text; each is one argv entry.
        literal: Pass -l so every key is typed as literal UTF-8 text.

    Keys follow "--", so text such as "-5" is never parsed as a flag.

    Examples:
        send_keys("%1", "ls -la", literal=True)
        send_keys("%1", "Enter")
        send_keys("%1", "Escape")
    """
    if not keys:
        return

    args = ["send-keys", "-t", pane_id]
    if literal:
        args.append("-l")
    args.append("--")
    args.extend(escape_keys(key) for key in keys)
    run_tmux(args)


def split_pane(pane_id: str, direction: SplitDirection = "vertical", size: Optional[int] = None) -> Optional[TmuxPane]:
    """Split a pane horizontally or vertically.

    Args:
        pane_id: Pane to split.
        direction: "horizontal" (side by side, -h) or "vertical" (stacked, -v).
        size: Size of the new pane as a percentage; ignored unless 0 < size < 100.

    Returns:
        The last pane of the window, which tmux reports for the newest split.
    """
    args = ["split-window", "-h" if direction == "horizontal" else "-v", "-t", pane_id]
    if size is not None and 0 < size < 100:
        args.extend(["-l", f"{size}%"])
    run_tmux(args)

    # tmux gives no id for the new pane here; take the last one in the window
    window_id = display_message(pane_id, "#{window_id}")
    panes = list_panes(window_id)
    return panes[-1] if panes else None


def kill_pane(pane_id: str) -> None:
    """Kill a tmux pane by ID."""
    run_tmux(["kill-pane", "-t", pane_id])
    logger.info(f"Killed pane {pane_id}")
