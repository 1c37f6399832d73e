"""Pure tmux operations - a thin layer over the tmux command line.

PUBLIC API:
  - run_tmux: Run tmux command and return trimmed stdout
  - is_tmux_running: Check if a tmux server answers
  - list_sessions: List all sessions
  - find_session_by_name: Find a session by name
  - create_session: Create detached session
  - kill_session: Kill session
  - list_windows: List windows in a session
  - create_window: Create window in session
  - kill_window: Kill window
  - list_panes: List panes in a window
  - list_active_panes: List panes in the attached session's active window
  - capture_pane_content: Capture pane text
  - get_pane_current_command: Foreground process of a pane
  - send_keys: Send keystrokes to pane
  - split_pane: Split pane
  - kill_pane: Kill pane
"""

from .core import run_tmux, is_tmux_running

from .exceptions import TmuxError, TmuxCommandError, IneligiblePaneError

from .session import (
    list_sessions,
    find_session_by_name,
    create_session,
    kill_session,
)

from .window import (
    list_windows,
    create_window,
    kill_window,
)

from .pane import (
    list_panes,
    list_active_panes,
    capture_pane_content,
    get_pane_current_command,
    send_keys,
    split_pane,
    kill_pane,
)

__all__ = [
    "run_tmux",
    "is_tmux_running",
    "TmuxError",
    "TmuxCommandError",
    "IneligiblePaneError",
    "list_sessions",
    "find_session_by_name",
    "create_session",
    "kill_session",
    "list_windows",
    "create_window",
    "kill_window",
    "list_panes",
    "list_active_panes",
    "capture_pane_content",
    "get_pane_current_command",
    "send_keys",
    "split_pane",
    "kill_pane",
]
