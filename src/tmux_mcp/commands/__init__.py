"""tmux-mcp commands."""

from .sessions import list_sessions, find_session, create_session, kill_session
from .windows import list_windows, create_window, kill_window
from .panes import list_panes, capture_pane, split_pane, kill_pane
from .execution import execute_command, get_command_result, list_commands
from .hook import shell_hook

__all__ = [
    "list_sessions",
    "find_session",
    "create_session",
    "kill_session",
    "list_windows",
    "create_window",
    "kill_window",
    "list_panes",
    "capture_pane",
    "split_pane",
    "kill_pane",
    "execute_command",
    "get_command_result",
    "list_commands",
    "shell_hook",
]
