"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - TmuxCommandError: A tmux invocation failed
  - IneligiblePaneError: Pane is not running a shell that can take marker input
"""

from typing import List, Optional


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class TmuxCommandError(TmuxError):
    """Raised when tmux exits non-zero or cannot be executed.

    Attributes:
        args_list: Arguments passed to tmux (without the binary).
        stderr: Whatever tmux wrote to stderr, if anything.
    """

    def __init__(self, message: str, args_list: Optional[List[str]] = None, stderr: str = ""):
        super().__init__(message)
        self.args_list = list(args_list or [])
        self.stderr = stderr


class IneligiblePaneError(TmuxError):
    """Raised when a pane's foreground process is not a known shell."""

    def __init__(self, pane_id: str, current_command: str):
        super().__init__(
            f"Cannot execute command: pane {pane_id} is running '{current_command}', not a shell. "
            "Use raw_mode for interactive applications."
        )
        self.pane_id = pane_id
        self.current_command = current_command
