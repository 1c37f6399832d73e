"""tmux-mcp ReplKit2 application.

Exposes tmux topology and command execution as REPL commands and MCP tools.
The command tracker lives on the application state, so every command that
needs execution records receives it explicitly.
"""

from dataclasses import dataclass, field

from replkit2 import App

from .execution import ExecutionTracker


@dataclass
class TmuxMCPState:
    """Application state.

    Attributes:
        tracker: Registry of commands sent through execute_command. Lost when
            the process exits.
    """

    tracker: ExecutionTracker = field(default_factory=ExecutionTracker)


# Must be created before command imports for decorator registration
app = App(
    "tmux-mcp",
    TmuxMCPState,
    uri_scheme="tmux",
    fastmcp={
        "description": "Interact with tmux sessions, windows and panes",
        "tags": {"terminal", "tmux"},
    },
)


from . import formatters  # noqa: E402, F401

# Command imports trigger @app.command decorator registration
from .commands import sessions  # noqa: E402, F401
from .commands import windows  # noqa: E402, F401
from .commands import panes  # noqa: E402, F401
from .commands import execution  # noqa: E402, F401
from .commands import hook  # noqa: E402, F401
