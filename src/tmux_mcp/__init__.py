"""tmux pane automation with MCP support.

Lists and manages tmux sessions, windows and panes, and runs shell commands
in panes with exit status and output recovered from marker lines the shell
prints around each command. The ReplKit2 application (REPL and MCP server)
lives in tmux_mcp.app.

PUBLIC API:
  - ExecutionTracker: Registry of submitted commands
  - execute_command: Submit a command to a pane
  - parse_markers: Parse marker lines out of captured pane text
"""

from .execution import ExecutionTracker, execute_command, parse_markers

__version__ = "0.1.0"
__all__ = ["ExecutionTracker", "execute_command", "parse_markers"]
