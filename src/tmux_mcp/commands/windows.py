"""Window commands.

PUBLIC API:
  - list_windows: List windows in a session
  - create_window: Create a window in a session
  - kill_window: Kill a window
"""

from typing import Any

from ..app import app
from ..errors import markdown_error_response, string_error_response, table_error_response
from ..tmux import TmuxError
from ..tmux import window as tmux_window


@app.command(
    display="table",
    headers=["ID", "Name", "Active"],
    fastmcp={"type": "tool", "description": "List windows in a tmux session"},
)
def list_windows(state, session_id: str) -> list[dict[str, Any]]:
    """List windows in a session."""
    try:
        windows = tmux_window.list_windows(session_id)
    except TmuxError as e:
        return table_error_response(str(e))

    return [
        {
            "ID": window.id,
            "Name": window.name,
            "Active": "Yes" if window.active else "No",
        }
        for window in windows
    ]


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Create a new window in a tmux session"},
)
def create_window(state, session_id: str, name: str) -> dict[str, Any]:
    """Create a new window in a session.

    Args:
        state: Application state (unused).
        session_id: Session ID or name.
        name: Window name.
    """
    try:
        window = tmux_window.create_window(session_id, name)
    except TmuxError as e:
        return markdown_error_response(str(e), session=session_id)

    if window is None:
        return markdown_error_response(f"Window {name} was created but could not be found", session=session_id)

    return {
        "elements": [{"type": "text", "content": f"Window created: {window.name} ({window.id})"}],
        "frontmatter": {"window": window.id, "session": session_id, "status": "created"},
    }


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Kill a tmux window by ID"},
)
def kill_window(state, window_id: str) -> str:
    """Kill a tmux window."""
    try:
        tmux_window.kill_window(window_id)
    except TmuxError as e:
        return string_error_response(str(e))

    return f"Window {window_id} has been killed"
