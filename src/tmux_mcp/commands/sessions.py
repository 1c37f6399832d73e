"""Session commands.

PUBLIC API:
  - list_sessions: List all tmux sessions
  - find_session: Find a session by name
  - create_session: Create a detached session
  - kill_session: Kill a session
"""

from typing import Any

from ..app import app
from ..errors import markdown_error_response, string_error_response, table_error_response
from ..tmux import TmuxError
from ..tmux import session as tmux_session
from ..types import TmuxSession


def _session_row(session: TmuxSession) -> dict[str, Any]:
    return {
        "ID": session.id,
        "Name": session.name,
        "Attached": "Yes" if session.attached else "No",
        "Windows": session.windows,
    }


@app.command(
    display="table",
    headers=["ID", "Name", "Attached", "Windows"],
    fastmcp={"type": "tool", "description": "List all active tmux sessions"},
)
def list_sessions(state) -> list[dict[str, Any]]:
    """List all tmux sessions."""
    try:
        sessions = tmux_session.list_sessions()
    except TmuxError as e:
        return table_error_response(str(e))

    return [_session_row(session) for session in sessions]


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Find a tmux session by name"},
)
def find_session(state, name: str) -> dict[str, Any]:
    """Find a session by name.

    Args:
        state: Application state (unused).
        name: Exact session name.
    """
    session = tmux_session.find_session_by_name(name)
    if session is None:
        return {
            "elements": [{"type": "text", "content": f"Session not found: {name}"}],
            "frontmatter": {"name": name, "status": "not_found"},
        }

    items = [f"{key}: {value}" for key, value in _session_row(session).items()]
    return {
        "elements": [{"type": "list", "items": items, "ordered": False}],
        "frontmatter": {"session": session.id, "name": session.name, "status": "found"},
    }


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Create a new detached tmux session"},
)
def create_session(state, name: str) -> dict[str, Any]:
    """Create a new detached session.

    Args:
        state: Application state (unused).
        name: Name for the new session.
    """
    try:
        session = tmux_session.create_session(name)
    except TmuxError as e:
        return markdown_error_response(str(e), name=name)

    if session is None:
        return markdown_error_response(f"Session {name} was created but could not be found", name=name)

    return {
        "elements": [{"type": "text", "content": f"Session created: {session.name} ({session.id})"}],
        "frontmatter": {"session": session.id, "name": session.name, "status": "created"},
    }


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Kill a tmux session by ID"},
)
def kill_session(state, session_id: str) -> str:
    """Kill a tmux session."""
    try:
        tmux_session.kill_session(session_id)
    except TmuxError as e:
        return string_error_response(str(e))

    return f"Session {session_id} has been killed"
