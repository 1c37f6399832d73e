"""Pane commands.

PUBLIC API:
  - list_panes: List panes in a window (or the active window)
  - capture_pane: Read recent content of a pane
  - split_pane: Split a pane
  - kill_pane: Kill a pane
"""

from typing import Any, Optional

from ..app import app
from ..errors import markdown_error_response, string_error_response, table_error_response
from ..tmux import TmuxError
from ..tmux import pane as tmux_pane
from ..types import SplitDirection


@app.command(
    display="table",
    headers=["ID", "Command", "Path", "Title", "Active"],
    fastmcp={"type": "tool", "description": "List panes in a tmux window"},
)
def list_panes(state, window_id: Optional[str] = None) -> list[dict[str, Any]]:
    """List panes in a window.

    Without window_id, lists the active window of the attached session.
    """
    try:
        if window_id:
            panes = tmux_pane.list_panes(window_id)
        else:
            panes = tmux_pane.list_active_panes()
    except TmuxError as e:
        return table_error_response(str(e))

    return [
        {
            "ID": pane.id,
            "Command": pane.current_command,
            "Path": pane.cwd,
            "Title": pane.title,
            "Active": "Yes" if pane.active else "No",
        }
        for pane in panes
    ]


@app.command(
    display="codeblock",
    fastmcp={"type": "tool", "description": "Capture content from a tmux pane"},
)
def capture_pane(state, pane_id: str, lines: int = 200, colors: bool = False) -> dict[str, Any]:
    """Capture recent content of a pane.

    Args:
        state: Application state (unused).
        pane_id: Target pane ID.
        lines: Number of trailing lines to capture.
        colors: Keep ANSI color escapes.

    Returns dict with content and metadata.
    """
    try:
        content = tmux_pane.capture_pane_content(pane_id, lines, colors)
    except TmuxError as e:
        return {"content": string_error_response(str(e)), "language": "text", "pane_id": pane_id, "error": str(e)}

    return {
        "content": content,
        "language": "text",
        "pane_id": pane_id,
        "lines": lines,
    }


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Split a tmux pane horizontally or vertically"},
)
def split_pane(
    state,
    pane_id: str,
    direction: SplitDirection = "vertical",
    size: Optional[int] = None,
) -> dict[str, Any]:
    """Split a pane.

    Args:
        state: Application state (unused).
        pane_id: Pane to split.
        direction: "horizontal" (side by side) or "vertical" (stacked).
        size: Percentage for the new pane (1-99).
    """
    try:
        new_pane = tmux_pane.split_pane(pane_id, direction, size)
    except TmuxError as e:
        return markdown_error_response(str(e), pane=pane_id)

    if new_pane is None:
        return markdown_error_response(f"Split of {pane_id} succeeded but no pane was found", pane=pane_id)

    return {
        "elements": [{"type": "text", "content": f"Pane split: new pane {new_pane.id} in window {new_pane.window_id}"}],
        "frontmatter": {"pane": new_pane.id, "split_from": pane_id, "direction": direction, "status": "created"},
    }


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Kill a tmux pane by ID"},
)
def kill_pane(state, pane_id: str) -> str:
    """Kill a tmux pane."""
    try:
        tmux_pane.kill_pane(pane_id)
    except TmuxError as e:
        return string_error_response(str(e))

    return f"Pane {pane_id} has been killed"
