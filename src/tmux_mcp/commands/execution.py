"""Command execution in tmux panes.

PUBLIC API:
  - execute_command: Send a command to a pane and return its tracking ID
  - get_command_result: Poll a submitted command
  - list_commands: Show tracked commands
"""

from typing import Any

from ..app import app
from ..errors import markdown_error_response
from ..execution import execute_command as dispatch_command
from ..tmux import IneligiblePaneError, TmuxError
from ..types import CommandExecution


def _truncate(command: str, limit: int = 40) -> str:
    return command[:limit] + ("..." if len(command) > limit else "")


@app.command(
    display="markdown",
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"execution", "shell"},
        "description": "Execute a command in a tmux pane; poll get_command_result for the outcome",
    },
)
def execute_command(
    state,
    pane_id: str,
    command: str,
    raw_mode: bool = False,
    no_enter: bool = False,
) -> dict[str, Any]:
    """Send a command to a pane without waiting for it.

    Args:
        state: Application state holding the tracker.
        pane_id: Target pane ID.
        command: Command to run, or keys to type with no_enter.
        raw_mode: Send without completion markers (REPLs, TUIs).
        no_enter: Type a key name or characters without pressing Enter.

    Returns:
        Markdown result with the command ID.
    """
    state.tracker.evict_stale()

    try:
        command_id = dispatch_command(state.tracker, pane_id, command, raw_mode=raw_mode, no_enter=no_enter)
    except IneligiblePaneError as e:
        return markdown_error_response(str(e), pane=pane_id, process=e.current_command)
    except TmuxError as e:
        return markdown_error_response(str(e), pane=pane_id)

    if raw_mode or no_enter:
        hint = f'Status is not tracked in this mode; use `capture_pane(pane_id="{pane_id}")` to see the effect'
    else:
        hint = f'Use `get_command_result(command_id="{command_id}")` to check the outcome'

    return {
        "elements": [
            {"type": "text", "content": f"Command sent to pane {pane_id}"},
            {"type": "blockquote", "content": hint},
        ],
        "frontmatter": {
            "command_id": command_id,
            "command": _truncate(command),
            "pane": pane_id,
            "status": "pending",
        },
    }


@app.command(
    display="markdown",
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"execution"},
        "description": "Get the status and output of a command sent with execute_command",
    },
)
def get_command_result(state, command_id: str) -> dict[str, Any]:
    """Check a previously submitted command.

    Pending commands are re-checked against the pane each call.
    """
    try:
        execution = state.tracker.check_status(command_id)
    except TmuxError as e:
        return markdown_error_response(str(e), command_id=command_id)

    if execution is None:
        return {
            "elements": [{"type": "text", "content": f"Command not found: {command_id}"}],
            "frontmatter": {"command_id": command_id, "status": "not_found"},
        }

    return _result_response(execution)


def _result_response(execution: CommandExecution) -> dict[str, Any]:
    elements = []

    if execution.is_pending:
        if execution.result:
            elements.append({"type": "blockquote", "content": execution.result})
        else:
            elements.append({"type": "text", "content": "Command is still running"})
    elif execution.result:
        elements.append({"type": "code_block", "content": execution.result, "language": "text"})
    else:
        elements.append({"type": "text", "content": "[No output]"})

    frontmatter: dict[str, Any] = {
        "command_id": execution.id,
        "command": _truncate(execution.command),
        "pane": execution.pane_id,
        "status": execution.status,
    }
    if execution.exit_code is not None:
        frontmatter["exit_code"] = execution.exit_code

    return {"elements": elements, "frontmatter": frontmatter}


@app.command(
    display="table",
    headers=["ID", "Pane", "Status", "Command"],
    fastmcp={"enabled": False},
)
def list_commands(state) -> list[dict[str, Any]]:
    """List commands the tracker still holds."""
    rows = []
    for command_id in state.tracker.list_ids():
        execution = state.tracker.get(command_id)
        if execution is None:
            continue
        rows.append(
            {
                "ID": execution.id,
                "Pane": execution.pane_id,
                "Status": execution.status,
                "Command": _truncate(execution.command),
            }
        )
    return rows
