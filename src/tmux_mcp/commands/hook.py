"""Shell hook command - show the routine that emits completion markers.

PUBLIC API:
  - shell_hook: Render __mcp_start for the configured (or given) shell
"""

from typing import Any, Optional

from ..app import app
from ..config import get_shell
from ..shell import end_marker_text, hook_script, normalize_shell


@app.command(
    display="codeblock",
    fastmcp={"type": "tool", "description": "Show the shell hook that execute_command relies on"},
)
def shell_hook(state, shell: Optional[str] = None) -> dict[str, Any]:
    """Render the shell routine to add to a shell profile.

    Args:
        state: Application state (unused).
        shell: bash, zsh or fish. Defaults to the configured shell.
    """
    family = normalize_shell(shell) if shell else get_shell()
    return {
        "content": hook_script(family),
        "language": family,
        "shell": family,
        "end_marker": end_marker_text(family),
    }
