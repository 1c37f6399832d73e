"""Shell family conventions for the completion hook.

PUBLIC API:
  - normalize_shell: Coerce any input to a supported shell family
  - exit_status_expansion: The shell's "last exit status" variable
  - end_marker_text: End-marker line as the hook writes it
  - hook_script: Source of the __mcp_start routine for a shell family
"""

from typing import Optional, cast

from .execution.markers import START_MARKER, END_MARKER_PREFIX, HOOK_COMMAND
from .types import ShellType

SUPPORTED_SHELLS: tuple[ShellType, ...] = ("bash", "zsh", "fish")
DEFAULT_SHELL: ShellType = "bash"


def normalize_shell(value: Optional[str]) -> ShellType:
    """Return the shell family for value, falling back to bash."""
    name = str(value or "").strip().lower()
    if name in SUPPORTED_SHELLS:
        return cast(ShellType, name)
    return DEFAULT_SHELL


def exit_status_expansion(shell: Optional[str]) -> str:
    """Variable holding the last exit status in the given shell."""
    return "$status" if normalize_shell(shell) == "fish" else "$?"


def end_marker_text(shell: Optional[str]) -> str:
    """End marker exactly as the hook prints it, before shell expansion."""
    return f"{END_MARKER_PREFIX}{exit_status_expansion(shell)}"


_POSIX_HOOK = """\
{hook}() {{
  __mcp_saved_prompt_command=$PROMPT_COMMAND
  PROMPT_COMMAND=__mcp_armed
}}
__mcp_armed() {{
  echo {start}
  PROMPT_COMMAND=__mcp_done
}}
__mcp_done() {{
  echo "{end}"
  PROMPT_COMMAND=$__mcp_saved_prompt_command
}}
"""

_ZSH_HOOK = """\
{hook}() {{
  __mcp_saved_precmd=("${{precmd_functions[@]}}")
  precmd_functions=(__mcp_armed)
}}
__mcp_armed() {{
  echo {start}
  precmd_functions=(__mcp_done)
}}
__mcp_done() {{
  echo "{end}"
  precmd_functions=("${{__mcp_saved_precmd[@]}}")
}}
"""

# fish_postexec runs before fish_prompt, so the done handler only sees the
# command typed after the start marker
_FISH_HOOK = """\
function {hook}
    function __mcp_armed --on-event fish_prompt
        functions -e __mcp_armed
        echo {start}
        function __mcp_done --on-event fish_postexec
            echo "{end}"
            functions -e __mcp_done
        end
    end
end
"""

_HOOK_TEMPLATES: dict[ShellType, str] = {
    "bash": _POSIX_HOOK,
    "zsh": _ZSH_HOOK,
    "fish": _FISH_HOOK,
}


def hook_script(shell: Optional[str]) -> str:
    """Render the routine a user adds to their shell profile.

    The first statement of every done handler prints the end marker, so the
    expansion still sees the command's own exit status.
    """
    family = normalize_shell(shell)
    return _HOOK_TEMPLATES[family].format(hook=HOOK_COMMAND, start=START_MARKER, end=end_marker_text(family))
