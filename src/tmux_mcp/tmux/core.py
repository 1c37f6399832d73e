"""Core tmux operations - the only place that spawns tmux.

PUBLIC API:
  - run_tmux: Execute tmux command and return trimmed stdout
  - parse_format_line: Parse tmux format string output into dict
  - is_tmux_running: Check if tmux is available and server running
"""

import logging
import subprocess
from typing import List, Optional

from .exceptions import TmuxCommandError

logger = logging.getLogger(__name__)


def run_tmux(args: List[str]) -> str:
    """Run tmux command and return its stdout, stripped.

    Args:
        args: Arguments after the tmux binary, one list item per argv entry.

    Returns:
        Trimmed stdout.

    Raises:
        TmuxCommandError: If tmux exits non-zero or cannot be started.
    """
    cmd = ["tmux"] + args
    logger.debug(f"tmux {' '.join(args)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise TmuxCommandError(f"Failed to execute tmux command: {e}", args) from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise TmuxCommandError(
            f"Failed to execute tmux command: {stderr or f'exit status {result.returncode}'}", args, stderr
        )

    return result.stdout.strip()


def parse_format_line(line: str, delimiter: str = ":", maxsplit: int = -1) -> dict:
    """Parse tmux format string output into dict keyed by field position."""
    parts = line.strip().split(delimiter, maxsplit)
    return {str(i): part for i, part in enumerate(parts)}


def is_tmux_running() -> bool:
    """Check if tmux is available and a server is running."""
    try:
        run_tmux(["list-sessions", "-F", "#{session_name}"])
        return True
    except TmuxCommandError:
        return False


def display_message(target: str, format_str: str) -> str:
    """Evaluate a format string against a target."""
    return run_tmux(["display-message", "-p", "-t", target, format_str])


def split_lines(output: Optional[str]) -> List[str]:
    """Split tmux list output into non-empty lines."""
    if not output:
        return []
    return [line for line in output.split("\n") if line]
