"""Command dispatch - send a command to a pane and start tracking it.

Three strategies, picked by flags:
  - normal: arm the shell hook, then send the command; markers report completion
  - raw_mode: send the command and Enter, no markers (REPLs, TUIs)
  - no_enter: send a named key, or the text one character at a time

PUBLIC API:
  - execute_command: Submit a command and return its tracking ID
  - check_pane_eligible: Refuse panes whose foreground process is not a shell
"""

import logging

from .markers import HOOK_COMMAND
from .tracker import ExecutionTracker
from ..tmux.exceptions import IneligiblePaneError, TmuxError
from ..tmux.pane import get_pane_current_command, send_keys
from ..types import KNOWN_SHELLS, SPECIAL_KEYS, CommandID, PaneID

logger = logging.getLogger(__name__)


def check_pane_eligible(pane_id: PaneID) -> str:
    """Make sure the pane runs a shell that will read marker input.

    Returns:
        The pane's foreground process name.

    Raises:
        IneligiblePaneError: If the process is not a known shell.
    """
    current_command = get_pane_current_command(pane_id)
    if current_command.lower() not in KNOWN_SHELLS:
        logger.info(f"Refusing to execute in {pane_id}: running {current_command!r}")
        raise IneligiblePaneError(pane_id, current_command)
    return current_command


def _send_line(pane_id: PaneID, command: str) -> None:
    # Literal text so "end" or "-5" is typed rather than read as a key or flag
    send_keys(pane_id, command, literal=True)
    send_keys(pane_id, "Enter")


def _send_no_enter(pane_id: PaneID, command: str) -> None:
    if command in SPECIAL_KEYS:
        send_keys(pane_id, command)
        return

    # One key event per character so interactive programs see each keystroke
    for char in command:
        send_keys(pane_id, char, literal=True)


def execute_command(
    tracker: ExecutionTracker,
    pane_id: PaneID,
    command: str,
    raw_mode: bool = False,
    no_enter: bool = False,
) -> CommandID:
    """Send a command to a pane and register it for status polling.

    Args:
        tracker: Registry that will own the new record.
        pane_id: Target pane.
        command: Command text, or a key name / keystrokes with no_enter.
        raw_mode: Skip markers and the shell check.
        no_enter: Send keystrokes without a trailing Enter.

    Returns:
        ID to pass to ExecutionTracker.check_status.

    Raises:
        IneligiblePaneError: Normal mode only, pane is not running a shell.
        TmuxCommandError: If tmux rejects the pane or the keys.
    """
    if not raw_mode and not no_enter:
        check_pane_eligible(pane_id)

    execution = tracker.register(pane_id, command, raw_mode=raw_mode or no_enter)

    try:
        if no_enter:
            strategy = "no_enter"
            _send_no_enter(pane_id, command)
        elif raw_mode:
            strategy = "raw"
            _send_line(pane_id, command)
        else:
            strategy = "normal"
            send_keys(pane_id, HOOK_COMMAND, "Enter")
            _send_line(pane_id, command)
    except TmuxError:
        tracker.discard(execution.id)
        raise

    logger.debug(f"Sent {execution.id} to {pane_id} ({strategy})")
    return execution.id
