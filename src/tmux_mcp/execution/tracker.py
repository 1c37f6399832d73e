"""Execution tracking - registry of submitted commands and their status.

Resolution is caller-driven: nothing happens until check_status is called,
which re-captures the pane and runs the marker parser.

PUBLIC API:
  - ExecutionTracker: Registry with status polling and eviction
  - RAW_MODE_ADVISORY: Result text for commands sent without markers
  - UNCAPTURED_ADVISORY: Result text while markers cannot be found
"""

import logging
import time
import uuid
from typing import Dict, List, Optional

from .markers import parse_markers
from ..tmux.pane import capture_pane_content
from ..types import CommandExecution, CommandID, PaneID

logger = logging.getLogger(__name__)

RAW_MODE_ADVISORY = (
    "Status tracking unavailable for raw_mode commands. Use capture_pane to monitor interactive apps instead."
)
UNCAPTURED_ADVISORY = "Command output could not be captured properly"

DEFAULT_CAPTURE_LINES = 1000
DEFAULT_MAX_AGE_MINUTES = 60


class ExecutionTracker:
    """In-memory registry of command executions keyed by ID.

    Attributes:
        capture_lines: Lines of pane history scanned for markers.
    """

    def __init__(self, capture_lines: int = DEFAULT_CAPTURE_LINES):
        self.capture_lines = capture_lines
        self._commands: Dict[CommandID, CommandExecution] = {}

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def register(self, pane_id: PaneID, command: str, raw_mode: bool = False) -> CommandExecution:
        """Create and store a pending record with a fresh ID."""
        command_id = str(uuid.uuid4())
        while command_id in self:
            command_id = str(uuid.uuid4())

        execution = CommandExecution(id=command_id, pane_id=pane_id, command=command, raw_mode=raw_mode)
        self._commands[command_id] = execution
        logger.debug(f"Tracking {command_id} in {pane_id} (raw_mode={raw_mode})")
        return execution

    def discard(self, command_id: CommandID) -> None:
        """Forget a record; unknown IDs are ignored."""
        self._commands.pop(command_id, None)

    def get(self, command_id: CommandID) -> Optional[CommandExecution]:
        """Look up a record without touching the pane."""
        return self._commands.get(command_id)

    def list_ids(self) -> List[CommandID]:
        """IDs of every tracked record, pending or not."""
        return list(self._commands)

    def check_status(self, command_id: CommandID) -> Optional[CommandExecution]:
        """Resolve a pending record against the pane's current content.

        Args:
            command_id: ID returned at submission.

        Returns:
            The record, or None if the ID is unknown. A record that stays
            pending carries an advisory message in result.

        Raises:
            TmuxCommandError: If the pane can no longer be captured.
        """
        execution = self._commands.get(command_id)
        if execution is None:
            return None

        if not execution.is_pending:
            return execution

        if execution.raw_mode:
            execution.result = RAW_MODE_ADVISORY
            return execution

        # A narrow pane can wrap the end marker and split its exit code
        content = capture_pane_content(execution.pane_id, self.capture_lines, join_wrapped=True)
        parsed = parse_markers(content)

        if parsed is None:
            execution.result = UNCAPTURED_ADVISORY
            return execution

        execution.status = parsed.status
        execution.exit_code = parsed.exit_code
        execution.result = parsed.output
        logger.info(f"Command {command_id} finished with exit code {parsed.exit_code}")
        return execution

    def evict_stale(self, max_age_minutes: float = DEFAULT_MAX_AGE_MINUTES) -> int:
        """Drop finished records older than max_age_minutes.

        Pending records are kept however old they are.

        Returns:
            Number of records removed.
        """
        now = time.time()
        stale = [
            command_id
            for command_id, execution in self._commands.items()
            if not execution.is_pending and execution.age_minutes(now) > max_age_minutes
        ]

        for command_id in stale:
            del self._commands[command_id]

        if stale:
            logger.debug(f"Evicted {len(stale)} finished commands")
        return len(stale)
