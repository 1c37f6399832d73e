"""Type definitions for tmux-mcp.

Topology records mirror what tmux reports through its format strings.
Execution records are owned by the ExecutionTracker.
"""

from typing import Literal, Optional
from dataclasses import dataclass, field
import time


# Native tmux identifiers
type SessionID = str  # e.g., "$3"
type WindowID = str  # e.g., "@7"
type PaneID = str  # e.g., "%42"
type CommandID = str  # uuid4 string

# Command execution states
type CommandStatus = Literal["pending", "completed", "error"]

# Shell families the end marker knows how to expand
type ShellType = Literal["bash", "zsh", "fish"]

type SplitDirection = Literal["horizontal", "vertical"]

# Programs that will read injected text as shell input
KNOWN_SHELLS = frozenset(["bash", "zsh", "fish", "sh", "dash", "ksh", "tcsh", "csh", "ssh", "mosh"])

# tmux key names sent as a single key event
SPECIAL_KEYS = frozenset(
    [
        "Up",
        "Down",
        "Left",
        "Right",
        "Escape",
        "Tab",
        "Enter",
        "Space",
        "BSpace",
        "Delete",
        "Home",
        "End",
        "PageUp",
        "PageDown",
    ]
    + [f"F{n}" for n in range(1, 13)]
)


@dataclass(frozen=True)
class TmuxSession:
    """A tmux session."""

    id: SessionID
    name: str
    attached: bool
    windows: int


@dataclass(frozen=True)
class TmuxWindow:
    """A window inside a session."""

    id: WindowID
    name: str
    active: bool
    session_id: SessionID


@dataclass(frozen=True)
class TmuxPane:
    """A pane inside a window."""

    id: PaneID
    window_id: WindowID
    active: bool
    current_command: str
    cwd: str
    title: str


@dataclass
class CommandExecution:
    """One command submitted to a pane.

    Attributes:
        id: Unique identifier, the only lookup key.
        pane_id: Pane the command was sent to.
        command: Literal text submitted.
        status: pending until markers resolve it to completed or error.
        start_time: Submission timestamp (epoch seconds).
        result: Extracted output, or an advisory message while pending.
        exit_code: Exit status parsed from the end marker.
        raw_mode: Sent without markers, so it can never be resolved.
    """

    id: CommandID
    pane_id: PaneID
    command: str
    status: CommandStatus = "pending"
    start_time: float = field(default_factory=time.time)
    result: Optional[str] = None
    exit_code: Optional[int] = None
    raw_mode: bool = False

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    def age_minutes(self, now: Optional[float] = None) -> float:
        """Minutes elapsed since submission."""
        if now is None:
            now = time.time()
        return (now - self.start_time) / 60
