"""Shared test fixtures."""

from __future__ import annotations

import subprocess
from typing import Any, Callable
from unittest.mock import patch

import pytest

from tmux_mcp.config import SHELL_ENV_VAR, reset_config_manager
from tmux_mcp.execution import ExecutionTracker


class FakeTmux:
    """Stand-in for the tmux binary, keyed by subcommand.

    A response is stdout text, a (returncode, stdout, stderr) tuple, an
    exception to raise, or a callable taking the argument list and
    returning any of those.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.responses: dict[str, Any] = {}

    def __call__(self, cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        assert cmd[0] == "tmux"
        args = list(cmd[1:])
        self.calls.append(args)

        response = self.responses.get(args[0], "")
        if callable(response) and not isinstance(response, Exception):
            response = response(args)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, tuple):
            code, stdout, stderr = response
        else:
            code, stdout, stderr = 0, response, ""
        return subprocess.CompletedProcess(cmd, code, stdout, stderr)

    def on(self, subcommand: str, response: Any | Callable[[list[str]], Any]) -> None:
        self.responses[subcommand] = response

    def calls_for(self, subcommand: str) -> list[list[str]]:
        return [args for args in self.calls if args[0] == subcommand]


@pytest.fixture
def fake_tmux():
    """Patch subprocess.run under the gateway and record every tmux call."""
    fake = FakeTmux()
    with patch("tmux_mcp.tmux.core.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def tracker():
    return ExecutionTracker()


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep the global config manager and env var out of each test."""
    monkeypatch.delenv(SHELL_ENV_VAR, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()
