"""Tests for execution tracking."""

from __future__ import annotations

import time
import uuid
from unittest.mock import patch

import pytest

from tmux_mcp.execution import RAW_MODE_ADVISORY, UNCAPTURED_ADVISORY, ExecutionTracker
from tmux_mcp.tmux import TmuxCommandError

DONE_OUTPUT = "$ __mcp_start\nTMUX_MCP_START\n$ make test\nok\nTMUX_MCP_DONE_0\n$ "
FAILED_OUTPUT = "$ __mcp_start\nTMUX_MCP_START\n$ make test\nFAILED\nTMUX_MCP_DONE_2\n$ "


class TestRegistry:
    def test_register_creates_pending_record(self, tracker):
        execution = tracker.register("%1", "ls")
        assert execution.status == "pending"
        assert execution.pane_id == "%1"
        assert execution.command == "ls"
        assert execution.exit_code is None
        assert execution.result is None
        assert execution.raw_mode is False
        assert tracker.get(execution.id) is execution

    def test_ids_are_unique(self, tracker):
        ids = {tracker.register("%1", "true").id for _ in range(50)}
        assert len(ids) == 50
        assert len(tracker) == 50

    def test_colliding_id_is_redrawn(self, tracker):
        first, second = uuid.UUID(int=1), uuid.UUID(int=2)
        with patch("tmux_mcp.execution.tracker.uuid.uuid4", side_effect=[first, first, second]):
            a = tracker.register("%1", "true")
            b = tracker.register("%1", "true")
        assert a.id == str(first)
        assert b.id == str(second)

    def test_list_ids_includes_every_status(self, tracker):
        pending = tracker.register("%1", "sleep 10")
        done = tracker.register("%1", "true")
        done.status = "completed"
        assert set(tracker.list_ids()) == {pending.id, done.id}

    def test_get_unknown_id(self, tracker):
        assert tracker.get("missing") is None

    def test_discard_forgets_record(self, tracker):
        execution = tracker.register("%1", "ls")
        tracker.discard(execution.id)
        tracker.discard("missing")
        assert execution.id not in tracker
        assert len(tracker) == 0

    def test_get_does_not_capture(self, tracker, fake_tmux):
        execution = tracker.register("%1", "ls")
        tracker.get(execution.id)
        assert fake_tmux.calls == []


class TestCheckStatus:
    def test_unknown_id_returns_none(self, tracker, fake_tmux):
        assert tracker.check_status("missing") is None
        assert fake_tmux.calls == []

    def test_completed(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", DONE_OUTPUT)
        execution = tracker.register("%3", "make test")

        result = tracker.check_status(execution.id)

        assert result is execution
        assert result.status == "completed"
        assert result.exit_code == 0
        assert result.result == "ok"
        assert fake_tmux.calls == [["capture-pane", "-p", "-J", "-t", "%3", "-S", "-1000", "-E", "-"]]

    def test_error(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", FAILED_OUTPUT)
        execution = tracker.register("%3", "make test")

        result = tracker.check_status(execution.id)

        assert result.status == "error"
        assert result.exit_code == 2
        assert result.result == "FAILED"

    def test_capture_lines_is_configurable(self, fake_tmux):
        fake_tmux.on("capture-pane", DONE_OUTPUT)
        tracker = ExecutionTracker(capture_lines=50)
        execution = tracker.register("%3", "make test")
        tracker.check_status(execution.id)
        assert fake_tmux.calls_for("capture-pane")[0][6] == "-50"

    def test_wrapped_end_marker_keeps_full_exit_code(self, tracker, fake_tmux):
        # What tmux returns with -J for a DONE line wrapped at a narrow width
        fake_tmux.on("capture-pane", "TMUX_MCP_START\n$ false\nTMUX_MCP_DONE_127\n$ ")
        execution = tracker.register("%3", "false")

        result = tracker.check_status(execution.id)

        assert "-J" in fake_tmux.calls_for("capture-pane")[0]
        assert result.exit_code == 127
        assert result.status == "error"

    def test_terminal_record_is_not_recaptured(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", DONE_OUTPUT)
        execution = tracker.register("%3", "make test")
        first = tracker.check_status(execution.id)
        snapshot = (first.status, first.exit_code, first.result)

        # Pane content changes afterwards; the record must not
        fake_tmux.on("capture-pane", FAILED_OUTPUT)
        second = tracker.check_status(execution.id)

        assert (second.status, second.exit_code, second.result) == snapshot
        assert len(fake_tmux.calls_for("capture-pane")) == 1

    def test_missing_markers_stay_pending(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", "$ __mcp_start\nTMUX_MCP_START\n$ sleep 30\n")
        execution = tracker.register("%3", "sleep 30")

        result = tracker.check_status(execution.id)

        assert result.status == "pending"
        assert result.exit_code is None
        assert result.result == UNCAPTURED_ADVISORY

    def test_pending_record_resolves_on_later_poll(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", "TMUX_MCP_START\n$ make test\n")
        execution = tracker.register("%3", "make test")
        assert tracker.check_status(execution.id).status == "pending"

        fake_tmux.on("capture-pane", DONE_OUTPUT)
        assert tracker.check_status(execution.id).status == "completed"

    def test_non_digit_exit_code_is_retryable(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", "TMUX_MCP_START\n$ x\nTMUX_MCP_DONE_$?\n")
        execution = tracker.register("%3", "x")

        result = tracker.check_status(execution.id)

        assert result.status == "pending"
        assert result.exit_code is None

    @pytest.mark.parametrize("content", ["", DONE_OUTPUT, FAILED_OUTPUT])
    def test_raw_mode_never_resolves(self, tracker, fake_tmux, content):
        fake_tmux.on("capture-pane", content)
        execution = tracker.register("%3", "python3", raw_mode=True)

        for _ in range(2):
            result = tracker.check_status(execution.id)
            assert result.status == "pending"
            assert result.exit_code is None
            assert result.result == RAW_MODE_ADVISORY

        assert fake_tmux.calls_for("capture-pane") == []

    def test_capture_failure_propagates(self, tracker, fake_tmux):
        fake_tmux.on("capture-pane", (1, "", "can't find pane: %3"))
        execution = tracker.register("%3", "ls")

        with pytest.raises(TmuxCommandError, match="can't find pane"):
            tracker.check_status(execution.id)

        assert tracker.get(execution.id).status == "pending"


class TestEvictStale:
    def _aged(self, tracker, status, minutes):
        execution = tracker.register("%1", "cmd")
        execution.status = status
        execution.start_time = time.time() - minutes * 60
        return execution

    def test_old_terminal_records_removed(self, tracker):
        completed = self._aged(tracker, "completed", 120)
        errored = self._aged(tracker, "error", 61)

        assert tracker.evict_stale(60) == 2
        assert tracker.get(completed.id) is None
        assert tracker.get(errored.id) is None

    def test_young_terminal_records_kept(self, tracker):
        young = self._aged(tracker, "completed", 5)
        assert tracker.evict_stale(60) == 0
        assert tracker.get(young.id) is young

    def test_pending_records_never_removed(self, tracker):
        ancient = self._aged(tracker, "pending", 60 * 24 * 365)
        raw = tracker.register("%1", "vim", raw_mode=True)
        raw.start_time = time.time() - 10_000 * 60

        assert tracker.evict_stale(0) == 0
        assert tracker.get(ancient.id) is ancient
        assert tracker.get(raw.id) is raw

    def test_default_threshold_is_one_hour(self, tracker):
        self._aged(tracker, "completed", 59)
        old = self._aged(tracker, "completed", 61)
        assert tracker.evict_stale() == 1
        assert tracker.get(old.id) is None
