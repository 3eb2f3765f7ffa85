from __future__ import annotations

import pytest

from xicheck import env as env_mod
from xicheck.model import ExecutionResult
from xicheck.ui.console import Console, set_console


@pytest.fixture(autouse=True)
def _fresh_console():
    set_console(Console())
    yield
    set_console(Console())


@pytest.fixture(autouse=True)
def _no_active_overrides():
    env_mod._active.clear()
    yield
    env_mod._active.clear()


class RecordingRunner:
    """Stands in for run_command: records calls, returns scripted exit codes."""

    def __init__(self, exit_codes=None, watch="RUSTFLAGS"):
        # step index -> exit code; anything unlisted exits 0
        self.exit_codes = dict(exit_codes or {})
        self.watch = watch
        self.calls = []
        self.seen_env = []

    def __call__(self, step, *, cwd=None):
        import os

        index = len(self.calls)
        self.calls.append(step)
        self.seen_env.append(os.environ.get(self.watch))
        return ExecutionResult(exit_code=self.exit_codes.get(index, 0), step=step)


@pytest.fixture
def recording_runner():
    return RecordingRunner
