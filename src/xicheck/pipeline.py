# pipeline.py
from __future__ import annotations

import enum
from contextlib import nullcontext
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .checks import NOTICES
from .env import EnvOverride
from .errors import StepFailure
from .model import ExecutionResult, Step
from .runner import run_command
from .ui.console import Console, get_console

Runner = Callable[..., ExecutionResult]


class State(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (State.PASSED, State.FAILED)


class Pipeline:
    """
    Fail-fast, strictly sequential execution of an ordered list of steps.

    States: IDLE -> RUNNING(index) -> PASSED | FAILED(index, exit_code).
    `step()` advances one step and reports the outcome through the state;
    `run()` drives it to the end and raises StepFailure on FAILED.
    """

    def __init__(
        self,
        steps: Sequence[Step],
        *,
        runner: Runner = run_command,
        cwd: str | Path | None = None,
        console: Console | None = None,
    ):
        if not steps:
            raise ValueError("pipeline must have at least one step")
        self.steps: List[Step] = list(steps)
        self.runner = runner
        self.cwd = cwd
        self.console = console or get_console()

        self.state = State.IDLE
        self.index = 0
        self.exit_code: Optional[int] = None
        self.last_result: Optional[ExecutionResult] = None

    @property
    def current(self) -> Step:
        return self.steps[self.index]

    def start(self) -> State:
        if self.state is not State.IDLE:
            raise RuntimeError(f"pipeline already {self.state.value}")
        self.state = State.RUNNING
        self.index = 0
        return self.state

    def step(self) -> State:
        """Run the current step and transition. Returns the new state."""
        if self.state is State.IDLE:
            self.start()
        if self.state is not State.RUNNING:
            raise RuntimeError(f"pipeline already {self.state.value}")

        step = self.current
        override = step.env_override
        self.console.print_step(step.name, step.cmdline, env=step.env_label)

        scope = EnvOverride(*override) if override else nullcontext()
        try:
            with scope:
                result = self.runner(step, cwd=self.cwd)
        except Exception:
            # ToolUnavailable, EnvRestoreError, ...: terminal, propagate as is
            self.state = State.FAILED
            raise

        self.last_result = result
        if result.exit_code != 0:
            self.state = State.FAILED
            self.exit_code = result.exit_code
            self.console.print_failure(
                step.name,
                step.cmdline,
                exit_code=result.exit_code,
            )
            return self.state

        self.console.print_success(step.name)
        if self.index + 1 < len(self.steps):
            self.index += 1
        else:
            self.state = State.PASSED
            self.exit_code = 0
        return self.state

    def run(self) -> State:
        """
        Run every step in order, stopping at the first non-zero exit.

        Raises:
            StepFailure: a step exited non-zero. Any environment override for
                that step has already been restored.
            ToolUnavailable: a step's executable could not be spawned.
            EnvRestoreError: an overridden variable could not be restored.
        """
        self.start()
        while not self.state.terminal:
            self.step()

        if self.state is State.FAILED:
            failed = self.current
            self.console.print_results(False)
            raise StepFailure(failed.name, failed.command, failed.args, self.exit_code)

        self.console.print_results(True, NOTICES)
        return self.state
