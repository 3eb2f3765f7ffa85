# model.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Step:
    """A single toolchain invocation inside the verification pipeline."""
    name: str
    command: str
    args: Tuple[str, ...] = ()

    # test-running steps get the optional name filter appended
    runs_tests: bool = False
    # (variable, value) set only while this step runs
    env_override: Optional[Tuple[str, str]] = None

    def with_filter(self, filter_token: str | None) -> Step:
        if filter_token is None or not self.runs_tests:
            return self
        return replace(self, args=(*self.args, filter_token))

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    @property
    def env_label(self) -> str | None:
        if self.env_override is None:
            return None
        var, value = self.env_override
        return f"{var}={value!r}"

    @property
    def cmdline(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class ExecutionResult:
    """Exit status of one step. Non-zero is a normal result, not an error."""
    exit_code: int
    step: Step = field(repr=False)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
