# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(eq=False)
class CIError(Exception):
    """
    Structured harness error with enough context for:
      - clean CLI output
      - debugging without full tracebacks
    """
    kind: str
    message: str
    step: str | None = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        if self.step:
            lines.append(f"step={self.step}")
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


TOOL_HINTS = {
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
    "rustfmt": "Install rustfmt (rustup component add rustfmt).",
    "cargo-fmt": "Install rustfmt (rustup component add rustfmt).",
    "cargo-clippy": "Install clippy (rustup component add clippy).",
}


class ToolUnavailable(CIError):
    """The executable for a step could not be located or spawned."""

    def __init__(self, tool: str, step: str | None = None, reason: str | None = None):
        details = {"tool": tool, "hint": TOOL_HINTS.get(tool, f"Install {tool} or fix PATH.")}
        if reason:
            details["reason"] = reason
        super().__init__(
            kind="tool_unavailable",
            message=f"{tool} is not available",
            step=step,
            details=details,
        )
        self.tool = tool


class StepFailure(CIError):
    """A step's process ran and exited non-zero."""

    def __init__(self, step: str, command: str, args: Sequence[str], exit_code: int):
        self.command = command
        self.args_list = list(args)
        self.exit_code = exit_code
        super().__init__(
            kind="step_failed",
            message=f"step '{step}' failed (exit={exit_code})",
            step=step,
            details={"cmd": self.cmdline, "exit_code": exit_code},
        )

    @property
    def cmdline(self) -> str:
        return " ".join([self.command, *self.args_list])

    def __str__(self) -> str:
        return f"step '{self.step}' failed (exit={self.exit_code}): {self.cmdline}"


class OverrideActive(CIError):
    """An override for the same variable is already in effect."""

    def __init__(self, variable: str):
        super().__init__(
            kind="override_active",
            message=f"an override for {variable} is already active",
            details={"variable": variable},
        )
        self.variable = variable


class EnvRestoreError(CIError):
    """Restoring an overridden variable failed; the environment may be leaked."""

    def __init__(self, variable: str, previous: Optional[str], reason: str):
        super().__init__(
            kind="env_restore_failed",
            message=f"could not restore {variable}",
            details={
                "variable": variable,
                "previous": "<unset>" if previous is None else repr(previous),
                "reason": reason,
            },
        )
        self.variable = variable
