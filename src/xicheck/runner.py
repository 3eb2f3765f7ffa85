# runner.py
from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

from .errors import ToolUnavailable
from .model import ExecutionResult, Step
from .ui.console import get_console


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def _resolve(command: str) -> str:
    """Locate the executable on PATH; explicit paths are used as given."""
    if os.sep in command or (os.altsep and os.altsep in command):
        return command
    found = shutil.which(command)
    if found is None:
        raise ToolUnavailable(command, reason="not found on PATH")
    return found


def run_command(step: Step, *, cwd: str | Path | None = None) -> ExecutionResult:
    """
    Run one step to completion and return its exit code.

    The child inherits stdout/stderr so toolchain output stays visible.
    There is no timeout; a hung child has to be killed from outside.

    Raises:
        ToolUnavailable: the executable cannot be located or spawned.
    """
    if cwd is not None and not Path(cwd).is_dir():
        raise FileNotFoundError(f"step '{step.name}' cwd not found: {cwd}")

    try:
        exe = _resolve(step.command)
    except ToolUnavailable as e:
        e.step = step.name
        raise
    get_console().print_debug(f"exec: {exe} (cwd={cwd or os.getcwd()})")

    try:
        proc = subprocess.run(
            [exe, *step.args],
            shell=False,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
        )
    except OSError as e:
        # missing binary, no exec permission, ENOEXEC
        raise ToolUnavailable(step.command, step=step.name, reason=str(e)) from e

    return ExecutionResult(exit_code=proc.returncode, step=step)
