from __future__ import annotations

import sys

import pytest

from xicheck.errors import ToolUnavailable
from xicheck.model import Step
from xicheck.runner import run_command


def _py(name, code):
    return Step(name, sys.executable, ("-c", code))


def test_zero_exit_is_ok():
    result = run_command(_py("ok", "pass"))
    assert result.exit_code == 0
    assert result.ok
    assert result.step.name == "ok"


def test_nonzero_exit_is_a_result_not_an_error():
    result = run_command(_py("lint", "import sys; sys.exit(3)"))
    assert result.exit_code == 3
    assert not result.ok


def test_runs_in_given_cwd(tmp_path):
    marker = tmp_path / "here.txt"
    marker.write_text("x")
    code = "import os, sys; sys.exit(0 if os.path.exists('here.txt') else 5)"
    assert run_command(_py("cwd", code), cwd=tmp_path).exit_code == 0


def test_missing_cwd_is_reported(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_command(_py("cwd", "pass"), cwd=tmp_path / "nope")


def test_unknown_tool_raises_tool_unavailable():
    step = Step("probe", "xicheck-definitely-not-installed", ("--version",))
    with pytest.raises(ToolUnavailable) as excinfo:
        run_command(step)
    err = excinfo.value
    assert err.kind == "tool_unavailable"
    assert err.tool == "xicheck-definitely-not-installed"
    assert err.step == "probe"
    assert "hint" in err.details


def test_unspawnable_path_raises_tool_unavailable(tmp_path):
    not_exec = tmp_path / "tool"
    not_exec.write_text("not a program")
    with pytest.raises(ToolUnavailable):
        run_command(Step("probe", str(not_exec)))
