from __future__ import annotations

from xicheck.checks import STRICT_WARNINGS, WARNINGS_VAR, default_steps


def test_checklist_order_and_commands():
    steps = default_steps()
    assert [s.argv for s in steps] == [
        ["cargo", "clippy", "--version"],
        ["cargo", "fmt", "--version"],
        ["cargo", "fmt", "--all", "--", "--check"],
        ["cargo", "clippy", "--all", "--", "-D", "warnings"],
        ["cargo", "check", "--workspace"],
        ["cargo", "test", "--workspace"],
        ["cargo", "test", "-p", "xi-rope", "--no-default-features"],
        ["cargo", "test", "-p", "xi-rope", "--features", "serde"],
    ]


def test_only_strict_check_carries_an_override():
    steps = default_steps()
    overrides = [s.env_override for s in steps]
    assert overrides[4] == (WARNINGS_VAR, STRICT_WARNINGS)
    assert overrides[:4] == [None] * 4
    assert overrides[5:] == [None] * 3


def test_filter_goes_last_on_test_steps_only():
    plain = default_steps()
    filtered = default_steps("rope_insert")

    for before, after in zip(plain[:5], filtered[:5]):
        assert after.args == before.args
    for before, after in zip(plain[5:], filtered[5:]):
        assert after.args == (*before.args, "rope_insert")
        assert after.args[-1] == "rope_insert"


def test_no_filter_adds_nothing():
    for step in default_steps(None):
        if step.runs_tests:
            assert step.args[-1] not in ("", None)
    assert default_steps(None) == default_steps()


def test_empty_string_filter_is_passed_verbatim():
    steps = default_steps("")
    assert all(s.args[-1] == "" for s in steps if s.runs_tests)


def test_configurable_toolchain_and_package():
    steps = default_steps(cargo="/opt/cargo", package="xi-core-lib", serde_feature="json")
    assert {s.command for s in steps} == {"/opt/cargo"}
    assert steps[6].args == ("test", "-p", "xi-core-lib", "--no-default-features")
    assert steps[7].args == ("test", "-p", "xi-core-lib", "--features", "json")
