# checks.py
from __future__ import annotations

from typing import List

from .model import Step


# ---------------------------------------------------------------------
# Static checklist
# ---------------------------------------------------------------------

DEFAULT_CARGO = "cargo"
DEFAULT_PACKAGE = "xi-rope"
DEFAULT_SERDE_FEATURE = "serde"
WARNINGS_VAR = "RUSTFLAGS"
STRICT_WARNINGS = "-D warnings"

# reported on success, not part of control flow
NOTICES = (
    "benchmarks are not run by this harness",
    "only a subset of workspace crates is checked",
)


def default_steps(
    filter_token: str | None = None,
    *,
    cargo: str = DEFAULT_CARGO,
    package: str = DEFAULT_PACKAGE,
    serde_feature: str = DEFAULT_SERDE_FEATURE,
    warnings_var: str = WARNINGS_VAR,
) -> List[Step]:
    """
    The ordered list of checks. When `filter_token` is given it is appended
    as the last argument of every test-running step and nowhere else.
    """
    steps = [
        Step("Clippy available", cargo, ("clippy", "--version")),
        Step("Rustfmt available", cargo, ("fmt", "--version")),
        Step("Format check", cargo, ("fmt", "--all", "--", "--check")),
        Step("Clippy", cargo, ("clippy", "--all", "--", "-D", "warnings")),
        Step(
            "Check (warnings as errors)",
            cargo,
            ("check", "--workspace"),
            env_override=(warnings_var, STRICT_WARNINGS),
        ),
        Step("Test workspace", cargo, ("test", "--workspace"), runs_tests=True),
        Step(
            f"Test {package} (no default features)",
            cargo,
            ("test", "-p", package, "--no-default-features"),
            runs_tests=True,
        ),
        Step(
            f"Test {package} ({serde_feature})",
            cargo,
            ("test", "-p", package, "--features", serde_feature),
            runs_tests=True,
        ),
    ]
    return [s.with_filter(filter_token) for s in steps]
