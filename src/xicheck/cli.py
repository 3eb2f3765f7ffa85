# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from xicheck.checks import DEFAULT_CARGO, DEFAULT_PACKAGE, DEFAULT_SERDE_FEATURE, default_steps
from xicheck.errors import CIError, StepFailure
from xicheck.pipeline import Pipeline
from xicheck.ui.console import Console, set_console, get_console


def _step_options(fn):
    """Options shared by `run` and `plan`."""
    options = [
        click.option("--filter", "filter_token", default=None, help="Only run tests whose name matches this token"),
        click.option(
            "--workspace",
            default="rust",
            show_default=True,
            envvar="XICHECK_WORKSPACE",
            type=click.Path(file_okay=False, path_type=Path),
            help="Directory the checks run in",
        ),
        click.option("--cargo", default=DEFAULT_CARGO, show_default=True, envvar="XICHECK_CARGO", help="Cargo executable"),
        click.option("--package", default=DEFAULT_PACKAGE, show_default=True, help="Crate for the feature-matrix test runs"),
        click.option("--serde-feature", default=DEFAULT_SERDE_FEATURE, show_default=True, help="Optional serialization feature to test"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _failure_exit_code(exit_code: int | None) -> int:
    # signals show up as negative return codes
    if exit_code is None or exit_code <= 0:
        return 1
    return exit_code


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """xicheck: fail-fast format, lint, warnings and test gate for the xi workspace."""
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command()
@_step_options
@click.pass_context
def run(ctx, filter_token, workspace, cargo, package, serde_feature):
    """Run every check in order, stopping at the first failure."""
    console = get_console()

    if not workspace.is_dir():
        console.print_error(
            "Workspace not found",
            f"Could not find workspace directory: {workspace}",
            suggestion="Run from the repository root or pass --workspace <dir>.",
        )
        sys.exit(1)

    steps = default_steps(filter_token, cargo=cargo, package=package, serde_feature=serde_feature)
    console.print_run_started(
        workspace=str(workspace),
        step_count=len(steps),
        filter_token=filter_token,
    )

    try:
        Pipeline(steps, cwd=workspace, console=console).run()
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except StepFailure as e:
        console.print_error(
            "Check failed",
            str(e),
            details=[f"step={e.step}", f"cmd={e.cmdline}", f"exit_code={e.exit_code}"],
        )
        sys.exit(_failure_exit_code(e.exit_code))
    except CIError as e:
        hint = e.details.get("hint")
        console.print_error(
            e.message,
            str(e),
            suggestion=hint,
        )
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@cli.command()
@_step_options
def plan(filter_token, workspace, cargo, package, serde_feature):
    """Print the expanded checklist without running anything."""
    console = get_console()
    steps = default_steps(filter_token, cargo=cargo, package=package, serde_feature=serde_feature)

    console.print_header(f"Checks ({workspace})")
    for i, step in enumerate(steps, start=1):
        console.print_plan_step(i, step.cmdline, env=step.env_label)


if __name__ == "__main__":
    cli()
