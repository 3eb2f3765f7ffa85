from .checks import default_steps
from .env import EnvOverride
from .errors import CIError, EnvRestoreError, OverrideActive, StepFailure, ToolUnavailable
from .model import ExecutionResult, Step
from .pipeline import Pipeline, State
from .runner import run_command

__all__ = [
    "default_steps",
    "EnvOverride",
    "CIError",
    "EnvRestoreError",
    "OverrideActive",
    "StepFailure",
    "ToolUnavailable",
    "ExecutionResult",
    "Step",
    "Pipeline",
    "State",
    "run_command",
]
