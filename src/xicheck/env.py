# env.py
from __future__ import annotations

import os
from typing import Optional, Set

from .errors import EnvRestoreError, OverrideActive
from .ui.console import get_console


# variables with an override currently in effect (process-wide)
_active: Set[str] = set()


class EnvOverride:
    """
    Context manager that sets one environment variable for the duration of
    a block and restores it exactly on exit, including when the block raises.

    A variable that was unset before the block is removed again afterwards,
    not left as an empty string.

        with EnvOverride("RUSTFLAGS", "-D warnings"):
            run_command(step)
    """

    def __init__(self, variable: str, value: str):
        if not variable:
            raise ValueError("variable name must not be empty")
        self.variable = variable
        self.value = value
        self.previous: Optional[str] = None
        self._entered = False

    @property
    def active(self) -> bool:
        return self._entered and self.variable in _active

    def __enter__(self) -> EnvOverride:
        if self._entered:
            raise RuntimeError(f"override for {self.variable} was already entered")
        if self.variable in _active:
            raise OverrideActive(self.variable)

        self.previous = os.environ.get(self.variable)
        os.environ[self.variable] = self.value
        _active.add(self.variable)
        self._entered = True

        get_console().print_debug(
            f"env: {self.variable}={self.value!r} (was {_describe(self.previous)})"
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if self.previous is None:
                os.environ.pop(self.variable, None)
            else:
                os.environ[self.variable] = self.previous
        except (OSError, ValueError) as e:
            raise EnvRestoreError(self.variable, self.previous, str(e)) from e
        finally:
            _active.discard(self.variable)

        get_console().print_debug(f"env: {self.variable} restored to {_describe(self.previous)}")
        # never swallow the block's exception
        return False


def _describe(value: str | None) -> str:
    return "<unset>" if value is None else repr(value)
