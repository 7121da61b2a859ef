# core/commands.py - SINGLE SOURCE OF TRUTH for spawning external commands
"""
Narrow subprocess adapter.

Every external command toast runs (node, npm) goes through run_command().
Callers accept a `runner` argument with the same signature so tests can pass
a fake instead of spawning processes.

No timeout is applied: the call blocks until the child exits.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

_commands_logger = logging.getLogger("toast.commands")


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of an external command."""

    stdout: bytes
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[str, Sequence[str]], CommandOutput]


def run_command(name: str, args: Sequence[str]) -> CommandOutput:
    """
    Run `name args...` and capture its standard output as bytes.

    Args:
        name: Executable name, resolved through PATH
        args: Arguments passed to the executable

    Returns:
        CommandOutput with raw stdout and the exit status

    Raises:
        OSError: If the executable cannot be started
    """
    argv = [name, *args]
    _commands_logger.debug(f"Running {argv}")
    result = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
    _commands_logger.debug(f"{name} exited with status {result.returncode}")
    return CommandOutput(stdout=result.stdout, returncode=result.returncode)
