"""
Environment discovery: Node.js version gate and npm binary directory.

check_node_version() must pass before any compilation work starts.
get_npm_bin_dir() failing is a fault: the engine cannot run without it.
"""

import logging

from toast.core.commands import CommandRunner, run_command
from toast.core.constants import Commands
from toast.core.errors import ExecutionFailure, IncompatibleVersion, ParseFailure, Unrecoverable
from toast.core.version import MIN_NODE_VERSION, SemanticVersion

_node_logger = logging.getLogger("toast.node_check")


def check_node_version(
    runner: CommandRunner = run_command,
    minimum: str = MIN_NODE_VERSION,
) -> SemanticVersion:
    """
    Verify that `node -v` reports at least `minimum`.

    Args:
        runner: Command adapter (run_command or a test fake)
        minimum: Oldest acceptable version

    Returns:
        The detected Node.js version

    Raises:
        ExecutionFailure: node could not be run, or printed non-UTF-8 output
        ParseFailure: Output is not a semantic version
        IncompatibleVersion: Detected version is older than minimum
    """
    required = SemanticVersion.parse(minimum)
    command = Commands.display(Commands.NODE, Commands.NODE_VERSION_ARGS)

    try:
        output = runner(Commands.NODE, Commands.NODE_VERSION_ARGS)
    except OSError as e:
        raise ExecutionFailure(command, ExecutionFailure.STEP_EXECUTE) from e

    try:
        version_string = output.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExecutionFailure(command, ExecutionFailure.STEP_DECODE) from e

    if not output.ok:
        _node_logger.warning(f"`{command}` exited with status {output.returncode}")

    trimmed = version_string.strip()
    if trimmed.startswith("v"):
        trimmed = trimmed[1:]

    try:
        current = SemanticVersion.parse(trimmed)
    except ValueError as e:
        raise ParseFailure.for_version(trimmed, version_string) from e

    if current < required:
        raise IncompatibleVersion(current, required)

    _node_logger.debug(f"node {current} satisfies minimum {required}")
    return current


def get_npm_bin_dir(runner: CommandRunner = run_command) -> str:
    """
    Return the directory npm installs executables into (`npm bin`).

    Raises:
        Unrecoverable: npm could not be run or printed non-UTF-8 output
    """
    command = Commands.display(Commands.NPM, Commands.NPM_BIN_ARGS)

    try:
        output = runner(Commands.NPM, Commands.NPM_BIN_ARGS)
    except OSError as e:
        _node_logger.error(f"failed to execute `{command}`: {e}")
        raise Unrecoverable("npm bin location could not be found, exiting") from e

    try:
        bin_dir = output.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        _node_logger.error(f"utf8 conversion error {e}")
        raise Unrecoverable("npm bin location could not be found, exiting") from e

    bin_dir = bin_dir.strip()
    _node_logger.debug(f"npm bin directory: {bin_dir}")
    return bin_dir
