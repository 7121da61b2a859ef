# core/constants.py - SINGLE SOURCE OF TRUTH for all shared string literals
"""
All shared string constants MUST be defined here.
No other module may define these values.

Categories:
- Commands: External command lines (node, npm)
- IssueTracker: Bug report endpoint and report template
- CrashText: Fixed strings rendered by the crash reporter
- EnvVars: Environment variable names read by Settings
"""

from typing import Tuple


# =============================================================================
# External commands
# =============================================================================


class Commands:
    """Fixed command lines for environment discovery."""

    NODE = "node"
    NODE_VERSION_ARGS: Tuple[str, ...] = ("-v",)

    NPM = "npm"
    NPM_BIN_ARGS: Tuple[str, ...] = ("bin",)

    @classmethod
    def display(cls, name: str, args: Tuple[str, ...]) -> str:
        """Render a command line for error messages, e.g. `node -v`."""
        return " ".join((name,) + tuple(args))


# =============================================================================
# Issue tracker
# =============================================================================


class IssueTracker:
    """Issue submission endpoint and the pre-filled report body."""

    NEW_ISSUE_URL = "https://github.com/christopherBiscardi/toast/issues/new"

    TITLE = "<autogenerated-issue>"

    # Placeholder when a metadata field cannot be determined
    UNAVAILABLE = "unavailable"

    BODY_TEMPLATE = (
        "## Metadata\n"
        "|key|value|\n"
        "|--|--|\n"
        "|**version**|{version}|\n"
        "|**os_type**|{os_type}|\n"
        "|**os_release**|{os_release}|\n"
        "|**message**|{message}|\n"
        "|**location**|{location}|\n"
        "## More info\n"
    )


# =============================================================================
# Crash report text
# =============================================================================


class CrashText:
    """Fixed strings rendered by the crash reporter."""

    BANNER = "The application panicked (crashed)."
    NON_STRING_PAYLOAD = "<non string panic payload>"
    UNKNOWN_LOCATION = "<unknown>"
    REPORT_PROMPT = "Consider reporting the bug using this URL: "


# =============================================================================
# Environment
# =============================================================================


class EnvVars:
    """Environment variables understood by toast."""

    LOG_LEVEL = "TOAST_LOG"
    ENGINE = "TOAST_ENGINE"
    NO_COLOR = "NO_COLOR"


# Entry point group searched for the incremental compilation engine
ENGINE_ENTRY_POINT_GROUP = "toast.engines"
ENGINE_ENTRY_POINT_NAME = "incremental"
