"""
Crash reporter
==============

Replaces the default traceback dump for uncaught exceptions with a short,
labelled crash report and a pre-filled GitHub issue link:

    The application panicked (crashed).
    Message:  boom
    Location: /path/to/module.py:10

    Consider reporting the bug using this URL: https://github.com/...

install() must be called once at process start, before anything that can
fail. The full traceback is still logged at debug level.
"""

import logging
import sys
import threading
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Optional, Type
from urllib.parse import urlencode

from toast.core.constants import CrashText, IssueTracker
from toast.core.errors import CrashReporterAlreadyInstalled
from toast.core.platform import os_release, os_type
from toast.core.version import VERSION
from toast.scripts.cli_output import CLIOutput

_crash_logger = logging.getLogger("toast.crash")

_install_lock = threading.Lock()
_installed = False


@dataclass(frozen=True)
class FaultLocation:
    """Source location where a fault was raised."""

    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


@dataclass(frozen=True)
class CrashReport:
    """One rendered-once description of a fault."""

    message: str
    location: Optional[FaultLocation]

    @property
    def url(self) -> Optional[str]:
        if self.location is None:
            return None
        return build_issue_url(self.location, self.message)

    def render(self, out: CLIOutput) -> str:
        lines = [
            out.paint(CrashText.BANNER, "red"),
            f"Message:  {out.paint(self.message, 'cyan')}",
        ]
        if self.location is None:
            lines.append(f"Location: {CrashText.UNKNOWN_LOCATION}")
        else:
            location = (
                f"{out.paint(self.location.filename, 'magenta')}:"
                f"{out.paint(str(self.location.lineno), 'magenta')}"
            )
            lines.append(f"Location: {location}")
            lines.append("")
            lines.append(f"{CrashText.REPORT_PROMPT}{out.paint(self.url, 'cyan')}")
        return "\n".join(lines) + "\n"


# =============================================================================
# Payload and location extraction
# =============================================================================


def fault_payload(exc_value: Optional[BaseException]) -> Any:
    """Return the exception's first argument, or None when it has none."""
    if exc_value is None or not exc_value.args:
        return None
    return exc_value.args[0]


def extract_message(payload: Any) -> str:
    """
    Best-effort text for a fault payload.

    Tried in order: owned text (str), borrowed text (a bytes-like buffer
    holding UTF-8), then the fixed placeholder.
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray, memoryview)):
        try:
            return bytes(payload).decode("utf-8")
        except UnicodeDecodeError:
            pass
    return CrashText.NON_STRING_PAYLOAD


def fault_location(tb: Optional[TracebackType]) -> Optional[FaultLocation]:
    """Location of the innermost frame of a traceback."""
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return FaultLocation(filename=tb.tb_frame.f_code.co_filename, lineno=tb.tb_lineno)


# =============================================================================
# Issue URL
# =============================================================================


def _metadata(value: Optional[str]) -> str:
    return value if value else IssueTracker.UNAVAILABLE


def issue_body(location: FaultLocation, message: str) -> str:
    """Markdown metadata table for the issue body."""
    return IssueTracker.BODY_TEMPLATE.format(
        version=VERSION,
        os_type=_metadata(os_type()),
        os_release=_metadata(os_release()),
        message=message,
        location=location,
    )


def build_issue_url(location: FaultLocation, message: str) -> str:
    """
    Deep link to a new GitHub issue with title and body pre-filled.

    Falls back to the bare endpoint if the link cannot be built.
    """
    try:
        query = urlencode({"title": IssueTracker.TITLE, "body": issue_body(location, message)})
    except Exception as e:
        _crash_logger.debug(f"Could not build issue URL: {e}")
        return IssueTracker.NEW_ISSUE_URL
    return f"{IssueTracker.NEW_ISSUE_URL}?{query}"


# =============================================================================
# Hook
# =============================================================================


def build_report(exc_value: Optional[BaseException], tb: Optional[TracebackType]) -> CrashReport:
    return CrashReport(
        message=extract_message(fault_payload(exc_value)),
        location=fault_location(tb),
    )


def crash_hook(
    exc_type: Type[BaseException],
    exc_value: BaseException,
    exc_traceback: Optional[TracebackType],
    out: Optional[CLIOutput] = None,
):
    """sys.excepthook replacement."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Allow Ctrl+C to exit normally
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    _crash_logger.debug("Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback))

    out = out or CLIOutput.detect()
    report = build_report(exc_value, exc_traceback)
    out.write(report.render(out))


def install():
    """
    Install crash_hook as sys.excepthook.

    Raises:
        CrashReporterAlreadyInstalled: On any call after the first
    """
    global _installed
    with _install_lock:
        if _installed:
            raise CrashReporterAlreadyInstalled("crash reporter is already installed")
        sys.excepthook = crash_hook
        _installed = True


def is_installed() -> bool:
    return _installed
