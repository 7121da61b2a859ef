# core/errors.py - SINGLE SOURCE OF TRUTH for the failure taxonomy
"""
Failure types raised by toast.

Two families:
- ToastError and subclasses: recoverable failures. They propagate to the
  CLI, which renders the message and its causal chain and exits non-zero.
- Unrecoverable: environment faults after which nothing can run. It is
  deliberately NOT a ToastError so the CLI never catches it; the crash
  reporter renders it instead.

Every wrapper is raised with `raise ... from cause` so the original
exception stays reachable through __cause__.
"""

from pathlib import Path
from typing import Iterator, List, Optional


class ToastError(Exception):
    """Base class for recoverable toast failures."""


class ExecutionFailure(ToastError):
    """A required external command could not run or its output was not text."""

    STEP_EXECUTE = "execute"
    STEP_DECODE = "decode"

    def __init__(self, command: str, step: str):
        self.command = command
        self.step = step
        if step == self.STEP_DECODE:
            message = f"Failed to create utf8 string from `{command}` Command output"
        else:
            message = f"Failed to execute `{command}` Command and collect output"
        super().__init__(message)


class ReadFailure(ToastError):
    """A required file is missing or unreadable."""

    def __init__(self, path: Path, description: str = "file"):
        self.path = Path(path)
        super().__init__(f"Failed to read `{description}` from `{self.path}`")


class ParseFailure(ToastError):
    """Malformed version string or import-map content."""

    def __init__(self, message: str, *, content: str, raw: Optional[str] = None, path: Optional[Path] = None):
        self.content = content
        self.raw = raw
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    @classmethod
    def for_version(cls, trimmed: str, raw: str) -> "ParseFailure":
        return cls(
            f"Couldn't parse node version from trimmed version `{trimmed}`, original string is `{raw}`",
            content=trimmed,
            raw=raw,
        )

    @classmethod
    def for_import_map(cls, content: str, path: Path) -> "ParseFailure":
        return cls(
            f"Failed to parse import map from content `{content}` at `{path}`",
            content=content,
            raw=content,
            path=path,
        )


class IncompatibleVersion(ToastError):
    """The host runtime is older than the required minimum."""

    def __init__(self, found, required):
        self.found = found
        self.required = required
        super().__init__(f"node version {found} doesn't meet the minimum required version {required}")


class OutputDirectoryFailure(ToastError):
    """The default output directory could not be created or canonicalized."""

    STEP_CREATE = "create"
    STEP_CANONICALIZE = "canonicalize"

    def __init__(self, path: Path, step: str):
        self.path = Path(path)
        self.step = step
        if step == self.STEP_CREATE:
            message = f"Failed create directories for path `{self.path}`"
        else:
            message = f"Failed canonicalize the output directory path `{self.path}`"
        super().__init__(message)


class EngineNotFound(ToastError):
    """No incremental compilation engine could be located."""


class EngineFailure(ToastError):
    """Raised by engines to report a failed compile."""


class Unrecoverable(Exception):
    """An environment fault after which the pipeline cannot continue."""


class CrashReporterAlreadyInstalled(RuntimeError):
    """install() was called a second time."""


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """
    Yield exc and each exception that caused it, outermost first.

    Follows __cause__, then __context__ unless suppressed. Stops on cycles.
    """
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def error_chain(exc: BaseException) -> List[BaseException]:
    """List form of iter_error_chain()."""
    return list(iter_error_chain(exc))
