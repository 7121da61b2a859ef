"""
CLI Output Formatting Module (SSOT)

This module provides consistent terminal output for toast diagnostics.
Everything goes to stderr, colour is only emitted to terminals (never when
NO_COLOR is set), and consoles that cannot encode a character get an ASCII
fallback instead of an exception.

Usage:
    from toast.scripts.cli_output import CLIOutput

    out = CLIOutput.detect()
    out.write(out.paint("text", "cyan") + "\\n")
    out.error_report(exc)
"""

import os
import sys
from typing import List, Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

from toast.core.constants import EnvVars
from toast.core.errors import error_chain


class CLIOutput:
    """
    SSOT for consistent CLI output formatting.

    Features:
    - colorama colours, disabled for pipes and NO_COLOR
    - ASCII fallback when the stream cannot encode the text
    - Error reports with a numbered causal chain
    """

    COLORS = {
        'red': Fore.RED,
        'cyan': Fore.CYAN,
        'magenta': Fore.MAGENTA,
    }

    def __init__(self, use_color: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize CLI output formatter.

        Args:
            use_color: Wrap painted text in ANSI colour codes
            stream: Destination stream; defaults to sys.stderr at write time
        """
        self.use_color = use_color
        self._stream = stream

    @classmethod
    def detect(cls, stream: Optional[TextIO] = None, no_color: Optional[bool] = None) -> 'CLIOutput':
        """
        Auto-detect console capabilities and return appropriate formatter.

        Colour is enabled only when the target is a TTY and NO_COLOR is unset.
        """
        target = stream or sys.stderr
        if no_color is None:
            no_color = EnvVars.NO_COLOR in os.environ

        isatty = getattr(target, 'isatty', None)
        use_color = bool(not no_color and isatty is not None and isatty())
        if use_color:
            # Enables ANSI sequences on legacy Windows consoles; no-op elsewhere
            just_fix_windows_console()

        return cls(use_color=use_color, stream=stream)

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def paint(self, text: str, color: str) -> str:
        """Return text wrapped in the named colour, or unchanged without colour."""
        if not self.use_color:
            return text
        return f"{self.COLORS[color]}{text}{Style.RESET_ALL}"

    def write(self, text: str):
        """Write text verbatim with safe encoding fallback."""
        try:
            self.stream.write(text)
        except UnicodeEncodeError:
            self.stream.write(text.encode('ascii', errors='replace').decode('ascii'))
        self.stream.flush()

    def format_error_report(self, exc: BaseException) -> str:
        """
        Format an exception and its causes.

            Error: outer message

            Caused by:
               0: inner message
               1: root cause
        """
        chain = error_chain(exc)
        lines: List[str] = [f"{self.paint('Error:', 'red')} {_describe(chain[0])}"]
        if len(chain) > 1:
            lines.append("")
            lines.append("Caused by:")
            for index, cause in enumerate(chain[1:]):
                lines.append(f"   {index}: {_describe(cause)}")
        return "\n".join(lines)

    def error_report(self, exc: BaseException):
        """Write format_error_report(exc) followed by a newline."""
        self.write(self.format_error_report(exc) + "\n")


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return text if text else type(exc).__name__
