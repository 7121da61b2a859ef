# core/platform.py - SINGLE SOURCE OF TRUTH for platform detection
"""
Host operating system metadata used in bug reports.

This module provides:
- os_type(): OS family as reported by the kernel ("Linux", "Darwin", "Windows")
- os_release(): OS release string

os_type() and os_release() are best-effort: they return None instead of
raising, so callers can substitute a placeholder.
"""

import logging
import platform as _platform
from typing import Optional

_platform_logger = logging.getLogger("toast.platform")


def os_type() -> Optional[str]:
    """Return the OS family name, or None if it cannot be determined."""
    try:
        value = _platform.system()
    except OSError as e:
        _platform_logger.debug(f"os_type lookup failed: {e}")
        return None
    return value or None


def os_release() -> Optional[str]:
    """Return the OS release string, or None if it cannot be determined."""
    try:
        value = _platform.release()
    except OSError as e:
        _platform_logger.debug(f"os_release lookup failed: {e}")
        return None
    return value or None
