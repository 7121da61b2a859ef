"""toast - incremental web module compiler CLI."""

from .core.version import VERSION

__version__ = VERSION
