# toast SSOT core modules
# This package contains all single-source-of-truth modules for the toast CLI.
# =============================================================================
# Version
# =============================================================================
from .version import MIN_NODE_VERSION, VERSION, SemanticVersion

# =============================================================================
# Errors
# =============================================================================
from .errors import (
    EngineFailure,
    EngineNotFound,
    ExecutionFailure,
    IncompatibleVersion,
    OutputDirectoryFailure,
    ParseFailure,
    ReadFailure,
    ToastError,
    Unrecoverable,
)

# =============================================================================
# Configuration
# =============================================================================
from .config import CompileConfig, Settings
from .import_map import ImportMap

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "VERSION",
    "MIN_NODE_VERSION",
    "SemanticVersion",
    # Errors
    "ToastError",
    "ExecutionFailure",
    "ReadFailure",
    "ParseFailure",
    "IncompatibleVersion",
    "OutputDirectoryFailure",
    "EngineNotFound",
    "EngineFailure",
    "Unrecoverable",
    # Configuration
    "CompileConfig",
    "Settings",
    "ImportMap",
]
