# core/config.py - Configuration loading and CompileConfig assembly
"""
SINGLE SOURCE OF TRUTH for run configuration.

This module provides:
- Settings: environment-derived options (log level, engine, colour)
- load_import_map(): read and parse <input_dir>/public/web_modules/import-map.json
- resolve_output_dir(): explicit output dir, or a created + canonicalized default
- CompileConfig: the record handed to the incremental compilation engine

Per the rest of core/:
- All path operations use pathlib.Path
- Every failure is re-raised as a ToastError with the original as __cause__
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from toast.core.constants import EnvVars
from toast.core.errors import OutputDirectoryFailure, ParseFailure, ReadFailure
from toast.core.import_map import ImportMap, ImportMapError, parse_import_map
from toast.core.paths import Paths

_config_logger = logging.getLogger("toast.config")

DEFAULT_LOG_LEVEL = "warning"


# =============================================================================
# Environment settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """Options read from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL
    engine: Optional[str] = None
    no_color: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build Settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)
        """
        env = os.environ if environ is None else environ
        log_level = env.get(EnvVars.LOG_LEVEL, "").strip() or DEFAULT_LOG_LEVEL
        engine = env.get(EnvVars.ENGINE, "").strip() or None
        return cls(
            log_level=log_level,
            engine=engine,
            # NO_COLOR disables colour when present, regardless of value
            no_color=EnvVars.NO_COLOR in env,
        )


# =============================================================================
# Compile configuration
# =============================================================================


@dataclass(frozen=True)
class CompileConfig:
    """Everything the incremental compilation engine needs for one run."""

    debug: bool
    project_root_dir: Path
    output_dir: Path
    npm_bin_dir: str
    import_map: ImportMap


def load_import_map(input_dir: Path) -> ImportMap:
    """
    Read and parse the project's import map.

    Raises:
        ReadFailure: File missing, unreadable, or not UTF-8
        ParseFailure: Content is not a valid import map
    """
    import_map_path = Paths.import_map_file(input_dir)
    _config_logger.debug(f"Reading import map from {import_map_path}")

    try:
        contents = import_map_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(import_map_path, Paths.IMPORT_MAP_FILENAME) from e

    try:
        import_map = parse_import_map(contents)
    except ImportMapError as e:
        raise ParseFailure.for_import_map(contents, import_map_path) from e

    _config_logger.debug(f"Import map has {len(import_map)} entries")
    return import_map


def resolve_output_dir(input_dir: Path, output_dir: Optional[Path] = None) -> Path:
    """
    Return the effective output directory.

    An explicit output_dir is returned verbatim. Otherwise <input_dir>/public
    is created (with missing ancestors) and canonicalized.

    Raises:
        OutputDirectoryFailure: Creation or canonicalization failed
    """
    if output_dir is not None:
        return Path(output_dir)

    full_output_dir = Paths.public_dir(input_dir)
    try:
        full_output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryFailure(full_output_dir, OutputDirectoryFailure.STEP_CREATE) from e

    try:
        resolved = full_output_dir.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise OutputDirectoryFailure(full_output_dir, OutputDirectoryFailure.STEP_CANONICALIZE) from e

    _config_logger.debug(f"Output directory: {resolved}")
    return resolved


def build_compile_config(
    *,
    debug: bool,
    input_dir: Path,
    output_dir: Optional[Path],
    npm_bin_dir: str,
) -> CompileConfig:
    """Load the import map, resolve the output directory and assemble a CompileConfig."""
    import_map = load_import_map(input_dir)
    return CompileConfig(
        debug=debug,
        project_root_dir=Path(input_dir),
        output_dir=resolve_output_dir(input_dir, output_dir),
        npm_bin_dir=npm_bin_dir,
        import_map=import_map,
    )
