# core/engine.py - Boundary to the incremental compilation engine
"""
Locate the external incremental compilation engine and drive it.

An engine is an async callable taking a CompileConfig:

    async def incremental_compile(config: CompileConfig) -> Any: ...

Lookup order:
1. TOAST_ENGINE="package.module:attribute"
2. The "incremental" entry point in the "toast.engines" group

run_incremental() blocks the caller until the engine coroutine completes
and returns its result unchanged.
"""

import asyncio
import importlib
import logging
from importlib.metadata import entry_points
from typing import Any, Awaitable, Callable, Optional

from toast.core.config import CompileConfig, Settings
from toast.core.constants import ENGINE_ENTRY_POINT_GROUP, ENGINE_ENTRY_POINT_NAME, EnvVars
from toast.core.errors import EngineNotFound

_engine_logger = logging.getLogger("toast.engine")

Engine = Callable[[CompileConfig], Awaitable[Any]]


def import_engine(reference: str) -> Engine:
    """
    Import an engine from a "module:attribute" reference.

    Raises:
        EngineNotFound: Malformed reference, or the module/attribute is missing
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise EngineNotFound(f"Invalid engine reference `{reference}`, expected `module:attribute`")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineNotFound(f"Failed to import engine module `{module_name}`") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise EngineNotFound(f"Engine `{reference}` not found in `{module_name}`") from e

    if not callable(target):
        raise EngineNotFound(f"Engine `{reference}` is not callable")
    return target


def _engine_from_entry_points() -> Optional[Engine]:
    matches = entry_points(group=ENGINE_ENTRY_POINT_GROUP, name=ENGINE_ENTRY_POINT_NAME)
    for ep in matches:
        _engine_logger.debug(f"Loading engine entry point {ep.value}")
        try:
            return ep.load()
        except (ImportError, AttributeError) as e:
            raise EngineNotFound(f"Failed to load engine entry point `{ep.value}`") from e
    return None


def load_engine(settings: Settings) -> Engine:
    """
    Find the incremental compilation engine.

    Raises:
        EngineNotFound: No engine is configured or installed
    """
    if settings.engine:
        _engine_logger.debug(f"Using engine from {EnvVars.ENGINE}: {settings.engine}")
        return import_engine(settings.engine)

    engine = _engine_from_entry_points()
    if engine is None:
        raise EngineNotFound(
            f"No incremental compilation engine found. Install one that registers a "
            f"`{ENGINE_ENTRY_POINT_NAME}` entry point in `{ENGINE_ENTRY_POINT_GROUP}`, "
            f"or set {EnvVars.ENGINE}=module:attribute"
        )
    return engine


def run_incremental(config: CompileConfig, engine: Engine) -> Any:
    """Run the engine coroutine to completion on a fresh event loop."""
    _engine_logger.debug(f"Starting incremental compile of {config.project_root_dir}")
    result = asyncio.run(engine(config))
    _engine_logger.debug("Incremental compile finished")
    return result
