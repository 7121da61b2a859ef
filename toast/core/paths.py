# core/paths.py - SINGLE SOURCE OF TRUTH for all filesystem paths
"""
All filesystem paths MUST be defined here as Path objects.
No other module may construct project paths.

RULES:
- All paths are Path objects internally
- Convert to str() ONLY at I/O boundaries (subprocess, JSON, print)
- Use Path arithmetic (/) for joins, never string concatenation
"""

from pathlib import Path


class Paths:
    """
    Centralized path definitions for a toast project.

    Usage:
        from toast.core.paths import Paths
        import_map = Paths.import_map_file(input_dir)
    """

    # ==========================================================================
    # Directory structure constants (relative to the project root)
    # ==========================================================================

    PUBLIC_SUBDIR = "public"
    WEB_MODULES_SUBDIR = "web_modules"
    IMPORT_MAP_FILENAME = "import-map.json"

    # ==========================================================================
    # Path builders (return Path objects)
    # ==========================================================================

    @classmethod
    def public_dir(cls, project_root: Path) -> Path:
        """Return <project_root>/public, the default output directory."""
        return Path(project_root) / cls.PUBLIC_SUBDIR

    @classmethod
    def web_modules_dir(cls, project_root: Path) -> Path:
        """Return <project_root>/public/web_modules."""
        return cls.public_dir(project_root) / cls.WEB_MODULES_SUBDIR

    @classmethod
    def import_map_file(cls, project_root: Path) -> Path:
        """Return <project_root>/public/web_modules/import-map.json."""
        return cls.web_modules_dir(project_root) / cls.IMPORT_MAP_FILENAME
