# core/import_map.py - Import map parsing
"""
Parse web_modules/import-map.json into an ImportMap.

Only the shape the resolver needs is validated: a JSON object whose
"imports" member maps specifier strings to location strings. "scopes" is
passed through untouched.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


class ImportMapError(ValueError):
    """Import-map text is not valid JSON or has the wrong shape."""


@dataclass(frozen=True)
class ImportMap:
    """Module specifier -> resolved location."""

    imports: Dict[str, str] = field(default_factory=dict)
    scopes: Dict[str, Any] = field(default_factory=dict)

    def resolve(self, specifier: str) -> str:
        """Return the mapped location for specifier, or specifier itself."""
        return self.imports.get(specifier, specifier)

    def __contains__(self, specifier: str) -> bool:
        return specifier in self.imports

    def __len__(self) -> int:
        return len(self.imports)


def parse_import_map(contents: str) -> ImportMap:
    """
    Parse import-map JSON text.

    Raises:
        ImportMapError: If contents is not JSON or not an import map
    """
    try:
        data = json.loads(contents)
    except json.JSONDecodeError as e:
        raise ImportMapError(f"invalid JSON: {e}") from e

    if not isinstance(data, Mapping):
        raise ImportMapError(f"expected a JSON object, got {type(data).__name__}")

    imports = data.get("imports")
    if not isinstance(imports, Mapping):
        raise ImportMapError('missing or invalid "imports" object')
    for specifier, location in imports.items():
        if not isinstance(location, str):
            raise ImportMapError(f'"imports" entry {specifier!r} must map to a string')

    scopes = data.get("scopes", {})
    if not isinstance(scopes, Mapping):
        raise ImportMapError('"scopes" must be an object')

    return ImportMap(imports=dict(imports), scopes=dict(scopes))
