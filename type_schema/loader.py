"""
loader.py - read schemas and exported type lists kept as JSON files.

Public API
----------
load_schema(path)     : schema mapping, ready for ``check_structure``
load_type_list(path)  : JSON payload suitable for ``TypeRegistry.import_``
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _read(path: Path) -> Any:
    """Read & parse a JSON file, raising crisp errors on failure."""
    try:
        with path.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Schema file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(path: str | Path) -> dict:
    """Return a fresh copy of the schema object stored at *path*."""
    p = Path(path)
    data = _read(p)
    if not isinstance(data, dict):
        raise ValueError(f"Schema at '{p}' must be a JSON object, got {type(data).__name__}")
    return copy.deepcopy(data)


def load_type_list(path: str | Path) -> str:
    """Return the text of an exported type list stored at *path*.

    The content is parsed once so a broken file fails here, with the file
    name in the message, rather than later inside the registry.
    """
    p = Path(path)
    data = _read(p)
    return json.dumps(data)
