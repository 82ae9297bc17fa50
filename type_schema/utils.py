"""
utils.py – shared, low-level helpers for the type-schema package.

This module consolidates:
- Type-name normalisation (the single rule every registry lookup obeys)
- The ``MISSING`` sentinel (a value that is not there at all)
- Kind reporting used purely to word diagnostics
"""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Mapping, Sequence, Set
from numbers import Real
from typing import Any, Union

import pandas as pd

__all__ = ["MISSING", "normalize_type_name", "as_type_list", "kind_of", "describe"]

# --------------------------------------------------------------------------- #
# Sentinel                                                                    #
# --------------------------------------------------------------------------- #

class _Missing:
    """Singleton marking an absent value (distinct from ``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING: Any = _Missing()

# --------------------------------------------------------------------------- #
# Type names                                                                  #
# --------------------------------------------------------------------------- #

def normalize_type_name(name: Any) -> str:
    """Return the registry key for *name*: trimmed and lower-cased."""
    if not isinstance(name, str):
        raise TypeError(f"type name must be a string, got {type(name).__name__}")
    return name.strip().lower()


def as_type_list(types: Union[str, Sequence[str]]) -> list[str]:
    """Accept one type name or a sequence of them and return a list."""
    if isinstance(types, str):
        return [types]
    return list(types)

# --------------------------------------------------------------------------- #
# Kind reporting                                                              #
# --------------------------------------------------------------------------- #

def kind_of(value: Any) -> str:
    """Return a short, human-oriented kind name for *value*.

    Only used to word error messages; nothing branches on the result.
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "arraybuffer"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, pd.DataFrame):
        return "dataframe"
    if isinstance(value, pd.Series):
        return "series"
    if isinstance(value, _dt.date):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, Set):
        return "set"
    if callable(value):
        return "function"
    return type(value).__name__


def describe(value: Any, limit: int = 60) -> str:
    """``repr`` of *value*, shortened so messages stay on one line."""
    try:
        text = repr(value)
    except Exception:  # __repr__ may raise
        text = f"<{type(value).__name__}>"
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text
