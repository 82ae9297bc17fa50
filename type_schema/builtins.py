"""
builtins.py - the validators every fresh registry is seeded with.

Each validator follows the package-wide contract: it takes one value and
either returns it or raises :class:`~type_schema.errors.RejectedValueError`
with a readable reason.  ``BUILTIN_TYPES`` lists them as
``(canonical name, aliases, validator)`` triples.
"""

from __future__ import annotations

import array
import datetime as _dt
import enum
import json
import re
from collections.abc import Iterator, Mapping, Set
from numbers import Real
from typing import Any, Callable
from xml.dom import minidom
from xml.etree import ElementTree

import numpy as np
import pandas as pd

from .errors import RejectedValueError
from .utils import MISSING, describe, kind_of

__all__ = ["BUILTIN_TYPES", "builtin_entries"]


def _reject(value: Any, what: str, *, show_kind: bool = True) -> RejectedValueError:
    if show_kind:
        return RejectedValueError(f"{describe(value)} must be {what}, is {kind_of(value)}")
    return RejectedValueError(f"{describe(value)} must be {what}.")

# --------------------------------------------------------------------------- #
# Scalars                                                                     #
# --------------------------------------------------------------------------- #

def t_string(value: Any) -> str:
    if not isinstance(value, str):
        raise _reject(value, "a string")
    return value


def t_number(value: Any) -> Real:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _reject(value, "a number")
    return value


def t_bigint(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise _reject(value, "an integer")
    return value


def t_boolean(value: Any) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise _reject(value, "a boolean")
    return value


def t_null(value: Any) -> None:
    if value is not None:
        raise _reject(value, "null", show_kind=False)
    return value


def t_undefined(value: Any) -> Any:
    if value is not MISSING:
        raise _reject(value, "undefined")
    return value


def t_symbol(value: Any) -> enum.Enum:
    if not isinstance(value, enum.Enum):
        raise _reject(value, "a symbol (enum member)")
    return value


def t_json(value: Any) -> str:
    text = t_string(value)
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        raise RejectedValueError(f"{describe(value)} must be a valid JSON string.") from exc
    return text

# --------------------------------------------------------------------------- #
# Containers & structured values                                              #
# --------------------------------------------------------------------------- #

def t_array(value: Any) -> list | tuple:
    if not isinstance(value, (list, tuple)):
        raise _reject(value, "an array")
    return value


def t_object(value: Any) -> Any:
    kind = kind_of(value)
    if kind in ("null", "undefined", "boolean", "number", "string", "array", "function"):
        raise RejectedValueError(f"{describe(value)} must be a non-array object, is {kind}")
    return value


def t_map(value: Any) -> Mapping:
    if not isinstance(value, Mapping):
        raise _reject(value, "a Map", show_kind=False)
    return value


def t_set(value: Any) -> Set:
    if not isinstance(value, Set):
        raise _reject(value, "a Set", show_kind=False)
    return value


def t_date(value: Any) -> _dt.date:
    # pd.NaT is a datetime subclass standing for an invalid date
    if not isinstance(value, _dt.date) or value is pd.NaT:
        raise _reject(value, "a valid Date", show_kind=False)
    return value


def t_regexp(value: Any) -> re.Pattern:
    if not isinstance(value, re.Pattern):
        raise _reject(value, "a RegExp", show_kind=False)
    return value


def t_function(value: Any) -> Callable:
    if not callable(value):
        raise _reject(value, "a function")
    return value


def t_array_buffer(value: Any) -> bytes | bytearray:
    if not isinstance(value, (bytes, bytearray)):
        raise _reject(value, "an ArrayBuffer", show_kind=False)
    return value


def t_data_view(value: Any) -> memoryview:
    if not isinstance(value, memoryview):
        raise _reject(value, "a DataView", show_kind=False)
    return value


def t_typed_array(value: Any) -> Any:
    if not isinstance(value, (array.array, np.ndarray)):
        raise _reject(value, "a TypedArray", show_kind=False)
    return value


def t_dom_element(value: Any) -> Any:
    if not isinstance(value, (ElementTree.Element, minidom.Element)):
        raise _reject(value, "a DOM element")
    return value


def t_dataframe(value: Any) -> pd.DataFrame:
    if not isinstance(value, pd.DataFrame):
        raise _reject(value, "a DataFrame")
    return value


def t_series(value: Any) -> pd.Series:
    if not isinstance(value, pd.Series):
        raise _reject(value, "a Series")
    return value

# --------------------------------------------------------------------------- #
# Seed table                                                                  #
# --------------------------------------------------------------------------- #

BUILTIN_TYPES: tuple[tuple[str, tuple[str, ...], Callable[[Any], Any]], ...] = (
    ("array",       ("a", "arr", "list"),                          t_array),
    ("arraybuffer", ("ab", "arr_buff", "array_buffer", "bytes"),   t_array_buffer),
    ("typedarray",  ("ta", "typ_arr", "typed_array", "ndarray"),   t_typed_array),
    ("bigint",      ("bi", "bint", "int", "integer"),              t_bigint),
    ("boolean",     ("b", "bool"),                                 t_boolean),
    ("date",        ("dt", "datetime"),                            t_date),
    ("dataview",    ("dv", "dt_v", "data_view", "memoryview"),     t_data_view),
    ("dom-element", ("dom", "domel", "domelement", "element"),     t_dom_element),
    ("function",    ("f", "funct", "fn", "callable"),              t_function),
    ("json-string", ("j", "json", "json_string"),                  t_json),
    ("map",         ("mapping",),                                  t_map),
    ("number",      ("n", "num", "float"),                         t_number),
    ("null",        ("none",),                                     t_null),
    ("object",      ("o", "obj"),                                  t_object),
    ("regexp",      ("reg", "regex"),                              t_regexp),
    ("set",         ("frozenset",),                                t_set),
    ("string",      ("s", "str"),                                  t_string),
    ("symbol",      ("sym", "enum"),                               t_symbol),
    ("undefined",   ("u", "undef", "void"),                        t_undefined),
    ("dataframe",   ("df",),                                       t_dataframe),
    ("series",      ("ser",),                                      t_series),
)


def builtin_entries() -> Iterator[tuple[str, Callable[[Any], Any]]]:
    """Yield ``(name, validator)`` for every canonical name and alias."""
    for canonical, aliases, validator in BUILTIN_TYPES:
        yield canonical, validator
        for alias in aliases:
            yield alias, validator
