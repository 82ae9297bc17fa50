"""
schema.py - tagged schema tree compiled from plain Python literals.

Schemas are written as ordinary literals::

    {
        "name": "string",
        "age": "number|null",
        "email": "string?",
        "tags": ["string"],
        "address": {"street": "string", "city": "string?"},
    }

:func:`compile_schema` turns such a literal into ``SchemaNode`` objects once,
so type expressions are split and optional markers stripped a single time
rather than on every validation call.  Malformed parts are *not* rejected
here; they compile to nodes carrying a ``problem`` (or to an
:class:`InvalidNode`) and are reported by the validator at their path, the
same way bad data is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .utils import kind_of

__all__ = [
    "Leaf",
    "ArrayOf",
    "ObjectNode",
    "InvalidNode",
    "SchemaNode",
    "parse_leaf",
    "compile_node",
    "compile_schema",
]

OPTIONAL_SUFFIX = "?"
UNION_DELIMITER = "|"

# --------------------------------------------------------------------------- #
# Node types                                                                  #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Leaf:
    """A type expression such as ``"string"``, ``"string|null"`` or ``"number?"``."""

    expression: str
    types: tuple[str, ...]
    optional: bool = False
    problem: Optional[str] = None

    @property
    def expected(self) -> str:
        """Wording used in mismatch messages."""
        if len(self.types) == 1:
            return self.types[0]
        return f"one of [{', '.join(self.types)}]"


@dataclass(frozen=True)
class ArrayOf:
    """A homogeneous array whose members all satisfy ``element``."""

    element: Optional[Leaf]
    problem: Optional[str] = None


@dataclass(frozen=True, eq=False, repr=False)
class ObjectNode:
    """A nested structure: field name -> node.

    Compared by identity; a self-referencing schema compiles to a cycle.
    """

    fields: Mapping[str, "SchemaNode"]

    def __repr__(self) -> str:
        return f"ObjectNode(fields={list(self.fields)!r})"


@dataclass(frozen=True)
class InvalidNode:
    """Anything that is neither a string, a list nor a mapping."""

    kind: str


SchemaNode = Union[Leaf, ArrayOf, ObjectNode, InvalidNode]

# --------------------------------------------------------------------------- #
# Compilation                                                                 #
# --------------------------------------------------------------------------- #

def parse_leaf(expression: str) -> Leaf:
    """Split *expression* into its union members and optional flag.

    ``problem`` is a message template with a ``{path}`` placeholder.
    """
    optional = expression.endswith(OPTIONAL_SUFFIX)
    base = expression[:-1] if optional else expression

    if base.strip() == "":
        return Leaf(base, (), optional, 'Empty type definition at "{path}"')

    types = tuple(t.strip() for t in base.split(UNION_DELIMITER) if t.strip())
    if not types:
        # only delimiters, e.g. "|" or " | | "
        problem = f'Invalid type definition "{base}" at ' + '"{path}"'
        return Leaf(base, (), optional, problem)

    return Leaf(base, types, optional)


def _compile_array(items: Union[list, tuple]) -> ArrayOf:
    if len(items) == 0:
        return ArrayOf(None, 'Empty array schema definition at "{path}"')
    if len(items) > 1:
        return ArrayOf(None, 'Array schema must have exactly one element type definition at "{path}"')
    if not isinstance(items[0], str):
        return ArrayOf(None, 'Array element type must be a string at "{path}"')
    return ArrayOf(parse_leaf(items[0]))


def _compile_object(raw: Mapping, memo: dict[int, ObjectNode]) -> ObjectNode:
    # a mapping seen before reuses its node, so a self-referencing schema
    # compiles to a cycle
    node = memo.get(id(raw))
    if node is not None:
        return node
    fields: dict[Any, SchemaNode] = {}
    node = memo[id(raw)] = ObjectNode(fields)
    for key, sub in raw.items():
        fields[key] = compile_node(sub, _memo=memo)
    return node


def compile_node(raw: Any, *, _memo: Optional[dict[int, ObjectNode]] = None) -> SchemaNode:
    """Compile one schema position."""
    if isinstance(raw, (Leaf, ArrayOf, ObjectNode, InvalidNode)):
        return raw
    if isinstance(raw, str):
        return parse_leaf(raw)
    if isinstance(raw, (list, tuple)):
        return _compile_array(raw)
    if isinstance(raw, Mapping):
        return _compile_object(raw, {} if _memo is None else _memo)
    return InvalidNode(kind_of(raw))


def compile_schema(raw: Any) -> ObjectNode:
    """Compile a top-level schema; it must be a mapping.

    Raises
    ------
    TypeError
        *raw* is not a mapping (or an already compiled :class:`ObjectNode`).
    """
    if isinstance(raw, ObjectNode):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"schema must be a mapping, got {kind_of(raw)}")
    return _compile_object(raw, {})
