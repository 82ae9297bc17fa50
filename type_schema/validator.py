"""
validator.py - recursive, error-collecting structure validation
===============================================================

Walks a schema tree and a candidate value side by side and reports *every*
violation it finds, each tagged with a dotted/bracketed path such as
``address.city`` or ``items[2]``.  Nothing here raises for bad data or a
malformed schema; both come back as messages in a :class:`ValidationResult`.

Public API
----------
ValidationResult
    ``errors`` plus ``is_valid``; ``raise_for_errors()`` converts it into a
    :class:`~type_schema.errors.SchemaError`.

check_structure(schema, value, *, matcher, path="", strict_mode=False)
    Depth-first validation supporting union (``"a|b"``) and optional
    (``"a?"``) leaves, homogeneous arrays (``["a"]``), nested mappings and a
    strict mode that rejects undeclared keys.

validate(schema, value, *, matcher)
    Flat variant: each schema entry is a type name (or list of names).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import SchemaError, UnknownTypeError
from .matcher import Matcher
from .schema import ArrayOf, InvalidNode, Leaf, ObjectNode, SchemaNode, compile_schema
from .utils import MISSING, as_type_list, kind_of, normalize_type_name

__all__ = ["ValidationResult", "check_structure", "validate"]

# --------------------------------------------------------------------------- #
# Result                                                                      #
# --------------------------------------------------------------------------- #

@dataclass
class ValidationResult:
    """Outcome of a structural check; valid exactly when ``errors`` is empty."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_errors(self) -> None:
        """Raise :class:`SchemaError` carrying every message, if any."""
        if self.errors:
            raise SchemaError(self.errors)


def _is_structure(value: Any) -> bool:
    return isinstance(value, Mapping)


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)

# --------------------------------------------------------------------------- #
# Core recursive validator                                                    #
# --------------------------------------------------------------------------- #

def check_structure(
    schema: Union[Mapping[str, Any], ObjectNode],
    value: Any,
    *,
    matcher: Matcher,
    path: str = "",
    strict_mode: bool = False,
) -> ValidationResult:
    """Validate *value* against *schema*, collecting every violation.

    Errors are ordered by schema key, with nested-object and array-element
    errors appearing where their parent field is processed.
    """
    errors: list[str] = []

    # 1) guards ------------------------------------------------------------
    if not isinstance(schema, ObjectNode) and not _is_structure(schema):
        errors.append("Invalid schema: must be a non-null object")
        return ValidationResult(errors)

    if not _is_structure(value):
        errors.append(f"Invalid object: must be a non-null object, got {kind_of(value)}")
        return ValidationResult(errors)

    node = compile_schema(schema)
    _check_object(node, value, path, strict_mode, matcher, errors)
    return ValidationResult(errors)


def _check_object(
    node: ObjectNode,
    value: Mapping[Any, Any],
    path: str,
    strict_mode: bool,
    matcher: Matcher,
    errors: list[str],
) -> None:
    # 2) declared fields ---------------------------------------------------
    for key, expected in node.fields.items():
        full_path = _join(path, key)
        optional = isinstance(expected, Leaf) and expected.optional

        # a key holding MISSING counts as absent
        actual = value.get(key, MISSING)
        if actual is MISSING:
            if not optional:
                errors.append(f'Missing required key "{full_path}"')
            continue

        if actual is None and optional:
            continue

        try:
            _check_node(expected, actual, full_path, strict_mode, matcher, errors)
        except Exception as exc:  # custom validators may raise anything
            errors.append(f'Validation error at "{full_path}": {exc}')

    # 3) undeclared keys ---------------------------------------------------
    if strict_mode:
        for key in value:
            if key not in node.fields:
                errors.append(f'Unexpected key "{_join(path, key)}" in strict mode')


def _check_node(
    expected: SchemaNode,
    value: Any,
    full_path: str,
    strict_mode: bool,
    matcher: Matcher,
    errors: list[str],
) -> None:
    if isinstance(expected, Leaf):
        _check_leaf(expected, value, full_path, matcher, errors)

    elif isinstance(expected, ArrayOf):
        if expected.problem:
            errors.append(expected.problem.replace("{path}", full_path))
            return
        if not isinstance(value, (list, tuple)):
            errors.append(f'Expected "{full_path}" to be an array, got {kind_of(value)}')
            return
        element = expected.element
        for idx, item in enumerate(value):
            item_path = f"{full_path}[{idx}]"
            if item is None and element.optional:
                continue
            try:
                _check_leaf(element, item, item_path, matcher, errors)
            except Exception as exc:  # custom validators may raise anything
                errors.append(f'Array element validation failed at "{item_path}": {exc}')

    elif isinstance(expected, ObjectNode):
        if not _is_structure(value):
            errors.append(f'Expected "{full_path}" to be an object, got {kind_of(value)}')
            return
        _check_object(expected, value, full_path, strict_mode, matcher, errors)

    elif isinstance(expected, InvalidNode):
        errors.append(
            f'Invalid schema definition at "{full_path}": '
            f"expected string, array, or object, got {expected.kind}"
        )


def _check_leaf(leaf: Leaf, value: Any, full_path: str, matcher: Matcher, errors: list[str]) -> None:
    if leaf.problem:
        errors.append(leaf.problem.replace("{path}", full_path))
        return

    unregistered: list[str] = []
    for type_name in leaf.types:
        try:
            if matcher.matches(value, type_name):
                return
        except UnknownTypeError as exc:
            # a composite validator naming some other unknown type is not ours
            if normalize_type_name(exc.name) != normalize_type_name(type_name):
                raise
            unregistered.append(type_name)

    message = f'Expected "{full_path}" to be {leaf.expected}, got {kind_of(value)}'
    if unregistered:
        message += f" (unregistered: {', '.join(unregistered)})"
    errors.append(message)

# --------------------------------------------------------------------------- #
# Flat validator                                                              #
# --------------------------------------------------------------------------- #

def validate(
    schema: Mapping[str, Union[str, Sequence[str]]],
    value: Mapping[str, Any],
    *,
    matcher: Matcher,
) -> list[str]:
    """Check each top-level key of *value* against a type name or names.

    No recursion, no optional markers: a missing key is tested as
    ``MISSING`` and therefore only satisfies ``"undefined"``.  Unknown type
    names raise :class:`~type_schema.errors.UnknownTypeError`.
    """
    errors: list[str] = []
    for key, expected in schema.items():
        actual = value.get(key, MISSING)
        if not matcher.matches(actual, expected):
            wanted = " | ".join(as_type_list(expected))
            errors.append(f'Expected "{key}" to be of type {wanted}, got {kind_of(actual)}')
    return errors
