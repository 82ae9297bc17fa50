"""
matcher.py - test one value against one or more registered type names.

Two entry points share the same resolution rules:

* :meth:`Matcher.matches` answers yes/no and never raises for a mismatch;
  the structural checker uses it to steer control flow.
* :meth:`Matcher.validate` returns the accepted value or raises a single
  :class:`~type_schema.errors.TypeMismatchError` listing why every
  candidate rejected it.

Both raise :class:`~type_schema.errors.UnknownTypeError` when a name is not
registered; that is a configuration problem, not a mismatch.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from .errors import ConfigurationError, TypeMismatchError
from .registry import TypeRegistry, Validator
from .utils import as_type_list, describe

__all__ = ["Matcher"]

TypeNames = Union[str, Sequence[str]]


class Matcher:
    """Single-value type matching backed by a :class:`TypeRegistry`."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    def _resolve_all(self, types: TypeNames) -> list[tuple[str, Validator]]:
        # every name is resolved up front so an unknown one fails even if an
        # earlier candidate would have matched
        return [(name, self.registry.resolve(name)) for name in as_type_list(types)]

    def matches(self, value: Any, types: TypeNames) -> bool:
        """Return ``True`` if any of *types* accepts *value*."""
        for _, check in self._resolve_all(types):
            try:
                check(value)
            except ConfigurationError:
                raise
            except (TypeError, ValueError):
                continue
            return True
        return False

    def validate(self, value: Any, types: TypeNames) -> Any:
        """Return *value* as accepted by the first matching type.

        Raises
        ------
        TypeMismatchError
            No candidate accepted *value*; ``reasons`` holds each message.
        """
        candidates = self._resolve_all(types)
        reasons: list[str] = []
        for _, check in candidates:
            try:
                return check(value)
            except ConfigurationError:
                raise
            except (TypeError, ValueError) as exc:
                reasons.append(str(exc))
        raise TypeMismatchError(
            f"None of the types matched for {describe(value)}: {', '.join(reasons)}",
            types=[name for name, _ in candidates],
            reasons=reasons,
        )
