"""
checker.py - High-level API: one registry, one matcher, structural checks.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Optional, Union

from . import loader
from . import validator
from .matcher import Matcher, TypeNames
from .registry import TypeRegistry, Validator
from .schema import ObjectNode, compile_schema
from .utils import as_type_list, kind_of

log = logging.getLogger(__name__)


class TypeChecker:
    """A validation engine owning its own :class:`TypeRegistry`.

    Two checkers never share registrations unless the same registry is
    passed to both explicitly.

    Example
    -------
    >>> checker = TypeChecker()
    >>> checker.is_(42, "number")
    True
    >>> checker.check_structure({"tags": ["string"]}, {"tags": ["a", 1]}).errors
    ['Expected "tags[1]" to be string, got number']
    """

    def __init__(self, registry: Optional[TypeRegistry] = None, *, strict: bool = False):
        self.registry = registry if registry is not None else TypeRegistry()
        self.matcher = Matcher(self.registry)
        self.strict = strict

    # ------------------------------------------------------------------ #
    # Registry management                                                #
    # ------------------------------------------------------------------ #

    def register_type(self, name: str, validator: Validator, override: bool = False) -> None:
        """Register a custom validator.

        >>> def positive(value):
        ...     if not isinstance(value, (int, float)) or value <= 0:
        ...         raise TypeError(f"{value!r} must be positive")
        ...     return value
        >>> TypeChecker().register_type("positive", positive)
        """
        self.registry.register(name, validator, override)

    def unregister_type(self, name: str) -> None:
        self.registry.unregister(name)

    def list_types(self) -> list[str]:
        return self.registry.names()

    def export_types(self) -> str:
        return self.registry.export()

    def import_types(self, payload: str) -> None:
        self.registry.import_(payload)

    # ------------------------------------------------------------------ #
    # Single values                                                      #
    # ------------------------------------------------------------------ #

    def is_(self, value: Any, types: TypeNames) -> bool:
        """True if *value* matches any of *types*."""
        return self.matcher.matches(value, types)

    def is_type(self, value: Any, types: TypeNames) -> Any:
        """Return *value* if it matches any of *types*, else raise TypeMismatchError."""
        return self.matcher.validate(value, types)

    def assert_type(self, value: Any, types: TypeNames) -> bool:
        """Like :meth:`is_`, but log a warning when the value does not match."""
        if self.matcher.matches(value, types):
            return True
        log.warning(
            "Assertion failed: expected %s, got %s",
            " | ".join(as_type_list(types)),
            kind_of(value),
        )
        return False

    # ------------------------------------------------------------------ #
    # Structures                                                         #
    # ------------------------------------------------------------------ #

    def compile(self, schema: Mapping[str, Any]) -> ObjectNode:
        """Compile *schema* once for repeated :meth:`check_structure` calls."""
        return compile_schema(schema)

    def check_structure(
        self,
        schema: Union[Mapping[str, Any], ObjectNode],
        value: Any,
        path: str = "",
        strict_mode: Optional[bool] = None,
    ) -> validator.ValidationResult:
        """Validate *value* against a nested *schema*, collecting every error.

        ``strict_mode=None`` uses the checker's ``strict`` default.
        """
        if strict_mode is None:
            strict_mode = self.strict
        return validator.check_structure(
            schema, value, matcher=self.matcher, path=path, strict_mode=strict_mode
        )

    def validate(self, schema: Mapping[str, Union[str, Sequence[str]]], value: Mapping[str, Any]) -> list[str]:
        """Flat check of top-level keys; returns the list of messages."""
        return validator.validate(schema, value, matcher=self.matcher)

    def load_schema(self, path: str | Path) -> ObjectNode:
        """Read a JSON schema file and compile it."""
        return compile_schema(loader.load_schema(path))
