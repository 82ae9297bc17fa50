"""
registry.py - the live mapping from type name to validator.

Public API
----------
Validator
    Alias for the validator callable signature ``(value) -> value``.

TypeRegistry
    Owns the mapping.  Every name is normalised (trimmed, lower-cased)
    before it is stored or looked up, so ``" String "`` and ``"string"``
    address the same entry.

Only names travel through :meth:`TypeRegistry.export` /
:meth:`TypeRegistry.import_`; validator code is never serialised.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator
from typing import Any, Callable

from .builtins import builtin_entries
from .errors import (
    AlreadyRegisteredError,
    ConfigurationError,
    MalformedImportError,
    NotRegisteredError,
    UnknownTypeError,
)
from .utils import normalize_type_name

__all__ = ["Validator", "TypeRegistry"]

log = logging.getLogger(__name__)

Validator = Callable[[Any], Any]


class TypeRegistry:
    """Name -> validator mapping owned by one checker instance."""

    def __init__(self, *, seed: bool = True):
        self._validators: dict[str, Validator] = {}
        self._lock = threading.RLock()
        if seed:
            for name, validator in builtin_entries():
                self._validators[name] = validator

    # ------------------------------------------------------------------ #
    # Mutation                                                           #
    # ------------------------------------------------------------------ #

    def register(self, name: str, validator: Validator, override: bool = False) -> None:
        """Register *validator* under *name*.

        Raises
        ------
        AlreadyRegisteredError
            *name* is taken and ``override`` is false.
        TypeError
            *validator* is not callable.
        """
        key = self._key(name)
        if not callable(validator):
            raise TypeError(f'Validator for "{name}" must be callable, got {type(validator).__name__}')
        with self._lock:
            if key in self._validators and not override:
                raise AlreadyRegisteredError(name)
            self._validators[key] = validator
        log.debug("registered type %r (override=%s)", key, override)

    def unregister(self, name: str) -> None:
        """Remove *name*; raise :class:`NotRegisteredError` if absent."""
        key = self._key(name)
        with self._lock:
            if key not in self._validators:
                raise NotRegisteredError(name)
            del self._validators[key]
        log.debug("unregistered type %r", key)

    # ------------------------------------------------------------------ #
    # Lookup                                                             #
    # ------------------------------------------------------------------ #

    def resolve(self, name: str) -> Validator:
        """Return the validator for *name* or raise :class:`UnknownTypeError`."""
        try:
            return self._validators[normalize_type_name(name)]
        except (KeyError, TypeError):
            raise UnknownTypeError(name) from None

    def names(self) -> list[str]:
        """All registered names, in registration order."""
        with self._lock:
            return list(self._validators)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_type_name(name) in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._validators)

    # ------------------------------------------------------------------ #
    # Transport                                                          #
    # ------------------------------------------------------------------ #

    def export(self) -> str:
        """Serialise the registered names as a JSON array."""
        return json.dumps(self.names())

    def import_(self, payload: str) -> None:
        """Check a JSON array of names against this registry.

        Nothing is installed: validators cannot travel as JSON.  Names that
        are not registered are logged at WARNING level.
        """
        try:
            names = json.loads(payload)
        except (TypeError, json.JSONDecodeError) as exc:
            raise MalformedImportError(f"Invalid type list: {exc}") from exc
        if not isinstance(names, list):
            raise MalformedImportError("Invalid type list")
        if not all(isinstance(n, str) for n in names):
            raise MalformedImportError("Invalid type list: every entry must be a string")

        for name in names:
            if name not in self:
                log.warning("Unknown type in import: %s", name)

    # ------------------------------------------------------------------ #
    # Helpers                                                            #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _key(name: str) -> str:
        key = normalize_type_name(name)
        if not key:
            raise ConfigurationError("Type name must not be empty")
        return key
