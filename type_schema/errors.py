"""
errors.py - exception hierarchy for the type-schema package.

Two families live here:

* *configuration* errors - caller mistakes such as referencing a type name
  nobody registered.  They are raised immediately and never collected.
* *validation* errors - a value was rejected.  Validators raise
  :class:`RejectedValueError`; the structural checker turns them into plain
  strings inside a :class:`~type_schema.validator.ValidationResult`.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "TypeSchemaError",
    "ConfigurationError",
    "AlreadyRegisteredError",
    "NotRegisteredError",
    "UnknownTypeError",
    "MalformedImportError",
    "RejectedValueError",
    "TypeMismatchError",
    "SchemaError",
]

# --------------------------------------------------------------------------- #
# Base                                                                        #
# --------------------------------------------------------------------------- #

class TypeSchemaError(Exception):
    """Root of every exception raised by this package."""


# --------------------------------------------------------------------------- #
# Configuration errors                                                        #
# --------------------------------------------------------------------------- #

class ConfigurationError(TypeSchemaError):
    """The registry was used incorrectly."""


class AlreadyRegisteredError(ConfigurationError, ValueError):
    """Raised when a name is registered twice without ``override=True``."""

    def __init__(self, name: str):
        super().__init__(f'Type "{name}" is already registered.')
        self.name = name


class NotRegisteredError(ConfigurationError, LookupError):
    """Raised when unregistering a name that is not present."""

    def __init__(self, name: str):
        super().__init__(f'Type "{name}" is not registered.')
        self.name = name


class UnknownTypeError(ConfigurationError, LookupError):
    """Raised when a lookup references an unregistered type name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown type: {name}")
        self.name = name


class MalformedImportError(ConfigurationError, ValueError):
    """Raised when an import payload is not a JSON list of names."""


# --------------------------------------------------------------------------- #
# Validation errors                                                           #
# --------------------------------------------------------------------------- #

class RejectedValueError(TypeSchemaError, TypeError):
    """Raised by a validator that does not accept its value."""


class TypeMismatchError(RejectedValueError):
    """Raised when none of several candidate types accepts a value.

    ``reasons`` keeps every candidate's rejection message, in trial order.
    """

    def __init__(self, message: str, *, types: Sequence[str] = (), reasons: Sequence[str] = ()):
        super().__init__(message)
        self.types = list(types)
        self.reasons = list(reasons)


class SchemaError(TypeSchemaError, ValueError):
    """Raised when a document violates the supplied schema."""

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "schema violation")
