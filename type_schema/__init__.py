"""
type_schema – runtime type checks and nested-schema validation for plain data.
"""
import logging

from .checker import TypeChecker
from .errors import (
    AlreadyRegisteredError,
    ConfigurationError,
    MalformedImportError,
    NotRegisteredError,
    RejectedValueError,
    SchemaError,
    TypeMismatchError,
    TypeSchemaError,
    UnknownTypeError,
)
from .registry import TypeRegistry
from .schema import compile_schema
from .utils import MISSING, kind_of
from .validator import ValidationResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TypeChecker",
    "TypeRegistry",
    "ValidationResult",
    "compile_schema",
    "kind_of",
    "MISSING",
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
