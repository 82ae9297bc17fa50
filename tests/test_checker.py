import json
import unittest

from type_schema import TypeChecker, TypeMismatchError, TypeRegistry
from type_schema.errors import AlreadyRegisteredError, NotRegisteredError, UnknownTypeError
from tests._util import positive


class CheckerRegistryTests(unittest.TestCase):
    def setUp(self):
        self.checker = TypeChecker()

    def test_register_list_unregister_round_trip(self):
        self.checker.register_type("x", positive)
        self.assertIn("x", self.checker.list_types())
        self.checker.unregister_type("x")
        self.assertNotIn("x", self.checker.list_types())

    def test_configuration_errors_surface(self):
        with self.assertRaises(AlreadyRegisteredError):
            self.checker.register_type("number", positive)
        with self.assertRaises(NotRegisteredError):
            self.checker.unregister_type("never-registered")

    def test_override(self):
        self.checker.register_type("number", positive, override=True)
        self.assertFalse(self.checker.is_(-1, "number"))

    def test_export_and_import(self):
        self.checker.register_type("positive", positive)
        exported = self.checker.export_types()
        self.assertIn("positive", json.loads(exported))

        other = TypeChecker()
        with self.assertLogs("type_schema.registry", level="WARNING") as cm:
            other.import_types(exported)
        self.assertEqual(cm.output, ["WARNING:type_schema.registry:Unknown type in import: positive"])

    def test_checkers_do_not_share_registrations(self):
        first, second = TypeChecker(), TypeChecker()
        first.register_type("positive", positive)
        self.assertTrue(first.is_(1, "positive"))
        with self.assertRaises(UnknownTypeError):
            second.is_(1, "positive")

    def test_explicitly_shared_registry(self):
        registry = TypeRegistry()
        first, second = TypeChecker(registry), TypeChecker(registry)
        first.register_type("positive", positive)
        self.assertTrue(second.is_(1, "positive"))


class CheckerSingleValueTests(unittest.TestCase):
    def setUp(self):
        self.checker = TypeChecker()

    def test_is(self):
        self.assertTrue(self.checker.is_(42, "number"))
        self.assertTrue(self.checker.is_("hello", ["string", "number"]))
        self.assertFalse(self.checker.is_([], "string"))

    def test_short_aliases(self):
        self.assertTrue(self.checker.is_("x", "s"))
        self.assertTrue(self.checker.is_(1, "n"))
        self.assertTrue(self.checker.is_([], "a"))
        self.assertTrue(self.checker.is_({}, "o"))

    def test_is_type(self):
        self.assertEqual(self.checker.is_type("Hello", "string"), "Hello")
        with self.assertRaises(TypeMismatchError):
            self.checker.is_type("text", ["number", "boolean"])

    def test_assert_type_passes_quietly(self):
        with self.assertNoLogs("type_schema.checker", level="WARNING"):
            self.assertTrue(self.checker.assert_type(42, "number"))

    def test_assert_type_logs_a_warning(self):
        with self.assertLogs("type_schema.checker", level="WARNING") as cm:
            self.assertFalse(self.checker.assert_type("hello", ["number", "boolean"]))
        self.assertEqual(
            cm.output,
            ["WARNING:type_schema.checker:Assertion failed: expected number | boolean, got string"],
        )
