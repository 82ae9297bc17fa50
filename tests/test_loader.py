import unittest

from type_schema import TypeChecker, loader
from type_schema.schema import ObjectNode
from tests._util import tmp_json, tmp_text


class LoaderTests(unittest.TestCase):
    def test_load_schema_from_file(self):
        data = {"name": "string", "tags": ["string"], "address": {"city": "string?"}}
        path = tmp_json(data)
        try:
            self.assertEqual(loader.load_schema(path), data)
        finally:
            path.unlink(missing_ok=True)

    def test_checker_compiles_loaded_schema(self):
        path = tmp_json({"name": "string", "age": "number?"})
        try:
            node = TypeChecker().load_schema(path)
            self.assertIsInstance(node, ObjectNode)
            result = TypeChecker().check_structure(node, {"age": "x"})
            self.assertEqual(
                result.errors,
                ['Missing required key "name"', 'Expected "age" to be number, got string'],
            )
        finally:
            path.unlink(missing_ok=True)

    def test_load_schema_not_found(self):
        with self.assertRaises(FileNotFoundError):
            loader.load_schema("does_not_exist.json")

    def test_invalid_json_raises_value_error(self):
        path = tmp_text("{not json")
        try:
            with self.assertRaises(ValueError):
                loader.load_schema(path)
        finally:
            path.unlink(missing_ok=True)

    def test_empty_file_raises_value_error(self):
        path = tmp_text("")
        try:
            with self.assertRaises(ValueError):
                loader.load_schema(path)
        finally:
            path.unlink(missing_ok=True)

    def test_top_level_must_be_an_object(self):
        path = tmp_json(["string"])
        try:
            with self.assertRaisesRegex(ValueError, "must be a JSON object"):
                loader.load_schema(path)
        finally:
            path.unlink(missing_ok=True)


class TypeListLoaderTests(unittest.TestCase):
    def test_exported_list_round_trips_through_a_file(self):
        checker = TypeChecker()
        path = tmp_text(checker.export_types())
        try:
            payload = loader.load_type_list(path)
            with self.assertNoLogs("type_schema.registry", level="WARNING"):
                checker.import_types(payload)
        finally:
            path.unlink(missing_ok=True)

    def test_broken_type_list_file(self):
        path = tmp_text("[not json")
        try:
            with self.assertRaises(ValueError):
                loader.load_type_list(path)
        finally:
            path.unlink(missing_ok=True)
