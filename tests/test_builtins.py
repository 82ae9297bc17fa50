import array
import datetime as dt
import enum
import re
import types
import unittest
from xml.dom import minidom
from xml.etree import ElementTree

import numpy as np
import pandas as pd

from type_schema import MISSING, TypeChecker
from type_schema.builtins import BUILTIN_TYPES, t_json, t_null, t_string
from type_schema.errors import RejectedValueError


class Color(enum.Enum):
    RED = 1


# canonical name -> (accepted values, rejected values)
CASES = {
    "array":       ([[1], (1, 2), []], ["abc", {}, None]),
    "arraybuffer": ([b"x", bytearray(b"x")], ["x", [1]]),
    "typedarray":  ([array.array("i", [1]), np.arange(3)], [[1], b"x"]),
    "bigint":      ([10 ** 30, 0, np.int64(3)], [True, 1.5, "1"]),
    "boolean":     ([True, False, np.bool_(True)], [1, "true", None]),
    "date":        ([dt.date(2024, 1, 1), dt.datetime(2024, 1, 1), pd.Timestamp("2024-01-01")],
                    [pd.NaT, "2024-01-01", 0]),
    "dataview":    ([memoryview(b"x")], [b"x"]),
    "dom-element": ([ElementTree.Element("div"), minidom.parseString("<a/>").documentElement],
                    ["div", {}]),
    "function":    ([len, lambda v: v, Color], [1, "len"]),
    "json-string": (['{"a": 1}', "[]", '"x"', "3"], ["{bad", 1, None]),
    "map":         ([{}, types.MappingProxyType({"a": 1})], [[], {1, 2}]),
    "number":      ([1, 1.5, float("nan"), np.float64(2.0)], [True, "1", None]),
    "null":        ([None], [0, "", MISSING]),
    "object":      ([{}, object(), dt.date(2024, 1, 1), {1, 2}, b"x", bytearray(b"x")], [None, [], "s", 1, len, MISSING]),
    "regexp":      ([re.compile("a")], ["a"]),
    "set":         ([set(), frozenset({1})], [[], {}]),
    "string":      (["", "x"], [b"x", 1, None]),
    "symbol":      ([Color.RED], ["RED", 1]),
    "undefined":   ([MISSING], [None, 0]),
    "dataframe":   ([pd.DataFrame({"a": [1]})], [{"a": [1]}]),
    "series":      ([pd.Series([1, 2])], [[1, 2]]),
}


class BuiltinSeedTests(unittest.TestCase):
    def setUp(self):
        self.checker = TypeChecker()

    def test_minimum_seed_set_is_present(self):
        required = {
            "array", "arraybuffer", "typedarray", "bigint", "boolean", "date",
            "dataview", "dom-element", "function", "json-string", "map", "number",
            "null", "object", "regexp", "set", "string", "symbol", "undefined",
        }
        self.assertTrue(required <= set(self.checker.list_types()))

    def test_every_builtin_has_an_alias(self):
        for canonical, aliases, _ in BUILTIN_TYPES:
            self.assertTrue(aliases, canonical)

    def test_aliases_share_the_canonical_validator(self):
        registry = self.checker.registry
        for canonical, aliases, validator in BUILTIN_TYPES:
            self.assertIs(registry.resolve(canonical), validator)
            for alias in aliases:
                self.assertIs(registry.resolve(alias), validator, alias)

    def test_accept_and_reject_tables(self):
        self.assertEqual(set(CASES), {c for c, _, _ in BUILTIN_TYPES})
        for name, (good, bad) in CASES.items():
            for value in good:
                with self.subTest(type=name, value=value):
                    self.assertTrue(self.checker.is_(value, name))
            for value in bad:
                with self.subTest(type=name, value=value):
                    self.assertFalse(self.checker.is_(value, name))


class BuiltinMessageTests(unittest.TestCase):
    def test_string_rejection_names_the_kind(self):
        with self.assertRaisesRegex(RejectedValueError, r"^1 must be a string, is number$"):
            t_string(1)

    def test_null_rejection(self):
        with self.assertRaisesRegex(RejectedValueError, r"^0 must be null\.$"):
            t_null(0)

    def test_json_rejection(self):
        with self.assertRaisesRegex(RejectedValueError, r"must be a valid JSON string"):
            t_json("{bad")

    def test_json_requires_a_string_first(self):
        with self.assertRaisesRegex(RejectedValueError, r"must be a string, is number"):
            t_json(5)

    def test_validators_return_their_input(self):
        text = '{"a": 1}'
        self.assertIs(t_json(text), text)
        self.assertIsNone(t_null(None))

    def test_rejection_is_a_type_error(self):
        with self.assertRaises(TypeError):
            t_string(None)
