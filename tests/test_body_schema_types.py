"""Unit tests for runtime type tags and union matching."""

from __future__ import annotations

import copy
import pickle
import unittest
from decimal import Decimal

from schema_checker.body_schema.types import MISSING, TypeTag, matches_type, runtime_type_tag


class RuntimeTypeTagTests(unittest.TestCase):
    def test_json_values_map_to_tags(self) -> None:
        self.assertEqual(runtime_type_tag("hello"), TypeTag.STRING)
        self.assertEqual(runtime_type_tag(3), TypeTag.NUMBER)
        self.assertEqual(runtime_type_tag(3.5), TypeTag.NUMBER)
        self.assertEqual(runtime_type_tag(Decimal("1.25")), TypeTag.NUMBER)
        self.assertEqual(runtime_type_tag({"a": 1}), TypeTag.OBJECT)
        self.assertEqual(runtime_type_tag([1, 2]), TypeTag.ARRAY)
        self.assertEqual(runtime_type_tag(None), TypeTag.NULL)

    def test_booleans_are_not_numbers(self) -> None:
        self.assertEqual(runtime_type_tag(True), TypeTag.BOOLEAN)
        self.assertEqual(runtime_type_tag(False), TypeTag.BOOLEAN)

    def test_missing_sentinel_is_undefined(self) -> None:
        self.assertEqual(runtime_type_tag(MISSING), TypeTag.UNDEFINED)
        self.assertFalse(MISSING)
        self.assertEqual(repr(MISSING), "MISSING")

    def test_missing_sentinel_keeps_identity_when_copied(self) -> None:
        self.assertIs(pickle.loads(pickle.dumps(MISSING)), MISSING)
        self.assertIs(copy.deepcopy(MISSING), MISSING)
        self.assertIs(copy.copy(MISSING), MISSING)

    def test_callables_are_functions(self) -> None:
        self.assertEqual(runtime_type_tag(len), TypeTag.FUNCTION)
        self.assertEqual(runtime_type_tag(lambda: None), TypeTag.FUNCTION)

    def test_unclassified_values_have_no_tag(self) -> None:
        self.assertIsNone(runtime_type_tag(b"raw"))
        self.assertIsNone(runtime_type_tag({1, 2}))


class MatchesTypeTests(unittest.TestCase):
    def test_single_tag_must_equal_runtime_tag(self) -> None:
        self.assertTrue(matches_type("hello", "string"))
        self.assertFalse(matches_type("33", "number"))
        self.assertTrue(matches_type(33, "number"))

    def test_union_accepts_any_member(self) -> None:
        self.assertTrue(matches_type("hello", ["string", "number"]))
        self.assertTrue(matches_type(3, ("string", "number")))
        self.assertFalse(matches_type({"value": "x"}, ["string", "number"]))

    def test_union_ignores_order_and_duplicates(self) -> None:
        self.assertTrue(matches_type(3, ["number", "string", "number"]))
        self.assertTrue(matches_type(3, frozenset({"string", "number"})))

    def test_empty_union_never_matches(self) -> None:
        self.assertFalse(matches_type("hello", []))

    def test_unknown_tag_never_matches(self) -> None:
        self.assertFalse(matches_type("hello", "text"))
        self.assertFalse(matches_type(1, "integer"))

    def test_non_string_descriptor_never_matches(self) -> None:
        self.assertFalse(matches_type("hello", None))
        self.assertFalse(matches_type(1, 1))
        self.assertFalse(matches_type("hello", {"type": "string"}))

    def test_enum_members_work_as_descriptors(self) -> None:
        self.assertTrue(matches_type(True, TypeTag.BOOLEAN))
        self.assertTrue(matches_type(None, [TypeTag.NULL, TypeTag.STRING]))

    def test_unclassified_value_never_matches(self) -> None:
        self.assertFalse(matches_type(b"raw", ["string", "object", "array"]))


if __name__ == "__main__":
    unittest.main()
