from unittest import TestCase

from json_schema_to_ts.schema_kinds import CLASSIFICATION_RULES, SchemaKind, classify, is_primitive_union


class TestClassify(TestCase):
    def test_rule_order(self):
        self.assertEqual(
            [kind for kind, _ in CLASSIFICATION_RULES],
            [
                SchemaKind.REF,
                SchemaKind.UNION,
                SchemaKind.DATE,
                SchemaKind.BOOLEAN,
                SchemaKind.ARRAY,
                SchemaKind.ANY,
                SchemaKind.NUMERIC,
                SchemaKind.ENUM_STRING,
                SchemaKind.PLAIN_STRING,
                SchemaKind.MAP,
                SchemaKind.STRUCT,
            ],
        )

    def test_ref_wins(self):
        self.assertEqual(classify({"$ref": "#/definitions/A", "type": "string"}), SchemaKind.REF)

    def test_primitive_union_wins_over_type(self):
        schema = {"oneOf": [{"type": "string"}, {"type": "integer"}], "type": "array"}
        self.assertEqual(classify(schema), SchemaKind.UNION)

    def test_non_primitive_union_falls_through(self):
        schema = {"anyOf": [{"type": "string"}, {"type": "object"}], "properties": {"a": {}}}
        self.assertEqual(classify(schema), SchemaKind.STRUCT)
        self.assertEqual(classify({"oneOf": [{"$ref": "#/definitions/A"}]}), SchemaKind.FALLBACK)

    def test_date_before_enum(self):
        self.assertEqual(classify({"type": "string", "format": "date-time", "enum": ["x"]}), SchemaKind.DATE)

    def test_scalars(self):
        self.assertEqual(classify({"type": "boolean"}), SchemaKind.BOOLEAN)
        self.assertEqual(classify({"type": "array"}), SchemaKind.ARRAY)
        self.assertEqual(classify({"type": "null"}), SchemaKind.ANY)
        self.assertEqual(classify({"type": "any"}), SchemaKind.ANY)
        self.assertEqual(classify({"type": "integer"}), SchemaKind.NUMERIC)
        self.assertEqual(classify({"type": "number"}), SchemaKind.NUMERIC)

    def test_strings(self):
        self.assertEqual(classify({"type": "string", "enum": ["a", "b"]}), SchemaKind.ENUM_STRING)
        self.assertEqual(classify({"type": "string", "enum": ["a", 1]}), SchemaKind.PLAIN_STRING)
        self.assertEqual(classify({"type": "string", "enum": []}), SchemaKind.PLAIN_STRING)
        self.assertEqual(classify({"type": "string"}), SchemaKind.PLAIN_STRING)

    def test_map_and_struct(self):
        self.assertEqual(classify({"additionalProperties": {"type": "string"}}), SchemaKind.MAP)
        self.assertEqual(classify({"type": "object", "additionalProperties": {}}), SchemaKind.MAP)
        self.assertEqual(
            classify({"properties": {}, "additionalProperties": {"type": "string"}}),
            SchemaKind.STRUCT,
        )
        self.assertEqual(classify({"type": "object", "properties": {"a": {}}}), SchemaKind.STRUCT)

    def test_fallback(self):
        self.assertEqual(classify({}), SchemaKind.FALLBACK)
        self.assertEqual(classify({"type": "object"}), SchemaKind.FALLBACK)
        self.assertEqual(classify({"additionalProperties": True}), SchemaKind.FALLBACK)
        self.assertEqual(classify(True), SchemaKind.FALLBACK)


class TestPrimitiveUnion(TestCase):
    def test_one_of_takes_precedence_over_any_of(self):
        schema = {"oneOf": [{"type": "string"}], "anyOf": [{"type": "object"}]}
        self.assertTrue(is_primitive_union(schema))

    def test_empty_union(self):
        self.assertFalse(is_primitive_union({"oneOf": []}))

    def test_type_lists_are_not_supported(self):
        self.assertFalse(is_primitive_union({"oneOf": [{"type": ["string", "null"]}]}))
