from unittest import TestCase

from json_schema_to_ts.errors import InvalidReferenceFormat, UnresolvedReference
from json_schema_to_ts.registry import DefinitionRegistry


class TestDefinitionRegistry(TestCase):
    def test_define_and_overwrite(self):
        registry = DefinitionRegistry({"A": {"type": "string"}})
        self.assertEqual(registry.get("A"), {"type": "string"})

        registry.define("A", {"type": "number"})
        self.assertEqual(registry.get("A"), {"type": "number"})
        self.assertEqual(len(registry), 1)

    def test_alias(self):
        registry = DefinitionRegistry({"New": {"type": "string"}})
        registry.alias("Old", "New")
        self.assertEqual(registry.get("Old"), {"$ref": "#/definitions/New"})
        self.assertEqual(registry.resolve_ref(registry.get("Old")["$ref"]), {"type": "string"})

    def test_iteration_order(self):
        registry = DefinitionRegistry({"B": {}, "A": {}})
        registry.define("C", {})
        self.assertEqual(list(registry), ["B", "A", "C"])
        self.assertIn("C", registry)
        self.assertNotIn("D", registry)

    def test_resolve_dotted_ref(self):
        registry = DefinitionRegistry({"io.k8s.api.core.v1.Pod": {"properties": {}}})
        self.assertEqual(registry.resolve_ref("#/definitions/io.k8s.api.core.v1.Pod"), {"properties": {}})

    def test_unresolved(self):
        with self.assertRaises(UnresolvedReference) as ctx:
            DefinitionRegistry().resolve_ref("#/definitions/Nope")
        self.assertEqual(ctx.exception.ref, "#/definitions/Nope")

    def test_invalid_format(self):
        registry = DefinitionRegistry({"A": {}})
        for ref in ["A", "#/$defs/A", "http://example.com/schema.json#/definitions/A", 42]:
            with self.subTest(ref=ref):
                with self.assertRaises(InvalidReferenceFormat):
                    registry.resolve_ref(ref)
