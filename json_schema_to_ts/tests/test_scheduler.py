from unittest import TestCase

from json_schema_to_ts.code_buffer import CodeBuffer
from json_schema_to_ts.declarations import CustomDeclaration, StructDeclaration
from json_schema_to_ts.scheduler import EmissionScheduler


def custom(name, text):
    return CustomDeclaration(name=name, emitter=lambda code: code.line(text))


class TestEmissionScheduler(TestCase):
    def test_register_if_absent(self):
        scheduler = EmissionScheduler()
        self.assertTrue(scheduler.register(custom("A", "first")))
        self.assertFalse(scheduler.register(custom("A", "second")))

        code = CodeBuffer()
        scheduler.drain(code)
        self.assertEqual(code.render(), "first\n\n")

    def test_replace_queued(self):
        scheduler = EmissionScheduler()
        scheduler.register(custom("A", "first"))
        self.assertTrue(scheduler.register(custom("A", "second"), replace=True))

        code = CodeBuffer()
        scheduler.drain(code)
        self.assertEqual(code.render(), "second\n\n")

    def test_finalized_is_immutable(self):
        scheduler = EmissionScheduler()
        scheduler.register(custom("A", "first"))
        scheduler.drain(CodeBuffer())

        self.assertTrue(scheduler.is_finalized("A"))
        self.assertFalse(scheduler.register(custom("A", "again"), replace=True))
        self.assertFalse(scheduler.is_queued("A"))

        code = CodeBuffer()
        scheduler.drain(code)
        self.assertEqual(code.render(), "")

    def test_states_are_disjoint(self):
        scheduler = EmissionScheduler()
        self.assertFalse(scheduler.is_known("A"))
        scheduler.register(StructDeclaration(name="A"))
        self.assertTrue(scheduler.is_queued("A"))
        self.assertFalse(scheduler.is_finalized("A"))

        scheduler.drain(CodeBuffer())
        self.assertFalse(scheduler.is_queued("A"))
        self.assertTrue(scheduler.is_finalized("A"))
        self.assertTrue(scheduler.is_known("A"))

    def test_drain_in_queued_order(self):
        scheduler = EmissionScheduler()
        for name in ["C", "A", "B"]:
            scheduler.register(custom(name, name))
        self.assertEqual([d.name for d in scheduler.queued()], ["C", "A", "B"])

        code = CodeBuffer()
        scheduler.drain(code)
        self.assertEqual(code.render(), "C\n\nA\n\nB\n\n")

    def test_declarations_queued_while_draining_are_rendered(self):
        scheduler = EmissionScheduler()

        def emit_a(code):
            code.line("A")
            scheduler.register(custom("B", "B"))

        scheduler.register(CustomDeclaration(name="A", emitter=emit_a))
        code = CodeBuffer()
        scheduler.drain(code)
        self.assertEqual(code.render(), "A\n\nB\n\n")

    def test_rollback(self):
        scheduler = EmissionScheduler()
        scheduler.register(custom("A", "A"))
        checkpoint = scheduler.checkpoint()
        scheduler.register(custom("B", "B"))
        scheduler.register(custom("C", "C"))

        self.assertEqual(scheduler.rollback(checkpoint), ["B", "C"])
        self.assertTrue(scheduler.is_queued("A"))
        self.assertFalse(scheduler.is_known("B"))
        self.assertFalse(scheduler.is_known("C"))
        self.assertEqual(scheduler.rollback(scheduler.checkpoint()), [])
