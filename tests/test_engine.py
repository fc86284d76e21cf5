import unittest

from pda_player.config import EPSILON, REJECT_SINK, STACK_BOTTOM
from pda_player.definition import Instruction, PDADefinition, TransitionKey
from pda_player.engine import Configuration, RejectReason, Verdict, run, step, tokenize


def parentheses_pda():
    pda = PDADefinition(alphabet=["(", ")"], states=2, accepted_states={0})
    pda.generate_instruction_slots()
    pda.set_instruction((0, "("), "target", "q0")
    pda.set_instruction((0, "("), "push", "(")
    pda.set_instruction((0, ")"), "target", "q0")
    pda.set_instruction((0, ")"), "pop", "(")
    return pda


def stacks(trace):
    return [cfg.stack for cfg in trace]


class TestRun(unittest.TestCase):
    def test_single_move_accepted(self):
        pda = PDADefinition(alphabet=["a", "b"], states=2, accepted_states={1})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "a"), "target", "q1")

        trace, verdict = run(pda, "a")

        self.assertEqual(verdict, Verdict.accept())
        self.assertTrue(verdict.accepted)
        self.assertEqual(list(trace), [
            Configuration(0, ("a",), ("$",)),
            Configuration(1, (), ("$",)),
        ])

    def test_balanced_parentheses(self):
        trace, verdict = run(parentheses_pda(), "(())")
        self.assertTrue(verdict.accepted)
        self.assertEqual(len(trace), 5)
        self.assertEqual(stacks(trace), [
            ("$",), ("$", "("), ("$", "(", "("), ("$", "("), ("$",),
        ])
        self.assertEqual(trace[-1].remaining, ())

    def test_unbalanced_leaves_stack(self):
        trace, verdict = run(parentheses_pda(), "(()")
        self.assertFalse(verdict.accepted)
        self.assertIs(verdict.reason, RejectReason.STACK_NOT_EMPTY_AT_END)
        self.assertEqual(trace[-1].stack, ("$", "("))
        self.assertEqual(len(trace), 4)

    def test_pop_on_empty_stack(self):
        trace, verdict = run(parentheses_pda(), ")(")
        self.assertIs(verdict.reason, RejectReason.EMPTY_STACK_POP)
        self.assertEqual(list(trace), [Configuration(0, (")", "("), ("$",))])

    def test_pop_mismatch(self):
        pda = PDADefinition(alphabet=["a", "b"], states=1, accepted_states={0})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "a"), "target", "q0")
        pda.set_instruction((0, "a"), "push", "a")
        pda.set_instruction((0, "b"), "target", "q0")
        pda.set_instruction((0, "b"), "pop", "b")

        trace, verdict = run(pda, "abb")
        self.assertIs(verdict.reason, RejectReason.STACK_MISMATCH_POP)
        self.assertEqual(len(trace), 2)
        self.assertEqual(trace[-1].stack, ("$", "a"))

    def test_undefined_instruction(self):
        pda = parentheses_pda()
        trace, verdict = run(pda, "((x")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)
        self.assertEqual(len(trace), 3)
        self.assertIn("undefined", verdict.detail)

    def test_unset_target_counts_as_undefined(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        pda.generate_instruction_slots()
        trace, verdict = run(pda, "a")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)
        self.assertEqual(len(trace), 1)

    def test_missing_slot_counts_as_undefined(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        trace, verdict = run(pda, "a")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)

    def test_bottom_marker_never_pushed(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        pda.instructions[TransitionKey(0, "a")] = Instruction(0, EPSILON, STACK_BOTTOM)
        trace, verdict = run(pda, "a")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)
        self.assertEqual(stacks(trace), [("$",)])

    def test_reject_sink_dead_ends(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "a"), "target", "qk")

        trace, verdict = run(pda, "a")
        self.assertEqual(trace[-1].state, REJECT_SINK)
        self.assertIs(verdict.reason, RejectReason.NOT_ACCEPTING_AT_END)

        trace, verdict = run(pda, "aaa")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)
        self.assertEqual(len(trace), 2)

    def test_reject_sink_is_never_a_source(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "a"), "target", "qk")
        pda.instructions[TransitionKey(REJECT_SINK, "a")] = Instruction(0, EPSILON, EPSILON)

        trace, verdict = run(pda, "aa")
        self.assertIs(verdict.reason, RejectReason.UNDEFINED_INSTRUCTION)
        self.assertEqual([cfg.state for cfg in trace], [0, REJECT_SINK])

    def test_out_of_range_state_has_no_moves(self):
        pda = PDADefinition(alphabet=["a"], states=1, accepted_states={0})
        pda.instructions[TransitionKey(3, "a")] = Instruction(0, EPSILON, EPSILON)
        res = step(pda, Configuration(3, ("a",), ("$",)))
        self.assertEqual(res, Verdict.reject(RejectReason.UNDEFINED_INSTRUCTION))

    def test_empty_input(self):
        pda = PDADefinition(alphabet=["a"], states=2, accepted_states={0})
        trace, verdict = run(pda, "")
        self.assertTrue(verdict.accepted)
        self.assertEqual(list(trace), [Configuration(0, (), ("$",))])

        pda.toggle_accepting(0)
        trace, verdict = run(pda, "")
        self.assertIs(verdict.reason, RejectReason.NOT_ACCEPTING_AT_END)

    def test_not_accepting_reported_before_stack(self):
        pda = parentheses_pda()
        pda.toggle_accepting(0)
        _, verdict = run(pda, "(")
        self.assertIs(verdict.reason, RejectReason.NOT_ACCEPTING_AT_END)

    def test_pure_state_move_and_pop_only(self):
        pda = PDADefinition(alphabet=["a", "b"], states=2, accepted_states={1})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "a"), "target", "q0")
        pda.set_instruction((0, "a"), "push", "b")
        pda.set_instruction((0, "b"), "target", "q1")
        pda.set_instruction((0, "b"), "pop", "b")
        pda.set_instruction((1, "a"), "target", "q1")

        trace, verdict = run(pda, "aba")
        self.assertTrue(verdict.accepted)
        self.assertEqual([cfg.state for cfg in trace], [0, 0, 1, 1])

    def test_deterministic(self):
        pda = parentheses_pda()
        for word in ("(())", "(()", ")(", "()()x"):
            self.assertEqual(run(pda, word), run(pda, word))

    def test_trace_length(self):
        pda = parentheses_pda()
        for word, k in (("()()", None), ("(((", None), ("())(", 2), ("x", 0)):
            trace, verdict = run(pda, word)
            if k is None:
                self.assertEqual(len(trace), len(word) + 1)
            else:
                self.assertEqual(len(trace), k + 1)

    def test_stack_floor(self):
        pda = parentheses_pda()
        for word in ("(())", "(()", ")(", "((()))())", ""):
            trace, _ = run(pda, word)
            for cfg in trace:
                self.assertEqual(cfg.stack[0], STACK_BOTTOM)
                self.assertEqual(cfg.stack.count(STACK_BOTTOM), 1)

    def test_definition_untouched(self):
        pda = parentheses_pda()
        before = dict((k, Instruction(v.target, v.pop, v.push)) for k, v in pda.instructions.items())
        run(pda, "(()))")
        self.assertEqual(pda.instructions, before)
        self.assertEqual(pda.accepted_states, {0})

    def test_symbol_sequence_input(self):
        pda = PDADefinition(alphabet=["ab", "c"], states=1, accepted_states={0})
        pda.generate_instruction_slots()
        pda.set_instruction((0, "ab"), "target", "q0")
        pda.set_instruction((0, "ab"), "push", "ab")
        pda.set_instruction((0, "c"), "target", "q0")
        pda.set_instruction((0, "c"), "pop", "ab")

        trace, verdict = run(pda, tokenize(pda.alphabet, "abc"))
        self.assertTrue(verdict.accepted)
        self.assertEqual(trace[0].remaining, ("ab", "c"))
        self.assertEqual(trace[1].stack, ("$", "ab"))


class TestStep(unittest.TestCase):
    def test_note_describes_move(self):
        pda = parentheses_pda()
        nxt = step(pda, Configuration(0, ("(",), ("$",)))
        self.assertIsInstance(nxt, Configuration)
        self.assertEqual(nxt.note, "δ(q0, () → (q0, pop ε, push ()")

    def test_rejection_is_verdict(self):
        pda = parentheses_pda()
        res = step(pda, Configuration(1, ("(",), ("$",)))
        self.assertEqual(res, Verdict.reject(RejectReason.UNDEFINED_INSTRUCTION))


class TestVerdict(unittest.TestCase):
    def test_messages(self):
        self.assertEqual(Verdict.accept().message, "String accepted")
        msg = Verdict.reject(RejectReason.EMPTY_STACK_POP).message
        self.assertEqual(msg, "String rejected - pop on empty stack")


class TestTokenize(unittest.TestCase):
    def test_longest_match(self):
        self.assertEqual(tokenize(["a", "ab", "b"], "abab"), ["ab", "ab"])
        self.assertEqual(tokenize(["a", "b"], "ab"), ["a", "b"])

    def test_unknown_chars_kept(self):
        self.assertEqual(tokenize(["a", "b"], "aXb"), ["a", "X", "b"])
        self.assertEqual(tokenize([], ""), [])


if __name__ == "__main__":
    unittest.main()
