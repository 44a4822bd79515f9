import dataclasses
import unittest

from lcore.pure.lexical import parse
from lcore.pure.term import Abstraction, Application, Variable, free_variables, fresh_name, split, subscript


class TermTestCase(unittest.TestCase):

    def test_immutable(self):
        should_raise = [(Variable("x"), "name"), (parse("λx.x"), "body"), (parse("x y"), "argument")]
        for term, field in should_raise:
            with self.assertRaises(dataclasses.FrozenInstanceError):
                setattr(term, field, Variable("z"))

    def test_nodes(self):
        cases = {
            "x": (),
            "λx.y": (Variable("x"), Variable("y")),
            "x y": (Variable("x"), Variable("y")),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case).nodes, case)

    def test_display(self):
        self.assertEqual("Variable('x')", parse("x").display())
        self.assertEqual(
            "Abstraction(nodes=[\n"
            "    Variable('x'),\n"
            "    Application(nodes=[\n"
            "        Variable('x'),\n"
            "        Variable('y')\n"
            "    ])\n"
            "])",
            str(parse("λx.x y"))
        )

    def test_free_variables(self):
        cases = {
            "x": {"x"},
            "x y": {"x", "y"},
            "λx.x": set(),
            "λx.x y": {"y"},
            "(λx.x) x": {"x"},
            "λx.λy.z (x y)": {"z"},
            "λp.λq.p q p": set(),
            "λx.(λx.x) x y": {"y"},
        }
        for case, expected in cases.items():
            self.assertEqual(expected, free_variables(parse(case)), case)

    def test_alpha_equals(self):
        should_fail = [
            ("x", "y"),
            ("λx.x", "λx.y"),
            ("λx.y", "λy.y"),
            ("λx.λy.x", "λx.λy.y"),
            ("λx.λx.x", "λx.λy.x"),
            ("x y", "y x"),
            ("λx.x", "x"),
        ]
        for case, other in should_fail:
            self.assertFalse(parse(case).alpha_equals(parse(other)), (case, other))

        should_pass = [
            ("x", "x"),
            ("λx.x", "λy.y"),
            ("λx.λy.x", "λy.λx.y"),
            ("λx.λx.x", "λy.λx.x"),
            ("λx.x z", "λy.y z"),
            ("(λx.x) (λy.y)", "(λa.a) (λb.b)"),
        ]
        for case, other in should_pass:
            self.assertTrue(parse(case).alpha_equals(parse(other)), (case, other))

    def test_equality(self):
        self.assertEqual(Abstraction("x", Variable("x")), parse("λx.x"))
        self.assertEqual(hash(Application(Variable("x"), Variable("y"))), hash(parse("x y")))
        self.assertNotEqual(parse("λx.x"), parse("λy.y"))


class FreshNameTestCase(unittest.TestCase):

    def test_subscript(self):
        self.assertEqual("x₀", subscript("x", 0))
        self.assertEqual("x₁₂", subscript("x", 12))
        self.assertEqual(("x", 12), split("x₁₂"))
        self.assertEqual(("x", -1), split("x"))

    def test_fresh_name(self):
        cases = [
            (("x", parse("y")), "x"),
            (("x", parse("λx.x")), "x"),
            (("x", parse("x")), "x₀"),
            (("x", parse("x x₀")), "x₁"),
            (("x₀", parse("x₀")), "x₁"),
            (("y", parse("y"), parse("y₀ z")), "y₁"),
        ]
        for args, expected in cases:
            self.assertEqual(expected, fresh_name(*args), args)

    def test_fresh_name_is_fresh(self):
        terms = [parse("x"), parse("x x₀ x₁ x₃"), parse("λy.x₀ y x"), parse("a (b c)")]
        for term in terms:
            name = fresh_name("x", term)
            self.assertNotIn(name, free_variables(term), term)
            self.assertEqual(name, fresh_name("x", term), term)


if __name__ == '__main__':
    unittest.main()
