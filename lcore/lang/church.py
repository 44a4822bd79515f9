"""Church encodings of booleans, natural numbers, pairs and sums as built-in LambdaTerms. Every combinator is written in
plain lambda calculus syntax and parsed, thus keeping everything pure as possible: no operation here is evaluated in
Python except the conversions to and from Church numerals/booleans.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from lcore.lang.error import GenericException
from lcore.pure.lexical import parse
from lcore.pure.term import Abstraction, Application, Variable


TRUE = parse("λx.λy.x")
FALSE = parse("λx.λy.y")
AND = parse("λp.λq.p q p")
OR = parse("λp.λq.p p q")
NOT = parse("λp.λa.λb.p b a")
IF = parse("λp.λa.λb.p a b")

# arguments of stuck applications are never reduced, so the successor applies n last to keep its work in head position
SUCC = parse("λn.λf.λx.n f (f x)")
PLUS = parse("λm.λn.m (λn.λf.λx.n f (f x)) n")
MULT = parse("λm.λn.m ((λm.λn.m (λn.λf.λx.n f (f x)) n) n) λf.λx.x")
ISZERO = parse("λn.n (λz.λx.λy.y) λx.λy.x")

PAIR = parse("λa.λb.λs.s a b")
FST = parse("λp.p λa.λb.a")
SND = parse("λp.p λa.λb.b")

LEFT = parse("λv.λl.λr.l v")
RIGHT = parse("λv.λl.λr.r v")
CASE = parse("λs.λl.λr.s l r")

BUILTINS = {
    "TRUE": TRUE,
    "FALSE": FALSE,
    "AND": AND,
    "OR": OR,
    "NOT": NOT,
    "IF": IF,
    "SUCC": SUCC,
    "PLUS": PLUS,
    "MULT": MULT,
    "ISZERO": ISZERO,
    "PAIR": PAIR,
    "FST": FST,
    "SND": SND,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
    "CASE": CASE,
}


def apply(function, *arguments):
    """Left-associated application of function to arguments: apply(f, a, b) == (f a) b."""
    for argument in arguments:
        function = Application(function, argument)
    return function


def cnumber(num):
    """Returns Church numeral λf.λx.f (f (... x)) of natural number num (cnum = Church numeral)."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise GenericException("expected natural number, got '{}'", repr(num), internal=True)

    body = Variable("x")
    for _ in range(num):
        body = Application(Variable("f"), body)
    return Abstraction("f", Abstraction("x", body))


def number(cnum):
    """Returns natural number given LambdaTerm cnum, matched up to renaming of f and x. If cnum isn't a Church numeral,
    returns None.
    """
    if not isinstance(cnum, Abstraction) or not isinstance(cnum.body, Abstraction):
        return None

    f, x = cnum.name, cnum.body.name
    if f == x:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        if nth_body.function != Variable(f):
            return None
        nth_body = nth_body.argument
        num += 1

    return num if nth_body == Variable(x) else None


def boolean(term):
    """Returns True/False if term is alpha-equivalent to TRUE/FALSE, otherwise None."""
    if term.alpha_equals(TRUE):
        return True
    elif term.alpha_equals(FALSE):
        return False
    return None
