"""Pure lambda calculus parser: converts a source string into a LambdaTerm tree.

Formally, the accepted concrete syntax is

```
<term>        ::= <atom> (" " <atom>)*        ; "application"
                                             ; - associating by left: a b c d = (((a b) c) d)
<atom>        ::= "(" <term> ")"
                | <abstraction>
                | <variable>
<abstraction> ::= "λ" <variable> "." <term>   ; - abstraction bodies are greedy: λx.x y = λx.(x y) != (λx.x) y
<variable>    ::= <char>+                     ; - any characters but the builtins "λ", ".", "(", ")" and " "
```

Applications must be separated by exactly one space: there is no other whitespace handling, no comments and no
numeric literals. Parsing is all-or-nothing: any deviation from the grammar, including trailing input after a
complete term, raises a LambdaSyntaxError pointing at the offending position.
"""

from lcore.lang.error import LambdaSyntaxError
from lcore.pure.term import Abstraction, Application, Variable


class Parser:
    """Recursive descent parser over a single source string. Each production consumes input starting at self.pos."""
    TOKENS = ["λ", ".", "(", ")"]
    SEPARATOR = " "

    def __init__(self, expr):
        self.expr = expr
        self.pos = 0

    def parse(self):
        """Parses the whole of self.expr into a LambdaTerm."""
        if not self.expr:
            raise LambdaSyntaxError("λ-term cannot be empty")

        term = self.term()
        if self.pos != len(self.expr):
            self.error("'{}' has trailing input after a complete λ-term", end=len(self.expr))
        return term

    def peek(self):
        """Returns the next character, or None at end of input."""
        return self.expr[self.pos] if self.pos < len(self.expr) else None

    def error(self, msg, start=None, end=None):
        """Raises a LambdaSyntaxError highlighting [start, end) (defaults to the current character)."""
        start = self.pos if start is None else start
        raise LambdaSyntaxError(msg, self.expr, start=start, end=start + 1 if end is None else end)

    def term(self):
        term = self.atom()
        while self.peek() == Parser.SEPARATOR:
            self.pos += 1
            term = Application(term, self.atom())
        return term

    def atom(self):
        char = self.peek()

        if char is None:
            self.error("'{}' ended where a λ-term was expected")
        elif char == "(":
            start = self.pos
            self.pos += 1
            term = self.term()
            if self.peek() != ")":
                self.error("'{}' has mismatched parentheses", start=start)
            self.pos += 1
            return term
        elif char == "λ":
            return self.abstraction()
        elif char in Parser.TOKENS or char == Parser.SEPARATOR:
            self.error("'{}' has stray '" + char + "' where a λ-term was expected")

        return self.variable()

    def abstraction(self):
        start = self.pos
        self.pos += 1  # λ

        if self.peek() is None or self.peek() in Parser.TOKENS + [Parser.SEPARATOR]:
            self.error("'{}' has an abstraction without a bound variable", start=start)
        name = self.variable().name

        if self.peek() != ".":
            self.error("'{}' has an abstraction without a declarator '.'")
        self.pos += 1

        return Abstraction(name, self.term())

    def variable(self):
        start = self.pos
        while self.peek() is not None and self.peek() not in Parser.TOKENS + [Parser.SEPARATOR]:
            self.pos += 1
        return Variable(self.expr[start:self.pos])


def parse(source):
    """Converts source to a LambdaTerm, raises LambdaSyntaxError (a SyntaxError) if source is not a valid λ-term."""
    return Parser(source).parse()
