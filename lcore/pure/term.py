"""Pure lambda calculus terms: the abstract syntax tree produced by the parser and consumed by the reducer.

```
<λ-term> ::= <variable>                 ; "variable"    -> Variable(name)
           | "λ" <variable> "." <λ-term> ; "abstraction" -> Abstraction(name, body)
           | <λ-term> <λ-term>           ; "application" -> Application(function, argument)
```

Terms are immutable: nothing in lcore mutates a term after it is constructed, so subterms can be shared between trees
and every transformation (substitution, reduction) builds new terms.
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass


SUBS = ["₀", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₉"]


class LambdaTerm(ABC):
    """Represents a valid λ-term: variable, abstraction, or application."""

    @property
    @abstractmethod
    def nodes(self):
        """Direct children of this term, leftmost first. An Abstraction's bound variable is its first node."""

    @abstractmethod
    def free_variables(self):
        """This method should return a frozenset of the names that occur free in this term."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None, other_mapping=None):
        """Whether or not two LambdaTerms are alpha-equivalent. mapping maps each bound name of self to the name bound
        at the same position in other (innermost binder wins); other_mapping is the same map from the perspective of
        other.
        """

    def display(self, indents=0):
        """Recursively displays LambdaTerm tree with readable format.

        Format:
        <LambdaTerm>(nodes=[
            <LambdaTerm>(nodes=[
                ...
                Variable('<name>')  # <-- leaves are always Variables
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(nodes=["
        for node in self.nodes:
            result += "\n" + node.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents}])"

    def __str__(self):
        return self.display()


@dataclass(frozen=True)
class Variable(LambdaTerm):
    """Variable in lambda calculus: a reference to a bound or free identifier."""
    name: str

    @property
    def nodes(self):
        return ()

    def free_variables(self):
        return frozenset([self.name])

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Variable):
            return False

        if self.name in mapping or other.name in other_mapping:
            return mapping.get(self.name) == other.name and other_mapping.get(other.name) == self.name
        return self.name == other.name  # both free

    def display(self, indents=0):
        return f"{'    ' * indents}Variable('{self.name}')"


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction: a single-parameter function binding name in body."""
    name: str
    body: LambdaTerm

    @property
    def nodes(self):
        return Variable(self.name), self.body

    def free_variables(self):
        return self.body.free_variables() - {self.name}

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if not isinstance(other, Abstraction):
            return False

        mapping = {**(mapping or {}), self.name: other.name}
        other_mapping = {**(other_mapping or {}), other.name: self.name}

        return self.body.alpha_equals(other.body, mapping, other_mapping)


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of one LambdaTerm to another."""
    function: LambdaTerm
    argument: LambdaTerm

    @property
    def nodes(self):
        return self.function, self.argument

    def free_variables(self):
        return self.function.free_variables() | self.argument.free_variables()

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if not isinstance(other, Application):
            return False

        return (self.function.alpha_equals(other.function, mapping, other_mapping)
                and self.argument.alpha_equals(other.argument, mapping, other_mapping))


def free_variables(term):
    """Names occurring in term outside of any abstraction binding them."""
    return term.free_variables()


def subscript(name, num):
    """Returns name with subscript of num."""
    return name + "".join(SUBS[int(digit)] for digit in str(num))


def split(name):
    """Splits name into its base and subscript (-1 if there is no subscript)."""
    digits = []
    while name and name[-1] in SUBS:
        digits.insert(0, SUBS.index(name[-1]))
        name = name[:-1]
    return name, int("".join(str(digit) for digit in digits)) if digits else -1


def fresh_name(seed, term, *others):
    """Returns a name that is not free in term (or in any of others). seed is returned as-is if it is already fresh,
    otherwise its base is subscripted with the lowest number above seed's own subscript that is not taken.
    Deterministic: the same seed and terms always give the same name.
    """
    used = set(free_variables(term))
    for other in others:
        used |= free_variables(other)

    if seed not in used:
        return seed

    base, num = split(seed)
    num += 1
    while subscript(base, num) in used:
        num += 1
    return subscript(base, num)
