"""Capture-avoiding substitution and beta reduction of LambdaTerm trees.

The reduction strategy is fixed:

- application `M N`: reduce `M`; if it became an abstraction `λx.B`, reduce `B[x := N]` with `N` substituted as-is.
  Otherwise the result is the reduced `M` applied to the untouched `N`: arguments of stuck applications are never
  reduced.
- abstraction `λx.B`: reduce under the binder.
- variable: already in normal form.

This is neither call-by-value nor textbook leftmost-outermost normal order, so `y ((λx.x) z)` is its own normal form
here. Reduction of a term without a normal form (ex: `(λx.x x) (λx.x x)`) never finishes on its own, so a Reducer
counts beta steps and gives up with ReductionLimitExceeded once its budget is spent.
"""

from lcore.lang.error import ReductionLimitExceeded
from lcore.pure.term import Abstraction, Application, Variable, fresh_name


def substitute(name, replacement, target):
    """Returns target with every free occurrence of name replaced by replacement. Bound variables of target that occur
    free in replacement are renamed first so that they cannot capture them.
    """
    if isinstance(target, Variable):
        return replacement if target.name == name else target

    elif isinstance(target, Application):
        return Application(substitute(name, replacement, target.function),
                           substitute(name, replacement, target.argument))

    elif isinstance(target, Abstraction):
        if target.name == name:
            return target  # name is rebound here, nothing free to replace

        if target.name in replacement.free_variables():
            new_name = fresh_name(target.name, replacement, target.body, Variable(name))
            renamed = substitute(target.name, Variable(new_name), target.body)
            return Abstraction(new_name, substitute(name, replacement, renamed))

        return Abstraction(target.name, substitute(name, replacement, target.body))

    raise TypeError(f"expected LambdaTerm, got '{type(target).__name__}'")


class Reducer:
    """Beta reduction of a LambdaTerm to normal form with a step budget. error_handler, if given, is notified of every
    beta step through register_step.
    """
    MAX_STEPS = 10000

    def __init__(self, max_steps=MAX_STEPS, error_handler=None):
        self.max_steps = max_steps
        self.error_handler = error_handler
        self.steps = 0
        self._original = None

    def reduce(self, term):
        """Returns the normal form of term. Raises ReductionLimitExceeded if it takes more than max_steps beta steps, or
        if the term grows deeper than the interpreter's recursion limit before that.
        """
        self.steps = 0
        self._original = term
        if self.error_handler is not None:
            self.error_handler.clear_steps()

        try:
            return self._reduce(term)
        except RecursionError:
            msg = "'{}' exceeded the maximum recursion depth after {} β-steps"
            raise ReductionLimitExceeded(self.steps, msg, [repr(term), self.steps], diagnosis=False) from None

    def _reduce(self, term):
        # the application case loops instead of recursing on the contracted redex
        while isinstance(term, Application):
            function = self._reduce(term.function)
            if not isinstance(function, Abstraction):
                return Application(function, term.argument)

            self._step()
            term = substitute(function.name, term.argument, function.body)
            if self.error_handler is not None:
                self.error_handler.register_step("β", term)

        if isinstance(term, Abstraction):
            return Abstraction(term.name, self._reduce(term.body))
        return term

    def _step(self):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            msg = "'{}' did not reach a normal form within {} β-steps"
            raise ReductionLimitExceeded(self.max_steps, msg, [repr(self._original), self.max_steps], diagnosis=False)


def reduce(term, max_steps=Reducer.MAX_STEPS, error_handler=None):
    """Reduces term to normal form with a fresh Reducer. max_steps=None lifts the step budget."""
    return Reducer(max_steps, error_handler).reduce(term)
