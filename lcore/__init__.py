"""Untyped lambda calculus interpreter.

Basic program flow:
    1. Parser: produces a lambda calculus AST from a single source string
        - For the grammar rules, see lcore/pure/lexical.py
    2. Reduction: rewrites the AST to its normal form by capture-avoiding substitution and beta reduction
        - For the reduction strategy, see lcore/pure/reduction.py
    3. Output: the resulting AST is handed back to the caller, nothing is compiled or serialized

Church-encoded booleans, numerals, pairs and sums live in lcore/lang/church.py.
"""

from lcore.lang.error import GenericException, LambdaSyntaxError, ReductionLimitExceeded
from lcore.pure.lexical import parse
from lcore.pure.reduction import Reducer, reduce, substitute
from lcore.pure.term import Abstraction, Application, LambdaTerm, Variable, free_variables, fresh_name
