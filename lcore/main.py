"""Runs lcore on λ-terms given on the command line or in a file (one term per line), printing the tree of each normal
form. Also uses error handling context manager. Called from the lcore console script.
"""

import argparse

from lcore.lang.error import ErrorHandler, GenericException, ReductionLimitExceeded
from lcore.pure.lexical import parse
from lcore.pure.reduction import Reducer

CMD_LINE = "<args>"  # traceback filename for terms given as arguments


def read_terms(args):
    """Yields (path, line_num, term source) for every term to run, arguments first."""
    for line_num, expr in enumerate(args.terms):
        yield CMD_LINE, line_num + 1, expr

    if args.file is not None:
        try:
            with open(args.file, "r", encoding="utf-8") as file:
                lines = file.read().splitlines()
        except OSError:
            raise GenericException("'{}' could not be opened", args.file, diagnosis=False)

        for line_num, line in enumerate(lines):
            if line:
                yield args.file, line_num + 1, line


def steps(value):
    """argparse type for --max-steps: a natural number."""
    num = int(value)
    if num < 0:
        raise argparse.ArgumentTypeError(f"expected a natural number, got '{value}'")
    return num


def main(argv=None):
    """Runs lcore interpreter."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lcore", description="Untyped lambda calculus interpreter")
        parser.add_argument("terms", help="λ-terms to reduce", nargs="*")
        parser.add_argument("-f", "--file", help="file with one λ-term per line to reduce")
        parser.add_argument("--max-steps", type=steps, default=Reducer.MAX_STEPS,
                            help=f"β-steps allowed per term (default: {Reducer.MAX_STEPS}, 0 for no limit)")
        parser.add_argument("-v", "--verbose", action="store_true", help="print every β-step")
        args = parser.parse_args(argv)

        error_handler.verbose = args.verbose
        reducer = Reducer(args.max_steps or None, error_handler)

        for path, line_num, expr in read_terms(args):
            error_handler.register_line(path, expr, line_num)
            term = parse(expr)

            try:
                print(reducer.reduce(term).display())
            except ReductionLimitExceeded as error:
                error_handler.warn("'{}' does not have a normal form within {} β-steps", [expr, error.steps])

            error_handler.remove_line(path)


if __name__ == "__main__":
    main()
