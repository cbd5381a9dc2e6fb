from __future__ import annotations

import logging
from typing import Iterable

from kappa import LispValue
from kappa.builtin.env_builtin import arity, register
from kappa.evaluation.evaluator import evaluate
from kappa.printer import pr_str
from kappa.reader.parser import TokenStream, lex, read_str
from kappa.types import Environment, List, NativeFunction, Nil, Symbol

logger = logging.getLogger(__name__)

# Definitions written in Kappa itself
NOT_DEFINITION = "(def! not (fn* (a) (if a false true)))"
LOAD_FILE_DEFINITION = (
    r'(def! load-file (fn* (f) (eval (read-string (str "(do " (slurp f) "\nnil)")))))'
)


def core_env() -> Environment:
    """Root environment: every builtin plus the self-hosted definitions.

    Bootstrap code is always evaluated untraced.
    """
    env = Environment()
    register(env)
    evaluate(read_str(NOT_DEFINITION), env, debug=False)
    return env


class Interpreter:
    """
    Reads and evaluates Kappa code against a persistent environment.

    The session environment is a child of the core environment and adds
    `eval`, `load-file` and `*ARGV*`.
    """

    def __init__(self, argv: Iterable[str] = (), debug: bool = False):
        self.debug = debug
        self.env: Environment = Environment(core_env())

        @arity(1)
        def eval_builtin(expr: LispValue) -> LispValue:
            return evaluate(expr, self.env, self.debug)

        self.env.set(Symbol("eval"), NativeFunction("eval", eval_builtin))
        evaluate(read_str(LOAD_FILE_DEFINITION), self.env, debug=False)
        self.env.set(Symbol("*ARGV*"), List(str(a) for a in argv))
        logger.debug("interpreter ready, %d core bindings", len(self.env.outer.vars))

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last result (nil if none)."""
        result: LispValue = Nil
        for expr in TokenStream(lex(code)).parse_all():
            result = evaluate(expr, self.env, self.debug)
        return result

    def rep(self, line: str) -> str | None:
        """Read one form, evaluate it, and print it readably. None for blank input."""
        expr = read_str(line)
        if expr is None:
            return None
        return pr_str(evaluate(expr, self.env, self.debug), True)

    def load_file(self, path: str) -> LispValue:
        return evaluate(List((Symbol("load-file"), path)), self.env, self.debug)
