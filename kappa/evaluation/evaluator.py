"""Core evaluator for the Kappa interpreter.

`evaluate` runs a loop over an (expr, env) pair. Special forms and closure
application in tail position hand back a new pair (via TailCall) instead of
recursing, so tail-recursive Lisp code runs in constant Python stack depth.
`eval_ast` is the non-tail helper that evaluates symbols and the elements of
collections.
"""

from __future__ import annotations

import logging
from functools import partial

from kappa import SExpression, LispValue
from kappa.errors import KappaTypeError
from kappa.printer import pr_str
from kappa.types import Closure, Environment, List, NativeFunction, Symbol, Vector
from kappa.types.tail_call import TailCall
from kappa.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def eval_ast(expr: SExpression, env: Environment, debug: bool = False) -> LispValue:
    """Evaluate without dispatching: symbols resolve, collections evaluate
    their elements left to right, map keys are kept as-is, and everything else
    is returned unchanged."""
    match expr:
        case Symbol():
            return env.get(expr)
        case List():
            return List(evaluate(x, env, debug) for x in expr)
        case Vector():
            return Vector(evaluate(x, env, debug) for x in expr)
        case dict():
            return {k: evaluate(v, env, debug) for k, v in expr.items()}
    return expr


def evaluate(expr: SExpression, env: Environment, debug: bool = False) -> LispValue:
    """Evaluate `expr` in `env`.

    When `debug` is true every loop iteration is traced at DEBUG level on
    this module's logger.
    """
    evaluate_fn = partial(evaluate, debug=True) if debug else evaluate
    while True:
        if debug:
            logger.debug("evaluate %s", pr_str(expr))

        if not isinstance(expr, List):
            return eval_ast(expr, env, debug)
        if not expr:
            return expr

        head = expr[0]
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            result = SPECIAL_FORMS[head](expr[1:], env, evaluate_fn, debug)
            if isinstance(result, TailCall):
                expr, env = result.expr, result.env
                continue
            return result

        fn, *args = eval_ast(expr, env, debug)
        if isinstance(fn, NativeFunction):
            if debug:
                logger.debug("calling %s(%s)", fn.name, ", ".join(pr_str(a) for a in args))
            return fn(*args)
        if isinstance(fn, Closure):
            if debug:
                logger.debug("applying %s to (%s)", fn, ", ".join(pr_str(a) for a in args))
            expr, env = fn.body, fn.bind(args)
            continue
        raise KappaTypeError(f"Cannot apply non-function {pr_str(fn)}")
