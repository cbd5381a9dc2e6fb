from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.types import Closure, Environment, Symbol, is_sequential


def fn_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    debug: bool = False,
) -> LispValue:
    """
    (fn* (param ...) body)
    Captures the current env by reference; the body stays unevaluated.
    A closure built while tracing keeps tracing when called from builtins.
    """
    if len(tail) != 2:
        raise KappaArityError("fn* requires a parameter list and a body")

    params, body = tail
    if not is_sequential(params):
        raise KappaTypeError("fn* parameters must be a list or vector")
    for p in params:
        if not isinstance(p, Symbol):
            raise KappaTypeError(f"fn* parameters must be symbols, got {type(p).__name__}")

    return Closure(list(params), body, env, debug)
