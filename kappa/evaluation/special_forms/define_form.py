from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.types import Environment, Symbol


def define_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (def! name value)
    Binds in the current frame and returns the value.
    """
    if len(tail) != 2:
        raise KappaArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise KappaTypeError(f"def! expects a symbol, got {type(name).__name__}")
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)
