from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.types import Environment, Nil, is_truthy
from kappa.types.tail_call import TailCall


def if_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise KappaArityError("if requires a condition, a then-expression and an optional else")

    cond = evaluate_fn(tail[0], env)
    # Lisp truthiness: anything not nil or false is true
    if is_truthy(cond):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return Nil
