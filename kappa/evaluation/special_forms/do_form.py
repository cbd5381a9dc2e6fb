from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.types import Environment, Nil
from kappa.types.tail_call import TailCall


def do_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue | TailCall:
    # (do) with no body is nil
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
