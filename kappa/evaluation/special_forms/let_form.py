from kappa import EvaluatorFn
from kappa import SExpression
from kappa.errors import KappaArityError, KappaTypeError
from kappa.types import Environment, Symbol, is_sequential
from kappa.types.tail_call import TailCall


def let_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body)

    Bindings are sequential: each expression is evaluated in the new frame and
    sees the names bound before it. The body is evaluated in tail position.
    """
    if len(tail) != 2:
        raise KappaArityError("let* requires a binding list and a body")

    bindings, body = tail
    if not is_sequential(bindings):
        raise KappaTypeError("let* bindings must be a list or vector")
    if len(bindings) % 2 != 0:
        raise KappaArityError("let* bindings must come in name/value pairs")

    let_env = Environment(env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise KappaTypeError(f"let* expects symbols, got {type(name).__name__}")
        let_env.set(name, evaluate_fn(val_expr, let_env))
    return TailCall(body, let_env)
