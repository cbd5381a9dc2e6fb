from kappa import SExpression
from kappa.types.environment import Environment


class TailCall:
    """Returned by special forms whose result is `expr` evaluated in `env`.

    The evaluation loop picks the pair up and continues instead of recursing.
    """

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
