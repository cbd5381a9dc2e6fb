# Core type aliases for Kappa's data model.
# Values are plain Python objects where Python already has a fitting type
# (int, bool, str, dict) and small classes where it does not (Symbol, Keyword,
# List, Vector, Atom, the Function variants and the Nil singleton). Code and
# data share one representation: a parsed program is an ordinary Value.
#
# Naming guidance:
# - SExpression: use in reader/evaluator code for unevaluated forms.
# - LispValue:  use in runtime/builtin code for evaluated values.
# Both aliases resolve to `Any`; the closed set of variants is documented in
# kappa.types.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]
