import math
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from kappa.reader.parser import TokenStream, lex
from kappa.evaluation.evaluator import evaluate
from kappa.interpreter import core_env
from kappa.errors import KappaArityError, KappaTypeError, KappaZeroDivisionError


def run(env, source):
    result = None
    for expr in TokenStream(lex(source)).parse_all():
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(* 6 7)", 42),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -4),
        ("(/ 7 -2)", -4),
        ("(/ -7 -2)", 3),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("(- -10 -5)", -5),
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(<= 2 2)", True),
        ("(> 1 2)", False),
        ("(>= 3 2)", True),
    ]
)
def test_integer_arithmetic_and_comparison(env, source, expected):
    result = run(env, source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,error",
    [
        ('(+ 1 "2")', KappaTypeError),
        ("(+ 1 true)", KappaTypeError),
        ("(* nil 2)", KappaTypeError),
        ("(< 1 :a)", KappaTypeError),
        ("(>= (list) 1)", KappaTypeError),
        ("(+ 1 2 3)", KappaArityError),
        ("(- 1)", KappaArityError),
        ("(/ 1 0)", KappaZeroDivisionError),
    ]
)
def test_arithmetic_rejects_bad_operands(env, source, error):
    with pytest.raises(error):
        run(env, source)


ENV = core_env()


@given(st.integers(), st.integers().filter(lambda b: b != 0))
def test_division_floors_toward_negative_infinity(a, b):
    assert run(ENV, f"(/ {a} {b})") == math.floor(Fraction(a, b))
