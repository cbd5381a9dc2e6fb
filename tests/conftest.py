import sys

import pytest

from kappa.interpreter import Interpreter, core_env


@pytest.fixture
def env():
    """Fresh root environment with builtins and `not` loaded."""
    return core_env()


@pytest.fixture
def interp(monkeypatch):
    """Interpreter with tracing off regardless of the caller's environment."""
    monkeypatch.delenv("KAPPA_DEBUG", raising=False)
    return Interpreter()


@pytest.fixture
def int_digit_limit():
    """Pin Python's default integer/text conversion limit for one test."""
    if not hasattr(sys, "get_int_max_str_digits"):
        pytest.skip("interpreter has no integer string conversion limit")
    saved = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(saved)
