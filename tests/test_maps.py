import pytest

from kappa.types import Keyword, List, Nil
from kappa.errors import KappaArityError, KappaSyntaxError, KappaTypeError

A, B = Keyword("a"), Keyword("b")


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(hash-map :a 1 "b" 2)', {A: 1, "b": 2}),
        ("(hash-map)", {}),
        ("(assoc {:a 1} :b 2 :a 3)", {A: 3, B: 2}),
        ("(assoc {:a 1})", {A: 1}),
        ("(dissoc {:a 1 :b 2} :a :c)", {B: 2}),
        ("(get {:a 1} :a)", 1),
        ("(get {:a 1} :b)", Nil),
        ("(get nil :a)", Nil),
        ("(get {:a false} :a)", False),
        ("(contains? {:a 1} :a)", True),
        ('(contains? {:a 1} "a")', False),
        ("(contains? {:a nil} :a)", True),
        ("(keys {:a 1})", List((A,))),
        ("(vals {:a 1})", List((1,))),
        ("(keys {})", List()),
        ("(map? {})", True),
        ("(map? [])", False),
        ("(map? nil)", False),
    ]
)
def test_map_operations(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


def test_keys_and_vals_line_up(interp):
    interp.eval('(def! m {:a 1 :b 2 "c" 3})')
    keys = interp.eval("(keys m)")
    vals = interp.eval("(vals m)")
    assert dict(zip(keys, vals)) == {A: 1, B: 2, "c": 3}


def test_assoc_and_dissoc_do_not_modify_their_argument(interp):
    interp.eval("(def! m {:a 1})")
    interp.eval("(assoc m :b 2)")
    interp.eval("(dissoc m :a)")
    assert interp.eval("m") == {A: 1}


@pytest.mark.parametrize(
    "source,error",
    [
        ("(hash-map :a)", KappaTypeError),
        ("(hash-map 1 2)", KappaTypeError),
        ("(assoc {} :a)", KappaTypeError),
        ("(assoc nil :a 1)", KappaTypeError),
        ("(dissoc [1] 0)", KappaTypeError),
        ("(get [1] 0)", KappaTypeError),
        ("(get {:a 1} 1)", KappaTypeError),
        ("(contains? nil :a)", KappaTypeError),
        ("(keys [1])", KappaTypeError),
        ("(vals nil)", KappaTypeError),
        ("(get {:a 1})", KappaArityError),
        ("{1 2}", KappaSyntaxError),
    ]
)
def test_map_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)
