import pytest

from kappa.types import Atom, Closure, Environment, Keyword, List, NativeFunction, Nil, Symbol, Vector
from kappa.errors import KappaTypeError
from kappa.printer import pr_str


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-3, "-3"),
        ('a"b\n', '"a\\"b\\n"'),
        ("back\\slash", '"back\\\\slash"'),
        (Symbol("x"), "x"),
        (Keyword("k"), ":k"),
        (List(), "()"),
        (List((1, Vector((2,)))), "(1 [2])"),
        ({Keyword("a"): "s"}, '{:a "s"}'),
        (Atom(1), "(atom 1)"),
        (NativeFunction("+", lambda a, b: a + b), "#<native +>"),
        (Closure([Symbol("x")], Symbol("x"), Environment()), "#<function>"),
    ]
)
def test_pr_str_readable(value, expected):
    assert pr_str(value, True) == expected


def test_pr_str_display_mode_leaves_strings_raw():
    assert pr_str('a"b\n', False) == 'a"b\n'
    assert pr_str(List(("x", Keyword("y"))), False) == "(x :y)"
    assert pr_str({"k": "v"}, False) == "{k v}"


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(str 1 "a" :b)', "1a:b"),
        ('(str "x" (list "y" nil))', "x(y nil)"),
        ("(str)", ""),
        ('(pr-str "a" 1)', '"a" 1'),
        ('(pr-str "q\\"")', '"q\\""'),
        ("(pr-str)", ""),
        ('(pr-str [:a "b"])', '[:a "b"]'),
    ]
)
def test_string_builtins(interp, source, expected):
    assert interp.eval(source) == expected


def test_prn_outputs_readable_and_returns_nil(interp, capsys):
    ret = interp.eval('(prn "a" 1 :k)')
    assert capsys.readouterr().out == '"a" 1 :k\n'
    assert ret is Nil


def test_println_outputs_display_form(interp, capsys):
    ret = interp.eval('(println "a" 1 (list "b"))')
    assert capsys.readouterr().out == "a 1 (b)\n"
    assert ret is Nil


def test_interpreter_rep_prints_readably(interp):
    assert interp.rep('(str "a" "b")') == '"ab"'
    assert interp.rep("(list 1 [2] {:a nil})") == "(1 [2] {:a nil})"
    assert interp.rep("   ") is None


@pytest.mark.parametrize("value", [object(), 1.5, None])
def test_pr_str_rejects_values_outside_the_model(value):
    with pytest.raises(KappaTypeError):
        pr_str(value)
