import pytest
from hypothesis import given, strategies as st

from kappa.types import Keyword, List, Nil, Symbol, Vector, is_equal
from kappa.errors import KappaSyntaxError
from kappa.printer import pr_str
from kappa.reader.parser import lex, read_str, TokenStream


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("rparen", ")")]),
        ("[1, 2]", [("lbracket", "["), ("symbol", "1"), ("symbol", "2"), ("rbracket", "]")]),
        ("{:k 1}", [("lbrace", "{"), ("symbol", ":k"), ("symbol", "1"), ("rbrace", "}")]),
        ('"hello"', [("string", '"hello"')]),
        ('"a b ; c"', [("string", '"a b ; c"')]),
        (" ; comment\n a", [("symbol", "a")]),
        ("@a", [("deref", "@"), ("symbol", "a")]),
        ("def! let* swap!", [("symbol", "def!"), ("symbol", "let*"), ("symbol", "swap!")]),
        ("   ,, ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("1abc", Symbol("1abc")),
        (":kw", Keyword("kw")),
        ('"a\\"b"', 'a"b'),
        ('"line\\nnext"', "line\nnext"),
        ('"back\\\\slash"', "back\\slash"),
        ('""', ""),
        ("(1 2)", List((1, 2))),
        ("()", List()),
        ("[1 (2)]", Vector((1, List((2,))))),
        ('{:a 1 "b" [2]}', {Keyword("a"): 1, "b": Vector((2,))}),
        ("@x", List((Symbol("deref"), Symbol("x")))),
        ("(+ 1 ; trailing\n 2)", List((Symbol("+"), 1, 2))),
    ]
)
def test_parser(source, expected):
    result = read_str(source)
    assert is_equal(result, expected)
    assert type(result) is type(expected)


@pytest.mark.parametrize("source", ["", "   ", "; only a comment", ",,,"])
def test_nothing_to_read(source):
    assert read_str(source) is None


@pytest.mark.parametrize(
    "source",
    ["(1 2", "[1 2)", '"abc', '"abc\\"', ")", "{:a}", "'a", "@"],
)
def test_syntax_errors(source):
    with pytest.raises(KappaSyntaxError):
        read_str(source)


def test_read_str_returns_first_form_only():
    assert read_str("1 2") == 1


def test_parse_all_yields_every_form():
    forms = list(TokenStream(lex("1 (a) [b]")).parse_all())
    assert len(forms) == 3
    assert isinstance(forms[1], List)
    assert isinstance(forms[2], Vector)


# ------------------ Printer/reader round trip ------------------

names = st.from_regex(r"[a-z][a-z0-9\-]{0,8}", fullmatch=True).filter(
    lambda s: s not in ("nil", "true", "false")
)
atoms = st.one_of(
    st.just(Nil),
    st.booleans(),
    st.integers(),
    st.text(),
    names.map(Symbol),
    names.map(Keyword),
)
map_keys = st.one_of(st.text(), names.map(Keyword))
values = st.recursive(
    atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=5).map(List),
        st.lists(children, max_size=5).map(Vector),
        st.dictionaries(map_keys, children, max_size=5),
    ),
    max_leaves=20,
)


@given(values)
def test_print_read_round_trip(value):
    text = pr_str(value, True)
    assert is_equal(read_str(text), value)


def test_overlong_integer_literal_is_a_syntax_error(int_digit_limit):
    with pytest.raises(KappaSyntaxError):
        read_str("1" * 5000)
