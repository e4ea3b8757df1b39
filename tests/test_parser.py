import pytest
from hypothesis import given, strategies as st

from loom.errors import (
    LoomUnexpectedClosingDelimiter,
    LoomUnterminatedExpression,
    LoomMissingOpeningDelimiter,
    LoomUnterminatedString,
)
from loom.printer import render
from loom.reader import read_source
from loom.reader.lexer import tokenize
from loom.reader.parser import read, read_all, split_forms, ApplicationBuilder, ArgState
from loom.types.expression import Application
from loom.types.location import Location
from loom.types.sentinel import Nil
from loom.types.symbol import Symbol, Keyword


def parse(source):
    return read(tokenize(source))


def app(op, *args, **kwargs):
    return Application(op, tuple(args), kwargs)


S = Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("123", 123.0),
        ("-4.5", -4.5),
        ('"hello"', "hello"),
        ("x", S("x")),
        ("#mood", Keyword("mood")),
        ("()", Nil),
        ("[]", []),
        ("(f)", app(S("f"))),
        ("(+ 1 2)", app(S("+"), 1.0, 2.0)),
        ("[a (b) 1]", [S("a"), app(S("b")), 1.0]),
        ("((f) x)", app(app(S("f")), S("x"))),
        ("{#a 1}", app(S("table"), Keyword("a"), 1.0)),
        ("<a b>", app(S("quote"), S("a"), S("b"))),
        ("a.b.c", app(S("get"), S("a"), S("b"), S("c"))),
        ("(f x.y)", app(S("f"), app(S("get"), S("x"), S("y")))),
        ("a.", S("a.")),
        ("...", S("...")),
        ("  ; comment only\n x", S("x")),
        ("", Nil),
    ],
)
def test_read(source, expected):
    assert parse(source) == expected


def test_keyword_operands_are_desugared():
    expr = parse("(say hero :mood #happy \"hi\" :loud true)")
    assert expr.operator == S("say")
    assert expr.positional == (S("hero"), "hi")
    assert expr.keyword == {"mood": Keyword("happy"), "loud": S("true")}


def test_keyword_value_may_be_a_group():
    expr = parse("(f :opts [1 2] x)")
    assert expr.keyword == {"opts": [1.0, 2.0]}
    assert expr.positional == (S("x"),)


def test_dangling_keyword_marker_binds_nil():
    assert parse("(f x :flag)").keyword == {"flag": Nil}


def test_keyword_markers_inside_brackets_are_plain_symbols():
    assert parse("[:a 1]") == [S(":a"), 1.0]


def test_application_builder_consumes_exactly_one_value():
    b = ApplicationBuilder()
    b.feed(S("f"))
    assert b.state is ArgState.IDLE
    b.feed(S(":k"))
    assert b.state is ArgState.AWAITING_VALUE
    b.feed(S(":other"))  # consumed as the value, not as a new marker
    assert b.state is ArgState.IDLE
    b.feed(1.0)
    assert b.finish() == app(S("f"), 1.0, k=S(":other"))


def test_application_builder_empty_is_nil():
    assert ApplicationBuilder().finish() is Nil


def test_application_location_is_opening_paren():
    expr = parse("\n  (f (g))")
    assert expr.location == Location(2, 3)
    assert expr.positional[0].location == Location(2, 6)


def test_location_does_not_affect_equality():
    assert parse("(f x)") == parse("\n\n   (f   x)")


@pytest.mark.parametrize(
    "source, error, location",
    [
        ("(a b", LoomUnterminatedExpression, Location(1, 1)),
        ("[a (b c]", LoomUnexpectedClosingDelimiter, Location(1, 8)),
        (")a(", LoomUnexpectedClosingDelimiter, Location(1, 1)),
        ("(a))", LoomUnexpectedClosingDelimiter, Location(1, 4)),
        ("a b", LoomMissingOpeningDelimiter, Location(1, 3)),
        ("(a) (b)", LoomMissingOpeningDelimiter, Location(1, 5)),
    ],
)
def test_read_errors(source, error, location):
    with pytest.raises(error) as exc:
        parse(source)
    assert exc.value.location == location


def test_unterminated_string_is_reported_by_tokenizer():
    with pytest.raises(LoomUnterminatedString):
        parse('"abc')


def test_read_all_splits_top_level_forms():
    forms = read_all(tokenize("(let x 1) x [1 2] (f (g))"))
    assert forms == [app(S("let"), S("x"), 1.0), S("x"), [1.0, 2.0], app(S("f"), app(S("g")))]


def test_read_all_raises_first_error():
    with pytest.raises(LoomUnexpectedClosingDelimiter):
        read_all(tokenize(")a("))


def test_split_forms_never_raises():
    spans = split_forms(tokenize("(a) ) (b (c"))
    assert [" ".join(str(t) for t in s) for s in spans] == ["( a )", ")", "( b ( c"]


def test_read_source_applies_dialogue_sugar():
    assert read_source("hero: Hello there") == [app(S("say"), S("hero"), "Hello there")]


# ---------------------------------------------------------------
# Render-then-reread
# ---------------------------------------------------------------
_names = st.from_regex(r"[a-z][a-z0-9\-?!*+]{0,6}", fullmatch=True).filter(lambda s: s != "nil")
_atoms = st.one_of(
    _names.map(Symbol),
    _names.map(Keyword),
    st.floats(allow_nan=False, allow_infinity=False, width=32).map(float),
    st.text(alphabet=st.characters(exclude_characters='"', exclude_categories=("Cs",)), max_size=8),
    st.just(Nil),
)


def _compound(children):
    return st.one_of(
        st.lists(children, max_size=4),
        st.builds(
            lambda op, args, kwargs: Application(op, tuple(args), kwargs),
            st.one_of(_names.map(Symbol), children),
            st.lists(children, max_size=3).filter(
                lambda xs: not any(isinstance(x, Symbol) and x.id.startswith(":") for x in xs)
            ),
            st.dictionaries(_names, children, max_size=2),
        ),
    )


_expressions = st.recursive(_atoms, _compound, max_leaves=12)


@given(_expressions)
def test_render_then_reread(expr):
    assert parse(render(expr)) == expr


@pytest.mark.parametrize(
    "source, expected",
    [
        ("t.0", app(S("get"), S("t"), Keyword("0"))),
        ("t.a.1", app(S("get"), S("t"), S("a"), Keyword("1"))),
        ("0.x", S("0.x")),
        ("nil.x", S("nil.x")),
        ("t.nil", S("t.nil")),
        ("t.#a", S("t.#a")),
        (":a.b", S(":a.b")),
        ("a..b", S("a..b")),
    ],
)
def test_field_access_parts(source, expected):
    assert parse(source) == expected


_dotted = st.lists(
    st.from_regex(r"[a-z0-9#:+\-]{0,3}", fullmatch=True), min_size=2, max_size=4
).map(".".join)


@given(_dotted)
def test_dotted_tokens_render_then_reread(text):
    expr = parse(text)
    assert parse(render(expr)) == expr
    assert parse(render([expr])) == [expr]
