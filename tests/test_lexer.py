import pytest

from loom.errors import LoomUnterminatedString
from loom.reader.lexer import tokenize, TokenKind
from loom.types.location import Location


def kinds_and_text(source, **kw):
    return [(t.kind, t.text) for t in tokenize(source, **kw)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(TokenKind.SYMBOL, "a")]),
        ("(a b)", [(TokenKind.LPAREN, "("), (TokenKind.SYMBOL, "a"), (TokenKind.SYMBOL, "b"), (TokenKind.RPAREN, ")")]),
        ("[1 x]", [(TokenKind.LBRACKET, "["), (TokenKind.NUMBER, "1"), (TokenKind.SYMBOL, "x"), (TokenKind.RBRACKET, "]")]),
        ('"hello (world)"', [(TokenKind.STRING, "hello (world)")]),
        ("(f)x", [(TokenKind.LPAREN, "("), (TokenKind.SYMBOL, "f"), (TokenKind.RPAREN, ")"), (TokenKind.SYMBOL, "x")]),
        ("a\tb\r\nc", [(TokenKind.SYMBOL, "a"), (TokenKind.SYMBOL, "b"), (TokenKind.SYMBOL, "c")]),
        ("#key :name", [(TokenKind.SYMBOL, "#key"), (TokenKind.SYMBOL, ":name")]),
        ("", []),
    ],
)
def test_tokenize_basic(source, expected):
    assert kinds_and_text(source) == expected


@pytest.mark.parametrize(
    "text,value",
    [("1", 1.0), ("-2.5", -2.5), ("+3", 3.0), (".5", 0.5), ("1e3", 1000.0), ("7.", 7.0)],
)
def test_numbers_become_number_tokens(text, value):
    [tok] = tokenize(text)
    assert tok.kind is TokenKind.NUMBER
    assert tok.value == value


@pytest.mark.parametrize("text", ["inf", "nan", "-", "+", "1a", "1.2.3", "e5"])
def test_number_like_symbols_stay_symbols(text):
    [tok] = tokenize(text)
    assert tok.kind is TokenKind.SYMBOL


def test_brace_sugar_expands_to_table():
    assert kinds_and_text("{#a 1}") == [
        (TokenKind.LPAREN, "("),
        (TokenKind.SYMBOL, "table"),
        (TokenKind.SYMBOL, "#a"),
        (TokenKind.NUMBER, "1"),
        (TokenKind.RPAREN, ")"),
    ]


def test_angle_sugar_expands_to_quote():
    assert kinds_and_text("<a b>") == kinds_and_text("(quote a b)")


def test_sugar_splits_symbols():
    assert kinds_and_text("x{y}z") == kinds_and_text("x (table y) z")


def test_comments_are_dropped_by_default():
    assert kinds_and_text("a ; ignore (this)\nb") == [(TokenKind.SYMBOL, "a"), (TokenKind.SYMBOL, "b")]


def test_comments_can_be_kept():
    assert kinds_and_text("a ;note\nb", keep_comments=True) == [
        (TokenKind.SYMBOL, "a"),
        (TokenKind.COMMENT, "note"),
        (TokenKind.SYMBOL, "b"),
    ]


def test_comment_at_end_of_input():
    assert kinds_and_text("a ; trailing") == [(TokenKind.SYMBOL, "a")]


def test_string_keeps_delimiters_and_semicolons_verbatim():
    [tok] = tokenize('"a ; {b} <c>"')
    assert tok.kind is TokenKind.STRING
    assert tok.text == "a ; {b} <c>"


def test_locations():
    tokens = tokenize('(say\n  hero "hi")')
    assert [t.location for t in tokens] == [
        Location(1, 1),
        Location(1, 2),
        Location(2, 3),
        Location(2, 8),
        Location(2, 12),
    ]


def test_unterminated_string():
    with pytest.raises(LoomUnterminatedString) as exc:
        tokenize('(say x "abc')
    assert exc.value.location == Location(1, 8)
    assert "1:8" in str(exc.value)


def test_unterminated_string_keeps_earlier_tokens():
    with pytest.raises(LoomUnterminatedString) as exc:
        tokenize('(let a 1) (say a "abc')
    assert [t.text for t in exc.value.tokens] == ["(", "let", "a", "1", ")", "(", "say", "a"]
