import pytest
from hypothesis import given
from hypothesis import strategies as st

from monkey.monkey_constants import keywords, lookup_ident, token_hashmap
from monkey.monkey_lexer import CharacterStream, Lexer, Token, tokenize


def types_and_literals(source: str) -> list[tuple[str, str]]:
    return [(tok.type, tok.literal) for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "=+(){},;"
    expected = [
        ("=", "="),
        ("+", "+"),
        ("(", "("),
        (")", ")"),
        ("{", "{"),
        ("}", "}"),
        (",", ","),
        (";", ";"),
        ("EOF", ""),
    ]
    assert types_and_literals(code) == expected


@pytest.mark.parametrize(
    "source,expected_type",
    [
        ("==", "=="),
        ("!=", "!="),
        ("=", "="),
        ("!", "!"),
        ("+", "+"),
        ("-", "-"),
        ("*", "*"),
        ("/", "/"),
        ("<", "<"),
        (">", ">"),
    ],
)  # type: ignore[misc]
def test_operator_tokens(source: str, expected_type: str) -> None:
    tok = Lexer(CharacterStream(source)).next_token()
    assert tok.type == expected_type
    assert tok.literal == source


def test_two_char_operator_does_not_swallow_following_char() -> None:
    assert types_and_literals("!==") == [("!=", "!="), ("=", "="), ("EOF", "")]
    assert types_and_literals("=!") == [("=", "="), ("!", "!"), ("EOF", "")]
    assert types_and_literals("= =") == [("=", "="), ("=", "="), ("EOF", "")]


def test_less_equal_is_two_tokens() -> None:
    assert types_and_literals("<=") == [("<", "<"), ("=", "="), ("EOF", "")]


def test_full_program() -> None:
    source = """let five = 5;
let ten = 10;

let add = fn(x, y) {
  x + y;
};

let result = add(five, ten);
!-/*5;
5 < 10 > 5;

if (5 < 10) {
\treturn true;
} else {
\treturn false;
}

10 == 10;
10 != 9;
"""
    expected = [
        ("LET", "let"),
        ("IDENT", "five"),
        ("=", "="),
        ("INT", "5"),
        (";", ";"),
        ("LET", "let"),
        ("IDENT", "ten"),
        ("=", "="),
        ("INT", "10"),
        (";", ";"),
        ("LET", "let"),
        ("IDENT", "add"),
        ("=", "="),
        ("FUNCTION", "fn"),
        ("(", "("),
        ("IDENT", "x"),
        (",", ","),
        ("IDENT", "y"),
        (")", ")"),
        ("{", "{"),
        ("IDENT", "x"),
        ("+", "+"),
        ("IDENT", "y"),
        (";", ";"),
        ("}", "}"),
        (";", ";"),
        ("LET", "let"),
        ("IDENT", "result"),
        ("=", "="),
        ("IDENT", "add"),
        ("(", "("),
        ("IDENT", "five"),
        (",", ","),
        ("IDENT", "ten"),
        (")", ")"),
        (";", ";"),
        ("!", "!"),
        ("-", "-"),
        ("/", "/"),
        ("*", "*"),
        ("INT", "5"),
        (";", ";"),
        ("INT", "5"),
        ("<", "<"),
        ("INT", "10"),
        (">", ">"),
        ("INT", "5"),
        (";", ";"),
        ("IF", "if"),
        ("(", "("),
        ("INT", "5"),
        ("<", "<"),
        ("INT", "10"),
        (")", ")"),
        ("{", "{"),
        ("RETURN", "return"),
        ("TRUE", "true"),
        (";", ";"),
        ("}", "}"),
        ("ELSE", "else"),
        ("{", "{"),
        ("RETURN", "return"),
        ("FALSE", "false"),
        (";", ";"),
        ("}", "}"),
        ("INT", "10"),
        ("==", "=="),
        ("INT", "10"),
        (";", ";"),
        ("INT", "10"),
        ("!=", "!="),
        ("INT", "9"),
        (";", ";"),
        ("EOF", ""),
    ]
    assert types_and_literals(source) == expected


@pytest.mark.parametrize("word,kind", sorted(keywords.items()))  # type: ignore[misc]
def test_keywords(word: str, kind: str) -> None:
    tok = Lexer(CharacterStream(word)).next_token()
    assert tok.type == kind
    assert tok.literal == word


def test_keywords_are_case_sensitive() -> None:
    tok = Lexer(CharacterStream("LET")).next_token()
    assert tok.type == "IDENT"
    assert tok.literal == "LET"


def test_identifier_with_underscore() -> None:
    assert types_and_literals("_foo_bar") == [("IDENT", "_foo_bar"), ("EOF", "")]


def test_identifier_stops_at_digit() -> None:
    assert types_and_literals("abc123") == [
        ("IDENT", "abc"),
        ("INT", "123"),
        ("EOF", ""),
    ]


def test_number_token() -> None:
    tok = Lexer(CharacterStream("12345")).next_token()
    assert tok.type == "INT"
    assert tok.literal == "12345"


def test_illegal_character() -> None:
    assert types_and_literals("@") == [("ILLEGAL", "@"), ("EOF", "")]


def test_multibyte_character_is_illegal() -> None:
    assert types_and_literals("é") == [("ILLEGAL", "é"), ("EOF", "")]


def test_embedded_nul_is_illegal_not_eof() -> None:
    assert types_and_literals("a\0b") == [
        ("IDENT", "a"),
        ("ILLEGAL", "\0"),
        ("IDENT", "b"),
        ("EOF", ""),
    ]


def test_empty_input_returns_eof() -> None:
    tok = Lexer(CharacterStream("")).next_token()
    assert tok.type == "EOF"
    assert tok.literal == ""


def test_whitespace_only_input_returns_eof() -> None:
    assert types_and_literals(" \t\r\n ") == [("EOF", "")]


def test_eof_is_stable() -> None:
    lexer = Lexer(CharacterStream("x"))
    assert lexer.next_token().type == "IDENT"
    for _ in range(5):
        tok = lexer.next_token()
        assert tok.type == "EOF"
        assert tok.literal == ""


def test_line_and_column_tracking() -> None:
    tokens = tokenize("let x = 1;\n  y == 2")
    assert (tokens[0].line, tokens[0].col) == (1, 1)
    assert (tokens[1].line, tokens[1].col) == (1, 5)
    assert (tokens[5].line, tokens[5].col) == (2, 3)
    assert (tokens[6].line, tokens[6].col) == (2, 5)


def test_character_stream_cursor() -> None:
    stream = CharacterStream("ab")
    assert stream.ch == "a"
    assert stream.position == 0
    assert stream.read_position == 1
    assert stream.peek_char() == "b"
    stream.read_char()
    assert stream.ch == "b"
    assert stream.peek_char() == "\0"
    stream.read_char()
    assert stream.ch == "\0"
    assert stream.end_of_file()
    assert stream.read_position == stream.position + 1


def test_character_stream_empty_source() -> None:
    stream = CharacterStream("")
    assert stream.ch == "\0"
    assert stream.end_of_file()
    assert stream.peek_char() == "\0"


def test_token_repr_eq_and_display() -> None:
    t1 = Token("INT", "42", 1, 2)
    t2 = Token("INT", "42", 1, 2)
    t3 = Token("IDENT", "x")

    assert repr(t1) == "Token(INT, 42)"
    assert t1.display() == "{Type:INT Literal:42}"
    assert t1 == t2
    assert t1 != t3
    assert t1 != "INT"
    assert len({t1, t2, t3}) == 2


def test_token_is_immutable() -> None:
    tok = Token("IDENT", "x")
    with pytest.raises(AttributeError):
        tok.literal = "y"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del tok.type


def test_lookup_ident() -> None:
    assert lookup_ident("let") == "LET"
    assert lookup_ident("fn") == "FUNCTION"
    assert lookup_ident("lettuce") == "IDENT"


def test_token_hashmap_has_only_short_operators() -> None:
    assert all(1 <= len(op) <= 2 for op in token_hashmap)


def test_iterating_lexer_stops_after_eof() -> None:
    tokens = list(Lexer(CharacterStream("a + b")))
    assert [t.type for t in tokens] == ["IDENT", "+", "IDENT", "EOF"]


identifiers = st.from_regex(r"[A-Za-z_]{1,20}", fullmatch=True).filter(
    lambda w: w not in keywords
)


@given(identifiers)  # type: ignore[misc]
def test_non_keyword_words_are_identifiers(word: str) -> None:
    assert types_and_literals(word) == [("IDENT", word), ("EOF", "")]


@given(st.from_regex(r"[0-9]{1,30}", fullmatch=True))  # type: ignore[misc]
def test_digit_runs_are_single_int_token(digits: str) -> None:
    assert types_and_literals(digits) == [("INT", digits), ("EOF", "")]


@given(st.text(max_size=100))  # type: ignore[misc]
def test_lexer_does_not_crash_on_random_input(input_str: str) -> None:
    tokens = tokenize(input_str)
    assert tokens[-1].type == "EOF"
    assert all(t.type != "EOF" for t in tokens[:-1])


@given(st.text(max_size=100))  # type: ignore[misc]
def test_scanning_is_repeatable(input_str: str) -> None:
    assert tokenize(input_str) == tokenize(input_str)


@given(st.text(alphabet=" \t\r\n=!+-*/<>(){},;abcXYZ_0123456789@", max_size=80))  # type: ignore[misc]
def test_literals_reconstruct_source(input_str: str) -> None:
    tokens = tokenize(input_str)
    rebuilt = "".join(t.literal for t in tokens)
    assert rebuilt == "".join(input_str.split())
