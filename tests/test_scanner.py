import pytest

from loxlex.errors import TokenizeError
from loxlex.lexemes import format_decimal
from loxlex.scanner import scan, tokenize
from loxlex.token import TokenType


def kinds(result):
    return [tok.kind for tok in result.tokens]


def test_empty_source_is_only_eof():
    result = scan("")
    assert kinds(result) == [TokenType.EOF]
    assert result.tokens[0].lexeme == ""
    assert not result.had_error


def test_single_character_tokens():
    result = scan("(){};,+-*.")
    assert kinds(result) == [
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.SEMICOLON,
        TokenType.COMMA,
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.STAR,
        TokenType.DOT,
        TokenType.EOF,
    ]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("==", TokenType.EQUAL_EQUAL),
        ("!=", TokenType.BANG_EQUAL),
        ("<=", TokenType.LESS_EQUAL),
        (">=", TokenType.GREATER_EQUAL),
        ("=", TokenType.EQUAL),
        ("!", TokenType.BANG),
        ("<", TokenType.LESS),
        (">", TokenType.GREATER),
        ("/", TokenType.SLASH),
    ],
)
def test_operators(text, kind):
    result = scan(text)
    assert kinds(result) == [kind, TokenType.EOF]
    assert result.tokens[0].lexeme == text


def test_comment_is_skipped():
    result = scan("a // ignored ( )\nb")
    assert [tok.lexeme for tok in result.tokens[:-1]] == ["a", "b"]


def test_comment_counts_its_line():
    result = scan("// note\n@")
    assert result.errors == ["[line 2] Error: Unexpected character: @"]


def test_string_literal():
    result = scan('"hi there"')
    tok = result.tokens[0]
    assert tok.kind is TokenType.STRING
    assert tok.lexeme == '"hi there"'
    assert tok.literal == "hi there"


def test_unterminated_string_reports_error():
    result = scan('"abc')
    assert result.had_error
    assert result.errors[0].endswith("Unterminated string.")
    assert kinds(result) == [TokenType.EOF]


@pytest.mark.parametrize("text", ["12", "12.50", "0.0", "3.14", "1.2.3"])
def test_number_literal(text):
    result = scan(text)
    tok = result.tokens[0]
    assert tok.kind is TokenType.NUMBER
    assert tok.lexeme == text
    assert tok.literal == format_decimal(text)


def test_identifiers_and_keywords():
    result = scan("var foo_1 = nil;")
    assert kinds(result) == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.EQUAL,
        TokenType.NIL,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert result.tokens[1].lexeme == "foo_1"


def test_unexpected_characters_keep_scanning():
    result = scan("$(#")
    assert len(result.errors) == 2
    assert kinds(result) == [TokenType.LEFT_PAREN, TokenType.EOF]


def test_carriage_return_is_unexpected():
    result = scan("a\rb")
    assert result.had_error
    assert kinds(result) == [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF]


def test_tokenize_reads_file(tmp_path):
    path = tmp_path / "ok.lox"
    path.write_text("print 1;")
    tokens = tokenize(path)
    assert [tok.kind for tok in tokens] == [
        TokenType.PRINT,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_tokenize_missing_file(tmp_path):
    with pytest.raises(TokenizeError) as info:
        tokenize(tmp_path / "absent.lox")
    assert info.value.exit_code == 255


def test_tokenize_with_errors_carries_tokens(tmp_path):
    path = tmp_path / "bad.lox"
    path.write_text("( @")
    with pytest.raises(TokenizeError) as info:
        tokenize(path)
    err = info.value
    assert err.exit_code == 65
    assert [tok.kind for tok in err.tokens] == [TokenType.LEFT_PAREN, TokenType.EOF]
    assert len(err.messages) == 1