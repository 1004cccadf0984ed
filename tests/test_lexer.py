import pytest

from cldpy.lexer import Lexer, TokenKind, token_text


def lex(text: str):
    return Lexer(text).lex()


def significant(text: str) -> list[tuple[TokenKind, str]]:
    return [
        (token.kind, token_text(text, token))
        for token in lex(text)
        if not token.kind.is_trivia and token.kind != TokenKind.EOF
    ]


def test_declaration_header_tokens() -> None:
    src = "@Origin Genesis { 年份: 0 }"

    assert significant(src) == [
        (TokenKind.DIRECTIVE, "@Origin"),
        (TokenKind.IDENTIFIER, "Genesis"),
        (TokenKind.LBRACE, "{"),
        (TokenKind.IDENTIFIER, "年份"),
        (TokenKind.COLON, ":"),
        (TokenKind.NUMBER, "0"),
        (TokenKind.RBRACE, "}"),
    ]


def test_lex_is_lossless() -> None:
    src = '@Era E { xs: [1, "two", three], flag: true } # done\n// more\n'
    tokens = lex(src)

    assert "".join(token_text(src, token) for token in tokens) == src
    assert tokens[-1].kind == TokenKind.EOF


@pytest.mark.parametrize(
    "text",
    ["0", "42", "-7", "3.14", "-0.5", "1e10", "2.5E-3", "-3.5e+2"],
)
def test_number_literals_are_single_tokens(text: str) -> None:
    assert significant(text) == [(TokenKind.NUMBER, text)]


def test_number_does_not_swallow_dangling_exponent() -> None:
    assert significant("1e") == [(TokenKind.NUMBER, "1"), (TokenKind.IDENTIFIER, "e")]


def test_keywords_and_identifiers() -> None:
    assert significant("true false truthy _x a-b 名字") == [
        (TokenKind.TRUE, "true"),
        (TokenKind.FALSE, "false"),
        (TokenKind.IDENTIFIER, "truthy"),
        (TokenKind.IDENTIFIER, "_x"),
        (TokenKind.IDENTIFIER, "a-b"),
        (TokenKind.IDENTIFIER, "名字"),
    ]


def test_triple_quoted_string_spans_lines() -> None:
    src = '"""multi\nline""" after'

    assert significant(src) == [
        (TokenKind.STRING, '"""multi\nline"""'),
        (TokenKind.IDENTIFIER, "after"),
    ]


def test_single_quoted_string_stops_at_newline() -> None:
    lexer = Lexer('"open\nnext')
    tokens = lexer.lex()

    assert tokens[0].kind == TokenKind.STRING
    assert token_text(lexer.source, tokens[0]) == '"open'
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]


def test_unterminated_triple_quoted_string_runs_to_eof() -> None:
    lexer = Lexer('x: """never closed')
    lexer.lex()

    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert lexer.diagnostics[0].range.as_tuple() == (3, 18)


@pytest.mark.parametrize(
    ("src", "kind"),
    [
        ("# hash comment", TokenKind.COMMENT),
        ("// slash comment", TokenKind.COMMENT),
        ("  \t", TokenKind.WHITESPACE),
        ("\u3000", TokenKind.WHITESPACE),
        ("\r\n", TokenKind.NEWLINE),
    ],
)
def test_trivia_kinds(src: str, kind: TokenKind) -> None:
    tokens = lex(src)

    assert tokens[0].kind == kind
    assert tokens[0].kind.is_trivia
    assert tokens[0].range.as_tuple() == (0, len(src))


def test_comment_does_not_consume_newline() -> None:
    kinds = [token.kind for token in lex("# c\nx")]

    assert kinds == [TokenKind.COMMENT, TokenKind.NEWLINE, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_unexpected_character_is_skipped_with_diagnostic() -> None:
    lexer = Lexer("a ; b")
    tokens = lexer.lex()

    assert [token.kind for token in tokens if token.kind != TokenKind.WHITESPACE] == [
        TokenKind.IDENTIFIER,
        TokenKind.SKIPPED,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert len(lexer.diagnostics) == 1
    assert lexer.diagnostics[0].code == "LEXER_UNEXPECTED_CHARACTER"
    assert "`;`" in lexer.diagnostics[0].message


def test_bare_at_sign_is_unexpected() -> None:
    lexer = Lexer("@ Origin")
    tokens = lexer.lex()

    assert tokens[0].kind == TokenKind.SKIPPED
    assert lexer.diagnostics[0].code == "LEXER_UNEXPECTED_CHARACTER"


def test_single_slash_is_unexpected() -> None:
    lexer = Lexer("/ x")
    lexer.lex()

    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNEXPECTED_CHARACTER"]


def test_empty_source_yields_only_eof() -> None:
    tokens = lex("")

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.EOF
    assert tokens[0].range.is_empty()


@pytest.mark.parametrize("src", ["²", "①", "٣"])
def test_non_ascii_digits_are_unexpected(src: str) -> None:
    lexer = Lexer(src)
    tokens = lexer.lex()

    assert tokens[0].kind == TokenKind.SKIPPED
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNEXPECTED_CHARACTER"]


def test_number_stops_before_superscript_digit() -> None:
    lexer = Lexer("1²")
    tokens = lexer.lex()

    assert [token.kind for token in tokens] == [TokenKind.NUMBER, TokenKind.SKIPPED, TokenKind.EOF]
    assert token_text(lexer.source, tokens[0]) == "1"
