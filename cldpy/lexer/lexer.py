"""Lexer."""

from __future__ import annotations

from cldpy.diagnostics import Diagnostic
from cldpy.diagnostics.codes import LEXER_UNEXPECTED_CHARACTER, LEXER_UNTERMINATED_STRING
from cldpy.lexer.tokens import KEYWORDS, Token, TokenKind
from cldpy.text import TextRange, TextSize, slice_text_range

_TRIPLE_QUOTE = '"""'
_INLINE_WHITESPACE = frozenset({" ", "\t", "\ufeff", "\u3000"})
_DIGITS = frozenset("0123456789")

_PUNCTUATION: dict[str, TokenKind] = {
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = self._position
        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(TextSize(self._position)))

        kind = self._lex_token()
        return Token(kind, TextRange(self._current_start, self._position))

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in {"\r", "\n"}:
            self._consume_newline()
            return TokenKind.NEWLINE

        if ch in _INLINE_WHITESPACE:
            while not self.is_eof and self._current_char() in _INLINE_WHITESPACE:
                self._advance(1)
            return TokenKind.WHITESPACE

        if ch == "#" or (ch == "/" and self._peek_char() == "/"):
            return self._lex_comment()

        if ch == '"':
            return self._lex_string()

        if _is_digit(ch) or (ch == "-" and _is_digit(self._peek_char())):
            return self._lex_number()

        if ch == "@" and _is_identifier_start(self._peek_char()):
            self._advance(1)
            self._consume_identifier_tail()
            return TokenKind.DIRECTIVE

        if _is_identifier_start(ch):
            self._consume_identifier_tail()
            text = self._source[self._current_start : self._position]
            return KEYWORDS.get(text, TokenKind.IDENTIFIER)

        punctuation = _PUNCTUATION.get(ch)
        if punctuation is not None:
            self._advance(1)
            return punctuation

        self._advance(1)
        self._diagnostics.append(
            Diagnostic.from_spec(
                LEXER_UNEXPECTED_CHARACTER,
                TextRange(self._current_start, self._position),
                message=f"{LEXER_UNEXPECTED_CHARACTER.message} Found `{ch}`.",
            )
        )
        return TokenKind.SKIPPED

    def _lex_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        while not self.is_eof and self._current_char() not in {"\n", "\r"}:
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_string(self) -> TokenKind:
        if self._source.startswith(_TRIPLE_QUOTE, self._position):
            self._advance(3)
            end = self._source.find(_TRIPLE_QUOTE, self._position)
            if end < 0:
                self._position = len(self._source)
                self._report_unterminated_string()
            else:
                self._position = end + 3
            return TokenKind.STRING

        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return TokenKind.STRING
            if ch in {"\n", "\r"}:
                break
            self._advance(1)

        self._report_unterminated_string()
        return TokenKind.STRING

    def _lex_number(self) -> TokenKind:
        if self._current_char() == "-":
            self._advance(1)
        self._consume_digits()
        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance(1)
            self._consume_digits()
        if self._current_char() in {"e", "E"}:
            sign = self._peek_char()
            if _is_digit(sign):
                self._advance(1)
                self._consume_digits()
            elif sign in {"+", "-"} and _is_digit(self._peek_char(2)):
                self._advance(2)
                self._consume_digits()
        return TokenKind.NUMBER

    def _consume_digits(self) -> None:
        while not self.is_eof and _is_digit(self._current_char()):
            self._advance(1)

    def _consume_identifier_tail(self) -> None:
        self._advance(1)
        while not self.is_eof and _is_identifier_continue(self._current_char()):
            self._advance(1)

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
            return
        self._advance(1)

    def _report_unterminated_string(self) -> None:
        self._diagnostics.append(
            Diagnostic.from_spec(
                LEXER_UNTERMINATED_STRING,
                TextRange(self._current_start, self._position),
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_identifier_continue(ch: str) -> bool:
    return ch.isalnum() or ch in {"_", "-"}


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
