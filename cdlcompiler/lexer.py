"""Lexical analysis: turn source text into a list of tokens."""

from __future__ import annotations

from typing import Iterator

from .tokens import Token, TokenType

KEYWORDS: dict[str, TokenType] = {
    "IF": TokenType.IF,
    "THEN": TokenType.THEN,
    "ELSE": TokenType.ELSE,
    "WHILE": TokenType.WHILE,
    "DO": TokenType.DO,
    "BEGIN": TokenType.BEGIN,
    "END": TokenType.END,
    "PRINT": TokenType.PRINT,
}

SYMBOLS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUAL,
    ">": TokenType.GT,
    "<": TokenType.LT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
}

_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")


def _is_letter_or_digit(ch: str) -> bool:
    return ch.isalpha() or ch in _DIGITS


class Lexer:
    """Scans a source string into tokens."""

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return all tokens of the source, terminated by an EOF token."""
        tokens = list(self._scan())
        tokens.append(Token(TokenType.EOF, ""))
        return tokens

    def _scan(self) -> Iterator[Token]:
        source = self.source
        end = len(source)
        pos = 0
        while pos < end:
            ch = source[pos]

            if ch in _WHITESPACE:
                pos += 1
                continue

            if ch.isalpha():
                start = pos
                while pos < end and _is_letter_or_digit(source[pos]):
                    pos += 1
                lexeme = source[start:pos]
                yield Token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER), lexeme)
                continue

            if ch in _DIGITS:
                start = pos
                while pos < end and source[pos] in _DIGITS:
                    pos += 1
                yield Token(TokenType.NUMBER, source[start:pos])
                continue

            pair = source[pos:pos + 2]
            if len(pair) == 2 and pair in SYMBOLS:
                yield Token(SYMBOLS[pair], pair)
                pos += 2
                continue

            yield Token(SYMBOLS.get(ch, TokenType.ILLEGAL), ch)
            pos += 1


def tokenize(source: str) -> list[Token]:
    """Tokenize a source string."""
    return Lexer(source).tokenize()