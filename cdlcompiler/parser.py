"""Syntactic analysis: build statements from a token stream.

Grammar::

    Program    := 'BEGIN' {Command} 'END'
    Command    := PrintStatement | AssignStatement
    Assign     := ID '=' Expression ';'
    Print      := 'PRINT' Expression ';'
    Expression := (ID | NUMBER) [OPERATOR (ID | NUMBER)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .tokens import Token, TokenType

_OPERANDS = (TokenType.IDENTIFIER, TokenType.NUMBER)
_OPERATORS = (
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
)


class ParseError(Exception):
    """Raised when the token stream does not follow the grammar."""

    def __init__(self, message: str, token: Optional[Token] = None) -> None:
        super().__init__(message)
        self.token = token


@dataclass(frozen=True)
class AssignStatement:
    """``name = expression;``"""

    var_name: str
    expression_tokens: tuple[Token, ...]


@dataclass(frozen=True)
class PrintStatement:
    """``PRINT expression;``"""

    expression_tokens: tuple[Token, ...]
    var_name: str = ""


Statement = Union[AssignStatement, PrintStatement]


class Parser:
    """Recursive-descent parser over a list of tokens."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0
        self.statements: list[Statement] = []

    def parse_program(self) -> list[Statement]:
        """Parse a whole program and return its statements."""
        if not self._match(TokenType.BEGIN):
            raise ParseError("Expected BEGIN", self._current())

        while self._current().type not in (TokenType.END, TokenType.EOF):
            self._parse_command()

        if not self._match(TokenType.END):
            raise ParseError("Expected END", self._current())

        return list(self.statements)

    def _current(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return Token(TokenType.EOF, "")

    def _match(self, *expected: TokenType) -> Optional[Token]:
        tok = self._current()
        if self._pos < len(self._tokens) and tok.type in expected:
            self._pos += 1
            return tok
        return None

    def _error(self) -> ParseError:
        tok = self._current()
        return ParseError(f"Error parsing command near: {tok.lexeme}", tok)

    def _expect(self, *expected: TokenType) -> Token:
        tok = self._match(*expected)
        if tok is None:
            raise self._error()
        return tok

    def _parse_command(self) -> None:
        kind = self._current().type
        if kind is TokenType.PRINT:
            self._parse_print()
        elif kind is TokenType.IDENTIFIER:
            self._parse_assignment()
        else:
            tok = self._current()
            raise ParseError(f"Unexpected token: {tok.lexeme}", tok)

    def _parse_assignment(self) -> None:
        name = self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.ASSIGN)
        expression = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        self.statements.append(AssignStatement(name.lexeme, expression))

    def _parse_print(self) -> None:
        self._pos += 1
        expression = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        self.statements.append(PrintStatement(expression))

    def _parse_expression(self) -> tuple[Token, ...]:
        first = self._expect(*_OPERANDS)
        operator = self._match(*_OPERATORS)
        if operator is None:
            return (first,)
        second = self._expect(*_OPERANDS)
        return (first, operator, second)


def parse(tokens: Iterable[Token]) -> list[Statement]:
    """Parse a token stream into a list of statements."""
    return Parser(tokens).parse_program()