"""Token kinds and the token value produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Every kind of token the language knows."""

    # Operators and delimiters
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    ASSIGN = "ASSIGN"
    EQUAL = "EQUAL"
    GT = "GT"
    LT = "LT"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMICOLON = "SEMICOLON"

    # Keywords
    IF = "IF"
    THEN = "THEN"
    ELSE = "ELSE"
    WHILE = "WHILE"
    DO = "DO"
    BEGIN = "BEGIN"
    END = "END"
    PRINT = "PRINT"

    # General types
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    EOF = "EOF"
    ILLEGAL = "ILLEGAL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and the text it was read from."""

    type: TokenType
    lexeme: str = ""

    def __str__(self) -> str:
        return f"{{{self.type.value} {self.lexeme}}}"