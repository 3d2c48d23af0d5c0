import dataclasses

import pytest

from cdlcompiler.tokens import Token, TokenType


@pytest.mark.parametrize(
    "name",
    ["PLUS", "ASSIGN", "EQUAL", "BEGIN", "END", "PRINT", "IDENTIFIER", "NUMBER", "EOF"],
)
def test_token_type_values_match_names(name):
    member = TokenType(name)
    assert member.value == name
    assert member.name == name


def test_token_type_lookup_by_value():
    assert TokenType("PRINT") is TokenType.PRINT
    assert TokenType("ILLEGAL") is TokenType.ILLEGAL


def test_token_type_str_is_value():
    assert str(TokenType("SEMICOLON")) == "SEMICOLON"


def test_unknown_token_type_raises():
    with pytest.raises(ValueError):
        TokenType("FOR")


def test_token_default_lexeme_is_empty():
    assert Token(TokenType.EOF).lexeme == ""


def test_tokens_compare_by_value():
    assert Token(TokenType.NUMBER, "42") == Token(TokenType.NUMBER, "42")
    assert Token(TokenType.NUMBER, "42") != Token(TokenType.IDENTIFIER, "42")


def test_token_is_immutable():
    tok = Token(TokenType.IDENTIFIER, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.lexeme = "y"
    assert tok.lexeme == "x"
    assert tok.type is TokenType.IDENTIFIER


def test_token_str_shows_type_and_lexeme():
    assert str(Token(TokenType.IDENTIFIER, "x")) == "{IDENTIFIER x}"