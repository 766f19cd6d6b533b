"""Tests for pathmatch.routing.tokens: Token and TokenKind."""

import pytest

from pathmatch.routing.tokens import WILDCARD, Token, TokenKind


class TestToken:
    def test_literal(self) -> None:
        tok = Token.literal("/foo/")
        assert tok.kind is TokenKind.LITERAL
        assert tok.text == "/foo/"
        assert tok.greedy is False
        assert tok.is_param is False

    def test_parameter(self) -> None:
        tok = Token.parameter("fooId")
        assert tok.kind is TokenKind.PARAMETER
        assert tok.text == "fooId"
        assert tok.greedy is False
        assert tok.is_param is True

    def test_greedy_parameter(self) -> None:
        tok = Token.parameter("tags", greedy=True)
        assert tok.greedy is True

    def test_equality(self) -> None:
        assert Token.literal("x") == Token(TokenKind.LITERAL, "x")
        assert Token.parameter("x") != Token.parameter("x", greedy=True)
        assert Token.parameter("x") != Token.literal("x")

    def test_hashable(self) -> None:
        tokens = {Token.literal("/a"), Token.literal("/a"), Token.parameter("a")}
        assert len(tokens) == 2

    def test_frozen(self) -> None:
        tok = Token.literal("/foo")
        with pytest.raises(AttributeError):
            tok.text = "/bar"  # type: ignore[misc]


class TestTokenKind:
    def test_values(self) -> None:
        assert TokenKind.LITERAL.value == "literal"
        assert TokenKind.PARAMETER.value == "parameter"

    def test_wildcard_name(self) -> None:
        assert WILDCARD == "*"
