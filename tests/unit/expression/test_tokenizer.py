"""Tests for expression tokenization and implicit multiplication."""

from __future__ import annotations

import pytest

from fourierscope.errors import ParseError
from fourierscope.expression import TokenKind, tokenize


def _kinds(expression: str) -> list[str]:
    return [token.kind.value for token in tokenize(expression)][:-1]


def test_tokenize_simple_arithmetic() -> None:
    tokens = tokenize("1.5 + x*2")

    assert [token.text for token in tokens] == ["1.5", "+", "x", "*", "2", ""]
    assert tokens[-1].kind == TokenKind.END
    assert tokens[2].position == 6


def test_number_formats() -> None:
    texts = [token.text for token in tokenize(".5 2. 1e-3 3E2")][:-1]

    assert texts == [".5", "2.", "1e-3", "3E2"]


def test_identifiers_are_lowercased() -> None:
    tokens = tokenize("PI*Sin(X)")

    assert [token.text for token in tokens if token.kind == TokenKind.IDENTIFIER] == ["pi", "sin", "x"]


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("2(x)", ["number", "*", "(", "identifier", ")"]),
        ("pi(x)", ["identifier", "*", "(", "identifier", ")"]),
        ("2|x|", ["number", "*", "|(", "identifier", ")|"]),
        ("(x)(x)", ["(", "identifier", ")", "*", "(", "identifier", ")"]),
        ("sin(x)|x|", ["identifier", "(", "identifier", ")", "*", "|(", "identifier", ")|"]),
        ("|x|sin(x)", ["|(", "identifier", ")|", "*", "identifier", "(", "identifier", ")"]),
        ("3x", ["number", "*", "identifier"]),
        ("(x)2", ["(", "identifier", ")", "*", "number"]),
    ],
)
def test_implicit_multiplication_tokens(expression: str, expected: list[str]) -> None:
    assert _kinds(expression) == expected


def test_implicit_tokens_are_flagged() -> None:
    tokens = tokenize("2(x)")

    assert tokens[1].kind == TokenKind.STAR
    assert tokens[1].implicit is True


def test_function_call_is_not_implicit_multiplication() -> None:
    assert _kinds("sin(x)") == ["identifier", "(", "identifier", ")"]


def test_nested_absolute_value_bars() -> None:
    assert _kinds("||x|-1|") == ["|(", "|(", "identifier", ")|", "-", "number", ")|"]


def test_unexpected_character_reports_position() -> None:
    with pytest.raises(ParseError, match="unexpected character") as excinfo:
        tokenize("x + $")

    assert excinfo.value.position == 4
    assert excinfo.value.expression == "x + $"


@pytest.mark.parametrize("expression", ["2é", "xé", "2²"])
def test_non_ascii_characters_are_rejected(expression: str) -> None:
    with pytest.raises(ParseError, match="unexpected character") as excinfo:
        tokenize(expression)

    assert excinfo.value.position == 1
