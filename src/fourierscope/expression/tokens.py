"""Tokenizer for the function-expression mini-language.

Implicit multiplication is decided here rather than by rewriting the source
text: whenever one operand ends and another begins without an operator in
between (``2(x)``, ``pi|x|``, ``(x+1)sin(x)``, ``3x``), a synthetic ``*``
token is emitted. Absolute-value bars are resolved into opening and closing
tokens from context, so nested bars such as ``||x|-1|`` are unambiguous.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from fourierscope.errors import ParseError


class TokenKind(StrEnum):
    """Lexical categories of the expression language."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    LPAREN = "("
    RPAREN = ")"
    BAR_OPEN = "|("
    BAR_CLOSE = ")|"
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token with its source offset."""

    kind: TokenKind
    text: str
    position: int
    implicit: bool = False


# Identifiers that denote a value rather than a function.
VALUE_IDENTIFIERS = frozenset({"x", "pi", "e"})

_NUMBER_RE = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z_0-9]*", re.ASCII)
_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(expression: str) -> tuple[Token, ...]:
    """Split an expression into tokens, inserting implicit ``*`` tokens.

    The returned tuple always ends with an ``END`` token.
    """
    tokens: list[Token] = []
    open_bars = 0
    pos = 0
    length = len(expression)

    while pos < length:
        char = expression[pos]
        if char.isspace():
            pos += 1
            continue

        token: Token
        if number := _NUMBER_RE.match(expression, pos):
            token = Token(TokenKind.NUMBER, number.group(0), pos)
            pos = number.end()
        elif identifier := _IDENTIFIER_RE.match(expression, pos):
            token = Token(TokenKind.IDENTIFIER, identifier.group(0).lower(), pos)
            pos = identifier.end()
        elif char == "|":
            previous = tokens[-1] if tokens else None
            if open_bars > 0 and previous is not None and _ends_operand(previous):
                token = Token(TokenKind.BAR_CLOSE, char, pos)
                open_bars -= 1
            else:
                token = Token(TokenKind.BAR_OPEN, char, pos)
                open_bars += 1
            pos += 1
        elif char in _OPERATORS:
            token = Token(_OPERATORS[char], char, pos)
            pos += 1
        else:
            raise ParseError(f"unexpected character {char!r}", expression=expression, position=pos)

        if tokens and _needs_implicit_multiply(tokens[-1], token):
            tokens.append(Token(TokenKind.STAR, "*", token.position, implicit=True))
        tokens.append(token)

    tokens.append(Token(TokenKind.END, "", length))
    return tuple(tokens)


def _ends_operand(token: Token) -> bool:
    if token.kind in (TokenKind.NUMBER, TokenKind.RPAREN, TokenKind.BAR_CLOSE):
        return True
    return token.kind == TokenKind.IDENTIFIER and token.text in VALUE_IDENTIFIERS


def _needs_implicit_multiply(previous: Token, current: Token) -> bool:
    if not _ends_operand(previous):
        return False
    if current.kind in (TokenKind.LPAREN, TokenKind.BAR_OPEN):
        return True
    if previous.kind in (TokenKind.RPAREN, TokenKind.BAR_CLOSE):
        return current.kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER)
    return previous.kind == TokenKind.NUMBER and current.kind == TokenKind.IDENTIFIER
