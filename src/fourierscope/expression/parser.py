"""Recursive-descent parser for the function-expression mini-language.

Grammar (highest binding last)::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("-" | "+") unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER | "x" | CONSTANT
                | FUNCTION group
                | group
    group      := "(" expression ")" | "|(" expression ")|"

Implicit multiplication arrives from the tokenizer as an ordinary ``*``
token, so it shares precedence with explicit multiplication. The exponent
operand is parsed at ``unary`` level, which makes ``^`` right-associative and
allows ``2^-x``. Nesting through parentheses, bars, signs and exponents is
limited to ``MAX_NESTING_DEPTH`` levels.
"""

from __future__ import annotations

from fourierscope.errors import ParseError
from fourierscope.expression.nodes import (
    CONSTANTS,
    FUNCTIONS,
    Absolute,
    BinaryOp,
    BinaryOperator,
    Constant,
    FunctionCall,
    Negate,
    Node,
    Number,
    Variable,
)
from fourierscope.expression.tokens import Token, TokenKind, tokenize


_ADDITIVE = {TokenKind.PLUS: BinaryOperator.ADD, TokenKind.MINUS: BinaryOperator.SUBTRACT}
_MULTIPLICATIVE = {TokenKind.STAR: BinaryOperator.MULTIPLY, TokenKind.SLASH: BinaryOperator.DIVIDE}

# Bounds parser recursion well inside the interpreter stack limit.
MAX_NESTING_DEPTH = 100


def parse(expression: str) -> Node:
    """Parse an expression string into a tree, consuming the full input."""
    if not expression.strip():
        raise ParseError("empty expression", expression=expression, position=0)
    return _Parser(expression, tokenize(expression)).parse()


class _Parser:
    def __init__(self, source: str, tokens: tuple[Token, ...]) -> None:
        self._source = source
        self._tokens = tokens
        self._index = 0
        self._depth = 0

    def parse(self) -> Node:
        node = self._expression()
        token = self._peek()
        if token.kind != TokenKind.END:
            if token.kind in (TokenKind.RPAREN, TokenKind.BAR_CLOSE):
                raise self._error(f"unbalanced {token.text!r}", token)
            raise self._error(f"unexpected {_describe(token)}", token)
        return node

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != TokenKind.END:
            self._index += 1
        return token

    def _expect(self, kind: TokenKind, message: str) -> Token:
        token = self._peek()
        if token.kind != kind:
            raise self._error(message, token)
        return self._advance()

    def _error(self, message: str, token: Token) -> ParseError:
        position = None if token.kind == TokenKind.END else token.position
        return ParseError(message, expression=self._source, position=position)

    def _expression(self) -> Node:
        node = self._term()
        while self._peek().kind in _ADDITIVE:
            operator = _ADDITIVE[self._advance().kind]
            node = BinaryOp(operator, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self._peek().kind in _MULTIPLICATIVE:
            operator = _MULTIPLICATIVE[self._advance().kind]
            node = BinaryOp(operator, node, self._unary())
        return node

    def _unary(self) -> Node:
        token = self._peek()
        self._depth += 1
        try:
            if self._depth > MAX_NESTING_DEPTH:
                raise self._error("expression nested too deeply", token)
            if token.kind == TokenKind.MINUS:
                self._advance()
                return Negate(self._unary())
            if token.kind == TokenKind.PLUS:
                self._advance()
                return self._unary()
            return self._power()
        finally:
            self._depth -= 1

    def _power(self) -> Node:
        base = self._primary()
        if self._peek().kind == TokenKind.CARET:
            self._advance()
            return BinaryOp(BinaryOperator.POWER, base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._peek()
        if token.kind == TokenKind.NUMBER:
            self._advance()
            return Number(float(token.text))
        if token.kind == TokenKind.IDENTIFIER:
            self._advance()
            if token.text == "x":
                return Variable()
            if token.text in CONSTANTS:
                return Constant(token.text)
            if token.text in FUNCTIONS:
                if self._peek().kind not in (TokenKind.LPAREN, TokenKind.BAR_OPEN):
                    raise self._error(f"function {token.text!r} requires an argument", self._peek())
                return FunctionCall(token.text, self._group())
            raise self._error(f"unknown identifier {token.text!r}", token)
        if token.kind in (TokenKind.LPAREN, TokenKind.BAR_OPEN):
            return self._group()
        raise self._error(f"missing operand before {_describe(token)}", token)

    def _group(self) -> Node:
        opener = self._advance()
        inner = self._expression()
        if opener.kind == TokenKind.LPAREN:
            self._expect(TokenKind.RPAREN, "missing ')'")
            return inner
        self._expect(TokenKind.BAR_CLOSE, "missing closing '|'")
        return Absolute(inner)


def _describe(token: Token) -> str:
    if token.kind == TokenKind.END:
        return "end of input"
    return repr(token.text)
