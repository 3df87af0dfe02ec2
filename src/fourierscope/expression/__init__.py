"""Restricted math-expression language: tokenizer, parser, and evaluator."""

from fourierscope.expression.evaluator import Expression, evaluate, parse_expression
from fourierscope.expression.parser import parse
from fourierscope.expression.tokens import Token, TokenKind, tokenize

__all__ = [
    "Expression",
    "Token",
    "TokenKind",
    "evaluate",
    "parse",
    "parse_expression",
    "tokenize",
]
