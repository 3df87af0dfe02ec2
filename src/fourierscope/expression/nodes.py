"""Expression tree nodes and their evaluation.

Every node evaluates against ``x`` given either as a float or as a float
array, so the same tree serves single-point evaluation and vectorized
sampling. Trees are walked with an explicit stack, so long operator chains
such as ``x+x+...+x`` need no Python recursion. Arithmetic is carried out
in numpy float64, which keeps IEEE semantics: division by zero yields
``inf`` and domain errors yield ``nan``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Union

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]
Value = Union[np.float64, FloatArray]

UnaryFunction = Callable[[Value], Value]

FUNCTIONS: dict[str, UnaryFunction] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "exp": np.exp,
    "sqrt": np.sqrt,
    "log": np.log,
    "ln": np.log,
    "log10": np.log10,
    "abs": np.abs,
    "floor": np.floor,
    "ceil": np.ceil,
    "sign": np.sign,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


class BinaryOperator(StrEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


_BINARY_UFUNCS: dict[BinaryOperator, Callable[[Value, Value], Value]] = {
    BinaryOperator.ADD: np.add,
    BinaryOperator.SUBTRACT: np.subtract,
    BinaryOperator.MULTIPLY: np.multiply,
    BinaryOperator.DIVIDE: np.divide,
    BinaryOperator.POWER: np.power,
}


@dataclass(frozen=True, slots=True)
class Number:
    value: float

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def apply(self, operands: list[Value], x: Value) -> Value:
        return np.float64(self.value)


@dataclass(frozen=True, slots=True)
class Constant:
    name: str

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def apply(self, operands: list[Value], x: Value) -> Value:
        return np.float64(CONSTANTS[self.name])


@dataclass(frozen=True, slots=True)
class Variable:
    """The free variable ``x``."""

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    def apply(self, operands: list[Value], x: Value) -> Value:
        return x


@dataclass(frozen=True, slots=True)
class Negate:
    operand: Node

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.operand,)

    def apply(self, operands: list[Value], x: Value) -> Value:
        return np.negative(operands[0])


@dataclass(frozen=True, slots=True)
class Absolute:
    """Bracketed ``|...|`` group."""

    operand: Node

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.operand,)

    def apply(self, operands: list[Value], x: Value) -> Value:
        return np.abs(operands[0])


@dataclass(frozen=True, slots=True)
class BinaryOp:
    operator: BinaryOperator
    left: Node
    right: Node

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.left, self.right)

    def apply(self, operands: list[Value], x: Value) -> Value:
        return _BINARY_UFUNCS[self.operator](operands[0], operands[1])


@dataclass(frozen=True, slots=True)
class FunctionCall:
    name: str
    argument: Node

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.argument,)

    def apply(self, operands: list[Value], x: Value) -> Value:
        return FUNCTIONS[self.name](operands[0])


def evaluate_tree(root: Node, x: Value) -> Value:
    """Post-order evaluation of ``root`` at ``x`` without recursion."""
    pending: list[tuple[Node, bool]] = [(root, False)]
    results: list[Value] = []
    while pending:
        node, expanded = pending.pop()
        children = node.children
        if children and not expanded:
            pending.append((node, True))
            pending.extend((child, False) for child in reversed(children))
            continue
        split = len(results) - len(children)
        operands = results[split:]
        del results[split:]
        results.append(node.apply(operands, x))
    return results[0]


Node = Union[Number, Constant, Variable, Negate, Absolute, BinaryOp, FunctionCall]
