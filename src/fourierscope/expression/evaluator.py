"""Compiled expressions and point evaluation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from fourierscope.expression.nodes import Node, evaluate_tree
from fourierscope.expression.parser import parse


FloatArray = npt.NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Expression:
    """A parsed expression, reusable for any number of evaluations."""

    source: str
    tree: Node

    def evaluate(self, x: float) -> float:
        """Evaluate at a single point; non-finite results are returned as-is."""
        with np.errstate(all="ignore"):
            return float(evaluate_tree(self.tree, np.float64(x)))

    def evaluate_many(self, xs: npt.ArrayLike) -> FloatArray:
        """Evaluate at every point of a 1D array in one vectorized pass."""
        points = np.asarray(xs, dtype=np.float64)
        with np.errstate(all="ignore"):
            result = evaluate_tree(self.tree, points)
        # Expressions without x (e.g. "pi") evaluate to a scalar.
        return np.broadcast_to(np.asarray(result, dtype=np.float64), points.shape).copy()


def parse_expression(source: str) -> Expression:
    """Parse ``source`` once; raises ParseError on malformed input."""
    return Expression(source=source, tree=parse(source))


def evaluate(source: str, x: float) -> float:
    """Parse and evaluate ``source`` at ``x``."""
    return parse_expression(source).evaluate(x)
