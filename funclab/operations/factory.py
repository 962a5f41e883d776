#!filepath: funclab/operations/factory.py
from __future__ import annotations

from typing import Callable

UnaryOperation = Callable[[int], int]
BinaryOperation = Callable[[int, int], int]


def make_multiplier(factor: int) -> UnaryOperation:
    """
    Closure that multiplies its argument by ``factor``.

    ``factor`` is bound when the closure is created and never rebound, so
    multipliers built from different factors stay independent.
    """

    def multiplier(x: int) -> int:
        return x * factor

    multiplier.__name__ = f"multiply_by_{factor}"
    return multiplier


def compose(outer: UnaryOperation, inner: BinaryOperation) -> BinaryOperation:
    """Binary operation computing ``outer(inner(a, b))``."""

    def composed(a: int, b: int) -> int:
        return outer(inner(a, b))

    composed.__name__ = (
        f"{getattr(outer, '__name__', 'outer')}_of_"
        f"{getattr(inner, '__name__', 'inner')}"
    )
    return composed


def as_binary(unary: UnaryOperation) -> BinaryOperation:
    """Lift a unary function to a binary operation; the second operand is ignored."""

    def lifted(a: int, _b: int) -> int:
        return unary(a)

    lifted.__name__ = getattr(unary, "__name__", "lifted")
    return lifted
