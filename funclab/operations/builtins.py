# funclab/operations/builtins.py
from typing import Tuple


def add(x: int, y: int) -> int:
    return x + y


def subtract(x: int, y: int) -> int:
    return x - y


def multiply(x: int, y: int) -> int:
    return x * y


def sum_and_product(x: int, y: int) -> Tuple[int, int]:
    """Both results in one call: (x + y, x * y)."""
    return x + y, x * y
