from .builtins import add, subtract, multiply, sum_and_product
from .factory import make_multiplier, compose, as_binary
from .registry import OperationRegistry, apply_via_higher_order, build_default_registry

__all__ = [
    "add", "subtract", "multiply", "sum_and_product",
    "make_multiplier", "compose", "as_binary",
    "OperationRegistry", "apply_via_higher_order", "build_default_registry",
]
