#!filepath: funclab/operations/registry.py
from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from funclab.operations.builtins import add, multiply, subtract
from funclab.operations.factory import BinaryOperation, compose, make_multiplier
from funclab.utils.errors import OperationNotFoundError
from funclab.utils.logger import logs


class OperationRegistry:
    """
    Name -> binary integer operation.

    - register() is last-write-wins
    - dispatch() of an unknown name raises OperationNotFoundError (a LookupError)
    - enumeration follows insertion order
    """

    def __init__(self, operations: Optional[Mapping[str, BinaryOperation]] = None):
        self._operations: Dict[str, BinaryOperation] = {}
        if operations:
            for name, operation in operations.items():
                self.register(name, operation)

    # --------------------------------------------------
    # registration
    # --------------------------------------------------
    def register(self, name: str, operation: BinaryOperation) -> None:
        if not callable(operation):
            raise TypeError(
                f"[OperationRegistry] operation for '{name}' must be callable, "
                f"got {type(operation).__name__}"
            )

        if name in self._operations:
            logs.debug(f"[OperationRegistry] replacing operation: {name}")

        self._operations[name] = operation

    def operation(self, name: str) -> Callable[[BinaryOperation], BinaryOperation]:
        """
        Decorator form of register():

            @registry.operation("add")
            def add(x, y): ...
        """

        def _wrap(fn: BinaryOperation) -> BinaryOperation:
            self.register(name, fn)
            return fn

        return _wrap

    def unregister(self, name: str) -> BinaryOperation:
        if name not in self._operations:
            raise OperationNotFoundError(name, self.names())
        return self._operations.pop(name)

    def clear(self) -> None:
        self._operations.clear()

    # --------------------------------------------------
    # lookup / dispatch
    # --------------------------------------------------
    def get(self, name: str) -> BinaryOperation:
        if name not in self._operations:
            raise OperationNotFoundError(name, self.names())
        return self._operations[name]

    def dispatch(self, name: str, a: int, b: int) -> int:
        operation = self.get(name)
        result = operation(a, b)
        logs.debug(f"[OperationRegistry] {name}({a}, {b}) = {result}")
        return result

    # --------------------------------------------------
    # read-only views
    # --------------------------------------------------
    def names(self) -> List[str]:
        return list(self._operations)

    def items(self) -> List[Tuple[str, BinaryOperation]]:
        return list(self._operations.items())

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


def apply_via_higher_order(a: int, b: int, operation: BinaryOperation) -> int:
    """Apply an operation value passed in as an argument; no name lookup."""
    return operation(a, b)


def build_default_registry() -> OperationRegistry:
    """
    add / subtract / multiply, plus double_sum = 2 * (a + b)
    """
    return OperationRegistry(
        {
            "add": add,
            "subtract": subtract,
            "multiply": multiply,
            "double_sum": compose(make_multiplier(2), add),
        }
    )
