# funclab/utils/errors.py
from typing import Iterable


class OperationNotFoundError(LookupError):
    """
    Raised when a name is not present in an OperationRegistry.
    The registry never falls back to a default operation.
    """

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = list(available)
        listed = ", ".join(self.available) or "<none>"
        super().__init__(
            f"[OperationRegistry] unknown operation: {name}. Available: {listed}"
        )
