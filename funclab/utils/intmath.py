#!filepath: funclab/utils/intmath.py
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

# signed 64-bit, the width of a machine int on 64-bit hosts
INT64_BITS = 64
INT64_MIN = -(1 << (INT64_BITS - 1))
INT64_MAX = (1 << (INT64_BITS - 1)) - 1

_MODULUS = 1 << INT64_BITS


class OverflowPolicy(str, Enum):
    WRAP = "wrap"
    SATURATE = "saturate"
    UNBOUNDED = "unbounded"


def wrap_int64(value: int) -> int:
    """Two's-complement wraparound into [INT64_MIN, INT64_MAX]."""
    return ((value - INT64_MIN) % _MODULUS) + INT64_MIN


def saturate_int64(value: int) -> int:
    """Clamp into [INT64_MIN, INT64_MAX]."""
    if value > INT64_MAX:
        return INT64_MAX
    if value < INT64_MIN:
        return INT64_MIN
    return value


def unbounded(value: int) -> int:
    return value


_POLICIES: Dict[OverflowPolicy, Callable[[int], int]] = {
    OverflowPolicy.WRAP: wrap_int64,
    OverflowPolicy.SATURATE: saturate_int64,
    OverflowPolicy.UNBOUNDED: unbounded,
}


def resolve_policy(policy: Union[str, OverflowPolicy]) -> Callable[[int], int]:
    """
    Map a policy name (or enum member) to its bounding function.

    Unknown names raise ValueError listing the available policies.
    """
    try:
        key = OverflowPolicy(policy)
    except ValueError:
        available = ", ".join(p.value for p in OverflowPolicy)
        raise ValueError(
            f"[intmath] unknown overflow policy: {policy}. Available: {available}"
        ) from None

    return _POLICIES[key]
