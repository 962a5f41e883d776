#!filepath: funclab/accumulator.py
from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from funclab.utils.intmath import OverflowPolicy, resolve_policy
from funclab.utils.logger import logs

Accumulator = Callable[[], int]


@dataclass(frozen=True)
class SharedConstants:
    """
    Process-wide read-only constants added on every accumulator step.

    Accumulators hold a reference to one instance; it is never copied.
    """

    k1: int = 10
    k2: int = 100

    @property
    def step(self) -> int:
        return self.k1 + self.k2


DEFAULT_CONSTANTS = SharedConstants()


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------
def create_accumulator(
    initial_state: int = 0,
    *,
    constants: Optional[SharedConstants] = None,
    policy: Union[str, OverflowPolicy] = OverflowPolicy.WRAP,
    synchronized: bool = False,
) -> Accumulator:
    """
    Build an accumulator closure around a fresh private state cell.

    Each call does ``state = bound(state + k1 + k2)`` and returns the new
    state. ``bound`` is the overflow policy (signed 64-bit wraparound by
    default). The initial state goes through the same policy.

    Parameters
    ----------
    initial_state : int
        value of the private cell before the first call
    constants : SharedConstants, optional
        shared constants, DEFAULT_CONSTANTS when omitted
    policy : str | OverflowPolicy
        "wrap", "saturate" or "unbounded"
    synchronized : bool
        guard the read-modify-write with a lock owned by this accumulator only
    """
    env = constants if constants is not None else DEFAULT_CONSTANTS
    bound = resolve_policy(policy)

    state = bound(initial_state)
    guard = threading.Lock() if synchronized else nullcontext()

    def accumulate() -> int:
        nonlocal state
        with guard:
            state = bound(state + env.k1 + env.k2)
            current = state

        logs.debug(f"[Accumulator] state={current}")
        return current

    return accumulate


def make_accumulators(
    count: int,
    initial_state: int = 0,
    **kwargs,
) -> List[Accumulator]:
    """
    ``count`` independent accumulators, all starting from ``initial_state``.
    Keyword arguments are forwarded to create_accumulator.
    """
    if count < 0:
        raise ValueError(f"[Accumulator] count must be >= 0, got {count}")

    return [create_accumulator(initial_state, **kwargs) for _ in range(count)]
