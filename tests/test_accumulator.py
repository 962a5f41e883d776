#!filepath: tests/test_accumulator.py
import threading
from dataclasses import FrozenInstanceError

import pytest

from funclab.accumulator import (
    DEFAULT_CONSTANTS,
    SharedConstants,
    create_accumulator,
    make_accumulators,
)
from funclab.utils.intmath import INT64_MAX, INT64_MIN


def test_first_and_second_invocation(constants):
    acc = create_accumulator(100, constants=constants)

    assert acc() == 210
    assert acc() == 320


@pytest.mark.parametrize("s0", [0, 100, -500, 7])
def test_nth_invocation_is_linear(s0, constants):
    acc = create_accumulator(s0, constants=constants)

    for n in range(1, 11):
        assert acc() == s0 + 110 * n


def test_default_constants():
    assert DEFAULT_CONSTANTS.k1 == 10
    assert DEFAULT_CONSTANTS.k2 == 100
    assert DEFAULT_CONSTANTS.step == 110

    acc = create_accumulator(0)
    assert acc() == 110


def test_state_isolation_same_initial_value(constants):
    """Two factory calls with the same start never share the state cell"""
    a = create_accumulator(100, constants=constants)
    b = create_accumulator(100, constants=constants)

    for _ in range(5):
        a()

    assert b() == 210
    assert a() == 100 + 110 * 6
    assert b() == 320


def test_constants_are_referenced_not_copied():
    """Accumulators read the shared object on every call"""
    env = SharedConstants(k1=1, k2=2)
    a = create_accumulator(0, constants=env)
    b = create_accumulator(0, constants=env)

    # frozen: nobody can mutate it through an accumulator
    with pytest.raises(FrozenInstanceError):
        env.k1 = 99

    assert any(cell.cell_contents is env for cell in a.__closure__)
    assert any(cell.cell_contents is env for cell in b.__closure__)
    assert a() == 3
    assert b() == 3
    assert env == SharedConstants(k1=1, k2=2)


def test_closure_does_not_expose_state(constants):
    acc = create_accumulator(5, constants=constants)

    assert not hasattr(acc, "state")
    assert acc.__code__.co_freevars  # real closure cells


def test_wrap_policy_wraps_at_int64(constants):
    acc = create_accumulator(INT64_MAX - 100, constants=constants, policy="wrap")

    # INT64_MAX - 100 + 110 overflows by 10
    assert acc() == INT64_MIN + 9


def test_saturate_policy_clamps(constants):
    acc = create_accumulator(INT64_MAX - 100, constants=constants, policy="saturate")

    assert acc() == INT64_MAX
    assert acc() == INT64_MAX


def test_unbounded_policy_grows(constants):
    acc = create_accumulator(INT64_MAX, constants=constants, policy="unbounded")

    assert acc() == INT64_MAX + 110


def test_unknown_policy_raises():
    with pytest.raises(ValueError, match="unknown overflow policy"):
        create_accumulator(0, policy="clip")


def test_make_accumulators_are_independent(constants):
    accs = make_accumulators(3, 100, constants=constants)

    assert len(accs) == 3
    assert accs[0]() == 210
    assert accs[0]() == 320
    assert accs[1]() == 210
    assert accs[2]() == 210


def test_make_accumulators_negative_count():
    with pytest.raises(ValueError):
        make_accumulators(-1)


def test_synchronized_accumulator_counts_every_call(constants):
    acc = create_accumulator(0, constants=constants, synchronized=True)
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = acc()
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(results)) == 800
    assert max(results) == 110 * 800


def test_invocation_is_logged(constants, captured_logs):
    acc = create_accumulator(0, constants=constants)
    acc()

    messages = [r["message"] for r in captured_logs]
    assert "[Accumulator] state=110" in messages
