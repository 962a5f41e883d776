# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from funclab.accumulator import SharedConstants
from funclab.operations.registry import OperationRegistry


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def captured_logs():
    """
    Collect formatted loguru records for the duration of one test.
    """
    records = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def constants() -> SharedConstants:
    return SharedConstants(k1=10, k2=100)


@pytest.fixture
def empty_registry() -> OperationRegistry:
    return OperationRegistry()
