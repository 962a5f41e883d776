#!filepath: funclab/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import OperationNotFoundError
from .utils.intmath import OverflowPolicy
from .accumulator import (
    DEFAULT_CONSTANTS,
    SharedConstants,
    create_accumulator,
    make_accumulators,
)
from .operations import (
    OperationRegistry,
    apply_via_higher_order,
    build_default_registry,
    make_multiplier,
)
from .callbacks import fetch_with_callback
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "OperationNotFoundError",
    "OverflowPolicy",
    "DEFAULT_CONSTANTS", "SharedConstants",
    "create_accumulator", "make_accumulators",
    "OperationRegistry", "apply_via_higher_order",
    "build_default_registry", "make_multiplier",
    "fetch_with_callback",
    "AppConfig",
]
