from .app_config import AppConfig
from .log_config import LogConfig
from .accumulator_config import AccumulatorConfig

__all__ = ["AppConfig", "LogConfig", "AccumulatorConfig"]
