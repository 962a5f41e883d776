#!filepath: funclab/config/app_config.py
import yaml
from pydantic import BaseModel
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from .accumulator_config import AccumulatorConfig
from funclab.utils.logger import logs

# env var -> accumulator field
_ENV_OVERRIDES = {
    "FUNCLAB_K1": "k1",
    "FUNCLAB_K2": "k2",
    "FUNCLAB_INITIAL_STATE": "initial_state",
    "FUNCLAB_POLICY": "policy",
}


def project_root() -> str:
    """
    Project root derived from this file's location:
    funclab/config/app_config.py -> funclab/config -> funclab -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    accumulator: AccumulatorConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to funclab/config/base.yml
        - does not depend on the current working directory
        - FUNCLAB_* environment variables override the accumulator section
        """
        root = project_root()

        # 1) .env at the project root (never overrides real env vars)
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        acc = raw.get("accumulator")
        if acc is not None:
            for env_name, field in _ENV_OVERRIDES.items():
                value = os.getenv(env_name)
                if value is not None:
                    logs.debug(f"[AppConfig] {env_name} overrides accumulator.{field}")
                    acc[field] = value

        return cls(**raw)
