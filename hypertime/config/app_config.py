#!filepath: hypertime/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .simulation_config import SimulationConfig

LOG_LEVEL_ENV = "HYPERTIME_LOG_LEVEL"


def default_config_path() -> str:
    """
    Packaged default: hypertime/config/base.yml (next to this file).
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    simulation: SimulationConfig = SimulationConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to the packaged base.yml
        - HYPERTIME_LOG_LEVEL overrides log.level
        """
        # 1) .env from the current working directory, if any
        load_dotenv()

        # 2) resolve config path
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) read YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            raw.setdefault("log", {})
            raw["log"]["level"] = level

        return cls(**raw)
