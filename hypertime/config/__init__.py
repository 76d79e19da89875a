from .app_config import AppConfig
from .log_config import LogConfig
from .simulation_config import SimulationConfig

__all__ = ["AppConfig", "LogConfig", "SimulationConfig"]
