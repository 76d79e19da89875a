#!filepath: hypertime/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import InvariantError, UserInputError, RulesetParseError
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "InvariantError", "UserInputError", "RulesetParseError",
    "AppConfig",
    "__version__",
]
