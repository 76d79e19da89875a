#!filepath: hypertime/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    Simulation logger
    ---------------------------------------
    - importing the package leaves loguru sinks untouched (library use)
    - configure(LogConfig) installs the stderr or daily-rotated file sink
    - function-level exception / timing decorator
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

    def _install_sink(self) -> None:
        """
        Replace every loguru sink with the one this instance describes.
        Only reached through configure(): an application entry point owns sinks.
        """
        logger.remove()

        if self.log_dir is None:
            logger.add(sink=sys.stderr, level=self.level, format=LOG_FORMAT)
            return

        os.makedirs(self.log_dir, exist_ok=True)
        logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format=LOG_FORMAT,
            backtrace=True,
            diagnose=True,
        )
        logger.info("-----------Logger initialized: {}-----------", self.log_dir)

    def configure(self, cfg) -> None:
        """
        Point the global logger at a LogConfig (CLI entry point).
        """
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._install_sink()

    # ---------- basic methods ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_time: bool = True,
    ) -> Callable:
        """
        Log (and re-raise) any exception escaping the wrapped function.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# global logs (sinks are installed only by logs.configure)
logs = Logging()
