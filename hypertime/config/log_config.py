#!filepath: hypertime/config/log_config.py
from pydantic import BaseModel


class LogConfig(BaseModel):
    dir: str | None = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "WARNING"
