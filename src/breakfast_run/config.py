"""Configuration for Breakfast Run."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.text import LINE_WRAP_LENGTH


@dataclass
class Config:
    """Game configuration."""

    data_path: Path | None = None
    wrap_width: int = LINE_WRAP_LENGTH
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        data_path = os.getenv("BREAKFAST_RUN_DATA_PATH")
        log_file = os.getenv("BREAKFAST_RUN_LOG_FILE")

        return cls(
            data_path=Path(data_path) if data_path else None,
            wrap_width=int(os.getenv("BREAKFAST_RUN_WRAP_WIDTH", str(cls.wrap_width))),
            log_level=os.getenv("BREAKFAST_RUN_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("BREAKFAST_RUN_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
