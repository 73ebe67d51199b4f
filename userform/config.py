"""
Runtime configuration for userform.

Values come from the environment (a .env file is loaded by main.py) with
defaults suitable for local use.

File: config.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from .database.common import LOCAL_DB_PATH
from .intake.pagination import DEFAULT_ROWS_PER_PAGE
from .randomuser.client import RANDOM_USER_URL

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'


@dataclass
class AppConfig:
    """Settings for the store, the provider and the listing."""

    db_path: Path = field(default_factory=lambda: LOCAL_DB_PATH)
    randomuser_url: str = RANDOM_USER_URL
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE
    request_timeout: Optional[float] = None  # None = wait indefinitely
    log_dir: Path = field(default_factory=lambda: Path("logs"))

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)
        if self.rows_per_page < 1:
            raise ValueError(f"rows_per_page must be at least 1, got {self.rows_per_page}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build a config from USERFORM_* environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        config = cls()

        if env.get("USERFORM_DB_PATH"):
            config.db_path = Path(env["USERFORM_DB_PATH"])
        if env.get("USERFORM_RANDOMUSER_URL"):
            config.randomuser_url = env["USERFORM_RANDOMUSER_URL"]
        if env.get("USERFORM_ROWS_PER_PAGE"):
            config.rows_per_page = int(env["USERFORM_ROWS_PER_PAGE"])
        if env.get("USERFORM_REQUEST_TIMEOUT"):
            config.request_timeout = float(env["USERFORM_REQUEST_TIMEOUT"])
        if env.get("USERFORM_LOG_DIR"):
            config.log_dir = Path(env["USERFORM_LOG_DIR"])

        config.__post_init__()
        return config

    def to_dict(self) -> dict:
        """Convert to dict for logging."""
        return {
            "db_path": str(self.db_path),
            "randomuser_url": self.randomuser_url,
            "rows_per_page": self.rows_per_page,
            "request_timeout": self.request_timeout,
            "log_dir": str(self.log_dir),
        }


def setup_logging(log_dir: Path, level: int = logging.INFO) -> Path:
    """
    Log to a dated file in log_dir and to the console.

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"userform_{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
    return log_file
