"""
Environment-driven settings for the DFA engine.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_dir: Optional[str] = Field(default=None, description="Directory for log files")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)  # 10MB
    log_backup_count: int = Field(default=5, ge=0)
    console_output: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from DFA_* environment variables."""
        env = os.environ if environ is None else environ
        values = {}

        if "DFA_LOG_LEVEL" in env:
            values["log_level"] = env["DFA_LOG_LEVEL"]
        if env.get("DFA_LOG_DIR"):
            values["log_dir"] = env["DFA_LOG_DIR"]
        if "DFA_LOG_MAX_BYTES" in env:
            values["log_max_bytes"] = env["DFA_LOG_MAX_BYTES"]
        if "DFA_LOG_BACKUP_COUNT" in env:
            values["log_backup_count"] = env["DFA_LOG_BACKUP_COUNT"]
        if "DFA_LOG_CONSOLE" in env:
            values["console_output"] = env["DFA_LOG_CONSOLE"].strip().lower() in _TRUTHY

        return cls(**values)
