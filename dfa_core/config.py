"""
Runtime configuration.

Settings come from an optional YAML file, then environment variables
override individual keys:

    DFA_CONFIG            path to the YAML file
    DFA_LOG_LEVEL         DEBUG, INFO, WARNING, ERROR
    DFA_LOG_DIR           directory for rotating JSON logs (unset = console only)
    DFA_TRUNCATE_SYMBOLS  "1"/"true" to keep only the first character of
                          multi-character transition symbols
    DFA_MAX_WORD_LENGTH   longest word the CLI will run
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

_ENV_KEYS = {
    "DFA_LOG_LEVEL": "log_level",
    "DFA_LOG_DIR": "log_dir",
    "DFA_TRUNCATE_SYMBOLS": "truncate_symbols",
    "DFA_MAX_WORD_LENGTH": "max_word_length",
}


class Settings(BaseModel):
    log_level: str = Field(default="WARNING", description="Root logging level")
    log_dir: Optional[str] = Field(default=None, description="Rotating log directory")
    truncate_symbols: bool = Field(default=False, description="Legacy symbol truncation")
    max_word_length: int = Field(default=10_000, gt=0)

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"Unknown log level: {v}")
        return v


def _find_config(config_path: Optional[str]) -> Optional[Path]:
    if config_path:
        return Path(config_path)

    possible_paths = [
        os.environ.get("DFA_CONFIG"),
        os.path.join(os.getcwd(), "config", "dfa.yaml"),
    ]
    for path in possible_paths:
        if path and os.path.exists(path):
            return Path(path)
    return None


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML (if any) and the environment.
    An explicit ``config_path`` that does not exist raises FileNotFoundError.
    """
    data: Dict[str, Any] = {}

    path = _find_config(config_path)
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

    for env_key, field in _ENV_KEYS.items():
        value = os.environ.get(env_key)
        if value is not None and value != "":
            data[field] = value

    return Settings(**data)
