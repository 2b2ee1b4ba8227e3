"""
Configuration for ReadingRoom.

Settings come from, in increasing priority:
- Defaults below
- An optional YAML file (config.yaml in the project root)
- Environment variables READINGROOM_<FIELD>, after loading .env
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_PATH = PROJECT_ROOT / "config.yaml"
ENV_PREFIX = "READINGROOM_"

DEFAULT_DATA_DIR = Path.home() / ".readingroom"
DEFAULT_DB_PATH = DEFAULT_DATA_DIR / "assignments.db"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    db_path: Path = DEFAULT_DB_PATH
    hidden_letter_placeholder: str = Field(default="_", min_length=1, max_length=1)
    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def log_level_known(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def _read_env() -> dict[str, Any]:
    values = {}
    for name in Settings.model_fields:
        value = os.environ.get(ENV_PREFIX + name.upper())
        if value is not None:
            values[name] = value
    return values


def load_settings(config_path: Optional[Path] = None, env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML and the environment.

    Args:
        config_path: YAML file (default: config.yaml in the project root)
        env_file: .env file to load first (default: .env in the project root)

    Raises:
        pydantic.ValidationError: If a value is invalid
        yaml.YAMLError: If the YAML file cannot be parsed
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")
    raw = _read_yaml(config_path or CONFIG_PATH)
    known = set(Settings.model_fields)
    values = {k: v for k, v in raw.items() if k in known}
    values.update(_read_env())
    return Settings(**values)


def setup_logging(settings: Settings):
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
