"""REPL settings, read from the environment (and an optional .env file)."""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

HISTORY_FILE = os.path.expanduser("~/.calc_parser_history")

# Environment variable -> Settings field
ENV_VARS: Dict[str, str] = {
    "CALC_PROMPT": "prompt",
    "CALC_HISTORY_FILE": "history_file",
    "CALC_SHOW_TREE": "show_tree",
    "CALC_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Model for REPL configuration."""
    prompt: str = Field(">> ", description="Prompt shown before each line")
    history_file: str = Field(HISTORY_FILE, description="File backing the line history")
    show_tree: bool = Field(False, description="Parse each line and print its tree")
    log_level: str = Field("WARNING", description="Root logging level")

    @field_validator('prompt')
    @classmethod
    def prompt_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError('Prompt cannot be empty')
        return v

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None, dotenv: bool = True) -> "Settings":
        """
        Build settings from CALC_* environment variables.

        Args:
            overrides: Field values that take priority over the environment
                (e.g. parsed command-line options); None values are ignored
            dotenv: Whether to load a .env file (searched from the working
                directory upwards) into the environment first

        Returns:
            Validated Settings instance

        Raises:
            pydantic.ValidationError: If a value fails validation
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        values: Dict[str, Any] = {}
        for env_name, field_name in ENV_VARS.items():
            raw = os.getenv(env_name)
            if raw is not None:
                values[field_name] = raw
        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value
        return cls(**values)
