# Area: Shared
"""
fair_rps.config — Settings from .env and environment
=====================================================

Settings are read from an optional ``.env`` file (python-dotenv) and
the process environment, then validated with pydantic.

    FAIR_RPS_KEY_BYTES=32
    FAIR_RPS_ALGORITHM=sha3_256
    FAIR_RPS_LOG_FILE=fair_rps.log
    FAIR_RPS_LOG_LEVEL=INFO
    FAIR_RPS_CONSOLE_LOG_LEVEL=WARNING
    FAIR_RPS_COLUMN_WIDTH=12
"""

from __future__ import annotations
from typing import Any, Dict, Literal, Mapping, Optional
import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .commitment import DEFAULT_ALGORITHM, DEFAULT_KEY_BYTES, MIN_KEY_BYTES
from .errors import ConfigError
from .help_matrix import DEFAULT_COLUMN_WIDTH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_MAPPINGS = {
    "FAIR_RPS_KEY_BYTES": "key_bytes",
    "FAIR_RPS_ALGORITHM": "algorithm",
    "FAIR_RPS_LOG_FILE": "log_file",
    "FAIR_RPS_LOG_LEVEL": "log_level",
    "FAIR_RPS_CONSOLE_LOG_LEVEL": "console_log_level",
    "FAIR_RPS_COLUMN_WIDTH": "column_width",
}


class GameSettings(BaseModel):
    """Validated runtime settings."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    key_bytes: int = Field(default=DEFAULT_KEY_BYTES, ge=MIN_KEY_BYTES)
    algorithm: Literal["sha256", "sha3_256", "sha512", "sha3_512"] = DEFAULT_ALGORITHM
    log_file: Optional[str] = "fair_rps.log"
    log_level: LogLevel = "INFO"
    console_log_level: LogLevel = "WARNING"
    column_width: int = Field(default=DEFAULT_COLUMN_WIDTH, ge=4)

    @field_validator("log_level", "console_log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_disables_file(cls, value: Any) -> Any:
        return None if value == "" else value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def console_log_level_number(self) -> int:
        return logging.getLevelName(self.console_log_level)


def build_settings(values: Mapping[str, Any]) -> GameSettings:
    """Validate a dict of settings, raising ConfigError with readable messages."""
    try:
        return GameSettings(**values)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(errors) from e


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
    dotenv: bool = True,
) -> GameSettings:
    """
    Load settings from ``.env``, the environment, then explicit overrides.

    Overrides with value ``None`` are ignored so CLI flags that were not
    given fall through to the environment.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    source = os.environ if env is None else env

    values: Dict[str, Any] = {}
    for env_key, setting in ENV_MAPPINGS.items():
        if env_key in source:
            values[setting] = source[env_key]

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    return build_settings(values)
