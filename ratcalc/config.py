"""Runtime settings, read from the environment (and a .env file if present)."""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ratcalc.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RATCALC_"


class Settings(BaseModel):
    """Settings for the REPL and the numeric boundary."""
    history_file: str = Field("~/.ratcalc_history", validate_default=True)
    prompt: str = "> "
    float_digits: int = Field(10, ge=1, le=30, description="Fractional digits kept when converting to float")
    integer_bits: int = Field(64, ge=8, le=4096, description="Width used for integer truncation")
    log_level: str = "WARNING"

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
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level


def load_settings(**overrides: Any) -> Settings:
    """
    Build Settings from RATCALC_* environment variables.

    Args:
        **overrides: Values that take precedence over the environment; None is ignored

    Returns:
        Validated Settings

    Raises:
        ConfigError: If any value fails validation
    """
    load_dotenv()
    values: Dict[str, Any] = {}
    for name in Settings.model_fields:
        env_value = os.getenv(ENV_PREFIX + name.upper())
        if env_value is not None:
            values[name] = env_value
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
    logger.info(f"Loaded settings: {settings.model_dump()}")
    return settings
