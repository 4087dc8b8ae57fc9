"""Runtime settings and logging bootstrap."""

import logging
import os
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from RestoOPS_V1.utils import load_and_validate

CONFIG_ENV_VAR = "RESTOOPS_CONFIG"
LOG_LEVEL_ENV_VAR = "RESTOOPS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def normalize_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseModel):
    """Tunable knobs of the management system.

    Example file:
    {
        "log_level": "INFO",
        "reservation_hold_minutes": 0,
        "strict_transitions": false
    }
    """

    log_level: str = "WARNING"
    # Length of the slot blocked on a table when a reservation is registered.
    # 0 reproduces the historical behaviour (same-instant conflicts only).
    reservation_hold_minutes: int = Field(default=0, ge=0)
    strict_transitions: bool = False
    currency_symbol: str = "$"
    seed_path: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return normalize_level(value)

    @property
    def reservation_hold(self) -> timedelta:
        return timedelta(minutes=self.reservation_hold_minutes)


def load_settings(path: Optional[Union[Path, str]] = None) -> Settings:
    """Load settings from JSON (argument first, then env var), else defaults.

    Args:
        path: Explicit JSON file. Falls back to `$RESTOOPS_CONFIG`.

    Returns:
        Validated settings, with `$RESTOOPS_LOG_LEVEL` applied on top.

    Raises:
        FileNotFoundError: If the configured file does not exist.
        pydantic.ValidationError: If the file content is invalid.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    settings = load_and_validate(Path(path), Settings) if path else Settings()

    level_override = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level_override:
        settings = settings.model_copy(
            update={"log_level": normalize_level(level_override)}
        )
    return settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once for the console app."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)
