"""Configuration service for pomodoro-cli.

Defaults live in ``config.json`` under the platform config directory. The
file is optional; CLI flags that were given explicitly override it, and the
merged result is validated as a :class:`PomodoroConfig`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from pomodoro_cli.models.config_models import PomodoroConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or fails validation."""


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` lines."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        message = item["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}")
    return "; ".join(parts)


class ConfigService:
    """Loads, merges and saves timer defaults."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomodoro_cli"))
        self.config_path = self.config_dir / "config.json"
        self._config: PomodoroConfig | None = None

    @property
    def config(self) -> PomodoroConfig:
        """Get or load the stored defaults."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> PomodoroConfig:
        """Load defaults from disk; built-in defaults when no file exists."""
        try:
            raw = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No config file at %s, using defaults", self.config_path)
            return PomodoroConfig()
        except OSError as e:
            raise ConfigError(f"Failed to read {self.config_path}: {e}") from e

        try:
            config = PomodoroConfig.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid config file {self.config_path}: "
                f"{describe_validation_error(e)}"
            ) from e

        logger.debug("Loaded config from %s", self.config_path)
        return config

    def resolve(self, **overrides: Any) -> PomodoroConfig:
        """Merge explicitly given values over the stored defaults.

        ``None`` values mean "not given" and are skipped.
        """
        values = self.config.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return PomodoroConfig.model_validate(values)
        except ValidationError as e:
            raise ConfigError(describe_validation_error(e)) from e

    def save_config(self, config: PomodoroConfig) -> Path:
        """Persist *config* as the new defaults."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                config.model_dump_json(indent=4), encoding="utf-8"
            )
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

        self._config = config
        logger.info("Saved config to %s", self.config_path)
        return self.config_path


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    return ConfigService()
