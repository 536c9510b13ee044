"""Services for pomodoro-cli: configuration and phase-boundary cues."""

from .config_service import ConfigError, ConfigService, get_config_service
from .notifier import Notifier

__all__ = [
    "ConfigError",
    "ConfigService",
    "Notifier",
    "get_config_service",
]
