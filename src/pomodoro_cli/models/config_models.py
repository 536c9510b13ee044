"""Configuration model for Pomodoro cycling.

Values come from CLI flags layered over the optional user config file (see
``pomodoro_cli.services.config_service``). The model is frozen: a session's
configuration never changes once the first phase starts.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PomodoroConfig(BaseModel):
    """Durations, long-break cadence and collaborator toggles."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    focus_minutes: int = Field(default=25, gt=0, description="Focus duration")
    short_break_minutes: int = Field(default=5, gt=0, description="Short break")
    long_break_minutes: int = Field(default=15, gt=0, description="Long break")
    sessions_before_long_break: int = Field(
        default=4, description="Focus sessions completed before a long break"
    )
    sound_enabled: bool = Field(default=True)
    notifications_enabled: bool = Field(default=True)
    rounds: int = Field(
        default=0, ge=0, description="Focus rounds to run, 0 runs until stopped"
    )

    @field_validator("sessions_before_long_break")
    @classmethod
    def validate_long_break_cadence(cls, v: int) -> int:
        """The long-break check is a modulo on this value."""
        if v < 1:
            raise ValueError(
                f"sessions before a long break must be at least 1, got {v}"
            )
        return v
