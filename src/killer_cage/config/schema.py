"""Pydantic schema for killer-cage settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from killer_cage.engine import DEFAULT_MAX_CELL_VALUE

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CageSettings(BaseModel):
    """Validated runtime settings with defaults."""

    model_config = ConfigDict(extra="forbid")

    max_cell_value: int = Field(default=DEFAULT_MAX_CELL_VALUE, ge=0)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        return level
