# Copyright (c) 2026 Mohamad Al-Zawahreh (dba Sovereign Systems).
#
# This file is part of the Rescom resource compiler.
#
# LICENSE: DUAL-LICENSED (AGPLv3 or COMMERCIAL).
"""
Process-wide settings, read from RESCOM_* environment variables or a .env file.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RESCOM_",
        env_file=".env",
        extra="ignore",
        validate_assignment=True,
    )

    # Indentation width of generated code when the configuration sets none
    TABULATION_SIZE: int = Field(default=4, ge=0)

    LOG_LEVEL: str = "WARNING"

    # Log parse timings and node counts
    PARSE_DEBUG: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}', expected one of: {', '.join(LOG_LEVELS)}")
        return level


settings = Settings()
