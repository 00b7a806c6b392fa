from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FastballSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FASTBALL_", case_sensitive=False)

    environment: str | None = None
    root: Path = Field(default_factory=Path.cwd)
    file_mode: int = 0o644

    @field_validator("environment", mode="before")
    @classmethod
    def _blank_environment_is_default(cls, value: object) -> object:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal_mode(cls, value: object) -> object:
        # FASTBALL_FILE_MODE=0600 means octal, as it does for chmod
        if isinstance(value, str):
            return int(value, 8)
        return value
