from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from triversi.engine.errors import ConfigError


class Settings(BaseSettings):
    # Board
    edge_length: int = 14

    # Display only: spacing between lattice points and player marks
    distance: int = 3
    player_marks: str = "1,2,3"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TRIVERSI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic root handler at *level* (defaults to settings.log_level)."""
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level {name!r}", name)
    logging.basicConfig(level=level)


settings = Settings()
