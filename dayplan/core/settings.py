from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dayplan.core.config import CONFIG_FILENAME
from dayplan.core.dispatcher import ThresholdMode


def default_base_dir() -> Path:
    """Каталог с config.json и sounds/ — по умолчанию текущая директория."""
    return Path.cwd()


class RuntimeSettings(BaseSettings):
    base_dir: Path = Field(default_factory=default_base_dir)
    log_level: str = "INFO"
    log_file: str | None = None
    threshold_mode: ThresholdMode = ThresholdMode.EXACT

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DAYPLAN_",
        extra="ignore",
    )

    @property
    def config_path(self) -> Path:
        return self.base_dir / CONFIG_FILENAME
