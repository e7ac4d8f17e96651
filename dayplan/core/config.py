from __future__ import annotations

"""Чтение и запись config.json с откатом на значения по умолчанию."""

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_pascal

from dayplan.core.cycle import CycleConfig
from dayplan.core.dispatcher import Cue, NotificationTexts


CONFIG_FILENAME = "config.json"
SOUNDS_DIRNAME = "sounds"

CUE_FIELDS: dict[Cue, str] = {
    Cue.END_OF_WORK: "end_of_work",
    Cue.WORK_ENDING_SOON: "work_ending_soon",
    Cue.START_BREAK: "start_break",
    Cue.BREAK_ENDING_SOON: "break_ending_soon",
    Cue.START_WORK: "start_work",
}


class _PascalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class SoundSettings(_PascalModel):
    end_of_work: str = f"{SOUNDS_DIRNAME}/end_of_work.wav"
    work_ending_soon: str = f"{SOUNDS_DIRNAME}/work_ending_soon.wav"
    start_break: str = f"{SOUNDS_DIRNAME}/start_break.wav"
    break_ending_soon: str = f"{SOUNDS_DIRNAME}/break_ending_soon.wav"
    start_work: str = f"{SOUNDS_DIRNAME}/start_work.wav"


class NotificationSettings(_PascalModel):
    start_break_title: str = "Now break"
    start_break_message: str = "Enjoy your break"
    start_work_title: str = "Now work"
    start_work_message: str = "Back to work"


class AppSettings(_PascalModel):
    work_minutes: int = 90
    break_minutes: int = 30
    dev_mode: bool = False
    language: str | None = "en"
    sounds: SoundSettings = Field(default_factory=SoundSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)

    def cycle_config(self) -> CycleConfig:
        return CycleConfig.from_minutes(self.work_minutes, self.break_minutes)

    def notification_texts(self) -> NotificationTexts:
        return NotificationTexts(
            start_break_title=self.notifications.start_break_title,
            start_break_message=self.notifications.start_break_message,
            start_work_title=self.notifications.start_work_title,
            start_work_message=self.notifications.start_work_message,
        )

    def sound_path(self, cue: Cue) -> str:
        return getattr(self.sounds, CUE_FIELDS[cue])


def save_config(path: str | Path, settings: AppSettings) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = settings.model_dump(by_alias=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def load_config(path: str | Path, fallback: AppSettings | None = None) -> AppSettings:
    """Loads settings; a missing file is created with defaults.

    An unreadable or invalid file never raises: `fallback` (the last good
    settings) is returned when given, otherwise the defaults.
    """
    path = Path(path)
    if not path.exists():
        settings = AppSettings()
        try:
            save_config(path, settings)
            logger.info("Created default configuration at {}", path)
        except OSError as exc:
            logger.warning("Could not write default configuration {}: {}", path, exc)
        return settings

    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
        settings = AppSettings.model_validate(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Invalid configuration {}, using {}: {}", path, "last good" if fallback else "defaults", exc)
        return fallback if fallback is not None else AppSettings()

    logger.info("Loaded configuration: {}m work, {}m break", settings.work_minutes, settings.break_minutes)
    return settings
