from __future__ import annotations

"""Пути к звуковым ассетам и генерация звуков по умолчанию (синусоида WAV)."""

import math
import wave
from array import array
from pathlib import Path

from loguru import logger

from dayplan.core.config import AppSettings
from dayplan.core.dispatcher import Cue


SAMPLE_RATE = 44100
AMPLITUDE = 0.25 * 32767
DEFAULT_TONE_SECONDS = 0.9

CUE_FREQUENCIES: dict[Cue, int] = {
    Cue.END_OF_WORK: 523,
    Cue.WORK_ENDING_SOON: 784,
    Cue.START_BREAK: 659,
    Cue.BREAK_ENDING_SOON: 880,
    Cue.START_WORK: 440,
}


def get_asset_path(base_dir: Path, relative: str) -> Path:
    """Преобразует путь из конфигурации в абсолютный относительно `base_dir`."""
    return base_dir / relative


def asset_exists(base_dir: Path, relative: str) -> bool:
    return bool(relative.strip()) and get_asset_path(base_dir, relative).is_file()


def write_sine_wav(path: Path, frequency: int, seconds: float = DEFAULT_TONE_SECONDS) -> None:
    """Пишет моно 16-bit PCM WAV с чистым тоном заданной частоты."""
    path.parent.mkdir(parents=True, exist_ok=True)
    samples = int(SAMPLE_RATE * seconds)
    step = 2 * math.pi * frequency / SAMPLE_RATE
    frames = array("h", (int(AMPLITUDE * math.sin(step * n)) for n in range(samples)))
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(SAMPLE_RATE)
        out.writeframes(frames.tobytes())


def ensure_default_sounds(base_dir: Path, settings: AppSettings) -> list[Path]:
    """Создает недостающие звуковые файлы; возвращает список созданных путей."""
    created: list[Path] = []
    for cue, frequency in CUE_FREQUENCIES.items():
        relative = settings.sound_path(cue)
        if not relative.strip() or asset_exists(base_dir, relative):
            continue
        path = get_asset_path(base_dir, relative)
        try:
            write_sine_wav(path, frequency)
        except OSError as exc:
            logger.warning("Could not generate default sound {}: {}", path, exc)
            continue
        created.append(path)
    if created:
        logger.info("Generated {} default sound file(s)", len(created))
    return created
