from __future__ import annotations

from pathlib import Path
from typing import Callable

from loguru import logger
from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from dayplan.core.assets import get_asset_path
from dayplan.core.config import AppSettings
from dayplan.core.dispatcher import Cue


class QtSoundPlayer(QObject):
    """Fire-and-forget playback of cue sounds; players live until they stop."""

    def __init__(
        self,
        base_dir: Path,
        settings: AppSettings,
        on_missing: Callable[[str], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.base_dir = base_dir
        self.settings = settings
        self._on_missing = on_missing
        self._active: dict[QMediaPlayer, QAudioOutput] = {}

    def play(self, cue: Cue) -> bool:
        relative = self.settings.sound_path(cue)
        if not relative.strip():
            return False
        path = get_asset_path(self.base_dir, relative)
        if not path.is_file():
            logger.warning("Missing sound file for {}: {}", cue.value, relative)
            if self._on_missing:
                self._on_missing(relative)
            return False

        player = QMediaPlayer(self)
        output = QAudioOutput(self)
        player.setAudioOutput(output)
        player.playbackStateChanged.connect(lambda state, p=player: self._on_state_changed(p, state))
        player.errorOccurred.connect(lambda _error, text, p=player: self._on_error(p, text))
        player.setSource(QUrl.fromLocalFile(str(path)))
        self._active[player] = output
        player.play()
        return True

    def _on_state_changed(self, player: QMediaPlayer, state: QMediaPlayer.PlaybackState) -> None:
        if state == QMediaPlayer.PlaybackState.StoppedState:
            self._release(player)

    def _on_error(self, player: QMediaPlayer, text: str) -> None:
        logger.warning("Sound playback failed: {}", text)
        self._release(player)

    def _release(self, player: QMediaPlayer) -> None:
        output = self._active.pop(player, None)
        if output is None:
            return
        player.deleteLater()
        output.deleteLater()
