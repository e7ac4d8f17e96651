from __future__ import annotations

from loguru import logger
from PyQt6.QtCore import QObject, QTimer, QUrl
from PyQt6.QtGui import QAction, QColor, QDesktopServices, QIcon, QPixmap
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from dayplan.core.assets import ensure_default_sounds
from dayplan.core.config import load_config
from dayplan.core.settings import RuntimeSettings
from dayplan.core.tick import TickDriver
from dayplan.ui.main_window import MainWindow
from dayplan.ui.sound import QtSoundPlayer


TICK_INTERVAL_MS = 1000
MESSAGE_TIMEOUT_MS = 3000


def make_tray_icon() -> QIcon:
    pixmap = QPixmap(16, 16)
    pixmap.fill(QColor("blue"))
    return QIcon(pixmap)


class TrayNotifier:
    """Balloon messages through the tray icon; logs when the tray can't show them."""

    def __init__(self, tray: QSystemTrayIcon) -> None:
        self.tray = tray

    def notify(self, title: str, message: str) -> None:
        self._show(title, message, QSystemTrayIcon.MessageIcon.Information)

    def warn(self, title: str, message: str) -> None:
        self._show(title, message, QSystemTrayIcon.MessageIcon.Warning)

    def _show(self, title: str, message: str, icon: QSystemTrayIcon.MessageIcon) -> None:
        if self.tray.isVisible() and QSystemTrayIcon.supportsMessages():
            self.tray.showMessage(title, message, icon, MESSAGE_TIMEOUT_MS)
            return
        logger.info("{}: {}", title, message)


class TrayController(QObject):
    def __init__(self, runtime: RuntimeSettings, app: QApplication) -> None:
        super().__init__()
        self.runtime = runtime
        self.app = app
        self.settings = load_config(runtime.config_path)
        ensure_default_sounds(runtime.base_dir, self.settings)

        self.tray = QSystemTrayIcon(make_tray_icon(), self)
        self.notifier = TrayNotifier(self.tray)
        self.sound_player = QtSoundPlayer(
            runtime.base_dir,
            self.settings,
            on_missing=self._on_missing_sound,
            parent=self,
        )
        self.driver = TickDriver(
            self.settings,
            self.sound_player,
            self.notifier,
            threshold_mode=runtime.threshold_mode,
        )
        self.window = MainWindow(self.driver.localizer)
        self.window.cue_requested.connect(self.driver.play_cue)
        self.window.set_developer_mode_visible(self.settings.dev_mode)
        self.driver.display_sink = self.window

        self._build_menu()
        self.tray.setToolTip(self.driver.localizer.get("TrayLoading"))
        self.tray.activated.connect(self._on_tray_activated)
        self.tray.show()

        self.timer = QTimer(self)
        self.timer.setInterval(TICK_INTERVAL_MS)
        self.timer.timeout.connect(self._on_tick)
        self.timer.start()
        self._on_tick()

    def _build_menu(self) -> None:
        self.menu = QMenu()
        self.open_action = QAction(self.menu)
        self.edit_action = QAction(self.menu)
        self.reload_action = QAction(self.menu)
        self.exit_action = QAction(self.menu)
        self.open_action.triggered.connect(self.show_window)
        self.edit_action.triggered.connect(self.edit_config)
        self.reload_action.triggered.connect(self.reload_config)
        self.exit_action.triggered.connect(self.exit)
        self.menu.addAction(self.open_action)
        self.menu.addAction(self.edit_action)
        self.menu.addAction(self.reload_action)
        self.menu.addSeparator()
        self.menu.addAction(self.exit_action)
        self._set_menu_labels()
        self.tray.setContextMenu(self.menu)

    def _set_menu_labels(self) -> None:
        localizer = self.driver.localizer
        self.open_action.setText(localizer.get("OpenMenu"))
        self.edit_action.setText(localizer.get("EditConfig"))
        self.reload_action.setText(localizer.get("ReloadConfig"))
        self.exit_action.setText(localizer.get("Exit"))

    def _on_tick(self) -> None:
        result = self.driver.tick()
        self.tray.setToolTip(self.driver.status_text(result.state))

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.show_window()

    def _on_missing_sound(self, relative: str) -> None:
        self.notifier.warn(self.driver.localizer.get("MissingSoundFileTitle"), f"Missing file: {relative}")

    def show_window(self) -> None:
        self.window.showNormal()
        self.window.raise_()
        self.window.activateWindow()

    def edit_config(self) -> None:
        path = self.runtime.config_path
        target = path if path.exists() else self.runtime.base_dir
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(target))):
            logger.warning("Could not open {}", target)
            localizer = self.driver.localizer
            self.notifier.warn(localizer.get("ErrorTitle"), localizer.get("ConfigOpenFailed"))

    def reload_config(self) -> None:
        self.settings = load_config(self.runtime.config_path, fallback=self.settings)
        ensure_default_sounds(self.runtime.base_dir, self.settings)
        self.sound_player.settings = self.settings
        self.driver.reload(self.settings)
        self.window.set_developer_mode_visible(self.settings.dev_mode)
        self.window.set_language_labels()
        self._set_menu_labels()
        self.notifier.notify(
            self.driver.localizer.get("ConfigurationReloaded"),
            f"{self.settings.work_minutes}m work, {self.settings.break_minutes}m break. DevMode={self.settings.dev_mode}",
        )
        self._on_tick()

    def exit(self) -> None:
        self.timer.stop()
        self.tray.hide()
        self.window.allow_close = True
        self.window.close()
        self.app.quit()
