from __future__ import annotations

from html import escape

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from dayplan.core.dispatcher import Cue
from dayplan.core.localization import Localizer
from dayplan.core.schedule import ScheduleSpan
from dayplan.ui.styles import HIGHLIGHT_COLOR


class MainWindow(QMainWindow):
    cue_requested = pyqtSignal(object)

    def __init__(self, localizer: Localizer) -> None:
        super().__init__()
        self.setWindowTitle("Day Plan")
        self.resize(360, 560)

        self.localizer = localizer
        self.allow_close = False
        self._spans: list[ScheduleSpan] = []
        self._status = "-"
        self._remaining = "-"

        self._build_ui()
        self.set_language_labels()
        self.set_developer_mode_visible(False)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.status_label = QLabel()
        self.status_label.setObjectName("StatusLabel")
        self.remaining_label = QLabel()
        self.remaining_label.setObjectName("RemainingLabel")
        self.schedule_title = QLabel()
        self.schedule_title.setObjectName("SubtleTitle")
        self.schedule_view = QTextEdit()
        self.schedule_view.setObjectName("ScheduleView")
        self.schedule_view.setReadOnly(True)

        layout.addWidget(self.status_label)
        layout.addWidget(self.remaining_label)
        layout.addWidget(self.schedule_title)
        layout.addWidget(self.schedule_view, 1)

        dev_row = QHBoxLayout()
        self.dev_buttons: dict[Cue, QPushButton] = {}
        for cue in Cue:
            button = QPushButton(f"Play {cue.value}")
            button.clicked.connect(lambda _checked=False, c=cue: self.cue_requested.emit(c))
            dev_row.addWidget(button)
            self.dev_buttons[cue] = button
        layout.addLayout(dev_row)

    def set_language_labels(self) -> None:
        self.schedule_title.setText(self.localizer.get("ScheduleTitle"))
        self._render_status()

    def set_developer_mode_visible(self, visible: bool) -> None:
        for button in self.dev_buttons.values():
            button.setVisible(visible)

    def update_status(self, status: str, remaining: str) -> None:
        self._status = status
        self._remaining = remaining
        self._render_status()

    def update_schedule(self, spans: list[ScheduleSpan]) -> None:
        if spans == self._spans:
            return
        self._spans = list(spans)
        lines = []
        for span in spans:
            text = escape(span.text)
            if span.highlighted:
                text = f'<span style="background-color: {HIGHLIGHT_COLOR};">{text}</span>'
            lines.append(text)
        self.schedule_view.setHtml("<pre>" + "\n".join(lines) + "</pre>")

    def _render_status(self) -> None:
        self.status_label.setText(f"{self.localizer.get('StatusPrefix')} {self._status}")
        self.remaining_label.setText(f"{self.localizer.get('RemainingPrefix')} {self._remaining}")

    def closeEvent(self, event) -> None:  # noqa: N802
        if self.allow_close:
            event.accept()
            return
        event.ignore()
        self.hide()
