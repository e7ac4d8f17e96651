from __future__ import annotations

from PyQt6.QtWidgets import QApplication


HIGHLIGHT_COLOR = "#b9e8b0"

THEME_QSS = """
QWidget {
    background: #f4f1ee;
    color: #2f2a26;
    font-size: 13px;
}

QMainWindow {
    background: #f4f1ee;
}

QLabel {
    background: transparent;
}

QLabel#StatusLabel {
    font-size: 20px;
    font-weight: 700;
    color: #2a2521;
}

QLabel#RemainingLabel {
    font-size: 34px;
    font-weight: 700;
    color: #2d2824;
}

QLabel#SubtleTitle {
    font-size: 14px;
    font-weight: 600;
    color: #6f645b;
}

QTextEdit#ScheduleView {
    background: #fffaf5;
    border: none;
    border-radius: 12px;
    padding: 6px;
    font-family: monospace;
}

QPushButton {
    background: #f6e4d6;
    border: none;
    border-radius: 10px;
    padding: 6px 12px;
}

QPushButton:hover {
    background: #eecfb8;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
