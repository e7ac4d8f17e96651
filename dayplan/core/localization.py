from __future__ import annotations

"""Таблицы строк интерфейса (en/pl) с откатом на другой язык."""

from dayplan.core.cycle import Phase


DEFAULT_LANGUAGE = "en"

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "OpenMenu": "Open Schedule",
        "EditConfig": "Edit configuration",
        "ReloadConfig": "Reload configuration",
        "Exit": "Exit",
        "TrayLoading": "Day Scheduler (Loading...)",
        "StatusPrefix": "Status:",
        "RemainingPrefix": "Remaining:",
        "WorkStatus": "Work",
        "BreakStatus": "Break",
        "WorkLabel": "work",
        "BreakLabel": "break",
        "ScheduleTitle": "Today's schedule",
        "MissingSoundFileTitle": "Missing sound file",
        "ConfigurationReloaded": "Configuration reloaded",
        "ErrorTitle": "Error",
        "ConfigOpenFailed": "Unable to open configuration file.",
    },
    "pl": {
        "OpenMenu": "Otwórz Harmonogram",
        "EditConfig": "Edytuj konfigurację",
        "ReloadConfig": "Przeładuj konfigurację",
        "Exit": "Zamknij Harmonogram",
        "TrayLoading": "Harmonogram Dnia (Ładowanie...)",
        "StatusPrefix": "Status:",
        "RemainingPrefix": "Pozostało:",
        "WorkStatus": "Praca",
        "BreakStatus": "Przerwa",
        "WorkLabel": "praca",
        "BreakLabel": "przerwa",
        "ScheduleTitle": "Harmonogram dnia",
        "MissingSoundFileTitle": "Brak pliku dźwiękowego",
        "ConfigurationReloaded": "Przeładowano konfigurację",
        "ErrorTitle": "Błąd",
        "ConfigOpenFailed": "Nie można otworzyć pliku konfiguracji.",
    },
}


class Localizer:
    def __init__(self, language: str | None = DEFAULT_LANGUAGE) -> None:
        self.language = language

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str | None) -> None:
        normalized = (value or DEFAULT_LANGUAGE).strip().lower()
        self._language = normalized if normalized in STRINGS else DEFAULT_LANGUAGE

    def get(self, key: str) -> str:
        """Строка на текущем языке; затем на любом другом; затем сам ключ."""
        table = STRINGS[self._language]
        if key in table:
            return table[key]
        for language, other in STRINGS.items():
            if language != self._language and key in other:
                return other[key]
        return key

    def phase_status(self, phase: Phase) -> str:
        return self.get("WorkStatus" if phase == Phase.WORK else "BreakStatus")

    def schedule_labels(self) -> dict[Phase, str]:
        return {Phase.WORK: self.get("WorkLabel"), Phase.BREAK: self.get("BreakLabel")}
