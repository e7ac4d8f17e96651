import json

from dayplan.core.config import AppSettings, load_config, save_config
from dayplan.core.dispatcher import Cue


def test_missing_file_is_created_with_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"

    settings = load_config(path)

    assert path.exists()
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["WorkMinutes"] == 90
    assert raw["BreakMinutes"] == 30
    assert raw["Sounds"]["StartWork"] == "sounds/start_work.wav"
    assert raw["Notifications"]["StartBreakTitle"] == "Now break"
    assert settings.cycle_config().cycle_seconds == 120 * 60


def test_save_and_load_keeps_values(tmp_path) -> None:
    path = tmp_path / "config.json"
    save_config(path, AppSettings(work_minutes=50, break_minutes=10, dev_mode=True, language="pl"))

    settings = load_config(path)

    assert settings.work_minutes == 50
    assert settings.break_minutes == 10
    assert settings.dev_mode is True
    assert settings.language == "pl"


def test_partial_file_fills_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"WorkMinutes": 45, "Sounds": {"EndOfWork": "custom/bell.mp3"}}), encoding="utf-8")

    settings = load_config(path)

    assert settings.work_minutes == 45
    assert settings.break_minutes == 30
    assert settings.sound_path(Cue.END_OF_WORK) == "custom/bell.mp3"
    assert settings.sound_path(Cue.START_BREAK) == "sounds/start_break.wav"


def test_broken_file_falls_back_to_last_good(tmp_path) -> None:
    path = tmp_path / "config.json"
    last_good = AppSettings(work_minutes=25, break_minutes=5)
    path.write_text("{ not json", encoding="utf-8")

    assert load_config(path, fallback=last_good) is last_good
    assert load_config(path).work_minutes == 90


def test_invalid_field_type_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"WorkMinutes": "lots"}), encoding="utf-8")

    settings = load_config(path)

    assert settings == AppSettings()


def test_zero_minutes_are_clamped(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"WorkMinutes": 0, "BreakMinutes": -10}), encoding="utf-8")

    config = load_config(path).cycle_config()

    assert config.work_seconds == 60
    assert config.break_seconds == 60


def test_notification_texts_come_from_settings() -> None:
    settings = AppSettings.model_validate({"Notifications": {"StartWorkTitle": "Focus"}})

    texts = settings.notification_texts()

    assert texts.start_work_title == "Focus"
    assert texts.start_break_message == "Enjoy your break"


def test_non_utf8_file_falls_back_to_last_good(tmp_path) -> None:
    path = tmp_path / "config.json"
    last_good = AppSettings(work_minutes=25, break_minutes=5)
    text = '{"WorkMinutes": 50, "Notifications": {"StartBreakTitle": "Przerwa się zaczyna"}}'
    path.write_bytes(text.encode("cp1250"))

    assert load_config(path, fallback=last_good) is last_good
    assert load_config(path) == AppSettings()


def test_utf8_file_with_bom_is_accepted(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"WorkMinutes": 25, "BreakMinutes": 5}).encode("utf-8"))

    settings = load_config(path)

    assert settings.work_minutes == 25
    assert settings.break_minutes == 5
