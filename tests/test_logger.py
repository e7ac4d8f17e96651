from loguru import logger

from dayplan.core.logger import setup_logger


def test_setup_logger_writes_to_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "dayplan.log"

    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.info("Phase changed work -> break")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "Phase changed work -> break" in text
