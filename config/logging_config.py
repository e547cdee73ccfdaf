# config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from core.utils.log_filter import EmojiFilter

LOGS_DIR = Path(__file__).parent.parent / "logs"

FILE_HANDLER_NAME = "weather_monitor.file"
CONSOLE_HANDLER_NAME = "weather_monitor.console"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None):
    """
    Настраивает глобальное логирование с ротацией.

    В консоль идут только ошибки: предупреждения о порогах и шкалах уже
    выводятся меню, поэтому в терминале их не дублируем.
    Повторный вызов ничего не добавляет и не открывает лишних файлов.
    """
    log_dir = log_dir or LOGS_DIR
    log_file = log_dir / "app.log"

    # Создаём root-логгер
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Уже настроено нами — выходим
    if any(handler.get_name() == FILE_HANDLER_NAME for handler in logger.handlers):
        return log_file

    log_dir.mkdir(parents=True, exist_ok=True)

    # Форматтер
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Обработчик для файла (с ротацией 10 МБ, 5 файлов), без эмодзи
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(EmojiFilter())

    # Обработчик для консоли
    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logging.info("🔧 Логирование инициализировано: %s", log_file)
    return log_file


def teardown_logging():
    """Снимает и закрывает обработчики, добавленные setup_logging()."""
    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            logger.removeHandler(handler)
            handler.close()
