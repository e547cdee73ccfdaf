# -*- coding: utf-8 -*-
"""
Логирование ошибок метеостанции с контекстом показаний.

Контекст — словарь вида {"time": "2023-11-07 12:00:00", "path": "..."}:
по нему в app.log находится конкретная запись, которая не сохранилась.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


def format_context(context: Optional[dict]) -> str:
    """Склеивает контекст в 'key=value, ...' в порядке ключей."""
    if not context:
        return ""
    pairs = ", ".join(f"{key}={value}" for key, value in sorted(context.items()))
    return f" [{pairs}]"


def log_exception(exception: Exception, message: str = "Ошибка метеостанции", context: Optional[dict] = None):
    """
    Пишет ошибку с трассировкой и продолжает работу.
    Используется там, где сбой не должен дойти до вызывающего
    (сохранение показаний, обработчики подписок).
    """
    logger.error("%s%s: %r", message, format_context(context), exception, exc_info=exception)


def log_and_raise(message: str, exception: Exception, context: Optional[dict] = None):
    """
    Пишет ошибку и выбрасывает исключение дальше.

    Raises:
        Exception: переданное исключение (обычно StorageError)
    """
    log_exception(exception, message, context)
    raise exception
