# -*- coding: utf-8 -*-
"""
Рассылка обновлений показаний подписчикам (fan-out).

Архитектурный принцип:
- Производитель (WeatherData.set_measurements) → вызывает notify()
- Потребители (подписки на пороги) → регистрируются через subscribe()
- Рассылка синхронная, в порядке регистрации; подписчики не удаляются

Использование:

notifier = Notifier()
notifier.subscribe(lambda measurement: print(measurement.temperature_c))
notifier.notify(measurement)
"""

import logging
import threading
from typing import Any, Callable, List

from core.models.measurement import Measurement
from core.utils.error_handler import log_exception

logger = logging.getLogger("event_bus")

# Тип обработчика
Handler = Callable[[Measurement], Any]


class Notifier:
    """Упорядоченный список обработчиков, принадлежащий одному объекту показаний."""

    def __init__(self):
        self._handlers: List[Handler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: Handler) -> None:
        """
        Регистрирует обработчик. Повторная регистрация того же обработчика
        создаёт вторую независимую подписку.

        Args:
            handler (callable): Функция, принимающая Measurement
        """
        if handler is None:
            logger.warning("⚠️ Попытка подписаться с handler=None. Игнорируем.")
            return
        with self._lock:
            self._handlers.append(handler)
        logger.debug("Зарегистрирован обработчик #%d", len(self._handlers))

    def notify(self, measurement: Measurement) -> int:
        """
        Вызывает все обработчики по порядку.

        Ошибки в обработчиках логируются, но не прерывают рассылку.

        Returns:
            int: Количество вызванных обработчиков
        """
        with self._lock:
            handlers = list(self._handlers)
        logger.debug("Рассылка показаний %s для %d обработчиков", measurement, len(handlers))

        for handler in handlers:
            try:
                handler(measurement)
            except Exception as e:
                log_exception(e, "Ошибка в обработчике показаний", {"handler": getattr(handler, "__name__", repr(handler))})
        return len(handlers)

    @property
    def handlers(self) -> List[Handler]:
        with self._lock:
            return list(self._handlers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)
