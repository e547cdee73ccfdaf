# -*- coding: utf-8 -*-
"""
Общие показания метеостанции.

Единственная точка изменения — set_measurements(): поля, условие и рассылка
подписчикам выполняются под одной блокировкой, поэтому читатель никогда не
увидит температуру одного обновления вместе с условием другого.
После записи показания передаются на сохранение (fire-and-forget).
"""

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional, TextIO

from config.db_config import TIMESTAMP_FORMAT
from core.event_bus import Handler, Notifier
from core.models.condition import ConditionLabel, classify, state_for
from core.models.measurement import Measurement
from core.utils.error_handler import log_exception
from core.utils.unit_converter import TemperatureScale, convert

logger = logging.getLogger("weather_data")


class WeatherData:
    """
    Последние показания: температура (°C), влажность (%), давление (гПа)
    и производное условие.

    Экземпляр на процесс получают через get_instance() либо создают явно
    и передают в компоненты (см. StationManager).
    """

    _instance: Optional["WeatherData"] = None
    _instance_lock = threading.Lock()

    def __init__(self, persistence=None, clock: Callable[[], datetime] = datetime.now):
        self._temperature_celsius = 0.0
        self._humidity = 0.0
        self._pressure = 0.0
        self._condition: Optional[ConditionLabel] = None

        self._notifier = Notifier()
        self._lock = threading.RLock()
        self._persistence = persistence
        self._clock = clock

    @classmethod
    def get_instance(cls) -> "WeatherData":
        """Возвращает общий экземпляр, создавая его ровно один раз."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.info("✅ WeatherData: создан общий экземпляр")
        return cls._instance

    # === ЗАПИСЬ ===
    def set_measurements(self, temperature_celsius: float, humidity: float, pressure: float) -> Measurement:
        """
        Перезаписывает все три поля, пересчитывает условие и оповещает подписчиков.
        Входные значения не валидируются.

        Returns:
            Measurement: Снимок записанных показаний
        """
        with self._lock:
            self._temperature_celsius = temperature_celsius
            self._humidity = humidity
            self._pressure = pressure
            self._condition = classify(temperature_celsius)
            measurement = self.snapshot()

            logger.info(
                "🌡️ Новые показания: t=%.2f°C, влажность=%.1f%%, давление=%.1f гПа → %s",
                temperature_celsius, humidity, pressure, self._condition.value
            )
            self._notifier.notify(measurement)
            # Внутри блокировки: строки в БД идут в том же порядке, что и записи в памяти
            self._hand_off(measurement)

        return measurement

    def _hand_off(self, measurement: Measurement) -> None:
        """
        Передаёт показания на сохранение. Ошибки не выходят наружу.
        Хранилище должно только ставить запись в очередь (см. PersistenceWorker).
        """
        if self._persistence is None:
            return
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        try:
            self._persistence.store(
                timestamp,
                measurement.temperature_c,
                measurement.humidity,
                measurement.pressure
            )
        except Exception as e:
            log_exception(e, "❌ Не удалось передать показания на сохранение", {"time": timestamp})

    def set_persistence(self, persistence) -> None:
        with self._lock:
            self._persistence = persistence

    # === ПОДПИСЧИКИ ===
    def add_subscriber(self, handler: Handler) -> None:
        with self._lock:
            self._notifier.subscribe(handler)

    @property
    def subscribers(self) -> List[Handler]:
        return self._notifier.handlers

    # === ЧТЕНИЕ ===
    def snapshot(self) -> Measurement:
        with self._lock:
            return Measurement(
                temperature_c=self._temperature_celsius,
                humidity=self._humidity,
                pressure=self._pressure,
                condition=self._condition
            )

    def get_temperature(self, scale: TemperatureScale) -> float:
        with self._lock:
            return convert(self._temperature_celsius, TemperatureScale.CELSIUS, scale)

    def get_temperature_celsius(self) -> float:
        return self.get_temperature(TemperatureScale.CELSIUS)

    def get_temperature_fahrenheit(self) -> float:
        return self.get_temperature(TemperatureScale.FAHRENHEIT)

    def get_temperature_kelvin(self) -> float:
        return self.get_temperature(TemperatureScale.KELVIN)

    def get_humidity(self) -> float:
        with self._lock:
            return self._humidity

    def get_pressure(self) -> float:
        with self._lock:
            return self._pressure

    @property
    def condition(self) -> Optional[ConditionLabel]:
        with self._lock:
            return self._condition

    def display_condition(self, stream: Optional[TextIO] = None) -> str:
        """Выводит текущее условие через объект состояния."""
        return state_for(self.condition).render(stream)
