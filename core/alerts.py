# -*- coding: utf-8 -*-
"""
Подписки на температурный порог.

Порог задаётся только в °C: перевод из шкалы пользователя делается до
создания подписки. При регистрации текущие показания не проверяются,
срабатывают только последующие обновления.
"""

import logging
import sys
from typing import Callable, Optional

from core.models.measurement import Measurement

logger = logging.getLogger("alerts")

BreachCallback = Callable[[str], None]


def format_alert(threshold_celsius: float) -> str:
    return f"Temperature is below {threshold_celsius}°C. Warning!"


def print_alert(message: str) -> None:
    print(message, file=sys.stdout)


class AlertSubscription:
    """Наблюдатель за порогом температуры, привязанный к одному WeatherData."""

    def __init__(self, threshold_celsius: float, on_breach: Optional[BreachCallback] = None):
        self._threshold_celsius = float(threshold_celsius)
        self._on_breach = on_breach or print_alert

    @property
    def threshold_celsius(self) -> float:
        return self._threshold_celsius

    def __call__(self, measurement: Measurement) -> bool:
        """Проверяет новые показания. Возвращает True, если порог пробит."""
        if measurement.temperature_c < self._threshold_celsius:
            message = format_alert(self._threshold_celsius)
            logger.warning("🥶 %s (t=%.2f°C)", message, measurement.temperature_c)
            self._on_breach(message)
            return True
        return False

    def __repr__(self) -> str:
        return f"AlertSubscription(threshold_celsius={self._threshold_celsius!r})"


def subscribe(weather_data, threshold_celsius: float, on_breach: Optional[BreachCallback] = None) -> AlertSubscription:
    """
    Создаёт подписку и добавляет её в список подписчиков weather_data.

    Args:
        weather_data (WeatherData): Объект показаний
        threshold_celsius (float): Порог в °C
        on_breach (callable): Куда выводить предупреждение (по умолчанию stdout)

    Returns:
        AlertSubscription: Созданная подписка
    """
    subscription = AlertSubscription(threshold_celsius, on_breach)
    weather_data.add_subscriber(subscription)
    logger.info("🔔 Добавлена подписка на порог %.2f°C", subscription.threshold_celsius)
    return subscription
