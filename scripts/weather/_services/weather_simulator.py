# scripts/weather/_services/weather_simulator.py
"""
Симуляторы источников данных: вместо реального API и датчика — случайные числа.
"""
import logging
import random
from typing import Optional, Tuple

logger = logging.getLogger("weather_simulator")

Reading = Tuple[float, float, float]


class WeatherCollector:
    """Источник показаний: collect() → (температура °C, влажность %, давление гПа)."""

    name = "base"

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def collect(self) -> Reading:
        temperature_c = self._rng.random() * 50 - 10   # от -10 до 40
        humidity = self._rng.random() * 50 + 50        # от 50 до 100
        pressure = self._rng.random() * 10 + 1013      # от 1013 до 1023
        logger.debug("📡 %s: t=%.2f, h=%.1f, p=%.1f", self.name, temperature_c, humidity, pressure)
        return temperature_c, humidity, pressure


class WeatherAPI(WeatherCollector):
    """Симуляция запроса к погодному API."""

    name = "API"


class WeatherSensor(WeatherCollector):
    """Симуляция опроса локального датчика."""

    name = "Sensor"


COLLECTORS = {collector.name.lower(): collector for collector in (WeatherAPI, WeatherSensor)}


def get_collector(source: str, rng: Optional[random.Random] = None) -> Optional[WeatherCollector]:
    """Возвращает источник по имени ("API" / "Sensor", без учёта регистра) или None."""
    collector_cls = COLLECTORS.get(source.strip().lower()) if isinstance(source, str) else None
    return collector_cls(rng) if collector_cls else None
