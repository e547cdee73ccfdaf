# station_manager.py
# -*- coding: utf-8 -*-
"""
Координатор зависимостей метеостанции.
Создаётся точкой входа один раз и передаётся компонентам явно.
"""

import logging
import random
from typing import Optional

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.db.local_db_weather import WeatherStore
from core.weather_data import WeatherData
from core.models.measurement import Measurement
from workers.persistence_worker import PersistenceWorker

logger = logging.getLogger("station_manager")


class StationManager:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        weather_data: Optional[WeatherData] = None,
        rng: Optional[random.Random] = None
    ):
        self._initialized = False
        self.config = config
        self.weather_data = weather_data
        self.rng = rng
        self.store: Optional[WeatherStore] = None
        self.worker: Optional[PersistenceWorker] = None

    def initialize(self, configure_logging: bool = True) -> "StationManager":
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return self

        # 1. Конфигурация
        if self.config is None:
            self.config = AppConfig.load()
        if configure_logging:
            setup_logging(self.config.log_level)

        # 2. Показания
        if self.weather_data is None:
            self.weather_data = WeatherData.get_instance()

        # 3. Хранилище и воркер сохранения
        if self.config.persist_readings:
            self.store = WeatherStore(db_path=self.config.db_path)
            self.worker = PersistenceWorker(self.store)
            self.weather_data.set_persistence(self.worker)

        self._initialized = True
        logger.info("✅ StationManager: initialized (persistence=%s)", self.config.persist_readings)
        return self

    def collect(self, collector) -> Measurement:
        """Забирает показания у источника и записывает их в WeatherData."""
        temperature_c, humidity, pressure = collector.collect()
        return self.weather_data.set_measurements(temperature_c, humidity, pressure)

    def shutdown(self):
        """Дожидается сохранения последних показаний и останавливает воркер."""
        if not self._initialized:
            return
        if self.worker is not None:
            self.worker.shutdown(wait=True)
            self.weather_data.set_persistence(None)
        self._initialized = False
        logger.info("🛑 StationManager: shut down")
