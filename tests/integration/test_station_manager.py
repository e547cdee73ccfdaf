# -*- coding: utf-8 -*-
"""
Тесты для station_manager.py
"""
import random

from config.app_config import AppConfig
from core.weather_data import WeatherData
from scripts.weather._services.weather_simulator import WeatherAPI
from station_manager import StationManager


def test_initialize_wires_persistence(tmp_path):
    config = AppConfig(db_path=tmp_path / "weather.db")
    manager = StationManager(config=config, weather_data=WeatherData()).initialize(configure_logging=False)

    measurement = manager.collect(WeatherAPI(random.Random(1)))
    manager.shutdown()

    rows = manager.store.fetch_recent()
    assert len(rows) == 1
    assert rows[0]["temperature"] == measurement.temperature_c
    assert rows[0]["humidity"] == measurement.humidity
    assert rows[0]["pressure"] == measurement.pressure


def test_persistence_can_be_disabled(tmp_path):
    config = AppConfig(db_path=tmp_path / "weather.db", persist_readings=False)
    manager = StationManager(config=config, weather_data=WeatherData()).initialize(configure_logging=False)

    manager.collect(WeatherAPI(random.Random(1)))
    assert manager.store is None
    assert not (tmp_path / "weather.db").exists()
    manager.shutdown()


def test_defaults_to_shared_instance(tmp_path):
    config = AppConfig(db_path=tmp_path / "weather.db", persist_readings=False)
    manager = StationManager(config=config).initialize(configure_logging=False)
    assert manager.weather_data is WeatherData.get_instance()


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("WEATHER_DB_PATH", str(tmp_path / "env.db"))
    monkeypatch.setenv("DEFAULT_TEMPERATURE_SCALE", "Kelvin")
    monkeypatch.setenv("PERSIST_READINGS", "false")

    config = AppConfig.load()
    assert config.db_path == tmp_path / "env.db"
    assert config.default_scale == "Kelvin"
    assert config.persist_readings is False
