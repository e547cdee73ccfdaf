# -*- coding: utf-8 -*-
"""
Тесты для core/weather_data.py
"""
import math
import threading
from datetime import datetime

import pytest

from core.models.condition import ConditionLabel, classify
from core.weather_data import WeatherData


class RecordingSink:
    def __init__(self):
        self.rows = []

    def store(self, timestamp, temperature_c, humidity, pressure):
        self.rows.append((timestamp, temperature_c, humidity, pressure))


class BrokenSink:
    def store(self, timestamp, temperature_c, humidity, pressure):
        raise ConnectionError("database is down")


def test_initial_state_is_zero_without_condition():
    weather = WeatherData()
    assert weather.get_temperature_celsius() == 0.0
    assert weather.get_humidity() == 0.0
    assert weather.get_pressure() == 0.0
    assert weather.condition is None
    assert weather.subscribers == []


def test_set_measurements_derives_units_and_condition(capsys):
    weather = WeatherData()
    weather.set_measurements(30, 60, 1015)

    assert weather.get_temperature_celsius() == 30
    assert weather.get_temperature_fahrenheit() == 86.0
    assert weather.get_temperature_kelvin() == pytest.approx(303.15)
    assert weather.get_humidity() == 60
    assert weather.get_pressure() == 1015
    assert weather.condition == ConditionLabel.SUNNY

    assert weather.display_condition() == "Weather: Sunny"
    assert capsys.readouterr().out == "Weather: Sunny\n"


def test_condition_recomputed_on_every_write():
    weather = WeatherData()
    for temperature, expected in [(30, "Sunny"), (20, "Cloudy"), (5, "Rainy"), (-3, "Snowy"), (25.0, "Cloudy")]:
        measurement = weather.set_measurements(temperature, 50, 1013)
        assert measurement.condition.value == expected
        assert weather.snapshot() == measurement


def test_nan_is_accepted_and_classified_snowy():
    weather = WeatherData()
    weather.set_measurements(math.nan, 50, 1013)
    assert math.isnan(weather.get_temperature_celsius())
    assert weather.condition == ConditionLabel.SNOWY


def test_display_condition_before_any_reading(capsys):
    weather = WeatherData()
    weather.display_condition()
    assert "no data" in capsys.readouterr().out


def test_get_instance_returns_same_object():
    first = WeatherData.get_instance()
    second = WeatherData.get_instance()
    assert first is second

    first.set_measurements(12.5, 80, 1020)
    assert second.get_temperature_celsius() == 12.5
    assert second.condition == ConditionLabel.RAINY


def test_get_instance_is_created_once_under_race(monkeypatch):
    monkeypatch.setattr(WeatherData, "_instance", None)
    seen = []
    barrier = threading.Barrier(8)

    def grab():
        barrier.wait()
        seen.append(WeatherData.get_instance())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(instance) for instance in seen}) == 1


def test_persistence_receives_timestamp_and_values():
    sink = RecordingSink()
    weather = WeatherData(persistence=sink, clock=lambda: datetime(2023, 11, 7, 12, 0, 0))
    weather.set_measurements(18.0, 65.0, 1016.5)
    assert sink.rows == [("2023-11-07 12:00:00", 18.0, 65.0, 1016.5)]


def test_persistence_failure_is_logged_not_raised(caplog):
    weather = WeatherData(persistence=BrokenSink())
    measurement = weather.set_measurements(-2.0, 90.0, 1014.0)

    assert measurement.condition == ConditionLabel.SNOWY
    assert weather.get_temperature_celsius() == -2.0
    assert "database is down" in caplog.text


def test_subscribers_see_consistent_snapshot():
    weather = WeatherData()
    seen = []
    weather.add_subscriber(lambda m: seen.append((m.temperature_c, m.condition, weather.condition)))

    weather.set_measurements(26.0, 40.0, 1010.0)
    assert seen == [(26.0, ConditionLabel.SUNNY, ConditionLabel.SUNNY)]


def test_snapshot_never_mixes_updates():
    # Влажность и давление однозначно выводятся из температуры
    weather = WeatherData()
    readings = [(30.0, 30.5, 1030.0), (-5.0, -4.5, 995.0), (10.0, 10.5, 1010.0), (20.0, 20.5, 1020.0)]
    stop = threading.Event()
    mismatches = []

    def writer(offset):
        i = offset
        while not stop.is_set():
            weather.set_measurements(*readings[i % len(readings)])
            i += 1

    def reader():
        for _ in range(3000):
            m = weather.snapshot()
            if m.condition is None:
                continue
            if m.humidity != m.temperature_c + 0.5 or m.pressure != 1000.0 + m.temperature_c or m.condition != classify(m.temperature_c):
                mismatches.append(m)

    writers = [threading.Thread(target=writer, args=(n,)) for n in range(3)]
    readers = [threading.Thread(target=reader) for _ in range(2)]
    for thread in writers + readers:
        thread.start()
    for thread in readers:
        thread.join()
    stop.set()
    for thread in writers:
        thread.join()

    assert mismatches == []


def test_persisted_order_matches_fan_out_order():
    sink = RecordingSink()
    weather = WeatherData(persistence=sink)
    fanned_out = []
    weather.add_subscriber(lambda m: fanned_out.append(m.temperature_c))

    def writer(base):
        for i in range(200):
            weather.set_measurements(base + i, 50.0, 1013.0)

    threads = [threading.Thread(target=writer, args=(base,)) for base in (0, 1000, 2000)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(fanned_out) == 600
    assert [row[1] for row in sink.rows] == fanned_out
