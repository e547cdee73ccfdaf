# -*- coding: utf-8 -*-
"""
Тесты для core/db/local_db_weather.py
"""
import sqlite3

import pytest

from core.db.local_db_weather import WeatherStore
from core.exceptions import StorageError


def test_local_db_weather(tmp_path):
    store = WeatherStore(db_path=tmp_path / "weather.db")

    store.store("2023-11-07 12:00:00", 21.5, 64.0, 1013.25)
    store.store("2023-11-07 12:05:00", 22.0, 63.0, 1013.5)

    assert store.count() == 2
    rows = store.fetch_recent(limit=1)
    assert rows == [{"time": "2023-11-07 12:05:00", "temperature": 22.0, "humidity": 63.0, "pressure": 1013.5}]
    print("✅ test_local_db_weather passed")


def test_store_creates_missing_directory(tmp_path):
    db_path = tmp_path / "nested" / "dir" / "weather.db"
    store = WeatherStore(db_path=db_path)
    store.store("2023-11-07 12:00:00", 1.0, 2.0, 3.0)
    assert db_path.exists()


def test_store_failure_raises_storage_error(tmp_path):
    db_path = tmp_path / "weather.db"
    store = WeatherStore(db_path=db_path)

    # Ломаем схему, чтобы INSERT упал
    conn = sqlite3.connect(db_path)
    conn.execute("DROP TABLE weather_data")
    conn.commit()
    conn.close()

    with pytest.raises(StorageError):
        store.store("2023-11-07 12:00:00", 1.0, 2.0, 3.0)
