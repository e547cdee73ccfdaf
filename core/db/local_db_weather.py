# -*- coding: utf-8 -*-
"""
Локальная база данных показаний метеостанции.

Таблицы:
- weather_data: по одной строке на каждое сохранённое показание
  (время, температура °C, влажность %, давление гПа)
"""

import logging
import sqlite3
from pathlib import Path
from typing import Dict, List, Optional

from config.db_config import DB_CONNECTION_TIMEOUT, WEATHER_DB_PATH
from core.exceptions import StorageError
from core.utils.error_handler import log_and_raise

logger = logging.getLogger("local_db_weather")

# === SQL ЗАПРОСЫ ===
CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS weather_data (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    time TEXT NOT NULL,
    temperature REAL,
    humidity REAL,
    pressure REAL
);

-- Индекс для выборки по времени
CREATE INDEX IF NOT EXISTS idx_weather_data_time
ON weather_data (time);
"""

INSERT_SQL = "INSERT INTO weather_data (time, temperature, humidity, pressure) VALUES (?, ?, ?, ?)"


class WeatherStore:
    """
    Хранилище показаний на SQLite.
    Потокобезопасно за счёт отдельного подключения в каждом методе.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path or WEATHER_DB_PATH)
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Создаёт новое подключение к БД."""
        conn = sqlite3.connect(
            self.db_path,
            timeout=DB_CONNECTION_TIMEOUT,
            check_same_thread=False
        )
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self):
        """Инициализирует таблицы при первом запуске."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_connection()
        try:
            conn.executescript(CREATE_TABLES_SQL)
            conn.commit()
            logger.info("БД показаний инициализирована: %s", self.db_path)
        except sqlite3.Error as e:
            log_and_raise("Ошибка инициализации БД показаний", StorageError(str(e)), {"path": str(self.db_path)})
        finally:
            conn.close()

    def store(self, timestamp: str, temperature_c: float, humidity: float, pressure: float) -> None:
        """
        Сохраняет одно показание.

        Raises:
            StorageError: если запись не удалась
        """
        conn = self._get_connection()
        try:
            conn.execute(INSERT_SQL, (timestamp, temperature_c, humidity, pressure))
            conn.commit()
            logger.info("💾 Показания сохранены на %s", timestamp)
        except sqlite3.Error as e:
            log_and_raise("❌ Ошибка сохранения показаний", StorageError(str(e)), {"time": timestamp})
        finally:
            conn.close()

    def fetch_recent(self, limit: int = 10) -> List[Dict]:
        """
        Возвращает последние сохранённые показания, от новых к старым.

        Args:
            limit (int): Сколько строк вернуть

        Returns:
            List[Dict]: Словари с ключами time, temperature, humidity, pressure
        """
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """
                SELECT time, temperature, humidity, pressure
                FROM weather_data
                ORDER BY id DESC
                LIMIT ?
                """,
                (limit,)
            )
            return [dict(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._get_connection()
        try:
            return conn.execute("SELECT COUNT(*) FROM weather_data").fetchone()[0]
        finally:
            conn.close()
