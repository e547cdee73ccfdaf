# -*- coding: utf-8 -*-
"""
Конфигурация путей к базе данных показаний.
Используется синхронно (sqlite3) из воркера сохранения.
"""

from pathlib import Path

# === Корень проекта ===
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# === Папка данных ===
DATA_DIR = PROJECT_ROOT / "data"

# === БАЗА ПОКАЗАНИЙ ===
WEATHER_DB_PATH = DATA_DIR / "weather_data.db"

# === ПАРАМЕТРЫ ПОДКЛЮЧЕНИЯ ===
DB_CONNECTION_TIMEOUT = 30  # секунд

# Формат метки времени, с которой сохраняются показания
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
