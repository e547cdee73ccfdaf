# -*- coding: utf-8 -*-
"""
Иерархия исключений проекта.
"""


class WeatherMonitorError(Exception):
    """Базовая ошибка метеостанции."""


class StorageError(WeatherMonitorError):
    """Не удалось сохранить показания в БД."""


class InvalidInputError(WeatherMonitorError, ValueError):
    """Некорректный ввод в консоли (порог, источник данных)."""
