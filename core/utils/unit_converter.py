# -*- coding: utf-8 -*-
"""
Перевод температуры между шкалами Цельсия, Фаренгейта и Кельвина.

Каноническая шкала проекта — Цельсий: всё, что приходит от пользователя
в другой шкале, переводится на границе (консоль), а не внутри ядра.
"""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger("unit_converter")


class TemperatureScale(str, Enum):
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"


SCALE_SYMBOLS = {
    TemperatureScale.CELSIUS: "°C",
    TemperatureScale.FAHRENHEIT: "°F",
    TemperatureScale.KELVIN: "K",
}

# === ТАБЛИЦА ПРЕОБРАЗОВАНИЙ (из шкалы, в шкалу) ===
_CONVERSIONS = {
    (TemperatureScale.CELSIUS, TemperatureScale.FAHRENHEIT): lambda v: (v * 9 / 5) + 32,
    (TemperatureScale.CELSIUS, TemperatureScale.KELVIN): lambda v: v + 273.15,
    (TemperatureScale.FAHRENHEIT, TemperatureScale.CELSIUS): lambda v: (v - 32) * 5 / 9,
    (TemperatureScale.FAHRENHEIT, TemperatureScale.KELVIN): lambda v: (v + 459.67) * 5 / 9,
    (TemperatureScale.KELVIN, TemperatureScale.CELSIUS): lambda v: v - 273.15,
    (TemperatureScale.KELVIN, TemperatureScale.FAHRENHEIT): lambda v: (v * 9 / 5) - 459.67,
}


def convert(value: float, from_scale: Union[TemperatureScale, str], to_scale: Union[TemperatureScale, str]) -> float:
    """
    Переводит значение из одной шкалы в другую.

    Шкалы не валидируются: для незнакомой пары значение возвращается как есть.

    Args:
        value (float): Температура
        from_scale: Исходная шкала
        to_scale: Целевая шкала

    Returns:
        float: Температура в целевой шкале
    """
    if from_scale == to_scale:
        return value
    rule = _CONVERSIONS.get((_as_scale(from_scale), _as_scale(to_scale)))
    if rule is None:
        return value
    return rule(value)


def parse_scale(name: str) -> TemperatureScale:
    """
    Разбирает название шкалы без учёта регистра.
    Незнакомое название молча заменяется на Цельсий.
    """
    scale = _as_scale(name.strip() if isinstance(name, str) else name)
    if scale is None:
        logger.warning("⚠️ Неизвестная шкала %r, используем Celsius", name)
        return TemperatureScale.CELSIUS
    return scale


def is_known_scale(name: str) -> bool:
    return _as_scale(name.strip() if isinstance(name, str) else name) is not None


def scale_symbol(scale: TemperatureScale) -> str:
    return SCALE_SYMBOLS[scale]


def _as_scale(value):
    if isinstance(value, TemperatureScale):
        return value
    if not isinstance(value, str):
        return None
    for scale in TemperatureScale:
        if scale.value.lower() == value.lower():
            return scale
    return None
