# -*- coding: utf-8 -*-
"""
Форматирование отчёта о последних показаниях (текст для консоли).
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from core.models.measurement import Measurement
from core.utils.unit_converter import TemperatureScale, convert, scale_symbol

logger = logging.getLogger("formatter")

TEMPLATES_DIR = Path(__file__).parent.parent / "_io" / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    keep_trailing_newline=False
)


def format_weather_report(measurement: Measurement, scale: TemperatureScale, scale_name: str = None) -> str:
    """
    Формирует отчёт: температура в выбранной шкале, влажность, давление.

    Args:
        measurement (Measurement): Снимок показаний
        scale (TemperatureScale): Шкала для вывода температуры
        scale_name (str): Название шкалы так, как его ввёл пользователь

    Returns:
        str: Готовый текст
    """
    template = _env.get_template("weather_report.txt.j2")
    text = template.render(
        scale_name=scale_name or scale.value,
        temperature=round(convert(measurement.temperature_c, TemperatureScale.CELSIUS, scale), 2),
        symbol=scale_symbol(scale),
        humidity=round(measurement.humidity, 2),
        pressure=round(measurement.pressure, 2)
    )
    logger.debug("Отчёт сформирован в шкале %s", scale.value)
    return text
