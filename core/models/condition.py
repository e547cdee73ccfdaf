# -*- coding: utf-8 -*-
"""
Классификация погодных условий по температуре.

Условие не хранит собственного состояния: оно полностью пересчитывается
из температуры при каждой записи показаний.
"""

import sys
from enum import Enum
from typing import Dict, Optional, TextIO, Tuple, Type


class ConditionLabel(str, Enum):
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    SNOWY = "Snowy"


# (нижняя граница, не включительно; метка) — проверяются сверху вниз.
# Граничные значения 25.0 / 15.0 / 0.0 попадают в нижний уровень.
CONDITION_TABLE: Tuple[Tuple[float, ConditionLabel], ...] = (
    (25.0, ConditionLabel.SUNNY),
    (15.0, ConditionLabel.CLOUDY),
    (0.0, ConditionLabel.RAINY),
)
FALLBACK_CONDITION = ConditionLabel.SNOWY


def classify(temperature_celsius: float) -> ConditionLabel:
    """Возвращает метку условий для температуры в °C. NaN → Snowy."""
    for lower_bound, label in CONDITION_TABLE:
        if temperature_celsius > lower_bound:
            return label
    return FALLBACK_CONDITION


# === СОСТОЯНИЯ ДЛЯ ВЫВОДА ===
class ConditionState:
    """Базовое состояние: умеет вывести себя в поток."""

    label: Optional[ConditionLabel] = None

    def render(self, stream: Optional[TextIO] = None) -> str:
        line = f"Weather: {self.label.value}"
        print(line, file=stream or sys.stdout)
        return line


class SunnyState(ConditionState):
    label = ConditionLabel.SUNNY


class CloudyState(ConditionState):
    label = ConditionLabel.CLOUDY


class RainyState(ConditionState):
    label = ConditionLabel.RAINY


class SnowyState(ConditionState):
    label = ConditionLabel.SNOWY


class NoDataState(ConditionState):
    """Показания ещё не собирались."""

    def render(self, stream: Optional[TextIO] = None) -> str:
        line = "Weather: no data collected yet"
        print(line, file=stream or sys.stdout)
        return line


_STATES: Dict[ConditionLabel, Type[ConditionState]] = {
    state.label: state for state in (SunnyState, CloudyState, RainyState, SnowyState)
}


def state_for(label: Optional[ConditionLabel]) -> ConditionState:
    """Подбирает объект состояния по метке."""
    if label is None:
        return NoDataState()
    return _STATES[label]()
