# core/models/measurement.py
from dataclasses import dataclass
from typing import Optional

from core.models.condition import ConditionLabel


@dataclass(frozen=True)
class Measurement:
    """Снимок показаний: все поля взяты из одного обновления."""

    temperature_c: float
    humidity: float
    pressure: float
    condition: Optional[ConditionLabel]
