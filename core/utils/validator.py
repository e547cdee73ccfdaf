# core/utils/validator.py
import math
import re

from core.exceptions import InvalidInputError


def sanitize_user_input(text: str) -> str:
    """Санитизация пользовательского ввода из консоли."""
    if not isinstance(text, str):
        raise InvalidInputError("Input must be a string")
    # Разрешаем только безопасные символы
    text = re.sub(r"[^a-zA-Z0-9\s,\.\-\+]", "", text.strip())
    return text[:100]  # ограничение длины


def parse_threshold(text: str) -> float:
    """Разбирает введённый порог температуры. NaN и бесконечность не принимаются."""
    cleaned = sanitize_user_input(text).replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidInputError(f"Invalid temperature: {text!r}") from None
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"Invalid temperature: {text!r}")
    return value
