# -*- coding: utf-8 -*-
"""
Фильтр логов для файла: убирает эмодзи и пиктограммы из сообщений.

В консоли эмодзи остаются, а app.log читается grep'ом и парсерами.
"""

import logging
import re

# Эмодзи и пиктограммы, которыми помечены сообщения станции (🌡️ 💾 🥶 ⚠️ ...)
EMOJI_PATTERN = re.compile(
    "["
    "\U0001f300-\U0001f5ff"  # символы и пиктограммы
    "\U0001f600-\U0001f64f"  # смайлы
    "\U0001f680-\U0001f6ff"  # транспорт
    "\U0001f900-\U0001f9ff"  # дополнительные пиктограммы
    "\u2600-\u26ff"  # разные символы (⚠ ☀)
    "\u2700-\u27bf"  # dingbats (✅ ❌)
    "\ufe0f"  # variation selector после ⚠️ / 🌡️
    "]+",
    flags=re.UNICODE
)


def strip_emoji(text: str) -> str:
    """Убирает эмодзи и схлопывает лишние пробелы."""
    return " ".join(EMOJI_PATTERN.sub("", text).split())


class EmojiFilter(logging.Filter):
    """
    Убирает эмодзи из записи. Аргументы подставляются заранее,
    чтобы эмодзи из параметров тоже не попали в файл.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.msg:
            record.msg = strip_emoji(record.getMessage())
            record.args = None
        return True
