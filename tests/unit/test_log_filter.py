# -*- coding: utf-8 -*-
"""
Тесты для core/utils/log_filter.py
"""
import logging

from core.utils.log_filter import EmojiFilter, strip_emoji


def test_strip_emoji():
    assert strip_emoji("💾 Показания сохранены") == "Показания сохранены"
    assert strip_emoji("⚠️ Неизвестная шкала") == "Неизвестная шкала"
    assert strip_emoji("✅ готово ❌ ошибка") == "готово ошибка"
    assert strip_emoji("🥶 Temperature is below 10.0°C. Warning!") == "Temperature is below 10.0°C. Warning!"
    print("✅ test_strip_emoji passed")


def test_filter_strips_message_and_arguments():
    record = logging.LogRecord("alerts", logging.WARNING, __file__, 1, "🥶 %s (t=%s)", ("🌡️ холодно", 1.5), None)
    assert EmojiFilter().filter(record) is True
    assert record.getMessage() == "холодно (t=1.5)"
