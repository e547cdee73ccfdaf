# weather_app.py
# -*- coding: utf-8 -*-
"""
Точка входа: консольная метеостанция с оповещениями о пороге температуры.
"""
import logging

from scripts.weather.weather_handler import ConsoleMenu
from station_manager import StationManager


def main():
    # Инициализация
    manager = StationManager().initialize()
    logging.info("🚀 Запуск метеостанции")

    try:
        ConsoleMenu(manager).run()
    except KeyboardInterrupt:
        print("\nStopped by user.")
    finally:
        manager.shutdown()
        logging.info("✅ Метеостанция завершила работу")


if __name__ == "__main__":
    main()
