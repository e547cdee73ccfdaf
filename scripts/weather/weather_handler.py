# scripts/weather/weather_handler.py
"""
Консольное меню метеостанции: сбор данных, шкала, пороги, вывод показаний.
"""
import logging
import sys
from typing import Callable, Optional, TextIO

from core.alerts import subscribe
from core.exceptions import InvalidInputError
from core.utils.unit_converter import TemperatureScale, convert, is_known_scale, parse_scale
from core.utils.validator import parse_threshold
from scripts.weather._processes.formatter import format_weather_report
from scripts.weather._services.weather_simulator import get_collector

logger = logging.getLogger("weather_handler")

MENU_TEXT = """<=======================Welcome=======================>
Menu:
1. Collect Weather Data
2. Choose Temperature Scale (Celsius/Fahrenheit/Kelvin)
3. Set Temperature Alert Threshold
4. Change Data Source (API/Sensor)
5. Display Weather Data
6. Display Weather Condition"""

QUIT_COMMAND = "q"


class ConsoleMenu:
    """
    Текстовый интерфейс поверх StationManager.
    Ввод и вывод подменяются в тестах.
    """

    def __init__(
        self,
        manager,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None
    ):
        self.manager = manager
        self._input = input_func
        self._out = output or sys.stdout
        self.scale_name = manager.config.default_scale
        self.source = manager.config.default_source
        self._handlers = {
            "1": self.collect_weather_data,
            "2": self.choose_scale,
            "3": self.set_alert_threshold,
            "4": self.change_data_source,
            "5": self.display_weather_data,
            "6": self.display_condition,
        }

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    # === ЦИКЛ ===
    def run(self) -> None:
        self._print("Weather Monitoring and Alert System")
        self._print(f"Enter '{QUIT_COMMAND}' to exit.")

        while True:
            self._print(MENU_TEXT)
            try:
                choice = self._ask("Select an option: ")
            except EOFError:
                logger.info("Ввод закрыт, выходим из меню")
                break

            if choice.lower() == QUIT_COMMAND:
                break
            self.handle(choice)

    def handle(self, choice: str) -> None:
        handler = self._handlers.get(choice)
        if handler is None:
            self._print("Invalid choice. Please select a valid option.")
            return
        handler()

    # === ОБРАБОТЧИКИ ===
    def collect_weather_data(self) -> None:
        """Пункт 1: спрашивает источник (пусто — текущий) и собирает показания."""
        source = self._ask(f"Choose Data Source (API/Sensor) [{self.source}]: ") or self.source
        self._collect_from(source)

    def change_data_source(self) -> None:
        """Пункт 4: запоминает новый источник и сразу собирает с него показания."""
        source = self._ask("Choose Data Source (API/Sensor): ")
        if self._collect_from(source):
            self.source = source

    def _collect_from(self, source: str) -> bool:
        collector = get_collector(source, self.manager.rng)
        if collector is None:
            self._print("Invalid choice. Please enter 'API' or 'Sensor'.")
            return False
        self.manager.collect(collector)
        return True

    def choose_scale(self) -> None:
        self.scale_name = self._ask("Choose Temperature Scale (Celsius/Fahrenheit/Kelvin): ")
        logger.info("Выбрана шкала: %s", self.scale_name)

    def set_alert_threshold(self) -> None:
        """Пункт 3: порог вводится в текущей шкале и переводится в °C."""
        text = self._ask(f"Enter a new temperature threshold ({self.scale_name}): ")
        try:
            value = parse_threshold(text)
        except InvalidInputError as e:
            logger.warning("⚠️ %s", e)
            self._print("Invalid temperature. Please enter a number.")
            return
        # Неизвестная шкала молча считается Цельсием
        threshold_celsius = convert(value, parse_scale(self.scale_name), TemperatureScale.CELSIUS)
        subscribe(self.manager.weather_data, threshold_celsius, on_breach=self._print)

    def display_weather_data(self) -> None:
        if not is_known_scale(self.scale_name):
            self._print("Invalid temperature scale. Using the default scale (Celsius).")
        scale = parse_scale(self.scale_name)
        measurement = self.manager.weather_data.snapshot()
        self._print(format_weather_report(measurement, scale, self.scale_name))

    def display_condition(self) -> None:
        self.manager.weather_data.display_condition(self._out)
