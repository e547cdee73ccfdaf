# config/app_config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from config.db_config import WEATHER_DB_PATH

load_dotenv()


@dataclass
class AppConfig:
    db_path: Path
    log_level: str = "INFO"
    default_scale: str = "Celsius"
    default_source: str = "API"
    persist_readings: bool = True

    @classmethod
    def load(cls):
        return cls(
            db_path=Path(os.getenv("WEATHER_DB_PATH", str(WEATHER_DB_PATH))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            default_scale=os.getenv("DEFAULT_TEMPERATURE_SCALE", "Celsius"),
            default_source=os.getenv("DEFAULT_DATA_SOURCE", "API"),
            persist_readings=os.getenv("PERSIST_READINGS", "true").lower() == "true"
        )
