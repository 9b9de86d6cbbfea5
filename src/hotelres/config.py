from __future__ import annotations

import importlib
import os
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Type, List

from dotenv import load_dotenv

from hotelres.base_config import HotelResConfig
from hotelres.adapters.base import HotelStore
from hotelres.adapters.sqlite_adapter import SQLiteHotelStore
from hotelres.exceptions import ConfigurationError
from hotelres.models import Room, RoomType
from hotelres.services.inventory_service import build_catalog

load_dotenv()

DEFAULT_CONFIG_CLASS = "hotelres.config.EnvironmentHotelResConfig"
CONFIG_ENV_KEY = "HOTELRES_CONFIG"

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[HotelResConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, HotelResConfig):
        raise ConfigurationError(f"{path} is not a subclass of HotelResConfig")

    return cls


def parse_seed_catalog(value: str) -> List[Room]:
    """
    Parses ``TYPE:count:start:rate:occupancy`` entries separated by ';',
    e.g. ``STANDARD:2:101:100.00:2;SUITE:1:301:250.00:4``.
    """
    rows = []
    for item in value.split(";"):
        item = item.strip()
        if not item:
            continue
        parts = [p.strip() for p in item.split(":")]
        if len(parts) != 5:
            raise ConfigurationError(f"Invalid seed catalog entry '{item}'")
        try:
            room_type = RoomType.parse(parts[0])
            count, start, occupancy = int(parts[1]), int(parts[2]), int(parts[4])
            Decimal(parts[3])
        except (ValueError, InvalidOperation) as exc:
            raise ConfigurationError(f"Invalid seed catalog entry '{item}': {exc}") from exc
        rows.append((room_type, count, start, parts[3], occupancy))

    try:
        rooms = build_catalog(rows)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid seed catalog: {exc}") from exc

    numbers = [r.room_number for r in rooms]
    if len(numbers) != len(set(numbers)):
        raise ConfigurationError("Seed catalog contains duplicate room numbers")
    return rooms


class EnvironmentHotelResConfig(HotelResConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_database_url(self) -> str:
        return self._env.get("HOTELRES_DATABASE_URL", "sqlite:///hotelres.db")

    def get_log_level(self) -> str:
        return self._env.get("HOTELRES_LOG_LEVEL", "INFO").upper()

    def get_reservation_id_length(self) -> int:
        try:
            length = int(self._env.get("HOTELRES_ID_LENGTH", "8"))
        except (TypeError, ValueError):
            return 8
        if not 4 <= length <= 32:
            logger.warning(f"HOTELRES_ID_LENGTH={length} is out of range, using 8")
            return 8
        return length

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTELRES_HOTEL_NAME", super().get_hotel_display_name())

    def get_seed_rooms(self) -> Optional[List[Room]]:
        value = self._env.get("HOTELRES_SEED_CATALOG")
        if not value:
            return None
        return parse_seed_catalog(value)

    def create_store(self) -> HotelStore:
        return SQLiteHotelStore(self.get_database_url())


_CONFIG: Optional[HotelResConfig] = None


def get_config() -> HotelResConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[HotelResConfig]) -> None:
    global _CONFIG
    _CONFIG = config
