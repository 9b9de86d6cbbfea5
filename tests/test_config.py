import os
from decimal import Decimal

import pytest

from hotelres.base_config import HotelResConfig
from hotelres.config import (
    EnvironmentHotelResConfig,
    _import_config_class,
    get_config,
    parse_seed_catalog,
    set_config,
)
from hotelres.adapters.memory_adapter import InMemoryHotelStore
from hotelres.adapters.sqlite_adapter import SQLiteHotelStore
from hotelres.exceptions import ConfigurationError
from hotelres.models import RoomType


class InMemoryConfig(HotelResConfig):
    def get_database_url(self) -> str:
        return "memory://"

    def create_store(self):
        return InMemoryHotelStore()


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


class TestEnvironmentConfig:

    def test_defaults(self, monkeypatch):
        for key in ("HOTELRES_DATABASE_URL", "HOTELRES_LOG_LEVEL", "HOTELRES_ID_LENGTH", "HOTELRES_SEED_CATALOG", "HOTELRES_HOTEL_NAME"):
            monkeypatch.delenv(key, raising=False)
        config = EnvironmentHotelResConfig()
        assert config.get_database_url() == "sqlite:///hotelres.db"
        assert config.get_log_level() == "INFO"
        assert config.get_reservation_id_length() == 8
        assert config.get_seed_rooms() is None
        assert config.get_hotel_display_name() == "Hotel Reservation System"

    @pytest.mark.parametrize("value", ["abc", "2", "64"])
    def test_bad_id_length_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("HOTELRES_ID_LENGTH", value)
        assert EnvironmentHotelResConfig().get_reservation_id_length() == 8

    def test_create_store_uses_database_url(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOTELRES_DATABASE_URL", f"sqlite:///{tmp_path / 'hotel.db'}")
        store = EnvironmentHotelResConfig().create_store()
        assert isinstance(store, SQLiteHotelStore)
        assert store.db_path == str(tmp_path / "hotel.db")

    def test_create_engine_seeds_configured_catalog(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOTELRES_DATABASE_URL", f"sqlite:///{tmp_path / 'hotel.db'}")
        monkeypatch.setenv("HOTELRES_SEED_CATALOG", "STANDARD:2:101:100.00:2;SUITE:1:301:250.00:4")
        monkeypatch.setenv("HOTELRES_ID_LENGTH", "10")

        engine = EnvironmentHotelResConfig().create_engine()
        assert [r.room_number for r in engine.list_rooms()] == [101, 102, 301]
        assert os.path.exists(tmp_path / "hotel.db")


class TestSeedCatalog:

    def test_parse(self):
        rooms = parse_seed_catalog("deluxe:2:201:159.99:4; suite:1:301:249.99:6;")
        assert [r.room_number for r in rooms] == [201, 202, 301]
        assert rooms[0].room_type is RoomType.DELUXE
        assert rooms[2].price_per_night == Decimal("249.99")

    @pytest.mark.parametrize("value", [
        "STANDARD:2:101:100.00",
        "PENTHOUSE:1:901:999.00:2",
        "STANDARD:x:101:100.00:2",
        "STANDARD:1:101:abc:2",
        "STANDARD:1:101:0:2",
        "STANDARD:2:101:100.00:2;DELUXE:1:102:150.00:3",
    ])
    def test_invalid_entries(self, value):
        with pytest.raises(ConfigurationError):
            parse_seed_catalog(value)


class TestConfigSelection:

    def test_import_config_class_errors(self):
        with pytest.raises(ConfigurationError):
            _import_config_class("noseparator")
        with pytest.raises(ConfigurationError):
            _import_config_class("hotelres.does_not_exist.Config")
        with pytest.raises(ConfigurationError):
            _import_config_class("hotelres.config.MissingConfig")
        with pytest.raises(ConfigurationError):
            _import_config_class("hotelres.models.Room")

    def test_get_config_from_env(self, monkeypatch):
        monkeypatch.setenv("HOTELRES_CONFIG", "test_config.InMemoryConfig")
        config = get_config()
        assert type(config).__name__ == "InMemoryConfig"
        assert get_config() is config

    def test_default_config_class(self, monkeypatch):
        monkeypatch.delenv("HOTELRES_CONFIG", raising=False)
        assert isinstance(get_config(), EnvironmentHotelResConfig)

    def test_set_config(self):
        config = InMemoryConfig()
        set_config(config)
        assert get_config() is config
        engine = config.create_engine()
        assert len(engine.list_rooms()) == 18
