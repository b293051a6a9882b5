"""
Tests for settings loading and preset-based setup.
"""
import json

import pytest
from pydantic import ValidationError

from KitchenOPS.config import KitchenSettings, load_settings
from KitchenOPS.core.setup import (
    StationPreset,
    build_default_manager,
    build_manager,
    build_station,
)
from KitchenOPS.data.stations_presets import STATION_PRESETS
from KitchenOPS.domain.dish import CuisineType
from KitchenOPS.utils import PACKAGE_LOGGER, configure_logging


def test_default_settings():
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.seed_default_stations is True


def test_load_settings_from_json(tmp_path):
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps({"log_level": "DEBUG", "seed_default_stations": False}))
    settings = load_settings(path)
    assert settings.log_level == "DEBUG"
    assert settings.seed_default_stations is False


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.json")


def test_load_settings_rejects_unknown_keys(tmp_path):
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps({"log_levl": "DEBUG"}))
    with pytest.raises(ValidationError):
        load_settings(path)


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    handlers = len(logger.handlers)
    configure_logging("WARNING")
    assert len(logger.handlers) == handlers
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == 30


def test_build_station_from_preset():
    preset = StationPreset.model_validate(STATION_PRESETS["Grill"])
    station = build_station("Grill", preset)
    assert station.name == "Grill"
    assert station.find_dish("Burger").cuisine_type is CuisineType.AMERICAN
    assert station.stock_quantity("patty") == 8
    assert station.can_complete_order("Burger") is True


def test_build_default_manager_order():
    manager = build_default_manager()
    # last preset added ends up at the front
    assert manager.station_names() == list(reversed(list(STATION_PRESETS)))


def test_build_default_manager_rejects_bad_presets():
    with pytest.raises(ValidationError):
        build_default_manager({"Grill": {"stock": {"bun": "many"}}})


def test_build_manager_without_seed():
    manager = build_manager(KitchenSettings(seed_default_stations=False))
    assert len(manager) == 0
    assert len(build_manager()) == len(STATION_PRESETS)


def test_configure_logging_reuses_its_named_handler():
    logger = configure_logging("INFO")
    named = [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER]
    configure_logging("DEBUG", "%(message)s")
    assert [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER] == named
    assert len(named) == 1
    assert named[0].formatter._fmt == "%(message)s"
