import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, RootModel

PACKAGE_LOGGER = "KitchenOPS"


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def configure_logging(level: str = "INFO", fmt: str = logging.BASIC_FORMAT) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling it again only updates the level and format of that handler.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())

    handler = next(
        (
            h
            for h in package_logger.handlers
            if h.get_name() == PACKAGE_LOGGER
        ),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(PACKAGE_LOGGER)
        package_logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    return package_logger
