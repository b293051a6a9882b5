"""
Configuration de KitchenOPS.

Settings are a pydantic model; defaults apply unless a JSON document is
given, e.g.::

    {"log_level": "DEBUG", "seed_default_stations": false}
"""

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from KitchenOPS.utils import configure_logging, load_and_validate


class KitchenSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    seed_default_stations: bool = True  # build_default_manager() utilise les presets

    def apply_logging(self):
        return configure_logging(self.log_level, self.log_format)


def load_settings(path: Optional[Union[str, Path]] = None) -> KitchenSettings:
    """Return default settings, or the settings validated from a JSON file."""
    if path is None:
        return KitchenSettings()
    return load_and_validate(Path(path), KitchenSettings)
