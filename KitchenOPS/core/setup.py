from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, RootModel

from KitchenOPS.config import KitchenSettings
from KitchenOPS.data.stations_presets import STATION_PRESETS
from KitchenOPS.domain.dish import CuisineType, Dish
from KitchenOPS.domain.ingredient import Ingredient
from KitchenOPS.domain.station import KitchenStation
from KitchenOPS.core.station_manager import StationManager


class DishPreset(BaseModel):
    requirements: Dict[str, int] = Field(default_factory=dict)
    prep_time: int = Field(default=0, ge=0)
    price: float = Field(default=0.0, ge=0.0)
    cuisine_type: CuisineType = CuisineType.OTHER


class StationPreset(BaseModel):
    dishes: Dict[str, DishPreset] = Field(default_factory=dict)
    stock: Dict[str, int] = Field(default_factory=dict)


class StationPresets(RootModel[Dict[str, StationPreset]]):
    pass


def build_station(name: str, preset: StationPreset) -> KitchenStation:
    """Crée une station à partir d'un preset validé."""
    station = KitchenStation(name)
    for dish_name, dish_preset in preset.dishes.items():
        station.assign_dish_to_station(
            Dish.from_requirements(
                dish_name,
                dish_preset.requirements,
                prep_time=dish_preset.prep_time,
                price=dish_preset.price,
                cuisine_type=dish_preset.cuisine_type,
            )
        )
    for ingredient_name, qty in preset.stock.items():
        station.replenish_station_ingredients(
            Ingredient(name=ingredient_name, quantity=qty)
        )
    return station


def build_default_manager(
    presets: Optional[Mapping[str, dict]] = None,
) -> StationManager:
    """
    Construit un StationManager à partir des presets (par défaut
    STATION_PRESETS). Stations are added in table order, so the last
    preset ends up at the front.
    """
    validated = StationPresets.model_validate(
        dict(presets if presets is not None else STATION_PRESETS)
    )
    manager = StationManager()
    for station_name, preset in validated.root.items():
        manager.add_station(build_station(station_name, preset))
    return manager


def build_manager(settings: Optional[KitchenSettings] = None) -> StationManager:
    """Manager prêt à l'emploi selon la configuration (vide ou pré-rempli)."""
    settings = settings or KitchenSettings()
    if settings.seed_default_stations:
        return build_default_manager()
    return StationManager()
