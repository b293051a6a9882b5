"""
Pytest fixtures: dishes, stations and a populated station manager.
"""
import pytest

from KitchenOPS.core.station_manager import StationManager
from KitchenOPS.domain.dish import Dish
from KitchenOPS.domain.ingredient import Ingredient
from KitchenOPS.domain.station import KitchenStation


@pytest.fixture
def burger():
    return Dish.from_requirements("Burger", {"bun": 1, "patty": 1})


@pytest.fixture
def fries():
    return Dish.from_requirements("French Fries", {"potato": 2, "oil": 1})


@pytest.fixture
def grill(burger):
    """Grill with one Burger and stock {bun: 2, patty: 1}."""
    station = KitchenStation("Grill")
    station.assign_dish_to_station(burger)
    station.replenish_station_ingredients(Ingredient(name="bun", quantity=2))
    station.replenish_station_ingredients(Ingredient(name="patty", quantity=1))
    return station


@pytest.fixture
def fryer(fries):
    station = KitchenStation("Fryer")
    station.assign_dish_to_station(fries)
    station.assign_dish_to_station(Dish.from_requirements("Burger", {"bun": 5}))
    station.replenish_station_ingredients(Ingredient(name="potato", quantity=4))
    station.replenish_station_ingredients(Ingredient(name="oil", quantity=3))
    station.replenish_station_ingredients(Ingredient(name="bun", quantity=3))
    return station


@pytest.fixture
def manager(grill, fryer):
    """Order front to back: Pastry, Fryer, Grill."""
    station_manager = StationManager()
    station_manager.add_station(grill)
    station_manager.add_station(fryer)
    station_manager.add_station(KitchenStation("Pastry"))
    return station_manager
