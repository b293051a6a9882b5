"""
Domain objects for KitchenOPS.

The domain layer holds the business objects that model ingredients,
dishes and kitchen stations. Ingredients and dishes are pydantic models,
stations are plain dataclasses to ease unit testing and avoid any side
effects outside the station itself.
"""

from .ingredient import Ingredient
from .dish import CuisineType, Dish
from .station import KitchenStation
from .types import OrderCheck, StationIssue

__all__ = [
    "Ingredient",
    "CuisineType",
    "Dish",
    "KitchenStation",
    "OrderCheck",
    "StationIssue",
]
