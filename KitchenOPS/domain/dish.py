# KitchenOPS/domain/dish.py
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from KitchenOPS.domain.ingredient import Ingredient


class CuisineType(str, Enum):
    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"


class Dish(BaseModel):
    """Plat préparable par une station.

    Only `name` and `ingredients` (with `required_quantity` filled in) take
    part in station bookkeeping; prep time, price and cuisine type are
    informational. A station never writes into a dish's ingredient list.
    """

    name: str
    ingredients: List[Ingredient] = Field(default_factory=list)
    prep_time: int = Field(default=0, ge=0)  # minutes
    price: float = Field(default=0.0, ge=0.0)
    cuisine_type: CuisineType = CuisineType.OTHER

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("dish name must not be blank")
        return value

    @classmethod
    def from_requirements(cls, name: str, requirements: dict, **kwargs) -> "Dish":
        """Build a dish from a {ingredient_name: required_quantity} mapping.

        Exemple
        -------
        >>> burger = Dish.from_requirements("Burger", {"bun": 1, "patty": 1})
        >>> [(i.name, i.required_quantity) for i in burger.ingredients]
        [('bun', 1), ('patty', 1)]
        """
        ingredients = [
            Ingredient(name=ingredient_name, required_quantity=int(qty))
            for ingredient_name, qty in requirements.items()
        ]
        return cls(name=name, ingredients=ingredients, **kwargs)

    def required_quantities(self) -> dict:
        """{ingredient: quantité requise}, cumulée si un nom apparaît deux fois."""
        totals = {}
        for ingredient in self.ingredients:
            totals[ingredient.name] = (
                totals.get(ingredient.name, 0) + ingredient.required_quantity
            )
        return totals
