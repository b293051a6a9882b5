import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from KitchenOPS.domain.dish import Dish
from KitchenOPS.domain.ingredient import Ingredient
from KitchenOPS.domain.types import OrderCheck, StationIssue

logger = logging.getLogger(__name__)


@dataclass
class KitchenStation:
    """
    Poste de cuisine :
      - dishes            -> plats que la station sait préparer (noms uniques)
      - ingredients_stock -> stock d'ingrédients (noms uniques, quantités >= 0)

    The station owns its dishes and its stock records. Every stock record
    is a copy of what was handed in, so callers keep their own objects.
    """

    name: str = ""
    dishes: List[Dish] = field(default_factory=list)
    ingredients_stock: List[Ingredient] = field(default_factory=list)

    def __post_init__(self):
        initial_dishes, initial_stock = self.dishes, self.ingredients_stock
        self.dishes = []
        self.ingredients_stock = []
        for dish in initial_dishes:
            self.assign_dish_to_station(dish)
        for ingredient in initial_stock:
            self.replenish_station_ingredients(ingredient)

    # -------- Lookups --------

    def find_dish(self, dish_name: str) -> Optional[Dish]:
        for dish in self.dishes:
            if dish.name == dish_name:
                return dish
        return None

    def find_ingredient(self, ingredient_name: str) -> Optional[Ingredient]:
        for ingredient in self.ingredients_stock:
            if ingredient.name == ingredient_name:
                return ingredient
        return None

    def stock_quantity(self, ingredient_name: str) -> int:
        ingredient = self.find_ingredient(ingredient_name)
        return ingredient.quantity if ingredient is not None else 0

    # -------- Dishes & stock --------

    def assign_dish_to_station(self, dish: Dish) -> bool:
        """
        Ajoute le plat s'il n'existe pas déjà un plat du même nom.
        Retourne True si le plat a été ajouté.

        Passing anything but a Dish (None included) is a caller error.
        """
        if not isinstance(dish, Dish):
            raise TypeError(f"expected a Dish, got {type(dish).__name__}")
        if self.find_dish(dish.name) is not None:
            logger.debug(
                "%s: dish %r not assigned (%s)",
                self.name,
                dish.name,
                StationIssue.DUPLICATE_NAME.value,
            )
            return False
        self.dishes.append(dish)
        logger.debug("%s: dish %r assigned", self.name, dish.name)
        return True

    def replenish_station_ingredients(self, ingredient: Ingredient) -> None:
        """
        Ajoute la quantité au stock existant du même nom, sinon crée un
        nouvel enregistrement (copie). Ne diminue jamais le stock.
        """
        current = self.find_ingredient(ingredient.name)
        if current is not None:
            current.quantity += ingredient.quantity
        else:
            self.ingredients_stock.append(ingredient.model_copy())
        logger.debug(
            "%s: +%d %s (stock=%d)",
            self.name,
            ingredient.quantity,
            ingredient.name,
            self.stock_quantity(ingredient.name),
        )

    # -------- Feasibility --------

    def check_order(self, dish_name: str) -> OrderCheck:
        """
        Contrôle de faisabilité sans effet de bord.

        Requirements are summed per ingredient name before comparing with
        the stock, so a dish listing the same ingredient twice is only
        feasible when the stock covers both lines.

        Exemple
        -------
        >>> station = KitchenStation(
        ...     "Grill",
        ...     dishes=[Dish.from_requirements("Burger", {"bun": 1, "patty": 1})],
        ...     ingredients_stock=[Ingredient(name="bun", quantity=2)],
        ... )
        >>> check = station.check_order("Burger")
        >>> check.ok, check.issue, check.shortfalls
        (False, <StationIssue.INSUFFICIENT_STOCK: 'INSUFFICIENT_STOCK'>, {'patty': 1})
        """
        dish = self.find_dish(dish_name)
        if dish is None:
            return OrderCheck(
                dish_name=dish_name, ok=False, issue=StationIssue.NOT_FOUND
            )

        shortfalls: Dict[str, int] = {}
        for ingredient_name, required in dish.required_quantities().items():
            stock = self.find_ingredient(ingredient_name)
            if stock is None:
                # absent du stock : manquant même si rien n'est requis
                shortfalls[ingredient_name] = max(required, 1)
            elif stock.quantity < required:
                shortfalls[ingredient_name] = required - stock.quantity

        if shortfalls:
            return OrderCheck(
                dish_name=dish_name,
                ok=False,
                issue=StationIssue.INSUFFICIENT_STOCK,
                shortfalls=shortfalls,
            )
        return OrderCheck(dish_name=dish_name, ok=True)

    def can_complete_order(self, dish_name: str) -> bool:
        return self.check_order(dish_name).ok

    def max_portions(self, dish_name: str) -> int:
        """Nombre de fois que le plat peut être préparé avec le stock actuel."""
        dish = self.find_dish(dish_name)
        if dish is None or not self.can_complete_order(dish_name):
            return 0
        requirements = {
            name: qty for name, qty in dish.required_quantities().items() if qty > 0
        }
        if not requirements:
            # rien à consommer : pas de borne, 0 par convention
            return 0
        required = np.array(list(requirements.values()), dtype=np.int64)
        available = np.array(
            [self.stock_quantity(name) for name in requirements], dtype=np.int64
        )
        return int(np.min(np.floor_divide(available, required)))

    # -------- Preparation --------

    def prepare_dish(self, dish_name: str) -> bool:
        """
        Prépare le plat si possible : retire les quantités requises du stock,
        dans l'ordre des ingrédients du plat. Un ingrédient épuisé (<= 0) est
        supprimé du stock. Retourne True si le plat a été préparé.

        Nothing is consumed unless the whole dish is feasible.
        """
        check = self.check_order(dish_name)
        if not check.ok:
            logger.info(
                "%s: cannot prepare %r (%s) %s",
                self.name,
                dish_name,
                check.issue.value,
                check.shortfalls or "",
            )
            return False

        dish = self.find_dish(dish_name)
        if dish is None:
            return False

        for required in dish.ingredients:
            stock = self.find_ingredient(required.name)
            if stock is None:
                continue
            remaining = stock.quantity - required.required_quantity
            if remaining <= 0:
                self._drop_stock_record(stock)
            else:
                stock.quantity = remaining

        logger.info("%s: prepared %r", self.name, dish_name)
        return True

    def _drop_stock_record(self, stock: Ingredient) -> None:
        for index, ingredient in enumerate(self.ingredients_stock):
            if ingredient is stock:
                del self.ingredients_stock[index]
                return

    # -------- Views & teardown --------

    def snapshot(self) -> Dict[str, int]:
        """Vue simple du stock : {ingrédient: quantité}."""
        return {
            ingredient.name: ingredient.quantity
            for ingredient in self.ingredients_stock
        }

    def clear(self) -> None:
        """Drop every dish and stock record held by this station."""
        self.dishes.clear()
        self.ingredients_stock.clear()

    def __repr__(self) -> str:
        return (
            f"KitchenStation({self.name} dishes={len(self.dishes)} "
            f"stock={len(self.ingredients_stock)})"
        )
