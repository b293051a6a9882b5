# smoke_test.py
"""
Smoke test minimal de la cuisine.
Valide :
- création du manager à partir des presets (Grill, Fryer, Pasta),
- préparation d'un plat et consommation du stock,
- réassort d'un ingrédient,
- déplacement d'une station en tête,
- fusion Fryer -> Grill.
"""

from KitchenOPS.config import load_settings
from KitchenOPS.core.setup import build_manager
from KitchenOPS.domain.ingredient import Ingredient


def main():
    settings = load_settings()
    logger = settings.apply_logging()

    # 1) Manager pré-rempli
    manager = build_manager(settings)
    logger.info("stations: %s", manager.station_names())

    # 2) Un burger au Grill
    ok = manager.prepare_dish_at_station("Grill", "Burger")
    grill = manager.find_station("Grill")
    logger.info("Burger prepared=%s, Grill stock=%s", ok, grill.snapshot())

    # 3) Réassort
    manager.replenish_ingredient_at_station("Grill", Ingredient(name="patty", quantity=5))
    logger.info("Burgers still possible at Grill: %d", grill.max_portions("Burger"))

    # 4) Grill en tête
    manager.move_station_to_front("Grill")
    logger.info("order after move: %s", manager.station_names())

    # 5) Fusion
    manager.merge_stations("Grill", "Fryer")
    logger.info(
        "after merge: %s, Grill dishes=%s",
        manager.station_names(),
        [dish.name for dish in grill.dishes],
    )
    logger.info("French Fries possible somewhere: %s", manager.can_complete_order("French Fries"))


if __name__ == "__main__":
    main()
