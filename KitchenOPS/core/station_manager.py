import logging
from typing import Iterator, List, Optional

from KitchenOPS.domain.dish import Dish
from KitchenOPS.domain.ingredient import Ingredient
from KitchenOPS.domain.station import KitchenStation
from KitchenOPS.domain.types import StationIssue

logger = logging.getLogger(__name__)


class StationManager:
    """Collection ordonnée des stations de la cuisine.

    Index 0 is the front: the most recently added or moved station.
    Station names are expected to be unique but this is not enforced;
    every lookup by name returns the first match from the front.
    The manager owns its stations: removing or merging a station away
    releases it, and `clear()` releases all of them.
    """

    def __init__(self, stations: Optional[List[KitchenStation]] = None) -> None:
        self._stations: List[KitchenStation] = []
        for station in stations or []:
            self.add_station(station)

    # --- Collection ---

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[KitchenStation]:
        return iter(list(self._stations))

    def __contains__(self, station_name: object) -> bool:
        return isinstance(station_name, str) and self._index_of(station_name) >= 0

    def station_names(self) -> List[str]:
        return [station.name for station in self._stations]

    def _index_of(self, station_name: str) -> int:
        for index, station in enumerate(self._stations):
            if station.name == station_name:
                return index
        return -1

    def _index_of_station(self, station: KitchenStation) -> int:
        for index, candidate in enumerate(self._stations):
            if candidate is station:
                return index
        return -1

    def add_station(self, station: KitchenStation) -> bool:
        """Insère la station en tête de liste."""
        if not isinstance(station, KitchenStation):
            raise TypeError(
                f"expected a KitchenStation, got {type(station).__name__}"
            )
        self._stations.insert(0, station)
        logger.debug("station %r added at front (%d stations)", station.name, len(self))
        return True

    def remove_station(self, station_name: str) -> bool:
        """Retire et libère la première station portant ce nom."""
        index = self._index_of(station_name)
        if index < 0:
            logger.info(
                "remove %r: %s", station_name, StationIssue.NOT_FOUND.value
            )
            return False
        station = self._stations.pop(index)
        station.clear()
        logger.info("station %r removed (%d stations)", station_name, len(self))
        return True

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        index = self._index_of(station_name)
        return self._stations[index] if index >= 0 else None

    def move_station_to_front(self, station_name: str) -> bool:
        """
        Déplace la station en tête de liste. Les autres stations gardent leur
        ordre relatif. Une station déjà en tête reste en place (True).
        """
        index = self._index_of(station_name)
        if index < 0:
            logger.info(
                "move %r: %s", station_name, StationIssue.NOT_FOUND.value
            )
            return False
        if index > 0:
            self._stations.insert(0, self._stations.pop(index))
            logger.info("station %r moved to front (was #%d)", station_name, index)
        return True

    def merge_stations(self, station_name1: str, station_name2: str) -> bool:
        """
        Fusionne la station 2 dans la station 1 puis retire la station 2.

        Stock is merged additively by ingredient name. Dishes of station 2
        are assigned to station 1 unless station 1 already has a dish of the
        same name, in which case station 2's dish is dropped. Returns False,
        leaving everything untouched, when either station is missing or when
        both names designate the same station.
        """
        station1 = self.find_station(station_name1)
        station2 = self.find_station(station_name2)
        if station1 is None or station2 is None:
            logger.info(
                "merge %r <- %r: %s",
                station_name1,
                station_name2,
                StationIssue.NOT_FOUND.value,
            )
            return False
        if station1 is station2:
            logger.info("merge %r <- %r: same station", station_name1, station_name2)
            return False

        for ingredient in station2.ingredients_stock:
            station1.replenish_station_ingredients(ingredient)

        dropped = [
            dish.name
            for dish in station2.dishes
            if not station1.assign_dish_to_station(dish)
        ]

        # station1 holds the transferred dishes now; station2 must not keep them
        station2.clear()
        del self._stations[self._index_of_station(station2)]

        logger.info(
            "station %r merged into %r (dropped duplicate dishes: %s)",
            station_name2,
            station_name1,
            dropped or "none",
        )
        return True

    def clear(self) -> None:
        """Libère toutes les stations (et leurs plats) puis vide la liste."""
        for station in self._stations:
            station.clear()
        self._stations.clear()

    # --- Routing ---

    def assign_dish_to_station(self, station_name: str, dish: Dish) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.info(
                "assign %r to %r: %s",
                getattr(dish, "name", dish),
                station_name,
                StationIssue.NOT_FOUND.value,
            )
            return False
        return station.assign_dish_to_station(dish)

    def replenish_ingredient_at_station(
        self, station_name: str, ingredient: Ingredient
    ) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.info(
                "replenish %r at %r: %s",
                ingredient.name,
                station_name,
                StationIssue.NOT_FOUND.value,
            )
            return False
        station.replenish_station_ingredients(ingredient)
        return True

    def can_complete_order(self, dish_name: str) -> bool:
        """True si au moins une station peut préparer le plat."""
        return any(station.can_complete_order(dish_name) for station in self._stations)

    def stations_for_dish(self, dish_name: str) -> List[KitchenStation]:
        """Stations able to complete the order right now, front to back."""
        return [
            station
            for station in self._stations
            if station.can_complete_order(dish_name)
        ]

    def prepare_dish_at_station(self, station_name: str, dish_name: str) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.info(
                "prepare %r at %r: %s",
                dish_name,
                station_name,
                StationIssue.NOT_FOUND.value,
            )
            return False
        return station.prepare_dish(dish_name)

    def __repr__(self) -> str:
        return f"StationManager({self.station_names()})"
