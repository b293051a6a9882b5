# KitchenOPS/domain/types.py
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class StationIssue(Enum):
    # Why a station or manager operation answered False
    NOT_FOUND = "NOT_FOUND"  # dish or station name not found
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"  # ingredient missing or short
    DUPLICATE_NAME = "DUPLICATE_NAME"  # dish name already assigned


# ---------- OrderCheck ----------


class OrderCheck(BaseModel):
    """Résultat du contrôle de faisabilité d'un plat sur une station.

    - ok         : True si la station peut préparer le plat maintenant
    - issue      : raison de l'échec (None si ok)
    - shortfalls : {ingrédient: quantité manquante} pour un stock insuffisant
    """

    dish_name: str
    ok: bool
    issue: Optional[StationIssue] = None
    shortfalls: Dict[str, int] = Field(default_factory=dict)
