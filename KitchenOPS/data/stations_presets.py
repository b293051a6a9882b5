"""
Postes de cuisine par défaut (plats + stock initial).

Each preset maps a station name to its dishes ({dish: {ingredient: qty}})
and its opening stock ({ingredient: qty}). They are validated by
`KitchenOPS.core.setup.StationPreset` before use.
"""

from typing import Dict

STATION_PRESETS: Dict[str, dict] = {
    "Grill": {
        "dishes": {
            "Burger": {
                "requirements": {"bun": 1, "patty": 1, "lettuce": 1},
                "prep_time": 10,
                "price": 9.5,
                "cuisine_type": "AMERICAN",
            },
            "Grilled Cheese": {
                "requirements": {"bread": 2, "cheese": 2, "butter": 1},
                "prep_time": 6,
                "price": 6.5,
                "cuisine_type": "AMERICAN",
            },
        },
        "stock": {"bun": 10, "patty": 8, "lettuce": 6, "bread": 12, "cheese": 10, "butter": 4},
    },
    "Fryer": {
        "dishes": {
            "French Fries": {
                "requirements": {"potato": 2, "oil": 1},
                "prep_time": 5,
                "price": 3.5,
                "cuisine_type": "FRENCH",
            },
            "Onion Rings": {
                "requirements": {"onion": 1, "batter": 1, "oil": 1},
                "prep_time": 7,
                "price": 4.0,
                "cuisine_type": "AMERICAN",
            },
        },
        "stock": {"potato": 20, "oil": 10, "onion": 6, "batter": 6},
    },
    "Pasta": {
        "dishes": {
            "Spaghetti": {
                "requirements": {"pasta": 1, "tomato sauce": 1, "parmesan": 1},
                "prep_time": 12,
                "price": 11.0,
                "cuisine_type": "ITALIAN",
            },
        },
        "stock": {"pasta": 8, "tomato sauce": 6, "parmesan": 4},
    },
}
