# KitchenOPS/domain/ingredient.py
"""
Ingredient record shared by dish recipes and station stock.

A dish only reads `required_quantity`; a station stock record only reads
`quantity`. Two records describe the same ingredient iff their names are
equal (case-sensitive).
"""

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str
    quantity: int = Field(default=0, ge=0)  # disponible en stock
    required_quantity: int = Field(default=0, ge=0)  # requis par le plat
