"""Ingredient domain value: name, unit and a positive quantity."""
import math
from dataclasses import dataclass
from typing import Tuple


def merge_key(name: str, unit: str) -> Tuple[str, str]:
    '''Case-insensitive (name, unit) pair used to merge quantities.'''
    return ((name or "").lower(), (unit or "").lower())


@dataclass(frozen=True)
class Ingredient:
    name: str
    unit: str
    quantity: float

    def __post_init__(self):
        if not (self.quantity > 0 and math.isfinite(self.quantity)):
            raise ValueError(f"Ingredient quantity must be a positive finite number: {self.name} {self.quantity}")

    @property
    def key(self) -> Tuple[str, str]:
        return merge_key(self.name, self.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name", ""),
            unit=d.get("unit", ""),
            quantity=float(d.get("quantity", 0)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "quantity": self.quantity,
        }
