"""ShoppingList aggregate: one ShoppingItem per case-insensitive (name, unit) key."""
from dataclasses import dataclass
from typing import Optional, Tuple
from dietplan.domain.Ingredient import merge_key


@dataclass(frozen=True)
class ShoppingItem:
    name: str
    unit: str
    total_quantity: float

    @property
    def key(self) -> Tuple[str, str]:
        return merge_key(self.name, self.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.total_quantity} {self.unit}"

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "total_quantity": self.total_quantity,
        }


@dataclass(frozen=True)
class ShoppingList:
    items: Tuple[ShoppingItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get_items(self):
        '''
        Returns the shopping list items in first-seen order.
        '''
        return list(self.items)

    def get(self, name: str, unit: str) -> Optional[ShoppingItem]:
        '''Case-insensitive lookup by (name, unit).'''
        wanted = merge_key(name, unit)
        for item in self.items:
            if item.key == wanted:
                return item
        return None

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def to_dict(self):
        return [item.to_dict() for item in self.items]
