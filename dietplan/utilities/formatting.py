"""Display helpers for shopping list quantities.

Formatting is a presentation concern: the aggregator returns full-precision
sums and these helpers are only applied when items are shown.
"""
from dietplan.domain.ShoppingList import ShoppingItem
from dietplan.utilities.constants import QUANTITY_DECIMALS


def format_quantity(value: float) -> str:
    """Integral values without decimals, anything else to two decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{QUANTITY_DECIMALS}f}"


def describe_item(item: ShoppingItem) -> str:
    return f"{item.name}, {format_quantity(item.total_quantity)} {item.unit}"
