from typing import Final

DAYS_IN_PLAN: Final[int] = 7
QUANTITY_DECIMALS: Final[int] = 2
