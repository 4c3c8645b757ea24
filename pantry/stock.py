"""
Depletable stocks of ingredients.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict

from exceptions import InsufficientStockError
from .measurement import Quantity

logger = logging.getLogger(__name__)


@dataclass
class Stock:
    """A named supply of an ingredient that recipes draw from."""
    name: str
    quantity: Quantity
    calories: float = 0.0
    perishable: bool = False

    def __post_init__(self):
        # The stock owns its own copy of the quantity
        self.quantity = replace(self.quantity)

    @property
    def grams(self) -> float:
        return self.quantity.to_grams()

    def add_amount(self, grams: float) -> None:
        """Replenish the stock by ``grams``, keeping its unit."""
        if grams < 0:
            raise ValueError(f"Cannot add a negative amount to {self.name}")

        old_grams = self.quantity.to_grams()
        if old_grams > 0.0:
            self.quantity.scale((old_grams + grams) / old_grams)
        else:
            self.quantity.value = grams / self.quantity.unit.grams_per_unit

    def use_amount(self, grams: float) -> None:
        """Take ``grams`` out of the stock.

        Raises InsufficientStockError and leaves the stock untouched when
        less than ``grams`` is available.
        """
        if grams < 0:
            raise ValueError(f"Cannot use a negative amount of {self.name}")

        available = self.quantity.to_grams()
        if grams > available:
            raise InsufficientStockError(
                f"Not enough {self.name}: need {grams:g} g, have {available:g} g"
            )

        if available > 0.0:
            self.quantity.scale((available - grams) / available)
        logger.debug(f"Used {grams:g} g of {self.name}")

    def is_perishable(self) -> bool:
        return self.perishable

    def is_empty(self) -> bool:
        return self.quantity.is_zero()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "grams": round(self.grams, 2),
            "unit": self.quantity.unit.name if self.quantity.unit else None,
            "perishable": self.perishable,
            "calories": self.calories
        }
