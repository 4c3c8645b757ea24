"""
Units of measure and quantities expressed in them.
"""

from dataclasses import dataclass
from typing import Optional

from exceptions import StorageError


@dataclass(frozen=True)
class Unit:
    """A unit of measure with its weight in grams."""
    name: str = "unit"
    grams_per_unit: float = 1.0
    liquid: bool = False
    id: int = 0

    def __post_init__(self):
        if self.grams_per_unit <= 0:
            raise ValueError(f"Unit {self.name!r} must weigh more than 0 g")

    def to_grams(self, amount: float) -> float:
        return amount * self.grams_per_unit

    def is_liquid(self) -> bool:
        return self.liquid


@dataclass
class Quantity:
    """An amount of something, measured in a unit."""
    value: float = 0.0
    unit: Optional[Unit] = None
    approximate: bool = False
    id: int = 0

    def to_grams(self) -> float:
        if self.unit is None:
            raise StorageError("Unit is not set for quantity")
        return self.unit.to_grams(self.value)

    def scale(self, factor: float) -> None:
        self.value *= factor

    def is_zero(self) -> bool:
        return self.value <= 0.0
