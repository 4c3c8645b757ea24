"""
Pantry package: units of measure, quantities and stocks.
"""

from .measurement import Unit, Quantity
from .stock import Stock

__all__ = [
    "Unit",
    "Quantity",
    "Stock"
]
