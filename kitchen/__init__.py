"""
Kitchen equipment and the cook that drives it.
"""

from .appliances import Appliance, CuttingBoard, Knife, Mixer, Pan, Pot, PotatoMasher, Wear
from .engine import Cook, CookingReport
from .oven import Oven
from .stove import Stove
from .timing import HeatProfile, Timer

__all__ = [
    "Appliance",
    "Wear",
    "Knife",
    "CuttingBoard",
    "Pan",
    "Pot",
    "Mixer",
    "PotatoMasher",
    "Oven",
    "Stove",
    "Timer",
    "HeatProfile",
    "Cook",
    "CookingReport"
]
