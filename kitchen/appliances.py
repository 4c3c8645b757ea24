"""
Kitchen appliances and their usability state.

Every appliance embeds a ``Wear`` record (clean / available / busy /
durability). ``Appliance`` provides the shared operations on it; the
specialised tools add their own flags and domain operations on top.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from careme_types import UnusableReason
from exceptions import ApplianceUnusableError

logger = logging.getLogger(__name__)


@dataclass
class Wear:
    """Usability and durability of a piece of equipment."""
    clean: bool = True
    available: bool = True
    busy: bool = False
    durability: int = 100

    def is_usable(self) -> bool:
        return self.available and self.clean and self.durability > 0

    def reason(self) -> Optional[UnusableReason]:
        """Why the equipment is unusable, or None if it is usable."""
        if self.durability <= 0:
            return UnusableReason.BROKEN
        if not self.available:
            return UnusableReason.UNAVAILABLE
        if not self.clean:
            return UnusableReason.DIRTY
        return None


class Appliance:
    """Shared behaviour for anything carrying a ``Wear`` record."""

    name: str
    wear: Wear

    def is_available(self) -> bool:
        return self.wear.is_usable()

    def use(self) -> None:
        """Use the appliance once, consuming one unit of durability."""
        reason = self.wear.reason()
        if reason is not None:
            raise ApplianceUnusableError(
                f"{self.name} is not usable ({reason.value})",
                appliance=self.name,
                reason=reason
            )

        self.wear.busy = True
        self.wear.durability -= 1
        if self.wear.durability <= 0:
            self.wear.durability = 0
            self.wear.available = False
            logger.warning(f"{self.name} wore out")
        self.wear.busy = False

    def wash(self) -> None:
        self.wear.clean = True

    def soil(self) -> None:
        self.wear.clean = False

    def break_down(self) -> None:
        self.wear.available = False
        self.wear.durability = 0
        logger.warning(f"{self.name} broke down")

    def _require_usable(self) -> None:
        if not self.is_available():
            reason = self.wear.reason()
            raise ApplianceUnusableError(
                f"{self.name} is not available",
                appliance=self.name,
                reason=reason
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": type(self).__name__,
            "available": self.is_available(),
            "clean": self.wear.clean,
            "durability": self.wear.durability
        }


@dataclass
class Knife(Appliance):
    """Kitchen knife."""
    name: str = "Knife"
    sharp: bool = True
    size: int = 20
    id: int = 0
    wear: Wear = field(default_factory=Wear)

    def sharpen(self) -> None:
        self.sharp = True

    def dull(self) -> None:
        self.sharp = False

    def can_cut(self) -> bool:
        return self.is_available() and self.sharp


@dataclass
class CuttingBoard(Appliance):
    """Cutting board; bread needs a dry wooden one."""
    name: str = "Cutting board"
    wooden: bool = True
    wet: bool = False
    id: int = 0
    wear: Wear = field(default_factory=Wear)

    def dry(self) -> None:
        self.wet = False

    def soak(self) -> None:
        self.wet = True

    def is_safe_for_bread(self) -> bool:
        return self.wooden and not self.wet and self.is_available()


@dataclass
class Pan(Appliance):
    """Frying pan."""
    name: str = "Pan"
    diameter: float = 24.0
    non_stick: bool = True
    on_stove: bool = False
    wear: Wear = field(default_factory=Wear)

    def heat_up(self) -> None:
        self._require_usable()
        self.use()
        self.on_stove = True

    def cool_down(self) -> None:
        self.on_stove = False

    def is_hot(self) -> bool:
        return self.on_stove


@dataclass
class Pot(Appliance):
    """Cooking pot; ``volume`` is in litres."""
    name: str = "Pot"
    volume: float = 2.0
    has_lid: bool = True
    on_stove: bool = False
    wear: Wear = field(default_factory=Wear)

    def start_boil(self) -> None:
        self._require_usable()
        self.use()
        self.on_stove = True

    def stop_boil(self) -> None:
        self.on_stove = False

    def is_boiling(self) -> bool:
        return self.on_stove

    def can_boil(self, liters: float) -> bool:
        return liters <= self.volume


@dataclass
class Mixer(Appliance):
    """Electric mixer; only mixes while plugged in."""
    name: str = "Mixer"
    plugged_in: bool = False
    wear: Wear = field(default_factory=Wear)

    def plug_in(self) -> bool:
        self.plugged_in = True
        return self.plugged_in

    def unplug(self) -> bool:
        self.plugged_in = False
        return self.plugged_in

    def mix(self) -> None:
        if not self.plugged_in:
            raise ApplianceUnusableError(
                f"{self.name} is not plugged in",
                appliance=self.name,
                reason=UnusableReason.UNPLUGGED
            )
        self._require_usable()
        self.use()

    def to_dict(self) -> Dict[str, Any]:
        base = super().to_dict()
        base["plugged_in"] = self.plugged_in
        return base


@dataclass
class PotatoMasher(Appliance):
    """Potato masher."""
    name: str = "Potato masher"
    id: int = 0
    wear: Wear = field(default_factory=Wear)

    def mash(self) -> None:
        self._require_usable()
        self.use()
