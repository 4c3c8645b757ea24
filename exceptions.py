"""
Error taxonomy for the kitchen simulation.
"""
from typing import Optional

from careme_types import UnusableReason


class KitchenError(Exception):
    """Base class for every kitchen failure."""


class StorageError(KitchenError):
    """A quantity has no unit to convert with."""


class InsufficientStockError(KitchenError):
    """More was requested than a stock or a pot can hold."""


class ApplianceUnusableError(KitchenError):
    """An appliance is missing, dirty, unavailable or broken."""

    def __init__(
        self,
        message: str,
        appliance: Optional[str] = None,
        reason: Optional[UnusableReason] = None
    ):
        super().__init__(message)
        self.appliance = appliance
        self.reason = reason


class TimerConfigError(KitchenError):
    """A timer was given a non-positive duration."""


class TimerMissingError(TimerConfigError):
    """A recipe has no timer attached."""


class InvalidTemperatureError(KitchenError):
    """Oven target out of range, door open or bad warmup window."""


class IngredientMissingError(KitchenError):
    """A recipe has no stock attached for one of its ingredients."""


class DonenessError(KitchenError):
    """Baking time fell outside the expected window."""

    def __init__(self, message: str, baked_minutes: int, expected_minutes: int):
        super().__init__(message)
        self.baked_minutes = baked_minutes
        self.expected_minutes = expected_minutes


class OvercookedError(DonenessError):
    """Baked for longer than the window allows."""


class UndercookedError(DonenessError):
    """Baked for less time than the window allows."""


class OrchestratorMissingError(KitchenError):
    """A recipe was asked to cook without a cook attached."""
