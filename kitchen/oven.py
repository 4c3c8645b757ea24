"""
Oven combining a heating profile with a baking timer.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from exceptions import InvalidTemperatureError, TimerConfigError
from .timing import HeatProfile, Timer

logger = logging.getLogger(__name__)


@dataclass
class Oven:
    """Oven that warms up along a profile and switches off when its timer ends."""
    temperature: float = 0.0
    on: bool = False
    door_closed: bool = True
    max_temperature: float = 300.0
    baking_timer: Timer = field(default_factory=Timer)
    profile: HeatProfile = field(default_factory=HeatProfile)
    elapsed_seconds: int = 0

    def preheat(self, temperature: float, warmup_minutes: int = 10) -> None:
        if temperature <= 0.0 or temperature > self.max_temperature:
            raise InvalidTemperatureError(
                f"Invalid oven temperature {temperature:g} "
                f"(allowed: above 0 up to {self.max_temperature:g})"
            )
        if not self.door_closed:
            raise InvalidTemperatureError("Oven door is open")
        if warmup_minutes <= 0:
            raise InvalidTemperatureError("Warmup minutes must be > 0")

        self.profile.reset(self.temperature, temperature, warmup_minutes * 60)
        self.elapsed_seconds = 0
        self.on = True
        logger.debug(f"Oven preheating to {temperature:g} over {warmup_minutes} min")

    def turn_off(self) -> None:
        self.on = False
        self.temperature = 0.0

    def open_door(self) -> None:
        self.door_closed = False

    def close_door(self) -> None:
        self.door_closed = True

    def set_timer_minutes(self, minutes: int) -> None:
        if minutes <= 0:
            raise TimerConfigError("Timer minutes must be > 0")
        self.baking_timer.start(minutes * 60)

    def advance(self, delta_seconds: int) -> None:
        """Move oven time forward; the oven turns off once its timer is done."""
        if delta_seconds <= 0:
            return
        if self.on:
            self.elapsed_seconds += delta_seconds
            self.temperature = self.profile.current_temp(self.elapsed_seconds)
        self.baking_timer.advance(delta_seconds)
        if self.baking_timer.is_finished() and self.on:
            self.turn_off()

    def is_on(self) -> bool:
        return self.on

    def is_door_closed(self) -> bool:
        return self.door_closed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "on": self.on,
            "temperature": round(self.temperature, 1),
            "door_closed": self.door_closed,
            "timer_remaining_seconds": self.baking_timer.remaining_seconds
        }
