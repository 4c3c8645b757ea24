"""
Simulated kitchen time: countdown timers and heating profiles.
"""

from dataclasses import dataclass

from exceptions import TimerConfigError


@dataclass
class Timer:
    """Countdown over simulated seconds."""
    target_seconds: int = 0
    running: bool = False
    elapsed_seconds: int = 0
    id: int = 0

    def start(self, seconds: int) -> None:
        if seconds <= 0:
            raise TimerConfigError("Timer seconds must be > 0")
        self.target_seconds = seconds
        self.elapsed_seconds = 0
        self.running = True

    def advance(self, delta: int) -> None:
        if delta <= 0 or not self.running:
            return
        self.elapsed_seconds += delta
        if self.elapsed_seconds >= self.target_seconds:
            self.elapsed_seconds = self.target_seconds
            self.running = False

    def is_finished(self) -> bool:
        return (
            not self.running
            and self.elapsed_seconds >= self.target_seconds
            and self.target_seconds > 0
        )

    @property
    def remaining_seconds(self) -> int:
        return max(0, self.target_seconds - self.elapsed_seconds)


@dataclass
class HeatProfile:
    """Temperature over time while heating towards a target.

    A gradual profile ramps linearly from ``start_temp`` to ``target_temp``
    over ``duration_seconds``; an instant one is at the target straight away.
    """
    start_temp: float = 20.0
    target_temp: float = 180.0
    duration_seconds: int = 600
    gradual: bool = True

    def current_temp(self, elapsed: float) -> float:
        if not self.gradual or elapsed >= self.duration_seconds or self.duration_seconds <= 0:
            return self.target_temp
        ratio = elapsed / self.duration_seconds
        return self.start_temp + (self.target_temp - self.start_temp) * ratio

    def is_reached(self, current: float) -> bool:
        return current >= self.target_temp

    def reset(self, start: float, target: float, duration: int, gradual: bool = True) -> None:
        self.start_temp = start
        self.target_temp = target
        self.duration_seconds = duration
        self.gradual = gradual
