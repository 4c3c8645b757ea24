"""
Stove with a fixed number of burners.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Stove:
    """Stove; it is on while at least one burner is lit."""
    total_burners: int = 4
    active_burners: int = 0
    is_gas: bool = True

    def __post_init__(self):
        self.active_burners = max(0, min(self.active_burners, self.total_burners))

    @property
    def on(self) -> bool:
        return self.active_burners > 0

    def turn_on_burner(self) -> None:
        if self.active_burners < self.total_burners:
            self.active_burners += 1

    def turn_off_burner(self) -> None:
        if self.active_burners > 0:
            self.active_burners -= 1

    def free_burners(self) -> int:
        return self.total_burners - self.active_burners

    def to_dict(self) -> Dict[str, Any]:
        return {
            "on": self.on,
            "active_burners": self.active_burners,
            "free_burners": self.free_burners(),
            "gas": self.is_gas
        }
