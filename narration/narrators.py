"""
Progress events and the narrators that receive them.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO

from careme_types import CookingStage

logger = logging.getLogger(__name__)


@dataclass
class ProgressEvent:
    """A single step reported by the cook while preparing a dish."""
    recipe: str
    stage: CookingStage
    message: str
    elapsed_seconds: int = 0

    def to_dict(self) -> Dict:
        return {
            "recipe": self.recipe,
            "stage": self.stage.value,
            "message": self.message,
            "elapsed_seconds": self.elapsed_seconds
        }


class Narrator:
    """Receives progress events from the cook."""

    def notify(self, event: ProgressEvent) -> None:
        raise NotImplementedError


class LoggingNarrator(Narrator):
    """Sends progress to the standard logging system."""

    def __init__(self, logger_name: str = "careme.narration", level: int = logging.INFO):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def notify(self, event: ProgressEvent) -> None:
        level = logging.WARNING if event.stage == CookingStage.WARNING else self.level
        self.logger.log(level, f"[{event.recipe}] {event.message}")


class ConsoleNarrator(Narrator):
    """Prints progress lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def notify(self, event: ProgressEvent) -> None:
        stream = self.stream or sys.stdout
        if event.stage == CookingStage.STARTED:
            print(f"\n=== Cooking: {event.recipe} ===", file=stream)
            return
        print(event.message, file=stream)


@dataclass
class RecordingNarrator(Narrator):
    """Keeps every event it receives."""
    events: List[ProgressEvent] = field(default_factory=list)

    def notify(self, event: ProgressEvent) -> None:
        self.events.append(event)

    def stages(self) -> List[CookingStage]:
        return [event.stage for event in self.events]

    def clear(self) -> None:
        self.events.clear()


def narrator_for(mode: str, stream: Optional[TextIO] = None) -> Optional[Narrator]:
    """Build the narrator named by a settings value."""
    mode = mode.lower()
    if mode == "console":
        return ConsoleNarrator(stream)
    if mode == "log":
        return LoggingNarrator()
    if mode == "silent":
        return None
    raise ValueError(f"Unknown narration mode: {mode}")
