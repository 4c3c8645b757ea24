"""
Narration of cooking progress.
"""
from .narrators import (
    ProgressEvent,
    Narrator,
    LoggingNarrator,
    ConsoleNarrator,
    RecordingNarrator,
    narrator_for
)

__all__ = [
    'ProgressEvent',
    'Narrator',
    'LoggingNarrator',
    'ConsoleNarrator',
    'RecordingNarrator',
    'narrator_for'
]
