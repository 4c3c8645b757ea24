import io
import logging

import pytest

from careme_types import CookingStage
from narration.narrators import (
    ConsoleNarrator, LoggingNarrator, ProgressEvent, RecordingNarrator, narrator_for
)


def test_console_narrator_prints_a_header_then_messages():
    stream = io.StringIO()
    narrator = ConsoleNarrator(stream)
    narrator.notify(ProgressEvent("Rice", CookingStage.STARTED, "Head cook starts Rice"))
    narrator.notify(ProgressEvent("Rice", CookingStage.TICK, "... 300/900s", 300))

    assert stream.getvalue() == "\n=== Cooking: Rice ===\n... 300/900s\n"


def test_logging_narrator_raises_warnings(caplog):
    narrator = LoggingNarrator()
    with caplog.at_level(logging.INFO, logger="careme.narration"):
        narrator.notify(ProgressEvent("Salad", CookingStage.PREPARED, "Prepared"))
        narrator.notify(ProgressEvent("Salad", CookingStage.WARNING, "No board"))

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING]
    assert "[Salad] No board" in caplog.text


def test_recording_narrator():
    narrator = RecordingNarrator()
    narrator.notify(ProgressEvent("Rice", CookingStage.STARTED, "start"))
    assert narrator.stages() == [CookingStage.STARTED]
    narrator.clear()
    assert narrator.events == []


def test_event_to_dict():
    event = ProgressEvent("Rice", CookingStage.TICK, "tick", 60)
    assert event.to_dict() == {
        "recipe": "Rice", "stage": "tick", "message": "tick", "elapsed_seconds": 60
    }


def test_narrator_for_modes():
    assert isinstance(narrator_for("console"), ConsoleNarrator)
    assert isinstance(narrator_for("LOG"), LoggingNarrator)
    assert narrator_for("silent") is None
    with pytest.raises(ValueError):
        narrator_for("radio")
