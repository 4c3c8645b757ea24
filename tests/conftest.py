import pytest

import config
from config import Settings
from kitchen.appliances import CuttingBoard, Knife, Mixer, Pan, Pot, PotatoMasher
from kitchen.engine import Cook
from kitchen.oven import Oven
from kitchen.stove import Stove
from kitchen.timing import Timer
from narration.narrators import RecordingNarrator
from pantry.measurement import Quantity, Unit
from pantry.stock import Stock
from scenarios.kitchen import build_default_scenario

GRAM = Unit(name="g", grams_per_unit=1.0)


def _make_stock(name: str, grams: float = 1000.0) -> Stock:
    return Stock(name=name, quantity=Quantity(grams, GRAM))


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """Tests must not share a cached Settings instance."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def recorder():
    return RecordingNarrator()


@pytest.fixture
def cook(recorder):
    return Cook("Test cook", [recorder])


@pytest.fixture
def settings():
    return Settings(narration="silent")


@pytest.fixture
def scenario(settings, recorder):
    return build_default_scenario(settings, narrators=[recorder])


@pytest.fixture
def tools():
    """A fresh, fully usable set of equipment."""
    return {
        "pot": Pot(volume=3.0),
        "pan": Pan(),
        "stove": Stove(),
        "timer": Timer(),
        "oven": Oven(),
        "knife": Knife(),
        "board": CuttingBoard(),
        "mixer": Mixer(),
        "masher": PotatoMasher(),
    }


@pytest.fixture
def make_stock():
    return _make_stock
