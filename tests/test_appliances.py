import pytest

from careme_types import UnusableReason
from exceptions import ApplianceUnusableError
from kitchen.appliances import CuttingBoard, Knife, Mixer, Pan, Pot, PotatoMasher, Wear


def is_usable(appliance) -> bool:
    wear = appliance.wear
    return wear.available and wear.clean and wear.durability > 0


def test_use_consumes_durability_until_broken():
    pan = Pan(wear=Wear(durability=3))
    for _ in range(3):
        assert pan.is_available()
        pan.use()

    assert pan.wear.durability == 0
    assert not pan.is_available()
    assert pan.wear.reason() == UnusableReason.BROKEN

    with pytest.raises(ApplianceUnusableError) as exc_info:
        pan.use()
    assert exc_info.value.reason == UnusableReason.BROKEN
    assert exc_info.value.appliance == "Pan"


def test_availability_tracks_wear_after_every_operation():
    knife = Knife()
    operations = [knife.soil, knife.wash, knife.use, knife.dull, knife.sharpen, knife.break_down, knife.wash]
    for operation in operations:
        operation()
        assert knife.is_available() == is_usable(knife)


def test_dirty_appliance_cannot_be_used_until_washed():
    pot = Pot()
    pot.soil()
    assert pot.wear.reason() == UnusableReason.DIRTY
    with pytest.raises(ApplianceUnusableError):
        pot.start_boil()

    pot.wash()
    pot.start_boil()
    assert pot.is_boiling()
    assert pot.wear.durability == 99


def test_break_down_is_not_undone_by_washing():
    masher = PotatoMasher()
    masher.break_down()
    masher.wash()

    assert not masher.is_available()
    with pytest.raises(ApplianceUnusableError):
        masher.mash()


def test_knife_needs_sharpness_and_availability():
    knife = Knife()
    assert knife.can_cut()
    knife.dull()
    assert not knife.can_cut()
    knife.sharpen()
    knife.soil()
    assert not knife.can_cut()


def test_board_bread_safety():
    board = CuttingBoard()
    assert board.is_safe_for_bread()
    board.soak()
    assert not board.is_safe_for_bread()
    board.dry()
    assert board.is_safe_for_bread()
    assert not CuttingBoard(wooden=False).is_safe_for_bread()


def test_pan_heat_cycle():
    pan = Pan()
    assert not pan.is_hot()
    pan.heat_up()
    assert pan.is_hot()
    pan.cool_down()
    assert not pan.is_hot()


def test_pot_capacity_depends_on_volume():
    pot = Pot(volume=2.0)
    assert pot.can_boil(2.0)
    assert not pot.can_boil(2.5)


def test_mixer_must_be_plugged_in():
    mixer = Mixer()
    with pytest.raises(ApplianceUnusableError) as exc_info:
        mixer.mix()
    assert exc_info.value.reason == UnusableReason.UNPLUGGED
    assert mixer.wear.durability == 100

    assert mixer.plug_in() is True
    mixer.mix()
    assert mixer.wear.durability == 99
    assert mixer.to_dict()["plugged_in"] is True
    assert mixer.unplug() is False


def test_to_dict_reports_state():
    pot = Pot(name="Soup pot", volume=3.0)
    pot.soil()
    assert pot.to_dict() == {
        "name": "Soup pot",
        "type": "Pot",
        "available": False,
        "clean": False,
        "durability": 100
    }
