import pytest
from pydantic import ValidationError

from careme_types import BoardRule, CookingMethod, RecipeKind
from recipes.catalog import CATALOG, IngredientNeed, RecipeParams, params_for
from recipes.dishes import Recipe
from exceptions import OrchestratorMissingError


def test_catalog_covers_every_dish():
    assert set(CATALOG) == set(RecipeKind)
    assert len(CATALOG) == 25


@pytest.mark.parametrize("kind", list(RecipeKind))
def test_rows_are_consistent(kind):
    params = params_for(kind)
    assert params.kind == kind
    assert params.ingredients
    if params.uses_stove:
        assert params.total_seconds > 0
        assert params.ticks_per_batch() >= 1
    if params.method == CookingMethod.BAKE:
        assert params.oven_temperature <= 300.0
        assert params.expected_bake_minutes == params.bake_minutes


def test_known_rows():
    soup = CATALOG[RecipeKind.CHICKEN_SOUP]
    assert soup.method == CookingMethod.BOIL
    assert soup.slots == ["chicken", "veggies"]
    assert soup.pot_liters == 1.5
    assert soup.ticks_per_batch() == 6

    pancakes = CATALOG[RecipeKind.PANCAKES]
    assert pancakes.batches == 3
    assert pancakes.ticks_per_batch() == 4
    assert pancakes.flip_after_seconds == 60
    assert pancakes.needs_mixer

    assert CATALOG[RecipeKind.SALAD].board == BoardRule.ADVISORY
    assert CATALOG[RecipeKind.SANDWICH].board == BoardRule.BREAD_SAFE
    assert CATALOG[RecipeKind.MASHED_POTATO].needs_masher


def test_piece_counts_are_drawn_as_grams():
    def grams(kind, slot):
        return {n.slot: n.grams for n in CATALOG[kind].ingredients}[slot]

    assert grams(RecipeKind.PANCAKES, "eggs") == 2 * 50.0
    assert grams(RecipeKind.SCRAMBLED_EGGS, "eggs") == 3 * 50.0
    assert grams(RecipeKind.SANDWICH, "bread") == 2 * 30.0
    assert grams(RecipeKind.HOT_DOG, "bun") == 60.0
    assert grams(RecipeKind.HOT_DOG, "sausage") == 50.0


def test_ticks_round_up():
    params = CATALOG[RecipeKind.RICE].with_overrides(total_seconds=100, step_seconds=30)
    assert params.ticks_per_batch() == 4


def test_overrides_are_validated():
    with pytest.raises(ValidationError):
        CATALOG[RecipeKind.RICE].with_overrides(step_seconds=0)
    with pytest.raises(ValidationError):
        CATALOG[RecipeKind.COOKIES].with_overrides(bake_minutes=None)
    with pytest.raises(ValidationError):
        CATALOG[RecipeKind.STEAK].with_overrides(pot_liters=1.0)


def test_overrides_leave_the_catalog_untouched():
    changed = CATALOG[RecipeKind.STEAK].with_overrides(total_seconds=60)
    assert changed.total_seconds == 60
    assert CATALOG[RecipeKind.STEAK].total_seconds == 480


def test_rows_are_frozen():
    with pytest.raises(ValidationError):
        CATALOG[RecipeKind.RICE].total_seconds = 1


def test_ingredient_need_rejects_non_positive_grams():
    with pytest.raises(ValidationError):
        IngredientNeed(slot="salt", grams=0)


def test_stovetop_row_needs_duration():
    with pytest.raises(ValidationError):
        RecipeParams(kind=RecipeKind.RICE, method=CookingMethod.BOIL)


def test_build_routes_collaborators(make_stock, tools):
    rice = make_stock("Rice")
    recipe = Recipe.build(RecipeKind.RICE, "Rice", rice=rice, pot=tools["pot"], timer=tools["timer"])

    assert recipe.ingredients == {"rice": rice}
    assert recipe.pot is tools["pot"]
    assert recipe.timer is tools["timer"]
    assert recipe.stove is None
    assert recipe.params is CATALOG[RecipeKind.RICE]


def test_build_leaves_missing_slots_empty():
    recipe = Recipe.build(RecipeKind.CHICKEN_SOUP, "Soup")
    assert recipe.ingredients == {"chicken": None, "veggies": None}


def test_build_rejects_unknown_collaborators(make_stock):
    with pytest.raises(TypeError):
        Recipe.build(RecipeKind.RICE, "Rice", saffron=make_stock("Saffron"))


def test_cook_without_a_cook_raises():
    recipe = Recipe.build(RecipeKind.SALAD, "Salad")
    with pytest.raises(OrchestratorMissingError):
        recipe.cook()
