"""
Recipe parameter table.

Every dish follows the same cooking template; a ``RecipeParams`` row holds
everything that differs between them: ingredient amounts, the tools that
must be present, the timed stages and, for baked dishes, the oven program.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from careme_types import BoardRule, CookingMethod, RecipeKind


class IngredientNeed(BaseModel):
    """How much of one ingredient slot a dish takes."""
    model_config = ConfigDict(frozen=True)

    slot: str = Field(..., description="Ingredient slot name")
    grams: float = Field(..., gt=0, description="Grams drawn from the stock")


class RecipeParams(BaseModel):
    """One row of the recipe table."""
    model_config = ConfigDict(frozen=True)

    kind: RecipeKind
    method: CookingMethod
    ingredients: List[IngredientNeed] = Field(default_factory=list)

    # Stovetop stages
    pot_liters: Optional[float] = Field(default=None, gt=0, description="Minimum pot volume")
    total_seconds: int = Field(default=0, ge=0, description="Length of one timed stage")
    step_seconds: int = Field(default=60, gt=0, description="Simulated seconds per tick")
    batches: int = Field(default=1, ge=1, description="Number of timed stages")
    flip_after_seconds: Optional[int] = Field(default=None, gt=0)

    # Preparation tools
    needs_knife: bool = False
    board: BoardRule = BoardRule.NONE
    needs_mixer: bool = False
    needs_masher: bool = False

    # Oven program
    oven_temperature: Optional[float] = Field(default=None, gt=0)
    warmup_minutes: int = Field(default=10, gt=0)
    bake_minutes: Optional[int] = Field(default=None, gt=0)
    bake_tick_seconds: Optional[int] = Field(default=None, gt=0)
    expected_minutes: Optional[int] = Field(default=None, gt=0)
    tolerance_minutes: int = Field(default=5, ge=0)

    @model_validator(mode="after")
    def check_method_fields(self):
        if self.method in (CookingMethod.BOIL, CookingMethod.FRY) and self.total_seconds <= 0:
            raise ValueError(f"{self.kind.value}: stovetop dishes need total_seconds > 0")
        if self.method == CookingMethod.BAKE:
            missing = [
                name for name in ("oven_temperature", "bake_minutes", "bake_tick_seconds")
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(f"{self.kind.value}: baked dishes need {', '.join(missing)}")
        if self.pot_liters is not None and self.method != CookingMethod.BOIL:
            raise ValueError(f"{self.kind.value}: only boiled dishes use a pot")
        return self

    @property
    def uses_stove(self) -> bool:
        return self.method in (CookingMethod.BOIL, CookingMethod.FRY)

    @property
    def slots(self) -> List[str]:
        return [need.slot for need in self.ingredients]

    @property
    def expected_bake_minutes(self) -> Optional[int]:
        if self.expected_minutes is not None:
            return self.expected_minutes
        return self.bake_minutes

    def ticks_per_batch(self) -> int:
        """Number of timer advances needed for one timed stage."""
        return -(-self.total_seconds // self.step_seconds)

    def with_overrides(self, **changes) -> "RecipeParams":
        """Return a validated copy with some fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return RecipeParams.model_validate(data)


def _needs(**grams: float) -> List[IngredientNeed]:
    return [IngredientNeed(slot=slot, grams=amount) for slot, amount in grams.items()]


# Amounts counted in pieces, converted to grams
EGG = 50.0
BREAD_SLICE = 30.0

CATALOG: Dict[RecipeKind, RecipeParams] = {
    params.kind: params for params in [
        RecipeParams(
            kind=RecipeKind.CHICKEN_SOUP, method=CookingMethod.BOIL,
            ingredients=_needs(chicken=150.0, veggies=100.0),
            pot_liters=1.5, total_seconds=30 * 60, step_seconds=5 * 60
        ),
        RecipeParams(
            kind=RecipeKind.SALAD, method=CookingMethod.PREP,
            ingredients=_needs(veggies=120.0, oil=10.0),
            needs_knife=True, board=BoardRule.ADVISORY
        ),
        RecipeParams(
            kind=RecipeKind.BAKED_MEAT, method=CookingMethod.BAKE,
            ingredients=_needs(meat=200.0),
            oven_temperature=180.0, bake_minutes=30, bake_tick_seconds=300
        ),
        RecipeParams(
            kind=RecipeKind.PANCAKES, method=CookingMethod.FRY,
            ingredients=_needs(flour=150.0, eggs=2 * EGG, sugar=20.0, milk=200.0),
            total_seconds=2 * 60, step_seconds=30, batches=3, flip_after_seconds=60,
            needs_mixer=True
        ),
        RecipeParams(
            kind=RecipeKind.PASTA, method=CookingMethod.BOIL,
            ingredients=_needs(pasta=100.0, sauce=50.0),
            pot_liters=2.0, total_seconds=10 * 60, step_seconds=5 * 60
        ),
        RecipeParams(
            kind=RecipeKind.SCRAMBLED_EGGS, method=CookingMethod.FRY,
            ingredients=_needs(eggs=3 * EGG, milk=50.0),
            total_seconds=5 * 60, step_seconds=60, needs_mixer=True
        ),
        RecipeParams(
            kind=RecipeKind.VEG_GRILL, method=CookingMethod.FRY,
            ingredients=_needs(veggies=150.0),
            total_seconds=10 * 60, step_seconds=2 * 60,
            needs_knife=True, board=BoardRule.PRESENT
        ),
        RecipeParams(
            kind=RecipeKind.MEAT_STEW, method=CookingMethod.BOIL,
            ingredients=_needs(meat=150.0, veggies=100.0),
            total_seconds=45 * 60, step_seconds=5 * 60,
            needs_knife=True, board=BoardRule.PRESENT
        ),
        RecipeParams(
            kind=RecipeKind.SANDWICH, method=CookingMethod.PREP,
            ingredients=_needs(bread=2 * BREAD_SLICE, cheese=30.0, meat=20.0),
            needs_knife=True, board=BoardRule.BREAD_SAFE
        ),
        RecipeParams(
            kind=RecipeKind.COOKIES, method=CookingMethod.BAKE,
            ingredients=_needs(flour=200.0, sugar=50.0, eggs=2 * EGG, milk=100.0),
            needs_mixer=True,
            oven_temperature=190.0, bake_minutes=15, bake_tick_seconds=180
        ),
        RecipeParams(
            kind=RecipeKind.RICE, method=CookingMethod.BOIL,
            ingredients=_needs(rice=80.0),
            total_seconds=15 * 60, step_seconds=5 * 60
        ),
        RecipeParams(
            kind=RecipeKind.BOILED_EGGS, method=CookingMethod.BOIL,
            ingredients=_needs(eggs=3 * EGG),
            total_seconds=8 * 60, step_seconds=2 * 60
        ),
        RecipeParams(
            kind=RecipeKind.MASHED_POTATO, method=CookingMethod.BOIL,
            ingredients=_needs(potatoes=200.0, milk=50.0),
            total_seconds=20 * 60, step_seconds=5 * 60, needs_masher=True
        ),
        RecipeParams(
            kind=RecipeKind.GRILLED_CHEESE, method=CookingMethod.FRY,
            ingredients=_needs(bread=2 * BREAD_SLICE, cheese=40.0),
            total_seconds=5 * 60, step_seconds=60,
            needs_knife=True, board=BoardRule.BREAD_SAFE
        ),
        RecipeParams(
            kind=RecipeKind.FRIED_FISH, method=CookingMethod.FRY,
            ingredients=_needs(fish=150.0),
            total_seconds=7 * 60, step_seconds=60
        ),
        RecipeParams(
            kind=RecipeKind.FRUIT_SALAD, method=CookingMethod.PREP,
            ingredients=_needs(fruits=200.0),
            needs_knife=True, board=BoardRule.PRESENT
        ),
        RecipeParams(
            kind=RecipeKind.PORRIDGE, method=CookingMethod.BOIL,
            ingredients=_needs(oats=50.0, milk=150.0),
            total_seconds=7 * 60, step_seconds=60
        ),
        RecipeParams(
            kind=RecipeKind.STEAK, method=CookingMethod.FRY,
            ingredients=_needs(meat=180.0),
            total_seconds=8 * 60, step_seconds=60
        ),
        RecipeParams(
            kind=RecipeKind.HOT_DOG, method=CookingMethod.FRY,
            ingredients=_needs(bun=60.0, sausage=50.0),
            total_seconds=2 * 60, step_seconds=60
        ),
        RecipeParams(
            kind=RecipeKind.SAUTEED_MUSHROOMS, method=CookingMethod.FRY,
            ingredients=_needs(mushrooms=120.0),
            total_seconds=6 * 60, step_seconds=60
        ),
        RecipeParams(
            kind=RecipeKind.FRIED_POTATO, method=CookingMethod.FRY,
            ingredients=_needs(potatoes=200.0),
            total_seconds=12 * 60, step_seconds=3 * 60,
            needs_knife=True, board=BoardRule.PRESENT
        ),
        RecipeParams(
            kind=RecipeKind.TOMATO_SOUP, method=CookingMethod.BOIL,
            ingredients=_needs(tomatoes=150.0, veggies=80.0),
            total_seconds=25 * 60, step_seconds=5 * 60,
            needs_knife=True, board=BoardRule.PRESENT
        ),
        RecipeParams(
            kind=RecipeKind.VEG_OMELETTE, method=CookingMethod.FRY,
            ingredients=_needs(veggies=50.0, eggs=3 * EGG, milk=30.0),
            total_seconds=6 * 60, step_seconds=60,
            needs_knife=True, board=BoardRule.PRESENT, needs_mixer=True
        ),
        RecipeParams(
            kind=RecipeKind.GARLIC_BREAD, method=CookingMethod.BAKE,
            ingredients=_needs(garlic=5.0, bread=2 * BREAD_SLICE),
            needs_knife=True, board=BoardRule.BREAD_SAFE,
            oven_temperature=180.0, bake_minutes=8, bake_tick_seconds=120
        ),
        RecipeParams(
            kind=RecipeKind.SIMPLE_SAUCE, method=CookingMethod.FRY,
            ingredients=_needs(base=50.0, cream=50.0),
            total_seconds=4 * 60, step_seconds=60, needs_mixer=True
        ),
    ]
}


def params_for(kind: RecipeKind) -> RecipeParams:
    """Look up the table row for a dish."""
    return CATALOG[kind]
