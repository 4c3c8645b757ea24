"""
Composition root: one pantry, one set of tools, one cook and every recipe.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from careme_types import BoardRule, CookingMethod, RecipeKind
from config import Settings, get_settings
from kitchen.appliances import CuttingBoard, Knife, Mixer, Pan, Pot, PotatoMasher, Wear
from kitchen.engine import Cook
from kitchen.oven import Oven
from kitchen.stove import Stove
from kitchen.timing import Timer
from narration.narrators import Narrator
from pantry.measurement import Quantity, Unit
from pantry.stock import Stock
from recipes.catalog import CATALOG
from recipes.dishes import Recipe

logger = logging.getLogger(__name__)


GRAM = Unit(name="g", grams_per_unit=1.0, liquid=False, id=1)
MILLILITRE = Unit(name="ml", grams_per_unit=1.0, liquid=True, id=2)
PIECE = Unit(name="piece", grams_per_unit=50.0, liquid=False, id=3)

UNITS = {unit.name: unit for unit in (GRAM, MILLILITRE, PIECE)}

# slug -> (display name, amount, unit, perishable)
PANTRY = {
    "chicken": ("Chicken", 1000.0, GRAM, True),
    "beef": ("Beef", 1200.0, GRAM, True),
    "veggies": ("Vegetables", 1500.0, GRAM, True),
    "tomatoes": ("Tomatoes", 1000.0, GRAM, True),
    "potatoes": ("Potatoes", 2000.0, GRAM, False),
    "rice": ("Rice", 1000.0, GRAM, False),
    "pasta": ("Pasta", 1000.0, GRAM, False),
    "oil": ("Oil", 500.0, MILLILITRE, False),
    "milk": ("Milk", 1500.0, MILLILITRE, True),
    "cream": ("Cream", 500.0, MILLILITRE, True),
    "flour": ("Flour", 1500.0, GRAM, False),
    "sugar": ("Sugar", 500.0, GRAM, False),
    "eggs": ("Eggs", 24.0, PIECE, True),
    "bread": ("Bread", 1000.0, GRAM, True),
    "cheese": ("Cheese", 800.0, GRAM, True),
    "sauce": ("Tomato sauce", 700.0, MILLILITRE, False),
    "fruits": ("Fruits", 1500.0, GRAM, True),
    "garlic": ("Garlic", 100.0, GRAM, False),
    "sauce_base": ("Sauce base", 300.0, MILLILITRE, False),
    "fish": ("Fish", 900.0, GRAM, True),
    "oats": ("Oats", 500.0, GRAM, False),
    "mushrooms": ("Mushrooms", 600.0, GRAM, True),
    "buns": ("Hot dog buns", 600.0, GRAM, False),
    "sausages": ("Sausages", 6.0, PIECE, True),
}

# Recipe slots that draw from a stock with a different slug
SLOT_STOCK = {
    "meat": "beef",
    "base": "sauce_base",
    "bun": "buns",
    "sausage": "sausages",
}

DISH_NAMES = {
    RecipeKind.CHICKEN_SOUP: "Chicken soup",
    RecipeKind.SALAD: "Salad",
    RecipeKind.BAKED_MEAT: "Baked meat",
    RecipeKind.PANCAKES: "Pancakes",
    RecipeKind.PASTA: "Pasta",
    RecipeKind.SCRAMBLED_EGGS: "Scrambled eggs",
    RecipeKind.VEG_GRILL: "Grilled vegetables",
    RecipeKind.MEAT_STEW: "Meat stew",
    RecipeKind.SANDWICH: "Sandwich",
    RecipeKind.COOKIES: "Cookies",
    RecipeKind.RICE: "Rice",
    RecipeKind.BOILED_EGGS: "Boiled eggs",
    RecipeKind.MASHED_POTATO: "Mashed potato",
    RecipeKind.GRILLED_CHEESE: "Grilled cheese",
    RecipeKind.FRIED_FISH: "Fried fish",
    RecipeKind.FRUIT_SALAD: "Fruit salad",
    RecipeKind.PORRIDGE: "Porridge",
    RecipeKind.STEAK: "Steak",
    RecipeKind.HOT_DOG: "Hot dog",
    RecipeKind.SAUTEED_MUSHROOMS: "Sauteed mushrooms",
    RecipeKind.FRIED_POTATO: "Fried potato",
    RecipeKind.TOMATO_SOUP: "Tomato soup",
    RecipeKind.VEG_OMELETTE: "Vegetable omelette",
    RecipeKind.GARLIC_BREAD: "Garlic bread",
    RecipeKind.SIMPLE_SAUCE: "Simple sauce",
}


@dataclass
class KitchenScenario:
    """Everything the default kitchen is made of."""
    settings: Settings
    cook: Cook
    stocks: Dict[str, Stock] = field(default_factory=dict)
    knife: Optional[Knife] = None
    board: Optional[CuttingBoard] = None
    pan: Optional[Pan] = None
    soup_pot: Optional[Pot] = None
    pasta_pot: Optional[Pot] = None
    masher: Optional[PotatoMasher] = None
    mixer: Optional[Mixer] = None
    oven: Optional[Oven] = None
    stove: Optional[Stove] = None
    timers: Dict[RecipeKind, Timer] = field(default_factory=dict)
    recipes: Dict[RecipeKind, Recipe] = field(default_factory=dict)

    def menu_recipes(self) -> List[Recipe]:
        return list(self.recipes.values())

    def find_recipe(self, key: Union[int, str, RecipeKind]) -> Optional[Recipe]:
        """Look a recipe up by menu number, kind value or display name."""
        if isinstance(key, RecipeKind):
            return self.recipes.get(key)
        if isinstance(key, int) or str(key).isdigit():
            index = int(key)
            recipes = self.menu_recipes()
            if 1 <= index <= len(recipes):
                return recipes[index - 1]
            return None

        wanted = str(key).strip().lower().replace("-", "_").replace(" ", "_")
        for recipe in self.recipes.values():
            if wanted in (recipe.kind.value, recipe.name.lower().replace(" ", "_")):
                return recipe
        return None

    def appliances(self) -> List[Any]:
        tools = [self.knife, self.board, self.pan, self.soup_pot, self.pasta_pot, self.masher, self.mixer]
        return [tool for tool in tools if tool is not None]

    def snapshot(self) -> Dict[str, Any]:
        """Current state of the pantry and equipment."""
        return {
            "cook": self.cook.name,
            "stocks": {slug: stock.to_dict() for slug, stock in self.stocks.items()},
            "appliances": [tool.to_dict() for tool in self.appliances()],
            "oven": self.oven.to_dict() if self.oven else None,
            "stove": self.stove.to_dict() if self.stove else None,
            "recipes": [recipe.name for recipe in self.menu_recipes()]
        }


def build_pantry(overrides: Optional[Dict[str, float]] = None) -> Dict[str, Stock]:
    """Create the default stocks; ``overrides`` sets levels in grams."""
    overrides = overrides or {}
    unknown = set(overrides) - set(PANTRY)
    if unknown:
        logger.warning(f"Ignoring unknown pantry overrides: {', '.join(sorted(unknown))}")

    stocks = {}
    for slug, (name, amount, unit, perishable) in PANTRY.items():
        if slug in overrides:
            amount = overrides[slug] / unit.grams_per_unit
        stocks[slug] = Stock(name=name, quantity=Quantity(amount, unit), perishable=perishable)
    return stocks


def build_default_scenario(
    settings: Optional[Settings] = None,
    narrators: Optional[List[Narrator]] = None
) -> KitchenScenario:
    """Wire the default kitchen with every recipe on the menu."""
    settings = settings or get_settings()
    kitchen_config = settings.kitchen
    durability = kitchen_config.tool_durability

    def wear() -> Wear:
        return Wear(durability=durability)

    scenario = KitchenScenario(
        settings=settings,
        cook=Cook(settings.cook_name, narrators),
        stocks=build_pantry(settings.pantry.stock_grams),
        knife=Knife(name="Chef's knife", size=20, id=1, wear=wear()),
        board=CuttingBoard(name="Wooden board", wooden=True, id=1, wear=wear()),
        pan=Pan(name="Frying pan", diameter=26.0, wear=wear()),
        soup_pot=Pot(name="Soup pot", volume=3.0, wear=wear()),
        pasta_pot=Pot(name="Pasta pot", volume=4.0, wear=wear()),
        masher=PotatoMasher(id=1, wear=wear()),
        mixer=Mixer(plugged_in=False, wear=wear()),
        oven=Oven(max_temperature=kitchen_config.oven_max_temperature),
        stove=Stove(total_burners=kitchen_config.stove_burners),
    )

    for number, (kind, params) in enumerate(CATALOG.items(), start=1):
        if params.method == CookingMethod.BAKE:
            params = params.with_overrides(tolerance_minutes=kitchen_config.doneness_tolerance_minutes)

        collaborators: Dict[str, Any] = {
            slot: scenario.stocks[SLOT_STOCK.get(slot, slot)] for slot in params.slots
        }
        if params.method == CookingMethod.BOIL:
            pot = scenario.pasta_pot if kind == RecipeKind.PASTA else scenario.soup_pot
            collaborators.update(pot=pot, stove=scenario.stove)
        elif params.method == CookingMethod.FRY:
            collaborators.update(pan=scenario.pan, stove=scenario.stove)
        elif params.method == CookingMethod.BAKE:
            collaborators["oven"] = scenario.oven

        if params.uses_stove:
            timer = Timer(id=number)
            scenario.timers[kind] = timer
            collaborators["timer"] = timer
        if params.needs_knife:
            collaborators["knife"] = scenario.knife
        if params.board != BoardRule.NONE:
            collaborators["board"] = scenario.board
        if params.needs_mixer:
            collaborators["mixer"] = scenario.mixer
        if params.needs_masher:
            collaborators["masher"] = scenario.masher

        scenario.recipes[kind] = Recipe.build(
            kind, DISH_NAMES[kind], chef=scenario.cook, params=params, **collaborators
        )

    logger.debug(f"Default kitchen ready with {len(scenario.recipes)} recipes")
    return scenario
