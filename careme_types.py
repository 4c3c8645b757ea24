"""
Type definitions for Carême kitchen simulation
"""
from enum import Enum


class RecipeKind(Enum):
    """Dishes the cook knows how to prepare"""
    CHICKEN_SOUP = "chicken_soup"
    SALAD = "salad"
    BAKED_MEAT = "baked_meat"
    PANCAKES = "pancakes"
    PASTA = "pasta"
    SCRAMBLED_EGGS = "scrambled_eggs"
    VEG_GRILL = "veg_grill"
    MEAT_STEW = "meat_stew"
    SANDWICH = "sandwich"
    COOKIES = "cookies"
    RICE = "rice"
    BOILED_EGGS = "boiled_eggs"
    MASHED_POTATO = "mashed_potato"
    GRILLED_CHEESE = "grilled_cheese"
    FRIED_FISH = "fried_fish"
    FRUIT_SALAD = "fruit_salad"
    PORRIDGE = "porridge"
    STEAK = "steak"
    HOT_DOG = "hot_dog"
    SAUTEED_MUSHROOMS = "sauteed_mushrooms"
    FRIED_POTATO = "fried_potato"
    TOMATO_SOUP = "tomato_soup"
    VEG_OMELETTE = "veg_omelette"
    GARLIC_BREAD = "garlic_bread"
    SIMPLE_SAUCE = "simple_sauce"


class CookingMethod(Enum):
    """How a dish is cooked"""
    BOIL = "boil"    # pot on the stove
    FRY = "fry"      # pan on the stove
    BAKE = "bake"    # oven
    PREP = "prep"    # knife and board only


class BoardRule(Enum):
    """What a recipe expects from the cutting board"""
    NONE = "none"
    PRESENT = "present"
    BREAD_SAFE = "bread_safe"
    ADVISORY = "advisory"


class UnusableReason(Enum):
    """Why an appliance cannot be used"""
    MISSING = "missing"
    DIRTY = "dirty"
    UNAVAILABLE = "unavailable"
    BROKEN = "broken"
    UNPLUGGED = "unplugged"
    DULL = "dull"
    UNSAFE_FOR_BREAD = "unsafe_for_bread"


class CookingStage(Enum):
    """Progress stages reported while cooking"""
    STARTED = "started"
    WARNING = "warning"
    PREPARED = "prepared"
    MIXED = "mixed"
    HEATING = "heating"
    TICK = "tick"
    FLIPPED = "flipped"
    BATCH_DONE = "batch_done"
    COOLING = "cooling"
    MASHED = "mashed"
    BAKING = "baking"
    FINISHED = "finished"
