"""
Recipe table and recipe bindings
"""
from .catalog import CATALOG, IngredientNeed, RecipeParams, params_for
from .dishes import Recipe

__all__ = ['CATALOG', 'IngredientNeed', 'RecipeParams', 'params_for', 'Recipe']
