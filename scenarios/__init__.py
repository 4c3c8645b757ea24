"""
Kitchen Scenario Module
"""
from .kitchen import KitchenScenario, build_default_scenario, build_pantry, DISH_NAMES, UNITS

__all__ = ['KitchenScenario', 'build_default_scenario', 'build_pantry', 'DISH_NAMES', 'UNITS']
