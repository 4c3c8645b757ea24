"""
Recipes bound to the stocks and appliances they cook with.
"""

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Dict, Optional

from careme_types import RecipeKind
from exceptions import OrchestratorMissingError
from kitchen.appliances import CuttingBoard, Knife, Mixer, Pan, Pot, PotatoMasher
from kitchen.oven import Oven
from kitchen.stove import Stove
from kitchen.timing import Timer
from pantry.stock import Stock
from .catalog import RecipeParams, params_for

if TYPE_CHECKING:
    from kitchen.engine import Cook, CookingReport


@dataclass
class Recipe:
    """A dish plus references to everything it needs.

    The references are not owned: several recipes share the same pantry
    and tools, and any of them may be ``None``. Missing collaborators are
    only reported when the dish is cooked.
    """
    kind: RecipeKind
    name: str
    ingredients: Dict[str, Optional[Stock]] = field(default_factory=dict)
    pot: Optional[Pot] = None
    pan: Optional[Pan] = None
    stove: Optional[Stove] = None
    timer: Optional[Timer] = None
    oven: Optional[Oven] = None
    knife: Optional[Knife] = None
    board: Optional[CuttingBoard] = None
    mixer: Optional[Mixer] = None
    masher: Optional[PotatoMasher] = None
    chef: Optional["Cook"] = None
    params: Optional[RecipeParams] = None

    def __post_init__(self):
        if self.params is None:
            self.params = params_for(self.kind)

    @classmethod
    def build(
        cls,
        kind: RecipeKind,
        name: str,
        chef: Optional["Cook"] = None,
        params: Optional[RecipeParams] = None,
        **collaborators: Any
    ) -> "Recipe":
        """Create a recipe from keyword collaborators.

        Ingredient slots of the dish (``chicken=...``, ``milk=...``) and
        appliance fields (``pot=...``, ``timer=...``) can be mixed freely.
        """
        params = params or params_for(kind)
        slots = params.slots
        appliance_fields = {
            f.name for f in fields(cls)
        } - {"kind", "name", "ingredients", "chef", "params"}

        ingredients: Dict[str, Optional[Stock]] = {slot: None for slot in slots}
        tools: Dict[str, Any] = {}
        for key, value in collaborators.items():
            if key in ingredients:
                ingredients[key] = value
            elif key in appliance_fields:
                tools[key] = value
            else:
                raise TypeError(f"{kind.value} has no collaborator named '{key}'")

        return cls(
            kind=kind, name=name, ingredients=ingredients,
            chef=chef, params=params, **tools
        )

    def ingredient(self, slot: str) -> Optional[Stock]:
        return self.ingredients.get(slot)

    def cook(self) -> "CookingReport":
        if self.chef is None:
            raise OrchestratorMissingError(f"No cook assigned to {self.name}")
        return self.chef.execute(self)

    def __str__(self) -> str:
        return self.name
