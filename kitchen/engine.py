"""
The cook: validates a recipe's collaborators and drives them through the
cooking template in simulated time.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

from careme_types import BoardRule, CookingMethod, CookingStage, RecipeKind, UnusableReason
from exceptions import (
    ApplianceUnusableError, IngredientMissingError, InsufficientStockError,
    KitchenError, OvercookedError, TimerMissingError, UndercookedError
)
from narration.narrators import Narrator, ProgressEvent

if TYPE_CHECKING:
    from recipes.dishes import Recipe

logger = logging.getLogger(__name__)


@dataclass
class CookingReport:
    """What happened while one recipe was cooked."""
    recipe: str
    kind: RecipeKind
    method: CookingMethod
    events: List[ProgressEvent] = field(default_factory=list)
    ticks: int = 0
    simulated_seconds: int = 0

    def stages(self) -> List[CookingStage]:
        return [event.stage for event in self.events]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipe": self.recipe,
            "kind": self.kind.value,
            "method": self.method.value,
            "ticks": self.ticks,
            "simulated_seconds": self.simulated_seconds,
            "events": [event.to_dict() for event in self.events]
        }


def _missing(recipe: "Recipe", what: str) -> ApplianceUnusableError:
    return ApplianceUnusableError(
        f"{recipe.name} needs a {what}",
        appliance=what,
        reason=UnusableReason.MISSING
    )


def _unusable(recipe: "Recipe", appliance, reason: Optional[UnusableReason]) -> ApplianceUnusableError:
    label = reason.value if reason else "unusable"
    return ApplianceUnusableError(
        f"{appliance.name} cannot be used for {recipe.name} ({label})",
        appliance=appliance.name,
        reason=reason
    )


class Cook:
    """Executes recipes against the stocks and tools they reference.

    A cook keeps no state between dishes apart from its name and the
    narrators it reports progress to, so one instance serves every recipe.
    """

    def __init__(self, name: str = "Head cook", narrators: Optional[Iterable[Narrator]] = None):
        self.name = name
        self.narrators: List[Narrator] = list(narrators or [])
        self._procedures: Dict[CookingMethod, Callable[["Recipe", CookingReport], None]] = {
            CookingMethod.BOIL: self._cook_on_stove,
            CookingMethod.FRY: self._cook_on_stove,
            CookingMethod.BAKE: self._bake,
            CookingMethod.PREP: self._assemble,
        }

    def register_narrator(self, narrator: Narrator) -> None:
        self.narrators.append(narrator)

    def execute(self, recipe: "Recipe") -> CookingReport:
        """Cook one recipe.

        Errors propagate to the caller. Work done before the failure is
        kept: stocks already drawn stay drawn and tools keep their wear.
        """
        params = recipe.params
        procedure = self._procedures[params.method]
        report = CookingReport(recipe=recipe.name, kind=params.kind, method=params.method)

        logger.info(f"{self.name} starts {recipe.name} ({params.method.value})")
        self._emit(report, CookingStage.STARTED, f"{self.name} starts {recipe.name}")
        try:
            self._validate(recipe, report)
            self._prepare(recipe, report)
            procedure(recipe, report)
        except KitchenError as e:
            logger.warning(f"{recipe.name} failed: {e}")
            raise

        self._emit(report, CookingStage.FINISHED, f"{recipe.name} is ready!")
        logger.info(
            f"{recipe.name} finished after {report.simulated_seconds}s simulated "
            f"in {report.ticks} ticks"
        )
        return report

    # Validation

    def _validate(self, recipe: "Recipe", report: CookingReport) -> None:
        params = recipe.params
        self._check_heat_source(recipe)

        if params.uses_stove and recipe.timer is None:
            raise TimerMissingError(f"{recipe.name} needs a timer")

        for slot in params.slots:
            if recipe.ingredient(slot) is None:
                raise IngredientMissingError(f"{recipe.name} is missing {slot}")

        self._check_prep_tools(recipe, report)

        if params.pot_liters is not None and not recipe.pot.can_boil(params.pot_liters):
            raise InsufficientStockError(
                f"{recipe.pot.name} holds {recipe.pot.volume:g} L, "
                f"{recipe.name} needs {params.pot_liters:g} L"
            )

    def _check_heat_source(self, recipe: "Recipe") -> None:
        method = recipe.params.method
        if method == CookingMethod.BOIL:
            self._check_available(recipe, recipe.pot, "pot")
        elif method == CookingMethod.FRY:
            self._check_available(recipe, recipe.pan, "pan")
        elif method == CookingMethod.BAKE and recipe.oven is None:
            raise _missing(recipe, "oven")

        if recipe.params.uses_stove:
            if recipe.stove is None:
                raise _missing(recipe, "stove")
            if recipe.stove.free_burners() == 0:
                raise ApplianceUnusableError(
                    f"No free burner on the stove for {recipe.name}",
                    appliance="stove",
                    reason=UnusableReason.UNAVAILABLE
                )

    def _check_available(self, recipe: "Recipe", appliance, what: str) -> None:
        if appliance is None:
            raise _missing(recipe, what)
        if not appliance.is_available():
            raise _unusable(recipe, appliance, appliance.wear.reason())

    def _check_prep_tools(self, recipe: "Recipe", report: CookingReport) -> None:
        params = recipe.params

        if params.needs_knife:
            knife = recipe.knife
            if knife is None:
                raise _missing(recipe, "knife")
            if not knife.can_cut():
                reason = knife.wear.reason() or UnusableReason.DULL
                raise _unusable(recipe, knife, reason)

        board = recipe.board
        if params.board == BoardRule.PRESENT:
            self._check_available(recipe, board, "cutting board")
        elif params.board == BoardRule.BREAD_SAFE:
            self._check_available(recipe, board, "cutting board")
            if not board.is_safe_for_bread():
                raise _unusable(recipe, board, UnusableReason.UNSAFE_FOR_BREAD)
        elif params.board == BoardRule.ADVISORY:
            if board is None or not board.is_available():
                self._emit(
                    report, CookingStage.WARNING,
                    f"No usable cutting board, cutting {recipe.name} carefully"
                )

        if params.needs_mixer:
            self._check_available(recipe, recipe.mixer, "mixer")
        if params.needs_masher:
            self._check_available(recipe, recipe.masher, "potato masher")

    # Procedures

    def _prepare(self, recipe: "Recipe", report: CookingReport) -> None:
        for need in recipe.params.ingredients:
            stock = recipe.ingredient(need.slot)
            stock.use_amount(need.grams)
            self._emit(report, CookingStage.PREPARED, f"Prepared {need.grams:g} g of {stock.name}")

        if recipe.params.needs_mixer:
            recipe.mixer.plug_in()
            recipe.mixer.mix()
            self._emit(report, CookingStage.MIXED, f"Mixed with {recipe.mixer.name}")

    def _cook_on_stove(self, recipe: "Recipe", report: CookingReport) -> None:
        params = recipe.params
        boiling = params.method == CookingMethod.BOIL
        primary = recipe.pot if boiling else recipe.pan

        recipe.stove.turn_on_burner()
        if boiling:
            recipe.pot.start_boil()
            self._emit(report, CookingStage.HEATING, f"{primary.name} is boiling")
        else:
            recipe.pan.heat_up()
            self._emit(report, CookingStage.HEATING, f"{primary.name} is hot")

        timer = recipe.timer
        for batch in range(1, params.batches + 1):
            flipped = False
            timer.start(params.total_seconds)
            while not timer.is_finished():
                timer.advance(params.step_seconds)
                report.ticks += 1
                elapsed = report.simulated_seconds + timer.elapsed_seconds
                self._emit(
                    report, CookingStage.TICK,
                    f"... {timer.elapsed_seconds}/{params.total_seconds}s",
                    elapsed
                )
                if (params.flip_after_seconds and not flipped
                        and timer.elapsed_seconds >= params.flip_after_seconds):
                    flipped = True
                    self._emit(report, CookingStage.FLIPPED, "Flipped", elapsed)
            report.simulated_seconds += timer.elapsed_seconds
            if params.batches > 1:
                self._emit(
                    report, CookingStage.BATCH_DONE,
                    f"Batch {batch}/{params.batches} done"
                )

        if boiling:
            recipe.pot.stop_boil()
        else:
            recipe.pan.cool_down()
        recipe.stove.turn_off_burner()
        self._emit(report, CookingStage.COOLING, f"{primary.name} off the heat")

        if params.needs_masher:
            recipe.masher.mash()
            self._emit(report, CookingStage.MASHED, f"Mashed with {recipe.masher.name}")

    def _bake(self, recipe: "Recipe", report: CookingReport) -> None:
        params = recipe.params
        oven = recipe.oven

        oven.close_door()
        oven.preheat(params.oven_temperature, params.warmup_minutes)
        oven.set_timer_minutes(params.bake_minutes)
        self._emit(
            report, CookingStage.BAKING,
            f"Baking at {params.oven_temperature:g} for {params.bake_minutes} min"
        )

        while oven.is_on():
            oven.advance(params.bake_tick_seconds)
            report.ticks += 1
            self._emit(
                report, CookingStage.TICK,
                f"... oven at {oven.temperature:.0f}",
                oven.elapsed_seconds
            )
        report.simulated_seconds += oven.elapsed_seconds

        baked_minutes = oven.elapsed_seconds // 60
        expected = params.expected_bake_minutes
        tolerance = params.tolerance_minutes
        if baked_minutes > expected + tolerance:
            raise OvercookedError(
                f"{recipe.name} baked {baked_minutes} min, expected {expected} ± {tolerance}",
                baked_minutes, expected
            )
        if baked_minutes < expected - tolerance:
            raise UndercookedError(
                f"{recipe.name} baked {baked_minutes} min, expected {expected} ± {tolerance}",
                baked_minutes, expected
            )

    def _assemble(self, recipe: "Recipe", report: CookingReport) -> None:
        self._emit(report, CookingStage.PREPARED, f"{recipe.name} assembled")

    # Narration

    def _emit(
        self,
        report: CookingReport,
        stage: CookingStage,
        message: str,
        elapsed: Optional[int] = None
    ) -> None:
        event = ProgressEvent(
            recipe=report.recipe,
            stage=stage,
            message=message,
            elapsed_seconds=report.simulated_seconds if elapsed is None else elapsed
        )
        report.events.append(event)
        for narrator in self.narrators:
            try:
                narrator.notify(event)
            except Exception as e:
                logger.error(f"Narrator {type(narrator).__name__} failed on {stage.value}: {e}")
