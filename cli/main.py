"""
Command Line Interface using Fire - cook dishes in the simulated kitchen
"""
import fire
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from config import Settings, load_settings
from narration.narrators import narrator_for
from scenarios.kitchen import KitchenScenario, build_default_scenario
from cli.menu import Menu

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


class CaremeCLI:
    """Command-line interface for the Carême kitchen"""

    def __init__(self, config_path: str = "configs/config.yaml", stdin=None, stdout=None):
        """Load configuration and set up the default kitchen"""
        self._config_path = Path(config_path)
        self._settings: Settings = load_settings(self._config_path)
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

        narrator = narrator_for(self._settings.narration, self._stdout)
        self._scenario: KitchenScenario = build_default_scenario(
            self._settings,
            narrators=[narrator] if narrator else None
        )

    def _print(self, text: str = "") -> None:
        print(text, file=self._stdout)

    def menu(self) -> None:
        """Run the interactive menu"""
        menu = Menu(self._scenario.menu_recipes(), stdin=self._stdin, stdout=self._stdout)
        served = menu.run()
        logger.info(f"Menu closed after {served} dishes")

    def dishes(self) -> None:
        """List every dish with its cooking method"""
        self._print(f"\n{'#':<4} {'Dish':<22} {'Method':<8} {'Ingredients'}")
        self._print("-" * 70)
        for number, recipe in enumerate(self._scenario.menu_recipes(), start=1):
            params = recipe.params
            needs = ", ".join(f"{n.slot} {n.grams:g}g" for n in params.ingredients)
            self._print(f"{number:<4} {recipe.name:<22} {params.method.value:<8} {needs}")

    def cook(self, dish: Union[int, str], as_json: bool = False) -> None:
        """Cook one dish by menu number or name"""
        recipe = self._scenario.find_recipe(dish)
        if recipe is None:
            raise ValueError(f"Unknown dish: {dish}")

        report = recipe.cook()
        if as_json:
            self._print(json.dumps(report.to_dict(), indent=2))
        else:
            self._print(
                f"{recipe.name} is served! "
                f"({report.ticks} ticks, {report.simulated_seconds}s simulated)"
            )

    def status(self) -> None:
        """Show pantry and equipment status"""
        self._print(json.dumps(self._scenario.snapshot(), indent=2))

    def version(self) -> None:
        """Show version information"""
        self._print("Careme Kitchen Simulation")
        self._print(f"Version: {VERSION}")


def main(argv: Optional[list] = None):
    """Main CLI entry point"""
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0].endswith('.yaml'):
        config_path = argv.pop(0)
    else:
        config_path = "configs/config.yaml"

    try:
        cli = CaremeCLI(config_path)
        configure_logging(cli._settings)
        fire.Fire(cli, command=argv or ["menu"])
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
