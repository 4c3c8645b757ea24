"""
Interactive numbered menu of recipes.
"""

import sys
from typing import Iterable, List, Optional, TextIO

from recipes.dishes import Recipe


class Menu:
    """Numbered list of recipes with a 0-to-exit option."""

    def __init__(
        self,
        recipes: Optional[Iterable[Recipe]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        self.recipes: List[Recipe] = []
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        for recipe in recipes or []:
            self.add(recipe)

    def add(self, recipe: Optional[Recipe]) -> None:
        if recipe is not None:
            self.recipes.append(recipe)

    def show(self) -> None:
        print("\n=== MENU ===", file=self.stdout)
        for number, recipe in enumerate(self.recipes, start=1):
            print(f"{number}) {recipe.name}", file=self.stdout)
        print("0) Exit", file=self.stdout)
        print("Choose a dish: ", end="", file=self.stdout)

    def run(self) -> int:
        """Serve dishes until the guest exits.

        Anything that is not a number (or end of input) ends the loop
        quietly. Errors raised while cooking are left to the caller.
        Returns the number of dishes served.
        """
        served = 0
        while True:
            self.show()
            line = self.stdin.readline()
            if not line:
                break
            try:
                choice = int(line.strip())
            except ValueError:
                break

            if choice == 0:
                break
            if not 1 <= choice <= len(self.recipes):
                print("Invalid choice, try again.", file=self.stdout)
                continue

            recipe = self.recipes[choice - 1]
            recipe.cook()
            served += 1
            print(f"{recipe.name} is served!", file=self.stdout)

        print("Goodbye!", file=self.stdout)
        return served
