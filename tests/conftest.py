from __future__ import annotations

from typing import List

import pytest

from pizzeria import Menu, Pizzeria
from pizzeria.entities import ItemCategory, MenuItem
from pizzeria.simulation import toppings_from_catalog
from topping_catalog import DEFAULT_TOPPINGS


class ScriptedConsole:
    """Stands in for ``input``/``print``; raises EOFError once answers run out."""

    def __init__(self) -> None:
        self.answers: List[str] = []
        self.prompts: List[str] = []
        self.output: List[str] = []

    def feed(self, *answers: object) -> None:
        self.answers.extend(str(answer) for answer in answers)

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def emit(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def seeded_menu() -> Menu:
    return Menu(
        [
            MenuItem("Margherita", 5.5, ItemCategory.PIZZA),
            MenuItem("Pepperoni", 6.5, ItemCategory.PIZZA),
            MenuItem("Coke", 1.5, ItemCategory.DRINK),
            MenuItem("Garlic Bread", 2.0, ItemCategory.SIDE_DISH),
        ]
    )


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def pizzeria(console: ScriptedConsole) -> Pizzeria:
    toppings = toppings_from_catalog(t.to_runtime_dict() for t in DEFAULT_TOPPINGS)
    return Pizzeria(seeded_menu(), toppings, prompt=console.prompt, emit=console.emit)


@pytest.fixture
def menu() -> Menu:
    return seeded_menu()
