from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

MENU_FILE = Path("data/menu.json")
VALID_CATEGORIES = ("pizza", "drink", "side_dish")


@dataclass(frozen=True)
class MenuItemDefinition:
    name: str
    category: str
    price: float

    def to_runtime_dict(self) -> Dict[str, str | float]:
        return {
            "name": self.name,
            "category": self.category,
            "price": self.price,
        }


DEFAULT_MENU_ITEMS: List[MenuItemDefinition] = [
    MenuItemDefinition(name="Margherita", category="pizza", price=5.5),
    MenuItemDefinition(name="Pepperoni", category="pizza", price=6.5),
    MenuItemDefinition(name="Coke", category="drink", price=1.5),
    MenuItemDefinition(name="Garlic Bread", category="side_dish", price=2.0),
]


def _is_non_negative_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value) and value >= 0


def _parse_menu_entry(entry: Dict[str, Any]) -> MenuItemDefinition | None:
    name = entry.get("name")
    category = entry.get("category", "pizza")
    price = entry.get("price")

    if not isinstance(name, str) or not name.strip():
        return None
    if not isinstance(category, str):
        return None
    category = category.strip().lower()
    if category not in VALID_CATEGORIES:
        return None
    if not _is_non_negative_number(price):
        return None

    return MenuItemDefinition(name=name.strip(), category=category, price=float(price))


def _runtime_catalog(items: Iterable[MenuItemDefinition]) -> List[Dict[str, str | float]]:
    return [item.to_runtime_dict() for item in items]


def load_menu_catalog(path: Path = MENU_FILE) -> List[Dict[str, str | float]]:
    if not path.exists():
        return _runtime_catalog(DEFAULT_MENU_ITEMS)

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return _runtime_catalog(DEFAULT_MENU_ITEMS)

    if not isinstance(raw, list):
        return _runtime_catalog(DEFAULT_MENU_ITEMS)

    items: List[MenuItemDefinition] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        item = _parse_menu_entry(entry)
        if item is None:
            continue
        items.append(item)

    if not items:
        return _runtime_catalog(DEFAULT_MENU_ITEMS)

    return _runtime_catalog(items)
