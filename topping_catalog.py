from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

TOPPINGS_FILE = Path("data/toppings.json")


@dataclass(frozen=True)
class ToppingDefinition:
    name: str
    price: float

    def to_runtime_dict(self) -> Dict[str, str | float]:
        return {"name": self.name, "price": self.price}


DEFAULT_TOPPINGS: List[ToppingDefinition] = [
    ToppingDefinition("Cheese", 0.5),
    ToppingDefinition("Olives", 0.3),
    ToppingDefinition("Mushrooms", 0.4),
    ToppingDefinition("Pepperoni", 0.6),
    ToppingDefinition("Pineapple", 0.5),
    ToppingDefinition("Tomatoes", 0.25),
]


def _is_non_negative_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value) and value >= 0


def _parse_topping_entry(entry: Dict[str, Any]) -> ToppingDefinition | None:
    name = entry.get("name")
    price = entry.get("price")

    if not isinstance(name, str) or not name.strip():
        return None
    if not _is_non_negative_number(price):
        return None

    return ToppingDefinition(name=name.strip(), price=float(price))


def _runtime_catalog(toppings: Iterable[ToppingDefinition]) -> List[Dict[str, str | float]]:
    return [topping.to_runtime_dict() for topping in toppings]


def load_topping_catalog(path: Path = TOPPINGS_FILE) -> List[Dict[str, str | float]]:
    defaults = _runtime_catalog(DEFAULT_TOPPINGS)
    if not path.exists():
        return defaults

    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return defaults

    if not isinstance(raw, list):
        return defaults

    parsed: Dict[str, ToppingDefinition] = {}
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        topping = _parse_topping_entry(entry)
        if topping is None or topping.name in parsed:
            continue
        parsed[topping.name] = topping

    if not parsed:
        return defaults

    return _runtime_catalog(parsed.values())
