"""The pizzeria's position-indexed catalog of menu items."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from pizzeria.console import Emit, Prompt, read_int, read_price, read_text
from pizzeria.entities import ItemCategory, MenuItem, selector_choices


class Menu:
    """Ordered catalog of :class:`MenuItem` templates.

    Entries are only ever handed out as clones, so nothing placed into an
    order can alter the catalog.
    """

    def __init__(self, items: Iterable[MenuItem] = ()) -> None:
        self._items: List[MenuItem] = [item.clone() for item in items]

    @classmethod
    def from_catalog(cls, catalog: Iterable[Dict[str, str | float]]) -> "Menu":
        menu = cls()
        for entry in catalog:
            menu.add_item(ItemCategory.from_key(str(entry["category"])), str(entry["name"]), float(entry["price"]))
        return menu

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return (item.clone() for item in self._items)

    def display_menu(self) -> str:
        lines = ["--- MENU ---"]
        for index, item in enumerate(self._items):
            lines.append(f"{index}. {item.display()}")
        return "\n".join(lines)

    def get_item_copy(self, index: Optional[int]) -> Optional[MenuItem]:
        if index is None or not 0 <= index < len(self._items):
            return None
        return self._items[index].clone()

    def add_item(self, category: ItemCategory, name: str, price: float) -> MenuItem:
        item = MenuItem(name=name, base_price=price, category=category)
        self._items.append(item)
        return item.clone()

    def add_new_item(self, prompt: Prompt, emit: Emit) -> Optional[MenuItem]:
        emit("Add New Menu Item")
        selector = read_int(prompt, f"Choose type ({selector_choices(ItemCategory)}): ")
        name = read_text(prompt, "Enter name: ")
        price = read_price(prompt, "Enter price: $")

        try:
            category = ItemCategory(selector)
        except ValueError:
            emit("Invalid type.")
            return None
        if not name:
            emit("Invalid name.")
            return None
        if price is None:
            emit("Invalid price.")
            return None

        return self.add_item(category, name, price)
