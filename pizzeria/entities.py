"""Core dataclasses for the pizzeria simulator."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional


class ItemCategory(Enum):
    """Menu item category; the value doubles as the console type selector."""

    PIZZA = 0
    DRINK = 1
    SIDE_DISH = 2

    @property
    def key(self) -> str:
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "ItemCategory":
        return cls[key.strip().upper()]


class OrderType(Enum):
    DINE_IN = 0
    TAKEAWAY = 1
    DELIVERY = 2


class OrderStatus(Enum):
    PENDING = 0
    PREPARING = 1
    READY = 2
    DELIVERED = 3
    CANCELLED = 4


def format_price(value: float) -> str:
    if abs(value) < 0.005:
        value = 0.0
    return f"${value:.2f}"


def selector_choices(enum_cls: type[Enum]) -> str:
    """Render ``0 - FIRST, 1 - SECOND, ...`` for a console prompt."""
    return ", ".join(f"{member.value} - {member.name}" for member in enum_cls)


@dataclass(frozen=True)
class Topping:
    """A priced extra that can be attached to a menu item."""

    name: str
    price: float

    def display(self) -> str:
        return f"  + {self.name} ({format_price(self.price)})"


@dataclass
class MenuItem:
    """A pizza, drink or side dish.

    Catalog entries on the :class:`~pizzeria.menu.Menu` are templates; an
    order always holds its own :meth:`clone` so that toppings chosen while
    ordering never leak back into the catalog.
    """

    name: str
    base_price: float
    category: ItemCategory = ItemCategory.PIZZA
    toppings: List[Topping] = field(default_factory=list)

    @property
    def price(self) -> float:
        return self.base_price + sum(topping.price for topping in self.toppings)

    def add_topping(self, topping: Topping) -> None:
        self.toppings.append(topping)

    def clone(self) -> "MenuItem":
        return replace(self, toppings=list(self.toppings))

    def display(self) -> str:
        lines = [f"{self.name} - {format_price(self.price)}"]
        lines.extend(topping.display() for topping in self.toppings)
        return "\n".join(lines)


@dataclass
class Order:
    """A customer order.

    ``total`` is maintained incrementally by :meth:`add_item` and
    :meth:`remove_item`; :meth:`calculate_total` recomputes it from the
    items and is the value of record once the order is placed.
    """

    id: int
    customer_name: str
    order_type: OrderType = OrderType.DINE_IN
    delivery_address: str = ""
    status: OrderStatus = OrderStatus.PENDING
    items: List[MenuItem] = field(default_factory=list)
    total: float = 0.0

    def add_item(self, item: Optional[MenuItem]) -> None:
        if item is None:
            return
        self.total += item.price
        self.items.append(item)

    def remove_item(self, index: int) -> bool:
        if not 0 <= index < len(self.items):
            return False
        self.total -= self.items[index].price
        del self.items[index]
        return True

    def calculate_total(self) -> float:
        self.total = sum(item.price for item in self.items)
        return self.total

    def update_status(self, status: OrderStatus) -> None:
        self.status = status

    def display_order(self) -> str:
        lines = [
            f"Order #{self.id} ({self.customer_name}) [{self.order_type.name}] "
            f"[Status: {self.status.name}]"
        ]
        if self.order_type is OrderType.DELIVERY:
            lines.append(f"Deliver to: {self.delivery_address}")
        for index, item in enumerate(self.items):
            lines.append(f"{index}. {item.display()}")
        lines.append(f"Total: {format_price(self.total)}")
        return "\n".join(lines)
