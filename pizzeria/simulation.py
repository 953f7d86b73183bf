"""Pizzeria: the order-taking workflow over one menu and its orders.

The class is split in two layers: plain methods that mutate state and
report misses through ``None``/``False`` returns, and the interactive
operations driven from the console, which read through an injected
``prompt`` callable and write through an injected ``emit`` callable.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from config import EVENT_LOG_LIMIT, FINISH_ORDER, REMOVE_ITEM
from menu_catalog import load_menu_catalog
from pizzeria.console import Emit, Prompt, read_int, read_text, read_yes
from pizzeria.entities import (
    MenuItem,
    Order,
    OrderStatus,
    OrderType,
    Topping,
    format_price,
    selector_choices,
)
from pizzeria.menu import Menu
from topping_catalog import load_topping_catalog


def toppings_from_catalog(catalog: Iterable[Dict[str, str | float]]) -> List[Topping]:
    return [Topping(str(entry["name"]), float(entry["price"])) for entry in catalog]


class Pizzeria:
    """Owns the menu, the predefined toppings and every order placed."""

    def __init__(
        self,
        menu: Optional[Menu] = None,
        toppings: Optional[Iterable[Topping]] = None,
        *,
        prompt: Prompt = input,
        emit: Emit = print,
    ) -> None:
        self.menu: Menu = menu if menu is not None else Menu.from_catalog(load_menu_catalog())
        if toppings is None:
            toppings = toppings_from_catalog(load_topping_catalog())
        self.toppings: tuple[Topping, ...] = tuple(toppings)
        self.orders: List[Order] = []
        self.next_order_id: int = 1
        self.event_log: List[str] = []
        self.prompt = prompt
        self.emit = emit
        self._log_event("Pizzeria opened")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_LIMIT:]

    def place_order(self, customer_name: str, order_type: OrderType, delivery_address: str = "") -> Order:
        order = Order(self.next_order_id, customer_name, order_type, delivery_address)
        self.next_order_id += 1
        return order

    def register_order(self, order: Order) -> Order:
        order.calculate_total()
        self.orders.append(order)
        self._log_event(f"Order #{order.id} placed for {order.customer_name} ({format_price(order.total)})")
        return order

    def find_order(self, order_id: Optional[int]) -> Optional[Order]:
        for order in self.orders:
            if order.id == order_id:
                return order
        return None

    def set_order_status(self, order_id: int, status: OrderStatus) -> bool:
        order = self.find_order(order_id)
        if order is None:
            return False
        order.update_status(status)
        self._log_event(f"Order #{order_id} status set to {status.name}")
        return True

    def cancel(self, order_id: int) -> bool:
        order = self.find_order(order_id)
        if order is None:
            return False
        order.update_status(OrderStatus.CANCELLED)
        self._log_event(f"Order #{order_id} cancelled")
        return True

    def topping_at(self, index: Optional[int]) -> Optional[Topping]:
        if index is None or not 0 <= index < len(self.toppings):
            return None
        return self.toppings[index]

    # ------------------------------------------------------------------
    # Interactive operations
    # ------------------------------------------------------------------

    def take_order(self) -> Optional[Order]:
        name = read_text(self.prompt, "Enter customer name: ")
        selector = read_int(self.prompt, f"Select order type ({selector_choices(OrderType)}): ")
        try:
            order_type = OrderType(selector)
        except ValueError:
            self.emit("Invalid order type.")
            return None

        address = ""
        if order_type is OrderType.DELIVERY:
            address = read_text(self.prompt, "Enter delivery address: ")

        order = self.place_order(name, order_type, address)
        try:
            self._fill_order(order)
        except BaseException:
            self._release_order_id(order)
            raise

        self.register_order(order)
        self.emit("Order placed successfully!")
        self.emit(order.display_order())
        return order

    def _release_order_id(self, order: Order) -> None:
        if order.id == self.next_order_id - 1:
            self.next_order_id = order.id

    def _fill_order(self, order: Order) -> None:
        while True:
            self.emit(self.menu.display_menu())
            index = read_int(
                self.prompt,
                f"Enter item index to add to order ({REMOVE_ITEM} to remove item, {FINISH_ORDER} to finish): ",
            )
            if index == FINISH_ORDER:
                break
            if index == REMOVE_ITEM:
                self.emit(order.display_order())
                remove_index = read_int(self.prompt, "Enter item index to remove: ")
                if remove_index is not None and order.remove_item(remove_index):
                    self.emit("Item removed from order.")
                else:
                    self.emit("Invalid index.")
                continue

            item = self.menu.get_item_copy(index)
            if item is None:
                self.emit("Invalid item.")
                continue
            self._choose_toppings(item)
            order.add_item(item)

    def _choose_toppings(self, item: MenuItem) -> None:
        while read_yes(self.prompt, f"Add topping to {item.name}? (y/n): "):
            self.emit("Available toppings:")
            for index, topping in enumerate(self.toppings):
                self.emit(f"{index}. {topping.name} ({format_price(topping.price)})")
            topping = self.topping_at(read_int(self.prompt, "Choose topping index: "))
            if topping is None:
                self.emit("Invalid topping index.")
                continue
            item.add_topping(topping)

    def update_order_status(self) -> bool:
        order = self.find_order(read_int(self.prompt, "Enter order ID to update: "))
        if order is None:
            self.emit("Order not found.")
            return False

        selector = read_int(self.prompt, f"Select new status ({selector_choices(OrderStatus)}): ")
        try:
            status = OrderStatus(selector)
        except ValueError:
            self.emit("Invalid status.")
            return False

        self.set_order_status(order.id, status)
        self.emit("Order status updated.")
        return True

    def cancel_order(self) -> bool:
        order_id = read_int(self.prompt, "Enter order ID to cancel: ")
        if order_id is None or not self.cancel(order_id):
            self.emit("Order not found.")
            return False
        self.emit(f"Order #{order_id} has been cancelled.")
        return True

    def show_all_orders(self) -> None:
        if not self.orders:
            self.emit("No orders yet.")
            return
        for order in self.orders:
            self.emit(order.display_order())

    def add_menu_item(self) -> Optional[MenuItem]:
        item = self.menu.add_new_item(self.prompt, self.emit)
        if item is not None:
            self._log_event(f"Menu item added: {item.name} ({item.category.key}, {format_price(item.price)})")
        return item
