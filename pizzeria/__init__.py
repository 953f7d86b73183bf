"""Pizzeria simulator package.

Public API:
    from pizzeria import Pizzeria, Menu, MenuItem, Order, Topping
"""
from pizzeria.entities import ItemCategory, MenuItem, Order, OrderStatus, OrderType, Topping
from pizzeria.menu import Menu
from pizzeria.simulation import Pizzeria

__all__ = [
    "ItemCategory",
    "Menu",
    "MenuItem",
    "Order",
    "OrderStatus",
    "OrderType",
    "Pizzeria",
    "Topping",
]
