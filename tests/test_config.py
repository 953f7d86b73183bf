from __future__ import annotations

import unittest

from config import (
    BOARD_MIN_ROWS,
    EVENT_LOG_LIMIT,
    EXIT_CHOICE,
    FINISH_ORDER,
    MAIN_MENU,
    REMOVE_ITEM,
    STATUS_COLORS,
)
from pizzeria.entities import OrderStatus


class TestConfig(unittest.TestCase):
    """Config module sanity checks."""

    def test_main_menu_covers_every_choice(self):
        self.assertEqual(set(MAIN_MENU), {0, 1, 2, 3, 4, 5, 6})
        self.assertEqual(MAIN_MENU[EXIT_CHOICE], "Exit")

    def test_sentinels_never_collide_with_menu_positions(self):
        self.assertLess(FINISH_ORDER, 0)
        self.assertLess(REMOVE_ITEM, 0)
        self.assertNotEqual(FINISH_ORDER, REMOVE_ITEM)

    def test_every_status_has_a_board_colour(self):
        self.assertEqual(set(STATUS_COLORS), {status.name for status in OrderStatus})

    def test_limits_positive(self):
        self.assertGreater(EVENT_LOG_LIMIT, 0)
        self.assertGreater(BOARD_MIN_ROWS, 0)
