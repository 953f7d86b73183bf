"""Centralised configuration constants for the pizzeria simulator."""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
MENU_FILE: Path = Path("data/menu.json")
TOPPINGS_FILE: Path = Path("data/toppings.json")

# ---------------------------------------------------------------------------
# Order entry sentinels
# ---------------------------------------------------------------------------
FINISH_ORDER: int = -1
REMOVE_ITEM: int = -2

# ---------------------------------------------------------------------------
# Top-level console menu (choice → label)
# ---------------------------------------------------------------------------
EXIT_CHOICE: int = 0
MAIN_MENU: dict[int, str] = {
    1: "Take Order",
    2: "Update Order Status",
    3: "Show All Orders",
    4: "Add Menu Item",
    5: "Cancel Order",
    6: "Show Order Board",
    EXIT_CHOICE: "Exit",
}

# ---------------------------------------------------------------------------
# Event log
# ---------------------------------------------------------------------------
EVENT_LOG_LIMIT: int = 12

# ---------------------------------------------------------------------------
# Order board (pygame kitchen display)
# ---------------------------------------------------------------------------
BOARD_W: int = 960
BOARD_ROW_H: int = 34
BOARD_HEADER_H: int = 64
BOARD_MIN_ROWS: int = 8
BOARD_FPS: int = 30

BOARD_PALETTE: dict[str, tuple[int, int, int]] = {
    "bg": (12, 15, 24),
    "panel": (20, 25, 38),
    "panel_border": (46, 56, 80),
    "text": (230, 236, 248),
    "muted": (161, 177, 205),
}

# Badge colour per order status name
STATUS_COLORS: dict[str, tuple[int, int, int]] = {
    "PENDING": (242, 186, 88),
    "PREPARING": (230, 190, 102),
    "READY": (106, 212, 148),
    "DELIVERED": (101, 189, 255),
    "CANCELLED": (196, 98, 96),
}
