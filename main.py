from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import (
    BOARD_FPS,
    BOARD_HEADER_H,
    BOARD_MIN_ROWS,
    BOARD_PALETTE,
    BOARD_ROW_H,
    BOARD_W,
    EXIT_CHOICE,
    MAIN_MENU,
    MENU_FILE,
    STATUS_COLORS,
    TOPPINGS_FILE,
)
from menu_catalog import load_menu_catalog
from pizzeria import Menu, Order, Pizzeria
from pizzeria.console import Emit, Prompt, read_int
from pizzeria.entities import format_price
from pizzeria.simulation import toppings_from_catalog
from topping_catalog import load_topping_catalog


class OrderBoardUI:
    """Read-only kitchen display of every order, drawn with pygame."""

    def __init__(self, pizzeria: Pizzeria):
        if pygame is None:
            raise RuntimeError("pygame is required for the order board")
        pygame.init()
        pygame.display.init()
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Use the console views instead.")
        self.pizzeria = pizzeria
        self.event_rows = 4
        rows = max(BOARD_MIN_ROWS, len(pizzeria.orders))
        height = BOARD_HEADER_H + rows * BOARD_ROW_H + (self.event_rows + 1) * BOARD_ROW_H
        try:
            self.screen = pygame.display.set_mode((BOARD_W, height))
        except pygame.error as exc:
            raise RuntimeError(f"Display subsystem is unavailable ({exc}).") from exc
        pygame.display.set_caption("Pizzeria Order Board")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 24)
        self.small = pygame.font.SysFont("arial", 18)
        self.running = True

    def handle_input(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            if ev.type == pygame.KEYDOWN and ev.key in (pygame.K_ESCAPE, pygame.K_q):
                self.running = False

    def _draw_status_badge(self, x: int, y: int, status_name: str) -> None:
        color = STATUS_COLORS.get(status_name, BOARD_PALETTE["muted"])
        label = self.small.render(status_name, True, (12, 15, 24))
        rect = pygame.Rect(x, y + 4, label.get_width() + 16, BOARD_ROW_H - 8)
        pygame.draw.rect(self.screen, color, rect, border_radius=8)
        self.screen.blit(label, (x + 8, y + 7))

    def draw_order_row(self, row: int, order: Order) -> None:
        y = BOARD_HEADER_H + row * BOARD_ROW_H
        if row % 2:
            pygame.draw.rect(self.screen, BOARD_PALETTE["panel"], pygame.Rect(0, y, BOARD_W, BOARD_ROW_H))
        text = BOARD_PALETTE["text"]
        muted = BOARD_PALETTE["muted"]
        self.screen.blit(self.small.render(f"#{order.id}", True, text), (16, y + 7))
        self.screen.blit(self.small.render(order.customer_name, True, text), (80, y + 7))
        self.screen.blit(self.small.render(order.order_type.name, True, muted), (320, y + 7))
        self.screen.blit(self.small.render(f"{len(order.items)} items", True, muted), (460, y + 7))
        self._draw_status_badge(580, y, order.status.name)
        self.screen.blit(self.small.render(format_price(order.total), True, text), (800, y + 7))

    def draw(self) -> None:
        self.screen.fill(BOARD_PALETTE["bg"])
        title = f"Order Board | {len(self.pizzeria.orders)} orders (Esc to close)"
        self.screen.blit(self.font.render(title, True, BOARD_PALETTE["text"]), (16, 18))
        pygame.draw.line(
            self.screen, BOARD_PALETTE["panel_border"], (0, BOARD_HEADER_H - 2), (BOARD_W, BOARD_HEADER_H - 2), 2
        )

        for row, order in enumerate(self.pizzeria.orders):
            self.draw_order_row(row, order)

        log_y = self.screen.get_height() - (self.event_rows + 1) * BOARD_ROW_H
        pygame.draw.line(self.screen, BOARD_PALETTE["panel_border"], (0, log_y), (BOARD_W, log_y), 2)
        for offset, message in enumerate(self.pizzeria.event_log[-self.event_rows:]):
            line = self.small.render(message, True, BOARD_PALETTE["muted"])
            self.screen.blit(line, (16, log_y + 8 + offset * BOARD_ROW_H))

        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            self.clock.tick(BOARD_FPS)
            self.handle_input()
            self.draw()
        pygame.quit()


def show_order_board(pizzeria: Pizzeria) -> None:
    try:
        board = OrderBoardUI(pizzeria)
    except RuntimeError as exc:
        pizzeria.emit(f"Order board unavailable: {exc}")
        return
    board.run()


def build_pizzeria(
    menu_path: Path = MENU_FILE,
    toppings_path: Path = TOPPINGS_FILE,
    *,
    explicit: Tuple[bool, bool] = (False, False),
    prompt: Prompt = input,
    emit: Emit = print,
) -> Pizzeria:
    for path, given in zip((menu_path, toppings_path), explicit):
        if given and not path.exists():
            raise RuntimeError(f"Catalog file not found: {path}")
    menu = Menu.from_catalog(load_menu_catalog(menu_path))
    toppings = toppings_from_catalog(load_topping_catalog(toppings_path))
    return Pizzeria(menu, toppings, prompt=prompt, emit=emit)


def run_console(pizzeria: Pizzeria) -> None:
    actions: Dict[int, Callable[[], object]] = {
        1: pizzeria.take_order,
        2: pizzeria.update_order_status,
        3: pizzeria.show_all_orders,
        4: pizzeria.add_menu_item,
        5: pizzeria.cancel_order,
        6: lambda: show_order_board(pizzeria),
    }
    emit = pizzeria.emit

    while True:
        emit("\n--- Pizzeria Simulator ---")
        for key, label in MAIN_MENU.items():
            emit(f"{key}. {label}")

        try:
            choice: Optional[int] = read_int(pizzeria.prompt, "Choice: ")
            if choice == EXIT_CHOICE:
                break
            action = actions.get(choice) if choice is not None else None
            if action is None:
                emit("Invalid choice.")
                continue
            action()
        except EOFError:
            break

    emit("Exiting...")


def main() -> None:
    parser = argparse.ArgumentParser(description="Pizzeria order-taking simulator")
    parser.add_argument("--menu", type=Path, default=None, help=f"JSON menu catalog (default {MENU_FILE})")
    parser.add_argument(
        "--toppings", type=Path, default=None, help=f"JSON topping catalog (default {TOPPINGS_FILE})"
    )
    args = parser.parse_args()

    try:
        pizzeria = build_pizzeria(
            args.menu or MENU_FILE,
            args.toppings or TOPPINGS_FILE,
            explicit=(args.menu is not None, args.toppings is not None),
        )
    except RuntimeError as exc:
        print(f"Startup error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    run_console(pizzeria)


if __name__ == "__main__":
    main()
