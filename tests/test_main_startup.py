from __future__ import annotations

import json
import sys

import pytest

import main
from config import FINISH_ORDER
from pizzeria.entities import OrderStatus


class _DisplayNotReady:
    @staticmethod
    def init() -> None:
        return None

    @staticmethod
    def get_init() -> bool:
        return False


class _FakePygameDisplayDown:
    error = RuntimeError
    display = _DisplayNotReady()

    @staticmethod
    def init() -> None:
        return None


def test_order_board_reports_display_startup_failure(monkeypatch, pizzeria):
    monkeypatch.setattr(main, "pygame", _FakePygameDisplayDown)

    with pytest.raises(RuntimeError, match="Display subsystem"):
        main.OrderBoardUI(pizzeria)


def test_order_board_requires_pygame(monkeypatch, pizzeria):
    monkeypatch.setattr(main, "pygame", None)

    with pytest.raises(RuntimeError, match="pygame is required"):
        main.OrderBoardUI(pizzeria)


def test_console_survives_missing_order_board(monkeypatch, pizzeria, console):
    monkeypatch.setattr(main, "pygame", None)
    console.feed(6, 0)

    main.run_console(pizzeria)

    assert "Order board unavailable: pygame is required for the order board" in console.output
    assert console.output[-1] == "Exiting..."


def test_console_full_session(pizzeria, console):
    console.feed(
        1, "Alice", 0, 0, "n", FINISH_ORDER,     # take order
        2, 1, OrderStatus.PREPARING.value,       # update status
        5, 1,                                    # cancel
        3,                                       # show all
        0,
    )

    main.run_console(pizzeria)

    assert len(pizzeria.orders) == 1
    assert pizzeria.orders[0].status is OrderStatus.CANCELLED
    assert "Order status updated." in console.output
    assert "Order #1 has been cancelled." in console.output
    assert any(line.startswith("Order #1 (Alice) [DINE_IN] [Status: CANCELLED]") for line in console.output)
    assert console.output[-1] == "Exiting..."


def test_console_reports_invalid_choice_and_exits_on_eof(pizzeria, console):
    console.feed("nine", 99)

    main.run_console(pizzeria)

    assert console.output.count("Invalid choice.") == 2
    assert console.output[-1] == "Exiting..."


def test_console_menu_lists_every_choice(pizzeria, console):
    console.feed(0)

    main.run_console(pizzeria)

    for line in ("1. Take Order", "4. Add Menu Item", "5. Cancel Order", "6. Show Order Board", "0. Exit"):
        assert line in console.output


def test_build_pizzeria_uses_catalog_files(tmp_path, console):
    menu_path = tmp_path / "menu.json"
    menu_path.write_text(json.dumps([{"name": "Calzone", "category": "pizza", "price": 8}]))
    toppings_path = tmp_path / "toppings.json"
    toppings_path.write_text(json.dumps([{"name": "Basil", "price": 0.2}]))

    pizzeria = main.build_pizzeria(menu_path, toppings_path, prompt=console.prompt, emit=console.emit)

    assert [item.name for item in pizzeria.menu] == ["Calzone"]
    assert [t.name for t in pizzeria.toppings] == ["Basil"]


def test_main_reports_missing_catalog(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(sys, "argv", ["pizzeria-sim", "--menu", str(tmp_path / "nope.json")])

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Startup error:" in captured.err
    assert "nope.json" in captured.err


def test_main_runs_console_with_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["pizzeria-sim"])
    seen = []
    monkeypatch.setattr(main, "run_console", seen.append)

    main.main()

    assert len(seen) == 1
    assert [item.name for item in seen[0].menu][:2] == ["Margherita", "Pepperoni"]


def test_order_board_closes_back_to_console(monkeypatch, pizzeria, console):
    pygame = pytest.importorskip("pygame")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr(main, "pygame", pygame)

    console.feed("Dana", 2, "7 Crust Street", 0, "y", 0, "n", FINISH_ORDER)
    pizzeria.take_order()
    pizzeria.cancel(1)

    closers = [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ]
    polls = []

    def _events():
        polls.append(len(polls))
        # Two idle frames per board session, then close it.
        if len(polls) % 3:
            return []
        return [closers[len(polls) // 3 - 1]]

    monkeypatch.setattr(pygame.event, "get", _events)
    console.output.clear()
    console.feed(6, 6, 0)

    main.run_console(pizzeria)

    assert len(polls) == 6
    assert not any(line.startswith("Order board unavailable") for line in console.output)
    assert console.output[-1] == "Exiting..."
