"""Random order generation and per-order patience budgets."""
from __future__ import annotations

import random
from typing import Dict, List, Tuple

from config import BEER_CHANCE, MAX_ORDER_ITEMS, MENU_FILE, WAITING_TIME_RANGES
from menu_catalog import load_menu_catalog, names_for_kind
from taproom.entities import ItemKind, Order, OrderItem, OrderStatus

MENU = load_menu_catalog(MENU_FILE)


def random_menu_name(rng: random.Random, kind: ItemKind, menu: Dict[str, Dict[str, str]] = MENU) -> str:
    return rng.choice(names_for_kind(menu, kind.value))


def preparation_time(kind: ItemKind, ranges: Dict[str, Tuple[float, float]] = WAITING_TIME_RANGES) -> float:
    """Display-only preparation hint in seconds, the width of the kind's waiting range."""
    low, high = ranges[kind.value]
    return (high - low) / 1000.0


def generate_order(
    rng: random.Random,
    order_id: str,
    now: float = 0.0,
    menu: Dict[str, Dict[str, str]] = MENU,
) -> Order:
    items: List[OrderItem] = []
    for _ in range(rng.randint(1, MAX_ORDER_ITEMS)):
        kind = ItemKind.BEER if rng.random() < BEER_CHANCE else ItemKind.FOOD
        items.append(
            OrderItem(
                kind=kind,
                name=random_menu_name(rng, kind, menu),
                preparation_time=preparation_time(kind),
            )
        )
    return Order(id=order_id, items=items, status=OrderStatus.PENDING, time_created=now)


def compute_max_waiting_time(
    order: Order,
    rng: random.Random,
    ranges: Dict[str, Tuple[float, float]] = WAITING_TIME_RANGES,
) -> float:
    """Sample a budget per item and keep the largest one.

    Budgets are not summed: a two-item order is allowed as long as its most
    generous item, never longer.
    """
    max_time = 0.0
    for item in order.items:
        low, high = ranges[item.kind.value]
        max_time = max(max_time, rng.uniform(low, high))
    return max_time
