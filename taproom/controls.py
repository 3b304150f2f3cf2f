"""Pointer input: moving the bartender, picking up items and serving."""
from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from config import CUSTOMER_SIZE
from taproom.entities import EMPTY_INVENTORY, Customer, GameState, Inventory, ItemKind, Point
from taproom.fixtures import BAR_FIXTURES, BEER_TAP, KITCHEN, SERVING_AREA, BarFixture, fixtures_at
from taproom.fulfillment import attempt_delivery
from taproom.orders import random_menu_name


def customer_at(state: GameState, x: float, y: float) -> Optional[Customer]:
    """First customer, in spawn order, whose hit circle contains the point."""
    for customer in state.customers:
        if math.hypot(customer.position.x - x, customer.position.y - y) < CUSTOMER_SIZE:
            return customer
    return None


def handle_pointer_move(state: GameState, x: float, y: float) -> GameState:
    new_state = state.clone()
    new_state.player_position = Point(x, y)
    return new_state


def _use_fixture(state: GameState, fixture: BarFixture, rng: random.Random) -> GameState:
    if fixture.kind == BEER_TAP:
        kind = ItemKind.BEER
    elif fixture.kind == KITCHEN:
        kind = ItemKind.FOOD
    elif fixture.kind == SERVING_AREA:
        new_state = state.clone()
        new_state.inventory = EMPTY_INVENTORY
        return new_state
    else:
        return state
    # Picking up always replaces whatever was held.
    new_state = state.clone()
    new_state.inventory = Inventory(kind=kind, name=random_menu_name(rng, kind))
    return new_state


def handle_pointer_click(
    state: GameState,
    x: float,
    y: float,
    rng: random.Random,
    fixtures: Sequence[BarFixture] = BAR_FIXTURES,
) -> GameState:
    """Apply a click at ``(x, y)``.

    Customers are hit-tested first.  Clicking a customer always uses up the
    held item, whether or not it matched the order.  Otherwise every
    fixture under the pointer acts, in layout order.
    """
    customer = customer_at(state, x, y)
    if customer is not None:
        new_state = attempt_delivery(state, customer.id)
        if new_state is state:
            new_state = state.clone()
        new_state.inventory = EMPTY_INVENTORY
        return new_state

    for fixture in fixtures_at(x, y, fixtures):
        state = _use_fixture(state, fixture, rng)
    return state
