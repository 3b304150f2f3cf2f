"""Matching the bartender's held item against a customer's order."""
from __future__ import annotations

import math
from typing import Optional

from config import BASE_DELIVERY_REWARD
from taproom.entities import (
    EMPTY_INVENTORY,
    Customer,
    CustomerState,
    GameState,
    Inventory,
    OrderItem,
    OrderStatus,
)


def delivery_reward(mood: float) -> int:
    return BASE_DELIVERY_REWARD + math.floor(mood)


def matching_item(customer: Customer, held: Inventory) -> Optional[OrderItem]:
    if customer.order is None or held.is_empty:
        return None
    for item in customer.order.items:
        if not item.completed and item.kind == held.kind and item.name == held.name:
            return item
    return None


def attempt_delivery(state: GameState, customer_id: str, held: Optional[Inventory] = None) -> GameState:
    """Hand the held item to ``customer_id``.

    Returns ``state`` itself when nothing matches: the customer is missing,
    not waiting, has no order, or wants nothing like the held item.  On a
    match a new snapshot is returned with exactly one item completed, the
    inventory cleared and the customer's mood frozen.  Completing the last
    item pays ``BASE_DELIVERY_REWARD + floor(mood)`` into both money and
    score and sends the customer on their way.
    """
    if held is None:
        held = state.inventory
    customer = state.find_customer(customer_id)
    if customer is None or customer.state != CustomerState.WAITING or customer.order is None:
        return state
    if matching_item(customer, held) is None:
        return state

    new_state = state.clone()
    customer = new_state.find_customer(customer_id)
    item = matching_item(customer, held)
    item.completed = True
    new_state.inventory = EMPTY_INVENTORY
    customer.order_in_progress = True

    order = customer.order
    if not order.is_complete:
        order.status = OrderStatus.IN_PROGRESS
        new_state.log_event(f"Delivered {item.name} to {customer.id}")
        return new_state

    happiness_bonus = math.floor(customer.mood)
    reward = delivery_reward(customer.mood)
    new_state.money += reward
    new_state.score += reward
    order.status = OrderStatus.COMPLETED
    customer.state = CustomerState.SERVED
    new_state.log_event(
        f"Order completed! Reward: {reward} (Base: {BASE_DELIVERY_REWARD}, Bonus: {happiness_bonus})"
    )
    return new_state
