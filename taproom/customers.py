"""Customer lifecycle: spawning, movement, mood decay and the angry idle.

Every function here works on a snapshot that the caller has already
cloned, so mutating the customers passed in is safe.
"""
from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence

from config import (
    ANGRY_ARRIVAL_TOLERANCE,
    ANGRY_BOB_AMPLITUDE,
    ANGRY_BOB_SPEED,
    ANGRY_CUSTOMER_CHANCE,
    ANGRY_INITIAL_MOOD_RANGE,
    ANGRY_MESSAGES,
    ANGRY_WALK_SPEED,
    ANGRY_ZONE,
    BEARD_CHANCE,
    CUSTOMER_SPACING,
    CUSTOMER_SPAWN_AREA,
    ENTER_SPEED,
    EXIT_Y,
    HAIR_COLORS,
    INITIAL_MOOD_RANGE,
    LEAVE_SPEED,
    MAX_CUSTOMERS,
    MESSAGE_CHANGE_INTERVAL,
    MOOD_DECAY_RATE,
    MOOD_MAX,
    MOOD_MIN,
    OVERTIME_DECAY_BASE,
    OVERTIME_DECAY_SCALE,
    SHIRT_COLORS,
    SPAWN_Y,
    WAITING_LINE_Y,
)
from taproom.entities import Appearance, Customer, CustomerState, GameState, Point
from taproom.orders import compute_max_waiting_time, generate_order


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


# ----------------------------------------------------------------------
# Mood
# ----------------------------------------------------------------------


def compute_mood(initial_mood: float, ratio: float) -> float:
    """Mood for a customer who has used ``ratio`` of their waiting budget.

    Linear decay up to the budget, then exponential decay anchored at the
    value the linear branch reaches at ``ratio == 1``.
    """
    if ratio <= 1:
        mood = initial_mood * (1 - ratio * MOOD_DECAY_RATE)
    else:
        overtime = ratio - 1
        mood = initial_mood * (1 - MOOD_DECAY_RATE) * OVERTIME_DECAY_BASE ** (overtime * OVERTIME_DECAY_SCALE)
    return clamp(mood, MOOD_MIN, MOOD_MAX)


# ----------------------------------------------------------------------
# Angry behaviour
# ----------------------------------------------------------------------


def random_angry_position(rng: random.Random) -> Point:
    return Point(rng.uniform(ANGRY_ZONE["left"], ANGRY_ZONE["right"]), ANGRY_ZONE["y"])


def random_message_interval(rng: random.Random) -> float:
    low, high = MESSAGE_CHANGE_INTERVAL
    return rng.uniform(low, high)


def random_taunt(rng: random.Random, current: str = "") -> str:
    choices = [message for message in ANGRY_MESSAGES if message != current]
    return rng.choice(choices or ANGRY_MESSAGES)


def _set_taunt(customer: Customer, message: str, now: float, rng: random.Random) -> None:
    customer.angry_message = message
    customer.last_message_change = now
    customer.message_interval = random_message_interval(rng)


def _update_angry_state(customer: Customer, now: float, rng: random.Random) -> bool:
    """Assign or rotate the taunt.  Returns True when the customer just turned angry."""
    if customer.mood > 0:
        return False
    if customer.angry_position is None:
        customer.angry_position = random_angry_position(rng)
        _set_taunt(customer, random_taunt(rng), now, rng)
        return True
    if customer.last_message_change is not None and now - customer.last_message_change >= customer.message_interval:
        _set_taunt(customer, random_taunt(rng, customer.angry_message), now, rng)
    return False


def _move_to_angry_position(customer: Customer, delta: float, now: float) -> None:
    target = customer.angry_position
    if target is None:
        return
    position = customer.position
    if abs(position.x - target.x) > ANGRY_ARRIVAL_TOLERANCE:
        direction = -1 if position.x > target.x else 1
        position.x += direction * ANGRY_WALK_SPEED * delta
        if (direction == -1 and position.x < target.x) or (direction == 1 and position.x > target.x):
            position.x = target.x
        return
    # Arrived: bob up and down on wall-clock time.
    position.x = target.x
    position.y = target.y + math.sin(now / 1000.0 * ANGRY_BOB_SPEED) * ANGRY_BOB_AMPLITUDE


# ----------------------------------------------------------------------
# Per-tick advancement
# ----------------------------------------------------------------------


def _advance_waiting(customer: Customer, delta: float, now: float, rng: random.Random) -> bool:
    if customer.order_in_progress:
        return False
    customer.waiting_time += delta * 1000.0
    if customer.max_waiting_time > 0:
        customer.mood = compute_mood(customer.initial_mood, customer.waiting_time / customer.max_waiting_time)
    turned_angry = _update_angry_state(customer, now, rng)
    _move_to_angry_position(customer, delta, now)
    return turned_angry


def advance_customer(customer: Customer, delta: float, now: float, rng: random.Random) -> bool:
    """Advance one customer by ``delta`` seconds at wall-clock ``now`` (ms).

    Returns True when the customer turned angry during this call so the
    caller can record it.
    """
    if customer.state == CustomerState.ENTERING:
        customer.position.y = min(customer.position.y + ENTER_SPEED * delta, WAITING_LINE_Y)
        if customer.position.y < WAITING_LINE_Y:
            return False
        # Reached the line; starts waiting this very tick.
        customer.state = CustomerState.WAITING
    elif customer.state == CustomerState.SERVED:
        customer.position.y = max(customer.position.y - LEAVE_SPEED * delta, EXIT_Y)
        if customer.position.y <= EXIT_Y:
            customer.state = CustomerState.LEAVING
        return False
    elif customer.state != CustomerState.WAITING:
        return False
    return _advance_waiting(customer, delta, now, rng)


def has_left(customer: Customer) -> bool:
    return customer.state == CustomerState.LEAVING and customer.position.y <= 0


# ----------------------------------------------------------------------
# Spawning
# ----------------------------------------------------------------------


def find_available_position(customers: Sequence[Customer]) -> Optional[float]:
    """Horizontal slot for a new customer, or None when the line is full.

    Tries the gap before the leftmost customer, then the gaps between
    neighbours (which must fit one and a half spacings), then the gap after
    the rightmost customer.
    """
    start, end = CUSTOMER_SPAWN_AREA
    present: List[Customer] = sorted(
        (c for c in customers if c.state != CustomerState.LEAVING),
        key=lambda c: c.position.x,
    )
    if not present:
        return (start + end) / 2

    if present[0].position.x - start >= CUSTOMER_SPACING:
        return start + CUSTOMER_SPACING / 2

    for left, right in zip(present, present[1:]):
        gap = right.position.x - left.position.x
        if gap >= CUSTOMER_SPACING * 1.5:
            return left.position.x + gap / 2

    last = present[-1]
    if end - last.position.x >= CUSTOMER_SPACING:
        return last.position.x + CUSTOMER_SPACING

    return None


def random_appearance(rng: random.Random) -> Appearance:
    return Appearance(
        hair_color=rng.choice(HAIR_COLORS),
        shirt_color=rng.choice(SHIRT_COLORS),
        has_beard=rng.random() < BEARD_CHANCE,
    )


def random_initial_mood(rng: random.Random) -> float:
    low, high = ANGRY_INITIAL_MOOD_RANGE if rng.random() < ANGRY_CUSTOMER_CHANCE else INITIAL_MOOD_RANGE
    return rng.uniform(low, high)


def maybe_spawn(state: GameState, now: float, rng: random.Random) -> Optional[Customer]:
    """Add one customer to ``state`` if the bar has room.

    A skipped spawn is simply lost; nothing is queued for later ticks.
    """
    if len(state.customers) >= MAX_CUSTOMERS:
        return None
    x = find_available_position(state.customers)
    if x is None:
        return None

    initial_mood = random_initial_mood(rng)
    number = state.next_customer_id
    order = generate_order(rng, f"order-{number}", now)
    customer = Customer(
        id=f"customer-{number}",
        position=Point(x, SPAWN_Y),
        mood=initial_mood,
        initial_mood=initial_mood,
        max_waiting_time=compute_max_waiting_time(order, rng),
        appearance=random_appearance(rng),
        order=order,
    )
    state.next_customer_id = number + 1
    state.customers.append(customer)
    state.log_event(f"Customer {number} walked in")
    return customer
