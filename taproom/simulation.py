"""Taproom game loop: the per-tick transition and the stateful facade.

All gameplay constants are imported from ``config``.  The simulation has no
pygame dependency and is safe to import in headless / test contexts.
"""
from __future__ import annotations

import random
from typing import Sequence

from config import CUSTOMER_SPAWN_INTERVAL, HEIGHT, STARTING_MONEY, WIDTH
from taproom.controls import handle_pointer_click, handle_pointer_move
from taproom.customers import advance_customer, has_left, maybe_spawn
from taproom.entities import GameState, Point
from taproom.fixtures import BAR_FIXTURES, BarFixture
from taproom.fulfillment import attempt_delivery


def new_game_state(now: float = 0.0) -> GameState:
    return GameState(
        customers=[],
        player_position=Point(WIDTH / 2, HEIGHT / 2),
        score=0,
        money=STARTING_MONEY,
        game_time=now,
        last_spawn_time=now,
    )


def tick(state: GameState, now: float, rng: random.Random) -> GameState:
    """Return the snapshot that follows ``state`` at timestamp ``now`` (ms).

    Order within a tick: spawn evaluation, then every customer advances by
    the time since the previous tick, then customers that have walked off
    screen are dropped.  ``state`` itself is left untouched.
    """
    new_state = state.clone()
    delta = max(0.0, (now - state.game_time) / 1000.0)
    new_state.game_time = now

    if now - state.last_spawn_time >= CUSTOMER_SPAWN_INTERVAL:
        maybe_spawn(new_state, now, rng)
        new_state.last_spawn_time = now

    for customer in new_state.customers:
        if advance_customer(customer, delta, now, rng):
            new_state.log_event(f"{customer.id} lost patience: {customer.angry_message}")

    remaining = []
    for customer in new_state.customers:
        if has_left(customer):
            new_state.log_event(f"{customer.id} left the bar")
        else:
            remaining.append(customer)
    new_state.customers = remaining
    return new_state


class BarSim:
    """Tick-based bar simulation driven by a frame clock and pointer events.

    Holds the current :class:`GameState` snapshot and the random source.
    Every method replaces :attr:`state` with a new snapshot; previously
    returned snapshots stay valid and unchanged.
    """

    def __init__(self, seed: int = 7, now: float = 0.0, fixtures: Sequence[BarFixture] = BAR_FIXTURES) -> None:
        self.rng = random.Random(seed)
        self.fixtures = tuple(fixtures)
        self.state = new_game_state(now)
        self.state.log_event("Bar opened")

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------

    def tick(self, now: float) -> GameState:
        self.state = tick(self.state, now, self.rng)
        return self.state

    def advance(self, dt: float) -> GameState:
        """Tick ``dt`` seconds after the current game time."""
        return self.tick(self.state.game_time + dt * 1000.0)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def pointer_move(self, x: float, y: float) -> GameState:
        self.state = handle_pointer_move(self.state, x, y)
        return self.state

    def pointer_click(self, x: float, y: float) -> GameState:
        self.state = handle_pointer_click(self.state, x, y, self.rng, self.fixtures)
        return self.state

    def deliver(self, customer_id: str) -> GameState:
        self.state = attempt_delivery(self.state, customer_id)
        return self.state

    # ------------------------------------------------------------------
    # Game controls
    # ------------------------------------------------------------------

    def restart(self, now: float) -> GameState:
        self.state = new_game_state(now)
        self.state.log_event("Game restarted")
        return self.state

    def skip_to_next_customer(self) -> GameState:
        new_state = self.state.clone()
        new_state.last_spawn_time = new_state.game_time - CUSTOMER_SPAWN_INTERVAL
        self.state = new_state
        return self.state
