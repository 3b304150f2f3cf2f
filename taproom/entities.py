"""Core dataclasses for the Taproom simulation."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from config import BEER, EVENT_LOG_LIMIT, FOOD, NONE, STARTING_MONEY


class ItemKind(str, Enum):
    NONE = NONE
    BEER = BEER
    FOOD = FOOD


class CustomerState(str, Enum):
    ENTERING = "entering"
    WAITING = "waiting"
    SERVED = "served"
    LEAVING = "leaving"


class OrderStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Appearance:
    hair_color: str
    shirt_color: str
    has_beard: bool = False


@dataclass
class OrderItem:
    """One drink or dish on an order.

    ``preparation_time`` is a display hint in seconds and plays no part in
    the simulation.  ``completed`` only ever flips from False to True.
    """

    kind: ItemKind
    name: str
    preparation_time: float = 0.0
    completed: bool = False


@dataclass
class Order:
    id: str
    items: List[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    time_created: float = 0.0

    @property
    def is_complete(self) -> bool:
        return bool(self.items) and all(item.completed for item in self.items)

    def open_items(self) -> List[OrderItem]:
        return [item for item in self.items if not item.completed]


@dataclass(frozen=True)
class Inventory:
    """What the bartender is holding.  Replaced wholesale, never merged."""

    kind: ItemKind = ItemKind.NONE
    name: str = ""

    @property
    def is_empty(self) -> bool:
        return self.kind == ItemKind.NONE


EMPTY_INVENTORY = Inventory()


@dataclass
class Customer:
    """A patron at the bar.

    ``waiting_time`` and ``max_waiting_time`` are in milliseconds.  The
    ``angry_*`` fields stay unset until mood first reaches zero; after that
    ``angry_position`` never changes again.
    """

    id: str
    position: Point
    mood: float
    initial_mood: float
    max_waiting_time: float
    appearance: Appearance
    order: Optional[Order] = None
    waiting_time: float = 0.0
    state: CustomerState = CustomerState.ENTERING
    order_in_progress: bool = False
    angry_position: Optional[Point] = None
    angry_message: str = ""
    last_message_change: Optional[float] = None
    message_interval: float = 0.0

    @property
    def is_angry(self) -> bool:
        return self.angry_position is not None


@dataclass
class GameState:
    """Snapshot of everything the renderer reads.

    Every tick and every input event produces a fresh snapshot via
    :meth:`clone`; a snapshot that has been handed out is never mutated.
    """

    customers: List[Customer] = field(default_factory=list)
    player_position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    score: int = 0
    money: int = STARTING_MONEY
    game_time: float = 0.0
    last_spawn_time: float = 0.0
    inventory: Inventory = EMPTY_INVENTORY
    next_customer_id: int = 1
    event_log: List[str] = field(default_factory=list)

    def clone(self) -> "GameState":
        return copy.deepcopy(self)

    def log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_LIMIT:]

    def find_customer(self, customer_id: str) -> Optional[Customer]:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None
