"""Centralised configuration constants for Taproom."""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Canvas / display
# ---------------------------------------------------------------------------
WIDTH: int = 800
HEIGHT: int = 600
FPS: int = 60

# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
MENU_FILE: Path = Path("data/menu.json")

# ---------------------------------------------------------------------------
# Item kinds
# ---------------------------------------------------------------------------
NONE: str = "none"
BEER: str = "beer"
FOOD: str = "food"

# ---------------------------------------------------------------------------
# Customer placement (pixels)
# ---------------------------------------------------------------------------
CUSTOMER_SIZE: int = 25                  # avatar radius, also the click hit radius
CUSTOMER_SPACING: int = CUSTOMER_SIZE * 2
CUSTOMER_SPAWN_AREA: tuple[int, int] = (100, 700)
SPAWN_Y: float = -50.0                   # customers enter from above the canvas
WAITING_LINE_Y: float = 150.0
EXIT_Y: float = -50.0

# ---------------------------------------------------------------------------
# Spawning
# ---------------------------------------------------------------------------
CUSTOMER_SPAWN_INTERVAL: float = 5000.0  # ms between spawn attempts
MAX_CUSTOMERS: int = 5
ANGRY_CUSTOMER_CHANCE: float = 0.2
INITIAL_MOOD_RANGE: tuple[float, float] = (50.0, 100.0)
ANGRY_INITIAL_MOOD_RANGE: tuple[float, float] = (20.0, 50.0)

# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
MAX_ORDER_ITEMS: int = 2
BEER_CHANCE: float = 0.7

# Waiting budgets per item kind (ms).
WAITING_TIME_RANGES: dict[str, tuple[float, float]] = {
    BEER: (3_000_000.0, 60_000_000.0),
    FOOD: (4_500_000.0, 9_000_000.0),
}

# ---------------------------------------------------------------------------
# Mood
# ---------------------------------------------------------------------------
MOOD_MIN: float = 0.0
MOOD_MAX: float = 100.0
MOOD_DECAY_RATE: float = 2.0
OVERTIME_DECAY_BASE: float = 0.9
OVERTIME_DECAY_SCALE: float = 10.0

# ---------------------------------------------------------------------------
# Movement (pixels per second)
# ---------------------------------------------------------------------------
ENTER_SPEED: float = 50.0
LEAVE_SPEED: float = 50.0
ANGRY_WALK_SPEED: float = 100.0
ANGRY_ARRIVAL_TOLERANCE: float = 5.0
ANGRY_BOB_AMPLITUDE: float = 20.0
ANGRY_BOB_SPEED: float = 2.0             # radians per second of wall-clock time

# Angry customers wander to the right-hand end of the bar.
ANGRY_ZONE: dict[str, float] = {
    "left": 600.0,
    "right": 750.0,
    "y": 200.0,
}

MESSAGE_CHANGE_INTERVAL: tuple[float, float] = (20_000.0, 40_000.0)  # ms

ANGRY_MESSAGES: list[str] = [
    "Taps is a FLOP!",
    "Worst. Bar. Ever!",
    "My gran pours better!",
    "Taps? More like NAPS!",
    "Service slower than dial-up!",
    "I've had warmer ice cream!",
    "Even root beer has more spirit!",
    "Taps runs on empty!",
    "This bar is all foam!",
    "Less Taps, more YAPS!",
    "My plant waters faster!",
    "I've seen better Taps in a sink!",
    "This bar needs training wheels!",
    "Did the beer expire in 1922?",
    "I'd rather drink from a puddle!",
]

# ---------------------------------------------------------------------------
# Economy
# ---------------------------------------------------------------------------
STARTING_MONEY: int = 100
BASE_DELIVERY_REWARD: int = 20

# ---------------------------------------------------------------------------
# Appearance (cosmetic only)
# ---------------------------------------------------------------------------
HAIR_COLORS: list[str] = ["#000000", "#8B4513", "#D4A017", "#800517", "#C0C0C0"]
SHIRT_COLORS: list[str] = ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEEAD", "#D4A017"]
BEARD_CHANCE: float = 0.3

# ---------------------------------------------------------------------------
# Event log
# ---------------------------------------------------------------------------
EVENT_LOG_LIMIT: int = 12
