"""Static bar furniture the bartender can click on."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

COUNTER: str = "counter"
TABLE: str = "table"
BEER_TAP: str = "beer-tap"
KITCHEN: str = "kitchen"
SERVING_AREA: str = "serving-area"


@dataclass(frozen=True)
class BarFixture:
    kind: str
    x: float
    y: float
    width: float
    height: float
    description: str = ""

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


BAR_FIXTURES: Tuple[BarFixture, ...] = (
    BarFixture(COUNTER, 300, 400, 200, 40, "A wooden bar counter where customers place their orders"),
    BarFixture(BEER_TAP, 350, 380, 30, 40, "A shiny chrome beer tap with multiple handles for different beers"),
    BarFixture(KITCHEN, 400, 360, 80, 60, "A busy kitchen area with a grill and food preparation station"),
    BarFixture(SERVING_AREA, 450, 380, 40, 40, "A serving counter where completed orders are placed"),
)


def fixtures_at(x: float, y: float, fixtures: Sequence[BarFixture] = BAR_FIXTURES) -> List[BarFixture]:
    return [fixture for fixture in fixtures if fixture.contains(x, y)]
