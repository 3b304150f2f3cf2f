from __future__ import annotations

import argparse
import sys
from typing import Tuple

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import CUSTOMER_SIZE, FPS, HEIGHT, WIDTH
from taproom import BarSim, CustomerState, GameState
from taproom.entities import Customer
from taproom.fixtures import BEER_TAP, COUNTER, KITCHEN, SERVING_AREA, TABLE, BarFixture


def run_headless(ticks: int, dt: float, seed: int) -> BarSim:
    sim = BarSim(seed=seed)
    for _ in range(ticks):
        sim.advance(dt)

    state = sim.state
    waiting = sum(1 for c in state.customers if c.state == CustomerState.WAITING)
    angry = sum(1 for c in state.customers if c.is_angry)
    print(
        f"headless_done t={state.game_time / 1000.0:.1f}s customers={len(state.customers)} "
        f"waiting={waiting} angry={angry} "
        f"economy[score={state.score},cash=${state.money}]"
    )
    return sim


def mood_color(mood: float) -> Tuple[int, int, int]:
    if mood > 75:
        return (76, 175, 80)
    if mood > 50:
        return (255, 193, 7)
    if mood > 25:
        return (255, 152, 0)
    return (244, 67, 54)


class GameUI:
    def __init__(self, sim: BarSim):
        if pygame is None:
            raise RuntimeError("pygame is required for graphical mode. Relaunch with --headless.")
        pygame.init()
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"Display subsystem is unavailable ({exc}). Relaunch with --headless.") from exc
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")

        self.sim = sim
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Taproom")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 16, bold=True)
        self.small = pygame.font.SysFont("arial", 12)
        self.running = True

        self.palette = {
            "bg": (44, 30, 22),
            "floor": (92, 64, 44),
            "text": (255, 255, 255),
            "bubble": (255, 255, 255),
            "bubble_text": (20, 20, 20),
            "debug": (51, 51, 51),
            "bartender": (40, 40, 40),
        }
        self.fixture_colors = {
            COUNTER: (139, 69, 19),
            BEER_TAP: (192, 192, 192),
            KITCHEN: (255, 215, 0),
            SERVING_AREA: (222, 184, 135),
            TABLE: (160, 82, 45),
        }

    def handle_input(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    self.running = False
                elif ev.key == pygame.K_r:
                    self.sim.restart(pygame.time.get_ticks())
                elif ev.key == pygame.K_n:
                    self.sim.skip_to_next_customer()
            elif ev.type == pygame.MOUSEMOTION:
                self.sim.pointer_move(*ev.pos)
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                self.sim.pointer_click(*ev.pos)

    # ------------------------------------------------------------------
    # Drawing (read-only over the current snapshot)
    # ------------------------------------------------------------------

    def _text(self, text: str, pos: Tuple[float, float], *, small: bool = False, color=None, center: bool = False) -> None:
        font = self.small if small else self.font
        surf = font.render(text, True, color or self.palette["text"])
        x, y = int(pos[0]), int(pos[1])
        if center:
            x -= surf.get_width() // 2
        self.screen.blit(surf, (x, y))

    def draw_fixture(self, fixture: BarFixture) -> None:
        rect = pygame.Rect(*[int(v) for v in fixture.rect])
        pygame.draw.rect(self.screen, self.fixture_colors.get(fixture.kind, (128, 128, 128)), rect)
        pygame.draw.rect(self.screen, (0, 0, 0), rect, width=1)

    def draw_customer(self, customer: Customer) -> None:
        cx, cy = int(customer.position.x), int(customer.position.y)
        look = customer.appearance
        pygame.draw.circle(self.screen, pygame.Color(look.shirt_color), (cx, cy + 10), CUSTOMER_SIZE - 8)
        pygame.draw.circle(self.screen, (255, 218, 185), (cx, cy - 8), 11)
        pygame.draw.circle(self.screen, pygame.Color(look.hair_color), (cx, cy - 15), 9)
        if look.has_beard:
            pygame.draw.circle(self.screen, pygame.Color(look.hair_color), (cx, cy - 1), 6)

        bar = pygame.Rect(cx - CUSTOMER_SIZE, cy - CUSTOMER_SIZE - 12, CUSTOMER_SIZE * 2, 5)
        pygame.draw.rect(self.screen, (60, 60, 60), bar)
        fill = pygame.Rect(bar.x, bar.y, int(bar.w * customer.mood / 100.0), bar.h)
        pygame.draw.rect(self.screen, mood_color(customer.mood), fill)

        if customer.is_angry and customer.angry_message:
            self._text(customer.angry_message, (cx, cy - CUSTOMER_SIZE - 30), small=True, color=(255, 80, 80), center=True)
        elif customer.state == CustomerState.WAITING and customer.order is not None:
            self.draw_order_bubble(customer)

    def draw_order_bubble(self, customer: Customer) -> None:
        lines = [f"{'[x]' if item.completed else '[ ]'} {item.name}" for item in customer.order.items]
        width = max(self.small.size(line)[0] for line in lines) + 10
        height = len(lines) * 14 + 6
        bubble = pygame.Rect(int(customer.position.x) + CUSTOMER_SIZE, int(customer.position.y) - height, width, height)
        pygame.draw.rect(self.screen, self.palette["bubble"], bubble, border_radius=6)
        for i, line in enumerate(lines):
            self._text(line, (bubble.x + 5, bubble.y + 3 + i * 14), small=True, color=self.palette["bubble_text"])

    def draw_bartender(self, state: GameState) -> None:
        px, py = int(state.player_position.x), int(state.player_position.y)
        pygame.draw.circle(self.screen, self.palette["bartender"], (px, py), 15)
        pygame.draw.circle(self.screen, (255, 255, 255), (px, py), 15, width=2)
        if not state.inventory.is_empty:
            self._text(state.inventory.name, (px, py - 32), small=True, center=True)

    def draw_hud(self, state: GameState) -> None:
        seconds = int(state.game_time // 1000)
        self._text(f"Score: {state.score}", (10, 10))
        self._text(f"Money: ${state.money}", (10, 30))
        self._text(f"Time: {seconds // 3600:02d}:{seconds // 60 % 60:02d}:{seconds % 60:02d}", (10, 50))

        panel = pygame.Rect(10, HEIGHT - 90, 260, 80)
        pygame.draw.rect(self.screen, self.palette["debug"], panel)
        self._text(f"Inventory: {state.inventory.kind.value}", (15, panel.y + 5), small=True)
        if not state.inventory.is_empty:
            self._text(f"Item: {state.inventory.name}", (15, panel.y + 20), small=True)
        for i, event in enumerate(state.event_log[-2:]):
            self._text(event, (15, panel.y + 40 + i * 15), small=True, color=(255, 236, 160))
        self._text("R restart | N next customer | Esc quit", (WIDTH - 250, HEIGHT - 20), small=True)

    def draw(self) -> None:
        state = self.sim.state
        self.screen.fill(self.palette["bg"])
        pygame.draw.rect(self.screen, self.palette["floor"], (0, HEIGHT // 2, WIDTH, HEIGHT // 2))
        for fixture in self.sim.fixtures:
            self.draw_fixture(fixture)
        for customer in state.customers:
            self.draw_customer(customer)
        self.draw_bartender(state)
        self.draw_hud(state)
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            self.clock.tick(FPS)
            self.handle_input()
            self.sim.tick(pygame.time.get_ticks())
            self.draw()
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Taproom bar rush")
    parser.add_argument("--headless", action="store_true", help="run simulation without graphics")
    parser.add_argument("--ticks", type=int, default=600, help="headless ticks to run")
    parser.add_argument("--dt", type=float, default=0.1, help="headless timestep in seconds")
    parser.add_argument("--seed", type=int, default=7, help="random seed")
    args = parser.parse_args()

    if args.headless:
        run_headless(args.ticks, args.dt, args.seed)
        return

    try:
        ui = GameUI(BarSim(seed=args.seed))
    except RuntimeError as exc:
        print(f"Startup error: {exc}", file=sys.stderr)
        sys.exit(1)
    ui.run()


if __name__ == "__main__":
    main()
