"""Tests for the customer lifecycle: movement, mood, anger and spawning."""
from __future__ import annotations

import math
import random
import unittest

from config import (
    ANGRY_BOB_AMPLITUDE,
    ANGRY_MESSAGES,
    ANGRY_ZONE,
    CUSTOMER_SPAWN_AREA,
    CUSTOMER_SPACING,
    EXIT_Y,
    MAX_CUSTOMERS,
    SPAWN_Y,
    WAITING_LINE_Y,
)
from taproom.customers import (
    advance_customer,
    compute_mood,
    find_available_position,
    has_left,
    maybe_spawn,
    random_initial_mood,
    random_taunt,
)
from taproom.entities import (
    Appearance,
    Customer,
    CustomerState,
    GameState,
    ItemKind,
    Order,
    OrderItem,
    Point,
)


class _ScriptedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_customer(
    number: int = 1,
    x: float = 400.0,
    y: float = WAITING_LINE_Y,
    state: CustomerState = CustomerState.WAITING,
    mood: float = 80.0,
    max_waiting_time: float = 10_000.0,
) -> Customer:
    return Customer(
        id=f"customer-{number}",
        position=Point(x, y),
        mood=mood,
        initial_mood=mood,
        max_waiting_time=max_waiting_time,
        appearance=Appearance("#000000", "#FF6B6B"),
        order=Order(id=f"order-{number}", items=[OrderItem(ItemKind.BEER, "Lager")]),
        state=state,
    )


def make_angry_customer(x: float = 650.0, now: float = 0.0) -> Customer:
    customer = make_customer(x=x, max_waiting_time=1000.0)
    customer.waiting_time = 1000.0
    customer.mood = 0.0
    customer.angry_position = Point(650.0, ANGRY_ZONE["y"])
    customer.angry_message = ANGRY_MESSAGES[0]
    customer.last_message_change = now
    customer.message_interval = 20_000.0
    return customer


class TestComputeMood(unittest.TestCase):
    def test_no_wait_keeps_initial_mood(self):
        self.assertEqual(compute_mood(80.0, 0.0), 80.0)

    def test_linear_decay_is_faster_than_ratio(self):
        self.assertAlmostEqual(compute_mood(80.0, 0.25), 40.0)

    def test_mood_hits_zero_halfway_through_budget(self):
        self.assertEqual(compute_mood(80.0, 0.5), 0.0)
        self.assertEqual(compute_mood(80.0, 1.0), 0.0)

    def test_overtime_never_goes_negative(self):
        self.assertEqual(compute_mood(80.0, 1.5), 0.0)

    def test_mood_stays_in_bounds(self):
        for initial in (0.0, 20.0, 50.0, 100.0):
            for step in range(0, 40):
                mood = compute_mood(initial, step * 0.1)
                self.assertGreaterEqual(mood, 0.0)
                self.assertLessEqual(mood, 100.0)


class TestMovement(unittest.TestCase):
    rng = random.Random(1)

    def test_entering_walks_down(self):
        customer = make_customer(y=SPAWN_Y, state=CustomerState.ENTERING)
        advance_customer(customer, 1.0, 0.0, self.rng)
        self.assertEqual(customer.position.y, SPAWN_Y + 50.0)
        self.assertEqual(customer.state, CustomerState.ENTERING)
        self.assertEqual(customer.waiting_time, 0.0)

    def test_entering_stops_at_waiting_line(self):
        customer = make_customer(y=SPAWN_Y, state=CustomerState.ENTERING)
        advance_customer(customer, 10.0, 0.0, self.rng)
        self.assertEqual(customer.position.y, WAITING_LINE_Y)
        self.assertEqual(customer.state, CustomerState.WAITING)

    def test_served_walks_up_and_starts_leaving(self):
        customer = make_customer(state=CustomerState.SERVED)
        advance_customer(customer, 1.0, 0.0, self.rng)
        self.assertEqual(customer.position.y, WAITING_LINE_Y - 50.0)
        self.assertEqual(customer.state, CustomerState.SERVED)

        advance_customer(customer, 10.0, 0.0, self.rng)
        self.assertEqual(customer.position.y, EXIT_Y)
        self.assertEqual(customer.state, CustomerState.LEAVING)
        self.assertTrue(has_left(customer))

    def test_leaving_customer_does_not_move(self):
        customer = make_customer(y=EXIT_Y, state=CustomerState.LEAVING)
        advance_customer(customer, 1.0, 0.0, self.rng)
        self.assertEqual(customer.position.y, EXIT_Y)

    def test_served_customer_mood_is_untouched(self):
        customer = make_customer(state=CustomerState.SERVED, mood=42.0)
        advance_customer(customer, 5.0, 0.0, self.rng)
        self.assertEqual(customer.mood, 42.0)


class TestWaiting(unittest.TestCase):
    def test_waiting_time_accumulates_and_mood_decays(self):
        customer = make_customer(mood=80.0, max_waiting_time=10_000.0)
        advance_customer(customer, 1.0, 1000.0, random.Random(1))
        self.assertEqual(customer.waiting_time, 1000.0)
        self.assertAlmostEqual(customer.mood, 64.0)

    def test_order_in_progress_freezes_mood_and_clock(self):
        customer = make_customer(mood=80.0, max_waiting_time=1000.0)
        customer.order_in_progress = True
        rng = random.Random(1)
        for step in range(20):
            advance_customer(customer, 1.0, step * 1000.0, rng)
        self.assertEqual(customer.mood, 80.0)
        self.assertEqual(customer.waiting_time, 0.0)
        self.assertIsNone(customer.angry_position)


class TestAngryCustomers(unittest.TestCase):
    def test_zero_mood_assigns_angry_position_and_taunt(self):
        customer = make_customer(x=100.0, max_waiting_time=1000.0)
        turned = advance_customer(customer, 0.5, 7000.0, random.Random(2))

        self.assertTrue(turned)
        self.assertEqual(customer.mood, 0.0)
        self.assertIsNotNone(customer.angry_position)
        self.assertGreaterEqual(customer.angry_position.x, ANGRY_ZONE["left"])
        self.assertLessEqual(customer.angry_position.x, ANGRY_ZONE["right"])
        self.assertEqual(customer.angry_position.y, ANGRY_ZONE["y"])
        self.assertIn(customer.angry_message, ANGRY_MESSAGES)
        self.assertEqual(customer.last_message_change, 7000.0)
        self.assertGreaterEqual(customer.message_interval, 20_000.0)
        self.assertLessEqual(customer.message_interval, 40_000.0)
        # Walked right at 100 px/s for half a second.
        self.assertAlmostEqual(customer.position.x, 150.0)

    def test_angry_position_is_assigned_once(self):
        customer = make_customer(x=100.0, max_waiting_time=1000.0)
        rng = random.Random(4)
        advance_customer(customer, 0.5, 0.0, rng)
        target = (customer.angry_position.x, customer.angry_position.y)
        for step in range(1, 30):
            self.assertFalse(advance_customer(customer, 0.5, step * 500.0, rng))
            self.assertEqual((customer.angry_position.x, customer.angry_position.y), target)

    def test_walk_clamps_on_arrival(self):
        customer = make_angry_customer(x=600.0)
        advance_customer(customer, 1.0, 0.0, random.Random(1))
        self.assertEqual(customer.position.x, 650.0)

    def test_walks_left_toward_target(self):
        customer = make_angry_customer(x=700.0)
        advance_customer(customer, 0.1, 0.0, random.Random(1))
        self.assertAlmostEqual(customer.position.x, 690.0)

    def test_bobs_on_wall_clock_once_arrived(self):
        customer = make_angry_customer(x=650.0)
        advance_customer(customer, 0.1, 0.0, random.Random(1))
        self.assertAlmostEqual(customer.position.y, ANGRY_ZONE["y"])

        quarter_turn = math.pi * 250.0
        advance_customer(customer, 0.1, quarter_turn, random.Random(1))
        self.assertAlmostEqual(customer.position.y, ANGRY_ZONE["y"] + ANGRY_BOB_AMPLITUDE)

    def test_message_waits_for_interval(self):
        customer = make_angry_customer(now=0.0)
        advance_customer(customer, 0.1, 19_999.0, random.Random(1))
        self.assertEqual(customer.angry_message, ANGRY_MESSAGES[0])
        self.assertEqual(customer.last_message_change, 0.0)

    def test_message_rotates_to_a_different_taunt(self):
        customer = make_angry_customer(now=0.0)
        advance_customer(customer, 0.1, 20_000.0, random.Random(1))
        self.assertNotEqual(customer.angry_message, ANGRY_MESSAGES[0])
        self.assertIn(customer.angry_message, ANGRY_MESSAGES)
        self.assertEqual(customer.last_message_change, 20_000.0)

    def test_rotation_never_repeats_previous_message(self):
        customer = make_angry_customer(now=0.0)
        rng = random.Random(9)
        now = 0.0
        for _ in range(100):
            previous = customer.angry_message
            now += 40_000.0
            advance_customer(customer, 0.1, now, rng)
            self.assertNotEqual(customer.angry_message, previous)

    def test_random_taunt_excludes_current(self):
        rng = random.Random(3)
        for message in ANGRY_MESSAGES:
            for _ in range(20):
                self.assertNotEqual(random_taunt(rng, message), message)


class TestFindAvailablePosition(unittest.TestCase):
    def _line(self, *xs: float, state: CustomerState = CustomerState.WAITING):
        return [make_customer(number=i + 1, x=x, state=state) for i, x in enumerate(xs)]

    def test_empty_bar_uses_centre(self):
        start, end = CUSTOMER_SPAWN_AREA
        self.assertEqual(find_available_position([]), (start + end) / 2)

    def test_prefers_start_gap(self):
        start, _ = CUSTOMER_SPAWN_AREA
        self.assertEqual(find_available_position(self._line(400.0)), start + CUSTOMER_SPACING / 2)

    def test_uses_midpoint_of_wide_gap(self):
        self.assertEqual(find_available_position(self._line(700.0, 100.0, 200.0)), 150.0)

    def test_narrow_gap_is_skipped_for_end_gap(self):
        self.assertEqual(find_available_position(self._line(100.0, 150.0)), 150.0 + CUSTOMER_SPACING)

    def test_packed_line_has_no_slot(self):
        start, end = CUSTOMER_SPAWN_AREA
        xs = [float(x) for x in range(start, end + 1, CUSTOMER_SPACING)]
        self.assertIsNone(find_available_position(self._line(*xs)))

    def test_leaving_customers_are_ignored(self):
        start, end = CUSTOMER_SPAWN_AREA
        leaving = self._line(400.0, state=CustomerState.LEAVING)
        self.assertEqual(find_available_position(leaving), (start + end) / 2)


class TestSpawning(unittest.TestCase):
    def test_spawn_into_empty_bar(self):
        state = GameState()
        customer = maybe_spawn(state, 5000.0, random.Random(6))

        self.assertIsNotNone(customer)
        self.assertEqual(state.customers, [customer])
        self.assertEqual(customer.id, "customer-1")
        self.assertEqual(state.next_customer_id, 2)
        self.assertEqual(customer.state, CustomerState.ENTERING)
        self.assertEqual((customer.position.x, customer.position.y), (400.0, SPAWN_Y))
        self.assertEqual(customer.mood, customer.initial_mood)
        self.assertGreaterEqual(customer.mood, 20.0)
        self.assertLessEqual(customer.mood, 100.0)
        self.assertIsNotNone(customer.order)
        self.assertEqual(customer.order.time_created, 5000.0)
        self.assertGreater(customer.max_waiting_time, 0.0)
        self.assertIn("walked in", state.event_log[-1])

    def test_spawn_respects_customer_cap(self):
        state = GameState(customers=[make_customer(i, x=100.0 + i * 150.0) for i in range(MAX_CUSTOMERS)])
        self.assertIsNone(maybe_spawn(state, 0.0, random.Random(1)))
        self.assertEqual(len(state.customers), MAX_CUSTOMERS)

    def test_ids_are_unique(self):
        state = GameState()
        rng = random.Random(2)
        for _ in range(3):
            maybe_spawn(state, 0.0, rng)
        ids = [c.id for c in state.customers]
        self.assertEqual(len(ids), len(set(ids)))

    def test_angry_temperament_draws_low_mood(self):
        mood = random_initial_mood(_ScriptedRandom(0.1))
        self.assertAlmostEqual(mood, 20.0 + 30.0 * 0.1)

    def test_normal_temperament_draws_high_mood(self):
        mood = random_initial_mood(_ScriptedRandom(0.5))
        self.assertAlmostEqual(mood, 50.0 + 50.0 * 0.5)


if __name__ == "__main__":
    unittest.main()
