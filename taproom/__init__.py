"""Taproom game package.

Public API:
    from taproom import BarSim, GameState, Customer, Order, tick, attempt_delivery
"""
from taproom.entities import Customer, CustomerState, GameState, Inventory, ItemKind, Order, OrderItem
from taproom.fulfillment import attempt_delivery
from taproom.simulation import BarSim, new_game_state, tick

__all__ = [
    "BarSim",
    "Customer",
    "CustomerState",
    "GameState",
    "Inventory",
    "ItemKind",
    "Order",
    "OrderItem",
    "attempt_delivery",
    "new_game_state",
    "tick",
]
