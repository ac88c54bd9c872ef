"""Snack Dash: a three-lane arcade runner with a balance meter to keep topped up."""
from __future__ import annotations

from .config import DEFAULT_CONFIG, GameConfig
from .entities import Item, ItemKind, Mood, Player
from .resources import Resources
from .simulation import GameState, ItemView, Phase, PlayerView, Simulation, Snapshot
from .spawner import Spawner

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "GameState",
    "Item",
    "ItemKind",
    "ItemView",
    "Mood",
    "Phase",
    "Player",
    "PlayerView",
    "Resources",
    "Simulation",
    "Snapshot",
    "Spawner",
]
