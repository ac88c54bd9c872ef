"""Player and item records with their per-tick update rules."""
from __future__ import annotations

import random
from enum import Enum, auto
from typing import Dict, Tuple

import pygame

from .config import GameConfig


# --------------------------------------------------------------------------------------
# Helper Enums
# --------------------------------------------------------------------------------------
class Mood(Enum):
    """Cosmetic player state shown on the face and in the HUD."""

    HAPPY = auto()
    NEUTRAL = auto()
    SAD = auto()
    SICK = auto()


class ItemKind(Enum):
    GOOD = auto()
    BAD = auto()


VARIETIES: Dict[ItemKind, Tuple[str, ...]] = {
    ItemKind.GOOD: ("salad", "water", "apple", "avocado"),
    ItemKind.BAD: ("donut", "soda", "fries", "lollipop"),
}


# --------------------------------------------------------------------------------------
# Player
# --------------------------------------------------------------------------------------
class Player:
    """The runner. Lane changes are discrete; the drawn position glides after them."""

    def __init__(self, config: GameConfig) -> None:
        self.lane = config.middle_lane
        self.target_x = config.lane_center(self.lane)
        self.x = self.target_x
        self.y = config.player_y
        self.mood = Mood.HAPPY
        self.mood_timer = 0
        self._max_lane = config.lane_count - 1

    @property
    def displacement(self) -> float:
        """Signed distance still to glide; the renderer leans the sprite by it."""
        return self.x - self.target_x

    def move_left(self) -> bool:
        if self.lane > 0:
            self.lane -= 1
            return True
        return False

    def move_right(self) -> bool:
        if self.lane < self._max_lane:
            self.lane += 1
            return True
        return False

    def set_mood(self, mood: Mood, ticks: int) -> None:
        self.mood = mood
        self.mood_timer = ticks

    def update(self, meter: float, config: GameConfig) -> None:
        # The viewport may have been resized since the last tick.
        self._max_lane = config.lane_count - 1
        self.lane = config.clamp_lane(self.lane)
        self.y = config.player_y

        self.target_x = config.lane_center(self.lane)
        self.x += (self.target_x - self.x) * config.smoothing

        if self.mood_timer > 0:
            self.mood_timer -= 1
        else:
            self.mood = Mood.HAPPY if meter > config.happy_threshold else Mood.NEUTRAL


# --------------------------------------------------------------------------------------
# Items
# --------------------------------------------------------------------------------------
class Item:
    """A falling snack. Removed once consumed or once it drops below the field."""

    def __init__(self, lane: int, kind: ItemKind, variety: str, config: GameConfig) -> None:
        self.lane = lane
        self.kind = kind
        self.variety = variety
        self.pos = pygame.Vector2(config.lane_center(lane), config.spawn_y)
        self.consumed = False
        self.offscreen = False

    @classmethod
    def random(cls, rng: random.Random, config: GameConfig) -> 'Item':
        lane = rng.randrange(config.lane_count)
        kind = ItemKind.GOOD if rng.random() < config.good_chance else ItemKind.BAD
        variety = rng.choice(VARIETIES[kind])
        return cls(lane, kind, variety, config)

    @property
    def expired(self) -> bool:
        return self.consumed or self.offscreen

    def update(self, speed: float, config: GameConfig) -> None:
        self.pos.y += speed
        if self.pos.y > config.despawn_y:
            self.offscreen = True

    def __repr__(self) -> str:
        return f"Item({self.kind.name}, lane={self.lane}, y={self.pos.y:.1f})"
