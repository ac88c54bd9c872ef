"""Tuning constants for the Snack Dash simulation and its front end."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


# --------------------------------------------------------------------------------------
# Window / rendering constants
# --------------------------------------------------------------------------------------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
FPS = 60
FIXED_DT = 1.0 / FPS

COLOR_ROAD = (255, 255, 255)
COLOR_LANE_DIVIDER = (225, 190, 231)
COLOR_BODY = (244, 143, 177)
COLOR_HANDS = (240, 98, 146)
COLOR_FACE = (136, 14, 79)
COLOR_BLUSH = (255, 100, 100, 76)
COLOR_GOOD = (165, 214, 167)
COLOR_BAD = (239, 154, 154)
COLOR_BAR_HIGH = (165, 214, 167)
COLOR_BAR_MID = (255, 204, 128)
COLOR_BAR_LOW = (239, 154, 154)
COLOR_HUD_BG = (255, 255, 255, 200)
COLOR_HUD_TEXT = (74, 20, 140)
COLOR_OVERLAY = (248, 235, 250, 230)
COLOR_BUTTON = (186, 104, 200)
COLOR_BUTTON_TEXT = (255, 255, 255)

DASH_LENGTH = 20
DASH_PERIOD = 40
LEAN_FACTOR = 0.05


@dataclass(frozen=True)
class GameConfig:
    """Every tunable number the simulation reads.

    Distances are play-field units (one unit per pixel at the default window
    size); timings are ticks, with 60 ticks per simulated second.
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    lane_count: int = 3

    initial_speed: float = 6.0
    distance_divisor: float = 20.0
    ramp_interval: int = 600
    ramp_increment: float = 0.5

    initial_meter: float = 50.0
    meter_min: float = 0.0
    meter_max: float = 100.0
    decay_per_tick: float = 0.05
    good_meter_bonus: float = 10.0
    good_score_bonus: int = 10
    bad_meter_penalty: float = 20.0

    spawn_interval: int = 60
    good_chance: float = 0.6
    spawn_y: float = -50.0
    despawn_margin: float = 50.0

    collision_radius: float = 50.0
    smoothing: float = 0.2
    player_offset: float = 150.0

    happy_threshold: float = 30.0
    good_mood_ticks: int = 30
    bad_mood_ticks: int = 40

    def __post_init__(self) -> None:
        if self.lane_count < 1:
            raise ValueError(f"lane_count must be positive, got {self.lane_count}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"play field must have a positive size, got {self.width}x{self.height}")
        if self.spawn_interval <= 0 or self.ramp_interval <= 0:
            raise ValueError("spawn_interval and ramp_interval must be positive")
        if self.meter_min >= self.meter_max:
            raise ValueError(f"meter range is empty: [{self.meter_min}, {self.meter_max}]")
        if not self.meter_min <= self.initial_meter <= self.meter_max:
            raise ValueError(f"initial_meter {self.initial_meter} outside meter range")
        if not 0.0 <= self.good_chance <= 1.0:
            raise ValueError(f"good_chance must be a probability, got {self.good_chance}")

    @property
    def lane_width(self) -> float:
        return self.width / self.lane_count

    @property
    def middle_lane(self) -> int:
        return self.lane_count // 2

    @property
    def player_y(self) -> float:
        return self.height - self.player_offset

    @property
    def despawn_y(self) -> float:
        return self.height + self.despawn_margin

    def lane_center(self, lane: int) -> float:
        return lane * self.lane_width + self.lane_width / 2

    def clamp_lane(self, lane: int) -> int:
        return max(0, min(self.lane_count - 1, lane))

    def with_size(self, width: float, height: float) -> 'GameConfig':
        """Copy of this config for a resized viewport."""
        return replace(self, width=width, height=height)

    @property
    def size(self) -> Tuple[int, int]:
        return int(self.width), int(self.height)


DEFAULT_CONFIG = GameConfig()
