"""Run state, the per-tick update order, and the START/PLAYING/GAMEOVER machine."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from . import collision
from .config import DEFAULT_CONFIG, GameConfig
from .entities import Item, ItemKind, Mood, Player
from .resources import Resources
from .spawner import Spawner

logger = logging.getLogger(__name__)


class Phase(Enum):
    """High level game states."""

    START = auto()
    PLAYING = auto()
    GAMEOVER = auto()


@dataclass
class GameState:
    """Everything that belongs to one run. A restart builds a new instance."""

    config: GameConfig = field(default=DEFAULT_CONFIG, repr=False)
    phase: Phase = Phase.START
    speed: float = 0.0
    tick_count: int = 0
    resources: Resources = field(init=False)
    player: Player = field(init=False)
    items: List[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.resources = Resources(self.config)
        self.player = Player(self.config)
        if self.speed <= 0:
            self.speed = self.config.initial_speed


# --------------------------------------------------------------------------------------
# Read-only views for the presentation layer
# --------------------------------------------------------------------------------------
@dataclass(frozen=True)
class PlayerView:
    lane: int
    x: float
    target_x: float
    y: float
    mood: Mood
    displacement: float


@dataclass(frozen=True)
class ItemView:
    lane: int
    x: float
    y: float
    kind: ItemKind
    variety: str


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    score: int
    distance: float
    meter: float
    meter_fraction: float
    speed: float
    tick_count: int
    player: PlayerView
    items: Tuple[ItemView, ...]

    @classmethod
    def of(cls, state: GameState) -> 'Snapshot':
        player = state.player
        return cls(
            phase=state.phase,
            score=state.resources.score,
            distance=state.resources.distance,
            meter=state.resources.meter,
            meter_fraction=state.resources.meter_fraction,
            speed=state.speed,
            tick_count=state.tick_count,
            player=PlayerView(
                lane=player.lane,
                x=player.x,
                target_x=player.target_x,
                y=player.y,
                mood=player.mood,
                displacement=player.displacement,
            ),
            items=tuple(
                ItemView(item.lane, item.pos.x, item.pos.y, item.kind, item.variety)
                for item in state.items
            ),
        )


Subscriber = Callable[[Snapshot], None]


# --------------------------------------------------------------------------------------
# Simulation
# --------------------------------------------------------------------------------------
class Simulation:
    """Owns the run state and applies ticks and input commands to it.

    ``tick`` is expected once per display frame. It does nothing unless a run
    is in progress, so a frame driver can call it unconditionally.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self._config = config or DEFAULT_CONFIG
        self._rng = rng if rng is not None else random.Random(seed)
        self._state = GameState(self._config)
        self._spawner = Spawner(self._rng, self._config)
        self._subscribers: List[Subscriber] = []
        self._in_tick = False

    # ----------------------------------------------------------------------------------
    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def playing(self) -> bool:
        return self._state.phase == Phase.PLAYING

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self._state)

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _publish(self) -> None:
        if not self._subscribers:
            return
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)

    # ----------------------------------------------------------------------------------
    # Commands
    # ----------------------------------------------------------------------------------
    def start(self) -> None:
        """Begin a fresh run, discarding whatever state the previous one left."""
        self._state = GameState(self._config, phase=Phase.PLAYING)
        self._spawner = Spawner(self._rng, self._config)
        logger.info("run started (meter=%.1f speed=%.1f)", self._state.resources.meter, self._state.speed)
        self._publish()

    def move_left(self) -> bool:
        if not self.playing:
            return False
        return self._state.player.move_left()

    def move_right(self) -> bool:
        if not self.playing:
            return False
        return self._state.player.move_right()

    def resize(self, width: float, height: float) -> None:
        """Adopt a new play-field size.

        Falling items snap to their lane centre at once; the player follows on
        the next tick. Empty or negative sizes (a minimised window) are ignored.
        """
        if width <= 0 or height <= 0:
            logger.debug("ignoring resize to %sx%s", width, height)
            return
        if (width, height) == (self._config.width, self._config.height):
            return
        self._config = self._config.with_size(width, height)
        self._state.config = self._config
        self._state.resources.config = self._config
        self._spawner.config = self._config
        for item in self._state.items:
            item.pos.x = self._config.lane_center(item.lane)
        logger.debug("play field resized to %sx%s", width, height)

    # ----------------------------------------------------------------------------------
    def tick(self) -> None:
        if self._state.phase != Phase.PLAYING:
            return
        if self._in_tick:
            raise RuntimeError("Simulation.tick() is not re-entrant")
        self._in_tick = True
        try:
            self._step()
            self._publish()
        finally:
            self._in_tick = False

    def _step(self) -> None:
        state = self._state
        config = self._config
        resources = state.resources

        state.player.update(resources.meter, config)
        resources.advance(state.speed)
        state.tick_count += 1
        state.speed += self._spawner.on_tick(state.tick_count, state.items)

        collision.sweep(state.items, state.player, resources, state.speed, config)
        state.items = collision.prune(state.items)

        if resources.apply_decay():
            state.phase = Phase.GAMEOVER
            logger.info(
                "game over after %d ticks: score=%d distance=%dm",
                state.tick_count,
                resources.score,
                int(resources.distance),
            )
