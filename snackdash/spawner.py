"""Timed item emission and the speed ramp."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .config import DEFAULT_CONFIG, GameConfig
from .entities import Item

logger = logging.getLogger(__name__)


@dataclass
class Spawner:
    """Emits one item every ``spawn_interval`` ticks and ramps speed every ``ramp_interval``.

    Both checks run independently, so a tick that is a multiple of both does
    both things.
    """

    rng: random.Random = field(default_factory=random.Random)
    config: GameConfig = DEFAULT_CONFIG

    def on_tick(self, tick_count: int, items: List[Item]) -> float:
        """Run the timed events for ``tick_count``; returns the speed increase."""
        if tick_count % self.config.spawn_interval == 0:
            item = Item.random(self.rng, self.config)
            items.append(item)
            logger.debug("tick %d: spawned %r", tick_count, item)

        if tick_count % self.config.ramp_interval == 0:
            logger.debug("tick %d: speed +%.2f", tick_count, self.config.ramp_increment)
            return self.config.ramp_increment
        return 0.0
