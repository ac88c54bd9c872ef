"""Player/item hit tests and the resulting resource changes."""
from __future__ import annotations

from typing import List

import pygame

from .config import GameConfig
from .entities import Item, ItemKind, Mood, Player
from .resources import Resources


def check_hit(item: Item, player: Player, config: GameConfig) -> bool:
    # Hits are tested against the lane centre the player is heading for, not
    # the gliding sprite position.
    if item.expired:
        return False
    anchor = pygame.Vector2(player.target_x, player.y)
    return item.pos.distance_to(anchor) < config.collision_radius


def resolve_hit(item: Item, player: Player, resources: Resources, config: GameConfig) -> None:
    item.consumed = True
    if item.kind == ItemKind.GOOD:
        resources.apply_good_hit()
        player.set_mood(Mood.HAPPY, config.good_mood_ticks)
    else:
        resources.apply_bad_hit()
        player.set_mood(Mood.SICK, config.bad_mood_ticks)


def sweep(
    items: List[Item],
    player: Player,
    resources: Resources,
    speed: float,
    config: GameConfig,
) -> List[ItemKind]:
    """Advance every item and resolve collisions. Returns the kinds hit, in order."""
    hits: List[ItemKind] = []
    for item in items:
        item.update(speed, config)
        if check_hit(item, player, config):
            resolve_hit(item, player, resources, config)
            hits.append(item.kind)
    return hits


def prune(items: List[Item]) -> List[Item]:
    return [item for item in items if not item.expired]
