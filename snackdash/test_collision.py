#!/usr/bin/env python3
"""
Test suite for collision.py -- hit tests, hit effects, sweep and prune.
"""

import unittest

from snackdash import collision
from snackdash.config import GameConfig
from snackdash.entities import Item, ItemKind, Mood, Player
from snackdash.resources import Resources

CONFIG = GameConfig()


def item_at(lane, y, kind=ItemKind.GOOD):
    item = Item(lane, kind, "apple" if kind == ItemKind.GOOD else "donut", CONFIG)
    item.pos.y = y
    return item


# =============================================================================
# 1. HIT TEST
# =============================================================================

class TestCheckHit(unittest.TestCase):
    """Distance to the player's lane centre must be under the radius."""

    def setUp(self):
        self.player = Player(CONFIG)

    def test_item_on_player_hits(self):
        self.assertTrue(collision.check_hit(item_at(1, self.player.y), self.player, CONFIG))

    def test_radius_is_exclusive(self):
        self.assertTrue(collision.check_hit(item_at(1, self.player.y - 49.9), self.player, CONFIG))
        self.assertFalse(collision.check_hit(item_at(1, self.player.y - 50.0), self.player, CONFIG))

    def test_other_lane_misses(self):
        self.assertFalse(collision.check_hit(item_at(0, self.player.y), self.player, CONFIG))

    def test_uses_target_lane_not_glide_position(self):
        self.player.move_right()
        self.player.update(50.0, CONFIG)
        # Sprite is still near lane 1 (x=272) but the hit anchor is lane 2.
        self.assertTrue(collision.check_hit(item_at(2, self.player.y), self.player, CONFIG))
        self.assertFalse(collision.check_hit(item_at(1, self.player.y), self.player, CONFIG))

    def test_consumed_item_never_hits(self):
        item = item_at(1, self.player.y)
        item.consumed = True
        self.assertFalse(collision.check_hit(item, self.player, CONFIG))


# =============================================================================
# 2. HIT EFFECTS
# =============================================================================

class TestResolveHit(unittest.TestCase):
    """Good items feed the meter and score; bad items drain the meter."""

    def setUp(self):
        self.player = Player(CONFIG)
        self.resources = Resources(CONFIG)

    def test_good_hit(self):
        item = item_at(1, self.player.y, ItemKind.GOOD)
        collision.resolve_hit(item, self.player, self.resources, CONFIG)
        self.assertTrue(item.consumed)
        self.assertEqual(self.resources.meter, 60.0)
        self.assertEqual(self.resources.score, 10)
        self.assertEqual(self.player.mood, Mood.HAPPY)
        self.assertEqual(self.player.mood_timer, 30)

    def test_bad_hit(self):
        item = item_at(1, self.player.y, ItemKind.BAD)
        collision.resolve_hit(item, self.player, self.resources, CONFIG)
        self.assertTrue(item.consumed)
        self.assertEqual(self.resources.meter, 30.0)
        self.assertEqual(self.resources.score, 0)
        self.assertEqual(self.player.mood, Mood.SICK)
        self.assertEqual(self.player.mood_timer, 40)


# =============================================================================
# 3. SWEEP AND PRUNE
# =============================================================================

class TestSweep(unittest.TestCase):
    """Every item advances, then each may be hit at most once."""

    def setUp(self):
        self.player = Player(CONFIG)
        self.resources = Resources(CONFIG)

    def test_items_advance_before_testing(self):
        near = item_at(1, self.player.y - 55.0)
        hits = collision.sweep([near], self.player, self.resources, 6.0, CONFIG)
        self.assertEqual(hits, [ItemKind.GOOD])
        self.assertEqual(near.pos.y, self.player.y - 49.0)

    def test_multiple_hits_in_one_sweep(self):
        good = item_at(1, self.player.y - 6.0, ItemKind.GOOD)
        bad = item_at(1, self.player.y + 4.0, ItemKind.BAD)
        far = item_at(0, 100.0)
        hits = collision.sweep([good, bad, far], self.player, self.resources, 6.0, CONFIG)
        self.assertEqual(hits, [ItemKind.GOOD, ItemKind.BAD])
        self.assertEqual(self.resources.meter, 40.0)
        self.assertEqual(self.resources.score, 10)
        self.assertEqual(self.player.mood, Mood.SICK)
        self.assertEqual(far.pos.y, 106.0)

    def test_item_hit_only_once(self):
        item = item_at(1, self.player.y - 6.0)
        collision.sweep([item], self.player, self.resources, 6.0, CONFIG)
        item.pos.y = self.player.y - 6.0
        hits = collision.sweep([item], self.player, self.resources, 6.0, CONFIG)
        self.assertEqual(hits, [])
        self.assertEqual(self.resources.score, 10)

    def test_prune_drops_consumed_and_offscreen(self):
        keep = item_at(0, 100.0)
        eaten = item_at(1, 100.0)
        eaten.consumed = True
        gone = item_at(2, 100.0)
        gone.offscreen = True
        self.assertEqual(collision.prune([keep, eaten, gone]), [keep])


if __name__ == "__main__":
    unittest.main(verbosity=2)
