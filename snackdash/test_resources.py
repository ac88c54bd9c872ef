#!/usr/bin/env python3
"""
Test suite for resources.py -- balance meter, score and distance.
"""

import unittest

from snackdash.config import GameConfig
from snackdash.resources import Resources


# =============================================================================
# 1. INITIAL STATE
# =============================================================================

class TestInitialState(unittest.TestCase):
    """A fresh Resources starts from the configured values."""

    def test_defaults(self):
        res = Resources()
        self.assertEqual(res.meter, 50.0)
        self.assertEqual(res.score, 0)
        self.assertEqual(res.distance, 0.0)

    def test_initial_meter_from_config(self):
        res = Resources(GameConfig(initial_meter=80.0))
        self.assertEqual(res.meter, 80.0)

    def test_explicit_meter_is_clamped(self):
        self.assertEqual(Resources(meter=250.0).meter, 100.0)

    def test_meter_fraction(self):
        self.assertAlmostEqual(Resources().meter_fraction, 0.5)


# =============================================================================
# 2. SATURATING UPDATES
# =============================================================================

class TestUpdates(unittest.TestCase):
    """Decay, good hits and bad hits never push the meter out of range."""

    def test_decay_subtracts_constant(self):
        res = Resources()
        exhausted = res.apply_decay()
        self.assertAlmostEqual(res.meter, 49.95)
        self.assertFalse(exhausted)

    def test_decay_clamps_at_zero_and_reports_exhaustion(self):
        res = Resources(meter=0.03)
        self.assertTrue(res.apply_decay())
        self.assertEqual(res.meter, 0.0)
        self.assertTrue(res.exhausted)

    def test_decay_to_exactly_zero(self):
        res = Resources(meter=0.05)
        self.assertTrue(res.apply_decay())
        self.assertEqual(res.meter, 0.0)

    def test_good_hit_adds_meter_and_score(self):
        res = Resources()
        res.apply_good_hit()
        self.assertEqual(res.meter, 60.0)
        self.assertEqual(res.score, 10)

    def test_good_hit_clamps_at_max(self):
        res = Resources(meter=95.0)
        res.apply_good_hit()
        self.assertEqual(res.meter, 100.0)
        self.assertEqual(res.score, 10)

    def test_bad_hit_subtracts_penalty(self):
        res = Resources()
        res.apply_bad_hit()
        self.assertEqual(res.meter, 30.0)
        self.assertEqual(res.score, 0)

    def test_bad_hit_clamps_at_zero(self):
        res = Resources(meter=15.0)
        res.apply_bad_hit()
        self.assertEqual(res.meter, 0.0)
        self.assertTrue(res.exhausted)

    def test_advance_accumulates_speed_over_twenty(self):
        res = Resources()
        res.advance(6.0)
        self.assertAlmostEqual(res.distance, 0.3)
        res.advance(6.5)
        self.assertAlmostEqual(res.distance, 0.625)


if __name__ == "__main__":
    unittest.main(verbosity=2)
