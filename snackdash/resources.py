"""Balance meter, score and distance counters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_CONFIG, GameConfig


@dataclass
class Resources:
    """Scalar run state with saturating updates.

    The meter never leaves ``[meter_min, meter_max]``; score and distance only
    grow during a run.
    """

    config: GameConfig = field(default=DEFAULT_CONFIG, repr=False)
    meter: Optional[float] = None
    score: int = 0
    distance: float = 0.0

    def __post_init__(self) -> None:
        if self.meter is None:
            self.meter = self.config.initial_meter
        self.meter = self._clamp(self.meter)

    def _clamp(self, value: float) -> float:
        return max(self.config.meter_min, min(self.config.meter_max, value))

    @property
    def exhausted(self) -> bool:
        return self.meter <= self.config.meter_min

    @property
    def meter_fraction(self) -> float:
        span = self.config.meter_max - self.config.meter_min
        return (self.meter - self.config.meter_min) / span

    def apply_decay(self) -> bool:
        """Drain the per-tick decay. Returns True once the meter is empty."""
        self.meter = self._clamp(self.meter - self.config.decay_per_tick)
        return self.exhausted

    def apply_good_hit(self) -> None:
        self.meter = self._clamp(self.meter + self.config.good_meter_bonus)
        self.score += self.config.good_score_bonus

    def apply_bad_hit(self) -> None:
        self.meter = self._clamp(self.meter - self.config.bad_meter_penalty)

    def advance(self, speed: float) -> None:
        self.distance += speed / self.config.distance_divisor
