"""Procedural meteoroid spawning."""
import logging
import math
from typing import List, Optional

import numpy as np

from . import constants as C
from .bodies import Meteoroid
from .physics import Attractor

logger = logging.getLogger(__name__)


class SpawnScheduler:
    """Drops a meteoroid on the expanded screen perimeter every ``interval`` ticks.

    Parameters
    ----------
    attractor : Attractor
        Body the meteoroids are roughly aimed at.
    rng : numpy.random.Generator
        Source of all randomness; pass a seeded generator for reproducible runs.
    interval : int, optional
        Ticks between spawns.
    margin : float, optional
        Distance of the spawn rectangle beyond each screen edge.
    """

    def __init__(self, attractor: Attractor, rng: np.random.Generator,
                 interval: int = C.SPAWN_INTERVAL_TICKS,
                 margin: float = C.BOUNDS_MARGIN,
                 width: float = C.WIDTH, height: float = C.HEIGHT):
        self.attractor = attractor
        self.rng = rng
        self.interval = int(interval)
        self.margin = margin
        self.width = width
        self.height = height

    @property
    def span_x(self) -> float:
        return self.width + 2 * self.margin

    @property
    def span_y(self) -> float:
        return self.height + 2 * self.margin

    @property
    def perimeter(self) -> int:
        return int(2 * self.span_x + 2 * self.span_y)

    def should_spawn(self, ticks: int) -> bool:
        return ticks % self.interval == 0

    def perimeter_point(self, index: int) -> tuple[float, float]:
        """Map ``index`` in ``[0, perimeter)`` onto top, right, bottom, left edges."""
        w, h, m = self.span_x, self.span_y, self.margin
        p = float(index)
        if p < w:
            return p - m, -m
        if p < w + h:
            return self.width + m, p - w - m
        if p < 2 * w + h:
            return p - w - h - m, self.height + m
        return -m, p - 2 * w - h - m

    def sample_heading_offset(self) -> float:
        """Offset in ``(-pi/2, pi/2)`` whose magnitude exceeds ``pi/8``."""
        while True:
            dt = math.pi * self.rng.random() - math.pi / 2
            if C.SPAWN_MIN_DEVIATION < abs(dt) < C.SPAWN_MAX_DEVIATION:
                return dt

    def spawn(self) -> Meteoroid:
        x, y = self.perimeter_point(int(self.rng.integers(self.perimeter)))
        theta = math.atan2(self.attractor.y - y, self.attractor.x - x)
        theta += self.sample_heading_offset()
        m = Meteoroid.with_heading([x, y], C.METEOROID_SPEED, theta)
        logger.debug("Spawned meteoroid at (%.1f, %.1f) heading %.3f", x, y, theta)
        return m

    def maybe_spawn(self, ticks: int, meteoroids: List[Meteoroid]) -> Optional[Meteoroid]:
        """Append a new meteoroid to ``meteoroids`` when ``ticks`` is due."""
        if not self.should_spawn(ticks):
            return None
        m = self.spawn()
        meteoroids.append(m)
        return m


__all__ = ["SpawnScheduler"]
