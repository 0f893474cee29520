"""Circle collision sweeps and their scoring rules.

The sweep only decides outcomes; it never plays sounds, logs telemetry or
switches modes.  The controller applies a :class:`CollisionReport`.
"""
from dataclasses import dataclass, field
import logging
from typing import List, Optional

import numpy as np

from . import constants as C
from .bodies import Effect, Meteoroid, Rocket
from .physics import Attractor, circles_overlap, distance

logger = logging.getLogger(__name__)


def score_for_distance(d: float) -> int:
    """Points for shooting down a meteoroid ``d`` units from the attractor.

    Closer hits are worth less: ``d < 100`` scores 1, ``d < 150`` scores 2 and
    anything further out scores 3.
    """
    for limit, plus in C.SCORE_BANDS:
        if d < limit:
            return plus
    return C.SCORE_FALLBACK


@dataclass
class Hit:
    meteoroid: Meteoroid
    plus: int
    effect: Effect


@dataclass
class CollisionReport:
    rocket: Rocket
    meteoroids: List[Meteoroid]
    hits: List[Hit] = field(default_factory=list)
    struck_meteoroid: Optional[Meteoroid] = None
    rocket_hit_attractor: bool = False

    @property
    def meteoroid_hit_attractor(self) -> bool:
        return self.struck_meteoroid is not None

    @property
    def game_over(self) -> bool:
        return self.meteoroid_hit_attractor or self.rocket_hit_attractor

    @property
    def score(self) -> int:
        return sum(h.plus for h in self.hits)


class CollisionSystem:
    """Runs the three collision passes for one tick."""

    def __init__(self, attractor: Attractor, rng: np.random.Generator):
        self.attractor = attractor
        self.rng = rng

    def rocket_vs_meteoroids(self, rocket: Rocket, meteoroids: List[Meteoroid]):
        """Return ``(rocket, survivors, hits)`` after the rocket-meteoroid pass.

        Meteoroids are checked in list (spawn) order and the rocket can be hit
        at most once per tick; later overlapping meteoroids survive.
        """
        survivors = []
        hits = []
        for m in meteoroids:
            if not hits and circles_overlap(m.pos, m.radius, rocket.pos, rocket.radius):
                plus = score_for_distance(distance(m.pos, self.attractor.pos))
                hits.append(Hit(m, plus, Effect.spawn(m.pos, plus, self.rng)))
                logger.debug("Rocket hit meteoroid at (%.1f, %.1f) for +%d",
                             m.pos[0], m.pos[1], plus)
            else:
                survivors.append(m)
        if hits:
            rocket = Rocket.launch(self.attractor)
        return rocket, survivors, hits

    def meteoroid_vs_attractor(self, meteoroids: List[Meteoroid]) -> Optional[Meteoroid]:
        """First meteoroid that struck the attractor, if any."""
        a = self.attractor
        for m in meteoroids:
            if circles_overlap(a.pos, a.radius, m.pos, m.radius):
                return m
        return None

    def rocket_vs_attractor(self, rocket: Rocket) -> bool:
        a = self.attractor
        return circles_overlap(a.pos, a.radius, rocket.pos, rocket.radius)

    def resolve(self, rocket: Rocket, meteoroids: List[Meteoroid]) -> CollisionReport:
        rocket, survivors, hits = self.rocket_vs_meteoroids(rocket, meteoroids)
        report = CollisionReport(rocket=rocket, meteoroids=survivors, hits=hits)

        struck = self.meteoroid_vs_attractor(survivors)
        if struck is not None:
            report.struck_meteoroid = struck
            report.meteoroids = [struck]

        if self.rocket_vs_attractor(rocket):
            report.rocket_hit_attractor = True
            report.meteoroids = []
        return report


__all__ = ["score_for_distance", "Hit", "CollisionReport", "CollisionSystem"]
