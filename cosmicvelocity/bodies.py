"""Plain data records for everything that lives in the game world."""
from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from . import constants as C
from .physics import Attractor, as_vec, circular_orbit_speed


class OrbitHistory:
    """Fixed-capacity ring buffer of past positions.

    Slot ``tick % capacity`` holds the position recorded at ``tick``; older
    entries are overwritten in place.  Only the renderer reads it.
    """

    __slots__ = ("capacity", "points", "cursor")

    def __init__(self, capacity: int = C.ORBIT_HISTORY_LENGTH):
        capacity = int(capacity)
        if capacity <= 0:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.points = np.zeros((capacity, 2), dtype=np.float64)
        self.cursor = 0

    def record(self, tick: int, pos) -> None:
        self.cursor = tick % self.capacity
        self.points[self.cursor] = pos[:2]

    def recent(self, tick: int) -> np.ndarray:
        """Positions recorded up to ``tick``, newest first."""
        count = min(max(tick, 0), self.capacity)
        idx = (tick - np.arange(count)) % self.capacity
        return self.points[idx]

    def __len__(self):
        return self.capacity


@dataclass(eq=False)
class Rocket:
    """The player's ship; replaced rather than repaired when lost."""

    pos: np.ndarray
    vel: np.ndarray
    mass: float = C.ROCKET_MASS
    radius: float = C.ROCKET_RADIUS

    def __post_init__(self):
        self.pos = as_vec(self.pos)
        self.vel = as_vec(self.vel)

    @property
    def heading(self) -> float:
        return math.atan2(self.vel[1], self.vel[0])

    @property
    def speed(self) -> float:
        return float(np.hypot(self.vel[0], self.vel[1]))

    @classmethod
    def launch(cls, attractor: Attractor, altitude: float = C.ROCKET_ALTITUDE) -> "Rocket":
        """New rocket directly above the attractor on a circular-orbit velocity."""
        r = attractor.radius + altitude
        v = circular_orbit_speed(attractor.mass, r)
        return cls(pos=[attractor.x, attractor.y - r], vel=[v, 0.0])


@dataclass(eq=False)
class Meteoroid:
    pos: np.ndarray
    vel: np.ndarray
    radius: float = C.METEOROID_RADIUS
    ticks: int = 0
    history: OrbitHistory = field(default_factory=OrbitHistory)

    def __post_init__(self):
        self.pos = as_vec(self.pos)
        self.vel = as_vec(self.vel)

    @classmethod
    def with_heading(cls, pos, speed: float, theta: float,
                     radius: float = C.METEOROID_RADIUS) -> "Meteoroid":
        return cls(pos=pos, vel=[speed * math.cos(theta), speed * math.sin(theta)],
                   radius=radius)

    def advance(self) -> None:
        """Age one tick, remember the current position, then move."""
        self.ticks += 1
        self.history.record(self.ticks, self.pos)
        self.pos = self.pos + self.vel

    def trail(self) -> np.ndarray:
        return self.history.recent(self.ticks)


@dataclass(eq=False)
class Effect:
    """Score popup left behind where a meteoroid hit the rocket."""

    pos: np.ndarray
    angles: tuple
    plus: int
    ticks: int = 0

    def __post_init__(self):
        self.pos = as_vec(self.pos)
        self.angles = tuple(float(a) for a in self.angles)

    @classmethod
    def spawn(cls, pos, plus: int, rng: np.random.Generator,
              particles: int = C.EFFECT_PARTICLES) -> "Effect":
        angles = 2 * math.pi * rng.random(particles)
        return cls(pos=pos, angles=tuple(angles), plus=plus)

    @property
    def expired(self) -> bool:
        return self.ticks >= C.EFFECT_LIFETIME_TICKS

    def particle_positions(self) -> np.ndarray:
        d = 0.5 * self.ticks
        angles = np.asarray(self.angles, dtype=float)
        return np.column_stack(
            (self.pos[0] + d * np.cos(angles), self.pos[1] + d * np.sin(angles))
        )

    def label_offset(self) -> float:
        return 15 * math.sin(math.pi * self.ticks / C.EFFECT_LIFETIME_TICKS)


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    radius: float


def make_stars(rng: np.random.Generator, count: int = C.STAR_COUNT,
               width: float = C.WIDTH, height: float = C.HEIGHT) -> list[Star]:
    """Scatter ``count`` decorative stars uniformly over the screen.

    Radii are ``0.5 + N(0, 1)`` and may come out negative; the renderer skips
    stars it cannot draw.
    """
    xs = width * rng.random(count)
    ys = height * rng.random(count)
    rs = 0.5 + rng.standard_normal(count)
    return [Star(float(x), float(y), float(r)) for x, y, r in zip(xs, ys, rs)]


__all__ = ["OrbitHistory", "Rocket", "Meteoroid", "Effect", "Star", "make_stars"]
