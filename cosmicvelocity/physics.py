"""Physics primitives for the single-attractor game world.

Only one fixed body exerts force.  Positions and velocities are numpy
2-vectors in screen units; velocities are per tick, so an acceleration is
also the velocity change for one tick.
"""
from dataclasses import dataclass
import math

import numpy as np

from . import constants as C


@dataclass(frozen=True)
class Attractor:
    """The fixed gravitating body at the centre of the screen."""

    x: float
    y: float
    mass: float
    radius: float

    @property
    def pos(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def default(cls) -> "Attractor":
        return cls(C.ATTRACTOR_X, C.ATTRACTOR_Y, C.ATTRACTOR_MASS, C.ATTRACTOR_RADIUS)


def as_vec(value) -> np.ndarray:
    """Return ``value`` as a fresh float 2-vector."""
    v = np.array(value, dtype=float).reshape(-1)
    if v.size != 2:
        raise ValueError(f"expected a 2-D vector, got shape {np.shape(value)}")
    return v


def gravity_acceleration(attractor_mass, attractor_pos, body_pos) -> np.ndarray:
    """Inverse-square acceleration pulling ``body_pos`` toward the attractor.

    The magnitude is ``attractor_mass / d**2`` with no softening term.  A body
    sitting exactly on the attractor's centre has no defined direction and
    receives zero acceleration instead of an infinite one.
    """
    dx = attractor_pos[0] - body_pos[0]
    dy = attractor_pos[1] - body_pos[1]
    d2 = dx * dx + dy * dy
    if d2 == 0:
        return np.zeros(2, dtype=float)
    a = attractor_mass / d2
    theta = math.atan2(dy, dx)
    return np.array([a * math.cos(theta), a * math.sin(theta)], dtype=float)


def circular_orbit_speed(mass: float, radius: float) -> float:
    """Tangential speed of a circular orbit of ``radius`` around ``mass``."""
    return math.sqrt(mass / radius)


def distance_sq(a, b) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return float(dx * dx + dy * dy)


def distance(a, b) -> float:
    return math.sqrt(distance_sq(a, b))


def circles_overlap(p1, r1, p2, r2) -> bool:
    """True when two circles intersect (touching circles do not)."""
    return distance_sq(p1, p2) < (r1 + r2) ** 2


def in_bounds(pos, margin: float = C.BOUNDS_MARGIN,
              width: float = C.WIDTH, height: float = C.HEIGHT,
              inclusive: bool = False) -> bool:
    """True when ``pos`` lies inside the screen grown by ``margin``.

    Meteoroids must be strictly inside; the rocket is only replaced once it
    is strictly outside, hence ``inclusive``.
    """
    x, y = pos[0], pos[1]
    lo_x, hi_x = -margin, width + margin
    lo_y, hi_y = -margin, height + margin
    if inclusive:
        return lo_x <= x <= hi_x and lo_y <= y <= hi_y
    return lo_x < x < hi_x and lo_y < y < hi_y


__all__ = [
    "Attractor",
    "as_vec",
    "gravity_acceleration",
    "circular_orbit_speed",
    "distance",
    "distance_sq",
    "circles_overlap",
    "in_bounds",
]
