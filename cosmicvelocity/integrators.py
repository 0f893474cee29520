"""Per-tick gravity and position integration.

A tick is two passes: every body first receives its gravity kick evaluated
at its current position, then every body moves by its (updated) velocity.
This is semi-implicit Euler with a unit time step, which keeps circular
orbits closed over long runs.
"""
import math
from typing import Iterable, List

import numpy as np

from . import constants as C
from .bodies import Meteoroid, Rocket
from .physics import Attractor, gravity_acceleration, in_bounds


class GravitySimulator:
    """Applies the attractor's pull to the rocket and the meteoroids."""

    def __init__(self, attractor: Attractor):
        self.attractor = attractor
        self._pos = attractor.pos

    def velocity_delta(self, pos) -> np.ndarray:
        """Velocity change for one tick of a body at ``pos``."""
        return gravity_acceleration(self.attractor.mass, self._pos, pos)

    def apply(self, rocket: Rocket, meteoroids: Iterable[Meteoroid]) -> None:
        """Kick every body using positions from before this tick's movement."""
        bodies = [rocket, *meteoroids]
        deltas = [self.velocity_delta(b.pos) for b in bodies]
        for body, dv in zip(bodies, deltas):
            body.vel = body.vel + dv


def apply_thrust(rocket: Rocket, impulse: float = C.THRUST_IMPULSE) -> None:
    """Push the rocket along its own heading."""
    theta = rocket.heading
    rocket.vel = rocket.vel + np.array(
        [impulse * math.cos(theta), impulse * math.sin(theta)], dtype=float
    )


def integrate(rocket: Rocket, meteoroids: Iterable[Meteoroid]) -> None:
    """Move every body by one tick of its velocity."""
    rocket.pos = rocket.pos + rocket.vel
    for m in meteoroids:
        m.advance()


def evict_out_of_bounds(meteoroids: Iterable[Meteoroid],
                        margin: float = C.BOUNDS_MARGIN) -> List[Meteoroid]:
    """Return the meteoroids still inside the expanded screen box."""
    return [m for m in meteoroids if in_bounds(m.pos, margin)]


def demo_meteoroids(attractor: Attractor,
                    ticks: int = C.ORBIT_HISTORY_LENGTH) -> List[Meteoroid]:
    """Meteoroids for the title screen, pre-run so their trails are full."""
    sim = GravitySimulator(attractor)
    demos = [
        Meteoroid.with_heading([attractor.x + dx, attractor.y + dy], speed, theta)
        for dx, dy, speed, theta in C.DEMO_METEOROIDS
    ]
    for _ in range(ticks):
        for m in demos:
            m.vel = m.vel + sim.velocity_delta(m.pos)
        for m in demos:
            m.advance()
    return demos


__all__ = [
    "GravitySimulator",
    "apply_thrust",
    "integrate",
    "evict_out_of_bounds",
    "demo_meteoroids",
]
