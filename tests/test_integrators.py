import math

import numpy as np

from cosmicvelocity import constants as C
from cosmicvelocity.bodies import Meteoroid, Rocket
from cosmicvelocity.integrators import (
    GravitySimulator,
    apply_thrust,
    demo_meteoroids,
    evict_out_of_bounds,
    integrate,
)
from cosmicvelocity.physics import Attractor, gravity_acceleration


def _radius(body, attractor):
    return float(np.linalg.norm(body.pos - attractor.pos))


def test_velocity_delta_is_pure():
    a = Attractor.default()
    sim = GravitySimulator(a)
    pos = np.array([400.0, 300.0])
    first = sim.velocity_delta(pos)
    second = sim.velocity_delta(pos)
    assert np.array_equal(first, second)
    assert np.array_equal(pos, [400.0, 300.0])
    assert np.allclose(first, gravity_acceleration(a.mass, a.pos, pos))


def test_gravity_uses_positions_before_movement():
    a = Attractor.default()
    sim = GravitySimulator(a)
    rocket = Rocket.launch(a)
    meteoroids = [
        Meteoroid(pos=[100.0, 100.0], vel=[0.5, 0.0]),
        Meteoroid(pos=[500.0, 400.0], vel=[0.0, -0.5]),
    ]
    expected = [b.vel + gravity_acceleration(a.mass, a.pos, b.pos)
                for b in [rocket, *meteoroids]]
    start = [b.pos.copy() for b in [rocket, *meteoroids]]

    sim.apply(rocket, meteoroids)
    for body, vel, pos in zip([rocket, *meteoroids], expected, start):
        assert np.allclose(body.vel, vel)
        assert np.array_equal(body.pos, pos)

    integrate(rocket, meteoroids)
    for body, vel, pos in zip([rocket, *meteoroids], expected, start):
        assert np.allclose(body.pos, pos + vel)


def test_launched_rocket_one_tick_stays_circular():
    a = Attractor.default()
    sim = GravitySimulator(a)
    rocket = Rocket.launch(a)
    r0 = _radius(rocket, a)
    v0 = rocket.speed

    sim.apply(rocket, [])
    integrate(rocket, [])

    # first-order integration error only
    assert abs(rocket.speed - v0) < 1e-3
    assert abs(_radius(rocket, a) - r0) < 0.05


def test_unperturbed_rocket_orbit_is_stable():
    a = Attractor.default()
    sim = GravitySimulator(a)
    rocket = Rocket.launch(a)
    r0 = _radius(rocket, a)
    radii = []
    for _ in range(2000):
        sim.apply(rocket, [])
        integrate(rocket, [])
        radii.append(_radius(rocket, a))
    assert min(radii) > r0 - 3.0
    assert max(radii) < r0 + 3.0


def test_thrust_adds_impulse_along_heading():
    rocket = Rocket(pos=[0.0, 0.0], vel=[3.0, 4.0])
    apply_thrust(rocket, 0.5)
    assert math.isclose(rocket.speed, 5.5, rel_tol=1e-12)
    assert math.isclose(rocket.heading, math.atan2(4.0, 3.0), rel_tol=1e-12)


def test_thrust_raises_orbital_energy():
    a = Attractor.default()
    rocket = Rocket.launch(a)
    v0 = rocket.speed
    apply_thrust(rocket)
    assert math.isclose(rocket.speed, v0 + C.THRUST_IMPULSE, rel_tol=1e-12)


def test_evict_out_of_bounds_returns_new_list():
    inside = Meteoroid(pos=[-C.BOUNDS_MARGIN + 0.1, 10.0], vel=[0.0, 0.0])
    edge = Meteoroid(pos=[-C.BOUNDS_MARGIN, 10.0], vel=[0.0, 0.0])
    outside = Meteoroid(pos=[10.0, C.HEIGHT + 100.0], vel=[0.0, 0.0])
    original = [inside, edge, outside]
    kept = evict_out_of_bounds(original)
    assert kept == [inside]
    assert len(original) == 3


def test_demo_meteoroids_have_full_trails():
    demos = demo_meteoroids(Attractor.default())
    assert len(demos) == len(C.DEMO_METEOROIDS)
    for m in demos:
        assert m.ticks == C.ORBIT_HISTORY_LENGTH
        assert len(m.trail()) == C.ORBIT_HISTORY_LENGTH
