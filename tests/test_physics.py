import math

import numpy as np
import pytest

from cosmicvelocity import constants as C
from cosmicvelocity.physics import (
    Attractor,
    as_vec,
    circles_overlap,
    circular_orbit_speed,
    distance,
    gravity_acceleration,
    in_bounds,
)


def test_attractor_default_is_screen_centre():
    a = Attractor.default()
    assert np.allclose(a.pos, [C.WIDTH / 2, C.HEIGHT / 2])
    assert a.mass == C.ATTRACTOR_MASS
    assert a.radius == C.ATTRACTOR_RADIUS


def test_gravity_points_toward_attractor():
    centre = np.array([320.0, 240.0])
    acc = gravity_acceleration(100.0, centre, [370.0, 240.0])
    assert math.isclose(acc[0], -100.0 / 50.0 ** 2, rel_tol=1e-12)
    assert math.isclose(acc[1], 0.0, abs_tol=1e-12)

    acc = gravity_acceleration(100.0, centre, [320.0, 140.0])
    assert math.isclose(acc[0], 0.0, abs_tol=1e-12)
    assert math.isclose(acc[1], 100.0 / 100.0 ** 2, rel_tol=1e-12)


def test_gravity_inverse_square():
    centre = np.array([0.0, 0.0])
    near = np.linalg.norm(gravity_acceleration(10.0, centre, [3.0, 4.0]))
    far = np.linalg.norm(gravity_acceleration(10.0, centre, [6.0, 8.0]))
    assert math.isclose(near / far, 4.0, rel_tol=1e-12)


def test_gravity_zero_distance_does_not_crash():
    acc = gravity_acceleration(100.0, [320.0, 240.0], [320.0, 240.0])
    assert np.allclose(acc, [0.0, 0.0])


def test_gravity_near_zero_distance_is_large_but_finite():
    acc = gravity_acceleration(100.0, [320.0, 240.0], [320.0 + 1e-6, 240.0])
    assert np.all(np.isfinite(acc))
    assert acc[0] < -1e12


def test_circular_orbit_speed():
    assert math.isclose(circular_orbit_speed(100.0, 50.0), math.sqrt(2.0))


def test_circles_touching_do_not_overlap():
    assert not circles_overlap([0.0, 0.0], 10.0, [20.0, 0.0], 10.0)
    assert circles_overlap([0.0, 0.0], 10.0, [19.999, 0.0], 10.0)


def test_distance():
    assert distance([0.0, 0.0], [3.0, 4.0]) == 5.0


def test_in_bounds_strict_and_inclusive():
    m = C.BOUNDS_MARGIN
    assert in_bounds([-m + 0.1, 10.0])
    assert not in_bounds([-m, 10.0])
    assert in_bounds([-m, 10.0], inclusive=True)
    assert not in_bounds([C.WIDTH + m + 0.1, 10.0], inclusive=True)
    assert not in_bounds([10.0, C.HEIGHT + m])


def test_as_vec_rejects_wrong_shape():
    with pytest.raises(ValueError):
        as_vec([1.0, 2.0, 3.0])
