import math

from cosmicvelocity.analysis import orbital_elements
from cosmicvelocity.bodies import Rocket
from cosmicvelocity.physics import Attractor


def test_circular_orbit_elements():
    a = Attractor.default()
    r = Rocket.launch(a)
    el = orbital_elements(r.pos, r.vel, a)
    radius = 50.0
    assert math.isclose(el['radius'], radius)
    assert math.isclose(el['semi_major_axis'], radius, rel_tol=1e-9)
    assert el['eccentricity'] < 1e-9
    assert math.isclose(el['period'], 2 * math.pi * radius / math.sqrt(a.mass / radius), rel_tol=1e-9)
    assert math.isclose(el['energy'], -a.mass / (2 * radius), rel_tol=1e-9)


def test_escape_orbit_has_infinite_period():
    a = Attractor.default()
    el = orbital_elements([a.x + 50.0, a.y], [0.0, 5.0], a)
    assert el['energy'] > 0
    assert el['period'] == math.inf
    assert el['eccentricity'] > 1
    assert el['periapsis'] == 0.0


def test_zero_radius_is_handled():
    a = Attractor.default()
    el = orbital_elements(a.pos, [1.0, 0.0], a)
    assert el['radius'] == 0.0
    assert el['energy'] == -math.inf
