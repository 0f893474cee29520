import math

import numpy as np

from .physics import Attractor


def orbital_elements(pos, vel, attractor: Attractor):
    """Return the two-body orbital elements of a body around ``attractor``.

    The attractor mass plays the role of ``mu`` (G is folded into it).  Open
    orbits report an infinite period and a non-positive semi-major axis.
    """
    r_vec = np.asarray(pos, dtype=float)[:2] - attractor.pos
    v_vec = np.asarray(vel, dtype=float)[:2]
    r = float(np.hypot(*r_vec))
    v = float(np.hypot(*v_vec))
    mu = attractor.mass

    if r == 0:
        return {
            'energy': -math.inf, 'semi_major_axis': 0.0, 'eccentricity': 0.0,
            'period': 0.0, 'periapsis': 0.0, 'apoapsis': 0.0, 'speed': v,
            'radius': 0.0,
        }

    energy = v ** 2 / 2 - mu / r
    # h is the z component of r x v
    h = r_vec[0] * v_vec[1] - r_vec[1] * v_vec[0]
    e_vec = np.array([v_vec[1] * h, -v_vec[0] * h]) / mu - r_vec / r
    eccentricity = float(np.hypot(*e_vec))

    if abs(energy) < 1e-12:  # parabolic
        semi_major_axis = math.inf
        period = math.inf
    else:
        semi_major_axis = -mu / (2 * energy)
        if semi_major_axis > 0:
            period = 2 * math.pi * math.sqrt(semi_major_axis ** 3 / mu)
        else:
            period = math.inf

    bound = math.isfinite(semi_major_axis) and semi_major_axis > 0
    return {
        'energy': energy,
        'semi_major_axis': semi_major_axis,
        'eccentricity': eccentricity,
        'period': period,
        'periapsis': semi_major_axis * (1 - eccentricity) if bound else 0.0,
        'apoapsis': semi_major_axis * (1 + eccentricity) if bound else 0.0,
        'speed': v,
        'radius': r,
    }
