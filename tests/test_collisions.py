import numpy as np
import pytest
from hypothesis import given, strategies as st

from cosmicvelocity.bodies import Meteoroid, Rocket
from cosmicvelocity.collisions import CollisionSystem, score_for_distance
from cosmicvelocity.physics import Attractor


def _system(seed=0):
    return CollisionSystem(Attractor.default(), np.random.default_rng(seed))


def _rocket_at(x, y):
    return Rocket(pos=[x, y], vel=[1.0, 0.0])


@pytest.mark.parametrize(
    "d, plus",
    [(0.0, 1), (99.0, 1), (99.999, 1), (100.0, 2), (149.0, 2), (150.0, 3), (300.0, 3)],
)
def test_score_bands(d, plus):
    assert score_for_distance(d) == plus


@given(st.floats(0, 1000, allow_nan=False), st.floats(0, 1000, allow_nan=False))
def test_score_is_monotonic_in_distance(d1, d2):
    lo, hi = sorted((d1, d2))
    assert score_for_distance(lo) <= score_for_distance(hi)


@pytest.mark.parametrize("offset, plus", [(99.0, 1), (100.0, 2), (149.0, 2), (150.0, 3), (300.0, 3)])
def test_rocket_hit_scores_by_meteoroid_distance(offset, plus):
    system = _system()
    a = system.attractor
    x, y = a.x + offset, a.y
    rocket = _rocket_at(x, y)
    m = Meteoroid(pos=[x, y], vel=[0.0, 0.0])

    report = system.resolve(rocket, [m])

    assert report.score == plus
    assert len(report.hits) == 1
    hit = report.hits[0]
    assert hit.meteoroid is m and hit.plus == plus
    assert hit.effect.plus == plus
    assert np.allclose(hit.effect.pos, m.pos)
    assert report.meteoroids == []
    assert report.rocket is not rocket
    assert np.allclose(report.rocket.pos, Rocket.launch(a).pos)
    assert not report.game_over


def test_rocket_hit_at_most_once_per_tick():
    system = _system()
    a = system.attractor
    x, y = a.x + 200.0, a.y
    rocket = _rocket_at(x, y)
    first = Meteoroid(pos=[x + 5.0, y], vel=[0.0, 0.0])
    second = Meteoroid(pos=[x - 5.0, y], vel=[0.0, 0.0])

    report = system.resolve(rocket, [first, second])

    assert [h.meteoroid for h in report.hits] == [first]
    assert report.meteoroids == [second]
    assert report.score == 3


def test_near_miss_is_not_a_hit():
    system = _system()
    rocket = _rocket_at(100.0, 100.0)
    m = Meteoroid(pos=[120.0, 100.0], vel=[0.0, 0.0])
    report = system.resolve(rocket, [m])
    assert report.hits == []
    assert report.rocket is rocket
    assert report.meteoroids == [m]


def test_meteoroid_hitting_attractor_ends_game_and_keeps_only_it():
    system = _system()
    a = system.attractor
    rocket = Rocket.launch(a)
    far = Meteoroid(pos=[50.0, 50.0], vel=[0.0, 0.0])
    struck = Meteoroid(pos=[a.x + 25.0, a.y], vel=[0.0, 0.0])
    later = Meteoroid(pos=[a.x - 25.0, a.y], vel=[0.0, 0.0])

    report = system.resolve(rocket, [far, struck, later])

    assert report.meteoroid_hit_attractor
    assert report.struck_meteoroid is struck
    assert report.meteoroids == [struck]
    assert report.game_over
    assert not report.rocket_hit_attractor


def test_rocket_hitting_attractor_clears_meteoroids():
    system = _system()
    a = system.attractor
    rocket = _rocket_at(a.x, a.y - 25.0)
    m = Meteoroid(pos=[50.0, 50.0], vel=[0.0, 0.0])

    report = system.resolve(rocket, [m])

    assert report.rocket_hit_attractor
    assert report.meteoroids == []
    assert report.game_over


def test_replaced_rocket_is_not_tested_against_attractor_at_old_position():
    system = _system()
    a = system.attractor
    # rocket overlapping the attractor and a meteoroid at once
    x, y = a.x, a.y - 25.0
    rocket = _rocket_at(x, y)
    m = Meteoroid(pos=[x, y - 10.0], vel=[0.0, 0.0])

    report = system.resolve(rocket, [m])

    assert report.score == 1
    assert not report.rocket_hit_attractor
    assert not report.game_over
