import math

from cosmicvelocity.utils import format_plus, format_score, orbit_to_display, ticks_to_display


def test_format_score():
    assert format_score(0) == "SCORE 0"
    assert format_score(17) == "SCORE 17"
    assert format_plus(3) == "+3"


def test_ticks_to_display_ranges():
    assert ticks_to_display(-1) == "N/A"
    assert ticks_to_display(0) == "00:00"
    assert ticks_to_display(59) == "00:00"
    assert ticks_to_display(60) == "00:01"
    assert ticks_to_display(60 * 75) == "01:15"


def test_orbit_to_display():
    text = orbit_to_display({"radius": 50.0, "speed": 1.41421, "eccentricity": 0.0, "period": math.inf})
    assert text == "r=50.0 v=1.414 e=0.000 T=inf"
    text = orbit_to_display({"radius": 50.0, "speed": 1.0, "eccentricity": 0.5, "period": 222.14})
    assert text.endswith("T=222t")
