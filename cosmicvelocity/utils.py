"""Formatting helpers for on-screen text."""

from . import constants as C


def format_score(score: int) -> str:
    return f"SCORE {score}"


def format_plus(plus: int) -> str:
    return f"+{plus}"


def ticks_to_display(ticks: int, fps: int = C.FPS) -> str:
    if ticks < 0:
        return "N/A"
    seconds = ticks // fps
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def orbit_to_display(elements: dict) -> str:
    period = elements["period"]
    period_text = "inf" if period == float("inf") else f"{period:.0f}t"
    return (
        f"r={elements['radius']:.1f} v={elements['speed']:.3f} "
        f"e={elements['eccentricity']:.3f} T={period_text}"
    )
