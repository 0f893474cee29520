"""Cosmic Velocity: orbit a planet and shoot down incoming meteoroids."""

from importlib.metadata import PackageNotFoundError, version

from .physics import Attractor, gravity_acceleration, circular_orbit_speed
from .bodies import Rocket, Meteoroid, Effect, Star, OrbitHistory, make_stars
from .integrators import GravitySimulator
from .spawn import SpawnScheduler
from .collisions import CollisionSystem, CollisionReport, score_for_distance
from .simulation import GameController, GameSnapshot, GameState, Mode
from .constants import GAME_NAME, WIDTH, HEIGHT, FPS

try:
    __version__ = version("cosmic-velocity")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Attractor",
    "gravity_acceleration",
    "circular_orbit_speed",
    "Rocket",
    "Meteoroid",
    "Effect",
    "Star",
    "OrbitHistory",
    "make_stars",
    "GravitySimulator",
    "SpawnScheduler",
    "CollisionSystem",
    "CollisionReport",
    "score_for_distance",
    "GameController",
    "GameSnapshot",
    "GameState",
    "Mode",
    "GAME_NAME",
    "WIDTH",
    "HEIGHT",
    "FPS",
    "__version__",
]
