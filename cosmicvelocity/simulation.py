"""Game state machine: title, playing and game over."""
from dataclasses import dataclass, field
import enum
import logging
from typing import List, Optional, Tuple
import uuid

import numpy as np

from . import audio as A
from . import constants as C
from .analysis import orbital_elements
from .audio import NullAudio
from .bodies import Effect, Meteoroid, Rocket, Star, make_stars
from .collisions import CollisionReport, CollisionSystem
from .integrators import GravitySimulator, apply_thrust, evict_out_of_bounds, integrate
from .physics import Attractor, in_bounds
from .spawn import SpawnScheduler
from .telemetry import NullTelemetry

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything the tick routine mutates."""

    mode: Mode
    rocket: Rocket
    ticks: int = 0
    meteoroids: List[Meteoroid] = field(default_factory=list)
    effects: List[Effect] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    score: int = 0
    thrust: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one frame handed to the renderer."""

    mode: Mode
    ticks: int
    score: int
    thrust: bool
    rocket: Rocket
    meteoroids: Tuple[Meteoroid, ...]
    effects: Tuple[Effect, ...]
    stars: Tuple[Star, ...]
    attractor: Attractor


class GameController:
    """Owns the :class:`GameState` and advances it one tick at a time.

    Parameters
    ----------
    input_source :
        Object with ``just_pressed()`` and ``just_released()``; an
        ``update()`` method, if present, is called first on every tick.
    telemetry :
        Sink with ``log_event(game_name, fields)``.
    audio :
        Sink with ``play_one_shot(clip_id)``, ``play_loop()``, ``pause()``
        and ``rewind()``.
    rng : numpy.random.Generator, optional
        Randomness for spawns, effects and stars.  Seed it for repeatable runs.
    """

    def __init__(self, input_source, telemetry=None, audio=None,
                 rng: Optional[np.random.Generator] = None,
                 player_id: Optional[str] = None, play_id: Optional[str] = None,
                 attractor: Optional[Attractor] = None):
        self.input = input_source
        self.telemetry = telemetry if telemetry is not None else NullTelemetry()
        self.audio = audio if audio is not None else NullAudio()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.player_id = player_id or str(uuid.uuid4())
        self.play_id = play_id or str(uuid.uuid4())
        self.attractor = attractor or Attractor.default()

        self.gravity = GravitySimulator(self.attractor)
        self.spawner = SpawnScheduler(self.attractor, self.rng)
        self.collisions = CollisionSystem(self.attractor, self.rng)

        self.initialize()

    # ------------------------------------------------------------------
    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def ticks(self) -> int:
        return self.state.ticks

    def snapshot(self) -> GameSnapshot:
        s = self.state
        return GameSnapshot(
            mode=s.mode,
            ticks=s.ticks,
            score=s.score,
            thrust=s.thrust,
            rocket=s.rocket,
            meteoroids=tuple(s.meteoroids),
            effects=tuple(s.effects),
            stars=tuple(s.stars),
            attractor=self.attractor,
        )

    def orbit_diagnostics(self) -> dict:
        r = self.state.rocket
        return orbital_elements(r.pos, r.vel, self.attractor)

    # ------------------------------------------------------------------
    def _log_event(self, action: str, **extra) -> None:
        fields = {"player_id": self.player_id, "play_id": self.play_id, "action": action}
        fields.update(extra)
        self._notify(self.telemetry.log_event, C.GAME_NAME, fields)

    def _notify(self, func, *args) -> None:
        """Call an external collaborator; its failures never reach the simulation."""
        try:
            func(*args)
        except Exception:
            logger.warning("%s failed", getattr(func, "__qualname__", func), exc_info=True)

    def initialize(self) -> None:
        """Reset to the title screen with a fresh rocket and sky."""
        self._log_event("initialize")
        self.state = GameState(
            mode=Mode.TITLE,
            rocket=Rocket.launch(self.attractor),
            stars=make_stars(self.rng),
        )
        logger.info("Initialized; mode=%s", self.state.mode.value)

    def start_game(self) -> None:
        s = self.state
        s.mode = Mode.PLAYING
        s.ticks = 0
        self._log_event("start_game")
        self._notify(self.audio.play_one_shot, A.START)
        self._notify(self.audio.rewind)
        self._notify(self.audio.play_loop)
        logger.info("Game started")

    def enter_game_over(self) -> bool:
        """Switch to game over; returns ``False`` if already there."""
        s = self.state
        if s.mode is Mode.GAME_OVER:
            return False
        s.mode = Mode.GAME_OVER
        self._notify(self.audio.play_one_shot, A.GAME_OVER)
        self._log_event("game_over", ticks=s.ticks, score=s.score)
        logger.info("Game over after %d ticks with score %d", s.ticks, s.score)
        return True

    def return_to_title(self) -> None:
        self.initialize()
        self._notify(self.audio.pause)

    # ------------------------------------------------------------------
    def tick(self) -> None:
        """Advance the game by one fixed step."""
        if hasattr(self.input, "update"):
            self.input.update()
        pressed = self.input.just_pressed()
        released = self.input.just_released()

        s = self.state
        s.ticks += 1

        if s.mode is Mode.TITLE:
            if pressed:
                self.start_game()
        elif s.mode is Mode.PLAYING:
            self._tick_playing(pressed, released)
        elif s.mode is Mode.GAME_OVER:
            if pressed:
                self.return_to_title()

    def _tick_playing(self, pressed: bool, released: bool) -> None:
        s = self.state

        if s.ticks % C.TELEMETRY_INTERVAL_TICKS == 0:
            self._log_event("playing", ticks=s.ticks, score=s.score)

        if pressed:
            s.thrust = True
        if released:
            s.thrust = False

        self.spawner.maybe_spawn(s.ticks, s.meteoroids)

        self.gravity.apply(s.rocket, s.meteoroids)
        if s.thrust:
            apply_thrust(s.rocket)
        integrate(s.rocket, s.meteoroids)

        if not in_bounds(s.rocket.pos, inclusive=True):
            s.rocket = Rocket.launch(self.attractor)
            self._notify(self.audio.play_one_shot, A.ROCKET_PLACED)
            logger.debug("Rocket left the screen; relaunched")
        s.meteoroids = evict_out_of_bounds(s.meteoroids)

        self._apply_collisions(self.collisions.resolve(s.rocket, s.meteoroids))

        for e in s.effects:
            e.ticks += 1
        s.effects = [e for e in s.effects if not e.expired]

    def _apply_collisions(self, report: CollisionReport) -> None:
        s = self.state
        s.rocket = report.rocket
        s.meteoroids = report.meteoroids
        for hit in report.hits:
            s.score += hit.plus
            s.effects.append(hit.effect)
            logger.debug("Meteoroid hit at (%.1f, %.1f) for +%d",
                         hit.meteoroid.pos[0], hit.meteoroid.pos[1], hit.plus)
            self._notify(self.audio.play_one_shot, A.HIT)
        if report.game_over:
            self.enter_game_over()


__all__ = ["Mode", "GameState", "GameSnapshot", "GameController"]
