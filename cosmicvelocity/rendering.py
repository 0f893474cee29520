"""Pygame drawing of a :class:`~cosmicvelocity.simulation.GameSnapshot`.

Nothing here mutates game state; the renderer only reads the snapshot it is
given each frame.
"""
import math

import pygame
import pygame.gfxdraw

from . import constants as C
from .bodies import Meteoroid
from .integrators import demo_meteoroids
from .simulation import GameSnapshot, Mode
from .utils import format_plus, format_score, orbit_to_display, ticks_to_display

TITLE_TEXT = "COSMIC VELOCITY"
CREDIT_TEXTS = ("CREATOR: NAOKI TSUJIO", "SOUND: SYNTHESIZED")


def trail_color(age: int, length: int = C.ORBIT_HISTORY_LENGTH):
    """Colour band for a trail sample ``age`` ticks old."""
    band = min(int(age * len(C.TRAIL_COLORS) / length), len(C.TRAIL_COLORS) - 1)
    return C.TRAIL_COLORS[band]


def trail_segments(meteoroid: Meteoroid):
    """Line segments for a meteoroid's trail, newest first.

    Every 10th sample is kept, thinned to every 30th where the path is nearly
    straight.
    """
    points = meteoroid.trail()
    segments = []
    if len(points) == 0:
        return segments
    prev = points[0]
    for i in range(1, len(points)):
        if i % C.TRAIL_SAMPLE_STEP != 0:
            continue
        o = points[i]
        op = points[i - 1]
        opp = points[max(i - C.TRAIL_STRAIGHT_STEP, 0)]
        bend = abs(math.atan2(o[1] - op[1], o[0] - op[0])
                   - math.atan2(o[1] - opp[1], o[0] - opp[0]))
        if bend < math.pi / 24 and i % C.TRAIL_STRAIGHT_STEP != 0:
            continue
        segments.append(((float(o[0]), float(o[1])),
                         (float(prev[0]), float(prev[1])),
                         trail_color(i)))
        prev = o
    return segments


class Renderer:
    """Draws frames onto ``surface`` (usually the display surface)."""

    def __init__(self, surface: pygame.Surface, debug_hud: bool = False):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.debug_hud = debug_hud
        self.large_font = pygame.font.Font(None, 48)
        self.medium_font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 20)
        self._demo = None

    # ------------------------------------------------------------------
    def draw(self, snap: GameSnapshot, diagnostics: dict = None) -> None:
        self.surface.fill(C.BLACK)
        self.draw_stars(snap)
        self.draw_attractor(snap)

        if snap.mode is Mode.TITLE:
            if self._demo is None:
                self._demo = demo_meteoroids(snap.attractor)
            for m in self._demo:
                self.draw_meteoroid(m)
            self.draw_rocket(snap.rocket, thrust=False)
            self.draw_title()
        else:
            for m in snap.meteoroids:
                self.draw_meteoroid(m)
            self.draw_rocket(snap.rocket, thrust=snap.thrust)
            for e in snap.effects:
                self.draw_effect(e)
            self.draw_score(snap.score)
            self.draw_clock(snap.ticks)
            if snap.mode is Mode.GAME_OVER:
                self.draw_game_over(snap.score)

        if self.debug_hud and diagnostics is not None:
            label = self.small_font.render(orbit_to_display(diagnostics), True, C.DEBUG_GRAY)
            self.surface.blit(label, (8, C.HEIGHT - 20))

    # ------------------------------------------------------------------
    def draw_stars(self, snap: GameSnapshot) -> None:
        for s in snap.stars:
            size = s.radius * 2
            if size <= 0:
                continue
            pygame.draw.rect(self.surface, C.WHITE,
                             pygame.Rect(int(s.x), int(s.y), max(1, int(size)), max(1, int(size))))

    def draw_attractor(self, snap: GameSnapshot) -> None:
        a = snap.attractor
        x, y, r = int(a.x), int(a.y), int(a.radius)
        pygame.gfxdraw.filled_circle(self.surface, x, y, r, C.OCEAN_BLUE)
        pygame.gfxdraw.aacircle(self.surface, x, y, r, C.OCEAN_BLUE)
        pygame.gfxdraw.filled_circle(self.surface, x - r // 3, y - r // 3, r // 3, C.LAND_GREEN)
        pygame.gfxdraw.filled_circle(self.surface, x + r // 3, y + r // 4, r // 4, C.LAND_GREEN)

    def draw_rocket(self, rocket, thrust: bool) -> None:
        theta = rocket.heading
        r = rocket.radius
        cx, cy = rocket.pos

        def point(dist, angle):
            return (cx + dist * math.cos(theta + angle), cy + dist * math.sin(theta + angle))

        body = [point(r, 0), point(r, 2.5), point(r * 0.5, math.pi), point(r, -2.5)]
        pygame.draw.polygon(self.surface, C.WHITE, body)
        if thrust:
            flame = [point(r * 0.6, math.pi - 0.5), point(r * 2, math.pi), point(r * 0.6, math.pi + 0.5)]
            pygame.draw.polygon(self.surface, C.RED, flame)

    def draw_meteoroid(self, m: Meteoroid) -> None:
        for start, end, color in trail_segments(m):
            pygame.draw.line(self.surface, color, start, end)
        x, y, r = int(m.pos[0]), int(m.pos[1]), int(m.radius)
        pygame.gfxdraw.filled_circle(self.surface, x, y, r, C.METEOROID_GRAY)
        spin = m.ticks / 180 * math.pi * 2
        hx = int(x + r * 0.4 * math.cos(spin))
        hy = int(y + r * 0.4 * math.sin(spin))
        pygame.gfxdraw.filled_circle(self.surface, hx, hy, max(1, r // 3), C.METEOROID_HIGHLIGHT)

    def draw_effect(self, e) -> None:
        for px, py in e.particle_positions():
            pygame.draw.rect(self.surface, C.METEOROID_GRAY, pygame.Rect(int(px) - 3, int(py) - 3, 6, 6))
        label = self.medium_font.render(format_plus(e.plus), True, C.SCORE_GOLD)
        self.surface.blit(label, (int(e.pos[0]), int(e.pos[1] - e.label_offset())))

    def draw_score(self, score: int) -> None:
        label = self.small_font.render(format_score(score), True, C.WHITE)
        self.surface.blit(label, (C.WIDTH - label.get_width() - 10, 8))

    def draw_clock(self, ticks: int) -> None:
        label = self.small_font.render(ticks_to_display(ticks), True, C.WHITE)
        self.surface.blit(label, (10, 8))

    def _blit_centered(self, font, text, y) -> None:
        label = font.render(text, True, C.WHITE)
        self.surface.blit(label, (C.WIDTH // 2 - label.get_width() // 2, y))

    def draw_title(self) -> None:
        self._blit_centered(self.large_font, TITLE_TEXT, 110)
        for i, text in enumerate(CREDIT_TEXTS):
            self._blit_centered(self.small_font, text, 400 + i * 22)

    def draw_game_over(self, score: int) -> None:
        self._blit_centered(self.large_font, "GAME OVER", 180)
        self._blit_centered(self.medium_font, "YOUR SCORE IS", 315)
        self._blit_centered(self.medium_font, f"{score}!", 345)


__all__ = ["Renderer", "trail_segments", "trail_color"]
