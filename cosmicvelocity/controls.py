"""Input sources feeding press/release edges to the controller.

The controller calls ``update()`` once per tick and then reads
``just_pressed()`` and ``just_released()``.
"""
from collections import deque
from typing import Iterable, Tuple

import pygame

PRESS_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_UP)


class PygameInput:
    """Mouse, keyboard and touch events folded into one press/release edge pair."""

    def __init__(self, keys=PRESS_KEYS):
        self.keys = tuple(keys)
        self._pending_press = False
        self._pending_release = False
        self._pressed = False
        self._released = False

    def feed(self, events: Iterable[pygame.event.Event]) -> None:
        """Record events gathered by the frame loop since the last update."""
        for event in events:
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
                self._pending_press = True
            elif event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
                self._pending_release = True
            elif event.type == pygame.KEYDOWN and event.key in self.keys:
                self._pending_press = True
            elif event.type == pygame.KEYUP and event.key in self.keys:
                self._pending_release = True

    def update(self) -> None:
        self._pressed, self._pending_press = self._pending_press, False
        self._released, self._pending_release = self._pending_release, False

    def just_pressed(self) -> bool:
        return self._pressed

    def just_released(self) -> bool:
        return self._released


class ScriptedInput:
    """Replays ``(pressed, released)`` pairs, one per tick, then stays idle."""

    def __init__(self, frames: Iterable[Tuple[bool, bool]] = ()):
        self.frames = deque(frames)
        self._current = (False, False)

    def push(self, pressed: bool = False, released: bool = False) -> None:
        self.frames.append((pressed, released))

    def press(self) -> None:
        self.push(pressed=True)

    def release(self) -> None:
        self.push(released=True)

    def update(self) -> None:
        self._current = self.frames.popleft() if self.frames else (False, False)

    def just_pressed(self) -> bool:
        return self._current[0]

    def just_released(self) -> bool:
        return self._current[1]


__all__ = ["PygameInput", "ScriptedInput", "PRESS_KEYS"]
