"""Sound cues.

The game ships no sample files; cues are short synthesized chirps and the
background loop is a slow arpeggio, both built with numpy and handed to
``pygame.mixer``.
"""
import logging

import numpy as np
import pygame

from . import constants as C

logger = logging.getLogger(__name__)

START = "start"
HIT = "hit"
ROCKET_PLACED = "rocket_placed"
GAME_OVER = "game_over"

# clip id -> ((frequency Hz, seconds), ...)
CUES = {
    START: ((523.25, 0.08), (659.25, 0.08), (783.99, 0.12)),
    HIT: ((880.0, 0.05), (1318.5, 0.08)),
    ROCKET_PLACED: ((392.0, 0.06), (587.33, 0.1)),
    GAME_OVER: ((392.0, 0.15), (311.13, 0.15), (261.63, 0.3)),
}
BGM_NOTES = ((220.0, 0.4), (261.63, 0.4), (329.63, 0.4), (261.63, 0.4))


def synthesize_tone(freq: float, duration: float, sample_rate: int = C.SAMPLE_RATE,
                    volume: float = 0.3) -> np.ndarray:
    """Square-ish tone with a linear fade out, as int16 stereo samples."""
    n = max(1, int(sample_rate * duration))
    t = np.arange(n, dtype=np.float64) / sample_rate
    wave = np.sign(np.sin(2 * np.pi * freq * t)) * 0.6 + np.sin(2 * np.pi * freq * t) * 0.4
    envelope = np.linspace(1.0, 0.0, n)
    mono = (wave * envelope * volume * 32767).astype(np.int16)
    return np.column_stack((mono, mono))


def synthesize_sequence(notes, sample_rate: int = C.SAMPLE_RATE) -> np.ndarray:
    return np.concatenate([synthesize_tone(f, d, sample_rate) for f, d in notes])


class NullAudio:
    """Audio sink that does nothing."""

    def play_one_shot(self, clip_id: str) -> None:
        pass

    def play_loop(self) -> None:
        pass

    def pause(self) -> None:
        pass

    def rewind(self) -> None:
        pass


class PygameAudio:
    """Plays the cue table and background loop through ``pygame.mixer``."""

    def __init__(self, sample_rate: int = C.SAMPLE_RATE):
        if not pygame.mixer.get_init():
            pygame.mixer.init(frequency=sample_rate, size=-16, channels=2)
        self.sample_rate = sample_rate
        self.sounds = {
            clip: pygame.sndarray.make_sound(synthesize_sequence(notes, sample_rate))
            for clip, notes in CUES.items()
        }
        self.bgm = pygame.sndarray.make_sound(synthesize_sequence(BGM_NOTES, sample_rate))
        self.bgm.set_volume(0.4)
        self._bgm_channel = None
        self._paused = False

    def play_one_shot(self, clip_id: str) -> None:
        sound = self.sounds.get(clip_id)
        if sound is None:
            raise KeyError(f"Unknown sound cue '{clip_id}'")
        sound.play()

    def play_loop(self) -> None:
        if self._bgm_channel is not None and self._paused:
            self._bgm_channel.unpause()
        else:
            self._bgm_channel = self.bgm.play(loops=-1)
        self._paused = False

    def pause(self) -> None:
        if self._bgm_channel is not None:
            self._bgm_channel.pause()
            self._paused = True

    def rewind(self) -> None:
        if self._bgm_channel is not None:
            self._bgm_channel.stop()
        self._bgm_channel = None
        self._paused = False


__all__ = [
    "START",
    "HIT",
    "ROCKET_PLACED",
    "GAME_OVER",
    "CUES",
    "synthesize_tone",
    "synthesize_sequence",
    "NullAudio",
    "PygameAudio",
]
