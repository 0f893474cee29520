"""Window bootstrap and the 60 Hz frame loop."""
import argparse
import logging
import sys

import numpy as np
import pygame

from . import constants as C
from .audio import NullAudio, PygameAudio
from .config import RuntimeConfig
from .controls import PygameInput
from .rendering import Renderer
from .simulation import GameController
from .telemetry import HttpTelemetry, NullTelemetry

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root logger once."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.WARNING),
            format="%(asctime)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )
    return logging.getLogger("cosmicvelocity")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cosmic Velocity")
    parser.add_argument("--seed", type=int, help="Random seed (overrides GAME_RAND_SEED)")
    parser.add_argument("--player-id", help="Player identity (overrides GAME_PLAYER_ID)")
    parser.add_argument("--telemetry-url", help="Enable telemetry and post events here")
    parser.add_argument("--mute", action="store_true", help="Disable audio")
    parser.add_argument("--log-level", help="Python logging level")
    parser.add_argument("--debug-hud", action="store_true", help="Show rocket orbit elements")
    parser.add_argument("--max-frames", type=int, help="Quit after this many frames")
    return parser


def config_from_args(args, environ=None) -> RuntimeConfig:
    cfg = RuntimeConfig.from_env(environ)
    cfg = cfg.with_overrides(
        seed=args.seed,
        player_id=args.player_id,
        log_level=args.log_level,
        telemetry_url=args.telemetry_url,
    )
    if args.telemetry_url:
        cfg = cfg.with_overrides(telemetry_enabled=True)
    if args.mute:
        cfg = cfg.with_overrides(mute=True)
    if args.debug_hud:
        cfg = cfg.with_overrides(debug_hud=True)
    return cfg


def build_telemetry(cfg: RuntimeConfig):
    if cfg.telemetry_active:
        return HttpTelemetry(cfg.telemetry_url, timeout=cfg.telemetry_timeout)
    return NullTelemetry()


def build_audio(cfg: RuntimeConfig):
    if cfg.mute:
        return NullAudio()
    try:
        return PygameAudio()
    except pygame.error:
        logger.warning("Audio unavailable; continuing muted", exc_info=True)
        return NullAudio()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = config_from_args(args)
    setup_logging(cfg.log_level)

    pygame.init()
    screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
    pygame.display.set_caption(C.WINDOW_TITLE)
    clock = pygame.time.Clock()

    controls = PygameInput()
    telemetry = build_telemetry(cfg)
    game = GameController(
        controls,
        telemetry=telemetry,
        audio=build_audio(cfg),
        rng=np.random.default_rng(cfg.seed),
        player_id=cfg.player_id,
        play_id=cfg.play_id,
    )
    renderer = Renderer(screen, debug_hud=cfg.debug_hud)
    logger.info("Starting %s for player %s", C.GAME_NAME, cfg.player_id)

    frames = 0
    running = True
    while running:
        clock.tick(C.FPS)
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
        controls.feed(events)

        game.tick()
        diagnostics = game.orbit_diagnostics() if cfg.debug_hud else None
        renderer.draw(game.snapshot(), diagnostics)
        pygame.display.flip()

        frames += 1
        if args.max_frames is not None and frames >= args.max_frames:
            running = False

    if isinstance(telemetry, HttpTelemetry):
        telemetry.flush(timeout=1.0)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
