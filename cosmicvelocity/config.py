"""Bootstrap configuration read from the environment."""
from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class RuntimeConfig:
    seed: Optional[int] = None
    player_id: str = field(default_factory=_new_id)
    play_id: str = field(default_factory=_new_id)
    telemetry_enabled: bool = False
    telemetry_url: Optional[str] = None
    telemetry_timeout: float = 5.0
    log_level: str = "WARNING"
    mute: bool = False
    debug_hud: bool = False

    @property
    def telemetry_active(self) -> bool:
        return self.telemetry_enabled and bool(self.telemetry_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RuntimeConfig":
        """Build a config from ``GAME_*`` environment variables.

        Unparsable values fall back to the defaults; a bad seed means an
        unseeded generator.
        """
        env = os.environ if environ is None else environ

        seed = None
        raw_seed = env.get("GAME_RAND_SEED")
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                logger.warning("Ignoring non-integer GAME_RAND_SEED=%r", raw_seed)

        return cls(
            seed=seed,
            player_id=env.get("GAME_PLAYER_ID") or _new_id(),
            telemetry_enabled=env.get("GAME_LOGGING") == "1",
            telemetry_url=env.get("GAME_LOGGING_URL") or None,
            log_level=(env.get("GAME_LOG_LEVEL") or "WARNING").upper(),
        )

    def with_overrides(self, **changes) -> "RuntimeConfig":
        """Return a copy with the non-``None`` entries of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


__all__ = ["RuntimeConfig"]
