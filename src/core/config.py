# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ASSETS_DIR = ROOT / "assets"

ENV_PREFIX = "MUSICAPP_"

@dataclass(frozen=True)
class AppConfig:
    assets_dir: str = str(DEFAULT_ASSETS_DIR)
    tick_interval_ms: int = 1000
    initial_volume: float = 0.5
    shuffle_avoid_repeat: bool = False   # exclude the current index when shuffling
    single_repeat_loops: bool = False    # seek to 0 at end of track in Single mode
    log_level: str = "INFO"

def _flag(raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")

def _number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using %r", ENV_PREFIX, key, raw, default)
        return default

def load_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """
    Reads MUSICAPP_* environment variables. Unset or invalid values keep
    the defaults above.
    """
    if env is None:
        env = os.environ

    defaults = AppConfig()

    tick_ms = _number(env, "TICK_MS", defaults.tick_interval_ms, int)
    if tick_ms <= 0:
        logger.warning("MUSICAPP_TICK_MS must be positive, using %d", defaults.tick_interval_ms)
        tick_ms = defaults.tick_interval_ms

    volume = _number(env, "VOLUME", defaults.initial_volume, float)
    volume = min(1.0, max(0.0, volume))

    return AppConfig(
        assets_dir=env.get(ENV_PREFIX + "ASSETS_DIR") or defaults.assets_dir,
        tick_interval_ms=tick_ms,
        initial_volume=volume,
        shuffle_avoid_repeat=_flag(env.get(ENV_PREFIX + "SHUFFLE_AVOID_REPEAT"), defaults.shuffle_avoid_repeat),
        single_repeat_loops=_flag(env.get(ENV_PREFIX + "SINGLE_REPEAT_LOOPS"), defaults.single_repeat_loops),
        log_level=(env.get(ENV_PREFIX + "LOG_LEVEL") or defaults.log_level).upper(),
    )
