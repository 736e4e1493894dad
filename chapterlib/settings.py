"""Centralized settings resolution for Chapter Scanner."""

import logging
import math
import os
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_FFPROBE = "ffprobe"
DEFAULT_PROBE_TIMEOUT = 30.0
MAX_PROBE_TIMEOUT = 24 * 60 * 60.0


def get_project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


def get_config_path() -> Path:
    """Return the config.toml location.

    Checks CHAPTERSCAN_CONFIG env var first, falls back to
    PROJECT_ROOT / "config" / "config.toml".
    """
    env_path = os.getenv("CHAPTERSCAN_CONFIG", "")
    if env_path:
        return Path(env_path)
    return PROJECT_ROOT / "config" / "config.toml"


def load_config(path: Optional[Path] = None) -> dict:
    """Load config.toml. Returns an empty dict if the file doesn't exist."""
    config_path = Path(path) if path else get_config_path()
    if not config_path.exists():
        return {}
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def get_ffprobe_bin(config: Optional[dict] = None) -> str:
    """Return the ffprobe executable to invoke.

    Environment variable overrides always win, then [probe] binary from
    config.toml, then plain "ffprobe" resolved through PATH.
    """
    env_val = os.getenv("CHAPTERSCAN_FFPROBE", "")
    if env_val:
        return env_val
    if config is None:
        config = load_config()
    return config.get("probe", {}).get("binary") or DEFAULT_FFPROBE


def _parse_timeout(raw, source: str) -> Optional[float]:
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid probe timeout %r from %s, using %.0fs",
                       raw, source, DEFAULT_PROBE_TIMEOUT)
        return DEFAULT_PROBE_TIMEOUT
    if not math.isfinite(seconds) or not 0 <= seconds <= MAX_PROBE_TIMEOUT:
        logger.warning("Ignoring invalid probe timeout %r from %s, using %.0fs",
                       raw, source, DEFAULT_PROBE_TIMEOUT)
        return DEFAULT_PROBE_TIMEOUT
    # 0 means wait forever
    return seconds or None


def get_probe_timeout(config: Optional[dict] = None) -> Optional[float]:
    """Return the probe timeout in seconds, or None for an unbounded wait.

    Precedence: CHAPTERSCAN_PROBE_TIMEOUT env var, [probe] timeout_seconds
    from config.toml, then DEFAULT_PROBE_TIMEOUT.
    """
    env_val = os.getenv("CHAPTERSCAN_PROBE_TIMEOUT", "")
    if env_val:
        return _parse_timeout(env_val, "CHAPTERSCAN_PROBE_TIMEOUT")
    if config is None:
        config = load_config()
    configured = config.get("probe", {}).get("timeout_seconds")
    if configured is None:
        return DEFAULT_PROBE_TIMEOUT
    return _parse_timeout(configured, "config.toml")
