"""Runtime configuration: .env loading, preset resolution, log level.

WHY: Batch runs are driven from shell scripts, where environment variables
are the easiest knob. Line limits can be tuned per machine or per project
folder without touching code or command lines.

HOW: python-dotenv loads the .env file on import. resolve_config() starts
from a named preset, applies WHISPER_SRT_* overrides from the environment,
then explicit overrides, and validates the result.

RULES:
- Environment variables:
    WHISPER_SRT_PRESET             preset name (default "standard")
    WHISPER_SRT_MAX_LINE_UNITS     int override
    WHISPER_SRT_MIN_LINE_UNITS     int override
    WHISPER_SRT_MAX_LINE_DURATION  float override (seconds)
    WHISPER_SRT_LOG_LEVEL          logging level name (default "INFO")
- Environment is read at call time, so tests can monkeypatch it.
- Invalid names or values raise ValueError.
"""

from __future__ import annotations

import copy
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from whisper_srt.presets import PRESETS

# Load .env from the working directory (where the batch is run from)
load_dotenv()

DEFAULT_PRESET = "standard"

_ENV_OVERRIDES = {
    "WHISPER_SRT_MAX_LINE_UNITS": ("max_line_units", int),
    "WHISPER_SRT_MIN_LINE_UNITS": ("min_line_units", int),
    "WHISPER_SRT_MAX_LINE_DURATION": ("max_line_duration", float),
}


def preset_name() -> str:
    """Preset selected by WHISPER_SRT_PRESET, or the default."""
    return os.getenv("WHISPER_SRT_PRESET", DEFAULT_PRESET).strip().lower() or DEFAULT_PRESET


def log_level() -> int:
    """Numeric logging level from WHISPER_SRT_LOG_LEVEL.

    Raises ValueError for names the logging module does not know.
    """
    name = os.getenv("WHISPER_SRT_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError("Unknown log level '{}'".format(name))
    return level


def env_overrides() -> Dict[str, Any]:
    """Collect limit overrides from the environment."""
    overrides: Dict[str, Any] = {}
    for var, (key, cast) in _ENV_OVERRIDES.items():
        raw = os.getenv(var, "").strip()
        if not raw:
            continue
        try:
            overrides[key] = cast(raw)
        except ValueError:
            raise ValueError("{} must be a number, got '{}'".format(var, raw))
    return overrides


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Check that the limits in ``cfg`` are usable and return it."""
    for key in ("max_line_units", "min_line_units", "max_line_duration"):
        if key not in cfg:
            raise ValueError("Config is missing '{}'".format(key))
    if cfg["min_line_units"] < 0:
        raise ValueError("min_line_units must not be negative")
    if cfg["max_line_units"] < 1:
        raise ValueError("max_line_units must be at least 1")
    if cfg["min_line_units"] > cfg["max_line_units"]:
        raise ValueError(
            "min_line_units ({}) is larger than max_line_units ({})".format(
                cfg["min_line_units"], cfg["max_line_units"]
            )
        )
    if not cfg["max_line_duration"] > 0:
        raise ValueError("max_line_duration must be positive")
    return cfg


def resolve_config(
    preset: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the segmentation config for one run.

    Args:
        preset: Preset name; defaults to WHISPER_SRT_PRESET / "standard".
        overrides: Explicit values that win over preset and environment.

    Returns:
        A fresh, validated config dict (safe to mutate).

    Raises:
        ValueError: Unknown preset or invalid limits.
    """
    name = (preset or preset_name()).lower()
    if name not in PRESETS:
        raise ValueError(
            "Unknown preset '{}'. Available: {}".format(name, ", ".join(PRESETS))
        )
    cfg = copy.deepcopy(PRESETS[name])
    cfg.update(env_overrides())
    if overrides:
        cfg.update(overrides)
    return validate_config(cfg)
