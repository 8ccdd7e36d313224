"""Segmentation presets.

WHY: Different subtitle targets want different line limits. Presets are
plain dicts selected by name, so the segmenter takes its limits as an
explicit parameter and there is no global state.

RULES:
- Presets are frozen constants; resolve_config() in config.py hands out
  deep copies.
- max_line_units / min_line_units count length units (see core/text.py).
- max_line_duration is in seconds and is a hard cap.
"""

from typing import Dict

# Default: lines of 10-25 units, never longer than 10 seconds.
PRESET_STANDARD: Dict = {
    "max_line_units": 25,
    "min_line_units": 10,
    "max_line_duration": 10.0,
}

# Short CJK lines (16 characters), for narrow players and vertical video.
PRESET_COMPACT: Dict = {
    "max_line_units": 16,
    "min_line_units": 10,
    "max_line_duration": 10.0,
}

PRESETS: Dict[str, Dict] = {
    "standard": PRESET_STANDARD,
    "compact": PRESET_COMPACT,
}
