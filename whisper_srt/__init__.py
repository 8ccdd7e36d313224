"""whisper-srt: re-segment word-timestamped Whisper transcripts into SRT.

WHY: Whisper segments are speech regions, often far too long (or too short)
to read as subtitles. This package regroups the per-word timestamps into
subtitle lines that stay inside a length band and a hard duration cap,
preferring punctuation as the break point, for CJK and Latin text alike.

HOW: Single sequential pipeline:
  adapters.whisper_json : JSON -> IR segments (pydantic validation)
  core.stream           : segments -> flat word stream
  core.segmenter        : word stream -> Lines
  formatters            : Lines -> SRT / JSON text

RULES:
- convert() and format_srt() are the library entry points; the CLI and the
  tests go through them.
- Limits come from a preset (presets.py) plus overrides (config.py); no
  global mutable state.
- Bad input raises MalformedInput / InvalidTimestamp; empty input is not an
  error and yields no lines.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from whisper_srt.config import resolve_config
from whisper_srt.core.errors import InvalidTimestamp, MalformedInput, TranscriptError
from whisper_srt.core.ir import Line, Segment, Word
from whisper_srt.core.segmenter import segment_words
from whisper_srt.core.stream import build_word_stream
from whisper_srt.formatters.srt import generate_srt

__version__ = "0.1.0"

__all__ = [
    "convert",
    "format_srt",
    "InvalidTimestamp",
    "Line",
    "MalformedInput",
    "Segment",
    "TranscriptError",
    "Word",
]


def convert(
    segments: Iterable[Segment],
    preset: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> List[Line]:
    """Re-segment transcript segments into subtitle lines.

    Args:
        segments: IR segments in source order.
        preset: Preset name; defaults to the configured preset.
        config: Explicit limit overrides (see presets.py for the keys).

    Returns:
        Lines with contiguous 1-based indices; [] for an empty transcript.

    Raises:
        ValueError: Unknown preset or invalid limits.
        MalformedInput: Structurally inconsistent transcript.
        InvalidTimestamp: Negative or non-finite time values.
    """
    cfg = resolve_config(preset, config)
    words = build_word_stream(segments)
    return segment_words(words, cfg)


def format_srt(
    segments: Iterable[Segment],
    preset: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """Re-segment and render as SRT text ("" for an empty transcript)."""
    return generate_srt(convert(segments, preset=preset, config=config))
