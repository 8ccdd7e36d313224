"""Conversion core: IR types, word stream, segmentation, timestamps."""

from whisper_srt.core.errors import InvalidTimestamp, MalformedInput, TranscriptError
from whisper_srt.core.ir import Line, Segment, Word

__all__ = [
    "InvalidTimestamp",
    "Line",
    "MalformedInput",
    "Segment",
    "TranscriptError",
    "Word",
]
