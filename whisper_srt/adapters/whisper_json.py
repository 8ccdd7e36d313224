"""Adapter: Whisper JSON transcript to IR segments.

WHY: Whisper (and whisper.cpp / faster-whisper exports) write a JSON object
with segments and per-word timestamps. The core works on immutable IR
records, so the raw JSON is validated once here and converted.

HOW: pydantic models describe the accepted shape. Extra keys (tokens,
avg_logprob, probability, ...) are ignored. Word text comes from "word",
with "text" accepted as an alias for other exporters.

RULES:
- Invalid UTF-8, invalid JSON and schema violations raise MalformedInput
  with the reason.
- "segments" is required; an empty list is a valid empty transcript.
- Word text is stripped of surrounding whitespace (Whisper prefixes Latin
  words with a space); the join rules re-insert spacing.
- Timing values are not checked here, that is the stream builder's job.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from whisper_srt.core.errors import MalformedInput
from whisper_srt.core.ir import Segment, Word


class WhisperWord(BaseModel):
    start: float
    end: float
    word: str = Field(validation_alias=AliasChoices("word", "text"))


class WhisperSegment(BaseModel):
    id: int = 0
    start: float = 0.0
    end: float = 0.0
    text: str = ""
    words: List[WhisperWord] = Field(default_factory=list)


class WhisperOutput(BaseModel):
    """Top-level Whisper transcript object."""

    text: str = ""
    segments: List[WhisperSegment]


def _to_segment(seg: WhisperSegment) -> Segment:
    return Segment(
        id=seg.id,
        start=seg.start,
        end=seg.end,
        text=seg.text,
        words=tuple(Word(text=w.word.strip(), start=w.start, end=w.end) for w in seg.words),
    )


def parse_transcript(data: Any) -> List[Segment]:
    """Validate decoded JSON data and convert it to IR segments.

    Raises:
        MalformedInput: If the data does not match the Whisper shape.
    """
    try:
        output = WhisperOutput.model_validate(data)
    except ValidationError as e:
        raise MalformedInput(_describe(e))
    return [_to_segment(seg) for seg in output.segments]


def loads_transcript(raw: Union[str, bytes]) -> List[Segment]:
    """Parse a JSON string into IR segments."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInput("invalid JSON: {}".format(e))
    return parse_transcript(data)


def load_transcript(path: Union[str, Path]) -> List[Segment]:
    """Read and parse a Whisper JSON file (UTF-8).

    Raises:
        MalformedInput: The file is not valid UTF-8, not JSON, or not
            Whisper-shaped.
        OSError: The file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except UnicodeDecodeError as e:
        raise MalformedInput("input is not valid UTF-8: {}".format(e))
    return loads_transcript(raw)


def _describe(error: ValidationError) -> str:
    """First validation problem as 'segments.0.words.2.start: Field required'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "transcript"
    extra = error.error_count() - 1
    message = "{}: {}".format(location, first["msg"])
    if extra:
        message += " (and {} more)".format(extra)
    return message
