"""Immutable records flowing through the conversion pipeline.

WHY: Parsing, flattening, segmentation and formatting are separate stages.
Frozen dataclasses give every stage the same well-typed contract and make
"no mutation after creation" a property of the types, not a convention.

HOW: Three dataclasses:
  Word   : one timed token from the recogniser
  Segment: a recogniser segment, only used as a source of words
  Line   : one re-segmented subtitle line (one SRT block)

RULES:
- All times are float seconds.
- Segment.start / end / text are informational; line timing is derived
  from the constituent words.
- Line.start / end are already rounded to 10 ms by the segmenter.
- Line.words keeps the constituent words so coverage can be checked.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Word:
    """A single timed token.

    Attributes:
        text: Token text as recognised (surrounding whitespace stripped).
        start: Start time in seconds.
        end: End time in seconds.
    """

    text: str
    start: float
    end: float


@dataclass(frozen=True)
class Segment:
    id: int
    start: float
    end: float
    text: str
    words: tuple[Word, ...] = ()


@dataclass(frozen=True)
class Line:
    """One output subtitle line.

    Attributes:
        index: 1-based sequence number, contiguous across the output.
        start: Start time in seconds, rounded to 10 ms.
        end: End time in seconds, rounded to 10 ms.
        text: Joined, trimmed line text without line breaks.
        words: The words that make up the line, in stream order.
    """

    index: int
    start: float
    end: float
    text: str
    words: tuple[Word, ...] = field(default=(), repr=False, compare=False)

    @property
    def duration(self) -> float:
        return self.end - self.start
