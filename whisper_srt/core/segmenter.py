"""Line Segmenter: greedy re-segmentation of a word stream into subtitle lines.

WHY: Recogniser segments are often too long or cut in odd places for
display. This module regroups the flat word stream into lines bounded by a
length ceiling and a hard duration cap, preferring to end at punctuation.

HOW: A single left-to-right pass. A LineBuffer holds the words of the line
being built. For each word, decide() evaluates the rules in priority order
and returns a tagged Decision:
  1. Duration cap: word.end - line start > max_line_duration
     -> CLOSE_BEFORE_APPEND
  2. Length ceiling: the line already has >= max_line_units
     -> CLOSE_BEFORE_APPEND
  3. Punctuation: with the word appended the line is inside
     [min_line_units, max_line_units] and the word ends with a pause mark
     -> APPEND_THEN_CLOSE
  4. Otherwise -> APPEND

RULES:
- Rules 1 and 2 only apply to a non-empty line; a word always fits an
  empty line, so a single word longer than the cap becomes its own line.
- The ceiling beats the punctuation preference.
- Words are never split; a line can only exceed max_line_units because its
  last word overflowed the remaining budget.
- Trailing words are flushed at stream end whatever their length.
- Line indices are 1-based and contiguous; times are rounded to 10 ms.
- config is an explicit dict parameter (see presets.py), no global state.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Iterable, List, Optional

from whisper_srt.core.ir import Line, Word
from whisper_srt.core.text import ends_with_pause, join_words, unit_length
from whisper_srt.core.timecode import round_seconds

logger = logging.getLogger(__name__)


class Decision(enum.Enum):
    """What to do with the next word."""

    APPEND = "append"
    CLOSE_BEFORE_APPEND = "close_before_append"
    APPEND_THEN_CLOSE = "append_then_close"


class LineBuffer:
    """The line currently being accumulated."""

    __slots__ = ("words", "units")

    def __init__(self) -> None:
        self.words: List[Word] = []
        self.units = 0

    def __bool__(self) -> bool:
        return bool(self.words)

    @property
    def start(self) -> Optional[float]:
        return self.words[0].start if self.words else None

    def append(self, word: Word) -> None:
        self.words.append(word)
        self.units += unit_length(word.text)

    def flush(self, index: int) -> Line:
        """Turn the buffered words into a Line and reset the buffer."""
        words = tuple(self.words)
        self.words = []
        self.units = 0
        return Line(
            index=index,
            start=round_seconds(words[0].start),
            end=round_seconds(words[-1].end),
            text=join_words(w.text for w in words),
            words=words,
        )


def decide(line: LineBuffer, word: Word, config: Dict[str, Any]) -> Decision:
    """Evaluate the segmentation rules for ``word`` against the current line.

    Pure function of its inputs; the buffer is not modified.
    """
    if line:
        if word.end - line.start > config["max_line_duration"]:
            return Decision.CLOSE_BEFORE_APPEND
        if line.units >= config["max_line_units"]:
            return Decision.CLOSE_BEFORE_APPEND

    units = line.units + unit_length(word.text)
    if (config["min_line_units"] <= units <= config["max_line_units"]
            and ends_with_pause(word.text)):
        return Decision.APPEND_THEN_CLOSE

    return Decision.APPEND


def segment_words(words: Iterable[Word], config: Dict[str, Any]) -> List[Line]:
    """Group a word stream into subtitle lines.

    Args:
        words: Flat word stream in source order (see stream.build_word_stream).
        config: Limits dict with max_line_units, min_line_units and
            max_line_duration.

    Returns:
        Lines with contiguous 1-based indices. Empty input gives [].
    """
    lines: List[Line] = []
    line = LineBuffer()

    for word in words:
        decision = decide(line, word, config)

        if decision is Decision.CLOSE_BEFORE_APPEND:
            logger.debug(
                "Closing line %d before %r (%d units, %.2fs span)",
                len(lines) + 1, word.text, line.units, word.end - line.start,
            )
            lines.append(line.flush(len(lines) + 1))
            # The word now opens a fresh line and may close it by itself.
            decision = decide(line, word, config)

        line.append(word)

        if decision is Decision.APPEND_THEN_CLOSE:
            lines.append(line.flush(len(lines) + 1))

    if line:
        lines.append(line.flush(len(lines) + 1))

    return lines
