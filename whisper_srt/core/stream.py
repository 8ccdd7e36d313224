"""Word Stream Builder: flatten segments into one ordered word sequence.

WHY: The recogniser's segments are speech regions, not subtitle lines. Line
boundaries are decided from the words alone, so segment boundaries are
dropped here and every word is validated once, before segmentation.

RULES:
- Words keep source order; nothing is deduplicated, reordered or gap-filled.
- A segment with non-empty text but no words raises MalformedInput.
- A segment with neither text nor words contributes nothing.
- A word whose text is empty or only whitespace raises MalformedInput, so
  no line can end up without text.
- Negative / non-finite times raise InvalidTimestamp.
- end < start, or a start earlier than the previous word's start, raises
  MalformedInput. Upstream timing is never corrected.
"""

from __future__ import annotations

import logging
from typing import Iterable

from whisper_srt.core.errors import MalformedInput
from whisper_srt.core.ir import Segment, Word
from whisper_srt.core.timecode import check_seconds

logger = logging.getLogger(__name__)


def build_word_stream(segments: Iterable[Segment]) -> list[Word]:
    """Concatenate every segment's words, validating timing on the way.

    Args:
        segments: Segments in source order.

    Returns:
        Flat list of Word objects, in source order.

    Raises:
        MalformedInput: Text without words, or inconsistent word timing.
        InvalidTimestamp: Negative or non-finite word times.
    """
    words: list[Word] = []
    previous_start = 0.0

    for segment in segments:
        if not segment.words:
            if segment.text.strip():
                raise MalformedInput(
                    "segment {} has text {!r} but no words".format(
                        segment.id, segment.text.strip()
                    )
                )
            logger.debug("Skipping empty segment %s", segment.id)
            continue

        for word in segment.words:
            if not word.text.strip():
                raise MalformedInput(
                    "word at {} in segment {} has no text".format(word.start, segment.id)
                )
            start = check_seconds(word.start)
            end = check_seconds(word.end)
            if end < start:
                raise MalformedInput(
                    "word {!r} in segment {} ends before it starts ({} < {})".format(
                        word.text, segment.id, end, start
                    )
                )
            if start < previous_start:
                raise MalformedInput(
                    "word {!r} in segment {} starts at {} before the previous word ({})".format(
                        word.text, segment.id, start, previous_start
                    )
                )
            previous_start = start
            words.append(word)

    return words
