"""SubRip (SRT) formatter.

RULES:
- Block layout: index, "start --> end", text, blank line.
- Times come from Line.start / Line.end via seconds_to_srt_time().
- No lines -> empty string (zero-byte file).
"""

from __future__ import annotations

from typing import List, Sequence

from whisper_srt.core.ir import Line
from whisper_srt.core.timecode import seconds_to_srt_time
from whisper_srt.formatters.base import BaseFormatter, FormatterOutput


def format_block(line: Line) -> str:
    """Render one SRT block, including its trailing blank line."""
    return "{}\n{} --> {}\n{}\n\n".format(
        line.index,
        seconds_to_srt_time(line.start),
        seconds_to_srt_time(line.end),
        line.text,
    )


def generate_srt(lines: Sequence[Line]) -> str:
    return "".join(format_block(line) for line in lines)


class SRTFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "SubRip"

    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".srt",
                content=generate_srt(lines),
                media_type="application/x-subrip",
            )
        ]
