"""Abstract base formatter and output container.

WHY: Every output format consumes the same list of re-segmented Lines but
produces different file content. This base class keeps the interface the
same so the CLI can work with any formatter generically.

RULES:
- Subclasses MUST implement ``name`` and ``format()``.
- ``format()`` returns a list; current formatters return one item.
- ``suffix`` includes the leading dot, e.g. ``".srt"``; the caller
  prepends the input file's stem.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from whisper_srt.core.ir import Line


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: Appended to the input stem, e.g. ``".srt"`` ->
                ``"talk.srt"``.
        content: File content (UTF-8 text).
        media_type: MIME type for the content.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip'."""

    @abstractmethod
    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        """Convert re-segmented lines into one or more output files."""
