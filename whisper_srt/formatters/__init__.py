"""Output formatter registry.

FORMATTERS maps CLI format keys to formatter *classes* (not instances).
Callers instantiate as needed: ``FORMATTERS["srt"]()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whisper_srt.formatters.lines_json import LinesJSONFormatter
from whisper_srt.formatters.srt import SRTFormatter

if TYPE_CHECKING:
    from whisper_srt.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "srt": SRTFormatter,
    "json": LinesJSONFormatter,
}
