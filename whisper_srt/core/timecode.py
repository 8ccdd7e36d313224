"""SRT timestamp rounding and formatting.

WHY: Subtitle times are shown at 10 ms precision. Rounding with binary
floats gives surprises (5.855 * 1000 is 5854.999...), so the rounding is
done on Decimal values built from the float's shortest repr.

HOW: Two half-up steps: seconds -> whole milliseconds, then milliseconds ->
nearest multiple of 10. seconds_to_srt_time() formats the result as
HH:MM:SS,mmm.

RULES:
- Negative or non-finite values raise InvalidTimestamp.
- The last digit of the formatted milliseconds is always 0.
- Hours are not wrapped; 100 hours format as "100:00:00,000".
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from whisper_srt.core.errors import InvalidTimestamp

_ONE = Decimal(1)


def check_seconds(seconds: float) -> float:
    """Return ``seconds`` as a float, or raise InvalidTimestamp."""
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        raise InvalidTimestamp("not a number: {!r}".format(seconds))
    if not math.isfinite(value):
        raise InvalidTimestamp("non-finite time value: {!r}".format(seconds))
    if value < 0:
        raise InvalidTimestamp("negative time value: {!r}".format(seconds))
    return value


def round_to_centis(seconds: float) -> int:
    """Round ``seconds`` to the nearest 10 ms, returned as integer milliseconds."""
    value = check_seconds(seconds)
    millis = (Decimal(repr(value)) * 1000).quantize(_ONE, rounding=ROUND_HALF_UP)
    centis = (millis / 10).quantize(_ONE, rounding=ROUND_HALF_UP)
    return int(centis) * 10


def round_seconds(seconds: float) -> float:
    """Round ``seconds`` to 10 ms precision, keeping float seconds."""
    return round_to_centis(seconds) / 1000


def seconds_to_srt_time(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    total_ms = round_to_centis(seconds)
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)
