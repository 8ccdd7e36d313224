"""Character classification and joining rules for subtitle text.

WHY: Line length is measured in "units" and lines are joined differently
for CJK and Latin text. Keeping these rules in one place lets the segmenter
stay purely about decisions.

RULES:
- One unit per visible character: whitespace and combining marks are free,
  each CJK character and each Latin letter counts 1.
- A word is punctuation-terminated if its LAST character is in PAUSE_PUNCTUATION.
- No space is inserted between two tokens when either side of the seam is
  CJK; a single space separates Latin tokens.
- No space before a token that starts with halfwidth punctuation ("word ,"
  never happens).
"""

import unicodedata
from typing import Iterable

HALFWIDTH_PUNCTUATION = frozenset(".,!?;:")
FULLWIDTH_PUNCTUATION = frozenset("。，！？；：、")

# Terminal and pausing marks that make a preferred break point.
PAUSE_PUNCTUATION = HALFWIDTH_PUNCTUATION | FULLWIDTH_PUNCTUATION

# Code point ranges treated as CJK (scripts, punctuation, fullwidth forms).
_CJK_RANGES = (
    (0x1100, 0x11FF),    # Hangul Jamo
    (0x2E80, 0x2FDF),    # CJK radicals
    (0x3000, 0x303F),    # CJK symbols and punctuation
    (0x3040, 0x30FF),    # Hiragana, Katakana
    (0x3100, 0x31FF),    # Bopomofo, Hangul compatibility, Katakana ext
    (0x3400, 0x4DBF),    # CJK ext A
    (0x4E00, 0x9FFF),    # CJK unified ideographs
    (0xAC00, 0xD7AF),    # Hangul syllables
    (0xF900, 0xFAFF),    # CJK compatibility ideographs
    (0xFE30, 0xFE4F),    # CJK compatibility forms
    (0xFF00, 0xFFEF),    # Halfwidth and fullwidth forms
    (0x20000, 0x2FA1F),  # CJK ext B-F, compatibility supplement
)


def is_cjk(ch: str) -> bool:
    """True if the single character ``ch`` belongs to a CJK script or CJK punctuation."""
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in _CJK_RANGES)


def unit_length(text: str) -> int:
    """Count the length units of ``text``."""
    return sum(
        1 for ch in text
        if not ch.isspace() and not unicodedata.combining(ch)
    )


def ends_with_pause(text: str) -> bool:
    text = text.rstrip()
    return bool(text) and text[-1] in PAUSE_PUNCTUATION


def _needs_space(left: str, right: str) -> bool:
    if is_cjk(left[-1]) or is_cjk(right[0]):
        return False
    if right[0] in HALFWIDTH_PUNCTUATION:
        return False
    return True


def join_words(texts: Iterable[str]) -> str:
    """Join token texts into one line of subtitle text.

    Empty tokens are skipped. The result is trimmed and has no embedded
    line breaks (internal whitespace runs collapse to a single space).
    """
    out = ""
    for raw in texts:
        token = " ".join(raw.split())
        if not token:
            continue
        if out and _needs_space(out, token):
            out += " "
        out += token
    return out.strip()
