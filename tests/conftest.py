"""Shared fixtures for the whisper_srt test suite.

WHY: Several test modules need the same small Whisper transcripts and the
same way of building timed word streams. Keeping them here avoids drift.

RULES:
- WHISPER_ZH / WHISPER_EN are shaped like real Whisper word-timestamp
  output (leading spaces on Latin words, extra keys ignored).
- WHISPER_SRT_* environment variables are cleared for every test so a
  developer's shell or .env cannot change expected results.
"""

from typing import Any, Dict, List

import pytest

from whisper_srt.core.ir import Word
from whisper_srt.presets import PRESET_STANDARD

WHISPER_ZH: Dict[str, Any] = {
    "text": "大家好，欢迎来到今天的节目。我们今天聊聊字幕。",
    "segments": [
        {
            "id": 0, "start": 0.0, "end": 2.6,
            "text": "大家好，欢迎来到今天的节目。",
            "words": [
                {"start": 0.0, "end": 0.4, "word": "大家", "probability": 0.98},
                {"start": 0.4, "end": 0.6, "word": "好", "probability": 0.97},
                {"start": 0.6, "end": 0.7, "word": "，", "probability": 0.99},
                {"start": 0.7, "end": 1.1, "word": "欢迎", "probability": 0.95},
                {"start": 1.1, "end": 1.5, "word": "来到", "probability": 0.96},
                {"start": 1.5, "end": 1.9, "word": "今天", "probability": 0.97},
                {"start": 1.9, "end": 2.0, "word": "的", "probability": 0.99},
                {"start": 2.0, "end": 2.5, "word": "节目", "probability": 0.94},
                {"start": 2.5, "end": 2.6, "word": "。", "probability": 0.99},
            ],
        },
        {
            "id": 1, "start": 3.0, "end": 4.6,
            "text": "我们今天聊聊字幕。",
            "words": [
                {"start": 3.0, "end": 3.3, "word": "我们"},
                {"start": 3.3, "end": 3.6, "word": "今天"},
                {"start": 3.6, "end": 4.0, "word": "聊聊"},
                {"start": 4.0, "end": 4.5, "word": "字幕"},
                {"start": 4.5, "end": 4.6, "word": "。"},
            ],
        },
    ],
    "language": "zh",
}

WHISPER_ZH_SRT = (
    "1\n"
    "00:00:00,000 --> 00:00:02,600\n"
    "大家好，欢迎来到今天的节目。\n"
    "\n"
    "2\n"
    "00:00:03,000 --> 00:00:04,600\n"
    "我们今天聊聊字幕。\n"
    "\n"
)

WHISPER_EN: Dict[str, Any] = {
    "text": " Hello world, this is a test.",
    "segments": [
        {
            "id": 0, "seek": 0, "start": 0.0, "end": 1.9,
            "text": " Hello world, this is a test.",
            "tokens": [50364, 2425, 1002],
            "words": [
                {"start": 0.0, "end": 0.4, "word": " Hello"},
                {"start": 0.4, "end": 0.8, "word": " world,"},
                {"start": 1.0, "end": 1.2, "word": " this"},
                {"start": 1.2, "end": 1.3, "word": " is"},
                {"start": 1.3, "end": 1.4, "word": " a"},
                {"start": 1.4, "end": 1.9, "word": " test."},
            ],
        },
    ],
}


def make_words(texts, start=0.0, step=0.25, length=None) -> List[Word]:
    """Words back to back: word i spans [start + i*step, start + i*step + length]."""
    length = step if length is None else length
    return [
        Word(text=text, start=start + i * step, end=start + i * step + length)
        for i, text in enumerate(texts)
    ]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "WHISPER_SRT_PRESET",
        "WHISPER_SRT_MAX_LINE_UNITS",
        "WHISPER_SRT_MIN_LINE_UNITS",
        "WHISPER_SRT_MAX_LINE_DURATION",
        "WHISPER_SRT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def standard_config():
    return dict(PRESET_STANDARD)


@pytest.fixture
def whisper_zh():
    return WHISPER_ZH


@pytest.fixture
def whisper_en():
    return WHISPER_EN
