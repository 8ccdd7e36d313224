"""Unit tests for the line segmenter.

WHY: The segmenter is the heart of the tool. Every rule (duration cap,
length ceiling, punctuation preference, overflow fallback, final flush) and
their precedence is pinned down here, plus the whole-output properties that
must hold for any input.

HOW: Word streams are built with conftest.make_words() so timing is easy to
reason about. Expected lines are spelled out for small cases; a longer
mixed transcript is checked against the general properties.

RULES:
- All tests use the standard limits (25 / 10 / 10.0) unless stated.
"""

import pytest

from conftest import make_words
from whisper_srt.core.ir import Word
from whisper_srt.core.segmenter import Decision, LineBuffer, decide, segment_words
from whisper_srt.core.text import unit_length

LONG_TEXT = (
    "大家好，欢迎来到今天的节目。我们今天要聊的话题是人工智能在日常生活中的应用，"
    "以及它对未来工作的影响。首先，让我们回顾一下过去十年的发展！"
    "这是一段没有任何标点符号而且非常非常长的句子用来测试长度上限是否生效"
)


def _buffer(words):
    line = LineBuffer()
    for word in words:
        line.append(word)
    return line


class TestDecide:
    """Each rule in isolation, and the precedence between them."""

    def test_empty_line_appends(self, standard_config):
        word = Word("好", 0.0, 0.5)
        assert decide(LineBuffer(), word, standard_config) is Decision.APPEND

    def test_duration_cap_closes_before(self, standard_config):
        line = _buffer([Word("一", 0.0, 1.0)])
        word = Word("二", 9.5, 10.5)
        assert decide(line, word, standard_config) is Decision.CLOSE_BEFORE_APPEND

    def test_exactly_ten_seconds_is_allowed(self, standard_config):
        line = _buffer([Word("一", 0.0, 1.0)])
        word = Word("二", 9.0, 10.0)
        assert decide(line, word, standard_config) is Decision.APPEND

    def test_ceiling_closes_before(self, standard_config):
        line = _buffer(make_words(list("一" * 25)))
        word = Word("二", 7.0, 7.2)
        assert decide(line, word, standard_config) is Decision.CLOSE_BEFORE_APPEND

    def test_ceiling_beats_punctuation(self, standard_config):
        line = _buffer(make_words(list("一" * 25)))
        word = Word("。", 7.0, 7.2)
        assert decide(line, word, standard_config) is Decision.CLOSE_BEFORE_APPEND

    def test_duration_beats_punctuation(self, standard_config):
        line = _buffer(make_words(list("一" * 12)))
        word = Word("。", 10.0, 10.5)
        assert decide(line, word, standard_config) is Decision.CLOSE_BEFORE_APPEND

    def test_punctuation_inside_band_closes_after(self, standard_config):
        line = _buffer(make_words(list("一" * 9)))
        word = Word("。", 3.0, 3.2)
        assert decide(line, word, standard_config) is Decision.APPEND_THEN_CLOSE

    def test_punctuation_below_band_appends(self, standard_config):
        line = _buffer(make_words(list("一" * 3)))
        word = Word("，", 1.0, 1.1)
        assert decide(line, word, standard_config) is Decision.APPEND

    def test_punctuation_that_overflows_band_appends(self, standard_config):
        line = _buffer(make_words(["abcdefghijklmnopqrst"]))
        word = Word("uvwxyz.", 1.0, 1.5)
        assert decide(line, word, standard_config) is Decision.APPEND

    def test_decide_does_not_modify_buffer(self, standard_config):
        line = _buffer(make_words(list("一二三")))
        decide(line, Word("四", 1.0, 1.2), standard_config)
        assert line.units == 3
        assert len(line.words) == 3


class TestSegmentWords:

    def test_empty_stream_gives_no_lines(self, standard_config):
        assert segment_words([], standard_config) == []

    def test_short_sentence_flushed_below_band(self, standard_config):
        words = make_words(["你", "好", "世", "界", "。"], step=0.64)
        lines = segment_words(words, standard_config)
        assert len(lines) == 1
        assert lines[0].text == "你好世界。"
        assert lines[0].index == 1
        assert lines[0].start == 0.0
        assert lines[0].end == pytest.approx(3.2)

    def test_breaks_after_punctuation_in_band(self, standard_config):
        words = make_words(list("今天天气很好我们去公园玩，然后回家。"), step=0.2)
        lines = segment_words(words, standard_config)
        assert [line.text for line in lines] == ["今天天气很好我们去公园玩，", "然后回家。"]
        assert lines[0].end == pytest.approx(2.6)
        assert lines[1].start == pytest.approx(2.6)

    def test_ceiling_splits_unpunctuated_text(self, standard_config):
        words = make_words(list("字" * 30), step=0.1)
        lines = segment_words(words, standard_config)
        assert [len(line.text) for line in lines] == [25, 5]

    def test_punctuation_after_full_line_starts_new_line(self, standard_config):
        words = make_words(list("字" * 25) + ["。"], step=0.1)
        lines = segment_words(words, standard_config)
        assert [line.text for line in lines] == ["字" * 25, "。"]

    def test_overflowing_word_is_not_split(self, standard_config):
        words = make_words(["aaaa"] * 6 + ["bbbbbbbb", "cc"], step=0.3)
        lines = segment_words(words, standard_config)
        assert lines[0].text == "aaaa aaaa aaaa aaaa aaaa aaaa bbbbbbbb"
        assert unit_length(lines[0].text) == 32
        assert lines[1].text == "cc"

    def test_duration_cap_closes_short_line(self, standard_config):
        words = make_words(list("一二三四五六七八九十"), step=1.5)
        lines = segment_words(words, standard_config)
        assert [line.text for line in lines] == ["一二三四五六", "七八九十"]
        assert lines[0].end == pytest.approx(9.0)
        assert lines[1].start == pytest.approx(9.0)
        assert lines[1].end == pytest.approx(15.0)

    def test_single_word_longer_than_cap(self, standard_config):
        words = [Word("长", 0.0, 12.5), Word("句", 12.5, 13.0)]
        lines = segment_words(words, standard_config)
        assert [line.text for line in lines] == ["长", "句"]
        assert lines[0].end == pytest.approx(12.5)

    def test_word_after_forced_close_can_close_its_own_line(self):
        config = {"max_line_units": 25, "min_line_units": 1, "max_line_duration": 10.0}
        words = [Word("一", 0.0, 1.0), Word("好。", 11.0, 11.5), Word("再", 12.0, 12.5)]
        lines = segment_words(words, config)
        assert [line.text for line in lines] == ["一", "好。", "再"]

    def test_latin_lines_joined_with_spaces(self, standard_config):
        texts = ["Hello", "world,", "this", "is", "a", "test."]
        lines = segment_words(make_words(texts), standard_config)
        assert [line.text for line in lines] == ["Hello world,", "this is a test."]

    def test_times_rounded_to_ten_ms(self, standard_config):
        words = [Word("你好", 1.234, 1.857), Word("。", 1.857, 2.003)]
        lines = segment_words(words, standard_config)
        assert lines[0].start == pytest.approx(1.23)
        assert lines[0].end == pytest.approx(2.0)

    def test_compact_limits(self):
        config = {"max_line_units": 16, "min_line_units": 10, "max_line_duration": 10.0}
        lines = segment_words(make_words(list("字" * 20), step=0.1), config)
        assert [len(line.text) for line in lines] == [16, 4]


class TestProperties:
    """Whole-output guarantees on a longer mixed transcript."""

    @pytest.fixture
    def words(self):
        words = make_words(list(LONG_TEXT), step=0.25)
        # A slow stretch so the duration cap also triggers.
        tail = make_words(["slow", "speech", "here"], start=words[-1].end, step=4.0)
        return words + tail

    @pytest.fixture
    def lines(self, words, standard_config):
        return segment_words(words, standard_config)

    def test_every_word_kept_in_order(self, words, lines):
        flattened = [word for line in lines for word in line.words]
        assert flattened == words

    def test_duration_bound(self, lines):
        for line in lines:
            if len(line.words) > 1:
                assert line.end - line.start <= 10.0 + 0.01

    def test_length_band_except_last(self, lines):
        for line, nxt in zip(lines, lines[1:]):
            units = unit_length(line.text)
            forced_by_duration = nxt.words[0].end - line.words[0].start > 10.0
            assert units <= 25
            assert units >= 10 or forced_by_duration

    def test_indices_contiguous(self, lines):
        assert [line.index for line in lines] == list(range(1, len(lines) + 1))

    def test_monotonic_timing(self, lines):
        for line in lines:
            assert line.start <= line.end
        for prev, nxt in zip(lines, lines[1:]):
            assert nxt.start >= prev.start

    def test_text_trimmed_single_line(self, lines):
        for line in lines:
            assert line.text
            assert line.text == line.text.strip()
            assert "\n" not in line.text
