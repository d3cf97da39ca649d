"""Unit tests for byte-buffer match-and-replace"""

import pytest

from src.ukstemmer import InvalidEncodingError, try_replace
from src.ukstemmer.matcher import decode, encode, find_span, replace_span
from src.ukstemmer.patterns import DOUBLE_N, NOUN, REFLEXIVE, TRAILING_I


def utf8(text: str) -> bytes:
    return text.encode("utf-8")


class TestReplaceSpan:
    """Raw byte splicing"""

    def test_replace_middle(self):
        assert replace_span(b"012345678", b"_", 1, 4) == b"0_45678"

    def test_truncate_suffix(self):
        assert replace_span(b"012345678", b"", 6, 9) == b"012345"

    def test_empty_span_inserts(self):
        assert replace_span(b"abc", b"X", 3, 3) == b"abcX"


class TestFindSpan:
    """Match boundaries are byte offsets on character boundaries"""

    def test_cyrillic_offsets(self):
        # "чкається" is 8 two-byte characters, "ся" the last two
        assert find_span(utf8("чкається"), REFLEXIVE) == (12, 16)

    def test_mixed_width_offsets(self):
        assert find_span(utf8("abcи"), TRAILING_I) == (3, 5)

    def test_no_match(self):
        assert find_span(utf8("жк"), NOUN) is None


class TestTryReplace:
    """Replacement result and changed flag"""

    def test_strip_suffix(self):
        result = try_replace(utf8("чкається"), REFLEXIVE)
        assert result.buffer == utf8("чкаєть")
        assert result.changed is True

    def test_no_match_returns_same_buffer(self):
        buffer = utf8("жк")
        result = try_replace(buffer, NOUN)
        assert result.buffer is buffer
        assert result.changed is False

    def test_replacement(self):
        result = try_replace(utf8("ванн"), DOUBLE_N, utf8("н"))
        assert result.buffer == utf8("ван")
        assert result.changed is True

    def test_identical_replacement_is_not_a_change(self):
        """changed reflects content difference, not a successful match"""
        result = try_replace(utf8("ванн"), DOUBLE_N, utf8("нн"))
        assert result.buffer == utf8("ванн")
        assert result.changed is False

    def test_empty_buffer(self):
        result = try_replace(b"", NOUN)
        assert result.buffer == b""
        assert result.changed is False

    def test_invalid_utf8(self):
        with pytest.raises(InvalidEncodingError):
            try_replace(b"\xd1", NOUN)


class TestDecode:
    def test_valid(self):
        assert decode(utf8("київ")) == "київ"

    def test_split_character_raises(self):
        """Half of a two-byte character"""
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(utf8("ї")[:1])
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestEncode:
    def test_valid(self):
        assert encode("київ") == utf8("київ")

    def test_lone_surrogate_raises(self):
        with pytest.raises(InvalidEncodingError) as exc_info:
            encode("ї\ud800")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
